"""Core type definitions."""

from typing import Literal

# Content families served under geo detail URLs
ContentFamily = Literal["blog", "services"]
