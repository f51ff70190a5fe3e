"""Geopages - AI-friendly projections of geo content pages."""
