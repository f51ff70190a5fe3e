"""Breadcrumb trails for geo content pages."""

from dataclasses import dataclass

from geopages.core.segments import ResolvedIdentity
from geopages.core.types import ContentFamily


@dataclass(frozen=True)
class BreadcrumbItem:
    """Breadcrumb navigation item."""

    name: str
    url: str

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary for JSON serialization."""
        return {"name": self.name, "url": self.url}


def generate_breadcrumbs(
    family: ContentFamily, segments: list[str]
) -> list[BreadcrumbItem]:
    """Build breadcrumbs from up to four path segments after the family.

    The first segment is a country code and is upper-cased. The second and
    third are capitalized with hyphens as spaces. The fourth is a humanized
    slug whose URL spans every segment.

    Args:
        family: Content family the segments belong to
        segments: Path segments after the family prefix

    Returns:
        List of BreadcrumbItem, one per present segment (max four)
    """
    if not segments:
        return []

    base = f"/{family}"
    crumbs = [BreadcrumbItem(name=segments[0].upper(), url=f"{base}/{segments[0]}")]

    for depth in (1, 2):
        if len(segments) > depth and segments[depth]:
            crumbs.append(
                BreadcrumbItem(
                    name=_capitalize(segments[depth]),
                    url=f"{base}/{'/'.join(segments[: depth + 1])}",
                )
            )

    if len(segments) > 3 and segments[3]:
        crumbs.append(
            BreadcrumbItem(
                name=segments[3].replace("-", " "),
                url=f"{base}/{'/'.join(segments)}",
            )
        )

    return crumbs


def build_breadcrumbs(labels: list[str], base_url: str) -> list[BreadcrumbItem]:
    """Build breadcrumbs with cumulative lower-cased URLs."""
    url = base_url
    crumbs: list[BreadcrumbItem] = []
    for label in labels:
        url += f"/{label.lower()}"
        crumbs.append(BreadcrumbItem(name=label, url=url))
    return crumbs


def build_blog_trail(
    identity: ResolvedIdentity,
    *,
    title: str,
    url: str,
    site_url: str,
) -> list[BreadcrumbItem]:
    """Build the full trail of a blog detail page.

    Home, Blog, country, state, then city (only when distinct from the
    state), category (when known), and finally the page itself.
    """
    blog_url = f"{site_url}/blog"
    path = [identity.country, identity.state]
    crumbs = [
        BreadcrumbItem(name="Home", url=site_url),
        BreadcrumbItem(name="Blog", url=blog_url),
        BreadcrumbItem(name=identity.country, url=f"{blog_url}/{identity.country}"),
        BreadcrumbItem(name=identity.state, url=f"{blog_url}/{'/'.join(path)}"),
    ]

    if identity.city and identity.city != identity.state:
        path.append(identity.city)
        crumbs.append(
            BreadcrumbItem(name=identity.city, url=f"{blog_url}/{'/'.join(path)}")
        )

    if identity.category:
        path.append(identity.category)
        crumbs.append(
            BreadcrumbItem(name=identity.category, url=f"{blog_url}/{'/'.join(path)}")
        )

    crumbs.append(BreadcrumbItem(name=title, url=url))
    return crumbs


def _capitalize(value: str) -> str:
    return value[:1].upper() + value[1:].replace("-", " ")
