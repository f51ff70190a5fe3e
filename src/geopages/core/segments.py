"""Geo/category/slug path segment resolution.

Detail URLs have the shape ``/{family}/{country}/{state}/{city?}/{category}/{slug}``
but the tokens arriving from the router are not reliably well-formed: the
city can be missing or repeat the state, a category fragment can land in the
city slot, and category can duplicate the slug. The functions here infer
what each token denotes from its shape alone, without any I/O.
"""

from dataclasses import dataclass

from geopages.core.types import ContentFamily

# A genuine city is almost always a single or two-word token, while SEO
# category slugs are usually multi-word and hyphenated. These thresholds are
# unverified heuristics; an unambiguous upstream route shape would make them
# unnecessary.
SWAP_CITY_MAX_HYPHENS = 1
SWAP_CATEGORY_MIN_HYPHENS = 2

# Sentinel category meaning "no specific category". Nulled only when it
# shows up in the city slot; elsewhere the upstream API needs the literal.
GENERAL_CATEGORY = "general"


@dataclass(frozen=True)
class ResolvedSegments:
    """Disambiguated city/category/slug triple."""

    city: str | None
    category: str | None
    slug: str


@dataclass(frozen=True)
class ResolvedIdentity:
    """Full geo identity of a detail page."""

    country: str
    state: str
    city: str | None
    category: str | None
    slug: str

    @property
    def city_or_state(self) -> str:
        """City segment for upstream lookups, falling back to the state."""
        return self.city or self.state

    def to_dict(self) -> dict[str, str | None]:
        """Convert to dictionary for JSON serialization."""
        return {
            "country": self.country,
            "state": self.state,
            "city": self.city,
            "category": self.category,
            "slug": self.slug,
        }


def count_hyphens(value: str | None) -> int:
    """Count literal ``-`` characters in a segment."""
    if not value:
        return 0
    return value.count("-")


def resolve_segments(
    city: str | None,
    category: str | None,
    slug: str,
) -> ResolvedSegments:
    """Disambiguate a raw city/category/slug triple.

    Rules, first match wins:

    1. category equals slug (case-insensitive): category is a duplicate of
       the slug and is dropped.
    2. city has at most SWAP_CITY_MAX_HYPHENS hyphens and category has at
       least SWAP_CATEGORY_MIN_HYPHENS: city is really the category and
       category is really the slug. A city of "general" becomes no category.
    3. Otherwise the triple is returned unchanged.

    Args:
        city: Raw city token, may be None
        category: Raw category token, may be None
        slug: Raw slug token

    Returns:
        ResolvedSegments triple
    """
    if category and slug and category.lower() == slug.lower():
        return ResolvedSegments(city=city, category=None, slug=slug)

    if (
        city
        and category
        and count_hyphens(city) <= SWAP_CITY_MAX_HYPHENS
        and count_hyphens(category) >= SWAP_CATEGORY_MIN_HYPHENS
    ):
        detected = None if city.lower() == GENERAL_CATEGORY else city
        return ResolvedSegments(city=None, category=detected, slug=category)

    return ResolvedSegments(city=city, category=category, slug=slug)


def resolve_city_segment(state: str | None, city: str | None) -> str | None:
    """Return the city token, or None when it is blank or repeats the state."""
    if not city or not city.strip():
        return None

    if city.lower() == (state or "").lower():
        return None

    return city


def split_path_segments(country: str, tail: str) -> ResolvedIdentity | None:
    """Split the path after the country into a resolved identity.

    The tail is ``state/category/slug`` or ``state/city/category/slug``.

    Args:
        country: Country segment
        tail: Remaining path, slash-separated

    Returns:
        ResolvedIdentity, or None if the tail is not a detail path
    """
    parts = [part for part in tail.split("/") if part]

    if len(parts) == 3:
        state, category, slug = parts
        city: str | None = None
    elif len(parts) == 4:
        state, city, category, slug = parts
    else:
        return None

    resolved = resolve_segments(resolve_city_segment(state, city), category, slug)
    return ResolvedIdentity(
        country=country,
        state=state,
        city=resolved.city,
        category=resolved.category,
        slug=resolved.slug,
    )


def format_segment_label(value: str | None) -> str:
    """Turn a hyphenated segment into a human label.

    >>> format_segment_label("web-design")
    'Web Design'
    """
    if not value:
        return ""
    return " ".join(word[:1].upper() + word[1:] for word in value.split("-") if word)


def build_detail_path(family: ContentFamily, identity: ResolvedIdentity) -> str:
    """Build the canonical detail path, omitting null segments."""
    segments = [
        family,
        identity.country,
        identity.state,
        identity.city,
        identity.category,
        identity.slug,
    ]
    return "/" + "/".join(segment for segment in segments if segment)
