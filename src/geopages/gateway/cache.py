"""Cache policies declared by gateway calls.

Caching itself belongs to the hosting layer (CDN or reverse proxy). Each
gateway call only declares how long its response may be served and which
tags allow a targeted purge; handlers render that as response headers.
"""

from dataclasses import dataclass

HOUR = 60 * 60
DAY = 24 * HOUR

REVALIDATE_CATEGORIES = DAY
REVALIDATE_GEO = DAY
REVALIDATE_POST = HOUR
REVALIDATE_SERVICE_PAGE = DAY
REVALIDATE_AI_INDEX = 6 * HOUR
REVALIDATE_SEARCH = 60


@dataclass(frozen=True)
class CachePolicy:
    """Revalidation interval and invalidation tags for one upstream call.

    A ``revalidate`` of None means the response must always be fresh.
    """

    revalidate: int | None
    tags: tuple[str, ...] = ()

    @classmethod
    def fresh(cls, *tags: str) -> "CachePolicy":
        """Policy for data that must never be served from cache."""
        return cls(revalidate=None, tags=tags)

    @classmethod
    def timed(cls, seconds: int, *tags: str) -> "CachePolicy":
        return cls(revalidate=seconds, tags=tags)

    def to_headers(self) -> dict[str, str]:
        """Render the policy as HTTP response headers.

        Returns:
            Cache-Control header, plus Cache-Tag when tags are declared
        """
        if self.revalidate is None:
            headers = {"Cache-Control": "no-store"}
        else:
            headers = {
                "Cache-Control": (
                    f"public, s-maxage={self.revalidate}, "
                    f"stale-while-revalidate={self.revalidate}"
                ),
            }
        if self.tags:
            headers["Cache-Tag"] = ",".join(self.tags)
        return headers


NO_CACHE = CachePolicy.fresh()
