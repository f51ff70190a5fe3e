"""Tests for path segment resolution."""

import pytest

from geopages.core.segments import (
    ResolvedIdentity,
    ResolvedSegments,
    build_detail_path,
    count_hyphens,
    format_segment_label,
    resolve_city_segment,
    resolve_segments,
    split_path_segments,
)


class TestCountHyphens:
    """Tests for count_hyphens()."""

    def test__none__returns_zero(self) -> None:
        assert count_hyphens(None) == 0

    def test__counts_literal_hyphens(self) -> None:
        assert count_hyphens("seo-web-design-agency") == 3

    def test__consecutive_hyphens__each_counted(self) -> None:
        assert count_hyphens("a--b") == 2


class TestResolveSegments:
    """Tests for resolve_segments()."""

    def test__category_equals_slug__drops_category(self) -> None:
        result = resolve_segments("austin", "best-web-design", "best-web-design")

        assert result == ResolvedSegments(
            city="austin", category=None, slug="best-web-design"
        )

    def test__category_equals_slug_ignoring_case__drops_category(self) -> None:
        result = resolve_segments("austin", "Best-Web-Design", "best-web-design")

        assert result.category is None
        assert result.slug == "best-web-design"

    def test__short_city_long_category__swaps(self) -> None:
        result = resolve_segments("texas", "seo-web-design-agency", "some-slug")

        assert result == ResolvedSegments(
            city=None, category="texas", slug="seo-web-design-agency"
        )

    def test__city_with_one_hyphen__still_swaps(self) -> None:
        result = resolve_segments("new-york", "best-seo-agencies", "ignored")

        assert result == ResolvedSegments(
            city=None, category="new-york", slug="best-seo-agencies"
        )

    def test__general_city__swaps_to_null_category(self) -> None:
        result = resolve_segments("General", "how-to-rank-locally", "ignored")

        assert result == ResolvedSegments(
            city=None, category=None, slug="how-to-rank-locally"
        )

    def test__general_category__is_kept(self) -> None:
        result = resolve_segments("austin", "general", "some-post")

        assert result.category == "general"

    def test__category_with_one_hyphen__no_swap(self) -> None:
        result = resolve_segments("austin", "web-design", "some-post")

        assert result == ResolvedSegments(
            city="austin", category="web-design", slug="some-post"
        )

    def test__city_with_two_hyphens__no_swap(self) -> None:
        result = resolve_segments("winston-salem-nc", "best-web-design", "post")

        assert result.city == "winston-salem-nc"
        assert result.category == "best-web-design"

    def test__missing_city__never_swaps(self) -> None:
        result = resolve_segments(None, "seo-web-design-agency", "some-slug")

        assert result == ResolvedSegments(
            city=None, category="seo-web-design-agency", slug="some-slug"
        )

    def test__collapse_takes_precedence_over_swap(self) -> None:
        result = resolve_segments("texas", "seo-web-design", "seo-web-design")

        assert result == ResolvedSegments(
            city="texas", category=None, slug="seo-web-design"
        )

    @pytest.mark.parametrize(
        ("city", "category", "slug"),
        [
            ("austin", "best-web-design", "best-web-design"),
            ("austin", "web-design", "some-post"),
            (None, "seo", "post"),
            ("austin", None, "post"),
        ],
    )
    def test__reapplied_to_output__is_stable(
        self, city: str | None, category: str | None, slug: str
    ) -> None:
        first = resolve_segments(city, category, slug)

        second = resolve_segments(first.city, first.category, first.slug)

        assert second == first


class TestResolveCitySegment:
    """Tests for resolve_city_segment()."""

    def test__blank_city__returns_none(self) -> None:
        assert resolve_city_segment("texas", "  ") is None
        assert resolve_city_segment("texas", None) is None

    def test__city_equals_state__returns_none(self) -> None:
        assert resolve_city_segment("Texas", "texas") is None

    def test__distinct_city__returned(self) -> None:
        assert resolve_city_segment("texas", "austin") == "austin"


class TestSplitPathSegments:
    """Tests for split_path_segments()."""

    def test__four_segments__includes_city(self) -> None:
        identity = split_path_segments("us", "texas/austin/web-design/guide")

        assert identity == ResolvedIdentity(
            country="us",
            state="texas",
            city="austin",
            category="web-design",
            slug="guide",
        )

    def test__three_segments__no_city(self) -> None:
        identity = split_path_segments("us", "texas/web-design/guide")

        assert identity is not None
        assert identity.city is None
        assert identity.city_or_state == "texas"

    def test__city_repeating_state__collapsed(self) -> None:
        identity = split_path_segments("us", "texas/texas/web-design/guide")

        assert identity is not None
        assert identity.city is None

    def test__misplaced_category__resolved(self) -> None:
        identity = split_path_segments("us", "texas/austin/best-seo-agencies/x")

        assert identity is not None
        assert identity.city is None
        assert identity.category == "austin"
        assert identity.slug == "best-seo-agencies"

    def test__wrong_segment_count__returns_none(self) -> None:
        assert split_path_segments("us", "texas/guide") is None
        assert split_path_segments("us", "a/b/c/d/e") is None


class TestFormatSegmentLabel:
    """Tests for format_segment_label()."""

    def test__hyphenated__title_cased(self) -> None:
        assert format_segment_label("web-design") == "Web Design"

    def test__none__empty_string(self) -> None:
        assert format_segment_label(None) == ""

    def test__empty_words__skipped(self) -> None:
        assert format_segment_label("-seo--tips-") == "Seo Tips"

    def test__rest_of_word__kept_as_is(self) -> None:
        assert format_segment_label("iOS-apps") == "IOS Apps"


class TestBuildDetailPath:
    """Tests for build_detail_path()."""

    def test__all_segments__joined(self) -> None:
        identity = ResolvedIdentity("us", "texas", "austin", "seo", "guide")

        assert build_detail_path("blog", identity) == "/blog/us/texas/austin/seo/guide"

    def test__null_segments__omitted(self) -> None:
        identity = ResolvedIdentity("us", "texas", None, None, "guide")

        assert build_detail_path("services", identity) == "/services/us/texas/guide"
