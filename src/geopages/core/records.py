"""Content records built from upstream payloads.

The upstream API is loosely typed: any field may be missing, null, or of an
unexpected type. Records here expose every optional field explicitly so that
projection fallback chains operate on known attributes only.
"""

from dataclasses import dataclass, field
from typing import Any, TypedDict


class FaqDict(TypedDict):
    """Dictionary representation of a FAQ entry."""

    question: str
    answer: str


@dataclass(frozen=True)
class FaqEntry:
    """Question/answer pair."""

    question: str
    answer: str

    def to_dict(self) -> FaqDict:
        """Convert to dictionary for JSON serialization."""
        return {"question": self.question, "answer": self.answer}


@dataclass(frozen=True)
class RankedItem:
    """Entry of a ranked list page."""

    name: str
    description: str | None = None
    url: str | None = None


@dataclass
class ContentRecord:
    """Normalized page, post, or story record."""

    title: str
    id: str | None = None
    excerpt: str | None = None
    snippet: str | None = None
    meta_description: str | None = None
    content_html: str | None = None
    keywords: list[str] = field(default_factory=list)
    faqs: list[FaqEntry] = field(default_factory=list)
    faq_source: list[Any] = field(default_factory=list)
    author_name: str | None = None
    published_at: str | None = None
    updated_at: str | None = None
    read_time_minutes: int | None = None
    image_url: str | None = None
    country: str | None = None
    state: str | None = None
    city: str | None = None
    category: str | None = None
    path: str | None = None
    url: str | None = None
    intent: str | None = None
    business_type: str | None = None
    page_role: str | None = None
    key_points: list[str] = field(default_factory=list)
    pricing: Any = None
    option1: str | None = None
    option2: str | None = None
    items: list[RankedItem] = field(default_factory=list)

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "ContentRecord":
        """Build a record from a raw upstream mapping.

        Unknown keys are ignored; wrongly typed values fall back to defaults.
        ``read_time_minutes`` falls back to the legacy ``reading_time`` key and
        ``faqs`` to the legacy ``faq`` key. The upstream FAQ list is kept
        unchanged in ``faq_source``; ``faqs`` holds its well-formed entries.

        Args:
            payload: Upstream record mapping

        Returns:
            ContentRecord instance
        """
        read_time = _as_int(payload.get("read_time_minutes"))
        if read_time is None:
            read_time = _as_int(payload.get("reading_time"))
        faq_source = _as_list(payload.get("faqs")) or _as_list(payload.get("faq"))

        return cls(
            title=_as_str(payload.get("title")) or "",
            id=_as_str(payload.get("id")),
            excerpt=_as_str(payload.get("excerpt")),
            snippet=_as_str(payload.get("snippet")),
            meta_description=_as_str(payload.get("meta_description")),
            content_html=_as_str(payload.get("content_html")),
            keywords=_as_str_list(payload.get("keywords")),
            faqs=_as_faqs(faq_source),
            faq_source=faq_source,
            author_name=_as_str(payload.get("author_name")),
            published_at=_as_str(payload.get("published_at")),
            updated_at=_as_str(payload.get("updated_at")),
            read_time_minutes=read_time,
            image_url=_as_str(payload.get("image_url")),
            country=_as_str(payload.get("country")),
            state=_as_str(payload.get("state")),
            city=_as_str(payload.get("city")),
            category=_as_str(payload.get("category")),
            path=_as_str(payload.get("path")),
            url=_as_str(payload.get("url")),
            intent=_as_str(payload.get("intent")),
            business_type=_as_str(payload.get("business_type")),
            page_role=_as_str(payload.get("page_role")),
            key_points=_as_str_list(payload.get("key_points")),
            pricing=payload.get("pricing"),
            option1=_as_str(payload.get("option1")),
            option2=_as_str(payload.get("option2")),
            items=_as_ranked_items(payload.get("items")),
        )


def _as_str(value: object) -> str | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, int | float):
        return str(value)
    return None


def _as_int(value: object) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str) and value.strip().isdecimal():
        return int(value.strip())
    return None


def _as_str_list(value: object) -> list[str]:
    # Some endpoints send keywords as a comma-separated string
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    if not isinstance(value, list):
        return []
    return [item for item in (_as_str(v) for v in value) if item]


def _as_list(value: object) -> list[Any]:
    return list(value) if isinstance(value, list) else []


def _as_faqs(value: object) -> list[FaqEntry]:
    if not isinstance(value, list):
        return []
    faqs: list[FaqEntry] = []
    for item in value:
        if not isinstance(item, dict):
            continue
        question = _as_str(item.get("question"))
        answer = _as_str(item.get("answer"))
        if question is None or answer is None:
            continue
        faqs.append(FaqEntry(question=question, answer=answer))
    return faqs


def _as_ranked_items(value: object) -> list[RankedItem]:
    if not isinstance(value, list):
        return []
    items: list[RankedItem] = []
    for item in value:
        if not isinstance(item, dict):
            continue
        name = _as_str(item.get("name")) or _as_str(item.get("title"))
        if not name:
            continue
        items.append(
            RankedItem(
                name=name,
                description=_as_str(item.get("description")),
                url=_as_str(item.get("url")),
            )
        )
    return items
