"""AI-friendly JSON projections of content records.

Pure functions: each maps a ContentRecord and its resolved identity to a
JSON-serializable document. Optional record fields are defaulted here.
"""

from typing import Any

from geopages.core.records import ContentRecord, FaqDict
from geopages.core.segments import ResolvedIdentity, format_segment_label

NOT_AVAILABLE = "n/a"


def _city_label(identity: ResolvedIdentity) -> str:
    # Pages without a distinct city are addressed by their state
    return format_segment_label(identity.city_or_state)


def build_ai_summary(
    record: ContentRecord,
    identity: ResolvedIdentity,
    *,
    url: str,
    default_author: str,
) -> dict[str, Any]:
    """Build the AI summary document of a detail page.

    ``summary`` falls back from meta description to excerpt to a sentence
    synthesized from the category and city labels.
    """
    summary = (
        record.meta_description
        or record.excerpt
        or f"Insights on {format_segment_label(identity.category)} "
        f"from {_city_label(identity)}."
    )
    return {
        "title": record.title,
        "summary": summary,
        "excerpt": record.excerpt,
        "keywords": record.keywords,
        "author": record.author_name or default_author,
        "category": identity.category,
        "geo": {
            "country": identity.country,
            "state": identity.state,
            "city": identity.city,
        },
        "published_at": record.published_at,
        "updated_at": record.updated_at or record.published_at,
        "read_time_minutes": record.read_time_minutes,
        "url": url,
    }


def build_faqs(
    record: ContentRecord,
    identity: ResolvedIdentity,
    *,
    site_name: str,
) -> list[Any]:
    """Return the record's FAQs unchanged, or three fixed entries when it has none."""
    if record.faq_source:
        return list(record.faq_source)
    if record.faqs:
        return [faq.to_dict() for faq in record.faqs]
    return _synthesized_faqs(identity, site_name=site_name)


def build_schema_faqs(
    record: ContentRecord,
    identity: ResolvedIdentity,
    *,
    site_name: str,
) -> list[FaqDict]:
    """Return FAQs with a question and an answer, for FAQPage markup."""
    if record.faq_source or record.faqs:
        return [faq.to_dict() for faq in record.faqs]
    return _synthesized_faqs(identity, site_name=site_name)


def _synthesized_faqs(identity: ResolvedIdentity, *, site_name: str) -> list[FaqDict]:
    category = format_segment_label(identity.category)
    city = _city_label(identity)
    state = format_segment_label(identity.state)

    return [
        {
            "question": f"Why focus on {category} in {city}?",
            "answer": (
                f"Local demand in {city} and the broader {state} ecosystem "
                f"makes {category.lower()} strategies critical."
            ),
        },
        {
            "question": "Who is the article written for?",
            "answer": (
                "Digital teams, marketers, and founders looking for playbooks "
                "that mix AI, creative, and engineering best practices."
            ),
        },
        {
            "question": f"How can {site_name} help {city} brands?",
            "answer": (
                "By deploying turnkey squads for design, SEO, and automation "
                "projects backed by our global delivery playbooks."
            ),
        },
    ]


def build_faq_document(
    record: ContentRecord,
    identity: ResolvedIdentity,
    *,
    site_name: str,
) -> dict[str, Any]:
    return {
        "title": record.title,
        "faqs": build_faqs(record, identity, site_name=site_name),
    }


def build_ai_facts(
    record: ContentRecord,
    identity: ResolvedIdentity,
    *,
    default_author: str,
) -> dict[str, Any]:
    """Build the label/value facts document of a detail page."""
    read_time = (
        f"{record.read_time_minutes} min"
        if record.read_time_minutes
        else NOT_AVAILABLE
    )
    keywords = ", ".join(record.keywords) if record.keywords else NOT_AVAILABLE

    facts = [
        ("Country", format_segment_label(identity.country)),
        ("State", format_segment_label(identity.state)),
        ("City", format_segment_label(identity.city)),
        ("Category", format_segment_label(identity.category)),
        ("Author", record.author_name or default_author),
        ("Published", record.published_at or NOT_AVAILABLE),
        ("Updated", record.updated_at or record.published_at or NOT_AVAILABLE),
        ("Read Time", read_time),
        ("Keywords", keywords),
    ]
    return {
        "title": record.title,
        "facts": [{"label": label, "value": value} for label, value in facts],
    }


def build_service_summary(
    record: ContentRecord,
    identity: ResolvedIdentity,
    *,
    url: str,
) -> dict[str, Any]:
    """Build the AI summary document of a service page."""
    return {
        "title": record.title,
        "summary": record.snippet or record.meta_description or "",
        "url": url,
        "key_points": record.key_points,
        "faqs": [faq.to_dict() for faq in record.faqs],
        "pricing": record.pricing,
        "category": record.business_type or record.page_role or identity.category,
        "location": identity.to_dict(),
        "keywords": record.keywords,
        "intent": record.intent,
        "updated_at": record.updated_at,
    }


def build_page_summary(record: ContentRecord, *, url: str) -> dict[str, Any]:
    """Build the AI summary of a page fetched by its site path."""
    return {
        "title": record.title,
        "snippet": record.snippet,
        "url": url,
        "category": record.category,
        "city": record.city,
        "state": record.state,
        "country": record.country,
        "updated_at": record.updated_at,
        "keywords": record.keywords,
        "faq": [faq.to_dict() for faq in record.faqs],
        "reading_time": record.read_time_minutes,
        "intent": record.intent,
    }


def build_feed_item(record: ContentRecord, *, site_url: str) -> dict[str, Any]:
    """Build one entry of an AI index feed."""
    return {
        "title": record.title,
        "snippet": record.snippet,
        "url": f"{site_url}{record.path or record.url or ''}",
        "category": record.category,
        "city": record.city,
        "state": record.state,
        "country": record.country,
        "keywords": record.keywords,
        "updated_at": record.updated_at,
    }


def matches_country(record: ContentRecord, country: str) -> bool:
    """Check whether a feed record belongs to a country."""
    if record.country and record.country.lower() == country.lower():
        return True
    marker = f"/{country}/"
    return marker in (record.path or "") or marker in (record.url or "")
