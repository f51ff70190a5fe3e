"""schema.org JSON-LD builders.

Pure mappers from page data to JSON-LD objects. Keys whose value is None
are dropped so optional properties never appear as null placeholders.
"""

from dataclasses import dataclass
from typing import Any

from geopages.core.records import ContentRecord, FaqDict, RankedItem
from geopages.core.segments import ResolvedIdentity
from geopages.projections.breadcrumbs import BreadcrumbItem

SCHEMA_CONTEXT = "https://schema.org"
IMAGE_WIDTH = 1200
IMAGE_HEIGHT = 630


@dataclass(frozen=True)
class Organization:
    """Publishing organization."""

    name: str
    url: str
    logo: str | None = None


@dataclass(frozen=True)
class Location:
    """Geographic area a page is about."""

    city: str | None = None
    state: str | None = None
    country_code: str | None = None
    country_name: str | None = None

    @property
    def display_name(self) -> str:
        parts = [self.city, self.state, self.country_name]
        return ", ".join(part for part in parts if part)


def compact(data: dict[str, Any]) -> dict[str, Any]:
    """Drop keys whose value is None."""
    return {key: value for key, value in data.items() if value is not None}


def _image(url: str | None) -> dict[str, Any] | None:
    if not url:
        return None
    return {
        "@type": "ImageObject",
        "url": url,
        "width": IMAGE_WIDTH,
        "height": IMAGE_HEIGHT,
    }


def breadcrumb_list(items: list[BreadcrumbItem]) -> dict[str, Any]:
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "BreadcrumbList",
        "itemListElement": [
            {
                "@type": "ListItem",
                "position": index,
                "name": item.name,
                "item": item.url,
            }
            for index, item in enumerate(items, start=1)
        ],
    }


def web_page(
    *,
    url: str,
    title: str,
    description: str | None = None,
    is_part_of: str | None = None,
    date_published: str | None = None,
    date_modified: str | None = None,
    image_url: str | None = None,
) -> dict[str, Any]:
    return compact(
        {
            "@context": SCHEMA_CONTEXT,
            "@type": "WebPage",
            "url": url,
            "name": title,
            "headline": title,
            "description": description,
            "isPartOf": (
                {"@type": "WebSite", "@id": is_part_of} if is_part_of else None
            ),
            "datePublished": date_published,
            "dateModified": date_modified,
            "image": _image(image_url),
        }
    )


def local_business(
    *,
    name: str,
    url: str,
    image: str | None = None,
    address: dict[str, Any] | None = None,
    geo: dict[str, Any] | None = None,
    telephone: str | None = None,
    map_urls: list[str] | None = None,
) -> dict[str, Any]:
    return compact(
        {
            "@context": SCHEMA_CONTEXT,
            "@type": "LocalBusiness",
            "name": name,
            "image": image,
            "address": address,
            "geo": geo,
            "hasMap": [m for m in map_urls if m] if map_urls else None,
            "telephone": telephone,
            "url": url,
        }
    )


def service(
    *,
    url: str,
    name: str,
    description: str,
    category: str | None,
    organization: Organization,
    location: Location | None = None,
    image_url: str | None = None,
    price_from: float | None = None,
    price_to: float | None = None,
    currency: str = "USD",
) -> dict[str, Any]:
    """Build a Service object.

    ``areaServed`` is set only when the location names a place and
    ``offers`` only when a price is known.
    """
    area = None
    if location is not None and location.display_name:
        area = {
            "@type": "Place",
            "name": location.display_name,
            "address": compact(
                {
                    "@type": "PostalAddress",
                    "addressLocality": location.city,
                    "addressRegion": location.state,
                    "addressCountry": location.country_code,
                }
            ),
        }

    offers = None
    if price_from or price_to:
        offers = compact(
            {
                "@type": "Offer",
                "priceCurrency": currency,
                "price": price_from if price_from is not None else price_to,
                "priceSpecification": (
                    {
                        "@type": "PriceSpecification",
                        "priceCurrency": currency,
                        "minPrice": price_from,
                        "maxPrice": price_to,
                    }
                    if price_from and price_to
                    else None
                ),
                "url": url,
            }
        )

    return compact(
        {
            "@context": SCHEMA_CONTEXT,
            "@type": "Service",
            "name": name,
            "description": description,
            "serviceType": category,
            "provider": compact(
                {
                    "@type": "Organization",
                    "name": organization.name,
                    "url": organization.url,
                    "logo": organization.logo,
                }
            ),
            "areaServed": area,
            "offers": offers,
            "image": _image(image_url),
            "url": url,
        }
    )


def article(
    *,
    title: str,
    description: str | None,
    images: list[str] | None = None,
    published: str | None = None,
    modified: str | None = None,
) -> dict[str, Any]:
    return compact(
        {
            "@context": SCHEMA_CONTEXT,
            "@type": "Article",
            "headline": title,
            "description": description,
            "image": images or None,
            "datePublished": published,
            "dateModified": modified or published,
        }
    )


def blog_posting(
    record: ContentRecord,
    *,
    url: str,
    author_name: str,
    author_url: str | None = None,
) -> dict[str, Any]:
    """Build a BlogPosting object from a blog record."""
    return compact(
        {
            "@context": SCHEMA_CONTEXT,
            "@type": "BlogPosting",
            "mainEntityOfPage": {"@type": "WebPage", "@id": url},
            "headline": record.title,
            "description": record.meta_description or record.excerpt or "",
            "articleBody": record.content_html,
            "image": _image(record.image_url),
            "author": compact(
                {"@type": "Organization", "name": author_name, "url": author_url}
            ),
            "datePublished": record.published_at,
            "dateModified": record.updated_at or record.published_at,
            "timeRequired": (
                f"PT{record.read_time_minutes}M" if record.read_time_minutes else None
            ),
            "url": url,
            "keywords": ", ".join(record.keywords) if record.keywords else None,
        }
    )


def product(
    *,
    name: str,
    description: str | None,
    url: str,
    image: str | None = None,
    sku: str | None = None,
    price: float | str | None = None,
    currency: str = "USD",
) -> dict[str, Any]:
    return compact(
        {
            "@context": SCHEMA_CONTEXT,
            "@type": "Product",
            "name": name,
            "description": description,
            "image": image,
            "sku": sku,
            "offers": compact(
                {
                    "@type": "Offer",
                    "price": price,
                    "priceCurrency": currency,
                    "availability": "https://schema.org/InStock",
                    "url": url,
                }
            ),
        }
    )


def _about(category: str, location_name: str) -> list[dict[str, str]]:
    return [
        {"@type": "Thing", "name": category},
        {"@type": "Place", "name": location_name},
    ]


def comparison_page(
    record: ContentRecord,
    *,
    url: str,
    country: str,
    state: str | None,
    city: str | None,
    category: str,
    organization: Organization,
) -> dict[str, Any]:
    """Build the WebPage object of a comparison page.

    ``hasPart`` lists the compared options only when the record names one.
    """
    data: dict[str, Any] = {
        "@context": SCHEMA_CONTEXT,
        "@type": "WebPage",
        "@id": url,
        "url": url,
        "name": record.title,
        "description": record.meta_description or record.excerpt or "",
        "isPartOf": {
            "@type": "WebSite",
            "name": organization.name,
            "url": organization.url,
        },
        "inLanguage": "en",
        "about": _about(category, city or state or country),
    }

    if record.updated_at:
        data["dateModified"] = record.updated_at

    if record.option1 or record.option2:
        data["hasPart"] = [
            {"@type": "WebPageElement", "name": record.option1 or "Option 1"},
            {"@type": "WebPageElement", "name": record.option2 or "Option 2"},
        ]

    return data


def ranked_list(
    record: ContentRecord,
    *,
    url: str,
    country: str,
    state: str | None,
    city: str | None,
    category: str,
    organization: Organization,
) -> dict[str, Any]:
    """Build the ItemList object of a ranked "top N" page."""
    data: dict[str, Any] = {
        "@context": SCHEMA_CONTEXT,
        "@type": "ItemList",
        "@id": url,
        "url": url,
        "name": record.title,
        "description": record.meta_description or record.excerpt or "",
        "isPartOf": {
            "@type": "WebSite",
            "name": organization.name,
            "url": organization.url,
        },
        "inLanguage": "en",
        "about": _about(category, city or state or country),
    }

    if record.updated_at:
        data["dateModified"] = record.updated_at

    if record.items:
        data["itemListElement"] = [
            _ranked_entry(item, position)
            for position, item in enumerate(record.items, start=1)
        ]

    return data


def _ranked_entry(item: RankedItem, position: int) -> dict[str, Any]:
    return {
        "@type": "ListItem",
        "position": position,
        "item": compact(
            {
                "@type": "Thing",
                "name": item.name,
                "description": item.description,
                "url": item.url,
            }
        ),
    }


def faq_page(questions: list[FaqDict], url: str | None = None) -> dict[str, Any]:
    return compact(
        {
            "@context": SCHEMA_CONTEXT,
            "@type": "FAQPage",
            "mainEntity": [
                {
                    "@type": "Question",
                    "name": qa["question"],
                    "acceptedAnswer": {"@type": "Answer", "text": qa["answer"]},
                }
                for qa in questions
            ],
            "url": url,
        }
    )


def blog_schema_graph(
    record: ContentRecord,
    identity: ResolvedIdentity,
    *,
    url: str,
    trail: list[BreadcrumbItem],
    organization: Organization,
    default_author: str,
) -> dict[str, Any]:
    """Build the combined BlogPosting, BreadcrumbList and WebPage graph."""
    posting = blog_posting(
        record,
        url=url,
        author_name=record.author_name or default_author,
        author_url=organization.url,
    )
    posting["contentLocation"] = compact(
        {
            "@type": "Place",
            "name": Location(
                city=identity.city,
                state=identity.state,
                country_name=identity.country,
            ).display_name,
        }
    )
    page = web_page(
        url=url,
        title=record.title,
        description=record.meta_description or record.excerpt or "",
        is_part_of=organization.url,
    )
    return {
        "@context": SCHEMA_CONTEXT,
        "@graph": [posting, breadcrumb_list(trail), page],
    }
