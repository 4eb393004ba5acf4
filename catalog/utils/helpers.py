import re

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")


def slugify(text: str) -> str:
    """Generate URL-friendly slug.

    Every run of characters outside ``[a-z0-9]`` (after lowercasing) becomes a
    single hyphen, and hyphens at either end are dropped. Non-ASCII letters
    are treated as separators, so the result can be empty.
    """
    return _NON_SLUG_CHARS.sub("-", text.lower()).strip("-")


def to_camel_case(name: str) -> str:
    """Convert a snake_case column name to the camelCase key used in responses"""
    head, *tail = name.split("_")
    return head + "".join(part.title() for part in tail)


def pagination_meta(pagination) -> dict:
    """Pagination block of the list envelope, built from a Flask-SQLAlchemy pagination"""
    return {
        "page": pagination.page,
        "limit": pagination.per_page,
        "total": pagination.total,
        "totalPages": pagination.pages,
        "hasNext": pagination.has_next,
        "hasPrev": pagination.has_prev,
    }
