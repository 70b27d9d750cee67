"""Shared serialization utilities for sinks."""

from dataclasses import fields, is_dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any

from realty_crm.query import Page


def to_dict(obj: Any) -> dict:
    """Convert a record (or any dataclass) to a JSON-ready dictionary."""
    if is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: serialize_value(getattr(obj, f.name)) for f in fields(obj)}
    elif isinstance(obj, dict):
        return {k: serialize_value(v) for k, v in obj.items()}
    else:
        return {"value": str(obj)}


def page_to_dict(page: Page) -> dict:
    """Serialize a query page with its paging metadata.

    Parameters
    ----------
    page : Page
        Result of ``QueryEngine.run`` or a service ``list_*`` call.

    Returns
    -------
    dict
        ``items`` plus ``total``, ``page``, ``limit``, ``pages`` and ``has_next``.
    """
    return {
        "items": [to_dict(item) for item in page.items],
        "total": page.total,
        "page": page.page,
        "limit": page.limit,
        "pages": page.pages,
        "has_next": page.has_next,
    }


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif is_dataclass(value) and not isinstance(value, type):
        return to_dict(value)
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [serialize_value(v) for v in value]
    return value
