"""Query engine over in-memory record collections."""

from realty_crm.query.descriptor import ALL, Page, Query, Range, SortOrder
from realty_crm.query.engine import QueryEngine
from realty_crm.query.schema import EntitySchema
from realty_crm.query.schemas import (
    CUSTOMER_SCHEMA,
    PROJECT_SCHEMA,
    PROPERTY_SCHEMA,
    PROPERTY_TEXT_SCHEMA,
)

__all__ = [
    "ALL",
    "CUSTOMER_SCHEMA",
    "EntitySchema",
    "PROJECT_SCHEMA",
    "PROPERTY_SCHEMA",
    "PROPERTY_TEXT_SCHEMA",
    "Page",
    "Query",
    "QueryEngine",
    "Range",
    "SortOrder",
]
