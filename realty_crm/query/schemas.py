"""Query schemas for customers, properties and projects."""

from dataclasses import replace

from realty_crm.exceptions import InvalidQueryError, InvalidRecordError
from realty_crm.models import Customer, CustomerStatus, Project, Property
from realty_crm.models.enums import priority_rank
from realty_crm.query.schema import (
    AnyOf,
    Contains,
    EntitySchema,
    InRange,
    OneOf,
    SearchField,
    timestamp,
)


def customer_status_filter(value):
    """Map a requested status, legacy labels included, onto ``CustomerStatus``."""
    try:
        return CustomerStatus.coerce(value)
    except InvalidRecordError as e:
        raise InvalidQueryError(f"Unknown customer status filter: {value!r}") from e


CUSTOMER_SCHEMA: EntitySchema[Customer] = EntitySchema(
    name="customer",
    search_fields=(
        SearchField(lambda c: c.name),
        SearchField(lambda c: c.email),
        SearchField(lambda c: c.phone, fold_case=False),
        SearchField(lambda c: c.company),
    ),
    sort_keys={
        "name": lambda c: (c.name or "").lower(),
        "created": lambda c: timestamp(c.created_at),
        "lastContact": lambda c: timestamp(c.last_contacted_at),
        "value": lambda c: c.total_value or 0,
    },
    filters={
        "status": OneOf(lambda c: c.status, normalize=customer_status_filter),
        "priority": OneOf(lambda c: c.priority),
        "source": OneOf(lambda c: c.source),
        "tags": AnyOf(lambda c: c.tags),
        "created": InRange(lambda c: c.created_at),
        "last_contact": InRange(lambda c: c.last_contacted_at),
        "value": InRange(lambda c: c.total_value, default=0),
        "name": Contains(lambda c: c.name),
        "email": Contains(lambda c: c.email),
        "phone": Contains(lambda c: c.phone, fold_case=False),
        "company": Contains(lambda c: c.company),
    },
    default_limit=10,
)

PROPERTY_SCHEMA: EntitySchema[Property] = EntitySchema(
    name="property",
    search_fields=(
        SearchField(lambda p: p.title),
        SearchField(lambda p: p.description),
        SearchField(lambda p: p.location.address),
        SearchField(lambda p: p.location.district),
    ),
    sort_keys={
        "price": lambda p: p.price or 0,
        "area": lambda p: p.area or 0,
        "created": lambda p: timestamp(p.created_at),
        "updated": lambda p: timestamp(p.updated_at),
        "views": lambda p: p.views or 0,
        "priority": lambda p: priority_rank(p.priority),
    },
    filters={
        "type": OneOf(lambda p: p.property_type),
        "status": OneOf(lambda p: p.status),
        "priority": OneOf(lambda p: p.priority),
        "price": InRange(lambda p: p.price),
        "area": InRange(lambda p: p.area),
        "year_built": InRange(lambda p: p.year_built),
        "bedrooms": OneOf(lambda p: p.bedrooms),
        "bathrooms": OneOf(lambda p: p.bathrooms),
        "district": OneOf(lambda p: p.location.district),
        "city": OneOf(lambda p: p.location.city),
        "direction": OneOf(lambda p: p.direction),
        "legal_status": OneOf(lambda p: p.legal_status),
        "featured": OneOf(lambda p: p.featured),
        "amenities": AnyOf(lambda p: p.amenities),
    },
    default_limit=12,
)

# Free-text property search also looks at amenities
PROPERTY_TEXT_SCHEMA: EntitySchema[Property] = replace(
    PROPERTY_SCHEMA,
    name="property_text",
    search_fields=PROPERTY_SCHEMA.search_fields + (SearchField(lambda p: p.amenities),),
)

PROJECT_SCHEMA: EntitySchema[Project] = EntitySchema(
    name="project",
    search_fields=(
        SearchField(lambda p: p.name),
        SearchField(lambda p: p.description),
        SearchField(lambda p: p.developer),
        SearchField(lambda p: p.location.district),
    ),
    sort_keys={
        "name": lambda p: p.name.lower(),
        "created": lambda p: timestamp(p.created_at),
        "views": lambda p: p.views or 0,
        "price": lambda p: p.price_min or 0,
        "completion": lambda p: timestamp(p.expected_completion),
    },
    filters={
        "status": OneOf(lambda p: p.status),
        "type": OneOf(lambda p: p.project_type),
        "district": OneOf(lambda p: p.location.district),
        "city": OneOf(lambda p: p.location.city),
        "developer": OneOf(lambda p: p.developer),
        "featured": OneOf(lambda p: p.featured),
    },
    default_limit=12,
)
