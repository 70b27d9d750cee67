"""Output sinks for exporting CRM data."""

from realty_crm.sinks.json_file import JsonFileSink
from realty_crm.sinks.serialization import page_to_dict, serialize_value, to_dict

__all__ = ["JsonFileSink", "page_to_dict", "serialize_value", "to_dict"]
