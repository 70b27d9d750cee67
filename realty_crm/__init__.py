"""Real-estate CRM records, query engine and services."""
