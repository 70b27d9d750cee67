"""Configuration management for realty-crm."""

from dataclasses import dataclass, field

from realty_crm.exceptions import ConfigurationError


@dataclass
class StoreConfig:
    """Record store configuration."""

    latency_seconds: float = 0.0
    timeout_seconds: float | None = None


@dataclass
class QueryConfig:
    """Query and analytics defaults."""

    customer_page_size: int = 10
    property_page_size: int = 12
    project_page_size: int = 12
    recent_days: int = 30
    expiring_days: int = 7


@dataclass
class SeedConfig:
    """Seed data configuration."""

    num_customers: int = 0
    num_properties: int = 0
    include_fixtures: bool = True
    locale: str = "vi_VN"
    seed: int | None = None


@dataclass
class CRMConfig:
    """Main configuration for realty-crm."""

    store: StoreConfig = field(default_factory=StoreConfig)
    query: QueryConfig = field(default_factory=QueryConfig)
    seed: SeedConfig = field(default_factory=SeedConfig)
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "CRMConfig":
        """Create config from environment variables."""
        import os

        timeout = os.getenv("CRM_STORE_TIMEOUT")
        store = StoreConfig(
            latency_seconds=_parse(float, "CRM_STORE_LATENCY", os.getenv("CRM_STORE_LATENCY", "0")),
            timeout_seconds=_parse(float, "CRM_STORE_TIMEOUT", timeout) if timeout else None,
        )

        query = QueryConfig(
            customer_page_size=_parse(int, "CRM_CUSTOMER_PAGE_SIZE", os.getenv("CRM_CUSTOMER_PAGE_SIZE", "10")),
            property_page_size=_parse(int, "CRM_PROPERTY_PAGE_SIZE", os.getenv("CRM_PROPERTY_PAGE_SIZE", "12")),
            project_page_size=_parse(int, "CRM_PROJECT_PAGE_SIZE", os.getenv("CRM_PROJECT_PAGE_SIZE", "12")),
            recent_days=_parse(int, "CRM_RECENT_DAYS", os.getenv("CRM_RECENT_DAYS", "30")),
            expiring_days=_parse(int, "CRM_EXPIRING_DAYS", os.getenv("CRM_EXPIRING_DAYS", "7")),
        )

        seed_value = os.getenv("CRM_SEED")
        seed = SeedConfig(
            num_customers=_parse(int, "CRM_NUM_CUSTOMERS", os.getenv("CRM_NUM_CUSTOMERS", "0")),
            num_properties=_parse(int, "CRM_NUM_PROPERTIES", os.getenv("CRM_NUM_PROPERTIES", "0")),
            include_fixtures=os.getenv("CRM_INCLUDE_FIXTURES", "true").lower() == "true",
            locale=os.getenv("CRM_LOCALE", "vi_VN"),
            seed=_parse(int, "CRM_SEED", seed_value) if seed_value else None,
        )

        config = cls(
            store=store,
            query=query,
            seed=seed,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )
        config.validate()
        return config

    def validate(self) -> None:
        """Check value ranges.

        Raises
        ------
        ConfigurationError
            If any setting is out of range.
        """
        if self.store.latency_seconds < 0:
            raise ConfigurationError("Store latency must be non-negative")
        if self.store.timeout_seconds is not None and self.store.timeout_seconds <= 0:
            raise ConfigurationError("Store timeout must be positive")
        for name in ("customer_page_size", "property_page_size", "project_page_size"):
            if getattr(self.query, name) < 1:
                raise ConfigurationError(f"{name} must be at least 1")
        if self.seed.num_customers < 0 or self.seed.num_properties < 0:
            raise ConfigurationError("Seed counts must be non-negative")
        if self.log_format not in ("standard", "json"):
            raise ConfigurationError(f"Unknown log format: {self.log_format}")


def _parse(kind: type, name: str, raw: str):
    try:
        return kind(raw)
    except ValueError as e:
        raise ConfigurationError(f"Invalid value for {name}: {raw!r}") from e
