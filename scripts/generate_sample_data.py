#!/usr/bin/env python3
"""Generate sample CRM data and query results as JSON files.

Builds a sales office (fixture records plus Faker-generated ones), runs a
handful of representative queries through the services and writes the
records, pages and statistics to the output directory for manual review.
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from realty_crm.config import CRMConfig
from realty_crm.exceptions import RealtyCRMError
from realty_crm.logging import setup_logging
from realty_crm.models import CustomerStatus, PropertyStatus, PropertyType
from realty_crm.query import Query, Range, SortOrder
from realty_crm.scenarios import CRMServices, SalesOfficeScenario
from realty_crm.services import CustomerSearch
from realty_crm.sinks import JsonFileSink

logger = logging.getLogger(__name__)


async def export_records(services: CRMServices, sink: JsonFileSink) -> None:
    """Write every record of each entity kind."""
    sink.write_batch("customers", await services.customers.store.get_all())
    sink.write_batch("properties", await services.properties.store.get_all())
    sink.write_batch("projects", await services.projects.store.get_all())


async def export_queries(services: CRMServices, sink: JsonFileSink) -> None:
    """Run sample queries and write their result pages."""
    sink.write_page(
        "customers_leads_by_value",
        await services.customers.list_customers(
            Query(
                filters={"status": CustomerStatus.LEAD},
                sort_by="value",
                sort_order=SortOrder.DESC,
            )
        ),
    )
    sink.write_page(
        "properties_available_5b_10b",
        await services.properties.list_properties(
            Query(
                filters={
                    "status": PropertyStatus.AVAILABLE,
                    "price": Range(5_000_000_000, 10_000_000_000),
                },
                sort_by="price",
            )
        ),
    )
    sink.write_page(
        "properties_apartments_page_2",
        await services.properties.list_properties(
            Query(filters={"type": PropertyType.APARTMENT}, page=2, limit=5)
        ),
    )
    sink.write_page("projects", await services.projects.list_projects())

    sink.write_batch(
        "customers_vip_search",
        await services.customers.search_customers(CustomerSearch(tags=["VIP"])),
    )
    sink.write_batch(
        "properties_featured",
        await services.properties.get_featured_properties(),
    )


async def export_stats(services: CRMServices, sink: JsonFileSink) -> None:
    sink.write_object("customer_stats", await services.customers.get_customer_stats())
    sink.write_object("property_stats", await services.properties.get_property_stats())


async def run(args: argparse.Namespace, config: CRMConfig) -> None:
    scenario = SalesOfficeScenario.from_config(config)
    scenario.num_customers = args.customers
    scenario.num_properties = args.properties
    scenario.seed = args.seed
    scenario.include_fixtures = not args.no_fixtures
    services = scenario.generate()

    sink = JsonFileSink(args.output_dir, pretty=args.pretty)
    await export_records(services, sink)
    await export_queries(services, sink)
    await export_stats(services, sink)
    sink.close()


def main() -> int:
    """Parse arguments and generate all sample files."""
    parser = argparse.ArgumentParser(description="Generate sample realty CRM data")
    parser.add_argument(
        "--customers", type=int, default=20, help="Generated customers on top of fixtures (default: 20)"
    )
    parser.add_argument(
        "--properties", type=int, default=30, help="Generated properties on top of fixtures (default: 30)"
    )
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=project_root / "local",
        help="Output directory (default: ./local)",
    )
    parser.add_argument("--no-fixtures", action="store_true", help="Skip hand-written fixture records")
    parser.add_argument("--pretty", action="store_true", help="Pretty-print JSON output")
    args = parser.parse_args()

    try:
        config = CRMConfig.from_env()
    except RealtyCRMError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    setup_logging(level=config.log_level, format_type=config.log_format)

    try:
        asyncio.run(run(args, config))
    except RealtyCRMError as e:
        logger.error("Sample data generation failed: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
