"""Scenarios for building populated sales office data sets."""

from realty_crm.scenarios.sales_office import CRMServices, SalesOfficeScenario

__all__ = ["CRMServices", "SalesOfficeScenario"]
