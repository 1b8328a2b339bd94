"""HubSpot custom object practicum: list, form and create views over the CRM v3 API."""

__version__ = "1.0.0"
