# Services: HubSpot

from hubspot_practicum.services.hubspot_service import (
    HubSpotService,
    HubSpotServiceError,
    get_hubspot_service,
)

__all__ = [
    "HubSpotService",
    "HubSpotServiceError",
    "get_hubspot_service",
]
