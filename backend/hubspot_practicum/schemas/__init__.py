# Pydantic schemas for custom object records and form submissions

from hubspot_practicum.schemas.custom_object import (
    CustomObjectCreate,
    CustomObjectForm,
    CustomObjectProperties,
    CustomObjectRecord,
)

__all__ = [
    "CustomObjectCreate",
    "CustomObjectForm",
    "CustomObjectProperties",
    "CustomObjectRecord",
]
