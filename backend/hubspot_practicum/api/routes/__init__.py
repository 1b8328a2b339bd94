"""
Aggregate page routes.

The practicum pages live at the site root (/, /updates, /update-cobj), so there is no
version prefix here.
"""

from fastapi import APIRouter

from hubspot_practicum.api.endpoints import custom_objects

api_router = APIRouter()

api_router.include_router(custom_objects.router, prefix="")
