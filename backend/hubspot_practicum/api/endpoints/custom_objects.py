"""
Custom object pages: list records, show the update form, create from the form.
HubSpot failures never reach the browser; they are logged and the page renders anyway.
"""

import logging
from pathlib import Path
from typing import Any

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from hubspot_practicum.schemas.custom_object import (
    CustomObjectCreate,
    CustomObjectForm,
    CustomObjectProperties,
    CustomObjectRecord,
)
from hubspot_practicum.services.hubspot_service import (
    MAX_PAGE_SIZE,
    HubSpotService,
    HubSpotServiceError,
    get_hubspot_service,
)

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent.parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(tags=["custom-objects"])

HOMEPAGE_TITLE = "Home | Integrating With HubSpot I Practicum"
UPDATES_TITLE = "Update Custom Object Form | Integrating With HubSpot I Practicum"


def _hubspot_record_to_view(hr: dict[str, Any]) -> CustomObjectRecord:
    """Transform a HubSpot result object to CustomObjectRecord."""
    props = hr.get("properties")
    if not isinstance(props, dict):
        props = {}
    return CustomObjectRecord(
        id=str(hr.get("id") or ""),
        properties=CustomObjectProperties.model_validate(
            {key: props.get(key) for key in HubSpotService.CUSTOM_OBJECT_PROPERTIES}
        ),
    )


def _render_homepage(request: Request, data: list[CustomObjectRecord]) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "homepage.html",
        {"title": HOMEPAGE_TITLE, "data": data},
    )


@router.get("/", response_class=HTMLResponse)
def homepage(
    request: Request,
    hubspot: HubSpotService = Depends(get_hubspot_service),
) -> HTMLResponse:
    """GET / - fetch custom object records and render the homepage."""
    if not hubspot.configured:
        logger.warning("PRIVATE_APP_ACCESS not set; rendering homepage with empty data.")
        return _render_homepage(request, [])

    try:
        result = hubspot.list_custom_objects(limit=MAX_PAGE_SIZE)
    except HubSpotServiceError as e:
        logger.error(
            "Error fetching custom objects from HubSpot: %s",
            e.detail if e.detail is not None else e.message,
        )
        return _render_homepage(request, [])

    results = result.get("results") or []
    data = [_hubspot_record_to_view(r) for r in results if isinstance(r, dict)]
    return _render_homepage(request, data)


@router.get("/updates", response_class=HTMLResponse)
@router.get("/update-cobj", response_class=HTMLResponse)
def update_form(request: Request) -> HTMLResponse:
    """GET /updates, GET /update-cobj - render the form to create a custom object."""
    return templates.TemplateResponse(request, "updates.html", {"title": UPDATES_TITLE})


@router.post("/update-cobj")
def update_custom_object(
    name: str | None = Form(None),
    bio: str | None = Form(None),
    species: str | None = Form(None),
    category: str | None = Form(None),
    hubspot: HubSpotService = Depends(get_hubspot_service),
) -> RedirectResponse:
    """POST /update-cobj - create a custom object in HubSpot, then go back to the homepage."""
    form = CustomObjectForm(name=name, bio=bio, species=species, category=category)
    logger.info("Received custom object data: %s", form.model_dump(exclude_none=True))

    if not hubspot.configured:
        logger.warning("PRIVATE_APP_ACCESS is not set. Skipping HubSpot API call.")
        return RedirectResponse(url="/", status_code=302)

    payload = CustomObjectCreate(properties=form.to_properties())
    try:
        hubspot.create_custom_object(payload.model_dump())
    except HubSpotServiceError as e:
        logger.error(
            "Error creating custom object in HubSpot: %s",
            e.detail if e.detail is not None else e.message,
        )

    return RedirectResponse(url="/", status_code=302)
