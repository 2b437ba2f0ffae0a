"""FastAPI endpoints for the link generator."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel

from . import __version__
from .calendar import FORM_FIELDS, EventDetails, FormState, apply_change, generate_links
from .config import Settings, get_settings

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"
DESCRIPTION = (
    "A simple tool to generate links to add events to calendars "
    "(Google Calendar, Outlook Calendar, Yahoo Calendar)"
)


# Pydantic models for API
class EventDetailsRequest(BaseModel):
    """Request body for link generation. Every field is optional."""

    title: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    timezone: Optional[str] = None  # IANA name from the browser


class LinksResponse(BaseModel):
    """Generated calendar links."""

    google_calendar_link: str
    outlook_calendar_link: str
    yahoo_calendar_link: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_title,
        description=DESCRIPTION,
        version=__version__,
    )
    templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

    @app.get("/health", response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(status="healthy", version=__version__)

    @app.get("/", response_class=HTMLResponse)
    async def index(
        request: Request,
        title: Optional[str] = None,
        description: Optional[str] = None,
        location: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        timezone: Optional[str] = None,
        settings: Settings = Depends(get_settings),
    ) -> HTMLResponse:
        """
        Render the form page.

        Query parameters prefill the form, and the links are computed for
        them in the browser zone sent as `timezone`. Without any, the link
        fields start out empty.
        """
        values = {
            "title": title,
            "description": description,
            "location": location,
            "start_date": start_date,
            "end_date": end_date,
        }

        tz = settings.zone_for(timezone)
        state = FormState.empty()
        for name in FORM_FIELDS:
            if values[name] is not None:
                state = apply_change(state, name, values[name], tz)

        return templates.TemplateResponse(
            request,
            "index.html",
            {
                "title": settings.app_title,
                "description": DESCRIPTION,
                "event": state.event,
                "links": state.links,
                "timezone": timezone,
            },
        )

    @app.post("/api/links", response_model=LinksResponse)
    async def links(
        request: EventDetailsRequest,
        settings: Settings = Depends(get_settings),
    ) -> LinksResponse:
        """Generate the Google, Outlook and Yahoo links for an event."""
        event = EventDetails(**request.model_dump(exclude={"timezone"}))
        generated = generate_links(event, settings.zone_for(request.timezone))
        logger.debug(f"Generated links for {event}")
        return LinksResponse(**generated.as_dict())

    return app


# For direct uvicorn usage
app = create_app()
