"""Landing page and the two lead forms"""
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
import httpx
import logging

from app.config import get_settings
from app.models.forms import BUSINESS_FORM, CONTACT_FORM, FORMS, FormDefinition
from app.services.form_service import FormSession
from app.services.webhook_service import get_http_client
from app.utils.templates import templates

logger = logging.getLogger(__name__)
router = APIRouter()


def new_session(definition: FormDefinition) -> FormSession:
    url = getattr(get_settings(), definition.url_setting)
    return FormSession(definition, url)


def render_form(request: Request, session: FormSession):
    return templates.TemplateResponse(
        request,
        "form.html",
        {"form": session.definition, "session": session}
    )


async def submit(request: Request, definition: FormDefinition, client: httpx.AsyncClient):
    """Populate a fresh session from the posted fields, submit it and re-render"""
    session = new_session(definition)
    posted = await request.form()
    session.update({name: str(value) for name, value in posted.items()})

    status = await session.handle_submit(client=client)
    logger.info(f"{definition.title} submission finished with status {status.value}")

    return render_form(request, session)


@router.get("/", response_class=HTMLResponse)
async def landing(request: Request):
    """Landing page linking to both forms"""
    return templates.TemplateResponse(request, "landing.html", {"forms": list(FORMS.values())})


@router.get("/business", response_class=HTMLResponse)
async def business_form(request: Request):
    return render_form(request, new_session(BUSINESS_FORM))


@router.post("/business", response_class=HTMLResponse)
async def submit_business_form(request: Request, client: httpx.AsyncClient = Depends(get_http_client)):
    return await submit(request, BUSINESS_FORM, client)


@router.get("/contact", response_class=HTMLResponse)
async def contact_form(request: Request):
    return render_form(request, new_session(CONTACT_FORM))


@router.post("/contact", response_class=HTMLResponse)
async def submit_contact_form(request: Request, client: httpx.AsyncClient = Depends(get_http_client)):
    return await submit(request, CONTACT_FORM, client)
