from typing import Literal

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from vitae.models import sample_resume
from vitae.render_resume import render_document
from vitae.services.subscription_service import get_subscription_status
from vitae.template_registry import (
    AVAILABLE_TEMPLATES,
    TemplateCategory,
    get_adjacent_templates,
    get_templates_by_category,
    get_templates_by_plan,
    require_template,
)

router = APIRouter()


def _dump(template):
    return template.model_dump(by_alias=True, mode="json")


@router.get("")
def list_templates(category: TemplateCategory | None = None, plan: Literal["free", "premium"] | None = None):
    templates = list(AVAILABLE_TEMPLATES)
    if category is not None:
        templates = get_templates_by_category(category)
    if plan is not None:
        allowed = set(t.id for t in get_templates_by_plan(plan == "premium"))
        templates = [t for t in templates if t.id in allowed]
    return [_dump(t) for t in templates]


# Which templates the user may export with
# TODO: resolve user_id from the authenticated session instead of the query string
@router.get("/access")
def check_access(user_id: str | None = None):
    return get_subscription_status(user_id).model_dump(by_alias=True)


@router.get("/{template_id}")
def get_template(template_id: str):
    return _dump(require_template(template_id))


# Previous/next navigation of the template preview page
@router.get("/{template_id}/adjacent")
def get_adjacent(template_id: str):
    previous, following = get_adjacent_templates(template_id)
    return {"previous": _dump(previous), "next": _dump(following)}


@router.get("/{template_id}/preview", response_class=HTMLResponse)
def preview_template(template_id: str):
    require_template(template_id)
    return HTMLResponse(render_document(sample_resume(), template_id))
