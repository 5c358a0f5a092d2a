"""
Static catalog of resume templates.

Each entry declares the CSS style bucket and the layout it renders through,
so the renderer dispatches on these fields instead of parsing template ids.
Free templates carry "simple" in their id, premium ones do not.
"""

from enum import Enum

from pydantic import ConfigDict

from vitae.exceptions import TemplateNotFoundError
from vitae.models import CamelModel


class TemplateCategory(str, Enum):
    MODERN = "modern"
    MINIMAL = "minimal"
    PROFESSIONAL = "professional"
    SIDEBAR = "sidebar"
    PREMIUM = "premium"
    EXECUTIVE = "executive"
    CREATIVE = "creative"
    TECH = "tech"
    ACADEMIC = "academic"


class StyleCategory(str, Enum):
    MODERN = "modern"
    MINIMAL = "minimal"
    PROFESSIONAL = "professional"
    CREATIVE = "creative"


class LayoutVariant(str, Enum):
    STANDARD = "standard"
    SIDEBAR = "sidebar"
    HEADER_PHOTO = "header-photo"
    TIMELINE_SIDEBAR = "timeline-sidebar"


class ResumeTemplate(CamelModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str = ""
    category: TemplateCategory
    is_premium: bool
    preview: str
    features: tuple[str, ...] = ()
    has_photo: bool
    style_category: StyleCategory
    layout_variant: LayoutVariant = LayoutVariant.STANDARD


def _template(id, name, category, is_premium, preview, features, has_photo, style, layout=None):
    if layout is None:
        layout = LayoutVariant.SIDEBAR if has_photo else LayoutVariant.STANDARD
    return ResumeTemplate(
        id=id,
        name=name,
        category=category,
        is_premium=is_premium,
        preview=preview,
        features=tuple(features),
        has_photo=has_photo,
        style_category=style,
        layout_variant=layout,
    )


AVAILABLE_TEMPLATES = (
    # Free templates
    _template(
        "blue-simple", "Blue Simple Professional", TemplateCategory.PROFESSIONAL, False,
        "/templates/blue_simple_professional_cv_resume.png",
        ["Professional", "Clean", "ATS-Friendly"], True,
        StyleCategory.MODERN, LayoutVariant.TIMELINE_SIDEBAR,
    ),
    _template(
        "neutral-simple", "Neutral Simple Elegant", TemplateCategory.MINIMAL, False,
        "/templates/neutral_simple_elegant_clean_classic_pinimalist_professional_photo_cv_resume_a4_ocument.png",
        ["Minimal", "Elegant", "Classic"], True,
        StyleCategory.MINIMAL, LayoutVariant.HEADER_PHOTO,
    ),
    _template(
        "simple-professional", "Simple Professional", TemplateCategory.PROFESSIONAL, False,
        "/templates/simple_professional_cv_resume.png",
        ["Professional", "Simple", "Clean"], False,
        StyleCategory.PROFESSIONAL,
    ),
    _template(
        "white-simple-sales", "White Simple Sales", TemplateCategory.PROFESSIONAL, False,
        "/templates/white_simple_rales_representative_cv_resume.png",
        ["Sales", "Simple", "Professional"], False,
        StyleCategory.PROFESSIONAL,
    ),
    _template(
        "white-simple-web", "White Simple Web Developer", TemplateCategory.TECH, False,
        "/templates/white_simple_Web_developer_resume.png",
        ["Web Developer", "Tech", "Simple"], False,
        StyleCategory.MINIMAL,
    ),
    _template(
        "blue-gray-simple", "Blue & Gray Simple", TemplateCategory.PROFESSIONAL, False,
        "/templates/blue_and_gray_simple_professional_cv_resume.png",
        ["Professional", "Two-tone", "Simple"], False,
        StyleCategory.MODERN,
    ),
    _template(
        "systems-design-simple", "Systems Design Simple", TemplateCategory.TECH, False,
        "/templates/systems_design_resume_in-white-black-simple_style.png",
        ["Systems Design", "Tech", "Simple"], False,
        StyleCategory.PROFESSIONAL,
    ),

    # Premium templates
    _template(
        "beige-minimalist-corporate", "Beige Minimalist Corporate", TemplateCategory.EXECUTIVE, True,
        "/templates/beige_minimalist_corporate_it_project_manager_resume.png",
        ["Corporate", "Minimalist", "Executive"], True,
        StyleCategory.PROFESSIONAL,
    ),
    _template(
        "beige-minimalist-corporate-1", "Beige Corporate IT Manager", TemplateCategory.EXECUTIVE, True,
        "/templates/beige_minimalist_corporate_it_project_manager_resume_1.png",
        ["IT Manager", "Corporate", "Executive"], True,
        StyleCategory.PROFESSIONAL,
    ),
    _template(
        "black-and-white-corporate", "Black & White Corporate", TemplateCategory.EXECUTIVE, True,
        "/templates/black_and_white_corporate_resume.png",
        ["Corporate", "Executive", "Professional"], True,
        StyleCategory.PROFESSIONAL,
    ),
    _template(
        "black-modern-professional", "Black Modern Professional", TemplateCategory.MODERN, True,
        "/templates/black_modern_professional_resume.png",
        ["Modern", "Professional", "Bold"], False,
        StyleCategory.PROFESSIONAL,
    ),
    _template(
        "black-white-minimalist-accountant", "Black & White Accountant", TemplateCategory.PROFESSIONAL, True,
        "/templates/black_white_minimalist_accountant_resume.png",
        ["Accountant", "Minimalist", "Professional"], True,
        StyleCategory.PROFESSIONAL,
    ),
    _template(
        "black-white-minimalist", "Black & White Minimalist", TemplateCategory.MINIMAL, True,
        "/templates/black_white_minimalist_cv_resume.png",
        ["Minimalist", "Clean", "Modern"], True,
        StyleCategory.MINIMAL,
    ),
    _template(
        "brown-beige-minimalist", "Brown & Beige Minimalist", TemplateCategory.MINIMAL, True,
        "/templates/brown_beige_minimalist_cv_resume.png",
        ["Minimalist", "Warm", "Elegant"], True,
        StyleCategory.MINIMAL,
    ),
    _template(
        "dark-blue-white-education", "Dark Blue & White Education", TemplateCategory.ACADEMIC, True,
        "/templates/dark_blue_and_white-minimalist_education_resume.png",
        ["Education", "Academic", "Professional"], True,
        StyleCategory.PROFESSIONAL,
    ),
    _template(
        "green-white-graphic-designer", "Green & White Graphic Designer", TemplateCategory.CREATIVE, True,
        "/templates/green_and_white_modern_graphic_designer_esume.png",
        ["Graphic Designer", "Creative", "Modern"], True,
        StyleCategory.CREATIVE,
    ),
    _template(
        "green-professional-modern", "Green Professional Modern", TemplateCategory.MODERN, True,
        "/templates/green_professional modern_cv_resume.png",
        ["Professional", "Modern", "Green"], False,
        StyleCategory.PROFESSIONAL,
    ),
    _template(
        "ivory-minimalist-sales", "Ivory Minimalist Sales", TemplateCategory.PROFESSIONAL, True,
        "/templates/ivory_minimalist_sales_manager_resume.png",
        ["Sales Manager", "Minimalist", "Elegant"], True,
        StyleCategory.PROFESSIONAL,
    ),
    _template(
        "minimalist-clean-signature", "Minimalist Clean Signature", TemplateCategory.MINIMAL, True,
        "/templates/Minimalist_clean_signature_cv_resume.png",
        ["Minimalist", "Clean", "Signature"], True,
        StyleCategory.MINIMAL,
    ),
    _template(
        "neutral-professional-sales", "Neutral Professional Sales", TemplateCategory.PROFESSIONAL, True,
        "/templates/neutral_professional-sales-representative-resume.png",
        ["Sales", "Professional", "Neutral"], True,
        StyleCategory.PROFESSIONAL,
    ),
    _template(
        "pink-minimalist", "Pink Minimalist", TemplateCategory.CREATIVE, True,
        "/templates/pink_minimalist_cv_resume.png",
        ["Minimalist", "Creative", "Pink"], True,
        StyleCategory.CREATIVE,
    ),
    _template(
        "professional-modern", "Professional Modern", TemplateCategory.MODERN, True,
        "/templates/professional_modern_cv_resume.png",
        ["Professional", "Modern", "Clean"], False,
        StyleCategory.PROFESSIONAL,
    ),
    _template(
        "white-minimalist-marketing", "White Minimalist Marketing", TemplateCategory.PROFESSIONAL, True,
        "/templates/white_minimalist_clean_marketing_manager_resume.png",
        ["Marketing Manager", "Minimalist", "Clean"], True,
        StyleCategory.PROFESSIONAL,
    ),
)

_BY_ID = {template.id: template for template in AVAILABLE_TEMPLATES}


def get_template_by_id(template_id: str) -> ResumeTemplate | None:
    return _BY_ID.get(template_id)


def require_template(template_id: str) -> ResumeTemplate:
    template = get_template_by_id(template_id)
    if template is None:
        raise TemplateNotFoundError(template_id)
    return template


def get_templates_by_category(category) -> list[ResumeTemplate]:
    try:
        category = TemplateCategory(category)
    except ValueError:
        return []
    return [t for t in AVAILABLE_TEMPLATES if t.category == category]


def get_free_templates() -> list[ResumeTemplate]:
    return [t for t in AVAILABLE_TEMPLATES if not t.is_premium]


def get_premium_templates() -> list[ResumeTemplate]:
    return [t for t in AVAILABLE_TEMPLATES if t.is_premium]


def get_templates_by_plan(is_premium: bool) -> list[ResumeTemplate]:
    return [t for t in AVAILABLE_TEMPLATES if t.is_premium == is_premium]


def get_adjacent_templates(template_id: str):
    """Previous and next catalog entries around template_id, wrapping at both ends."""
    template = require_template(template_id)
    index = AVAILABLE_TEMPLATES.index(template)
    previous = AVAILABLE_TEMPLATES[index - 1]
    following = AVAILABLE_TEMPLATES[(index + 1) % len(AVAILABLE_TEMPLATES)]
    return previous, following


def can_use_template(template: ResumeTemplate, is_premium: bool) -> bool:
    return not (template.is_premium and not is_premium)
