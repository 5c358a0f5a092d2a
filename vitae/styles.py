# Maps a template id to one of the four CSS style buckets.

import os
from functools import lru_cache

from vitae.template_registry import StyleCategory, get_template_by_id

STYLES_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "templates", "styles")

# Checked in order for ids outside the catalog; first match wins.
# Occupation keywords come before colour and tone keywords.
STYLE_RULES = (
    ("systems-design", StyleCategory.PROFESSIONAL),
    ("graphic-designer", StyleCategory.CREATIVE),
    ("accountant", StyleCategory.PROFESSIONAL),
    ("education", StyleCategory.PROFESSIONAL),
    ("sales", StyleCategory.PROFESSIONAL),
    ("marketing", StyleCategory.PROFESSIONAL),
    ("corporate", StyleCategory.PROFESSIONAL),
    ("pink", StyleCategory.CREATIVE),
    ("creative", StyleCategory.CREATIVE),
    ("minimal", StyleCategory.MINIMAL),
    ("signature", StyleCategory.MINIMAL),
    ("clean", StyleCategory.MINIMAL),
    ("neutral", StyleCategory.MINIMAL),
    ("professional", StyleCategory.PROFESSIONAL),
    ("modern", StyleCategory.MODERN),
    ("gray", StyleCategory.MODERN),
    ("blue", StyleCategory.MODERN),
    ("white", StyleCategory.MINIMAL),
    ("green", StyleCategory.PROFESSIONAL),
    ("brown", StyleCategory.MINIMAL),
    ("beige", StyleCategory.MINIMAL),
    ("ivory", StyleCategory.MINIMAL),
)

DEFAULT_STYLE = StyleCategory.MODERN


def match_style_rules(template_id) -> StyleCategory:
    template_id = (template_id or "").lower()
    for keyword, category in STYLE_RULES:
        if keyword in template_id:
            return category
    return DEFAULT_STYLE


def resolve_style_category(template_id) -> StyleCategory:
    template = get_template_by_id(template_id)
    if template is not None:
        return template.style_category
    return match_style_rules(template_id)


@lru_cache(maxsize=None)
def get_style_block(category) -> str:
    category = StyleCategory(category)
    css_path = os.path.join(STYLES_DIR, f"{category.value}.css")
    with open(css_path, "r", encoding="utf-8") as file:
        return file.read()


def get_template_styles(template_id) -> str:
    return get_style_block(resolve_style_category(template_id))
