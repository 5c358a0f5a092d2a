# render_resume.py
# Turns ResumeData plus a template id into a complete, self-contained HTML document.
# Both the live preview and every export path go through render_document().

import logging
import os
import re
from functools import lru_cache
from html import escape

from vitae.config import DEFAULT_TEMPLATE
from vitae.models import ResumeData
from vitae.placeholders import (
    EMAIL_PLACEHOLDER,
    NAME_PLACEHOLDER,
    PHONE_PLACEHOLDER,
    TITLE_PLACEHOLDER,
    get_initials,
    get_placeholder,
    get_placeholder_or_empty,
    is_blank,
)
from vitae.styles import get_template_styles
from vitae.template_registry import LayoutVariant, get_template_by_id

TEMPLATES_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "templates")

_SLOT = re.compile(r"\{\{(\w+)\}\}")


# Load a layout shell from /templates by variant name
@lru_cache(maxsize=None)
def load_template(layout: str) -> str:
    template_path = os.path.join(TEMPLATES_DIR, f"{layout}.html")
    if not os.path.exists(template_path):
        raise FileNotFoundError(f"Template not found: {template_path}")

    with open(template_path, "r", encoding="utf-8") as file:
        return file.read()


def fill_template(template: str, values: dict) -> str:
    # Single pass, so user text that happens to contain {{...}} is never expanded
    return _SLOT.sub(lambda m: values.get(m.group(1), ""), template)


def _section(title, body, section_class="section", title_class="section-title"):
    return f"""
    <div class="{section_class}">
        <div class="{title_class}">{title}</div>
        {body}
    </div>
    """


def _filled(items):
    return [item for item in items if not is_blank(item)]


def _number(value) -> str:
    return f"{value:g}"


def render_date_range(start_date, end_date) -> str:
    end = "Present" if is_blank(end_date) else escape(end_date)
    return f"{escape(start_date)} - {end}"


def render_bullets(items) -> str:
    bullets = "".join(f"<li>{escape(item.strip())}</li>" for item in _filled(items))
    if not bullets:
        return ""
    return f"<ul>{bullets}</ul>"


# Header
def render_contact_items(info, phone_first=False) -> str:
    email = f'<div class="contact-item">📧 {get_placeholder_or_empty(info.email, EMAIL_PLACEHOLDER)}</div>'
    phone = f'<div class="contact-item">📱 {get_placeholder_or_empty(info.phone, PHONE_PLACEHOLDER)}</div>'
    items = [phone, email] if phone_first else [email, phone]

    optional = (
        ("📍", info.location),
        ("💼", info.linkedin),
        ("🌐", info.website),
        ("💻", info.github),
    )
    for icon, value in optional:
        if not is_blank(value):
            items.append(f'<div class="contact-item">{icon} {escape(value)}</div>')

    return "\n".join(items)


def render_profile_picture(info) -> str:
    if is_blank(info.photo):
        return escape(get_initials(info.name))

    adjust = info.photo_adjustments
    if adjust is None:
        transform = "scale(1) translate(0px, 0px) rotate(0deg)"
    else:
        transform = (
            f"scale({_number(adjust.scale)}) "
            f"translate({_number(adjust.translate_x)}px, {_number(adjust.translate_y)}px) "
            f"rotate({_number(adjust.rotation)}deg)"
        )
    return f'<img src="{escape(info.photo)}" alt="Profile Picture" style="transform: {transform};">'


# Section Renderers
def render_summary(summary_text, title="Professional Summary", text_class="summary", **classes):
    if is_blank(summary_text):
        return ""
    return _section(title, f'<div class="{text_class}">{escape(summary_text)}</div>', **classes)


def render_experience(experience_list, title="Professional Experience", **classes):
    if not experience_list:
        return ""

    html = ""
    for job in experience_list:
        bullets = render_bullets(job.description)
        achievements = render_bullets(job.achievements)

        html += f"""
        <div class="experience-item">
            <div class="experience-header">
                <div class="company">{escape(job.company)}</div>
                <div class="date">{render_date_range(job.start_date, job.end_date)}</div>
            </div>
            <div class="position">{escape(job.position)}</div>
            {f'<div class="description">{bullets}</div>' if bullets else ''}
            {f'<div class="description achievements">{achievements}</div>' if achievements else ''}
        </div>
        """

    return _section(title, html, **classes)


def _degree_line(edu) -> str:
    degree = escape(edu.degree)
    if not is_blank(edu.field):
        degree += f" in {escape(edu.field)}"
    return degree


def render_education(education_list, title="Education", **classes):
    if not education_list:
        return ""

    html = ""
    for edu in education_list:
        gpa = f'<div class="description">GPA: {escape(edu.gpa)}</div>' if not is_blank(edu.gpa) else ""
        html += f"""
        <div class="education-item">
            <div class="education-header">
                <div class="school">{escape(edu.school)}</div>
                <div class="date">{escape(edu.graduation_year)}</div>
            </div>
            <div class="degree">{_degree_line(edu)}</div>
            {gpa}
        </div>
        """

    return _section(title, html, **classes)


def render_sidebar_education(education_list, title="Education"):
    if not education_list:
        return ""

    html = ""
    for edu in education_list:
        gpa = f'<div class="education-degree">GPA: {escape(edu.gpa)}</div>' if not is_blank(edu.gpa) else ""
        html += f"""
        <div class="education-item">
            <div class="education-year">{escape(edu.graduation_year)}</div>
            <div class="education-school">{escape(edu.school)}</div>
            <div class="education-degree">{_degree_line(edu)}</div>
            {gpa}
        </div>
        """

    return _section(title, html, section_class="sidebar-section", title_class="sidebar-title")


def _render_tags(items, title, list_class=None, tag="span", **classes):
    items = _filled(items)
    if not items:
        return ""

    if list_class:
        entries = "".join(f"<li>{escape(item)}</li>" for item in items)
        body = f'<ul class="{list_class}">{entries}</ul>'
    else:
        entries = "".join(f'<{tag} class="skill">{escape(item)}</{tag}>' for item in items)
        body = f'<div class="skills">{entries}</div>'

    return _section(title, body, **classes)


def render_skills(skills, title="Skills", list_class=None, tag="span", **classes):
    return _render_tags(skills, title, list_class=list_class, tag=tag, **classes)


def render_languages(languages, title="Languages", list_class=None, tag="span", **classes):
    return _render_tags(languages, title, list_class=list_class, tag=tag, **classes)


def render_interests(interests, title="Interests", list_class=None, tag="span", **classes):
    return _render_tags(interests, title, list_class=list_class, tag=tag, **classes)


def render_projects(projects, title="Projects", **classes):
    if not projects:
        return ""

    html = ""
    for p in projects:
        links = " | ".join(escape(link) for link in _filled([p.url, p.github]))
        technologies = ", ".join(escape(t) for t in _filled(p.technologies))

        html += f"""
        <div class="project-item">
            <div class="experience-header">
                <div class="company">{escape(p.name)}</div>
                {f'<div class="date">{links}</div>' if links else ''}
            </div>
            {f'<div class="description">{escape(p.description)}</div>' if not is_blank(p.description) else ''}
            {f'<div class="position">{technologies}</div>' if technologies else ''}
        </div>
        """

    return _section(title, html, **classes)


def render_certifications(certs, title="Certifications", **classes):
    if not certs:
        return ""

    html = ""
    for c in certs:
        html += f"""
        <div class="certification-item">
            <div class="experience-header">
                <div class="company">{escape(c.name)}</div>
                <div class="date">{escape(c.date)}</div>
            </div>
            <div class="position">{escape(c.issuer)}</div>
            {f'<div class="description">{escape(c.url)}</div>' if not is_blank(c.url) else ''}
        </div>
        """

    return _section(title, html, **classes)


# Layout builders: each returns the slot values of its shell
def _standard_slots(data, template_id):
    return {
        "styles": get_template_styles(template_id),
        "contact_items": render_contact_items(data.personal_info),
        "summary_section": render_summary(data.summary),
        "experience_section": render_experience(data.experience),
        "education_section": render_education(data.education),
        "skills_section": render_skills(data.skills),
        "languages_section": render_languages(data.languages),
        "projects_section": render_projects(data.projects),
        "certifications_section": render_certifications(data.certifications),
        "interests_section": render_interests(data.interests),
    }


def _header_photo_slots(data, template_id):
    slots = _standard_slots(data, template_id)
    slots["profile_picture"] = render_profile_picture(data.personal_info)
    return slots


def _sidebar_slots(data, template_id):
    main = {"section_class": "main-section", "title_class": "main-section-title"}
    return {
        "profile_picture": render_profile_picture(data.personal_info),
        "contact_items": render_contact_items(data.personal_info),
        "skills_section": render_skills(data.skills, tag="div"),
        "languages_section": render_languages(data.languages, tag="div"),
        "interests_section": render_interests(data.interests, tag="div"),
        "summary_section": render_summary(data.summary, **main),
        "experience_section": render_experience(data.experience, **main),
        "education_section": render_education(data.education, **main),
        "projects_section": render_projects(data.projects, **main),
        "certifications_section": render_certifications(data.certifications, **main),
    }


def _timeline_sidebar_slots(data, template_id):
    main = {"section_class": "main-section", "title_class": "main-section-title"}
    side = {"section_class": "sidebar-section", "title_class": "sidebar-title"}
    return {
        "profile_picture": render_profile_picture(data.personal_info),
        "contact_items": render_contact_items(data.personal_info, phone_first=True),
        "education_section": render_sidebar_education(data.education),
        "skills_section": render_skills(data.skills, list_class="skills-list", **side),
        "languages_section": render_languages(data.languages, list_class="languages-list", **side),
        "interests_section": render_interests(data.interests, list_class="interests-list", **side),
        "summary_section": render_summary(data.summary, title="Profile", text_class="profile-text", **main),
        "experience_section": render_experience(data.experience, title="Work Experience", **main),
        "projects_section": render_projects(data.projects, **main),
        "certifications_section": render_certifications(data.certifications, **main),
    }


LAYOUT_BUILDERS = {
    LayoutVariant.STANDARD: _standard_slots,
    LayoutVariant.HEADER_PHOTO: _header_photo_slots,
    LayoutVariant.SIDEBAR: _sidebar_slots,
    LayoutVariant.TIMELINE_SIDEBAR: _timeline_sidebar_slots,
}


def resolve_layout(template_id) -> LayoutVariant:
    template = get_template_by_id(template_id)
    if template is None:
        return LayoutVariant.STANDARD
    return template.layout_variant


# Final HTML Resume Generator
def render_document(resume_data, template_id=DEFAULT_TEMPLATE) -> str:
    if not isinstance(resume_data, ResumeData):
        resume_data = ResumeData.model_validate(resume_data or {})

    layout = resolve_layout(template_id)
    info = resume_data.personal_info

    slots = LAYOUT_BUILDERS[layout](resume_data, template_id)
    slots.update(
        document_title=escape(get_placeholder(info.name, "Resume")),
        name=get_placeholder_or_empty(info.name, NAME_PLACEHOLDER),
        title=get_placeholder_or_empty(info.title, TITLE_PLACEHOLDER),
    )

    html = fill_template(load_template(layout.value), slots)
    logging.debug("Rendered template %s via %s layout (%s chars)", template_id, layout.value, len(html))
    return html
