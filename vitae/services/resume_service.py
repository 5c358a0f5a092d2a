import logging

from vitae.exceptions import DocumentGenerationError, ResumeValidationError
from vitae.render_resume import render_document
from vitae.services.subscription_service import ensure_template_access
from vitae.validation import validate_resume_data


def generate_document(resume_data, template_id: str) -> str:
    # Calls render_document and turns crashes or empty output into one error type
    try:
        html = render_document(resume_data, template_id)
    except Exception as e:
        logging.error("Error generating HTML for template %s: %s", template_id, e)
        raise DocumentGenerationError(str(e)) from e

    if not html or not html.strip():
        logging.error("Generated HTML is empty for template %s", template_id)
        raise DocumentGenerationError("Generated HTML is empty")

    return html


def generate_html_resume_service(resume_data, template_id: str):
    return {"html": generate_document(resume_data, template_id)}


def prepare_export(resume_data, template_id: str, user_id: str | None = None) -> str:
    """
    Run the export gates and return the document HTML.

    Validation comes first so the user sees every missing field even when the
    template would also be refused.
    """
    validation = validate_resume_data(resume_data)
    if not validation.is_valid:
        logging.warning("Export blocked by %s validation errors", len(validation.errors))
        raise ResumeValidationError(validation.errors)

    ensure_template_access(template_id, user_id)

    html = generate_document(resume_data, template_id)
    logging.info("HTML generated successfully for template %s, length: %s", template_id, len(html))
    return html
