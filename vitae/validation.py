from vitae.models import ResumeData, ValidationResult
from vitae.placeholders import is_blank

NAME_REQUIRED = "Name is required"
TITLE_REQUIRED = "Professional title is required"
EMAIL_REQUIRED = "Email is required"
PHONE_REQUIRED = "Phone number is required"
SUMMARY_REQUIRED = "Professional summary is required"
EXPERIENCE_REQUIRED = (
    "At least one experience entry with company, position, start date and description is required"
)
EDUCATION_REQUIRED = (
    "At least one education entry with school, degree and graduation year is required"
)
SKILLS_REQUIRED = "At least one skill is required"


def _complete_experience(job) -> bool:
    return (
        not is_blank(job.company)
        and not is_blank(job.position)
        and not is_blank(job.start_date)
        and any(not is_blank(bullet) for bullet in job.description)
    )


def _complete_education(edu) -> bool:
    return not (is_blank(edu.school) or is_blank(edu.degree) or is_blank(edu.graduation_year))


def validate_resume_data(data) -> ValidationResult:
    """
    Check resume data before export.

    Every rule is evaluated, so the result lists all problems at once
    rather than stopping at the first one.
    """
    if not isinstance(data, ResumeData):
        data = ResumeData.model_validate(data or {})

    errors = []
    info = data.personal_info

    if is_blank(info.name):
        errors.append(NAME_REQUIRED)
    if is_blank(info.title):
        errors.append(TITLE_REQUIRED)
    if is_blank(info.email):
        errors.append(EMAIL_REQUIRED)
    if is_blank(info.phone):
        errors.append(PHONE_REQUIRED)

    if is_blank(data.summary):
        errors.append(SUMMARY_REQUIRED)
    if not any(_complete_experience(job) for job in data.experience):
        errors.append(EXPERIENCE_REQUIRED)
    if not any(_complete_education(edu) for edu in data.education):
        errors.append(EDUCATION_REQUIRED)
    if not any(not is_blank(skill) for skill in data.skills):
        errors.append(SKILLS_REQUIRED)

    return ValidationResult(is_valid=not errors, errors=errors)
