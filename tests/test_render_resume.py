import pytest

from vitae.models import ResumeData
from vitae.render_resume import (
    fill_template,
    render_bullets,
    render_date_range,
    render_document,
    render_profile_picture,
    resolve_layout,
)
from vitae.template_registry import AVAILABLE_TEMPLATES, LayoutVariant


@pytest.mark.parametrize("template", AVAILABLE_TEMPLATES, ids=lambda t: t.id)
def test_every_template_renders_empty_data(template, empty_resume):
    html = render_document(empty_resume, template.id)

    assert html.strip().startswith("<!DOCTYPE html>")
    assert "Your Name" in html
    assert "Professional Title" in html
    assert "your.email@example.com" in html
    assert "{{" not in html


def test_unknown_template_renders_standard_layout(complete_resume):
    assert resolve_layout("no-such-template") == LayoutVariant.STANDARD
    html = render_document(complete_resume, "no-such-template")
    assert "Ada Lovelace" in html


def test_none_renders_like_empty():
    assert render_document(None, "modern") == render_document({}, "modern")


def test_rendering_is_deterministic(complete_resume):
    first = render_document(complete_resume, "pink-minimalist")
    second = render_document(complete_resume, "pink-minimalist")
    assert first == second


def test_filled_fields_replace_placeholders(complete_resume):
    html = render_document(complete_resume, "simple-professional")

    assert "Ada Lovelace" in html
    assert "<title>Ada Lovelace</title>" in html
    assert "Your Name" not in html
    assert "ada@example.com" in html
    assert "London, UK" in html


def test_optional_contact_items_are_omitted(complete_resume):
    html = render_document(complete_resume, "simple-professional")
    assert "🌐" not in html
    assert "💻" not in html


def test_open_ended_job_reads_present(complete_resume):
    html = render_document(complete_resume, "simple-professional")
    assert "1842 - 1843" in html
    assert "1844 - Present" in html


def test_entries_keep_their_order(complete_resume):
    html = render_document(complete_resume, "simple-professional")
    assert html.index("Analytical Engine Co") < html.index("Royal Society")
    assert html.index("Mathematics</span>") < html.index("Algorithms</span>")


def test_string_description_renders_as_bullet(complete_resume):
    html = render_document(complete_resume, "simple-professional")
    assert "<li>Letters on poetical science</li>" in html


def test_empty_sections_are_left_out(empty_resume):
    html = render_document(empty_resume, "simple-professional")
    assert "Professional Experience" not in html
    assert "Education" not in html
    assert "Skills" not in html


def test_user_text_is_escaped(complete_resume):
    complete_resume["personalInfo"]["name"] = "<script>alert(1)</script>"
    complete_resume["skills"] = ["C & C++"]

    html = render_document(complete_resume, "blue-simple")

    assert "<script>alert(1)</script>" not in html
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in html
    assert "C &amp; C++" in html


def test_slot_syntax_in_user_text_is_not_expanded(complete_resume):
    complete_resume["summary"] = "I like {{styles}} and {{name}}"
    html = render_document(complete_resume, "simple-professional")
    assert "I like {{styles}} and {{name}}" in html


def test_fill_template_blanks_unknown_slots():
    assert fill_template("a{{x}}b{{y}}c", {"x": "1"}) == "a1bc"


def test_timeline_sidebar_layout(complete_resume):
    html = render_document(complete_resume, "blue-simple")

    assert "Work Experience" in html
    assert "Profile" in html
    assert 'class="skills-list"' in html
    assert html.index("+44 20 7946 0000") < html.index("ada@example.com")


def test_header_photo_layout_shows_initials(complete_resume):
    html = render_document(complete_resume, "neutral-simple")
    assert 'class="profile-picture">AL<' in html


def test_photo_templates_without_photo_show_default_initials(empty_resume):
    html = render_document(empty_resume, "pink-minimalist")
    assert 'class="profile-picture">JD<' in html


def test_profile_picture_applies_adjustments():
    data = ResumeData.model_validate({
        "personalInfo": {
            "name": "Ada",
            "photo": "data:image/png;base64,AAAA",
            "photoAdjustments": {"scale": 1.5, "translateX": 10, "translateY": -4, "rotation": 90},
        },
    })

    html = render_profile_picture(data.personal_info)

    assert 'src="data:image/png;base64,AAAA"' in html
    assert "transform: scale(1.5) translate(10px, -4px) rotate(90deg);" in html


def test_profile_picture_without_adjustments():
    data = ResumeData.model_validate({"personalInfo": {"photo": "https://example.com/me.png"}})
    html = render_profile_picture(data.personal_info)
    assert "scale(1) translate(0px, 0px) rotate(0deg)" in html


def test_standard_templates_do_not_render_photo(complete_resume):
    complete_resume["personalInfo"]["photo"] = "https://example.com/me.png"
    html = render_document(complete_resume, "simple-professional")
    assert "me.png" not in html


def test_render_date_range():
    assert render_date_range("2020", "2022") == "2020 - 2022"
    assert render_date_range("2020", "  ") == "2020 - Present"


def test_render_bullets_skips_blank_entries():
    assert render_bullets(["one", " ", "two "]) == "<ul><li>one</li><li>two</li></ul>"
    assert render_bullets(["", "  "]) == ""


def test_projects_and_certifications(complete_resume):
    complete_resume["projects"] = [
        {"name": "Difference Engine", "description": "Notes", "technologies": ["Brass", "Cards"], "url": "example.com"},
    ]
    complete_resume["certifications"] = [
        {"name": "Fellow", "issuer": "Royal Society", "date": "1843"},
    ]

    html = render_document(complete_resume, "simple-professional")

    assert "Projects" in html
    assert "Difference Engine" in html
    assert "Brass, Cards" in html
    assert "Certifications" in html
    assert "Fellow" in html
