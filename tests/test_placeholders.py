from vitae.placeholders import (
    PLACEHOLDER_STYLE,
    get_first_name,
    get_initials,
    get_placeholder,
    get_placeholder_or_empty,
    is_blank,
)


def test_is_blank():
    assert is_blank(None)
    assert is_blank("")
    assert is_blank("   ")
    assert not is_blank("x")


def test_get_placeholder_returns_value_or_fallback():
    assert get_placeholder("Ada", "Your Name") == "Ada"
    assert get_placeholder("", "Your Name") == "Your Name"
    assert get_placeholder("  ", "Your Name") == "Your Name"
    assert get_placeholder(None, "Your Name") == "Your Name"


def test_get_placeholder_or_empty_wraps_fallback():
    html = get_placeholder_or_empty("", "Your Name")
    assert html == f'<span class="placeholder" style="{PLACEHOLDER_STYLE}">Your Name</span>'


def test_get_placeholder_or_empty_escapes_value():
    assert get_placeholder_or_empty("A & B <i>", "x") == "A &amp; B &lt;i&gt;"


def test_get_initials():
    assert get_initials("Ada Lovelace") == "AL"
    assert get_initials("mary ann evans") == "MAE"
    assert get_initials("  cher ") == "C"
    assert get_initials("") == "JD"
    assert get_initials(None) == "JD"


def test_get_first_name():
    assert get_first_name("Ada Lovelace") == "Ada"
    assert get_first_name("   ") == "John"
