# tests/core/test_advice_rules.py
import pytest

from a11y_auditor import api
from a11y_auditor.exceptions import AccessibilityAssertionError


# --- Forms ---

def test_required_select_without_empty_first_option():
    """A required select whose first option carries a value fails."""
    result = api.check_required_select_has_empty_first_option(
        '<select required><option value="1">Cheese</option></select>'
    )
    assert not result.passed
    assert "should start with an empty <option>" in result.message
    assert '(current first value: "1")' in result.message


@pytest.mark.parametrize("html", [
    '<select required><option value="">Choose</option><option value="1">Cheese</option></select>',
    '<select required><option></option><option>Cheese</option></select>',
    '<select required multiple><option value="1">Cheese</option></select>',
    '<select required size="4"><option value="1">Cheese</option></select>',
    '<select><option value="1">Cheese</option></select>',
    '<select required></select>',
])
def test_required_select_passes(html):
    assert api.check("required_select_has_empty_first_option", html).passed


def test_required_select_uses_option_text_without_value():
    """Without a value attribute the option's text is its value."""
    result = api.check_required_select_has_empty_first_option(
        '<select id="cheese" required><option>Pick one</option></select>'
    )
    assert result.message == (
        '<select id="cheese" required> should start with an empty <option> (current first value: "Pick one")'
    )


def test_placeholder_as_label():
    """A placeholder is not a label on its own."""
    result = api.check_no_placeholder_as_label('<input type="text" id="n" placeholder="Name">')
    assert 'placeholder="Name"> uses placeholder as label' in result.message


@pytest.mark.parametrize("html", [
    '<label for="n">Name</label><input id="n" placeholder="Name">',
    '<label>Name <input placeholder="Name"></label>',
    '<input placeholder="Name" aria-label="Name">',
    '<textarea placeholder="Comment" title="Comment"></textarea>',
    '<input id="n">',
])
def test_placeholder_with_label_passes(html):
    assert api.check_no_placeholder_as_label(html).passed


# --- Attributes ---

def test_empty_class_attributes_are_summarised():
    """Two offenders produce the summary header followed by one line each."""
    result = api.check_class_attribute_not_empty('<div class=""></div><span id="s" class="  "></span>')
    assert result.message.splitlines() == [
        "Found elements with empty class attributes:",
        '- <DIV class=""> has an empty class attribute',
        '- <SPAN id="s" class="  "> has an empty class attribute',
    ]


def test_empty_id_attribute():
    result = api.check_id_attribute_not_empty('<div id=""></div><p id="ok"></p>')
    assert result.message == '<DIV id=""> has an empty id attribute'


# --- Landmarks and structure ---

def test_second_visible_main():
    result = api.check_only_one_visible_main('<main id="a"></main><main id="b"></main><main hidden></main>')
    assert len(result.violations) == 1
    assert result.message == '<main id="b"> is a second visible main element'


def test_hidden_second_main_passes():
    assert api.check_only_one_visible_main("<main></main><main hidden></main>").passed


def test_duplicate_landmark_roles():
    """Only the repeated landmark is reported."""
    html = '<div role="banner"></div><div role="main" id="one"></div><div role="main" id="two"></div>'
    result = api.check_unique_landmark_roles(html)
    assert result.message == '<div id="two" role="main"> is a duplicate - role="main" should be unique'


def test_figcaption_rules():
    html = '<figure><img src="a.png" alt="A"><figcaption>a</figcaption><figcaption>b</figcaption><p>c</p></figure>'
    assert "is a second figcaption within <figure>" in api.check_only_one_figcaption(html).message
    assert not api.check_figcaption_is_first_or_last_child(html).passed

    ok = '<figure><figcaption>a</figcaption><img src="a.png" alt="A"></figure>'
    assert api.check_only_one_figcaption(ok).passed
    assert api.check_figcaption_is_first_or_last_child(ok).passed


def test_link_with_button_role():
    result = api.check_no_button_role_on_links('<a href="#" role="button">Open</a>')
    assert result.message == '<a role="button"> should be a <button> element'


@pytest.mark.parametrize("scope,passes", [
    ("col", True),
    ("COL", True),
    (" col ", True),
    ("row", True),
    ("column", False),
    ("", False),
])
def test_th_scope(scope, passes):
    """Scope is trimmed and compared case-insensitively."""
    html = f'<table><tr><th scope="{scope}">H</th></tr></table>'
    assert api.check_table_header_scope_is_valid(html).passed is passes


# --- Links ---

def test_insecure_url():
    """The literal href is quoted in the message."""
    result = api.check_no_insecure_urls('<a href="http://www.example.com/">Link</a>')
    assert "uses insecure HTTP protocol" in result.message
    assert 'href="http://www.example.com/"' in result.message


@pytest.mark.parametrize("html", [
    '<a href="https://www.example.com/">Link</a>',
    '<a href="/relative">Link</a>',
    '<img src="//cdn.example.com/a.png" alt="A">',
    '<a href="ftp://example.com/file">File</a>',
])
def test_secure_or_relative_urls_pass(html):
    assert api.check_no_insecure_urls(html).passed


def test_invalid_mailto_address():
    result = api.check_mailto_links_are_valid('<a href="mailto:a@x.com,bad?subject=Hi">Mail</a>')
    assert result.message == '<a href="mailto:a@x.com,bad"> contains invalid email address: "bad"'


def test_valid_mailto_passes():
    assert api.check_mailto_links_are_valid('<a href="MAILTO:user@example.com">Mail</a>').passed


@pytest.mark.parametrize("rule,scheme", [
    ("tel_links_are_valid", "tel"),
    ("fax_links_are_valid", "fax"),
    ("modem_links_are_valid", "modem"),
])
def test_phone_links(rule, scheme):
    """Each dial scheme is validated by its own rule."""
    assert api.check(rule, f'<a href="{scheme}:+33 1 23 45 67 89">Call</a>').passed

    result = api.check(rule, f'<a href="{scheme}:123;ext=1">Call</a>')
    assert result.message == f'<a href="{scheme}:123"> contains invalid phone number'


def test_assert_raises_with_rendered_message():
    """assert_<rule> raises an assertion error carrying the result."""
    with pytest.raises(AccessibilityAssertionError) as exc_info:
        api.assert_no_insecure_urls('<img src="http://example.com/a.png" alt="A">')
    assert "uses insecure HTTP protocol" in str(exc_info.value)
    assert exc_info.value.result.rule == "no_insecure_urls"
