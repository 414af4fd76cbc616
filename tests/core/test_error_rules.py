# tests/core/test_error_rules.py
import pytest

from a11y_auditor import api


def _message(rule, html):
    return api.check(rule, html).message


# --- Images ---

def test_image_without_alt():
    """An image with size attributes but no alt still fails."""
    result = api.check_images_have_alt('<img src="/x.png" width="144" height="144" />')
    assert "is missing the alt attribute" in result.message
    assert result.message == '<img src="/x.png"> is missing the alt attribute'


@pytest.mark.parametrize("html", [
    '<img src="/x.png" alt="">',
    '<img src="/x.png" alt="Logo">',
    '<input type="text" name="q">',
])
def test_image_alt_passes(html):
    """Empty alt marks a decorative image and is valid."""
    assert api.check_images_have_alt(html).passed


def test_whitespace_alt_and_image_input():
    html = '<img src="a.png" alt=" "><input type="image" src="go.png">'
    result = api.check_images_have_alt(html)
    assert result.message.splitlines() == [
        "Found images without proper alt attributes:",
        '- <img src="a.png"> has an alt attribute with only whitespace',
        '- <input type="image" src="go.png"> is missing the alt attribute',
    ]


def test_image_sources():
    assert _message("images_have_valid_source", '<img alt="A">') == (
        '<img alt="A"> is missing both src and srcset attributes'
    )
    assert _message("images_have_valid_source", '<img src="#" alt="A">') == '<img alt="A"> has invalid src="#"'
    assert api.check_images_have_valid_source('<img srcset="a.png 2x" alt="A">').passed


def test_role_img_needs_label():
    assert _message("role_img_has_label", '<div role="img"></div>') == (
        '<div role="img"> is missing aria-label or aria-labelledby'
    )
    assert api.check_role_img_has_label('<div role="img" aria-label="Chart"></div>').passed
    assert api.check_role_img_has_label('<div role="img" aria-hidden="true"></div>').passed


# --- Links and focus ---

def test_positive_tabindex_summary():
    html = '<div tabindex="1">a</div><a href="/b" tabindex="2">b</a><span tabindex="0">c</span><p tabindex="-1">d</p>'
    result = api.check_tabindex_not_positive(html)
    assert result.message.splitlines() == [
        "Found elements with tabindex > 0:",
        '- <DIV tabindex="1"> has a positive tabindex value',
        '- <A tabindex="2"> has a positive tabindex value',
    ]


def test_empty_href():
    assert _message("href_not_empty", '<a href="">Home</a>') == '<a href="">Home</a> has an empty href attribute'
    assert api.check_href_not_empty('<a href="/">Home</a>').passed


def test_empty_link_without_label():
    assert _message("links_have_accessible_name", '<a id="l" href="/x"></a>') == (
        '<a id="l" href="/x"> is empty and has no accessible label'
    )
    assert api.check_links_have_accessible_name('<a href="/x" aria-label="Home"></a>').passed


def test_accesskey():
    assert _message("no_accesskey", '<a href="/" accesskey="h">Home</a>') == (
        '<A> has accesskey="h" (may conflict with browser/OS shortcuts)'
    )


def test_whitespace_in_id():
    assert _message("attributes_have_no_whitespace", '<div id="my id"></div>') == (
        '<DIV id="my id"> contains whitespace in the id attribute'
    )
    assert api.check_attributes_have_no_whitespace('<map name="a b"></map>').message.endswith("in the name attribute")
    assert api.check_attributes_have_no_whitespace('<a name="a b"></a>').passed


# --- Forms ---

def test_form_field_without_label():
    assert _message("form_fields_have_label", '<input type="text" name="q">') == (
        '<input type="text" name="q"> is missing a label '
        '(label[for], wrapping <label>, aria-label, title, or aria-labelledby)'
    )


@pytest.mark.parametrize("html", [
    '<label for="q">Search</label><input type="search" id="q">',
    '<label>Search <input type="search"></label>',
    '<select aria-label="Size"><option>S</option></select>',
    '<input type="hidden" name="token">',
    '<input type="submit" value="Go">',
])
def test_form_field_labels_pass(html):
    assert api.check_form_fields_have_label(html).passed


def test_label_with_blank_for():
    assert _message("label_for_not_empty", '<label for=" ">Name</label>') == (
        '<label for=" ">Name</label> has an empty or whitespace-only for attribute'
    )


def test_button_input_without_label():
    assert _message("button_inputs_have_label", '<input type="submit">') == (
        '<input type="submit"> is missing a label (value, title, aria-label, or aria-labelledby)'
    )
    assert api.check_button_inputs_have_label('<input type="reset" value="Reset">').passed


def test_button_rules():
    assert _message("buttons_have_accessible_name", '<button type="button"></button>') == (
        '<button type="button"> is empty and has no accessible label'
    )
    assert _message("button_attributes_not_empty", '<button type="button" title="">OK</button>') == (
        '<button type="button">OK</button> has an empty title attribute'
    )
    assert _message("buttons_have_type", "<button>Go</button>") == "<button>Go</button> is missing a type attribute"
    assert api.check_buttons_have_type('<button form="f">Go</button>').passed


def test_form_attributes_on_non_submit_button():
    html = '<button type="button" formaction="/x">Go</button>'
    assert _message("non_submit_buttons_have_no_form_attributes", html) == (
        'Button with type="button" has invalid form attributes [formaction]: '
        '<button type="button" formaction="/x">Go</button>'
    )
    assert api.check_non_submit_buttons_have_no_form_attributes(
        '<button type="submit" formaction="/x">Go</button>'
    ).passed


def test_disabled_styling():
    html = '<button type="button" class="btn is-Disabled">X</button>'
    assert _message("disabled_styled_controls_are_disabled", html).startswith(
        'Button with class="btn is-Disabled" is styled as disabled but is not actually disabled: '
    )
    assert api.check_disabled_styled_controls_are_disabled(
        '<button type="button" class="disabled" disabled>X</button>'
    ).passed


def test_input_without_type():
    assert _message("inputs_have_type", '<input name="q">') == (
        'Input (name="q") is missing a valid type attribute: <input name="q">'
    )


def test_optgroup_without_label():
    assert _message("optgroups_have_label", "<select><optgroup><option>1</option></optgroup></select>") == (
        "Optgroup is missing a label attribute: <optgroup><option>1</option></optgroup>"
    )


def test_form_without_action():
    assert _message("forms_have_action", '<form id="f"></form>') == (
        'Form (id="f") is missing a valid action attribute: <form id="f"></form>'
    )


def test_radio_and_checkbox_names():
    """A lone checkbox needs no name; radios always do."""
    assert _message("radio_checkbox_inputs_have_name", '<fieldset><input type="radio" id="r1"></fieldset>') == (
        '<input type="radio" id="r1"> lacks [name] attribute (required for grouping)'
    )
    assert api.check_radio_checkbox_inputs_have_name('<input type="checkbox">').passed

    result = api.check_radio_checkbox_inputs_have_name('<input type="checkbox"><input type="checkbox" name="b">')
    assert result.message == '<input type="checkbox"> lacks [name] attribute (required when multiple checkboxes exist)'


def test_radio_outside_fieldset():
    assert _message("radios_inside_fieldset", '<input type="radio" name="a">') == (
        '<input type="radio" name="a"> is not inside a <fieldset> (recommended for grouping)'
    )


# --- Frames and documents ---

def test_iframes_without_title_use_counted_header():
    html = '<iframe src="/embed"></iframe><iframe title=" "></iframe><iframe title="Map"></iframe>'
    lines = _message("iframes_have_title", html).splitlines()
    assert lines[0] == "Found 2 iframes without a valid title attribute:"
    assert lines[1].startswith('- Iframe (src="/embed") is missing a valid title attribute: ')
    assert len(lines) == 3


@pytest.mark.parametrize("html,message", [
    ("<html><body></body></html>", "HTML element is missing a lang attribute"),
    ('<html lang=""><body></body></html>', "HTML element has an empty lang attribute"),
    ('<html lang="en US"><body></body></html>', 'HTML element has a lang attribute containing whitespace: lang="en US"'),
])
def test_html_lang(html, message):
    assert _message("html_has_valid_lang", html) == message


def test_missing_title_is_document_level():
    result = api.check_title_not_empty("<p>Hello</p>")
    assert result.message == "Document is missing a <title> tag"
    assert result.violations[0].element is None


def test_blank_title():
    assert _message("title_not_empty", "<title> </title>") == (
        "Title tag is empty or contains only whitespace: <title> </title>"
    )


def test_viewport_blocks_zoom():
    html = '<meta name="viewport" content="width=device-width, user-scalable=no">'
    assert _message("viewport_allows_zoom", html).startswith("Viewport meta tag restricts zoom [user-scalable=no]: ")
    assert api.check_viewport_allows_zoom('<meta name="viewport" content="width=device-width">').passed


def test_charset_rules():
    assert _message("charset_is_utf8", '<meta charset="iso-8859-1">') == (
        'Meta charset is not UTF-8 [charset="iso-8859-1"]: <meta charset="iso-8859-1">'
    )
    assert api.check_charset_is_utf8('<meta charset="UTF-8">').passed

    html = '<html><head><title>T</title><meta charset="utf-8"></head></html>'
    assert _message("charset_is_first", html) == (
        "First child of <head> is <title> instead of charset meta tag: <title>T</title>"
    )


def test_invalid_dir_value():
    assert _message("dir_attribute_is_valid", '<p dir="up">x</p>') == (
        '<P> has invalid dir="up" (must be "rtl", "ltr", or "auto")'
    )
    assert api.check_dir_attribute_is_valid('<p dir="RTL">x</p>').passed


# --- Markup hygiene ---

def test_presentation_table_semantics():
    html = '<table role="presentation"><tr><th>H</th><td scope="row">x</td></tr></table>'
    lines = _message("presentation_tables_have_no_semantics", html).splitlines()
    assert lines[0] == "Found 2 semantic elements in presentation tables:"
    assert lines[1] == "- Presentation table contains semantic element <th>: <th>H</th>"
    assert lines[2].startswith("- Presentation table contains element with semantic attribute(s) [scope]: ")


def test_width_on_layout_element():
    assert _message("width_height_on_allowed_elements", '<div width="10">x</div>') == (
        'Element <div> has inappropriate width attribute: <div width="10">x</div>'
    )


@pytest.mark.parametrize("html", [
    '<img src="a.png" alt="A" width="10" height="10">',
    '<svg width="10"><rect width="5" height="5"></rect></svg>',
    '<video width="320"></video>',
    '<picture><source srcset="a.webp" width="10"></picture>',
])
def test_width_on_embedded_content_passes(html):
    assert api.check_width_height_on_allowed_elements(html).passed


def test_inline_event_handlers():
    assert _message("no_inline_event_handlers", '<div onclick="go()">x</div>') == (
        'Element <div> has JavaScript event attribute(s) [onclick]: <div onclick="go()">x</div>'
    )


def test_invalid_css_identifiers():
    assert _message("css_identifiers_are_valid", '<div id="1st" class="ok --bad">x</div>').startswith(
        'Element <div> has invalid CSS identifier(s) [id="1st", class="--bad"]: '
    )


# --- ARIA ---

def test_slider_missing_attributes():
    result = api.check_slider_role_has_required_attributes('<div role="slider" aria-valuenow="50"></div>')
    assert result.message == '<DIV role="slider"> missing required attributes: [aria-valuemin], [aria-valuemax]'


def test_checkbox_role_missing_checked():
    assert _message("checkbox_role_has_aria_checked", '<span id="c" role="checkbox"></span>') == (
        '<SPAN id="c" role="checkbox"> missing required attribute: [aria-checked]'
    )
    assert api.check_checkbox_role_has_aria_checked('<span role="checkbox" aria-checked="false"></span>').passed


def test_role_tokens_are_case_insensitive():
    assert not api.check_combobox_role_has_aria_expanded('<input type="text" role="Combobox">').passed


# --- Nesting ---

@pytest.mark.parametrize("html,message", [
    ('<a href="/x"><button type="button">Go</button></a>', "<BUTTON> nested inside <A>"),
    ('<button type="button"><a href="/x">Go</a></button>', "<A> nested inside <BUTTON>"),
    ('<a href="/" id="home"><span><button type="button">Go</button></span></a>', '<BUTTON> nested inside <A id="home">'),
])
def test_nested_interactive(html, message):
    assert _message("no_nested_interactive_elements", html) == message


def test_nested_interactive_names_nearest_container():
    """The closest enclosing interactive element is reported, not the one that triggered the rule."""
    result = api.check_no_nested_interactive_elements(
        '<button type="button"><label><a href="/x">Go</a></label></button>'
    )
    assert [v.message for v in result.violations] == [
        "<LABEL> nested inside <BUTTON>",
        "<A> nested inside <LABEL>",
    ]


def test_hidden_input_inside_link_passes():
    assert api.check_no_nested_interactive_elements('<a href="/x"><input type="hidden" name="t">Go</a>').passed
