from typing import List, Optional, Sequence

from ..dom.core import Category, ElementNode, Finding, RuleDefinition, rule_spec
from ..dom.models import HTMLDocument
from ..dom.query import (
    ancestor_of_tag,
    ancestors,
    attr_equals_ci,
    first_element_child,
    format_attrs,
    has_accessible_name,
    is_blank,
    outer_html,
    text_content,
    truncate,
)
from ..validators import invalid_class_tokens, is_invalid_css_identifier, viewport_zoom_restrictions

INVALID_SOURCES = ("", "#", "/")
LABEL_EXEMPT_INPUT_TYPES = ("button", "submit", "hidden", "reset", "image")
BUTTON_INPUT_TYPES = ("reset", "submit", "button")
LABELABLE_FIELDS = ("input", "select", "textarea", "meter", "output", "progress")
FORM_SUBMISSION_ATTRS = ("formmethod", "formaction", "formtarget", "formenctype", "formnovalidate")
DISABLEABLE_CONTROLS = ("button", "input", "select", "textarea")
PRESENTATION_FORBIDDEN_TAGS = ("th", "thead", "tfoot", "caption", "colgroup")
PRESENTATION_FORBIDDEN_ATTRS = ("axis", "scope", "headers")
SIZING_ALLOWED_TAGS = ("img", "object", "embed", "svg", "canvas", "iframe", "video")
VALID_DIR_VALUES = ("rtl", "ltr", "auto")
SAME_TAG_NESTING = ("form", "label", "meter", "progress")
INTERACTIVE_CONTAINERS = ("a", "button") + SAME_TAG_NESTING

SNIPPET_LIMIT = 200
ID_TEMPLATE = ' id="{}"'


def _snippet(el: ElementNode) -> str:
    return truncate(outer_html(el).strip(), SNIPPET_LIMIT)


def _text_or_ellipsis(el: ElementNode) -> str:
    return text_content(el).strip() or "..."


def _input_type(el: ElementNode) -> str:
    return (el.get("type") or "").strip().lower()


def _has_role(el: ElementNode, role: str) -> bool:
    value = el.get("role")
    return value is not None and role in value.lower().split()


def _truthy_attr(el: ElementNode, name: str, template: str) -> str:
    value = el.get(name)
    return template.format(value) if value else ""


# --- RULES ---

@rule_spec("attributes_have_no_whitespace", summary="Found attributes containing whitespace:")
def check_attribute_whitespace(doc: HTMLDocument) -> List[Finding]:
    """id and lang on any element, and name on <map>, must be single tokens."""
    res = []
    for el in doc.iter_elements():
        candidates = ["id", "lang"] + (["name"] if el.tag == "map" else [])
        for name in candidates:
            value = el.get(name)
            if value is not None and any(ch.isspace() for ch in value):
                res.append((el, (
                    f'<{el.tag.upper()} {name}="{value}"> contains whitespace in the {name} attribute'
                )))
                break
    return res


@rule_spec("tabindex_not_positive", summary="Found elements with tabindex > 0:")
def check_positive_tabindex(doc: HTMLDocument) -> List[Finding]:
    res = []
    for el in doc.iter_elements():
        value = el.get("tabindex")
        if value is None:
            continue
        stripped = value.strip().lstrip("+")
        if stripped.isdigit() and int(stripped) > 0:
            res.append((el, f'<{el.tag.upper()} tabindex="{value}"> has a positive tabindex value'))
    return res


@rule_spec("href_not_empty", summary="Found links with empty href attributes:")
def check_empty_href(doc: HTMLDocument) -> List[Finding]:
    return [
        (a, f'<a href="{a.get("href")}">{_text_or_ellipsis(a)}</a> has an empty href attribute')
        for a in doc.find_all("a")
        if a.has("href") and is_blank(a.get("href"))
    ]


@rule_spec("links_have_accessible_name", summary="Found empty links without proper labels:")
def check_empty_links(doc: HTMLDocument) -> List[Finding]:
    return [
        (a, f'<a{format_attrs(a, ["id", "class"])} href="{a.get("href", "")}"> is empty and has no accessible label')
        for a in doc.find_all("a")
        if a.is_empty and not has_accessible_name(a)
    ]


@rule_spec("images_have_alt", summary="Found images without proper alt attributes:")
def check_images_alt(doc: HTMLDocument) -> List[Finding]:
    """Empty alt is a valid decorative marker; missing or whitespace-only alt is not."""
    res = []
    for el in doc.find_all("img", "area", "input"):
        if el.tag == "input" and _input_type(el) != "image":
            continue
        alt = el.get("alt")
        if alt is None:
            issue = "is missing the alt attribute"
        elif alt and not alt.strip():
            issue = "has an alt attribute with only whitespace"
        else:
            continue
        res.append((el, f'<{el.tag}{format_attrs(el, ["type"])} src="{el.get("src", "")}"> {issue}'))
    return res


@rule_spec("role_img_has_label", summary='Found elements with role="img" without proper labels:')
def check_role_img_label(doc: HTMLDocument) -> List[Finding]:
    res = []
    for el in doc.iter_elements():
        if not _has_role(el, "img") or attr_equals_ci(el, "aria-hidden", "true"):
            continue
        if not is_blank(el.get("aria-label")) or not is_blank(el.get("aria-labelledby")):
            continue
        res.append((el, (
            f'<{el.tag}{format_attrs(el, ["id", "class"])} role="img"> is missing aria-label or aria-labelledby'
        )))
    return res


@rule_spec("images_have_valid_source", summary="Found images without valid source attributes:")
def check_image_sources(doc: HTMLDocument) -> List[Finding]:
    res = []
    for el in doc.find_all("img", "input"):
        if el.tag == "input" and _input_type(el) != "image":
            continue
        src, srcset = el.get("src"), el.get("srcset")
        if src is None and srcset is None:
            issue = "is missing both src and srcset attributes"
        elif src is not None and src.strip() in INVALID_SOURCES:
            issue = f'has invalid src="{src}"'
        elif srcset is not None and srcset.strip() in INVALID_SOURCES:
            issue = f'has invalid srcset="{srcset}"'
        else:
            continue
        res.append((el, f'<{el.tag}{format_attrs(el, ["type"])} alt="{el.get("alt", "")}"> {issue}'))
    return res


@rule_spec("label_for_not_empty", summary="Found labels with empty or invalid for attributes:")
def check_label_for(doc: HTMLDocument) -> List[Finding]:
    return [
        (label, (
            f'<label for="{label.get("for")}">{_text_or_ellipsis(label)}</label> '
            f'has an empty or whitespace-only for attribute'
        ))
        for label in doc.find_all("label")
        if label.has("for") and is_blank(label.get("for"))
    ]


@rule_spec("form_fields_have_label", summary="Found form fields without proper labels:")
def check_form_field_labels(doc: HTMLDocument) -> List[Finding]:
    """
    A field is labelled by a <label for> pointing at its id, a wrapping <label>,
    or a non-blank aria-label, title or aria-labelledby.
    """
    res = []
    label_targets = {label.get("for") for label in doc.find_all("label") if not is_blank(label.get("for"))}
    for el in doc.find_all(*LABELABLE_FIELDS):
        if el.tag == "input" and _input_type(el) in LABEL_EXEMPT_INPUT_TYPES:
            continue
        if has_accessible_name(el):
            continue
        if el.get("id") and el.get("id") in label_targets:
            continue
        if ancestor_of_tag(el, "label") is not None:
            continue
        res.append((el, (
            f'<{el.tag}{format_attrs(el, ["type", "name", "class"])}> is missing a label '
            f'(label[for], wrapping <label>, aria-label, title, or aria-labelledby)'
        )))
    return res


@rule_spec("button_inputs_have_label", summary="Found button-type inputs without proper labels:")
def check_button_input_labels(doc: HTMLDocument) -> List[Finding]:
    res = []
    for el in doc.find_all("input"):
        input_type = _input_type(el)
        if input_type not in BUTTON_INPUT_TYPES:
            continue
        if not is_blank(el.get("value")) or has_accessible_name(el):
            continue
        res.append((el, (
            f'<input type="{el.get("type")}"{format_attrs(el, ["name", "class"])}> is missing a label '
            f'(value, title, aria-label, or aria-labelledby)'
        )))
    return res


@rule_spec("buttons_have_accessible_name", summary="Found empty buttons without proper labels:")
def check_empty_buttons(doc: HTMLDocument) -> List[Finding]:
    return [
        (b, f'<button{format_attrs(b, ["type", "name", "class"])}> is empty and has no accessible label')
        for b in doc.find_all("button")
        if b.is_empty and not has_accessible_name(b)
    ]


@rule_spec("button_attributes_not_empty", summary="Found buttons with empty label attributes:")
def check_button_label_attributes(doc: HTMLDocument) -> List[Finding]:
    res = []
    for b in doc.find_all("button"):
        for name in ("title", "aria-label", "aria-labelledby"):
            if b.has(name) and is_blank(b.get(name)):
                res.append((b, (
                    f'<button{format_attrs(b, ["type"])}>{_text_or_ellipsis(b)}</button> '
                    f'has an empty {name} attribute'
                )))
                break
    return res


@rule_spec("buttons_have_type", summary="Found buttons without type attributes:")
def check_button_type(doc: HTMLDocument) -> List[Finding]:
    return [
        (b, f'<button{format_attrs(b, ["name", "class"])}>{_text_or_ellipsis(b)}</button> is missing a type attribute')
        for b in doc.find_all("button")
        if not any(b.has(a) for a in ("type", "form", "formaction", "formtarget"))
    ]


@rule_spec("non_submit_buttons_have_no_form_attributes",
           summary='Found {count} buttons with type="reset" or type="button" using invalid form attributes:')
def check_non_submit_form_attributes(doc: HTMLDocument) -> List[Finding]:
    res = []
    for b in doc.find_all("button"):
        if _input_type(b) not in ("reset", "button"):
            continue
        present = [a for a in FORM_SUBMISSION_ATTRS if b.has(a)]
        if present:
            res.append((b, (
                f'Button with type="{b.get("type")}" has invalid form attributes '
                f'[{", ".join(present)}]: {_snippet(b)}'
            )))
    return res


@rule_spec("disabled_styled_controls_are_disabled",
           summary="Found {count} controls styled as disabled without proper disabled or readonly attributes:")
def check_disabled_styling(doc: HTMLDocument) -> List[Finding]:
    res = []
    for el in doc.find_all(*DISABLEABLE_CONTROLS):
        css_class = el.get("class") or ""
        if "disabled" not in css_class.lower():
            continue
        if el.has("disabled") or el.has("readonly"):
            continue
        res.append((el, (
            f'{el.tag.capitalize()} with class="{css_class}" is styled as disabled '
            f'but is not actually disabled: {_snippet(el)}'
        )))
    return res


@rule_spec("inputs_have_type", summary="Found {count} inputs without a valid type attribute:")
def check_input_type(doc: HTMLDocument) -> List[Finding]:
    res = []
    for el in doc.find_all("input"):
        if not is_blank(el.get("type")):
            continue
        identifier = _truthy_attr(el, "id", ' (id="{}")') or _truthy_attr(el, "name", ' (name="{}")')
        res.append((el, f"Input{identifier} is missing a valid type attribute: {_snippet(el)}"))
    return res


@rule_spec("optgroups_have_label", summary="Found {count} optgroups without a label attribute:")
def check_optgroup_label(doc: HTMLDocument) -> List[Finding]:
    return [
        (og, f"Optgroup is missing a label attribute: {_snippet(og)}")
        for og in doc.find_all("optgroup")
        if is_blank(og.get("label"))
    ]


@rule_spec("iframes_have_title", summary="Found {count} iframes without a valid title attribute:")
def check_iframe_title(doc: HTMLDocument) -> List[Finding]:
    res = []
    for el in doc.find_all("iframe"):
        if not is_blank(el.get("title")):
            continue
        identifier = ""
        if el.get("src"):
            identifier = f' (src="{el.get("src")}")'
        elif el.get("srcdoc"):
            identifier = f' (srcdoc="{truncate(el.get("srcdoc"), 50)}")'
        res.append((el, f"Iframe{identifier} is missing a valid title attribute: {_snippet(el)}"))
    return res


@rule_spec("forms_have_action", summary="Found {count} forms without a valid action attribute:")
def check_form_action(doc: HTMLDocument) -> List[Finding]:
    res = []
    for el in doc.find_all("form"):
        if not is_blank(el.get("action")):
            continue
        identifier = _truthy_attr(el, "id", ' (id="{}")') or _truthy_attr(el, "name", ' (name="{}")')
        res.append((el, f"Form{identifier} is missing a valid action attribute: {_snippet(el)}"))
    return res


@rule_spec("html_has_valid_lang", summary="HTML element must have a valid language defined:")
def check_html_lang(doc: HTMLDocument) -> List[Finding]:
    res = []
    for el in doc.find_all("html"):
        lang = el.get("lang")
        if lang is None:
            res.append((el, "HTML element is missing a lang attribute"))
        elif lang == "":
            res.append((el, "HTML element has an empty lang attribute"))
        elif any(ch.isspace() for ch in lang):
            res.append((el, f'HTML element has a lang attribute containing whitespace: lang="{lang}"'))
    return res


@rule_spec("presentation_tables_have_no_semantics",
           summary="Found {count} semantic elements in presentation tables:")
def check_presentation_tables(doc: HTMLDocument) -> List[Finding]:
    res = []
    for table in doc.find_all("table"):
        if not _has_role(table, "presentation"):
            continue
        for el in table.iter_descendants():
            if el.tag in PRESENTATION_FORBIDDEN_TAGS:
                res.append((el, f"Presentation table contains semantic element <{el.tag}>: {_snippet(el)}"))
                continue
            present = [a for a in PRESENTATION_FORBIDDEN_ATTRS if el.has(a)]
            if present:
                res.append((el, (
                    f"Presentation table contains element with semantic attribute(s) "
                    f"[{', '.join(present)}]: {_snippet(el)}"
                )))
    return res


@rule_spec("width_height_on_allowed_elements",
           summary="Found {count} elements with inappropriate width or height attributes (use CSS instead):")
def check_width_height(doc: HTMLDocument) -> List[Finding]:
    """Sizing attributes belong to embedded content only; table cells and layout boxes use CSS."""
    res = []
    for el in doc.iter_elements():
        if el.tag in SIZING_ALLOWED_TAGS:
            continue
        if el.tag == "source" and el.parent is not None and el.parent.tag == "picture":
            continue
        # Geometry inside inline SVG/MathML is foreign content
        if ancestor_of_tag(el, "svg", "math") is not None:
            continue
        for name in ("width", "height"):
            if el.has(name):
                res.append((el, f"Element <{el.tag}> has inappropriate {name} attribute: {_snippet(el)}"))
                break
    return res


@rule_spec("no_inline_event_handlers",
           summary="Found {count} elements with JavaScript event attributes "
                   "(use CSS pseudo-classes or addEventListener instead):")
def check_event_attributes(doc: HTMLDocument) -> List[Finding]:
    res = []
    for el in doc.iter_elements():
        handlers = [name for name in el.attrs if name.startswith("on") and len(name) > 2]
        if handlers:
            res.append((el, (
                f"Element <{el.tag}> has JavaScript event attribute(s) [{', '.join(handlers)}]: {_snippet(el)}"
            )))
    return res


@rule_spec("css_identifiers_are_valid",
           summary="Found {count} elements with invalid CSS identifiers (must not start with digit, --, or -digit):")
def check_css_identifiers(doc: HTMLDocument) -> List[Finding]:
    res = []
    for el in doc.iter_elements():
        invalid = []
        element_id = el.get("id")
        if element_id is not None and is_invalid_css_identifier(element_id):
            invalid.append(f'id="{element_id}"')
        invalid.extend(f'class="{token}"' for token in invalid_class_tokens(el.get("class") or ""))
        if invalid:
            res.append((el, f"Element <{el.tag}> has invalid CSS identifier(s) [{', '.join(invalid)}]: {_snippet(el)}"))
    return res


@rule_spec("title_not_empty", summary="Found {count} empty title tags:")
def check_title(doc: HTMLDocument) -> List[Finding]:
    titles = doc.find_all("title")
    if not titles:
        return [(None, "Document is missing a <title> tag")]
    return [
        (t, f"Title tag is empty or contains only whitespace: {_snippet(t)}")
        for t in titles
        if not text_content(t).strip()
    ]


@rule_spec("viewport_allows_zoom",
           summary="Found {count} viewport meta tags that restrict zoom "
                   "(users should be able to zoom for readability):")
def check_viewport_zoom(doc: HTMLDocument) -> List[Finding]:
    res = []
    for meta in doc.find_all("meta"):
        if not attr_equals_ci(meta, "name", "viewport"):
            continue
        issues = viewport_zoom_restrictions(meta.get("content") or "")
        if issues:
            res.append((meta, f"Viewport meta tag restricts zoom [{', '.join(issues)}]: {_snippet(meta)}"))
    return res


@rule_spec("charset_is_utf8",
           summary="Found {count} meta tags with incorrect charset "
                   "(use UTF-8 for maximum compatibility and security):")
def check_charset_utf8(doc: HTMLDocument) -> List[Finding]:
    return [
        (meta, f'Meta charset is not UTF-8 [charset="{meta.get("charset")}"]: {_snippet(meta)}')
        for meta in doc.find_all("meta")
        if meta.has("charset") and not attr_equals_ci(meta, "charset", "utf-8")
    ]


@rule_spec("charset_is_first",
           summary="Found {count} <head> elements where charset is not declared first "
                   "(charset must be the first element for security and compatibility):")
def check_charset_first(doc: HTMLDocument) -> List[Finding]:
    res = []
    for head in doc.find_all("head"):
        first = first_element_child(head)
        if first is None or (first.tag == "meta" and first.has("charset")):
            continue
        res.append((first, f"First child of <head> is <{first.tag}> instead of charset meta tag: {_snippet(first)}"))
    return res


@rule_spec("dir_attribute_is_valid",
           summary="Found {count} elements with invalid [dir] attribute (must be rtl, ltr, or auto):")
def check_dir_values(doc: HTMLDocument) -> List[Finding]:
    return [
        (el, f'<{el.tag.upper()}> has invalid dir="{el.get("dir")}" (must be "rtl", "ltr", or "auto")')
        for el in doc.iter_elements()
        if el.has("dir") and not attr_equals_ci(el, "dir", *VALID_DIR_VALUES)
    ]


@rule_spec("no_accesskey",
           summary="Found {count} elements using [accesskey] attribute "
                   "(creates conflicts with browser and OS shortcuts):")
def check_accesskey(doc: HTMLDocument) -> List[Finding]:
    return [
        (el, f'<{el.tag.upper()}> has accesskey="{el.get("accesskey")}" (may conflict with browser/OS shortcuts)')
        for el in doc.iter_elements()
        if el.has("accesskey")
    ]


@rule_spec("radio_checkbox_inputs_have_name",
           summary="Found {count} radio/checkbox inputs without [name] attribute (required for proper grouping):")
def check_radio_checkbox_names(doc: HTMLDocument) -> List[Finding]:
    """Radios always need a group name; checkboxes only once there is more than one."""
    inputs = doc.find_all("input")
    radios = [el for el in inputs if _input_type(el) == "radio"]
    checkboxes = [el for el in inputs if _input_type(el) == "checkbox"]

    res = []
    for radio in radios:
        if is_blank(radio.get("name")):
            res.append((radio, (
                f'<input type="radio"{_truthy_attr(radio, "id", ID_TEMPLATE)}> '
                f'lacks [name] attribute (required for grouping)'
            )))
    if len(checkboxes) > 1:
        for checkbox in checkboxes:
            if is_blank(checkbox.get("name")):
                res.append((checkbox, (
                    f'<input type="checkbox"{_truthy_attr(checkbox, "id", ID_TEMPLATE)}> '
                    f'lacks [name] attribute (required when multiple checkboxes exist)'
                )))
    return res


@rule_spec("radios_inside_fieldset",
           summary="Found {count} radio buttons outside <fieldset> (strongly recommended for accessibility):")
def check_radios_in_fieldset(doc: HTMLDocument) -> List[Finding]:
    res = []
    for radio in doc.find_all("input"):
        if _input_type(radio) != "radio" or ancestor_of_tag(radio, "fieldset") is not None:
            continue
        identifier = _truthy_attr(radio, "id", ID_TEMPLATE) or _truthy_attr(radio, "name", ' name="{}"')
        res.append((radio, f'<input type="radio"{identifier}> is not inside a <fieldset> (recommended for grouping)'))
    return res


def _missing_aria_attributes(doc: HTMLDocument, role: str, required: Sequence[str]) -> List[Finding]:
    res = []
    for el in doc.iter_elements():
        if not _has_role(el, role):
            continue
        missing = [name for name in required if not el.has(name)]
        if not missing:
            continue
        noun = "attributes" if len(required) > 1 else "attribute"
        listed = ", ".join(f"[{name}]" for name in missing)
        identifier = _truthy_attr(el, "id", ID_TEMPLATE)
        res.append((el, f'<{el.tag.upper()}{identifier} role="{role}"> missing required {noun}: {listed}'))
    return res


@rule_spec("slider_role_has_required_attributes",
           summary='Found {count} slider elements with role="slider" missing required ARIA attributes:')
def check_slider_role(doc: HTMLDocument) -> List[Finding]:
    return _missing_aria_attributes(doc, "slider", ("aria-valuemin", "aria-valuemax", "aria-valuenow"))


@rule_spec("spinbutton_role_has_required_attributes",
           summary='Found {count} spinbutton elements with role="spinbutton" missing required ARIA attributes:')
def check_spinbutton_role(doc: HTMLDocument) -> List[Finding]:
    return _missing_aria_attributes(doc, "spinbutton", ("aria-valuemin", "aria-valuemax", "aria-valuenow"))


@rule_spec("checkbox_role_has_aria_checked",
           summary='Found {count} checkbox elements with role="checkbox" '
                   'missing the required [aria-checked] attribute:')
def check_checkbox_role(doc: HTMLDocument) -> List[Finding]:
    return _missing_aria_attributes(doc, "checkbox", ("aria-checked",))


@rule_spec("combobox_role_has_aria_expanded",
           summary='Found {count} combobox elements with role="combobox" '
                   'missing the required [aria-expanded] attribute:')
def check_combobox_role(doc: HTMLDocument) -> List[Finding]:
    return _missing_aria_attributes(doc, "combobox", ("aria-expanded",))


@rule_spec("scrollbar_role_has_required_attributes",
           summary='Found {count} scrollbar elements with role="scrollbar" missing required ARIA attributes:')
def check_scrollbar_role(doc: HTMLDocument) -> List[Finding]:
    return _missing_aria_attributes(
        doc, "scrollbar",
        ("aria-controls", "aria-valuemin", "aria-valuemax", "aria-valuenow", "aria-orientation")
    )


def _is_interactive(el: ElementNode) -> bool:
    if el.tag in ("button", "details", "embed", "iframe", "label", "select", "textarea"):
        return True
    if el.tag == "a":
        return el.has("href")
    if el.tag in ("audio", "video"):
        return el.has("controls")
    if el.tag == "img":
        return el.has("usemap")
    if el.tag == "input":
        return _input_type(el) != "hidden"
    return False


def _interactive_container(el: ElementNode) -> Optional[ElementNode]:
    """
    The nearest enclosing a, button, form, label, meter or progress, provided
    `el` is an interactive element inside an <a>/<button> or one of those
    elements nested in its own kind.
    """
    interactive = _is_interactive(el)
    nested = any(
        (interactive and anc.tag in ("a", "button")) or (el.tag in SAME_TAG_NESTING and anc.tag == el.tag)
        for anc in ancestors(el)
    )
    if not nested:
        return None
    return next(anc for anc in ancestors(el) if anc.tag in INTERACTIVE_CONTAINERS)


@rule_spec("no_nested_interactive_elements",
           summary="Found {count} interactive elements nested inside other interactive elements:")
def check_nested_interactive(doc: HTMLDocument) -> List[Finding]:
    res = []
    for el in doc.iter_elements():
        container = _interactive_container(el)
        if container is None:
            continue
        res.append((el, (
            f"<{el.tag.upper()}{_truthy_attr(el, 'id', ID_TEMPLATE)}> nested inside "
            f"<{container.tag.upper()}{_truthy_attr(container, 'id', ID_TEMPLATE)}>"
        )))
    return res


# --- DEFINITION ---
DEFINITION = RuleDefinition(
    category=Category.ERRORS,
    rules=[
        check_attribute_whitespace,
        check_positive_tabindex,
        check_empty_href,
        check_empty_links,
        check_images_alt,
        check_role_img_label,
        check_image_sources,
        check_label_for,
        check_form_field_labels,
        check_button_input_labels,
        check_empty_buttons,
        check_button_label_attributes,
        check_button_type,
        check_non_submit_form_attributes,
        check_disabled_styling,
        check_input_type,
        check_optgroup_label,
        check_iframe_title,
        check_form_action,
        check_html_lang,
        check_presentation_tables,
        check_width_height,
        check_event_attributes,
        check_css_identifiers,
        check_title,
        check_viewport_zoom,
        check_charset_utf8,
        check_charset_first,
        check_dir_values,
        check_accesskey,
        check_radio_checkbox_names,
        check_radios_in_fieldset,
        check_slider_role,
        check_spinbutton_role,
        check_checkbox_role,
        check_combobox_role,
        check_scrollbar_role,
        check_nested_interactive,
    ]
)
