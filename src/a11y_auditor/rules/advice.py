from typing import List

from ..dom.core import Category, Finding, RuleDefinition, rule_spec
from ..dom.models import HTMLDocument
from ..dom.query import (
    ancestor_of_tag,
    element_identifier,
    first_element_child,
    has_attr,
    is_blank,
    last_element_child,
    previous_element_sibling,
    text_content,
)
from ..validators import is_valid_email, is_valid_phone_number, split_mailto, strip_phone_parameters

UNIQUE_LANDMARK_ROLES = ("main", "search", "banner", "contentinfo")


# --- RULES ---

@rule_spec("required_select_has_empty_first_option",
           summary="Found required select elements without an empty first option:")
def check_required_select(doc: HTMLDocument) -> List[Finding]:
    """
    A single-choice `<select required>` must open with a placeholder option whose
    value is empty, otherwise the browser treats the first real option as chosen.
    """
    res = []
    for select in doc.find_all("select"):
        if not select.has("required") or select.has("multiple"):
            continue
        size = select.get("size")
        if size is not None and size.strip() != "1":
            continue

        options = [el for el in select.iter_descendants() if el.tag == "option"]
        if not options:
            continue

        first = options[0]
        first_value = first.get("value") if first.has("value") else text_content(first)
        if first_value != "":
            res.append((select, (
                f'<select{element_identifier(select)} required> should start with an empty <option> '
                f'(current first value: "{first_value.strip()[:50]}")'
            )))
    return res


@rule_spec("class_attribute_not_empty", summary="Found elements with empty class attributes:")
def check_class_not_empty(doc: HTMLDocument) -> List[Finding]:
    res = []
    for el in doc.iter_elements():
        if el.has("class") and is_blank(el.get("class")):
            res.append((el, (
                f'<{el.tag.upper()}{element_identifier(el)} class="{el.get("class")}"> '
                f'has an empty class attribute'
            )))
    return res


@rule_spec("id_attribute_not_empty", summary="Found elements with empty id attributes:")
def check_id_not_empty(doc: HTMLDocument) -> List[Finding]:
    res = []
    for el in doc.iter_elements():
        if el.has("id") and is_blank(el.get("id")):
            name = f' name="{el.get("name")}"' if el.has("name") else ""
            res.append((el, f'<{el.tag.upper()}{name} id="{el.get("id")}"> has an empty id attribute'))
    return res


@rule_spec("only_one_visible_main",
           summary="Found multiple visible <main> elements (only one should be visible at a time):")
def check_only_one_visible_main(doc: HTMLDocument) -> List[Finding]:
    visible = [el for el in doc.find_all("main") if not el.has("hidden")]
    return [
        (el, f"<main{element_identifier(el)}> is a second visible main element")
        for el in visible[1:]
    ]


@rule_spec("only_one_figcaption", summary="Found multiple <figcaption> elements within the same parent:")
def check_only_one_figcaption(doc: HTMLDocument) -> List[Finding]:
    res = []
    for el in doc.find_all("figcaption"):
        sibling = previous_element_sibling(el)
        while sibling is not None and sibling.tag != "figcaption":
            sibling = previous_element_sibling(sibling)
        if sibling is not None:
            res.append((el, f"<figcaption{element_identifier(el)}> is a second figcaption within <{el.parent.tag}>"))
    return res


@rule_spec("figcaption_is_first_or_last_child",
           summary="Found <figcaption> elements that are not first or last child:")
def check_figcaption_position(doc: HTMLDocument) -> List[Finding]:
    res = []
    for el in doc.find_all("figcaption"):
        parent = el.parent
        if first_element_child(parent) is el or last_element_child(parent) is el:
            continue
        res.append((el, f"<figcaption{element_identifier(el)}> is neither first nor last child within <{parent.tag}>"))
    return res


@rule_spec("mailto_links_are_valid", summary="Found mailto links with invalid email addresses:")
def check_mailto_links(doc: HTMLDocument) -> List[Finding]:
    res = []
    for el in doc.iter_elements():
        href = el.get("href")
        if href is None or not href.lower().startswith("mailto:"):
            continue
        address, emails = split_mailto(href)
        for email in emails:
            if not is_valid_email(email):
                res.append((el, (
                    f'<{el.tag}{element_identifier(el)} href="mailto:{address}"> '
                    f'contains invalid email address: "{email}"'
                )))
    return res


def _phone_link_findings(doc: HTMLDocument, scheme: str) -> List[Finding]:
    res = []
    prefix = f"{scheme}:"
    for el in doc.iter_elements():
        href = el.get("href")
        if href is None or not href.lower().startswith(prefix):
            continue
        number = href[len(prefix):]
        if not is_valid_phone_number(number):
            res.append((el, (
                f'<{el.tag}{element_identifier(el)} href="{scheme}:{strip_phone_parameters(number)}"> '
                f'contains invalid phone number'
            )))
    return res


@rule_spec("tel_links_are_valid", summary="Found tel: links with invalid phone numbers:")
def check_tel_links(doc: HTMLDocument) -> List[Finding]:
    return _phone_link_findings(doc, "tel")


@rule_spec("fax_links_are_valid", summary="Found fax: links with invalid phone numbers:")
def check_fax_links(doc: HTMLDocument) -> List[Finding]:
    return _phone_link_findings(doc, "fax")


@rule_spec("modem_links_are_valid", summary="Found modem: links with invalid phone numbers:")
def check_modem_links(doc: HTMLDocument) -> List[Finding]:
    return _phone_link_findings(doc, "modem")


@rule_spec("no_button_role_on_links",
           summary='Found links with role="button" that should be <button> elements:')
def check_button_role_on_links(doc: HTMLDocument) -> List[Finding]:
    return [
        (el, f'<a{element_identifier(el)} role="button"> should be a <button> element')
        for el in doc.find_all("a")
        if (el.get("role") or "").strip().lower() == "button"
    ]


@rule_spec("unique_landmark_roles", summary="Found duplicate unique ARIA roles:")
def check_unique_landmark_roles(doc: HTMLDocument) -> List[Finding]:
    """Each of main, search, banner and contentinfo may appear on one visible element only."""
    res = []
    for role in UNIQUE_LANDMARK_ROLES:
        elements = [
            el for el in doc.iter_elements()
            if (el.get("role") or "").strip().lower() == role and not el.has("hidden")
        ]
        for el in elements[1:]:
            res.append((el, (
                f'<{el.tag}{element_identifier(el)} role="{role}"> is a duplicate - '
                f'role="{role}" should be unique'
            )))
    return res


@rule_spec("no_placeholder_as_label", summary="Found elements using placeholder as label:")
def check_placeholder_as_label(doc: HTMLDocument) -> List[Finding]:
    res = []
    label_targets = {lbl.get("for") for lbl in doc.find_all("label") if lbl.has("for")}
    for el in doc.find_all("input", "textarea"):
        if not el.has("placeholder"):
            continue
        if any(has_attr(el, a) for a in ("title", "aria-label", "aria-labelledby")):
            continue
        if el.get("id") and el.get("id") in label_targets:
            continue
        if ancestor_of_tag(el, "label") is not None:
            continue
        res.append((el, (
            f'<{el.tag}{element_identifier(el)} placeholder="{el.get("placeholder")}"> uses placeholder as label - '
            f'add proper label, title, aria-label, or aria-labelledby'
        )))
    return res


@rule_spec("table_header_scope_is_valid", summary="Found <th> elements with invalid scope attributes:")
def check_th_scope(doc: HTMLDocument) -> List[Finding]:
    res = []
    for th in doc.find_all("th"):
        scope = th.get("scope")
        if scope is None or scope.strip().lower() in ("col", "row"):
            continue
        res.append((th, f'<th{element_identifier(th)} scope="{scope}"> has invalid scope - must be "col" or "row"'))
    return res


@rule_spec("no_insecure_urls", summary="Found elements with insecure HTTP URLs:")
def check_insecure_urls(doc: HTMLDocument) -> List[Finding]:
    """Absolute http: URLs only; relative, protocol-relative and non-http schemes pass."""
    res = []
    for el in doc.iter_elements():
        for name in ("href", "src"):
            url = el.get(name)
            if url is not None and url.strip().lower().startswith("http:"):
                res.append((el, (
                    f'<{el.tag}{element_identifier(el)} {name}="{url}"> uses insecure HTTP protocol - '
                    f'use HTTPS instead'
                )))
                break
    return res


# --- DEFINITION ---
DEFINITION = RuleDefinition(
    category=Category.ADVICE,
    rules=[
        check_required_select,
        check_class_not_empty,
        check_id_not_empty,
        check_only_one_visible_main,
        check_only_one_figcaption,
        check_figcaption_position,
        check_mailto_links,
        check_tel_links,
        check_fax_links,
        check_modem_links,
        check_button_role_on_links,
        check_unique_landmark_roles,
        check_placeholder_as_label,
        check_th_scope,
        check_insecure_urls,
    ]
)
