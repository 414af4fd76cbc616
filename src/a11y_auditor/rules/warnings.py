from typing import List, Optional

from ..dom.core import Category, ElementNode, Finding, ReportStyle, RuleDefinition, rule_spec
from ..dom.models import HTMLDocument
from ..dom.query import (
    ancestor_of_tag,
    ancestors,
    attr_equals_ci,
    element_identifier,
    first_element_child,
    format_attrs,
    next_element_sibling,
    previous_element_sibling,
    text_content,
)
from ..validators import is_rtl_language, looks_like_file_name

# Script-supporting elements are allowed anywhere in lists
SCRIPT_SUPPORTING = ("script", "template")
DL_CHILDREN = ("dt", "dd", "div")
MAIN_FORBIDDEN_ANCESTORS = ("nav", "aside", "footer", "header", "article")
ADDRESS_FORBIDDEN = ("h1", "h2", "h3", "h4", "h5", "h6", "nav", "aside", "header", "footer",
                     "address", "article", "section")
INLINE_CONTAINERS = ("b", "i", "q", "em", "abbr", "cite", "code", "span", "small", "label", "strong")
SECTIONING_WRAPPERS = (
    ("aside", "aside"),
    ("article", "aside"),
    ("aside", "article"),
    ("aside", "section"),
    ("section", "section"),
    ("article", "section"),
    ("article", "article"),
)
NAMING_ATTRIBUTES = ("title", "aria-label", "aria-labelledby", "aria-describedby")
IMAGE_LIKE = ("img", "svg", "area", "embed", "canvas", "object")
LABELABLE_CONTROLS = ("button", "input", "meter", "output", "progress", "select", "textarea")
TABLE_ORDER_VIOLATIONS = (
    ("tfoot", "thead", "tfoot cannot come before thead"),
    ("tbody", "tfoot", "tbody cannot come before tfoot"),
    ("tbody", "thead", "tbody cannot come before thead"),
    ("tfoot", "colgroup", "tfoot cannot come before colgroup"),
    ("tbody", "colgroup", "tbody cannot come before colgroup"),
    ("thead", "colgroup", "thead cannot come before colgroup"),
)
EMPTY_EXEMPT = frozenset({
    "button", "a", "iframe", "textarea", "title", "option", "script", "style", "template", "command",
})

REVENGE_CSS = "https://github.com/Heydon/REVENGE.CSS/blob/master/revenge.css"
RGAA_IMAGES = "https://accessibilite.numerique.gouv.fr/methode/criteres-et-tests/#1.2"
H44 = "https://www.w3.org/WAI/WCAG22/Techniques/html/H44"
QA_HTML_DIR = "https://www.w3.org/International/questions/qa-html-dir"


def _parent_tag(el: ElementNode) -> str:
    return el.parent.tag if el.parent is not None else "unknown"


def _is_presentation(el: ElementNode) -> bool:
    return attr_equals_ci(el, "role", "presentation")


def _data_tables(doc: HTMLDocument) -> List[ElementNode]:
    return [t for t in doc.find_all("table") if not _is_presentation(t)]


def _inherited_lang(el: ElementNode) -> Optional[str]:
    if el.has("lang"):
        return el.get("lang")
    for anc in ancestors(el):
        if anc.has("lang"):
            return anc.get("lang")
    return None


def _dl_children_findings(doc: HTMLDocument, relation: str) -> List[Finding]:
    res = []
    for dl in doc.find_all("dl"):
        for child in dl.element_children:
            if child.tag in DL_CHILDREN or child.tag in SCRIPT_SUPPORTING:
                continue
            res.append((child, (
                f"<{child.tag}{element_identifier(child)}> is not allowed as a {relation} of <dl> - "
                f"only <dt>, <dd>, or <div> elements are allowed"
            )))
    return res


# --- RULES ---

@rule_spec("list_items_have_valid_parent", summary="Found list items with incorrect parent elements:")
def check_list_item_parents(doc: HTMLDocument) -> List[Finding]:
    """<ul> and <ol> hold only <li>, and <li> lives only in <ul> or <ol>."""
    res = []
    for el in doc.iter_elements():
        if el.parent is not None and el.parent.tag in ("ul", "ol") \
                and el.tag != "li" and el.tag not in SCRIPT_SUPPORTING:
            res.append((el, (
                f"<{el.tag}{element_identifier(el)}> is not allowed as a child of <{el.parent.tag}> - "
                f"only <li> elements are allowed"
            )))
    for li in doc.find_all("li"):
        if _parent_tag(li) not in ("ul", "ol"):
            res.append((li, f"<li{element_identifier(li)}> must be a child of <ul> or <ol>, found within <{_parent_tag(li)}>"))
    return res


@rule_spec("definition_list_structure_is_valid", summary="Found definition lists with invalid structure:")
def check_definition_list_structure(doc: HTMLDocument) -> List[Finding]:
    res = []
    for dt in doc.find_all("dt"):
        following = next_element_sibling(dt)
        if following is not None and following.tag != "dd":
            res.append((following, (
                f"<dt> must be followed by <dd>, found <{following.tag}{element_identifier(following)}> instead"
            )))
    for dd in doc.find_all("dd"):
        preceding = previous_element_sibling(dd)
        if preceding is not None and preceding.tag not in ("dt", "dd"):
            res.append((dd, (
                f"<dd{element_identifier(dd)}> must be preceded by <dt> or <dd>, found <{preceding.tag}> instead"
            )))
    res.extend(_dl_children_findings(doc, "child"))
    return res


@rule_spec("definition_list_items_have_valid_parent", summary="Found definition lists with invalid nesting:")
def check_definition_list_nesting(doc: HTMLDocument) -> List[Finding]:
    """<dt>/<dd> belong directly in <dl>, or in a <div> that is itself a child of <dl>."""
    res = []
    for tag in ("dt", "dd"):
        for el in doc.find_all(tag):
            parent = el.parent
            if parent.tag == "dl":
                continue
            if parent.tag == "div" and parent.parent is not None and parent.parent.tag == "dl":
                continue
            res.append((el, (
                f"<{tag}{element_identifier(el)}> must be a child of <dl> or <div> within <dl>, "
                f"found within <{parent.tag}>"
            )))
    res.extend(_dl_children_findings(doc, "direct child"))
    return res


@rule_spec("figcaption_inside_figure", summary="Found <figcaption> elements outside <figure>:")
def check_figcaption_inside_figure(doc: HTMLDocument) -> List[Finding]:
    return [
        (el, (
            f"<figcaption{element_identifier(el)}> must be inside a <figure> element, "
            f"found within <{_parent_tag(el)}>"
        ))
        for el in doc.find_all("figcaption")
        if _parent_tag(el) != "figure"
    ]


@rule_spec("no_invalid_nesting", summary="Found invalid HTML element nesting:")
def check_invalid_nesting(doc: HTMLDocument) -> List[Finding]:
    res = []
    for main in doc.find_all("main"):
        container = ancestor_of_tag(main, *MAIN_FORBIDDEN_ANCESTORS)
        if container is not None:
            res.append((main, f"<main{element_identifier(main)}> must not be contained within <{container.tag}>"))

    for el in doc.find_all("optgroup"):
        if _parent_tag(el) != "select":
            res.append((el, (
                f"<optgroup{element_identifier(el)}> must be inside a <select> element, found within <{_parent_tag(el)}>"
            )))

    for el in doc.find_all("legend"):
        if _parent_tag(el) != "fieldset":
            res.append((el, (
                f"<legend{element_identifier(el)}> must be inside a <fieldset> element, found within <{_parent_tag(el)}>"
            )))

    for el in doc.find_all("option"):
        if _parent_tag(el) not in ("select", "optgroup", "datalist"):
            res.append((el, (
                f"<option{element_identifier(el)}> must be inside a <select> or <optgroup> element, "
                f"found within <{_parent_tag(el)}>"
            )))

    for el in doc.iter_elements():
        if el.tag in ADDRESS_FORBIDDEN and ancestor_of_tag(el, "address") is not None:
            res.append((el, f"<{el.tag}{element_identifier(el)}> is not allowed inside <address> element"))
    return res


@rule_spec("no_div_inside_inline", summary="Found <div> elements inside inline elements:")
def check_div_inside_inline(doc: HTMLDocument) -> List[Finding]:
    res = []
    for div in doc.find_all("div"):
        container = ancestor_of_tag(div, *INLINE_CONTAINERS)
        if container is not None:
            res.append((div, (
                f"<div{element_identifier(div)}> should not be inside <{container.tag}> - "
                f"use <span> instead for inline containers"
            )))
    return res


@rule_spec("no_sectioning_wrappers", summary="Found sectioning tags misused as wrappers:")
def check_sectioning_wrappers(doc: HTMLDocument) -> List[Finding]:
    """A sectioning element opening another sectioning element is a generic wrapper in disguise."""
    res = []
    for el in doc.iter_elements():
        parent = el.parent
        if parent is None or (parent.tag, el.tag) not in SECTIONING_WRAPPERS:
            continue
        if first_element_child(parent) is not el:
            continue
        res.append((el, (
            f"<{el.tag}{element_identifier(el)}> should not be used as a wrapper - "
            f"<{el.tag}> as first child of <{parent.tag}> indicates misuse"
        )))
    return res


def _first_child_findings(doc: HTMLDocument, container: str, expected: str) -> List[Finding]:
    res = []
    parents = doc.find_all(container)
    for parent in parents:
        first = first_element_child(parent)
        if first is not None and first.tag != expected:
            res.append((first, (
                f"<{container}> has <{first.tag}{element_identifier(first)}> as first child - "
                f"<{expected}> must be the first child"
            )))
    for parent in parents:
        first = first_element_child(parent)
        for child in parent.element_children:
            if child.tag == expected and child is not first:
                res.append((child, f"<{expected}{element_identifier(child)}> is not the first child of <{container}>"))
    return res


@rule_spec("legend_is_first_child",
           summary="Found <legend> elements that are not the first child of <fieldset>:")
def check_legend_first_child(doc: HTMLDocument) -> List[Finding]:
    return _first_child_findings(doc, "fieldset", "legend")


@rule_spec("summary_is_first_child",
           summary="Found <summary> elements that are not the first child of <details>:")
def check_summary_first_child(doc: HTMLDocument) -> List[Finding]:
    return _first_child_findings(doc, "details", "summary")


@rule_spec("abbr_has_title", summary="Found <abbr> elements without a proper title attribute:")
def check_abbr_title(doc: HTMLDocument) -> List[Finding]:
    res = []
    for abbr in doc.find_all("abbr"):
        title = abbr.get("title")
        if title is None:
            issue = "is missing a title attribute"
        elif title == "":
            issue = "has an empty title attribute"
        elif not title.strip():
            issue = "has a whitespace-only title attribute"
        else:
            continue
        res.append((abbr, f'<abbr{element_identifier(abbr)}> {issue} (content: "{text_content(abbr)}")'))
    return res


def _is_image_like(el: ElementNode) -> bool:
    if el.tag in ("img", "area"):
        return True
    if el.tag in ("input", "embed", "object"):
        return attr_equals_ci(el, "type", "image")
    return False


@rule_spec("alt_is_not_file_name", summary="Found elements with file names in alt attributes:")
def check_alt_file_name(doc: HTMLDocument) -> List[Finding]:
    return [
        (el, (
            f'<{el.tag}{format_attrs(el, ["type"])}{element_identifier(el)} alt="{el.get("alt")}"> '
            f'contains a file name in the alt attribute'
        ))
        for el in doc.iter_elements()
        if _is_image_like(el) and el.has("alt") and looks_like_file_name(el.get("alt"))
    ]


def _decorative_indicator(el: ElementNode) -> Optional[str]:
    """Why an element counts as decorative, or None when it conveys information."""
    hidden = attr_equals_ci(el, "aria-hidden", "true")
    if el.tag == "img":
        if el.get("alt") == "":
            return "empty alt"
        return 'aria-hidden="true"' if hidden else None
    if el.tag == "area":
        if hidden:
            return 'aria-hidden="true"'
        if el.has("href") or not el.has("alt"):
            return None
        return "empty alt" if el.get("alt") == "" else "no href"
    if el.tag in ("svg", "canvas") or (el.tag in ("embed", "object") and attr_equals_ci(el, "type", "image")):
        return 'aria-hidden="true"' if hidden else None
    return None


@rule_spec("decorative_images_have_no_name", summary="Found decorative images with accessible names:")
def check_decorative_images(doc: HTMLDocument) -> List[Finding]:
    """
    Decorative images (empty alt, aria-hidden="true", or an <area> without href)
    must not carry title, aria-label, aria-labelledby or aria-describedby.
    An <area> without href but with a non-empty alt is reported on its own.
    """
    res = []
    for el in doc.iter_elements():
        indicator = _decorative_indicator(el)
        if indicator is None:
            continue
        naming = next((a for a in NAMING_ATTRIBUTES if el.has(a)), None)
        if naming is None and indicator != "no href":
            continue
        res.append((el, (
            f'<{el.tag}{format_attrs(el, ["type"])}{element_identifier(el)}> is decorative ({indicator}) '
            f'but has [{naming or "accessible name"}] attribute'
        )))
    return res


@rule_spec("no_role_presentation_on_images", style=ReportStyle.FIRST_MATCH)
def check_role_presentation_on_images(doc: HTMLDocument) -> List[Finding]:
    res = []
    for el in doc.find_all(*IMAGE_LIKE):
        if not _is_presentation(el):
            continue
        alternative = " or an empty alt attribute" if el.tag == "img" else ""
        res.append((el, (
            f'The <{el.tag}{element_identifier(el)}> element uses role="presentation", which has poor browser '
            f'support. Use aria-hidden="true" instead{alternative} to mark decorative images. See: {RGAA_IMAGES}'
        )))
    return res


@rule_spec("svg_has_role_or_hidden", style=ReportStyle.FIRST_MATCH)
def check_svg_role(doc: HTMLDocument) -> List[Finding]:
    return [
        (svg, (
            f'The <svg{element_identifier(svg)}> element must have either aria-hidden="true" (if decorative) '
            f'or role="img" (if informative). See: {RGAA_IMAGES}'
        ))
        for svg in doc.find_all("svg")
        if not attr_equals_ci(svg, "aria-hidden", "true") and not attr_equals_ci(svg, "role", "img")
    ]


@rule_spec("media_has_no_autoplay", style=ReportStyle.FIRST_MATCH)
def check_media_autoplay(doc: HTMLDocument) -> List[Finding]:
    return [
        (el, (
            f"The <{el.tag}{element_identifier(el)}> element has the autoplay attribute, which can be disruptive "
            f"for users. Remove the autoplay attribute to give users control over media playback. "
            f"See: https://www.w3.org/TR/WCAG22/#audio-control"
        ))
        for el in doc.find_all("video", "audio")
        if el.has("autoplay")
    ]


@rule_spec("media_has_controls", style=ReportStyle.FIRST_MATCH)
def check_media_controls(doc: HTMLDocument) -> List[Finding]:
    return [
        (el, (
            f"The <{el.tag}{element_identifier(el)}> element is missing the controls attribute. "
            f"Add controls to give users the ability to play, pause, and control the media. "
            f"See: https://www.w3.org/TR/WCAG22/#keyboard"
        ))
        for el in doc.find_all("video", "audio")
        if not el.has("controls")
    ]


def _is_exempt_from_emptiness(el: ElementNode) -> bool:
    if el.is_void or el.tag in EMPTY_EXEMPT:
        return True
    if el.has("hidden") or el.has("aria-hidden") or el.has("src"):
        return True
    # SVG and MathML geometry is empty by nature
    return el.tag in ("svg", "math") or ancestor_of_tag(el, "svg", "math") is not None


@rule_spec("no_empty_elements", style=ReportStyle.FIRST_MATCH)
def check_empty_elements(doc: HTMLDocument) -> List[Finding]:
    """Only the body is inspected; most of <head> is empty by design. Fragments are inspected whole."""
    scope = doc.body or doc.root
    return [
        (el, (
            f"The <{el.tag}{element_identifier(el)}> element is empty and serves no purpose. "
            f"Remove this element or add content to it. See: {REVENGE_CSS}#L243"
        ))
        for el in scope.iter_descendants()
        if el.is_empty and not _is_exempt_from_emptiness(el)
    ]


@rule_spec("no_nested_tables", style=ReportStyle.FIRST_MATCH)
def check_nested_tables(doc: HTMLDocument) -> List[Finding]:
    return [
        (table, (
            f"Found a nested <table{element_identifier(table)}> element inside another table. "
            f"Tables should not be nested as they are likely being used for layout purposes. "
            f"Use CSS for layout instead. See: https://www.w3.org/WAI/tutorials/tables/tips/"
        ))
        for table in doc.find_all("table")
        if ancestor_of_tag(table, "table") is not None
    ]


@rule_spec("tables_have_caption", style=ReportStyle.FIRST_MATCH)
def check_table_caption(doc: HTMLDocument) -> List[Finding]:
    """A misplaced caption is reported before a missing one."""
    tables = _data_tables(doc)
    res = []
    for table in tables:
        first = first_element_child(table)
        for child in table.element_children:
            if child.tag == "caption" and child is not first:
                res.append((table, (
                    f"The <table{element_identifier(table)}> element has a <caption> but it is not the first child. "
                    f"The <caption> must be the first child of the <table> element. "
                    f"See: https://html.spec.whatwg.org/multipage/tables.html#the-caption-element"
                )))
    for table in tables:
        first = first_element_child(table)
        if first is not None and first.tag != "caption":
            res.append((table, (
                f"The <table{element_identifier(table)}> element is missing a <caption> as its first child. "
                f"Data tables must have a <caption> element to provide a title or explanation. "
                f"See: https://www.w3.org/WAI/WCAG22/Techniques/html/H39"
            )))
    return res


@rule_spec("table_structure_is_ordered", style=ReportStyle.FIRST_MATCH)
def check_table_structure(doc: HTMLDocument) -> List[Finding]:
    res = []
    tables = doc.find_all("table")
    for earlier, later, reason in TABLE_ORDER_VIOLATIONS:
        for table in tables:
            seen_earlier = False
            for child in table.element_children:
                if child.tag == earlier:
                    seen_earlier = True
                elif child.tag == later and seen_earlier:
                    res.append((child, (
                        f"The <table{element_identifier(table)}> element has invalid structure: {reason}. "
                        f"Table elements must be in this order: caption, colgroup, thead, tfoot, tbody. "
                        f"See: https://www.w3.org/TR/WCAG22/#parsing"
                    )))
    return res


@rule_spec("tables_have_thead", style=ReportStyle.FIRST_MATCH)
def check_table_thead(doc: HTMLDocument) -> List[Finding]:
    res = []
    for table in _data_tables(doc):
        sections = {child.tag for child in table.element_children}
        if "tbody" in sections and "thead" not in sections:
            res.append((table, (
                f"The <table{element_identifier(table)}> element has a <tbody> but is missing a <thead>. "
                f"Data tables with a <tbody> must have a <thead> to provide column headers."
            )))
    return res


@rule_spec("javascript_links_have_button_role", style=ReportStyle.FIRST_MATCH)
def check_javascript_links(doc: HTMLDocument) -> List[Finding]:
    return [
        (a, (
            f'The <a{element_identifier(a)}> element uses href="javascript:..." without role="button". '
            f'Links with javascript: protocol should be replaced with <button> elements or have role="button". '
            f'See: {REVENGE_CSS}#L165'
        ))
        for a in doc.find_all("a")
        if (a.get("href") or "").strip().lower().startswith("javascript")
        and not attr_equals_ci(a, "role", "button")
    ]


@rule_spec("hash_links_have_button_role", style=ReportStyle.FIRST_MATCH)
def check_hash_links(doc: HTMLDocument) -> List[Finding]:
    return [
        (a, (
            f'The <a{element_identifier(a)}> element uses href="#" without role="button". '
            f'Links with href="#" should be replaced with <button> elements or have role="button". '
            f'See: {REVENGE_CSS}#L165'
        ))
        for a in doc.find_all("a")
        if (a.get("href") or "").strip() == "#" and not attr_equals_ci(a, "role", "button")
    ]


@rule_spec("heading_role_has_level", style=ReportStyle.FIRST_MATCH)
def check_heading_role_level(doc: HTMLDocument) -> List[Finding]:
    return [
        (el, (
            f'The <{el.tag}{element_identifier(el)}> element has role="heading" but is missing the aria-level '
            f'attribute. Elements with role="heading" should specify aria-level to indicate their hierarchical level.'
        ))
        for el in doc.iter_elements()
        if attr_equals_ci(el, "role", "heading") and not el.has("aria-level")
    ]


@rule_spec("labels_have_control", style=ReportStyle.FIRST_MATCH)
def check_label_control(doc: HTMLDocument) -> List[Finding]:
    res = []
    for label in doc.find_all("label"):
        controls = [
            el for el in label.iter_descendants()
            if el.tag in LABELABLE_CONTROLS and not (el.tag == "input" and attr_equals_ci(el, "type", "hidden"))
        ]
        identifier = element_identifier(label)
        if not label.has("for") and not controls:
            res.append((label, (
                f"The <label{identifier}> element is missing the for attribute and does not contain a form "
                f"control. Labels should either have a for attribute referencing a form control, or contain a "
                f"labelable element (button, input, meter, output, progress, select, or textarea). See: {H44}"
            )))
        if len(controls) > 1:
            res.append((label, (
                f"The <label{identifier}> element contains multiple form controls. "
                f"A label should only contain one form control element. See: {H44}"
            )))
    return res


@rule_spec("dir_matches_lang", style=ReportStyle.FIRST_MATCH)
def check_dir_matches_lang(doc: HTMLDocument) -> List[Finding]:
    """
    RTL languages need dir="rtl", language changes inside RTL content need
    their own dir, and dir="rtl" needs an RTL language (own or inherited).
    """
    elements = list(doc.iter_elements())
    res = []
    for el in elements:
        if is_rtl_language(el.get("lang")) and not attr_equals_ci(el, "dir", "rtl"):
            res.append((el, (
                f'The <{el.tag}{element_identifier(el)}> element has lang="{el.get("lang")}" but is missing '
                f'dir="rtl". Right-to-left languages like Arabic and Hebrew require the dir="rtl" attribute. '
                f'See: {QA_HTML_DIR}'
            )))

    for el in elements:
        if not el.has("lang") or el.has("dir"):
            continue
        if any(is_rtl_language(anc.get("lang")) for anc in ancestors(el)):
            res.append((el, (
                f'The <{el.tag}{element_identifier(el)}> element has lang="{el.get("lang")}" within RTL content '
                f'but is missing a dir attribute. Language changes within right-to-left content should define '
                f'dir="ltr" or dir="rtl" as appropriate. '
                f'See: https://www.w3.org/International/articles/inline-bidi-markup/#dirattribute'
            )))

    for el in elements:
        if not attr_equals_ci(el, "dir", "rtl"):
            continue
        lang = _inherited_lang(el)
        if is_rtl_language(lang):
            continue
        res.append((el, (
            f'The <{el.tag}{element_identifier(el)}> element has dir="rtl" but lang="{lang or "not set"}". '
            f'The dir="rtl" attribute should be used with right-to-left languages like Arabic (ar) or '
            f'Hebrew (he). See: {QA_HTML_DIR}'
        )))
    return res


# --- DEFINITION ---
DEFINITION = RuleDefinition(
    category=Category.WARNINGS,
    rules=[
        check_list_item_parents,
        check_definition_list_structure,
        check_definition_list_nesting,
        check_figcaption_inside_figure,
        check_invalid_nesting,
        check_div_inside_inline,
        check_sectioning_wrappers,
        check_legend_first_child,
        check_summary_first_child,
        check_abbr_title,
        check_alt_file_name,
        check_decorative_images,
        check_role_presentation_on_images,
        check_svg_role,
        check_media_autoplay,
        check_media_controls,
        check_empty_elements,
        check_nested_tables,
        check_table_caption,
        check_table_structure,
        check_table_thead,
        check_javascript_links,
        check_hash_links,
        check_heading_role_level,
        check_label_control,
        check_dir_matches_lang,
    ]
)
