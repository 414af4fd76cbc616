from typing import Dict, FrozenSet, List

from ..dom.core import Category, Finding, RuleDefinition, rule_spec
from ..dom.models import HTMLDocument

OBSOLETE_TAGS = frozenset({
    "applet", "acronym", "bgsound", "dir", "frame", "frameset", "noframes", "isindex",
    "keygen", "menuitem", "listing", "nextid", "noembed", "param", "plaintext", "rb",
    "rtc", "strike", "xmp", "basefont", "big", "blink", "center", "font", "marquee",
    "multicol", "nobr", "spacer", "tt",
})

_TABLE_SECTION = ("char", "charoff", "valign", "align", "background")
_DATA_BINDING = ("datasrc", "datafld", "dataformatas")

# '*' applies to every element
OBSOLETE_ATTRIBUTES: Dict[str, FrozenSet[str]] = {tag: frozenset(attrs) for tag, attrs in {
    "*": ("dropzone", "contextmenu", "onshow"),
    "a": ("charset", "coords", "shape", "methods", "name", "rev", "urn", "datasrc", "datafld"),
    "link": ("charset", "methods", "rev", "urn", "target"),
    "option": ("name", "datasrc", "dataformatas"),
    "embed": ("name", "hspace", "vspace", "align"),
    "img": ("name", "lowsrc", "longdesc", "datasrc", "datafld", "hspace", "vspace", "align", "border"),
    "form": ("accept",),
    "head": ("profile",),
    "html": ("version",),
    "menu": ("type", "label"),
    "param": ("type", "valuetype", "datafld"),
    "script": ("language", "event", "for"),
    "table": ("datapagesize", "summary", "bgcolor", "datasrc", "dataformatas", "width", "align",
              "cellpadding", "cellspacing", "frame", "rules", "background"),
    "td": ("axis", "scope", "abbr", "bgcolor", "char", "charoff", "valign", "width", "align",
           "height", "nowrap", "background"),
    "th": ("axis", "bgcolor", "char", "charoff", "valign", "width", "align", "height", "nowrap", "background"),
    "applet": ("datasrc", "datafld"),
    "button": _DATA_BINDING,
    "div": _DATA_BINDING + ("align",),
    "frame": ("datasrc", "datafld"),
    "label": _DATA_BINDING,
    "legend": _DATA_BINDING + ("align",),
    "marquee": _DATA_BINDING,
    "span": _DATA_BINDING,
    "fieldset": ("datafld",),
    "body": ("alink", "bgcolor", "link", "bottommargin", "leftmargin", "rightmargin", "topmargin",
             "marginheight", "marginwidth", "text", "vlink", "background"),
    "col": ("char", "charoff", "valign", "width", "align"),
    "tbody": _TABLE_SECTION,
    "thead": _TABLE_SECTION,
    "tfoot": _TABLE_SECTION,
    "tr": ("char", "charoff", "valign", "bgcolor", "align", "background"),
    "pre": ("width",),
    "dl": ("compact",),
    "ol": ("compact",),
    "ul": ("compact", "type"),
    "h1": ("align",),
    "h2": ("align",),
    "h3": ("align",),
    "h4": ("align",),
    "h5": ("align",),
    "h6": ("align",),
    "caption": ("align",),
    "p": ("align",),
    "li": ("type",),
    "area": ("nohref", "type", "hreflang"),
    "input": ("ismap", "usemap", "datasrc", "datafld", "dataformatas", "hspace", "vspace", "align"),
    "iframe": ("longdesc", "datasrc", "datafld", "marginheight", "marginwidth", "hspace", "vspace", "align",
               "allowtransparency", "frameborder", "framespacing", "scrolling"),
    "object": ("archive", "classid", "code", "codebase", "codetype", "declare", "standby", "typemustmatch",
               "datasrc", "datafld", "dataformatas", "hspace", "vspace", "align", "border"),
    "select": _DATA_BINDING,
    "textarea": ("datasrc", "datafld"),
    "br": ("clear",),
    "hr": ("width", "color", "noshade", "size", "align"),
    "meta": ("scheme",),
}.items()}


def is_obsolete_attribute(tag: str, name: str) -> bool:
    return name in OBSOLETE_ATTRIBUTES["*"] or name in OBSOLETE_ATTRIBUTES.get(tag, frozenset())


# --- RULES ---

@rule_spec("no_obsolete_tags", summary="Found obsolete HTML tags:")
def check_obsolete_tags(doc: HTMLDocument) -> List[Finding]:
    return [
        (el, f"<{el.tag}> is an obsolete HTML tag and should not be used")
        for el in doc.iter_elements()
        if el.tag in OBSOLETE_TAGS
    ]


@rule_spec("no_obsolete_attributes", summary="Found obsolete HTML attributes:")
def check_obsolete_attributes(doc: HTMLDocument) -> List[Finding]:
    """Attributes are matched per tag, in the element's own attribute order."""
    res = []
    for el in doc.iter_elements():
        obsolete = [(name, value) for name, value in el.attrs.items() if is_obsolete_attribute(el.tag, name)]
        if not obsolete:
            continue
        pairs = " ".join(f'{name}="{value}"' for name, value in obsolete)
        names = ", ".join(name for name, _ in obsolete)
        res.append((el, f"<{el.tag} {pairs}> contains obsolete attribute(s): {names}"))
    return res


# --- DEFINITION ---
DEFINITION = RuleDefinition(
    category=Category.OBSOLETES,
    rules=[
        check_obsolete_tags,
        check_obsolete_attributes,
    ]
)
