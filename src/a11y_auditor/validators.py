# src/a11y_auditor/validators.py
"""
Named, pure string validators used by the rule modules.

Every pattern the rules accept or reject lives here so the accepted
boundaries can be tested in isolation.
"""
import re
from typing import Iterable, List, Optional, Tuple

from .managers.config_manager import config_manager

# Visual separators and dial characters (pause, wait, DTMF A-D, *, #)
PHONE_SEPARATORS = re.compile(r"[\s\-().pwABCD*#]+", re.IGNORECASE)
PHONE_SHAPE = re.compile(r"^\+?\d{3,}$")

EMAIL_LOCAL = re.compile(r"^[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+(?:\.[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+)*$")
EMAIL_DOMAIN_LABEL = re.compile(r"^[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?$")
EMAIL_TLD = re.compile(r"^(?:[A-Za-z]{2,63}|xn--[A-Za-z0-9-]{1,59})$")

CSS_INVALID_START = re.compile(r"^(?:[0-9]|--|-[0-9])")

VIEWPORT_MAX_SCALE = re.compile(r"maximum-scale\s*=\s*([0-9.]+)", re.IGNORECASE)
VIEWPORT_MIN_SCALE = re.compile(r"minimum-scale\s*=\s*([0-9.]+)", re.IGNORECASE)
VIEWPORT_USER_SCALABLE = re.compile(r"user-scalable\s*=\s*(no|0)\b", re.IGNORECASE)

FILE_EXTENSIONS = (
    "pdf", "doc", "docx", "png", "jpg", "jpeg", "gif", "webp", "svg", "svgz", "apng",
    "mp3", "mp4", "mov", "ogg", "xls", "xlsx", "txt", "zip", "rar",
)

DEFAULT_RTL_LANGUAGES = ("ar", "arc", "ckb", "dv", "fa", "he", "iw", "ks", "ps", "sd", "syr", "ug", "ur", "yi")


def strip_phone_parameters(number: str) -> str:
    """Drops RFC 3966 parameters (everything from the first ';')."""
    return number.split(";", 1)[0]


def is_valid_phone_number(number: str, min_digits: Optional[int] = None) -> bool:
    """
    Validates the part of a tel:/fax:/modem: URI after the scheme.

    Separators and dial characters are removed first; what remains must be an
    optional '+' followed only by digits, at least `min_digits` of them.
    """
    if min_digits is None:
        min_digits = int(config_manager.get_nested("validators.phone_min_digits", 7))
    cleaned = PHONE_SEPARATORS.sub("", strip_phone_parameters(number))
    if not PHONE_SHAPE.match(cleaned):
        return False
    return len(cleaned.lstrip("+")) >= min_digits


def split_mailto(href: str) -> Tuple[str, List[str]]:
    """
    Splits a mailto: href into its address part (query string removed) and the
    individual, trimmed addresses of a comma-separated list.
    """
    address = href[len("mailto:"):] if href.lower().startswith("mailto:") else href
    address = address.split("?", 1)[0]
    return address, [part.strip() for part in address.split(",")]


def is_valid_email(address: str) -> bool:
    """Basic `local@domain.tld` shape check."""
    if not address or len(address) > 254 or address.count("@") != 1:
        return False
    local, domain = address.split("@")
    if not local or len(local) > 64 or not EMAIL_LOCAL.match(local):
        return False
    labels = domain.split(".")
    if len(labels) < 2:
        return False
    if not all(EMAIL_DOMAIN_LABEL.match(label) for label in labels):
        return False
    return bool(EMAIL_TLD.match(labels[-1]))


def is_invalid_css_identifier(identifier: str) -> bool:
    """True if the token starts with a digit, '--' or '-digit'. Empty tokens are ignored."""
    return bool(identifier) and bool(CSS_INVALID_START.match(identifier))


def invalid_class_tokens(class_value: str) -> List[str]:
    return [token for token in class_value.split() if is_invalid_css_identifier(token)]


def looks_like_file_name(alt: str, extensions: Iterable[str] = FILE_EXTENSIONS) -> bool:
    """True if the alt text ends with '.<ext>' for a common file extension."""
    lowered = alt.lower()
    return any(lowered.endswith(f".{ext}") for ext in extensions)


def viewport_zoom_restrictions(
        content: str,
        min_maximum_scale: Optional[float] = None,
        max_minimum_scale: Optional[float] = None
) -> List[str]:
    """
    Returns the directives of a viewport `content` value that prevent zooming,
    e.g. ['user-scalable=no', 'maximum-scale=1'].
    """
    if min_maximum_scale is None:
        min_maximum_scale = float(config_manager.get_nested("viewport.min_maximum_scale", 2))
    if max_minimum_scale is None:
        max_minimum_scale = float(config_manager.get_nested("viewport.max_minimum_scale", 1))

    issues = []
    scalable = VIEWPORT_USER_SCALABLE.search(content)
    if scalable:
        issues.append(f"user-scalable={scalable.group(1)}")

    for pattern, name, restricts in (
            (VIEWPORT_MAX_SCALE, "maximum-scale", lambda v: v <= min_maximum_scale),
            (VIEWPORT_MIN_SCALE, "minimum-scale", lambda v: v >= max_minimum_scale),
    ):
        match = pattern.search(content)
        if not match:
            continue
        try:
            value = float(match.group(1))
        except ValueError:
            continue
        if restricts(value):
            issues.append(f"{name}={match.group(1)}")

    return issues


def primary_language(lang: str) -> str:
    """'ar-EG' -> 'ar'"""
    return lang.strip().lower().replace("_", "-").split("-", 1)[0]


def is_rtl_language(lang: Optional[str], rtl_languages: Optional[Iterable[str]] = None) -> bool:
    if not lang or not lang.strip():
        return False
    if rtl_languages is None:
        rtl_languages = config_manager.get_nested("languages.rtl", DEFAULT_RTL_LANGUAGES)
    return primary_language(lang) in {code.lower() for code in rtl_languages}
