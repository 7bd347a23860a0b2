"""
Stateless component-name extractors over a text span.

Word boundaries are ASCII-only (re.ASCII): Turkish suffix letters such as "ı"
count as non-word characters, so "Tooltip componentı" still ends on a boundary.
"""
from __future__ import annotations

import re
from functools import lru_cache
from typing import List, Optional, Pattern, Sequence, Tuple

from complens.utils.config import RESERVED_NAMESPACE, RESERVED_PREFIX
from complens.vocabulary.aliases import AliasDictionary

# Platform/runtime type names that look like PascalCase components but are not.
COMMON_TYPE_NAMES = frozenset({
    "String", "Number", "Boolean", "Object", "Array", "Date", "Error", "Function",
    "Promise", "Map", "Set", "WeakMap", "WeakSet", "Symbol", "BigInt", "Undefined",
    "Null", "NaN", "Infinity", "JSON", "Math", "Console", "Window", "Document",
    "Element", "Node", "Event", "Request", "Response", "Headers", "URL",
    "URLSearchParams", "FormData", "Blob", "File", "FileReader", "XMLHttpRequest",
    "WebSocket", "Worker", "SharedWorker", "ServiceWorker", "MessageChannel",
    "MessagePort", "BroadcastChannel", "ImageData", "ImageBitmap", "OffscreenCanvas",
    "Path2D", "TextMetrics", "TextEncoder", "TextDecoder", "AbortController", "AbortSignal",
})

UI_KEYWORDS: Tuple[str, ...] = (
    "button", "input", "select", "modal", "dialog", "card", "list", "table", "form",
    "field", "label", "icon", "menu", "nav", "header", "footer", "sidebar", "panel",
    "tab", "accordion", "dropdown", "tooltip", "popover", "alert", "badge", "chip",
    "avatar", "progress", "spinner", "loader", "slider", "switch", "checkbox", "radio",
    "datepicker", "timepicker", "calendar", "grid", "row", "col", "container",
    "wrapper", "layout", "page", "section", "widget", "component",
)

_PASCAL_RE = re.compile(r"\b[A-Z][a-z]+(?:[A-Z][a-z0-9]*)+\b", re.ASCII)
_KEBAB_RE = re.compile(r"\b[a-z][a-z0-9]*(?:-[a-z0-9]+)+\b", re.ASCII)

# "<noun> componenti/componentinin/componentu": bare UI noun before an inflected "component"
_DESCRIPTION_PHRASE_RE = re.compile(
    r"\b([a-z]+(?:table|tooltip|dropdown|select|input|button|modal|dialog|popover|menu"
    r"|card|list|grid|form|chart|editor|picker|slider|switch|checkbox|radio|badge|chip"
    r"|avatar|calendar|tree|panel|toolbar|navbar|sidebar|footer|header))\s+component[iu]",
    re.IGNORECASE | re.ASCII,
)


@lru_cache(maxsize=8)
def _reserved_patterns(prefix: str, namespace: str) -> Tuple[Pattern, Pattern, Pattern]:
    pascal = re.escape(prefix.capitalize())
    return (
        re.compile(rf"\b{pascal}[A-Z][a-zA-Z0-9]*\b", re.ASCII),
        re.compile(rf"\b{re.escape(prefix)}-[a-z0-9-]+\b", re.IGNORECASE | re.ASCII),
        re.compile(rf"@{re.escape(namespace)}/([a-z0-9-]+)", re.IGNORECASE | re.ASCII),
    )


def looks_like_component_name(name: str) -> bool:
    """At least 3 chars, no leading digit, and mentions a UI vocabulary word."""
    if len(name) < 3 or name[0].isdigit():
        return False
    lower = name.lower()
    return any(k in lower for k in UI_KEYWORDS)


def is_reserved_name(name: str, prefix: str = RESERVED_PREFIX) -> bool:
    return name.startswith(prefix.capitalize()) or name.startswith(f"{prefix}-")


def extract_title_prefix(title: Optional[str], names: Sequence[str]) -> Optional[str]:
    """
    Component explicitly named at the start of the title.
    "Datatable componenti içinde..." -> "datatable"; "Tooltip header hatası" -> "tooltip".
    names is canonical + aliases in dictionary order; the first hit wins.
    """
    if not title:
        return None
    lower_title = title.lower().strip()
    for name in names:
        if re.match(rf"{re.escape(name)}\s+component[ia]?\b", lower_title, re.IGNORECASE | re.ASCII):
            return name
    words = lower_title.split()
    if words and words[0] in names:
        return words[0]
    return None


def match_keywords(text: Optional[str], dictionary: AliasDictionary) -> Optional[str]:
    """
    Canonical name of the first component (longest alias first) with an alias in text.
    A word-boundary hit is tried before a plain substring hit.
    """
    if not text:
        return None
    lower_text = text.lower()
    for entry in dictionary.by_longest_alias():
        aliases = [a for a in entry.aliases if a]
        for alias in aliases:
            if re.search(rf"\b{re.escape(alias)}\b", lower_text, re.ASCII):
                return entry.name
        for alias in aliases:
            if alias in lower_text:
                return entry.name
    return None


def extract_identifier_components(
    text: Optional[str],
    prefix: str = RESERVED_PREFIX,
    namespace: str = RESERVED_NAMESPACE,
) -> List[str]:
    """
    Structured identifiers, in pass order:
    reserved PascalCase (CfaButton), reserved kebab (cfa-list-section),
    namespace imports (@cfa-web-components/cfa-page-header -> cfa-page-header),
    then other PascalCase names that look like components (InputField).
    """
    if not text:
        return []
    pascal_re, kebab_re, import_re = _reserved_patterns(prefix, namespace)
    found: List[str] = []
    found.extend(pascal_re.findall(text))
    found.extend(kebab_re.findall(text))
    found.extend(m.group(1) for m in import_re.finditer(text))
    reserved_pascal = prefix.capitalize()
    for match in _PASCAL_RE.findall(text):
        if match.startswith(reserved_pascal) or match in COMMON_TYPE_NAMES:
            continue
        if looks_like_component_name(match):
            found.append(match)
    return list(dict.fromkeys(found))


def extract_kebab_components(text: Optional[str]) -> List[str]:
    """Generic kebab-case tokens (data-table, my-modal) that look like components."""
    if not text:
        return []
    return list(dict.fromkeys(m for m in _KEBAB_RE.findall(text) if looks_like_component_name(m)))


def extract_description_phrase(description: Optional[str]) -> Optional[str]:
    """"Datatable componentinin ..." -> "datatable"."""
    if not description:
        return None
    m = _DESCRIPTION_PHRASE_RE.search(description)
    if not m:
        return None
    return m.group(1).strip().lower() or None
