"""
Structural decoding of MediaWiki and Google Suggest XML responses.

Each decoder checks the document shape once and returns plain Python
values. A container the API leaves out (a page without language links,
a missing page) decodes to an empty list; a document without the
expected top-level structure raises ResponseFormatError.
"""

import xml.etree.ElementTree as ET
from dataclasses import dataclass

from .api_client import ResponseFormatError


@dataclass(frozen=True)
class LanguageLink:
    """One cross-language link of a page."""

    language: str
    title: str


@dataclass(frozen=True)
class Coordinates:
    latitude: float
    longitude: float


def _query(root: ET.Element) -> ET.Element:
    query = root.find("query")
    if query is None:
        raise ResponseFormatError(f"Response <{root.tag}> has no <query> element")
    return query


def _attribute(element: ET.Element, name: str) -> str:
    value = element.get(name)
    if value is None:
        raise ResponseFormatError(f"<{element.tag}> is missing the '{name}' attribute")
    return value


def _titles(elements: list[ET.Element]) -> list[str]:
    return [_attribute(element, "title") for element in elements]


def _first_page(root: ET.Element) -> ET.Element | None:
    """Return the single <page> of a prop=... query, if any."""
    return _query(root).find("pages/page")


def decode_backlinks(root: ET.Element) -> list[str]:
    """
    Decode ``query > backlinks > bl[]`` into titles.

    Example:
        >>> root = ET.fromstring(
        ...     '<api><query><backlinks><bl ns="0" title="Berlin, Germany" />'
        ...     '</backlinks></query></api>'
        ... )
        >>> decode_backlinks(root)
        ['Berlin, Germany']
    """
    return _titles(_query(root).findall("backlinks/bl"))


def decode_category_members(root: ET.Element) -> list[str]:
    """Decode ``query > categorymembers > cm[]`` into titles."""
    return _titles(_query(root).findall("categorymembers/cm"))


def decode_page_links(root: ET.Element) -> list[str]:
    """Decode ``query > pages > page > links > pl[]`` into titles."""
    page = _first_page(root)
    if page is None:
        return []
    return _titles(page.findall("links/pl"))


def decode_language_links(root: ET.Element) -> list[LanguageLink]:
    """Decode ``query > pages > page > langlinks > ll[]``.

    The link target is the element text, the language its ``lang`` attribute.
    """
    page = _first_page(root)
    if page is None:
        return []
    return [
        LanguageLink(language=_attribute(ll, "lang"), title=ll.text or "")
        for ll in page.findall("langlinks/ll")
    ]


def decode_coordinates(root: ET.Element) -> Coordinates | None:
    """Decode the primary ``co`` node of a prop=coordinates query."""
    page = _first_page(root)
    if page is None:
        return None
    co = page.find("coordinates/co")
    if co is None:
        return None
    try:
        return Coordinates(
            latitude=float(_attribute(co, "lat")),
            longitude=float(_attribute(co, "lon")),
        )
    except ValueError as e:
        raise ResponseFormatError(f"Invalid coordinate value: {e}") from e


def decode_suggestions(root: ET.Element) -> list[str]:
    """Decode Google Suggest toolbar XML.

    Shape: ``<toplevel><CompleteSuggestion><suggestion data="..."/>...``
    """
    suggestions = []
    for entry in root.findall("CompleteSuggestion"):
        suggestion = entry.find("suggestion")
        if suggestion is None:
            raise ResponseFormatError("<CompleteSuggestion> without <suggestion>")
        suggestions.append(_attribute(suggestion, "data"))
    return suggestions
