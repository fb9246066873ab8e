"""
Parsing of article references and language filters.

Lookups address pages with compact ``language:Title`` strings, the form
users type into a spreadsheet cell ("de:Berlin",
"en:Category:Visitor_attractions_in_Berlin").
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

_WHITESPACE = re.compile(r"\s")


@dataclass(frozen=True)
class ArticleReference:
    """A page on one Wikipedia language edition."""

    language: str
    title: str

    @property
    def request_title(self) -> str:
        """Title as sent to the API, whitespace replaced by underscores."""
        return _WHITESPACE.sub("_", self.title)

    @property
    def display_title(self) -> str:
        """Title as shown to users, underscores replaced by spaces."""
        return self.title.replace("_", " ")

    def __str__(self) -> str:
        return f"{self.language}:{self.title}"


def parse_article(reference: str | None) -> ArticleReference | None:
    """
    Parse ``language:Title`` into an ArticleReference.

    Only the first two colon-separated segments are used, so anything
    after a second colon is ignored.

    Args:
        reference: Compact article reference

    Returns:
        The parsed reference, or None if the language or title is missing

    Example:
        >>> parse_article("de:Berlin")
        ArticleReference(language='de', title='Berlin')
        >>> parse_article("Berlin") is None
        True
    """
    if not reference or not isinstance(reference, str):
        return None

    parts = reference.split(":")
    if len(parts) < 2 or not parts[0] or not parts[1]:
        return None

    return ArticleReference(language=parts[0], title=parts[1])


def parse_category(reference: str | None) -> ArticleReference | None:
    """
    Parse ``language:Category:Title`` into an ArticleReference.

    Category titles carry the namespace prefix, so the second and third
    segments are rejoined with a colon.

    Example:
        >>> parse_category("en:Category:Visitor_attractions_in_Berlin").title
        'Category:Visitor_attractions_in_Berlin'
    """
    if not reference or not isinstance(reference, str):
        return None

    parts = reference.split(":")
    if len(parts) < 3 or not parts[0] or not parts[1] or not parts[2]:
        return None

    return ArticleReference(language=parts[0], title=f"{parts[1]}:{parts[2]}")


def normalize_languages(languages: str | Iterable[Any] | None) -> list[str]:
    """
    Normalize a language filter into an ordered, de-duplicated list.

    Accepts None, a single language code, or any iterable of codes. A
    spreadsheet range arrives as a list of rows, so nested lists and tuples
    are flattened one level. Empty codes are dropped and first occurrences
    keep their position.

    Example:
        >>> normalize_languages(["en", "fr", "en", ""])
        ['en', 'fr']
        >>> normalize_languages("it")
        ['it']
        >>> normalize_languages([["fr"], ["en"]])
        ['fr', 'en']
    """
    if not languages:
        return []
    if isinstance(languages, str):
        languages = [languages]

    # dict preserves first-seen order
    seen: dict[str, None] = {}
    for entry in languages:
        cells = entry if isinstance(entry, (list, tuple)) else [entry]
        for language in cells:
            if language:
                seen[str(language).strip()] = None
    return [language for language in seen if language]
