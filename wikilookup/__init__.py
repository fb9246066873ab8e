"""wikilookup: spreadsheet-style lookups against Wikipedia, Wikidata and Google Suggest.

Public interface for the lookup functions and their result type.
"""

from .api_client import (
    LookupClient,
    MediaWikiAPIError,
    RequestFailedError,
    ResponseFormatError,
    WikiLookupError,
)
from .lookups import (
    category_members,
    expand,
    geocoordinates,
    google_suggest,
    inbound_links,
    mutual_links,
    outbound_links,
    subcategories,
    synonyms,
    translations,
    wikidata_facts,
)
from .references import ArticleReference, normalize_languages, parse_article, parse_category
from .results import LookupResult, LookupStatus

__all__ = [
    "LookupClient",
    "LookupResult",
    "LookupStatus",
    "ArticleReference",
    "WikiLookupError",
    "RequestFailedError",
    "ResponseFormatError",
    "MediaWikiAPIError",
    "parse_article",
    "parse_category",
    "normalize_languages",
    "synonyms",
    "translations",
    "expand",
    "category_members",
    "subcategories",
    "inbound_links",
    "outbound_links",
    "mutual_links",
    "geocoordinates",
    "wikidata_facts",
    "google_suggest",
]
