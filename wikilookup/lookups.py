"""
Wikipedia, Wikidata and Google Suggest lookups.

Every lookup validates its reference, issues one GET (mutual links issue
two, expand one per translated language), decodes the response and
shapes it into rows. Failures are logged and returned as an error
LookupResult instead of being raised.

Example:
    >>> result = synonyms("de:Berlin")
    >>> if result.ok:
    ...     print(result.rows[:3])
"""

import logging
import xml.etree.ElementTree as ET
from collections.abc import Callable, Iterable

from .api_client import LookupClient, WikiLookupError
from .config import config
from .decoding import (
    decode_backlinks,
    decode_category_members,
    decode_coordinates,
    decode_language_links,
    decode_page_links,
    decode_suggestions,
)
from .references import ArticleReference, normalize_languages, parse_article, parse_category
from .results import LookupResult
from .wikidata import first_entity_claims, single_valued_facts

logger = logging.getLogger(__name__)

MAIN_NAMESPACE = 0
CATEGORY_NAMESPACE = 14

_default_client: LookupClient | None = None


def get_default_client() -> LookupClient:
    """Return the shared client used when a lookup gets no explicit client."""
    global _default_client
    if _default_client is None:
        _default_client = LookupClient()
    return _default_client


def _failed(lookup: str, subject: object, error: WikiLookupError) -> LookupResult:
    logger.warning(f"{lookup} lookup for '{subject}' failed: {error}")
    return LookupResult.failure(error)


def _fetch_titles(
    lookup: str,
    ref: ArticleReference,
    params: dict,
    decoder: Callable[[ET.Element], list[str]],
    client: LookupClient | None,
) -> LookupResult:
    """Run one XML title-list query against the reference's language edition."""
    client = client or get_default_client()
    try:
        root = client.get_xml(client.wikipedia_url(ref.language), params)
        titles = decoder(root)
    except WikiLookupError as e:
        return _failed(lookup, ref, e)

    logger.debug(f"{lookup} lookup for '{ref}' returned {len(titles)} titles")
    return LookupResult.from_rows(titles)


def _backlinks_params(ref: ArticleReference, redirects_only: bool) -> dict:
    params = {
        "action": "query",
        "list": "backlinks",
        "blnamespace": MAIN_NAMESPACE,
        "bllimit": "max",
        "format": "xml",
        "bltitle": ref.request_title,
    }
    if redirects_only:
        params["blfilterredir"] = "redirects"
    return params


def _category_params(ref: ArticleReference, namespace: int) -> dict:
    return {
        "action": "query",
        "list": "categorymembers",
        "cmlimit": "max",
        "cmprop": "title",
        "cmtype": "subcat|page",
        "format": "xml",
        "cmnamespace": namespace,
        "cmtitle": ref.request_title,
    }


def _synonyms_of(ref: ArticleReference, client: LookupClient | None) -> LookupResult:
    return _fetch_titles(
        "synonyms", ref, _backlinks_params(ref, redirects_only=True), decode_backlinks, client
    )


def synonyms(article: str, client: LookupClient | None = None) -> LookupResult:
    """
    Return the redirects (synonyms) of a Wikipedia article.

    Args:
        article: Reference in the form "language:Article_Title" ("de:Berlin")
        client: Client to use (default: shared client)

    Returns:
        LookupResult with the redirect titles in API order
    """
    ref = parse_article(article)
    if ref is None:
        return LookupResult.empty()
    return _synonyms_of(ref, client)


def translations(
    article: str,
    target_languages: str | Iterable[str] | None = None,
    as_object: bool = False,
    skip_header: bool = False,
    client: LookupClient | None = None,
) -> LookupResult:
    """
    Return the language links (translations) of a Wikipedia article.

    Every requested target language is pre-filled with the source title,
    so it is present even when the article has no link to that language.
    The source language always maps to the source title with underscores
    replaced by spaces.

    Args:
        article: Reference in the form "language:Article_Title"
        target_languages: Languages to restrict the links to (default: all)
        as_object: Return a {language: title} dict instead of rows
        skip_header: Return bare titles instead of [language, title] pairs
        client: Client to use (default: shared client)

    Returns:
        LookupResult whose rows are the dict, the pairs or the titles

    Example:
        >>> translations("de:Berlin", ["en", "fr"]).rows
        [['en', 'Berlin'], ['fr', 'Berlin'], ['de', 'Berlin']]
    """
    ref = parse_article(article)
    if ref is None:
        return LookupResult.empty()

    languages = normalize_languages(target_languages)
    results = {language: ref.display_title for language in languages}

    client = client or get_default_client()
    params = {
        "action": "query",
        "prop": "langlinks",
        "format": "xml",
        "lllimit": "max",
        "titles": ref.request_title,
    }
    try:
        links = decode_language_links(client.get_xml(client.wikipedia_url(ref.language), params))
    except WikiLookupError as e:
        return _failed("translations", ref, e)

    for link in links:
        if languages and link.language not in languages:
            continue
        results[link.language] = link.title
    results[ref.language] = ref.display_title

    if as_object:
        return LookupResult.from_rows(results)
    if skip_header:
        return LookupResult.from_rows(list(results.values()))
    return LookupResult.from_rows([[language, title] for language, title in results.items()])


def expand(
    article: str,
    target_languages: str | Iterable[str] | None = None,
    as_object: bool = False,
    client: LookupClient | None = None,
) -> LookupResult:
    """
    Return translations of an article, each followed by its synonyms.

    Synonyms are looked up one language at a time in translation order. A
    language whose synonym lookup fails keeps its translated title with no
    synonyms.

    Returns:
        LookupResult with rows [language, title, *synonyms], or in object
        mode a dict {language: [title, *synonyms]}
    """
    ref = parse_article(article)
    if ref is None:
        return LookupResult.empty()

    translated = translations(
        article, normalize_languages(target_languages), as_object=True, client=client
    )
    if translated.failed:
        return translated

    rows: dict[str, list[str]] = {}
    for language, title in translated.rows.items():
        found = LookupResult.empty()
        if title:
            found = _synonyms_of(ArticleReference(language=language, title=title), client)
        rows[language] = [title, *found.rows]

    if as_object:
        return LookupResult.from_rows(rows)
    return LookupResult.from_rows([[language, *row] for language, row in rows.items()])


def category_members(category: str, client: LookupClient | None = None) -> LookupResult:
    """
    Return the article members of a Wikipedia category.

    Args:
        category: Reference in the form "language:Category:Title"
            ("en:Category:Visitor_attractions_in_Berlin")
    """
    ref = parse_category(category)
    if ref is None:
        return LookupResult.empty()
    return _fetch_titles(
        "category members",
        ref,
        _category_params(ref, MAIN_NAMESPACE),
        decode_category_members,
        client,
    )


def subcategories(category: str, client: LookupClient | None = None) -> LookupResult:
    """Return the subcategories of a Wikipedia category."""
    ref = parse_category(category)
    if ref is None:
        return LookupResult.empty()
    return _fetch_titles(
        "subcategories",
        ref,
        _category_params(ref, CATEGORY_NAMESPACE),
        decode_category_members,
        client,
    )


def inbound_links(article: str, client: LookupClient | None = None) -> LookupResult:
    """Return the main-namespace pages linking to an article, redirects included."""
    ref = parse_article(article)
    if ref is None:
        return LookupResult.empty()
    return _fetch_titles(
        "inbound links", ref, _backlinks_params(ref, redirects_only=False), decode_backlinks, client
    )


def outbound_links(article: str, client: LookupClient | None = None) -> LookupResult:
    """Return the main-namespace pages an article links to."""
    ref = parse_article(article)
    if ref is None:
        return LookupResult.empty()
    params = {
        "action": "query",
        "prop": "links",
        "plnamespace": MAIN_NAMESPACE,
        "format": "xml",
        "pllimit": "max",
        "titles": ref.request_title,
    }
    return _fetch_titles("outbound links", ref, params, decode_page_links, client)


def mutual_links(article: str, client: LookupClient | None = None) -> LookupResult:
    """
    Return pages that both link to and are linked from an article.

    The result keeps the order of the inbound links, without duplicates.
    If either underlying lookup fails the whole lookup fails.
    """
    ref = parse_article(article)
    if ref is None:
        return LookupResult.empty()

    inbound = inbound_links(article, client=client)
    if inbound.failed:
        return inbound
    if not inbound.rows:
        return LookupResult.empty()

    outbound = outbound_links(article, client=client)
    if outbound.failed:
        return outbound

    linked_from = set(outbound.rows)
    mutual = dict.fromkeys(title for title in inbound.rows if title in linked_from)
    return LookupResult.from_rows(list(mutual))


def geocoordinates(
    article: str, host_language: str | None = None, client: LookupClient | None = None
) -> LookupResult:
    """
    Return the primary coordinates of an article as [[latitude, longitude]].

    The request goes to the ``host_language`` edition, falling back to the
    ``geocoordinates.language`` setting ("en" by default). When that setting
    is null the article's own language is used.
    """
    ref = parse_article(article)
    if ref is None:
        return LookupResult.empty()

    host = host_language or config.get("geocoordinates.language") or ref.language
    client = client or get_default_client()
    params = {
        "action": "query",
        "prop": "coordinates",
        "format": "xml",
        "colimit": "max",
        "coprimary": "primary",
        "titles": ref.request_title,
    }
    try:
        coordinates = decode_coordinates(client.get_xml(client.wikipedia_url(host), params))
    except WikiLookupError as e:
        return _failed("geocoordinates", ref, e)

    if coordinates is None:
        return LookupResult.empty()
    return LookupResult.from_rows([[coordinates.latitude, coordinates.longitude]])


def wikidata_facts(article: str, client: LookupClient | None = None) -> LookupResult:
    """
    Return single-valued Wikidata facts for a Wikipedia article.

    The article's Wikidata item is resolved by site and title. Only claims
    with exactly one supported value are returned, as [propertyId, value].

    Example:
        >>> wikidata_facts("de:Berlin").rows[:2]
        [['P17', 'Q183'], ['P1082', '+3644826']]
    """
    ref = parse_article(article)
    if ref is None:
        return LookupResult.empty()

    client = client or get_default_client()
    params = {
        "action": "wbgetentities",
        "sites": f"{ref.language}wiki",
        "format": "json",
        "props": "claims",
        "titles": ref.request_title,
    }
    try:
        data = client.get_json(client.wikidata_url(), params)
        facts = single_valued_facts(first_entity_claims(data))
    except WikiLookupError as e:
        return _failed("wikidata facts", ref, e)

    return LookupResult.from_rows(facts)


def google_suggest(
    keyword: str, language: str | None = None, client: LookupClient | None = None
) -> LookupResult:
    """
    Return Google Suggest completions for a keyword.

    Args:
        keyword: Search keyword
        language: Interface language (default: ``suggest.default_language``)
        client: Client to use (default: shared client)
    """
    if not keyword:
        return LookupResult.empty()

    language = language or config.get("suggest.default_language", "en")
    client = client or get_default_client()
    params = {"output": "toolbar", "hl": language, "q": keyword}
    try:
        suggestions = decode_suggestions(client.get_xml(client.suggest_url(), params))
    except WikiLookupError as e:
        return _failed("suggest", keyword, e)

    return LookupResult.from_rows(suggestions)
