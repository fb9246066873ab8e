"""Spreadsheet-compatible lookup functions.

Call-compatible with the custom formulas of the Wikipedia sheets add-on:
each returns a list (or a dict in object mode) when there is data and the
empty string otherwise, whatever the reason.

Example:
    >>> WIKISYNONYMS("de:Berlin")[:2]
    ['Berlin, Germany', 'Berlin (Germany)']
    >>> WIKISYNONYMS("Berlin")
    ''
"""

from . import lookups


def WIKISYNONYMS(article, client=None):
    """Wikipedia synonyms (redirects) for "language:Article_Title"."""
    return lookups.synonyms(article, client=client).to_cell()


def WIKITRANSLATE(
    article,
    opt_target_languages=None,
    opt_return_as_object=False,
    opt_skip_header=False,
    client=None,
):
    """Wikipedia translations (language links), optionally limited to some languages."""
    return lookups.translations(
        article,
        opt_target_languages,
        as_object=bool(opt_return_as_object),
        skip_header=bool(opt_skip_header),
        client=client,
    ).to_cell()


def WIKIEXPAND(article, opt_target_languages=None, opt_return_as_object=False, client=None):
    """Wikipedia translations plus the synonyms of each translation."""
    return lookups.expand(
        article, opt_target_languages, as_object=bool(opt_return_as_object), client=client
    ).to_cell()


def WIKICATEGORYMEMBERS(category, client=None):
    """Members of a category given as "language:Category:Title"."""
    return lookups.category_members(category, client=client).to_cell()


def WIKISUBCATEGORIES(category, client=None):
    """Subcategories of a category given as "language:Category:Title"."""
    return lookups.subcategories(category, client=client).to_cell()


def WIKIINBOUNDLINKS(article, client=None):
    """Main-namespace pages linking to the article, redirects included."""
    return lookups.inbound_links(article, client=client).to_cell()


def WIKIOUTBOUNDLINKS(article, client=None):
    """Main-namespace pages the article links to."""
    return lookups.outbound_links(article, client=client).to_cell()


def WIKIMUTUALLINKS(article, client=None):
    """Pages that both link to and are linked from the article."""
    return lookups.mutual_links(article, client=client).to_cell()


def WIKIGEOCOORDINATES(article, client=None):
    """[[latitude, longitude]] of the article's primary coordinates."""
    return lookups.geocoordinates(article, client=client).to_cell()


def WIKIDATAFACTS(article, client=None):
    """Single-valued Wikidata facts as [propertyId, value] rows."""
    return lookups.wikidata_facts(article, client=client).to_cell()


def GOOGLESUGGEST(keyword, opt_language=None, client=None):
    """Google Suggest completions, in English unless a language is given."""
    return lookups.google_suggest(keyword, opt_language, client=client).to_cell()
