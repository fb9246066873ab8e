"""
Wikidata claim simplification.

A wbgetentities response groups statements by property. Each statement's
mainsnak carries a typed datavalue; simplification reduces it to one
scalar so a fact fits in a single spreadsheet cell.
"""

import logging
from typing import Any

from .api_client import ResponseFormatError

logger = logging.getLogger(__name__)

# Datatypes whose datavalue value is already the scalar we want
_PLAIN_DATATYPES = {"string", "commonsMedia", "url"}


def simplify_statement(statement: dict) -> str | None:
    """
    Reduce one statement to a scalar by its mainsnak datatype.

    Args:
        statement: A statement object from ``entity["claims"][property]``

    Returns:
        The simplified value, or None for an absent mainsnak or datavalue
        (e.g. "no value" snaks) and for unsupported datatypes

    Example:
        >>> simplify_statement({"mainsnak": {"datatype": "wikibase-item",
        ...     "datavalue": {"value": {"numeric-id": 64}}}})
        'Q64'
    """
    if not isinstance(statement, dict):
        raise ResponseFormatError(f"Statement is not an object: {statement!r}")

    mainsnak = statement.get("mainsnak")
    if not mainsnak:
        return None
    if not isinstance(mainsnak, dict):
        raise ResponseFormatError(f"Mainsnak is not an object: {mainsnak!r}")

    datatype = mainsnak.get("datatype")
    datavalue = mainsnak.get("datavalue")
    if not datavalue:
        return None
    if not isinstance(datavalue, dict):
        raise ResponseFormatError(f"Datavalue is not an object: {datavalue!r}")
    value = datavalue.get("value")

    try:
        if datatype in _PLAIN_DATATYPES:
            return value
        if datatype == "monolingualtext":
            return value["text"]
        if datatype == "wikibase-item":
            return f"Q{value['numeric-id']}"
        if datatype == "time":
            return value["time"]
        if datatype == "quantity":
            return value["amount"]
    except (KeyError, TypeError) as e:
        raise ResponseFormatError(f"Malformed {datatype} datavalue: {value!r}") from e

    logger.debug(f"Skipping unsupported datatype {datatype!r}")
    return None


def simplify_claims(claims: dict[str, list[dict]]) -> dict[str, list[str]]:
    """Simplify every statement of every claim, dropping empty values."""
    simplified = {}
    for property_id, statements in claims.items():
        if not isinstance(statements, list):
            raise ResponseFormatError(f"Claim {property_id} is not a list of statements")
        values = [simplify_statement(statement) for statement in statements]
        simplified[property_id] = [value for value in values if value is not None]
    return simplified


def single_valued_facts(claims: dict[str, list[dict]]) -> list[list[Any]]:
    """
    Return ``[propertyId, value]`` rows for claims with exactly one value.

    Multi-valued claims and claims with no supported statement are dropped.
    """
    return [
        [property_id, values[0]]
        for property_id, values in simplify_claims(claims).items()
        if len(values) == 1
    ]


def first_entity_claims(data: dict) -> dict[str, list[dict]]:
    """Return the claims of the first entity in a wbgetentities response.

    A missing page yields an entity without claims, which decodes to {}.
    """
    entities = data.get("entities")
    if not isinstance(entities, dict):
        raise ResponseFormatError("wbgetentities response has no 'entities' object")
    if not entities:
        return {}

    entity = next(iter(entities.values()))
    if not isinstance(entity, dict):
        raise ResponseFormatError(f"Entity is not an object: {entity!r}")
    claims = entity.get("claims") or {}
    if not isinstance(claims, dict):
        raise ResponseFormatError("Entity 'claims' is not an object")
    return claims
