"""Card query language and name matching."""

from .aliases import AliasConfig, AliasResolver
from .fuzzy import (
    FUZZY_MAX_DISTANCE,
    levenshtein,
    match_card_name,
    strict_name_search,
)
from .query import (
    Predicate,
    advanced_search,
    compare_numeric,
    is_predicate_expression,
    parse_predicate,
    parse_query,
)

__all__ = [
    "FUZZY_MAX_DISTANCE",
    "AliasConfig",
    "AliasResolver",
    "Predicate",
    "advanced_search",
    "compare_numeric",
    "is_predicate_expression",
    "levenshtein",
    "match_card_name",
    "parse_predicate",
    "parse_query",
    "strict_name_search",
]
