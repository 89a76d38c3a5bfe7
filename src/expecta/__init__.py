"""expecta - 断言库的 matcher 组合核心"""

from .bridge import satisfy_all_of_matcher
from .core import (
    Expression,
    MatcherFunc,
    NonNilMatcherFunc,
    Predicate,
    PredicateResult,
    PredicateStatus,
    SourceLocation,
    satisfy_all_of,
    satisfy_all_of_list,
)
from .utils.logger import logger

__all__ = [
    "Expression",
    "MatcherFunc",
    "NonNilMatcherFunc",
    "Predicate",
    "PredicateResult",
    "PredicateStatus",
    "SourceLocation",
    "satisfy_all_of",
    "satisfy_all_of_list",
    "satisfy_all_of_matcher",
    "logger",
]
