"""核心模块 - 表达式、消息、matcher 契约和合取组合器"""

from .all_of import satisfy_all_of, satisfy_all_of_list
from .expression import Expression, SourceLocation
from .messages import ExpectationMessage, FailureMessage
from .predicate import (
    ExpectationStyle,
    MatcherFunc,
    NonNilMatcherFunc,
    Predicate,
    PredicateResult,
    PredicateStatus,
)

__all__ = [
    "satisfy_all_of",
    "satisfy_all_of_list",
    "Expression",
    "SourceLocation",
    "ExpectationMessage",
    "FailureMessage",
    "ExpectationStyle",
    "MatcherFunc",
    "NonNilMatcherFunc",
    "Predicate",
    "PredicateResult",
    "PredicateStatus",
]
