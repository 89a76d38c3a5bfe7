"""桥接模块 - 面向动态调用方的 matcher 协议"""

from .dynamic import (
    DynamicExpectationMessage,
    DynamicPredicate,
    DynamicPredicateResult,
    DynamicPredicateStatus,
    satisfy_all_of_matcher,
)
from .validators import FailureHint

__all__ = [
    "DynamicExpectationMessage",
    "DynamicPredicate",
    "DynamicPredicateResult",
    "DynamicPredicateStatus",
    "satisfy_all_of_matcher",
    "FailureHint",
]
