"""动态协议桥接层 - 把无类型的 matcher 对象接到原生 Predicate 上

动态调用方只能提供两类对象：
- DynamicPredicate（或任何带 satisfies(actual_block, location) 的对象）
- 旧式 matcher：matches(actual_block, failure_message, location) -> bool
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable

from rusty_results.prelude import Err, Ok

from ..core.all_of import satisfy_all_of_list
from ..core.expression import Expression, SourceLocation
from ..core.messages import (
    ExpectationMessage,
    ExpectedActualValueTo,
    ExpectedCustomValueTo,
    ExpectedTo,
    Fail,
    FailureMessage,
)
from ..core.predicate import Predicate, PredicateResult, PredicateStatus
from .validators import validate_dynamic_matchers

logger = logging.getLogger("expecta.bridge")

ActualBlock = Callable[[], Any]


class DynamicPredicateStatus(IntEnum):
    MATCHES = 0
    DOES_NOT_MATCH = 1
    FAIL = 2

    @classmethod
    def from_native(cls, status: PredicateStatus) -> "DynamicPredicateStatus":
        return _STATUS_FROM_NATIVE[status]

    def to_native(self) -> PredicateStatus:
        return _STATUS_TO_NATIVE[self]


_STATUS_TO_NATIVE = {
    DynamicPredicateStatus.MATCHES: PredicateStatus.MATCHES,
    DynamicPredicateStatus.DOES_NOT_MATCH: PredicateStatus.DOES_NOT_MATCH,
    DynamicPredicateStatus.FAIL: PredicateStatus.FAIL,
}
_STATUS_FROM_NATIVE = {native: dynamic for dynamic, native in _STATUS_TO_NATIVE.items()}


class DynamicExpectationMessage:
    """ExpectationMessage 的动态包装"""

    def __init__(self, message: ExpectationMessage):
        self._message = message

    @classmethod
    def fail(cls, message: str) -> "DynamicExpectationMessage":
        return cls(Fail(message))

    @classmethod
    def expected_to(cls, message: str) -> "DynamicExpectationMessage":
        return cls(ExpectedTo(message))

    @classmethod
    def expected_actual_value_to(cls, message: str) -> "DynamicExpectationMessage":
        return cls(ExpectedActualValueTo(message))

    @classmethod
    def expected_custom_value_to(cls, message: str, actual: str) -> "DynamicExpectationMessage":
        return cls(ExpectedCustomValueTo(message, actual))

    @property
    def expected_message(self) -> str:
        return self._message.expected_message

    def to_string(self, actual: str, expected: str = "expected", to: str = "to") -> str:
        return self._message.to_string(actual, expected, to)

    def to_native(self) -> ExpectationMessage:
        return self._message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DynamicExpectationMessage):
            return NotImplemented
        return self._message == other._message

    def __repr__(self) -> str:
        return f"DynamicExpectationMessage({self._message!r})"


@dataclass(frozen=True)
class DynamicPredicateResult:
    """动态调用方看到的结果：状态 + 消息"""

    status: DynamicPredicateStatus
    message: DynamicExpectationMessage

    @classmethod
    def from_native(cls, result: PredicateResult) -> "DynamicPredicateResult":
        return cls(
            DynamicPredicateStatus.from_native(result.status),
            DynamicExpectationMessage(result.message),
        )

    def to_native(self) -> PredicateResult:
        return PredicateResult(self.status.to_native(), self.message.to_native())


class DynamicPredicate:
    """动态 Predicate：fn(actual_block, location) -> DynamicPredicateResult"""

    dynamic_protocol = True

    def __init__(
        self,
        fn: Callable[[ActualBlock, SourceLocation | None], DynamicPredicateResult],
    ):
        self._fn = fn

    def satisfies(
        self, actual_block: ActualBlock, location: SourceLocation | None = None
    ) -> DynamicPredicateResult:
        return self._fn(actual_block, location)


def _to_native_result(result: Any) -> PredicateResult:
    if isinstance(result, PredicateResult):
        return result
    return result.to_native()


def _element_predicate(matcher: Any, location: SourceLocation | None) -> Predicate:
    """把单个动态 matcher 包装成原生 Predicate

    求值异常不吞掉，直接传播给桥接层的调用方。
    """
    satisfies = getattr(matcher, "satisfies", None)
    if callable(satisfies):

        def forward(expression: Expression) -> PredicateResult:
            return _to_native_result(satisfies(expression.evaluate, location))

        return Predicate(forward)

    def legacy(expression: Expression) -> PredicateResult:
        failure_message = FailureMessage()
        success = matcher.matches(expression.evaluate, failure_message, location)
        return PredicateResult.from_bool(success, failure_message.to_expectation_message())

    return Predicate(legacy)


def satisfy_all_of_matcher(matchers: Iterable[Any]) -> DynamicPredicate:
    """动态调用方使用的 satisfyAllOf 入口

    空列表或不支持的对象返回 FAIL 结果，不抛异常，也不会调用任何 matcher。
    """
    matchers = list(matchers)

    def satisfies(actual_block: ActualBlock, location: SourceLocation | None) -> DynamicPredicateResult:
        match validate_dynamic_matchers(matchers):
            case Err(hint):
                logger.warning(f"[AllOf] Rejected matchers: {hint.message}")
                return DynamicPredicateResult(
                    DynamicPredicateStatus.FAIL,
                    DynamicExpectationMessage.fail(hint.message),
                )
            case Ok(valid_matchers):
                pass

        element_predicates = [_element_predicate(matcher, location) for matcher in valid_matchers]
        expression = Expression(actual_block, location=location)
        result = satisfy_all_of_list(element_predicates).satisfies(expression)
        return DynamicPredicateResult.from_native(result)

    return DynamicPredicate(satisfies)
