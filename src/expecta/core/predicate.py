"""Matcher 能力 - 统一的 satisfies(expression) -> PredicateResult 契约

两种风格在构造时统一成 Predicate：
- Predicate: 直接返回 PredicateResult
- MatcherFunc / NonNilMatcherFunc: 旧式回调，通过 FailureMessage 载体记录描述
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, TypeVar

from ..config import BE_NIL_HINT
from .expression import Expression
from .messages import ExpectationMessage, ExpectedActualValueTo, FailureMessage

T = TypeVar("T")


class ExpectationStyle(Enum):
    TO_MATCH = "toMatch"
    TO_NOT_MATCH = "toNotMatch"


class PredicateStatus(Enum):
    """单次匹配的结果状态

    FAIL 表示无法有意义地求值（例如值缺失），和 DOES_NOT_MATCH 区分开
    """

    MATCHES = "matches"
    DOES_NOT_MATCH = "doesNotMatch"
    FAIL = "fail"

    @classmethod
    def from_bool(cls, matches: bool) -> "PredicateStatus":
        return cls.MATCHES if matches else cls.DOES_NOT_MATCH

    def to_boolean(self, expectation: ExpectationStyle) -> bool:
        if expectation is ExpectationStyle.TO_MATCH:
            return self is PredicateStatus.MATCHES
        return self is PredicateStatus.DOES_NOT_MATCH


@dataclass(frozen=True)
class PredicateResult:
    """一次 matcher 求值的结果：状态 + 描述"""

    status: PredicateStatus
    message: ExpectationMessage

    @classmethod
    def from_bool(cls, matches: bool, message: ExpectationMessage) -> "PredicateResult":
        return cls(PredicateStatus.from_bool(matches), message)

    def to_boolean(self, expectation: ExpectationStyle) -> bool:
        return self.status.to_boolean(expectation)


class Predicate(Generic[T]):
    """Matcher 的统一形式

    Example:
        be_positive = Predicate.simple(
            "be positive",
            lambda expr: PredicateStatus.from_bool(expr.evaluate() > 0),
        )
    """

    def __init__(self, fn: Callable[[Expression[T]], PredicateResult]):
        self._fn = fn

    def satisfies(self, expression: Expression[T]) -> PredicateResult:
        """对表达式求值并返回结果（求值异常原样传播）"""
        return self._fn(expression)

    @property
    def predicate(self) -> "Predicate[T]":
        return self

    @property
    def require_non_nil(self) -> "Predicate[T]":
        """值缺失时强制返回 FAIL，并在消息后追加 be_nil 提示"""

        def satisfies(expression: Expression[T]) -> PredicateResult:
            result = self.satisfies(expression)
            if expression.evaluate() is None:
                return PredicateResult(
                    PredicateStatus.FAIL, result.message.appended_be_nil_hint()
                )
            return result

        return Predicate(satisfies)

    @classmethod
    def simple(
        cls, message: str, fn: Callable[[Expression[T]], PredicateStatus]
    ) -> "Predicate[T]":
        """只关心状态的 matcher，消息固定为 expected to <message>, got <actual>"""
        return cls(lambda expression: PredicateResult(fn(expression), ExpectedActualValueTo(message)))

    @classmethod
    def define(
        cls,
        message: str,
        fn: Callable[[Expression[T], ExpectationMessage], PredicateResult],
    ) -> "Predicate[T]":
        """需要自定义消息的 matcher，fn 收到默认消息后自行决定返回内容"""
        return cls(lambda expression: fn(expression, ExpectedActualValueTo(message)))

    def __and__(self, other: Any) -> "Predicate[T]":
        from .all_of import satisfy_all_of

        return satisfy_all_of(self, other)


class MatcherFunc(Generic[T]):
    """旧式 matcher：fn(expression, failure_message) -> bool"""

    def __init__(self, matcher: Callable[[Expression[T], FailureMessage], bool]):
        self._matcher = matcher

    def matches(self, expression: Expression[T], failure_message: FailureMessage) -> bool:
        return self._matcher(expression, failure_message)

    def does_not_match(self, expression: Expression[T], failure_message: FailureMessage) -> bool:
        return not self._matcher(expression, failure_message)

    @property
    def predicate(self) -> Predicate[T]:
        return _from_callback(self._matcher)

    def __and__(self, other: Any) -> Predicate[T]:
        from .all_of import satisfy_all_of

        return satisfy_all_of(self, other)


class NonNilMatcherFunc(MatcherFunc[T]):
    """旧式 matcher，值缺失时直接判定失败"""

    def matches(self, expression: Expression[T], failure_message: FailureMessage) -> bool:
        matches = self._matcher(expression, failure_message)
        if self._attach_nil_error_if_needed(expression, failure_message):
            return False
        return matches

    def does_not_match(self, expression: Expression[T], failure_message: FailureMessage) -> bool:
        matches = self._matcher(expression, failure_message)
        if self._attach_nil_error_if_needed(expression, failure_message):
            return False
        return not matches

    @property
    def predicate(self) -> Predicate[T]:
        return _from_callback(self._matcher).require_non_nil

    @staticmethod
    def _attach_nil_error_if_needed(expression: Expression[T], failure_message: FailureMessage) -> bool:
        if expression.evaluate() is None:
            failure_message.postfix_actual = BE_NIL_HINT
            return True
        return False


def _from_callback(callback: Callable[[Expression[T], FailureMessage], bool]) -> Predicate[T]:
    """每次调用新建 FailureMessage，结束后转成不可变结果，载体不外泄"""

    def satisfies(expression: Expression[T]) -> PredicateResult:
        failure_message = FailureMessage()
        matches = callback(expression, failure_message)
        return PredicateResult.from_bool(matches, failure_message.to_expectation_message())

    return Predicate(satisfies)


def as_predicate(matcher: Any) -> Predicate:
    """把任意受支持的 matcher 规整成 Predicate

    支持 Predicate、MatcherFunc，以及 satisfies(expression) -> PredicateResult
    或 matches(expression, failure_message) -> bool 的对象。动态协议对象
    （DynamicPredicate 等）要走 satisfy_all_of_matcher。

    Raises:
        TypeError: 动态协议对象，或既没有 satisfies() 也没有 matches() 方法
    """
    if isinstance(matcher, (Predicate, MatcherFunc)):
        return matcher.predicate

    if getattr(matcher, "dynamic_protocol", False):
        raise TypeError(
            f"{type(matcher).__name__} 属于动态协议，请使用 satisfy_all_of_matcher()"
        )

    satisfies = getattr(matcher, "satisfies", None)
    if callable(satisfies):
        return _from_satisfies(satisfies)

    matches = getattr(matcher, "matches", None)
    if callable(matches):
        return _from_callback(matches)

    raise TypeError(f"不支持的 matcher 类型: {type(matcher).__name__}")


def _from_satisfies(satisfies: Callable[[Expression[T]], Any]) -> Predicate[T]:
    """包装鸭子类型的 satisfies()，返回值必须是 PredicateResult"""

    def checked(expression: Expression[T]) -> PredicateResult:
        result = satisfies(expression)
        if not isinstance(result, PredicateResult):
            raise TypeError(
                f"satisfies() 必须返回 PredicateResult，得到 {type(result).__name__}"
            )
        return result

    return Predicate(checked)
