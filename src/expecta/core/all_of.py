"""合取组合器 - 所有 matcher 都匹配时才匹配"""

import logging
from collections.abc import Iterable, Sequence
from typing import Any, TypeVar

from ..config import ALL_OF_ITEM_FORMAT, ALL_OF_PREFIX, ALL_OF_SEPARATOR
from .expression import Expression, stringify
from .messages import ExpectationMessage, ExpectedActualValueTo, ExpectedCustomValueTo
from .predicate import Predicate, PredicateResult, PredicateStatus, as_predicate

T = TypeVar("T")

logger = logging.getLogger("expecta.all_of")


def satisfy_all_of(*matchers: Any) -> Predicate:
    """所有 matcher 都满足时才满足

    Args:
        matchers: Predicate、MatcherFunc，或实现原生 satisfies(expression)、
            matches(expression, failure_message) 的对象，至少一个。
            动态协议对象请用 satisfy_all_of_matcher()

    Returns:
        组合后的 Predicate，值缺失时状态为 FAIL
    """
    return satisfy_all_of_list(matchers)


def satisfy_all_of_list(matchers: Iterable[Any]) -> Predicate:
    """satisfy_all_of 的列表形式

    Raises:
        ValueError: matchers 为空
        TypeError: 存在不支持的 matcher
    """
    # 构造时统一规整，调用时不再区分风格
    predicates = [as_predicate(matcher) for matcher in matchers]
    if not predicates:
        raise ValueError("satisfy_all_of 至少需要一个 matcher")

    def satisfies(expression: Expression[T]) -> PredicateResult:
        return _evaluate_all(predicates, expression)

    return Predicate(satisfies).require_non_nil


def _evaluate_all(predicates: Sequence[Predicate], expression: Expression[T]) -> PredicateResult:
    logger.debug(f"[AllOf] Evaluating {len(predicates)} matchers")

    postfix_messages: list[str] = []
    matches = True

    # 每个 matcher 都要求值，保证消息完整
    for index, predicate in enumerate(predicates):
        result = predicate.satisfies(expression)
        logger.debug(f"[AllOf] Matcher #{index}: {result.status.value}")

        matches = matches and result.status is PredicateStatus.MATCHES
        postfix_messages.append(ALL_OF_ITEM_FORMAT.format(result.message.expected_message))

    description = ALL_OF_PREFIX + ALL_OF_SEPARATOR.join(postfix_messages)

    message: ExpectationMessage
    actual_value = expression.evaluate()
    if actual_value is not None:
        message = ExpectedCustomValueTo(description, stringify(actual_value))
        status = PredicateStatus.from_bool(matches)
    else:
        message = ExpectedActualValueTo(description)
        status = PredicateStatus.FAIL

    return PredicateResult(status, message)
