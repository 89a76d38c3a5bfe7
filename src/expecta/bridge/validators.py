"""动态 matcher 列表的验证函数"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from rusty_results.prelude import Err, Ok, Result

from ..config import EMPTY_MATCHERS_MESSAGE, UNSUPPORTED_MATCHER_MESSAGE


@dataclass(frozen=True)
class FailureHint:
    """带建议的错误类型"""

    message: str
    suggestion: str | None = None


def is_dynamic_matcher(matcher: Any) -> bool:
    """对象是否实现了 satisfies() 或 matches() 之一"""
    return callable(getattr(matcher, "satisfies", None)) or callable(
        getattr(matcher, "matches", None)
    )


def validate_dynamic_matchers(matchers: Iterable[Any]) -> Result[list[Any], FailureHint]:
    """验证动态 matcher 列表（非空，每个元素都实现 matcher 协议）

    不会调用任何 matcher，收集所有不合法的位置后一起报告。
    """
    matchers_list = list(matchers)

    if not matchers_list:
        return Err(FailureHint(EMPTY_MATCHERS_MESSAGE))

    errors = []
    for index, matcher in enumerate(matchers_list):
        if not is_dynamic_matcher(matcher):
            errors.append(f"#{index} ({type(matcher).__name__})")

    if errors:
        return Err(
            FailureHint(
                f"{UNSUPPORTED_MATCHER_MESSAGE}: " + "; ".join(errors),
                suggestion="用 DynamicPredicate 包装，或实现 matches(actual_block, failure_message, location)",
            )
        )

    return Ok(matchers_list)
