"""被测值表达式 - 延迟求值、带缓存的取值器"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from ..config import NIL_DESCRIPTION

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class SourceLocation:
    """断言所在的源码位置（只用于消息展示）"""

    file: str
    line: int

    def __str__(self) -> str:
        return f"{self.file}:{self.line}"


class Expression(Generic[T]):
    """Expression 状态封装：closure(延迟计算), location(源码位置), 缓存值

    - 延迟求值：首次调用 evaluate() 时才执行 closure
    - 开启缓存时只计算一次，之后直接返回缓存值
    - closure 抛出的异常不缓存，原样向上传播
    """

    def __init__(
        self,
        closure: Callable[[], T | None],
        location: SourceLocation | None = None,
        is_closure: bool = True,
        with_caching: bool = True,
    ):
        self._closure = closure
        self.location = location
        self.is_closure = is_closure
        self._with_caching = with_caching
        self._evaluated = False
        self._cached: T | None = None

    @classmethod
    def of(cls, value: T | None, location: SourceLocation | None = None) -> "Expression[T]":
        """直接包装一个已知值（非 closure 形式）"""
        return cls(lambda: value, location=location, is_closure=False)

    @property
    def caching(self) -> bool:
        return self._with_caching

    def evaluate(self) -> T | None:
        """求值；缺失时返回 None"""
        if self._with_caching and self._evaluated:
            return self._cached

        value = self._closure()
        if self._with_caching:
            self._cached = value
            self._evaluated = True
        return value

    def cast(self, fn: Callable[[T | None], U | None]) -> "Expression[U]":
        """基于当前表达式构造一个转换后的新表达式"""
        return Expression(
            lambda: fn(self.evaluate()),
            location=self.location,
            is_closure=self.is_closure,
            with_caching=self._with_caching,
        )

    def with_caching(self) -> "Expression[T]":
        return Expression(self._closure, self.location, self.is_closure, with_caching=True)

    def without_caching(self) -> "Expression[T]":
        return Expression(self._closure, self.location, self.is_closure, with_caching=False)

    def __repr__(self) -> str:
        location = f" at {self.location}" if self.location else ""
        return f"<Expression{location}>"


def stringify(value: Any) -> str:
    """把实际值渲染成消息中的字符串"""
    if value is None:
        return NIL_DESCRIPTION
    return str(value)
