"""期望消息 - 匹配结果的描述部分"""

from dataclasses import dataclass

from ..config import BE_NIL_HINT


class ExpectationMessage:
    """期望消息基类（不可变）

    子类对应不同的渲染方式，统一提供两个接口：
    - expected_message: 只包含描述部分，用于组合进其他消息
    - to_string(): 渲染成完整的 "expected to ..., got ..." 句子
    """

    @property
    def expected_message(self) -> str:
        raise NotImplementedError(f"{type(self).__name__} 必须实现 expected_message")

    def to_string(self, actual: str, expected: str = "expected", to: str = "to") -> str:
        raise NotImplementedError(f"{type(self).__name__} 必须实现 to_string()")

    def appended(self, suffix: str) -> "ExpectationMessage":
        return Appends(self, suffix)

    def appended_be_nil_hint(self) -> "ExpectationMessage":
        return Appends(self, BE_NIL_HINT)

    def with_details(self, details: str) -> "ExpectationMessage":
        return Details(self, details)


@dataclass(frozen=True)
class Fail(ExpectationMessage):
    """结构性失败，原样输出"""

    message: str

    @property
    def expected_message(self) -> str:
        return self.message

    def to_string(self, actual: str, expected: str = "expected", to: str = "to") -> str:
        return self.message


@dataclass(frozen=True)
class ExpectedTo(ExpectationMessage):
    """不展示实际值：expected to <message>"""

    message: str

    @property
    def expected_message(self) -> str:
        return self.message

    def to_string(self, actual: str, expected: str = "expected", to: str = "to") -> str:
        return f"{expected} {to} {self.message}"


@dataclass(frozen=True)
class ExpectedActualValueTo(ExpectationMessage):
    """由调用方提供实际值：expected to <message>, got <actual>"""

    message: str

    @property
    def expected_message(self) -> str:
        return self.message

    def to_string(self, actual: str, expected: str = "expected", to: str = "to") -> str:
        return f"{expected} {to} {self.message}, got {actual}"


@dataclass(frozen=True)
class ExpectedCustomValueTo(ExpectationMessage):
    """消息自带实际值的渲染结果，忽略调用方传入的 actual"""

    message: str
    actual: str

    @property
    def expected_message(self) -> str:
        return self.message

    def to_string(self, actual: str, expected: str = "expected", to: str = "to") -> str:
        return f"{expected} {to} {self.message}, got {self.actual}"


@dataclass(frozen=True)
class Appends(ExpectationMessage):
    inner: ExpectationMessage
    suffix: str

    @property
    def expected_message(self) -> str:
        return f"{self.inner.expected_message}{self.suffix}"

    def to_string(self, actual: str, expected: str = "expected", to: str = "to") -> str:
        return f"{self.inner.to_string(actual, expected, to)}{self.suffix}"


@dataclass(frozen=True)
class Details(ExpectationMessage):
    inner: ExpectationMessage
    details: str

    @property
    def expected_message(self) -> str:
        return self.inner.expected_message

    def to_string(self, actual: str, expected: str = "expected", to: str = "to") -> str:
        return f"{self.inner.to_string(actual, expected, to)}\n{self.details}"


class FailureMessage:
    """旧式 matcher 使用的可变失败消息载体

    只在适配器内部使用：每次调用新建一个，调用结束后通过
    to_expectation_message() 转成不可变的 ExpectationMessage。
    """

    DEFAULT_EXPECTED = "expected"
    DEFAULT_TO = "to"
    DEFAULT_POSTFIX_MESSAGE = "match"

    def __init__(self):
        self.expected = self.DEFAULT_EXPECTED
        self.actual_value: str | None = ""
        self.to = self.DEFAULT_TO
        self.postfix_message = self.DEFAULT_POSTFIX_MESSAGE
        self.postfix_actual = ""
        self.user_description: str | None = None
        self.extended_message: str | None = None

    @property
    def string_value(self) -> str:
        value = f"{self.expected} {self.to} {self.postfix_message}"
        if self.actual_value:
            value = f"{self.expected} {self.to} {self.postfix_message}, got {self.actual_value}{self.postfix_actual}"
        if self.user_description:
            value = f"{self.user_description}\n{value}"
        return value

    def to_expectation_message(self) -> ExpectationMessage:
        """把载体当前内容转换成不可变消息"""
        if self.expected != self.DEFAULT_EXPECTED:
            return Fail(self.string_value)

        message: ExpectationMessage = Fail(self.user_description or "")
        if self.actual_value:
            message = ExpectedCustomValueTo(self.postfix_message, self.actual_value)
        elif self.postfix_message != self.DEFAULT_POSTFIX_MESSAGE:
            if self.actual_value is None:
                message = ExpectedTo(self.postfix_message)
            else:
                message = ExpectedActualValueTo(self.postfix_message)

        if self.postfix_actual:
            message = message.appended(self.postfix_actual)
        if self.extended_message:
            message = message.with_details(self.extended_message)
        return message
