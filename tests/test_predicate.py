"""测试 Predicate 契约和旧式 matcher 的规整"""

import pytest

from expecta.core.expression import Expression
from expecta.core.messages import Appends, ExpectedActualValueTo, ExpectedTo, FailureMessage
from expecta.core.predicate import (
    ExpectationStyle,
    MatcherFunc,
    NonNilMatcherFunc,
    Predicate,
    PredicateResult,
    PredicateStatus,
    as_predicate,
)


def legacy_be_even(expression, failure_message):
    failure_message.postfix_message = "be even"
    value = expression.evaluate()
    return value is not None and value % 2 == 0


class TestPredicateStatus:
    """测试状态和布尔值的转换"""

    @pytest.mark.parametrize("status,style,expected", [
        (PredicateStatus.MATCHES, ExpectationStyle.TO_MATCH, True),
        (PredicateStatus.DOES_NOT_MATCH, ExpectationStyle.TO_MATCH, False),
        (PredicateStatus.FAIL, ExpectationStyle.TO_MATCH, False),
        (PredicateStatus.MATCHES, ExpectationStyle.TO_NOT_MATCH, False),
        (PredicateStatus.DOES_NOT_MATCH, ExpectationStyle.TO_NOT_MATCH, True),
        (PredicateStatus.FAIL, ExpectationStyle.TO_NOT_MATCH, False),
    ])
    def test_to_boolean(self, status, style, expected):
        assert status.to_boolean(style) is expected
        assert PredicateResult(status, ExpectedTo("x")).to_boolean(style) is expected

    def test_from_bool(self):
        assert PredicateStatus.from_bool(True) is PredicateStatus.MATCHES
        assert PredicateStatus.from_bool(False) is PredicateStatus.DOES_NOT_MATCH


class TestPredicate:
    """测试 Predicate 本身"""

    def test_simple(self, be_even):
        result = be_even.satisfies(Expression.of(4))
        assert result == PredicateResult(PredicateStatus.MATCHES, ExpectedActualValueTo("is even"))

    def test_define_customizes_message(self):
        predicate = Predicate.define(
            "be even",
            lambda expr, msg: PredicateResult.from_bool(expr.evaluate() % 2 == 0, msg.appended("!")),
        )
        result = predicate.satisfies(Expression.of(3))
        assert result.status is PredicateStatus.DOES_NOT_MATCH
        assert result.message.expected_message == "be even!"

    def test_require_non_nil_forces_fail(self, be_even):
        result = be_even.require_non_nil.satisfies(Expression.of(None))
        assert result.status is PredicateStatus.FAIL
        assert result.message == Appends(ExpectedActualValueTo("is even"), " (use be_nil() to match nils)")

    def test_require_non_nil_passes_through_values(self, be_even):
        result = be_even.require_non_nil.satisfies(Expression.of(3))
        assert result.status is PredicateStatus.DOES_NOT_MATCH

    def test_stateless_across_calls(self, be_even):
        """同一个 matcher 可以被反复调用"""
        assert be_even.satisfies(Expression.of(2)).status is PredicateStatus.MATCHES
        assert be_even.satisfies(Expression.of(3)).status is PredicateStatus.DOES_NOT_MATCH
        assert be_even.satisfies(Expression.of(2)).status is PredicateStatus.MATCHES


class TestLegacyMatchers:
    """测试旧式回调 matcher"""

    def test_matcher_func_predicate(self):
        result = MatcherFunc(legacy_be_even).predicate.satisfies(Expression.of(3))
        assert result == PredicateResult(PredicateStatus.DOES_NOT_MATCH, ExpectedActualValueTo("be even"))

    def test_matcher_func_does_not_match(self):
        matcher = MatcherFunc(legacy_be_even)
        assert matcher.does_not_match(Expression.of(3), FailureMessage())
        assert matcher.matches(Expression.of(4), FailureMessage())

    def test_fresh_carrier_per_call(self):
        """每次调用都拿到新的 FailureMessage"""
        carriers = []

        def record(expression, failure_message):
            carriers.append(failure_message)
            failure_message.postfix_message += "!"
            return True

        predicate = MatcherFunc(record).predicate
        first = predicate.satisfies(Expression.of(1))
        second = predicate.satisfies(Expression.of(1))

        assert carriers[0] is not carriers[1]
        assert first.message == second.message == ExpectedActualValueTo("match!")

    def test_non_nil_matcher_func_fails_on_nil(self):
        matcher = NonNilMatcherFunc(legacy_be_even)
        failure_message = FailureMessage()

        assert not matcher.matches(Expression.of(None), failure_message)
        assert not matcher.does_not_match(Expression.of(None), FailureMessage())
        assert failure_message.postfix_actual == " (use be_nil() to match nils)"
        assert matcher.predicate.satisfies(Expression.of(None)).status is PredicateStatus.FAIL

    def test_non_nil_matcher_func_matches_value(self):
        result = NonNilMatcherFunc(legacy_be_even).predicate.satisfies(Expression.of(8))
        assert result.status is PredicateStatus.MATCHES


class TestAsPredicate:
    """测试构造时的规整"""

    def test_predicate_is_returned_as_is(self, be_even):
        assert as_predicate(be_even) is be_even

    def test_object_with_matches(self):
        class IsEven:
            def matches(self, expression, failure_message):
                return legacy_be_even(expression, failure_message)

        result = as_predicate(IsEven()).satisfies(Expression.of(4))
        assert result.status is PredicateStatus.MATCHES
        assert result.message.expected_message == "be even"

    def test_object_with_satisfies(self, be_even):
        class Wrapper:
            def satisfies(self, expression):
                return be_even.satisfies(expression)

        assert as_predicate(Wrapper()).satisfies(Expression.of(4)).status is PredicateStatus.MATCHES

    @pytest.mark.parametrize("matcher", [42, "be even", None, object()])
    def test_unsupported_raises(self, matcher):
        with pytest.raises(TypeError, match="不支持的 matcher 类型"):
            as_predicate(matcher)
