"""测试共用的叶子 matcher"""

import pytest

from expecta.core.predicate import Predicate, PredicateStatus


def _status(expression, check):
    value = expression.evaluate()
    if value is None:
        return PredicateStatus.FAIL
    return PredicateStatus.from_bool(check(value))


@pytest.fixture
def be_positive():
    return Predicate.simple("is positive", lambda expr: _status(expr, lambda v: v > 0))


@pytest.fixture
def be_even():
    return Predicate.simple("is even", lambda expr: _status(expr, lambda v: v % 2 == 0))


@pytest.fixture
def be_less_than_ten():
    return Predicate.simple("is less than 10", lambda expr: _status(expr, lambda v: v < 10))
