"""
Tests for MIN/MAX terms and durations.
"""

import pytest
from hypothesis import given, strategies as st

from tpgm_core.model import (
    GLOBAL_SELECTOR,
    ArgumentCountError,
    Duration,
    MaxTimePoint,
    MinTimePoint,
    TimeConstant,
    TimeField,
    TimeLiteral,
    TimeSelector,
)

literals = st.integers(min_value=-10**12, max_value=10**12).map(TimeLiteral)


class TestMinMax:

    def test_needs_two_arguments(self):
        with pytest.raises(ArgumentCountError):
            MinTimePoint(TimeLiteral(0))
        with pytest.raises(ArgumentCountError):
            MaxTimePoint()

    def test_evaluate(self):
        args = (TimeLiteral(5), TimeLiteral(-3), TimeConstant(10))
        assert MinTimePoint(*args).evaluate() == -3
        assert MaxTimePoint(*args).evaluate() == 10

    @given(st.lists(literals, min_size=2, max_size=6))
    def test_evaluate_matches_builtin(self, args):
        values = [arg.millis for arg in args]
        assert MinTimePoint(*args).evaluate() == min(values)
        assert MaxTimePoint(*args).evaluate() == max(values)

    def test_selector_makes_unevaluable(self):
        local = TimeSelector("a", TimeField.VAL_FROM)
        glob = TimeSelector.global_selector(TimeField.VAL_FROM)
        assert MinTimePoint(TimeLiteral(1), local).evaluate() is None
        assert MaxTimePoint(glob, TimeLiteral(1)).evaluate() is None
        assert MinTimePoint(MaxTimePoint(local, TimeLiteral(0)), TimeLiteral(1)).evaluate() is None

    @given(literals, literals)
    def test_equality_ignores_order(self, a, b):
        assert MinTimePoint(a, b) == MinTimePoint(b, a)
        assert MaxTimePoint(a, b) == MaxTimePoint(b, a)
        assert hash(MinTimePoint(a, b)) == hash(MinTimePoint(b, a))

    def test_equality_counts_duplicates(self):
        a, b = TimeLiteral(1), TimeLiteral(2)
        assert MinTimePoint(a, a, b) != MinTimePoint(a, b, b)
        assert MinTimePoint(a, b, a) == MinTimePoint(a, a, b)

    def test_min_is_not_max(self):
        a, b = TimeLiteral(1), TimeLiteral(2)
        assert MinTimePoint(a, b) != MaxTimePoint(a, b)

    def test_variables_and_selector_types(self):
        term = MinTimePoint(
            TimeSelector("a", TimeField.VAL_FROM),
            MaxTimePoint(TimeSelector("b", TimeField.TX_TO), TimeLiteral(0)),
        )
        assert term.get_variables() == {"a", "b"}
        assert term.get_variable() is None
        assert term.contains_selector_type(TimeField.TX_TO)
        assert term.contains_selector_type(TimeField.VAL_FROM)
        assert not term.contains_selector_type(TimeField.VAL_TO)

    def test_is_global_at_depth(self):
        local = TimeSelector("a", TimeField.VAL_FROM)
        glob = TimeSelector.global_selector(TimeField.VAL_TO)
        assert not MinTimePoint(local, TimeLiteral(0)).is_global()
        assert MinTimePoint(local, MaxTimePoint(TimeLiteral(0), glob)).is_global()

    def test_replace_without_globals_is_identity(self):
        term = MaxTimePoint(TimeSelector("a", TimeField.VAL_FROM), TimeLiteral(0))
        assert term.replace_global_by_local(["a", "b"]) is term

    def test_replace_nested_global(self):
        term = MaxTimePoint(TimeSelector.global_selector(TimeField.VAL_FROM), TimeLiteral(0))
        replaced = term.replace_global_by_local(["a", "b"])
        assert replaced == MaxTimePoint(
            MaxTimePoint(TimeSelector("a", TimeField.VAL_FROM), TimeSelector("b", TimeField.VAL_FROM)),
            TimeLiteral(0),
        )
        assert not replaced.is_global()
        # the original term is left untouched
        assert term.is_global()

    def test_str(self):
        term = MinTimePoint(TimeSelector("a", TimeField.VAL_FROM), TimeConstant(3))
        assert str(term) == "MIN(a.VAL_FROM, Constant(3))"

    def test_immutable(self):
        term = MinTimePoint(TimeLiteral(0), TimeLiteral(1))
        with pytest.raises(AttributeError):
            term._args = (TimeLiteral(2), TimeLiteral(3))
        assert isinstance(term.args, tuple)


class TestDuration:

    def test_simple(self):
        duration = Duration(TimeLiteral("1970-01-01T00:00:00"), TimeLiteral("1970-01-01T00:00:01"))
        assert duration.evaluate() == 1000

    def test_negative(self):
        assert Duration(TimeLiteral(1000), TimeLiteral(0)).evaluate() == -1000

    def test_selector(self):
        s1 = TimeSelector("a", TimeField.TX_TO)
        duration = Duration(TimeLiteral("1979-04-11T00:12:12"), s1)
        assert duration.evaluate() is None
        assert duration.get_variables() == {"a"}
        assert not duration.is_global()
        assert duration.contains_selector_type(TimeField.TX_TO)

        duration = Duration(TimeSelector.global_selector(TimeField.TX_FROM), s1)
        assert duration.is_global()
        assert duration.get_variables() == {GLOBAL_SELECTOR, "a"}

    def test_equality(self):
        a, b = TimeLiteral(0), TimeLiteral(1)
        assert Duration(a, b) == Duration(TimeLiteral(0), TimeLiteral(1))
        assert Duration(a, b) != Duration(b, a)
        assert hash(Duration(a, b)) == hash(Duration(TimeLiteral(0), TimeLiteral(1)))

    def test_replace(self):
        local = TimeSelector("a", TimeField.TX_TO)
        duration = Duration(TimeLiteral(0), local)
        assert duration.replace_global_by_local(["a"]) is duration

        duration = Duration(TimeSelector.global_selector(TimeField.TX_FROM), local)
        assert duration.replace_global_by_local(["b"]) == Duration(TimeSelector("b", TimeField.TX_FROM), local)

    def test_str(self):
        duration = Duration(TimeLiteral(0), TimeSelector("a", TimeField.VAL_TO))
        assert str(duration) == "Duration(1970-01-01T00:00:00, a.VAL_TO)"


class TestReplaceCommutesWithEvaluate:

    @given(st.lists(literals, min_size=2, max_size=4), st.lists(st.sampled_from("abc"), min_size=1, unique=True))
    def test_ground_terms(self, args, variables):
        for term in (MinTimePoint(*args), MaxTimePoint(*args), Duration(args[0], args[1])):
            assert term.replace_global_by_local(variables).evaluate() == term.evaluate()

    @given(data=st.data())
    def test_against_bindings(self, data, time_evaluator):
        variables = data.draw(st.lists(st.sampled_from("abcd"), min_size=1, max_size=4, unique=True))
        bindings = {
            v: {f: data.draw(st.integers(-10, 10)) for f in TimeField}
            for v in variables
        }
        field = data.draw(st.sampled_from(list(TimeField)))
        term = Duration(
            TimeSelector.global_selector(field),
            MaxTimePoint(TimeSelector.global_selector(TimeField.VAL_TO), TimeLiteral(3)),
        )
        replaced = term.replace_global_by_local(variables)
        assert not replaced.is_global()
        assert time_evaluator(replaced, bindings) == time_evaluator(term, bindings)
