import logging
from decimal import Decimal
from fractions import Fraction
import numpy as np
import suite
from dgen import from_schema
from queryable import (
    from_iterable, from_range, empty, query, Q, is_numeric_sequence,
    Queryable, NumericQueryable, IQueryable
)
from queryable.types import Number

test = suite.test
assert_that = suite.assert_that


# type-directed specialization

@test("numeric sources get sum")
def test_numeric_sum():
    handle = from_iterable([1, 2, 3])
    assert_that(isinstance(handle, NumericQueryable), f"expected numeric handle: {type(handle).__name__}")
    assert_that(handle.sum() == 6, f"sum wrong: {handle.sum()}")


@test("an empty source is not treated as numeric")
def test_empty_not_numeric():
    handle = from_iterable([])
    assert_that(isinstance(handle, Queryable), "empty source gets the general handle")
    assert_that(not hasattr(handle, 'sum'), "sum is unavailable on the general handle")
    suite.assert_raises(AttributeError, lambda: handle.sum())


@test("one non-numeric element falls back to the general handle")
def test_mixed_not_numeric():
    assert_that(isinstance(from_iterable([1, 2, 'three']), Queryable), "mixed types are general")
    assert_that(isinstance(from_iterable('123'), Queryable), "strings are general")
    assert_that(isinstance(from_iterable([None]), Queryable), "None is not numeric")


@test("booleans are not numbers here")
def test_bool_not_numeric():
    assert_that(isinstance(from_iterable([True, False]), Queryable), "bool source is general")
    assert_that(isinstance(from_iterable(np.array([True, False])), Queryable), "numpy bool source is general")


@test("every numbers.Number kind is numeric")
def test_number_kinds():
    for data in ([1.5, 2.5], [1 + 2j], [Decimal('1.1'), Decimal('2.2')], [Fraction(1, 3), Fraction(2, 3)],
                 np.array([1, 2, 3]), [np.float32(0.5), 3]):
        assert_that(isinstance(from_iterable(data), NumericQueryable), f"should be numeric: {data!r}")
    assert_that(from_iterable([Fraction(1, 3), Fraction(2, 3)]).sum() == 1, "fraction sum")
    assert_that(from_iterable([Decimal('1.1'), Decimal('2.2')]).sum() == Decimal('3.3'), "decimal sum")


@test("the numeric annotation covers every accepted kind")
def test_number_annotation():
    for value in (1, 2.5, 1j, Decimal('1.5'), Fraction(1, 2), np.int64(3), np.float32(0.5)):
        assert_that(isinstance(value, Number), f"{value!r} should satisfy Number")
    assert_that(NumericQueryable.sum.__annotations__.get('return') in ('Number', Number), "sum returns Number")


@test("the two handle variants share one interface")
def test_shared_interface():
    general, numeric = from_iterable(['a']), from_iterable([1])
    assert_that(isinstance(general, IQueryable) and isinstance(numeric, IQueryable), "both are IQueryable")
    assert_that(not isinstance(numeric, Queryable), "the numeric variant is not a subclass of the general one")


@test("the scan does not rob later passes of elements")
def test_scan_keeps_elements():
    handle = from_iterable([4, 5, 6])
    assert_that(handle.to_array() == [4, 5, 6], "all elements should still be there")
    assert_that(handle.sum() == 15, "and again for sum")


@test("element_type skips the scan")
def test_element_type_witness():
    calls = []

    def data():
        calls.append(1)
        return [1, 2, 3]

    handle = from_iterable(data, element_type=int)
    assert_that(isinstance(handle, NumericQueryable), "int witness gives a numeric handle")
    assert_that(calls == [], "no pass should run at construction time")
    assert_that(handle.sum() == 6 and calls == [1], "sum runs exactly one pass")


@test("element_type can also deny specialization")
def test_element_type_general():
    assert_that(isinstance(from_iterable([1, 2], element_type=str), Queryable), "str witness is general")
    assert_that(isinstance(from_iterable([1], element_type=bool), Queryable), "bool witness is general")
    empty_numbers = from_iterable([], element_type=float)
    assert_that(isinstance(empty_numbers, NumericQueryable), "a witness covers the empty case")
    assert_that(empty_numbers.sum() == 0, "sum of nothing is zero")


@test("a handle can be passed back into from_iterable")
def test_handle_as_source():
    doubled = from_iterable(['a', 'bb', 'ccc']).map(len)
    promoted = from_iterable(doubled)
    assert_that(isinstance(promoted, NumericQueryable), "a fresh root scans its source again")
    assert_that(promoted.sum() == 6, f"sum wrong: {promoted.sum()}")


@test("is_numeric_sequence requires at least one element")
def test_is_numeric_sequence():
    assert_that(is_numeric_sequence([1, 2.0]), "numbers")
    assert_that(not is_numeric_sequence([]), "empty")
    assert_that(not is_numeric_sequence([1, 'x']), "mixed")


@test("scanning logs the decision")
def test_factory_logs():
    records = []

    class Capture(logging.Handler):
        def emit(self, record):
            records.append(record.getMessage())

    logger = logging.getLogger('queryable.factories')
    handler = Capture()
    logger.addHandler(handler)
    previous = logger.level
    logger.setLevel(logging.DEBUG)
    try:
        from_iterable([1, 2])
    finally:
        logger.removeHandler(handler)
        logger.setLevel(previous)
    assert_that(any('numeric=True' in message for message in records), f"no decision logged: {records}")


# helper factories

@test("from_range builds a numeric handle")
def test_from_range():
    handle = from_range(1, 5)
    assert_that(handle.to_array() == [1, 2, 3, 4, 5], "range contents")
    assert_that(handle.sum() == 15, "range sum")
    assert_that(from_range(3, 0).sum() == 0, "an empty range is still numeric")


@test("empty builds a general empty handle")
def test_empty_factory():
    handle = empty()
    assert_that(isinstance(handle, Queryable) and handle.empty(), "empty handle")


@test("aliases point at from_iterable")
def test_aliases():
    assert_that(query is from_iterable and Q is from_iterable, "aliases")


@test("numeric record fields via map and as_numeric")
def test_record_sum():
    schema = {'amount': ('pyint', {'min_value': 1, 'max_value': 100})}
    records = from_schema(schema, seed=11).records(20)
    total = from_iterable(records).map(lambda r: r['amount']).as_numeric().sum()
    assert_that(total == sum(r['amount'] for r in records), f"sum wrong: {total}")


if __name__ == "__main__":
    suite.main(title="queryable factory test suite")
