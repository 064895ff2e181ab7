import warnings
from pathlib import Path
import dgen
import suite
from lazyq import (
    P, lazyq, from_iterable, from_range, repeat, empty, generate, Enumerable, InvalidArgumentError
)

# --- setup ---
test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises


@test("from_iterable wraps without copying")
def test_from_iterable():
    data = [1, 2, 3]
    en = from_iterable(data)
    assert_that(isinstance(en, Enumerable), "should return an enumerable")
    data.append(4)
    assert_that(en.to.list() == [1, 2, 3, 4], "later changes to the list are visible")
    assert_that(en.to.list() == [1, 2, 3, 4], "a list-backed enumerable is re-enumerable")


@test("from_iterable over a generator is single-pass")
def test_from_iterable_generator():
    en = from_iterable(x * 2 for x in range(3))
    assert_that(en.to.list() == [0, 2, 4], "first pass")
    assert_that(en.to.list() == [], "second pass is empty")


@test("aliases point at from_iterable")
def test_aliases():
    assert_that(P is from_iterable and lazyq is from_iterable, "P and lazyq are aliases")


@test("from_iterable rejects None")
def test_from_iterable_none():
    assert_raises(InvalidArgumentError, lambda: from_iterable(None))


@test("from_range produces count integers from start")
def test_from_range():
    assert_that(from_range(5, 3).to.list() == [5, 6, 7], "5, 6, 7")
    assert_that(from_range(0, 0).to.list() == [], "zero count")
    assert_that(from_range(0, -2).to.list() == [], "negative count")


@test("repeat with and without a count")
def test_repeat():
    assert_that(repeat('x', 3).to.list() == ['x', 'x', 'x'], "three copies")
    assert_that(repeat('y').take(4).to.count() == 4, "infinite repeat is lazy")
    assert_that(repeat('z', -1).to.list() == [], "negative count")


@test("empty has no elements")
def test_empty():
    assert_that(empty().to.list() == [], "no elements")
    assert_that(empty().to.first_or_default(default='d') == 'd', "first_or_default falls back")


@test("generate with a count")
def test_generate_count():
    values = iter(['a', 'b', 'c', 'd'])
    assert_that(generate(lambda: next(values), 3).to.list() == ['a', 'b', 'c'], "three values")
    assert_raises(InvalidArgumentError, lambda: generate(None))


@test("enumerable repr does not enumerate")
def test_repr():
    en = generate(lambda: 1)
    assert_that(repr(en) == "Enumerable(lazy)", f"unexpected repr: {en!r}")
    assert_that(repr(P([1])) == "Enumerable(list)", f"unexpected repr: {P([1])!r}")


@test("the test data module compiles without warnings")
def test_dgen_compiles_cleanly():
    text = Path(dgen.__file__).read_text(encoding="utf-8")
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        compile(text, dgen.__file__, "exec")


if __name__ == "__main__":
    suite.run(title="lazyq factory test suite")
