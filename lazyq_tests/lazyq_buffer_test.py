import itertools
import suite
from dgen import tracked
from lazyq import P, empty, from_range, generate, operators, PreconditionError

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises


# --- take_last ---

@test("take_last returns the final n elements in order")
def test_take_last_basic():
    result = P([1, 2, 3, 4, 5]).take_last(2).to.list()
    assert_that(result == [4, 5], f"unexpected tail: {result}")


@test("take_last with a count larger than the source returns everything")
def test_take_last_short_source():
    assert_that(P([1, 2]).take_last(5).to.list() == [1, 2], "whole source expected")
    assert_that(empty().take_last(3).to.list() == [], "empty stays empty")


@test("take_last with non-positive count never touches the source")
def test_take_last_non_positive():
    source = tracked([1, 2, 3])
    assert_that(operators.take_last(source, 0).to.list() == [], "take_last(0) is empty")
    assert_that(operators.take_last(source, -1).to.list() == [], "take_last(-1) is empty")
    assert_that(source.enumerations == 0, "source should not be enumerated")


@test("take_last defers buffering until the first pull")
def test_take_last_deferred():
    source = tracked([1, 2, 3])
    tail = operators.take_last(source, 2)
    assert_that(source.enumerations == 0, "no work at call time")
    assert_that(tail.to.list() == [2, 3], "unexpected tail")
    assert_that(source.pulls == 3, "the whole source is read once")


# --- skip_last ---

@test("skip_last drops the final n elements")
def test_skip_last_basic():
    assert_that(P([1, 2, 3, 4, 5]).skip_last(2).to.list() == [1, 2, 3], "should drop 4 and 5")
    assert_that(P([1, 2]).skip_last(5).to.list() == [], "dropping more than exists is empty")


@test("skip_last with non-positive count yields everything")
def test_skip_last_non_positive():
    assert_that(P([1, 2, 3]).skip_last(0).to.list() == [1, 2, 3], "skip_last(0)")
    assert_that(P([1, 2, 3]).skip_last(-4).to.list() == [1, 2, 3], "skip_last(-4)")


@test("skip_last streams with a lookahead of exactly n")
def test_skip_last_streaming():
    source = tracked(itertools.count(1))
    head = P(source).skip_last(2).take(3).to.list()
    assert_that(head == [1, 2, 3], f"unexpected head: {head}")
    assert_that(source.pulls == 5, f"3 emitted + 2 held back should be 5 pulls, got {source.pulls}")


@test("skip_last works on an infinite generated sequence")
def test_skip_last_infinite():
    counter = itertools.count()
    result = generate(lambda: next(counter)).skip_last(1).take(4).to.list()
    assert_that(result == [0, 1, 2, 3], f"unexpected result: {result}")


# --- reverse ---

@test("reverse inverts a list")
def test_reverse_basic():
    assert_that(P([1, 2, 3]).reverse().to.list() == [3, 2, 1], "list reversed")
    assert_that(operators.reverse((1, 2)).to.list() == [2, 1], "tuple reversed")
    assert_that(operators.reverse("abc").to.list() == ['c', 'b', 'a'], "string reversed")
    assert_that(from_range(0, 4).reverse().to.list() == [3, 2, 1, 0], "range reversed")


@test("reverse of reverse is the original")
def test_reverse_twice():
    data = [4, 8, 15, 16, 23, 42]
    twice = operators.reverse(operators.reverse(data)).to.list()
    assert_that(twice == data, f"double reverse changed the sequence: {twice}")
    assert_that(P(data).reverse().reverse().reverse().to.list() == data[::-1], "three reverses")


@test("reverse reads the length when enumeration starts")
def test_reverse_deferred_length():
    data = [1, 2]
    reversed_data = operators.reverse(data)
    data.append(3)
    assert_that(reversed_data.to.list() == [3, 2, 1], "should see the element added before enumeration")


@test("reverse of an empty container is empty")
def test_reverse_empty():
    assert_that(empty().reverse().to.list() == [], "nothing to reverse")


@test("reverse works on buffered results")
def test_reverse_buffered():
    result = P([3, 1, 3, 2]).set.distinct().reverse().to.list()
    assert_that(result == [2, 1, 3], f"unexpected result: {result}")


@test("reverse rejects sources without positional access")
def test_reverse_precondition():
    assert_raises(PreconditionError, lambda: operators.reverse(x for x in [1, 2]))
    assert_raises(PreconditionError, lambda: P(iter([1, 2])).reverse())
    assert_raises(PreconditionError, lambda: P([1, 2]).where(lambda x: True).reverse())
    assert_raises(PreconditionError, lambda: operators.reverse({1: 'a'}))
    assert_raises(PreconditionError, lambda: operators.reverse({1, 2}))


@test("reverse precondition failure is also a TypeError")
def test_reverse_precondition_type():
    error = assert_raises(TypeError, lambda: operators.reverse(iter([])))
    assert_that(isinstance(error, PreconditionError), "should be the library's precondition error")
    assert_that(error.operation == "reverse", "error should name the operation")


if __name__ == "__main__":
    suite.run(title="lazyq buffering operations test suite")
