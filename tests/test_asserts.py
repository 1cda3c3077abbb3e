import pytest

from corekit.asserts import (
    AssertionException,
    IllegalStateException,
    assert_true,
    check_true,
    require_true,
)


def test_require_true_default_message():
    with pytest.raises(ValueError, match="^invalid argument passed$"):
        require_true(False)


def test_require_true_custom_message():
    with pytest.raises(ValueError) as info:
        require_true(False, "bad input")
    assert str(info.value) == "bad input"


def test_require_true_passes_through_on_truthy_condition():
    assert require_true(True) is None
    with pytest.raises(ValueError):
        require_true(0)


def test_check_true_default_message():
    with pytest.raises(IllegalStateException, match="^check reported invalid state$"):
        check_true(False)


def test_check_true_custom_message():
    with pytest.raises(IllegalStateException) as info:
        check_true(False, "wrong state")
    assert str(info.value) == "wrong state"


def test_assert_true_default_message():
    with pytest.raises(AssertionException, match="^assertion failed$"):
        assert_true(False)


def test_assert_true_custom_message():
    with pytest.raises(AssertionException) as info:
        assert_true(False, "broken invariant")
    assert str(info.value) == "broken invariant"


def test_exception_messages_round_trip():
    assert str(AssertionException("boom")) == "boom"
    assert str(IllegalStateException("boom")) == "boom"


def test_exception_hierarchy():
    with pytest.raises(AssertionError) as assertion_info:
        assert_true(False, "assert")
    assert str(assertion_info.value) == "assert"

    with pytest.raises(RuntimeError) as state_info:
        check_true(False, "state")
    assert str(state_info.value) == "state"
    assert not isinstance(state_info.value, AssertionException)