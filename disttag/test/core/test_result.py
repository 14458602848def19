"""Tests for disttag.core.result module."""

import pytest

from disttag.core.result import Err, Ok, Result


class TestOk:
    def test_value(self) -> None:
        assert Ok(42).value == 42

    def test_equality(self) -> None:
        assert Ok(("pkg-a", "1.0.0")) == Ok(("pkg-a", "1.0.0"))
        assert Ok(1) != Err(1)

    def test_frozen(self) -> None:
        result = Ok(1)
        with pytest.raises(AttributeError):
            result.value = 2  # type: ignore[misc]

    def test_repr(self) -> None:
        assert repr(Ok("a")) == "Ok('a')"


class TestErr:
    def test_error(self) -> None:
        assert Err("boom").error == "boom"

    def test_repr(self) -> None:
        assert repr(Err("boom")) == "Err('boom')"


class TestPatternMatching:
    def test_ok_arm(self) -> None:
        result: Result[int, str] = Ok(3)
        match result:
            case Ok(value):
                assert value == 3
            case Err(error):
                pytest.fail(f"unexpected Err({error})")

    def test_err_arm(self) -> None:
        result: Result[int, str] = Err("no")
        match result:
            case Ok(value):
                pytest.fail(f"unexpected Ok({value})")
            case Err(error):
                assert error == "no"
