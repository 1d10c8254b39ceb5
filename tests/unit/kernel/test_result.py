"""Unit tests for the Ok/Err result variants."""

from __future__ import annotations

import pytest

from holdyourhorses.kernel.errors import RateLimitedError
from holdyourhorses.kernel.types import Err, Ok


class TestOk:
    def test_unwrap(self) -> None:
        assert Ok(42).unwrap() == 42

    def test_is_ok(self) -> None:
        assert Ok(1).is_ok()
        assert not Ok(1).is_err()

    def test_unwrap_or_ignores_default(self) -> None:
        assert Ok(1).unwrap_or(2) == 1

    def test_unwrap_err_raises(self) -> None:
        with pytest.raises(ValueError):
            Ok(1).unwrap_err()

    def test_map(self) -> None:
        assert Ok(2).map(lambda x: x * 3) == Ok(6)

    def test_equality(self) -> None:
        assert Ok("a") == Ok("a")
        assert Ok("a") != Ok("b")

    def test_repr(self) -> None:
        assert repr(Ok(1)) == "Ok(1)"


class TestErr:
    def test_unwrap_raises_error(self) -> None:
        with pytest.raises(ValueError, match="boom"):
            Err(ValueError("boom")).unwrap()

    def test_unwrap_or(self) -> None:
        assert Err(ValueError()).unwrap_or(99) == 99

    def test_unwrap_err(self) -> None:
        error = ValueError("x")
        assert Err(error).unwrap_err() is error

    def test_map_is_identity(self) -> None:
        err = Err(ValueError("x"))
        assert err.map(lambda x: x) is err

    def test_equality_is_by_error_identity(self) -> None:
        error = ValueError("x")
        assert Err(error) == Err(error)
        assert Err(error) != Err(ValueError("x"))

    def test_repr(self) -> None:
        assert "Err" in repr(Err(ValueError("x")))


class TestPatternMatching:
    def _describe(self, result: Ok[int] | Err[Exception]) -> str:
        match result:
            case Ok(value):
                return f"ok:{value}"
            case Err(RateLimitedError()):
                return "limited"
            case Err(error):
                return f"error:{type(error).__name__}"
        return "unreachable"

    def test_ok_branch(self) -> None:
        assert self._describe(Ok(3)) == "ok:3"

    def test_rate_limited_branch(self) -> None:
        assert self._describe(Err(RateLimitedError())) == "limited"

    def test_other_error_branch(self) -> None:
        assert self._describe(Err(KeyError("k"))) == "error:KeyError"
