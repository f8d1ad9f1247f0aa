"""
Unit tests for the board error types.
"""
import pytest
from mines import (
    MinesweeperError,
    NotFlaggableError,
    NotGeneratedError,
    NotRevealableError,
)


@pytest.mark.parametrize(
    "error_class", [NotRevealableError, NotFlaggableError, NotGeneratedError]
)
def test_errors_share_base_class(error_class: type) -> None:
    """Callers can catch every recoverable error at once."""
    assert issubclass(error_class, MinesweeperError)


def test_error_without_index() -> None:
    error = NotRevealableError()
    assert error.index is None
    assert str(error) == "Tried to reveal a cell that can't be revealed"


def test_error_message_includes_index() -> None:
    error = NotGeneratedError(7)
    assert error.index == 7
    assert str(error) == "Board has not been generated yet (index 7)"
