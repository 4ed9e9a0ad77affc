"""A success flag that carries an error message when something failed."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class StatusError(Exception):
    """Raised by StringStatus.raise_for_error for a failed status."""


class StringStatus:
    """Either OK or an error with a message.

    ``error`` is None (or True) for success, a message for failure; False
    means a failure with an empty message.
    """

    __slots__ = ("_error",)

    def __init__(self, error: str | bool | None = None) -> None:
        if error is None or error is True:
            self._error: str | None = None
        elif error is False:
            self._error = ""
        else:
            self._error = str(error)

    @classmethod
    def located(cls, message: str, function: str, file: str, line: int) -> "StringStatus":
        """Build an error that names where it was produced."""
        return cls(f"{message} in {function} {file}:{line}")

    def set_error(self, message: str) -> None:
        """Turn this status into an error with the given message."""
        self._error = str(message)

    def set_ok(self) -> None:
        """Clear any error."""
        self._error = None

    def set(self, other: "StringStatus") -> None:
        """Copy the state of another status."""
        self._error = other._error

    def ok(self) -> bool:
        return self._error is None

    def is_error(self) -> bool:
        return self._error is not None

    def msg(self) -> str:
        """Return the error message, or an empty string when OK."""
        return "" if self._error is None else self._error

    def raise_for_error(self) -> None:
        """Raise StatusError carrying the message if this is an error."""
        if self._error is not None:
            raise StatusError(self._error)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StringStatus):
            return self._error == other._error
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._error)

    def __str__(self) -> str:
        if self._error is None:
            return "Status: OK"
        return f"Status: error {self._error}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._error!r})"


class ValueStatus(StringStatus, Generic[T]):
    """A status with an attached value."""

    __slots__ = ("value",)

    def __init__(self, value: T | None = None, error: str | bool | None = None) -> None:
        super().__init__(error)
        self.value = value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ValueStatus):
            return self._error == other._error and self.value == other.value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._error)

    def __repr__(self) -> str:
        return f"ValueStatus({self.value!r}, {self._error!r})"