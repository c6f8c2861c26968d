# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
Tagged result type returned by all projector operations.

A PJLinkResult is either Ok(value) or Err(kind, message). Device and network
failures are reported this way rather than raised, so callers can branch on
ErrorKind without matching on exception text.
"""

from __future__ import annotations

from .internal_types import *
from .exceptions import ErrorKind, PJLinkProjectorError, exception_class_for_kind

T = TypeVar('T')
U = TypeVar('U')

class PJLinkResult(Generic[T]):
    """The outcome of a projector operation."""

    value: Optional[T]
    error_kind: Optional[ErrorKind]
    error_message: Optional[str]

    def __init__(
            self,
            value: Optional[T]=None,
            error_kind: Optional[ErrorKind]=None,
            error_message: Optional[str]=None,
          ) -> None:
        if error_kind is None and error_message is not None:
            raise ValueError("error_message requires error_kind")
        self.value = value
        self.error_kind = error_kind
        self.error_message = error_message

    @classmethod
    def ok(cls, value: T) -> PJLinkResult[T]:
        return cls(value=value)

    @classmethod
    def err(cls, kind: ErrorKind, message: str) -> PJLinkResult[T]:
        return cls(error_kind=kind, error_message=message)

    @classmethod
    def from_exception(cls, exc: BaseException) -> PJLinkResult[T]:
        """Converts an exception into an Err result.

        Package exceptions keep their own kind. Any other exception is a
        transport failure carrying the exception's message.
        """
        if isinstance(exc, PJLinkProjectorError):
            kind = exc.kind
        else:
            kind = ErrorKind.TRANSPORT
        message = str(exc)
        if message == '':
            message = exc.__class__.__name__
        return cls.err(kind, message)

    @property
    def is_ok(self) -> bool:
        return self.error_kind is None

    @property
    def is_err(self) -> bool:
        return self.error_kind is not None

    def unwrap(self) -> T:
        """Returns the value, or raises the PJLinkProjectorError subclass matching
           error_kind if this is an Err result.
        """
        if self.error_kind is not None:
            raise exception_class_for_kind(self.error_kind)(f"{self.error_kind.value}: {self.error_message}")
        return self.value  # type: ignore[return-value]

    def map(self, func: Callable[[T], U]) -> PJLinkResult[U]:
        """Applies func to the value of an Ok result; passes Err results through unchanged."""
        if self.error_kind is not None:
            return PJLinkResult(error_kind=self.error_kind, error_message=self.error_message)
        return PJLinkResult(value=func(self.value))  # type: ignore[arg-type]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PJLinkResult):
            return NotImplemented
        return (
            self.value == other.value and
            self.error_kind == other.error_kind and
            self.error_message == other.error_message
          )

    def __str__(self) -> str:
        if self.error_kind is None:
            return f"Ok({self.value!r})"
        return f"Err({self.error_kind.name}, {self.error_message!r})"

    def __repr__(self) -> str:
        return str(self)

