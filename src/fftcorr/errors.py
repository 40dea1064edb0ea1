"""Error types for the FFT correlation pipeline.

Every failure the pipeline can report is a CorrelationError variant.
The set of variants is closed: each one is bound to exactly one ErrorKind,
so callers can match on them exhaustively.
"""

from contextlib import contextmanager
from enum import Enum
from typing import Any, ClassVar, Iterator


class ErrorKind(Enum):
    """Kinds of correlation failures."""
    FFT_PROCESSING = "fft_processing"


# Backend exceptions that fft_errors() classifies by default
BACKEND_ERRORS: tuple[type[BaseException], ...] = (
    ArithmeticError,
    ValueError,
    IndexError,
    MemoryError,
)


class CorrelationError(Exception):
    """Base class for all correlation failures.

    Not instantiated directly; raise one of its variants instead.
    """

    kind: ClassVar[ErrorKind]
    label: ClassVar[str]

    _variants: ClassVar[dict[ErrorKind, type["CorrelationError"]]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        kind = cls.__dict__.get("kind")
        if not isinstance(kind, ErrorKind):
            raise TypeError(f"{cls.__name__} must declare an ErrorKind")
        existing = CorrelationError._variants.get(kind)
        if existing is not None:
            raise TypeError(
                f"{kind.value} is already represented by {existing.__name__}"
            )
        CorrelationError._variants[kind] = cls

    def __init__(self, message: str) -> None:
        if type(self) is CorrelationError:
            raise TypeError("CorrelationError is abstract; raise a variant")
        if not isinstance(message, str):
            raise TypeError(
                f"message must be str, not {type(message).__name__}"
            )
        super().__init__(message)
        self._message = message

    @property
    def message(self) -> str:
        """Diagnostic text supplied at the point of failure."""
        return self._message

    def __str__(self) -> str:
        return f"{self.label}: {self._message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._message!r})"

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary."""
        return {"kind": self.kind.value, "message": self._message}

    @classmethod
    def variant(cls, kind: ErrorKind) -> type["CorrelationError"]:
        """Return the variant class bound to kind."""
        return CorrelationError._variants[kind]

    @classmethod
    def variants(cls) -> dict[ErrorKind, type["CorrelationError"]]:
        """Return a copy of the kind -> variant mapping."""
        return dict(CorrelationError._variants)


class FftProcessing(CorrelationError):
    """Failure inside the frequency-domain transform stage.

    Covers invalid input lengths, non-finite results and errors reported
    by the FFT backend. Finer detail lives in the message.
    """

    __match_args__ = ("message",)

    kind = ErrorKind.FFT_PROCESSING
    label = "FFT processing error"

    @classmethod
    def from_exception(cls, exc: BaseException) -> "FftProcessing":
        """Classify a backend exception.

        The message is str(exc), or the exception class name when that is
        empty. The original exception becomes __cause__.
        """
        error = cls(str(exc) or type(exc).__name__)
        error.__cause__ = exc
        return error


@contextmanager
def fft_errors(*exc_types: type[BaseException]) -> Iterator[None]:
    """Re-raise backend exceptions inside the block as FftProcessing.

    Args:
        exc_types: Exception types to classify (defaults to BACKEND_ERRORS)

    CorrelationError raised inside the block passes through untouched.
    """
    catch = exc_types or BACKEND_ERRORS
    try:
        yield
    except CorrelationError:
        raise
    except catch as exc:
        raise FftProcessing.from_exception(exc) from exc
