"""Result values for external tool invocations.

Every call into gpg produces exactly one of:
- Success: the operation completed, carries its value
- ProcessError: gpg ran and exited non-zero, carries stderr and exit code
- ExceptionError: gpg could not be run at all (missing binary, permission
  denied, timeout), carries a description

Expected failures are returned as values rather than raised, so callers
decide what to show. The helpers below dispatch over all three variants and
reject anything else.
"""

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful outcome.

    Attributes:
        value: The operation's output (text or parsed records).
    """

    value: T


@dataclass(frozen=True)
class ProcessError:
    """gpg exited with a non-zero status.

    Attributes:
        stderr: Captured standard error, lines joined with newlines.
        exit_code: The process exit code.
    """

    stderr: str
    exit_code: int


@dataclass(frozen=True)
class ExceptionError:
    """gpg could not be launched or did not finish.

    Attributes:
        description: Human-readable reason.
    """

    description: str


OperationError = Union[ProcessError, ExceptionError]
Result = Union[Success[T], ProcessError, ExceptionError]


class ResultUnwrapError(Exception):
    """Raised when unwrapping an error result without a fallback."""

    def __init__(self, error: OperationError):
        self.error = error
        super().__init__(f"Cannot unwrap error result: {error!r}")


def _unexpected(result: object) -> TypeError:
    return TypeError(f"Expected a Result variant, got {type(result).__name__}")


def is_success(result: "Result[T]") -> bool:
    """Return True for Success, False for either error variant."""
    if isinstance(result, Success):
        return True
    if isinstance(result, (ProcessError, ExceptionError)):
        return False
    raise _unexpected(result)


def unwrap(
    result: "Result[T]",
    on_error: Optional[Callable[[OperationError], Optional[T]]] = None,
) -> T:
    """Return the success value or recover from an error.

    Args:
        result: Result to unwrap.
        on_error: Called at most once with the error. A non-None return
            value is used in place of the missing success value.

    Returns:
        The success value, or the fallback produced by on_error.

    Raises:
        ResultUnwrapError: If result is an error and no fallback was produced.
    """
    if isinstance(result, Success):
        return result.value
    if isinstance(result, (ProcessError, ExceptionError)):
        if on_error is not None:
            fallback = on_error(result)
            if fallback is not None:
                return fallback
        raise ResultUnwrapError(result)
    raise _unexpected(result)


def get_or_none(result: "Result[T]") -> Optional[T]:
    """Return the success value, or None for any error."""
    if isinstance(result, Success):
        return result.value
    if isinstance(result, (ProcessError, ExceptionError)):
        return None
    raise _unexpected(result)


def display_text(result: "Result[str]") -> str:
    """Text a front-end shows in place of an operation's output."""
    if isinstance(result, Success):
        return result.value
    if isinstance(result, ProcessError):
        return f"Error: {result.stderr}"
    if isinstance(result, ExceptionError):
        return f"Exception: {result.description}"
    raise _unexpected(result)
