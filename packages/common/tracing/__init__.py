"""Correlation ID tracking for log records.

Each CLI invocation (or any caller that wants it) runs inside a correlation
context so that every log line written while classifying types or scanning a
document can be tied back to the command that produced it.
"""

import uuid
from contextvars import ContextVar
from types import TracebackType

_correlation_id_var: ContextVar[str | None] = ContextVar("correlation_id", default=None)


def generate_correlation_id() -> str:
    """Generate a new correlation ID (UUID4 string)."""
    return str(uuid.uuid4())


def set_correlation_id(correlation_id: str | None = None) -> str:
    """Set the correlation ID for the current context.

    Args:
        correlation_id: Correlation ID to set. If None, generates a new one.

    Returns:
        str: The correlation ID that was set.
    """
    if correlation_id is None:
        correlation_id = generate_correlation_id()

    _correlation_id_var.set(correlation_id)
    return correlation_id


def get_correlation_id() -> str | None:
    """Get the correlation ID for the current context, or None if unset."""
    return _correlation_id_var.get()


def clear_correlation_id() -> None:
    """Clear the correlation ID for the current context."""
    _correlation_id_var.set(None)


class TracingContext:
    """Context manager that scopes a correlation ID to a block.

    Example:
        >>> with TracingContext() as corr_id:
        ...     rows = extract_option_rows(content)
    """

    def __init__(self, correlation_id: str | None = None) -> None:
        self.correlation_id = correlation_id
        self.previous_id: str | None = None

    def __enter__(self) -> str:
        self.previous_id = get_correlation_id()
        self.correlation_id = set_correlation_id(self.correlation_id)
        return self.correlation_id

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self.previous_id is None:
            clear_correlation_id()
        else:
            set_correlation_id(self.previous_id)


__all__ = [
    "TracingContext",
    "clear_correlation_id",
    "generate_correlation_id",
    "get_correlation_id",
    "set_correlation_id",
]
