"""The traced decorator used on upload and catalog use cases."""

from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

# Only these keyword arguments become span attributes. Tokens, emails and
# file bodies never do.
SAFE_ARG_NAMES = frozenset({"category", "folder", "content_type", "slug", "key"})


def span_arguments(kwargs: dict[str, Any]) -> dict[str, str]:
    """Span attributes for the allowlisted, non-empty kwargs."""
    return {
        f"arg.{name}": str(value)
        for name, value in kwargs.items()
        if name in SAFE_ARG_NAMES and value not in (None, "")
    }


def traced(operation_name: str) -> Callable:
    """Run an async method inside a span named operation_name.

    Exceptions mark the span as errored and propagate unchanged.
    """

    def decorator(func: Callable[..., Awaitable[Any]]) -> Callable[..., Awaitable[Any]]:
        tracer = trace.get_tracer(func.__module__)

        @wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            with tracer.start_as_current_span(
                operation_name,
                attributes=span_arguments(kwargs),
                record_exception=False,
                set_status_on_exception=False,
            ) as span:
                try:
                    result = await func(*args, **kwargs)
                except Exception as e:
                    span.set_status(Status(StatusCode.ERROR, type(e).__name__))
                    span.record_exception(e)
                    raise
                span.set_status(Status(StatusCode.OK))
                return result

        return wrapper

    return decorator
