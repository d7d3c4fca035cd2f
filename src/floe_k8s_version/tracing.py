"""OpenTelemetry tracing helpers for the Kubernetes version check.

Each call to check_minimum_version() runs inside a ``k8s_version.check`` span
carrying the versions that were compared.

Example:
    >>> from floe_k8s_version.tracing import ATTR_CURRENT_VERSION, get_tracer, version_check_span
    >>> with version_check_span(get_tracer(), override=False) as span:
    ...     span.set_attribute(ATTR_CURRENT_VERSION, "1.29.0")
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

if TYPE_CHECKING:
    from collections.abc import Iterator

TRACER_NAME = "floe.k8s_version"
SPAN_NAME = "k8s_version.check"

ATTR_CURRENT_VERSION = "k8s_version.current"
ATTR_MINIMUM_VERSION = "k8s_version.minimum"
ATTR_OVERRIDE = "k8s_version.override"


def get_tracer() -> trace.Tracer:
    """Get the OpenTelemetry tracer for version checks.

    Returns a no-op tracer when no tracer provider is configured.
    """
    return trace.get_tracer(TRACER_NAME)


@contextmanager
def version_check_span(
    tracer: trace.Tracer,
    *,
    override: bool,
    extra_attributes: dict[str, Any] | None = None,
) -> Iterator[trace.Span]:
    """Context manager for a version check span.

    Records span status and re-raises any exception from the body.

    Args:
        tracer: OpenTelemetry tracer instance.
        override: Whether the minimum version came from an override.
        extra_attributes: Additional span attributes.

    Yields:
        The active span, so callers can add the compared versions.
    """
    attributes: dict[str, Any] = {ATTR_OVERRIDE: override}
    if extra_attributes:
        attributes.update(extra_attributes)

    with tracer.start_as_current_span(
        SPAN_NAME,
        attributes=attributes,
        record_exception=False,
        set_status_on_exception=False,
    ) as span:
        try:
            yield span
            span.set_status(Status(StatusCode.OK))
        except Exception as e:
            span.set_status(Status(StatusCode.ERROR, type(e).__name__))
            span.set_attribute("exception.type", type(e).__name__)
            span.set_attribute("exception.message", str(e))
            raise


__all__ = [
    "ATTR_CURRENT_VERSION",
    "ATTR_MINIMUM_VERSION",
    "ATTR_OVERRIDE",
    "SPAN_NAME",
    "TRACER_NAME",
    "get_tracer",
    "version_check_span",
]
