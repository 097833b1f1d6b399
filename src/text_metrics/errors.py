"""Exception hierarchy.

- InvalidInputError: a compared value is None; raised before any stage runs
- InvalidCompositionError: a pipeline or configuration that cannot be assembled

Stage failures are not wrapped: whatever a user-supplied stage raises reaches
the caller unchanged.
"""

from __future__ import annotations


class MetricError(Exception):
    """Base class for errors raised by text_metrics."""


class InvalidInputError(MetricError, ValueError):
    pass


class InvalidCompositionError(MetricError, ValueError):
    pass


def require_inputs(a, b) -> None:
    if a is None or b is None:
        raise InvalidInputError(
            f"cannot compare None (a is {'None' if a is None else 'set'}, "
            f"b is {'None' if b is None else 'set'})"
        )
