"""Filtering of provider spans against inclusion and exclusion regions."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .spans import RawSpan, TextSpan


def is_contained(span: RawSpan, container: TextSpan) -> bool:
    """Return whether *span* lies entirely within *container*.

    Both spans are half-open, so a span ending exactly where the container
    ends is still inside it.
    """
    return span.start >= container.start and span.end <= container.end


def _contained_in_any(span: RawSpan, containers: Sequence[TextSpan]) -> bool:
    return any(is_contained(span, c) for c in containers)


def keep_span(
    span: RawSpan,
    exclusion_spans: Sequence[TextSpan],
    inclusion_spans: Sequence[TextSpan] | None = None,
) -> bool:
    """Decide whether a single provider span is reportable.

    Exclusion is checked first and always wins. With no inclusion spans
    configured every non-excluded span is kept; otherwise the span must
    fall inside at least one inclusion span.
    """
    if _contained_in_any(span, exclusion_spans):
        return False
    if inclusion_spans is None:
        return True
    return _contained_in_any(span, inclusion_spans)


def filter_spans(
    raw_spans: Iterable[RawSpan],
    exclusion_spans: Sequence[TextSpan],
    inclusion_spans: Sequence[TextSpan] | None = None,
) -> list[RawSpan]:
    """Return the reportable subset of *raw_spans*, in their original order."""
    return [s for s in raw_spans if keep_span(s, exclusion_spans, inclusion_spans)]
