"""Position-based rewriting of version tokens inside a document."""

from __future__ import annotations

from typing import Iterable, Sequence

from services.versioning.models import OverlappingSpansError, ReplacementSpan

__all__ = ["sort_spans", "splice"]


def sort_spans(spans: Iterable[ReplacementSpan]) -> list[ReplacementSpan]:
    """Return ``spans`` ordered by start offset, rejecting overlaps."""

    ordered = sorted(spans)
    for previous, current in zip(ordered, ordered[1:]):
        if current.start < previous.end:
            raise OverlappingSpansError(previous, current)
    return ordered


def splice(content: str, spans: Sequence[ReplacementSpan], replacement: str) -> str:
    """Replace every span of ``content`` with ``replacement``.

    ``spans`` must be sorted and non-overlapping.  Text outside the spans is
    copied through unchanged.
    """

    pieces: list[str] = []
    position = 0
    previous: ReplacementSpan | None = None
    for span in spans:
        if previous is not None and span.start < previous.end:
            raise OverlappingSpansError(previous, span)
        pieces.append(content[position:span.start])
        pieces.append(replacement)
        position = span.end
        previous = span
    pieces.append(content[position:])
    return "".join(pieces)
