"""Fold an edge path into itinerary segments and render them as text."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from ..domain.errors import InvariantViolation
from ..domain.models import GraphEdge, GraphEdgeSummary, Language, Line
from .network import NetworkModel

CHANGE_LINES = "Change lines"


def _extend(summary: GraphEdgeSummary, edge: GraphEdge) -> GraphEdgeSummary:
    if edge.line != summary.line:
        raise InvariantViolation(
            f"Cannot extend a summary on {summary.line!r} with an edge on {edge.line!r}"
        )
    if edge.origin != summary.end:
        raise InvariantViolation(
            f"Edge {edge.origin}->{edge.destination} does not continue from {summary.end}"
        )
    return GraphEdgeSummary(
        start=summary.start,
        end=edge.destination,
        line=summary.line,
        stops=summary.stops + 1,
    )


def _open(edge: GraphEdge) -> GraphEdgeSummary:
    return GraphEdgeSummary(start=edge.origin, end=edge.destination, line=edge.line)


def summarize_route(path: Sequence[GraphEdge]) -> Tuple[GraphEdgeSummary, ...]:
    """Collapse consecutive same-line edges into summaries.

    Consecutive transfer edges fold into a single change of lines.

    Raises:
        InvariantViolation: If an edge does not start where the previous
            one ended.
    """
    summaries: List[GraphEdgeSummary] = []
    current: Optional[GraphEdgeSummary] = None

    for edge in path:
        if current is None:
            current = _open(edge)
        elif edge.line == current.line:
            current = _extend(current, edge)
        else:
            if edge.origin != current.end:
                raise InvariantViolation(
                    f"Edge {edge.origin}->{edge.destination} does not continue from {current.end}"
                )
            summaries.append(current)
            current = _open(edge)

    if current is not None:
        summaries.append(current)
    return tuple(summaries)


def terminus(line: Line, start: str, end: str) -> Optional[str]:
    """Return the terminus a train from ``start`` to ``end`` is heading to.

    None when either code is not on the line.
    """
    start_index = line.index_of(start)
    end_index = line.index_of(end)
    if start_index is None or end_index is None:
        return None
    if start_index < end_index:
        return line.last_stop
    return line.first_stop


def describe_stop(
    code: str,
    network: Optional[NetworkModel] = None,
    language: Language = "en",
) -> str:
    """Render a line-stop code, with its station name when known."""
    station = network.station_for_code(code) if network is not None else None
    if station is None:
        return code
    return f"{code} ({station.name.get(language)})"


def describe_summary(
    summary: GraphEdgeSummary,
    network: Optional[NetworkModel] = None,
    language: Language = "en",
) -> str:
    line = summary.line
    if line is None:
        return CHANGE_LINES

    text = (
        f"{describe_stop(summary.start, network, language)} to "
        f"{describe_stop(summary.end, network, language)} on {line.display_name}"
    )
    heading = terminus(line, summary.start, summary.end)
    if heading is not None and heading != summary.end:
        text += f" - towards {describe_stop(heading, network, language)}"
    unit = "stop" if summary.stops == 1 else "stops"
    return f"{text} - {summary.stops} {unit}"


def describe_route(
    summaries: Sequence[GraphEdgeSummary],
    network: Optional[NetworkModel] = None,
    language: Language = "en",
) -> str:
    """Render summaries as an itinerary, one line per summary."""
    return "\n".join(describe_summary(s, network, language) for s in summaries)
