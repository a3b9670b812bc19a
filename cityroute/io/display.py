"""Human-readable rendering of route search results."""

from typing import Iterable, List

from ..domain.models import RouteResult


def format_route_result(result: RouteResult) -> str:
    """Format one search result as a block of text.

    The block starts with a blank line and the algorithm name, followed
    either by ``No path found.`` or by the path, its cost and the
    search duration in milliseconds.
    """
    lines: List[str] = ["", f"{result.algorithm.name} Results:"]
    if result.is_empty:
        lines.append("No path found.")
        return "\n".join(lines)

    lines.append("Path: " + " -> ".join(result.path))
    lines.append(f"Path Cost: {result.total_cost}")
    lines.append(f"Execution Time: {result.elapsed_ms:.3f} ms")
    return "\n".join(lines)


def format_city_list(cities: Iterable[str]) -> str:
    return "Available cities:\n" + " ".join(cities)
