"""Interactive command line front-end.

Loads the city matrix, lists the available cities, asks for a start and
an end city, then prints the result of every configured search.

Usage:
    python -m cityroute [path/to/cities.csv]
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Callable, Optional, Sequence

from .config import GraphConfig, configure_logging, get_config
from .container import Container
from .domain.errors import GraphError
from .io.display import format_city_list, format_route_result
from .io.input_text import prompt_city
from .services import RoutePlannerService

logger = logging.getLogger(__name__)


def main(
    argv: Optional[Sequence[str]] = None,
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
) -> int:
    """Run one interactive route query.

    Args:
        argv: Command line arguments; the first one, if any, overrides
            the CSV file path.
        input_fn: Prompt primitive, ``input`` by default.
        output_fn: Output primitive, ``print`` by default.

    Returns:
        Process exit code: 0 on success, 1 if the graph cannot be loaded
        or the input ends early.
    """
    args = list(sys.argv[1:] if argv is None else argv)

    config = get_config()
    configure_logging(config.observability)

    if args:
        csv_path = Path(args[0])
        config = config.model_copy(
            update={
                "graph": GraphConfig(
                    data_dir=csv_path.parent, cities_file=csv_path.name
                )
            }
        )

    planner: RoutePlannerService = Container.create_default(config).resolve(
        RoutePlannerService
    )

    try:
        graph = planner.graph_repository.load()
    except GraphError as e:
        logger.error("Graph loading failed", extra={"error": str(e)})
        output_fn("Error loading graph data.")
        return 1

    output_fn(format_city_list(graph.cities))

    try:
        start_city = prompt_city(graph, "start", input_fn, output_fn)
        end_city = prompt_city(graph, "end", input_fn, output_fn)
    except EOFError:
        return 1

    for result in planner.plan(start_city, end_city):
        output_fn(format_route_result(result))

    return 0


if __name__ == "__main__":
    sys.exit(main())
