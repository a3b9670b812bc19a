"""Input acquisition utilities for the city route finder.

This module asks the user for city names on the terminal. The prompt
and output callables are injectable so that front-ends and tests can
drive the same loop without a real console.
"""

from typing import Callable

from ..graph.city_graph import CityGraph

INVALID_CITY_MESSAGE = "Invalid city name. Please try again."


def prompt_city(
    graph: CityGraph,
    label: str,
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
) -> str:
    """Prompt until the user enters a city that exists in ``graph``.

    Parameters
    ----------
    graph:
        Graph used to validate the entered name.
    label:
        Word inserted in the prompt, e.g. ``"start"`` or ``"end"``.
    input_fn, output_fn:
        Console primitives, ``input`` and ``print`` by default.

    Returns
    -------
    str
        The validated city name, stripped of surrounding whitespace.

    Raises
    ------
    EOFError
        If the input stream ends before a valid name is entered.
    """
    while True:
        name = input_fn(f"Enter the {label} city: ").strip()
        if graph.get_city_index(name) != -1:
            return name
        output_fn(INVALID_CITY_MESSAGE)
