"""Input/output helpers for the city route finder.

This subpackage covers prompting for city names and formatting search
results for the terminal.
"""

from .display import format_city_list, format_route_result
from .input_text import prompt_city

__all__ = ["prompt_city", "format_route_result", "format_city_list"]
