"""Testing generators – Hypothesis strategies for flag names and scopes."""
from featuring.testing.generators.strategies import (
    flag_name_strategy,
    flag_names_strategy,
    scope_strategy,
)

__all__ = [
    "flag_name_strategy",
    "flag_names_strategy",
    "scope_strategy",
]
