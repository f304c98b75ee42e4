"""Testing support – fakes, fixtures and property-based strategies.

Import in your ``conftest.py``::

    pytest_plugins = ["featuring.testing.fixtures"]
"""

from featuring.testing.fakes import CallRecorder
from featuring.testing.generators import (
    flag_name_strategy,
    flag_names_strategy,
    scope_strategy,
)

__all__ = [
    "CallRecorder",
    "flag_name_strategy",
    "flag_names_strategy",
    "scope_strategy",
]
