"""Testing generators – Hypothesis property-based testing strategies.

Requires the ``hypothesis`` package:

    pip install "featuring[test]"
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from hypothesis.strategies import SearchStrategy


def _require_hypothesis() -> Any:
    """Lazy import guard – raises a clear error when hypothesis is absent."""
    try:
        import hypothesis.strategies as st
        return st
    except ImportError as exc:
        raise ImportError(
            "Install 'hypothesis' to use property-based testing strategies: "
            "pip install hypothesis"
        ) from exc


_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789_-."


def flag_name_strategy(*, max_size: int = 12) -> "SearchStrategy[str]":
    """Hypothesis strategy for non-empty, mixed-case flag names."""
    st = _require_hypothesis()
    return st.text(alphabet=_ALPHABET, min_size=1, max_size=max_size)


def flag_names_strategy(
    *,
    min_size: int = 0,
    max_size: int = 8,
    unique: bool = False,
) -> "SearchStrategy[list[str]]":
    """Hypothesis strategy for lists of flag names.

    Example::

        @given(flag_names_strategy(min_size=1))
        def test_all_initialized_names_are_active(names):
            assert Features(names).active(names)
    """
    st = _require_hypothesis()
    return st.lists(flag_name_strategy(), min_size=min_size, max_size=max_size, unique=unique)


def scope_strategy(*, include_global: bool = True) -> "SearchStrategy[str | None]":
    """Hypothesis strategy for scopes; ``None`` is the global scope."""
    st = _require_hypothesis()
    named = st.text(alphabet=_ALPHABET, min_size=0, max_size=10)
    return st.one_of(st.none(), named) if include_global else named


__all__ = ["flag_name_strategy", "flag_names_strategy", "scope_strategy"]
