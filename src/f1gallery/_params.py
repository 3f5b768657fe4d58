"""Query parameter builder for OpenF1 API requests."""

from __future__ import annotations

from typing import Any


def build_query_params(**kwargs: Any) -> list[tuple[str, str]]:
    """Build a list of query parameter tuples from keyword arguments.

    Every value becomes an equality filter; ``None`` values are skipped so
    optional arguments can be passed straight through.

    Args:
        **kwargs: Keyword arguments where keys are parameter names.

    Returns:
        List of (key, value) tuples suitable for httpx params.
    """
    params: list[tuple[str, str]] = []
    for key, value in kwargs.items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = str(value).lower()
        params.append((key, str(value)))
    return params
