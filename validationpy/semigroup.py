"""Merge functions for combining two error payloads.

Each is a plain ``(E, E) -> E`` callable and should be associative. None of
them mutates its arguments.
"""
from __future__ import annotations
from typing import Any, Dict, List, Mapping, Sequence, TypeVar

K = TypeVar("K")
V = TypeVar("V")
T = TypeVar("T")


def list_concat(left: Sequence[T], right: Sequence[T]) -> List[T]:
    # Default merge for the mapping family: ordered message lists
    return [*left, *right]


def dict_union(left: Mapping[K, V], right: Mapping[K, V]) -> Dict[K, V]:
    # Right-biased on key collisions, like ``{**a, **b}``
    merged: Dict[K, V] = dict(left)
    merged.update(right)
    return merged


def concat(left: Any, right: Any) -> Any:
    """Merge with ``+``, for strings, tuples and anything else that adds."""
    return left + right
