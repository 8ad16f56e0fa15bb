"""Caching utilities used by the view pipeline."""

from __future__ import annotations

import functools
import threading
from collections import OrderedDict
from typing import Callable, Hashable, Tuple, TypeVar

T = TypeVar("T")

DEFAULT_MAXSIZE = 64

_cache_lock = threading.Lock()
_memory_cache: "OrderedDict[Tuple[str, Hashable], object]" = OrderedDict()


def memoize(prefix: str, maxsize: int = DEFAULT_MAXSIZE) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """Lightweight thread-safe memoization decorator.

    Keys are grouped by ``prefix`` so a whole concern can be cleared at once.
    Each prefix keeps at most ``maxsize`` entries; the least recently used
    entry of that prefix is dropped first.
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            key = (prefix, (args, tuple(sorted(kwargs.items()))))
            with _cache_lock:
                if key in _memory_cache:
                    _memory_cache.move_to_end(key)
                    return _memory_cache[key]  # type: ignore[return-value]
            result = func(*args, **kwargs)
            with _cache_lock:
                _memory_cache[key] = result
                _evict(prefix, maxsize)
            return result

        return wrapper

    return decorator


def _evict(prefix: str, maxsize: int) -> None:
    keys = [key for key in _memory_cache if key[0] == prefix]
    for key in keys[: max(0, len(keys) - maxsize)]:
        del _memory_cache[key]


def cache_size(prefix: str) -> int:
    with _cache_lock:
        return sum(1 for key in _memory_cache if key[0] == prefix)


def clear_prefix(prefix: str) -> None:
    """Clear all cache entries for the given prefix."""

    with _cache_lock:
        to_delete = [key for key in _memory_cache if key[0] == prefix]
        for key in to_delete:
            del _memory_cache[key]


__all__ = ["memoize", "clear_prefix", "cache_size"]
