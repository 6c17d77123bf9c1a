from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable

from boutique_client_sdk import DASHBOARD_STATS_PATH, PRODUCTS_PATH, RETURNS_PATH, SALES_PATH

logger = logging.getLogger(__name__)

PRODUCTS_KEY = PRODUCTS_PATH
SALES_KEY = SALES_PATH
RETURNS_KEY = RETURNS_PATH
DASHBOARD_STATS_KEY = DASHBOARD_STATS_PATH

Subscriber = Callable[[str], None]


@dataclass
class QueryCache:
    """Keyed cache of fetched query results.

    Entries are never patched locally: a mutation invalidates the keys it
    affects and every subscriber of those keys is told to refetch.
    """

    _entries: dict[str, Any] = field(default_factory=dict)
    _subscribers: dict[str, list[Subscriber]] = field(default_factory=dict)

    def fetch(self, key: str, loader: Callable[[], Any]) -> Any:
        if key in self._entries:
            return self._entries[key]
        data = loader()
        self._entries[key] = data
        return data

    def peek(self, key: str) -> Any | None:
        return self._entries.get(key)

    def is_cached(self, key: str) -> bool:
        return key in self._entries

    def subscribe(self, key: str, callback: Subscriber) -> Callable[[], None]:
        self._subscribers.setdefault(key, []).append(callback)

        def unsubscribe() -> None:
            callbacks = self._subscribers.get(key, [])
            if callback in callbacks:
                callbacks.remove(callback)

        return unsubscribe

    def invalidate(self, keys: Iterable[str]) -> list[str]:
        invalidated: list[str] = []
        for key in keys:
            self._entries.pop(key, None)
            invalidated.append(key)
            for callback in list(self._subscribers.get(key, [])):
                callback(key)
        logger.info("query_cache_invalidated", extra={"keys": invalidated})
        return invalidated

    def clear(self) -> None:
        self._entries.clear()
