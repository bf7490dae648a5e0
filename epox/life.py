"""
Epox Lifecycle Events

Listener interface and no-op adapter for the pool selection phase of an
evolutionary run, plus a small hub that the surrounding engine uses to
notify subscribers. Neither event carries data.
"""

import logging
from typing import List, Protocol

logger = logging.getLogger(__name__)


class PoolSelectionListener(Protocol):
    def on_pool_selection_start(self) -> None: ...

    def on_pool_selection_end(self) -> None: ...


class PoolSelectionAdapter:
    """
    No-op implementation of PoolSelectionListener.

    Subclass and override only the events of interest:

        life.add_pool_selection_listener(MyAdapter())
    """

    def on_pool_selection_start(self) -> None:
        pass

    def on_pool_selection_end(self) -> None:
        pass


class Life:
    """Dispatches pool selection events to listeners in subscription order."""

    def __init__(self):
        self._pool_selection_listeners: List[PoolSelectionListener] = []

    def add_pool_selection_listener(self, listener: PoolSelectionListener) -> None:
        self._pool_selection_listeners.append(listener)

    def remove_pool_selection_listener(self, listener: PoolSelectionListener) -> None:
        self._pool_selection_listeners.remove(listener)

    def fire_pool_selection_start(self) -> None:
        logger.debug(f"Pool selection start -> {len(self._pool_selection_listeners)} listeners")
        for listener in list(self._pool_selection_listeners):
            listener.on_pool_selection_start()

    def fire_pool_selection_end(self) -> None:
        logger.debug(f"Pool selection end -> {len(self._pool_selection_listeners)} listeners")
        for listener in list(self._pool_selection_listeners):
            listener.on_pool_selection_end()
