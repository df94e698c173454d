"""
Pool event listeners for BuddyPool library.

Listeners are attached with ``BuddyPool.add_listener`` and receive every
event after the call that produced it has committed.
"""

from __future__ import annotations
import logging
from collections import deque
from threading import RLock
from typing import Deque, List, Optional

from ..types.descriptors import PoolEvent
from ..types.enums import PoolEventKind
from .formatter import format_event

logger = logging.getLogger(__name__)


class EventRecorder:
    """Keeps the most recent pool events in a bounded buffer."""
    
    __slots__ = ('_events', '_lock')
    
    def __init__(self, maxlen: Optional[int] = 10000):
        self._events: Deque[PoolEvent] = deque(maxlen=maxlen)
        self._lock = RLock()
    
    def __call__(self, event: PoolEvent) -> None:
        with self._lock:
            self._events.append(event)
    
    def __len__(self) -> int:
        return len(self._events)
    
    @property
    def events(self) -> List[PoolEvent]:
        with self._lock:
            return list(self._events)
    
    def of_kind(self, kind: PoolEventKind) -> List[PoolEvent]:
        with self._lock:
            return [event for event in self._events if event.kind == kind]
    
    def drain(self) -> List[PoolEvent]:
        with self._lock:
            events = list(self._events)
            self._events.clear()
            return events
    
    def clear(self) -> None:
        with self._lock:
            self._events.clear()


class LoggingListener:
    """Logs each pool event as a formatted progress line."""
    
    __slots__ = ('_logger', '_level', '_unit')
    
    def __init__(self, log: Optional[logging.Logger] = None, level: int = logging.DEBUG, unit: str = "KB"):
        self._logger = log or logger
        self._level = level
        self._unit = unit
    
    def __call__(self, event: PoolEvent) -> None:
        level = logging.WARNING if event.kind == PoolEventKind.FAILURE else self._level
        if self._logger.isEnabledFor(level):
            self._logger.log(level, format_event(event, self._unit))
