# -*- coding: utf-8 -*-
from __future__ import annotations
"""
Observer pattern primitives.

- Observable keeps dependents in attach order, deduplicated by identity.
- notify() is synchronous and isolates failures: an observer that raises
  is logged and skipped, the rest of the batch still runs.
"""

from threading import RLock
from typing import List, Tuple
import logging

logger = logging.getLogger(__name__)


class Observer:
    """Observer interface."""

    def update(self, subject: "Observable") -> None:
        raise NotImplementedError("Observer subclasses must implement 'update' method.")


class Observable:
    """Base class for objects that push state changes to observers."""

    def __init__(self):
        self._observers: List[Observer] = []
        self._observers_lock = RLock()

    @property
    def observers(self) -> Tuple[Observer, ...]:
        with self._observers_lock:
            return tuple(self._observers)

    def attach(self, observer: Observer) -> None:
        with self._observers_lock:
            # identity, not equality: two equal observers are still two channels
            if not any(o is observer for o in self._observers):
                self._observers.append(observer)

    def detach(self, observer: Observer) -> None:
        with self._observers_lock:
            for i, o in enumerate(self._observers):
                if o is observer:
                    del self._observers[i]
                    return

    def notify(self) -> List[Tuple[Observer, Exception]]:
        """
        Call update(self) on every attached observer, in attach order.

        Returns the (observer, exception) pairs for observers that failed;
        an empty list means every observer was notified.
        """
        failures: List[Tuple[Observer, Exception]] = []
        for observer in self.observers:
            try:
                observer.update(self)
            except Exception as e:
                logger.exception("Observer %r failed while notifying %r", observer, self)
                failures.append((observer, e))
        return failures
