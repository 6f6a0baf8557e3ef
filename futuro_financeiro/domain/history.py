"""Bounded recent-history of calculation results."""

from __future__ import annotations

import logging
import threading
from collections import deque
from typing import Deque, Dict, Optional, Union

from futuro_financeiro.domain.storage import load_history, save_history
from futuro_financeiro.schemas.history import HistoryKind, HistoryStats, SimulationHistory
from futuro_financeiro.schemas.pension import PensionProjection
from futuro_financeiro.schemas.retirement import RetirementEstimate
from futuro_financeiro.schemas.severance import SeveranceBreakdown

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10

SimulationResult = Union[RetirementEstimate, PensionProjection, SeveranceBreakdown]

_KIND_BY_TYPE = {
    RetirementEstimate: HistoryKind.INSS,
    PensionProjection: HistoryKind.PENSION,
    SeveranceBreakdown: HistoryKind.SEVERANCE,
}


class HistoryNotFoundError(LookupError):
    def __init__(self, kind: str, result_id: str):
        super().__init__(f"no {kind} simulation with id {result_id!r}")
        self.kind = kind
        self.result_id = result_id


def kind_for(result: SimulationResult) -> HistoryKind:
    return _KIND_BY_TYPE[type(result)]


class RecentHistory:
    """
    Newest-first lists of results, one per calculator, each capped at ``limit``.

    Adding past the cap evicts the oldest entry. When ``path`` is given the
    history is loaded from it on creation and written back after every change.
    Results are immutable models, so they are stored as-is.
    """

    def __init__(self, limit: int = DEFAULT_LIMIT, path: Optional[str] = None):
        self.limit = limit
        self.path = path
        self._lock = threading.Lock()
        self._entries: Dict[HistoryKind, Deque[SimulationResult]] = {
            kind: deque(maxlen=limit) for kind in HistoryKind
        }
        if path:
            self._restore(load_history(path))

    def _restore(self, stored: SimulationHistory) -> None:
        for kind in HistoryKind:
            # stored lists are newest-first, so keep the head
            self._entries[kind].extend(getattr(stored, kind.value)[: self.limit])
        logger.info("Loaded %s stored simulations from %s", self.stats().total, self.path)

    def _persist(self) -> None:
        if not self.path:
            return
        try:
            save_history(self.path, self._snapshot())
        except OSError as exc:
            logger.warning("Could not save history to %s: %s", self.path, exc)

    def _snapshot(self) -> SimulationHistory:
        return SimulationHistory(**{kind.value: list(self._entries[kind]) for kind in HistoryKind})

    def add(self, result: SimulationResult) -> HistoryKind:
        kind = kind_for(result)
        with self._lock:
            self._entries[kind].appendleft(result)
            self._persist()
        logger.info("Stored %s simulation %s", kind.value, result.id)
        return kind

    def find(self, kind: HistoryKind, result_id: str) -> SimulationResult:
        with self._lock:
            for result in self._entries[kind]:
                if result.id == result_id:
                    return result
        raise HistoryNotFoundError(kind.value, result_id)

    def remove(self, kind: HistoryKind, result_id: str) -> None:
        with self._lock:
            entries = self._entries[kind]
            for result in entries:
                if result.id == result_id:
                    entries.remove(result)
                    break
            else:
                raise HistoryNotFoundError(kind.value, result_id)
            self._persist()
        logger.info("Removed %s simulation %s", kind.value, result_id)

    def clear(self) -> None:
        with self._lock:
            for entries in self._entries.values():
                entries.clear()
            self._persist()
        logger.info("Cleared simulation history")

    def snapshot(self) -> SimulationHistory:
        with self._lock:
            return self._snapshot()

    def stats(self) -> HistoryStats:
        with self._lock:
            results = [result for entries in self._entries.values() for result in entries]
        last = max((result.created_at for result in results), default=None)
        return HistoryStats(total=len(results), last_created_at=last)
