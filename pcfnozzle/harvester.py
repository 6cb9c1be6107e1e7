"""Periodic draining of accumulated metrics."""

from __future__ import annotations

import logging
from typing import Any, Callable

from pcfnozzle.accumulator import Accumulator
from pcfnozzle.collector import Collector

log = logging.getLogger(__name__)


class Harvester:
    """Drains every accumulator of a collector and hands on its metrics."""

    def __init__(self, collector: Collector, flush: Callable[[], Any] | None = None) -> None:
        self.collector = collector
        self._flush = flush

    def accumulators(self) -> list[Accumulator]:
        return list(self.collector)

    def harvest(self) -> None:
        """Deliver every accumulated metric, then flush the clients."""
        log.debug("Harvest...")
        for accumulator in self.accumulators():
            for entity in accumulator.drain():
                for metric in entity.drain_metrics():
                    accumulator.harvest_metrics(entity, metric)
        log.debug("Harvest COMPLETE")
        if self._flush is not None:
            self._flush()