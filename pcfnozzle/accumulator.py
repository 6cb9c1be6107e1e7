"""Accumulators collect envelopes into entities and harvest their metrics."""

from __future__ import annotations

from typing import Any, Callable

from pcfnozzle.attributes import Attributes
from pcfnozzle.entities import Entity, EntityMap
from pcfnozzle.metrics import Metric

Updater = Callable[["Accumulator", Any], Any]
MetricHarvester = Callable[["Accumulator", Entity, Metric], Any]


class Accumulator:
    """Handler for envelopes of the given types.

    How envelopes are consumed and metrics delivered is supplied either by
    a subclass overriding :meth:`update` and :meth:`harvest_metrics` or by
    the ``updater`` and ``harvester`` callbacks.
    """

    def __init__(
        self,
        *envelope_types: str,
        updater: Updater | None = None,
        harvester: MetricHarvester | None = None,
    ) -> None:
        self.envelope_types = tuple(envelope_types)
        self.entities = EntityMap()
        self._updater = updater
        self._harvester = harvester

    def get_entity(self, attrs: Attributes) -> Entity:
        """The entity with the signature of ``attrs``, created if missing."""
        entity = self.entities.get(attrs.signature())
        if entity is not None:
            return entity
        entity = Entity(attrs)
        self.entities.put(entity)
        return entity

    def drain(self) -> list[Entity]:
        """Remove and return all entities."""
        return self.entities.drain()

    def streams(self) -> list[str]:
        """Envelope types this accumulator handles."""
        return list(self.envelope_types)

    def new(self) -> "Accumulator":
        """A fresh, empty accumulator of the same kind."""
        return type(self)(
            *self.envelope_types, updater=self._updater, harvester=self._harvester
        )

    def update(self, envelope: Any) -> None:
        """Consume one envelope."""
        if self._updater is None:
            raise TypeError(f"{type(self).__name__} has no update handler")
        self._updater(self, envelope)

    def harvest_metrics(self, entity: Entity, metric: Metric) -> None:
        """Deliver one metric of ``entity``."""
        if self._harvester is None:
            raise TypeError(f"{type(self).__name__} has no harvest handler")
        self._harvester(self, entity, metric)