"""Entities that group metrics and events under one set of attributes."""

from __future__ import annotations

import threading
from typing import Any, Callable

from pcfnozzle.attributes import Attribute, Attributes
from pcfnozzle.metrics import Metric, MetricMap, MetricType, signature
from pcfnozzle.nrevents import NreventMap
from pcfnozzle.samples import Sample


class Entity:
    """A source of metrics, identified by its attributes."""

    def __init__(self, attributes: Attributes | None = None) -> None:
        self.attributes = attributes if attributes is not None else Attributes()
        self.metrics = MetricMap()
        self.nrevents = NreventMap()

    def new_sample(
        self, name: str, metric_type: MetricType, unit: str, value: float
    ) -> "EntitySample":
        """Start a sample that will be recorded against this entity."""
        return EntitySample(self, Sample(name, metric_type, unit, value, Attributes()))

    def set_attribute(self, name: str, value: Any) -> Attribute:
        return self.attributes.set_attribute(name, value)

    def for_each_metric(self, fn: Callable[[Metric], Any]) -> int:
        """Call ``fn`` on every metric; return how many there were."""
        return self.metrics.for_each(fn)

    def drain_metrics(self) -> list[Metric]:
        """Remove and return all of this entity's metrics."""
        return self.metrics.drain()

    def get_metric(self, sample: Sample) -> Metric | None:
        """The metric ``sample`` belongs to, or None if there is none yet."""
        return self.metrics.get(signature(*sample.signature()))

    def put_metric(self, metric: Metric) -> None:
        self.metrics.put(metric)

    def add_attributes_to_map(self, target: dict[str, Any]) -> dict[str, Any]:
        """Write this entity's attribute values into ``target`` and return it."""
        for attr in self.attributes:
            target[attr.name] = attr.value
        return target

    def add_attributes_to_metric(self, metric: Metric) -> None:
        """Add this entity's attributes to ``metric`` where not already set."""
        for attr in self.attributes:
            metric.attributes.append(attr)

    def attribute_by_name(self, name: str) -> Attribute | None:
        return self.attributes.get(name)

    def metric_count(self) -> int:
        return len(self.metrics)

    def signature(self) -> str:
        return self.attributes.signature()


class EntityMap:
    """Thread-safe store of entities keyed by signature."""

    def __init__(self) -> None:
        self._collection: dict[str, Entity] = {}
        self._lock = threading.RLock()

    def drain(self) -> list[Entity]:
        """Remove and return all entities."""
        with self._lock:
            drained = list(self._collection.values())
            self._collection = {}
        return drained

    def for_each(self, fn: Callable[[Entity], Any]) -> int:
        """Call ``fn`` on every entity; return how many there were."""
        with self._lock:
            for entity in self._collection.values():
                fn(entity)
            return len(self._collection)

    def get(self, signature: str) -> Entity | None:
        with self._lock:
            return self._collection.get(signature)

    def put(self, entity: Entity) -> None:
        with self._lock:
            self._collection[entity.signature()] = entity

    def __len__(self) -> int:
        return len(self._collection)


class EntitySample:
    """A sample bound to the entity it will be recorded against."""

    def __init__(self, entity: Entity, sample: Sample) -> None:
        self.entity = entity
        self.sample = sample

    def set_attribute(self, name: str, value: Any) -> "EntitySample":
        self.sample.set_attribute(name, value)
        return self

    def done(self) -> Metric:
        """Record the sample: update its metric, creating it if needed."""
        metric = self.entity.get_metric(self.sample)
        if metric is not None:
            metric.update(self.sample.value)
            return metric
        metric = self.sample.new_metric()
        self.entity.put_metric(metric)
        return metric