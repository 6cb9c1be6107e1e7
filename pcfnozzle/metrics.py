"""Metrics aggregated from samples, and a keyed store for them."""

from __future__ import annotations

import contextlib
import threading
from enum import Enum
from typing import Any, Callable, ContextManager

from pcfnozzle.attributes import Attributes
from pcfnozzle.uid import concat

JSON_DEFAULTS: dict[str, str] = {
    "EnvelopeType": "eventType",
    "Origin": "pcf.origin",
    "Deployement": "pcf.deployment",
    "Job": "pcf.job",
    "Index": "pcf.index",
    "IP": "pcf.ip",
    "AppGUID": "pcf.app.guid",
    "AppName": "pcf.app.name",
    "AppSpaceName": "pcf.app.space.name",
    "AppOrgName": "pcf.app.org.name",
    "AppInstanceIndex": "pcf.app.instance.index",
    "AppInstanceState": "pcf.app.instance.state",
    "Name": "pcf.metric",
    "Unit": "pcf.metric.unit",
    "Min": "pcf.metric.min",
    "Max": "pcf.metric.max",
    "Total": "pcf.metric.total",
    "Quota": "pcf.metric.quota",
    "Count": "pcf.metric.samples",
    "Average": "pcf.metric.average",
    "QuotaUsed": "pcf.metric.quota.used",
    "Drift": "pcf.metric.drift",
}


class MetricType(Enum):
    """Kinds of metric."""

    GAUGE = 0
    COUNT = 1
    COUNTER = 2
    DELTA = 3

    def __str__(self) -> str:
        return self.name.capitalize()


def signature(name: str, metric_type: MetricType, unit: str, attrs: Attributes) -> str:
    """Signature a metric with these properties would have."""
    return concat(attrs.signature(), name, metric_type, unit)


class Metric:
    """Running aggregate of sample values."""

    def __init__(
        self,
        name: str,
        metric_type: MetricType,
        unit: str,
        value: float,
        attributes: Attributes | None = None,
    ) -> None:
        self.name = name
        self.metric_type = metric_type
        self.unit = unit
        self.min = value
        self.max = value
        self.sum = value
        self.last_value = value
        self.samples = 1
        self.attributes = attributes if attributes is not None else Attributes()
        self.aliases = Attributes()
        self._map_lock: threading.RLock | None = None
        self._sender: Callable[["Metric"], Any] | None = None

    def _guard(self) -> ContextManager[Any]:
        return self._map_lock if self._map_lock is not None else contextlib.nullcontext()

    def update(self, value: float) -> "Metric":
        """Fold a new sample value into the aggregate."""
        with self._guard():
            self.last_value = value
            self.sum += value
            self.min = min(self.min, value)
            self.max = max(self.max, value)
            self.samples += 1
        return self

    def set_attribute(self, name: str, value: Any) -> "Metric":
        with self._guard():
            self.attributes.set_attribute(name, value)
        return self

    def set_sender(self, sender: Callable[["Metric"], Any]) -> None:
        self._sender = sender

    def send(self) -> None:
        """Pass this metric to its sender."""
        if self._sender is None:
            raise RuntimeError("metric has no sender")
        self._sender(self)

    def signature(self) -> str:
        return signature(self.name, self.metric_type, self.unit, self.attributes)

    def marshal(self) -> dict[str, Any]:
        """Payload of the metric's fields and attributes; aliases rename fields."""
        fields: dict[str, Any] = {
            "metric.name": self.name,
            "metric.type": str(self.metric_type),
            "metric.unit": self.unit,
            "metric.min": self.min,
            "metric.max": self.max,
            "metric.sum": self.sum,
            "metric.sample.last.value": self.last_value,
            "metric.samples.count": self.samples,
        }
        payload: dict[str, Any] = {}
        for key, value in fields.items():
            alias = self.aliases.get(key)
            payload[alias.value if alias is not None else key] = value
        payload.update(self.attributes.marshal())
        return payload


class MetricMap:
    """Thread-safe store of metrics keyed by signature."""

    def __init__(self) -> None:
        self._collection: dict[str, Metric] = {}
        self._lock = threading.RLock()

    def drain(self) -> list[Metric]:
        """Remove and return all metrics."""
        with self._lock:
            drained = list(self._collection.values())
            self._collection = {}
        return drained

    def for_each(self, fn: Callable[[Metric], Any]) -> int:
        """Call ``fn`` on every metric; return how many there were."""
        with self._lock:
            for metric in self._collection.values():
                fn(metric)
            return len(self._collection)

    def get(self, signature: str) -> Metric | None:
        with self._lock:
            return self._collection.get(signature)

    def put(self, metric: Metric) -> None:
        metric._map_lock = self._lock
        with self._lock:
            self._collection[metric.signature()] = metric

    def __len__(self) -> int:
        return len(self._collection)