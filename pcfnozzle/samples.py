"""Single metric observations that become or update metrics."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pcfnozzle.attributes import Attributes
from pcfnozzle.metrics import Metric, MetricType


@dataclass
class Sample:
    """One observed value with its identifying properties."""

    name: str = ""
    metric_type: MetricType = MetricType.GAUGE
    unit: str = ""
    value: float = 0.0
    attributes: Attributes = field(default_factory=Attributes)

    def signature(self) -> tuple[str, MetricType, str, Attributes]:
        """The properties that identify the metric this sample belongs to."""
        return self.name, self.metric_type, self.unit, self.attributes

    def new_metric(self) -> Metric:
        return Metric(self.name, self.metric_type, self.unit, self.value, self.attributes)

    def with_name(self, name: str) -> "Sample":
        self.name = name
        return self

    def with_unit(self, unit: str) -> "Sample":
        self.unit = unit
        return self

    def set_attribute(self, name: str, value: Any) -> "Sample":
        self.attributes.set_attribute(name, value)
        return self


def gauge() -> Sample:
    """An empty gauge sample."""
    return Sample(metric_type=MetricType.GAUGE)