# pcfnozzle

The aggregation core of a Cloud Foundry firehose nozzle. Attributes,
entities, metrics and events are collected in memory between harvests.
Each harvest then drains all of them in one pass.

The package has no dependencies outside the standard library.

## Installation

```
pip install pcfnozzle
```

To run the tests:

```
pip install "pcfnozzle[test]"
pytest
```

## Modules

- `pcfnozzle.uid.concat(uid, *args)` appends each value to `uid` as
  `/<value>`. The result serves as a signature.
- `pcfnozzle.attributes.Attribute` is a single name/value pair.
  `pcfnozzle.attributes.Attributes` is a thread-safe set of them, keyed by
  name:
  - `set_attribute` replaces a value.
  - `append` and `append_all` add only names that are not yet present.
  - `get` returns an attribute or `None`.
  - `float_value_of` returns a numeric value as a float, or `0.0`.
  - `marshal()` returns a plain dict.
  - `signature()` joins the values in the sorted order of their names. It is
    fixed once it has been computed.
- `pcfnozzle.metrics`:
  - `MetricType` has the members `GAUGE`, `COUNT`, `COUNTER` and `DELTA`.
  - `Metric` tracks the min, max, sum, last value and sample count of its
    values. Use `update(value)` to add a value. `marshal()` returns the
    `metric.*` fields together with the metric's attributes. A field is
    renamed when `metric.aliases` holds an attribute with that field's name.
  - `set_sender` and `send` pass a metric to a callback.
  - `MetricMap` is a thread-safe store keyed by signature, with `drain`,
    `for_each`, `get`, `put` and `len()`.
  - `signature(name, metric_type, unit, attrs)` returns the signature that
    such a metric would have.
- `pcfnozzle.samples.Sample` is one observed value. It has `new_metric()`,
  `with_name()`, `with_unit()` and `set_attribute()`. `gauge()` returns an
  empty gauge sample.
- `pcfnozzle.nrevents.Nrevent` is an event made only of attributes.
  `pcfnozzle.nrevents.NreventMap` stores events by signature.
- `pcfnozzle.entities`:
  - `Entity` groups metrics under one set of attributes.
  - `Entity.new_sample(...)` returns an `EntitySample`. Its `done()` method
    updates the entity's matching metric, or creates that metric if it does
    not exist.
  - `EntityMap` stores entities by signature.
- `pcfnozzle.accumulator.Accumulator` handles the envelope types it is given
  and keeps an `EntityMap`:
  - `get_entity(attrs)` finds or creates an entity.
  - `drain()` removes and returns all entities.
  - `new()` returns a fresh accumulator of the same kind.
  - To say how envelopes are consumed and how metrics are delivered, either
    subclass it and override `update` and `harvest_metrics`, or pass the
    `updater` and `harvester` callbacks. Without either, those two methods
    raise `TypeError`.
- `pcfnozzle.collector.Collector` is built from an iterable of registered
  accumulators. It holds a fresh `new()` copy of each one.
- `pcfnozzle.harvester.Harvester` drains every accumulator of a collector. It
  calls `harvest_metrics` for each metric of each entity, and then calls the
  optional `flush` callback.
- `pcfnozzle.healthcheck.start(port)` serves `/health` on a background
  thread and answers with `I'm alive and well!`. Any other path gets 404.
  The function returns the `ThreadingHTTPServer`; call its `shutdown()`
  method to stop it.

## Example

```python
from pcfnozzle.attributes import Attribute, Attributes
from pcfnozzle.entities import Entity
from pcfnozzle.metrics import MetricType

entity = Entity(Attributes(Attribute("pcf.origin", "rep")))
entity.new_sample("cpu", MetricType.GAUGE, "percent", 12.5).done()
entity.new_sample("cpu", MetricType.GAUGE, "percent", 20.0).done()

for metric in entity.drain_metrics():
    print(metric.marshal())
```

## What this package does not do

- It does not connect to the firehose, and it does not decode envelopes.
  Feeding envelopes to `Accumulator.update` is left to the caller.
- It ships no concrete accumulators and no registry of them.
- It has no client that sends metrics or events to a monitoring backend.
  Delivery happens only through the callbacks you supply: `harvest_metrics`,
  the `flush` callback of `Harvester`, and the senders set on metrics and
  events.
- It has no command-line program and no timer that harvests on a schedule.