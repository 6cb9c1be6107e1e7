from pcfnozzle.accumulator import Accumulator
from pcfnozzle.attributes import Attribute, Attributes
from pcfnozzle.collector import Collector


def test_collector_holds_fresh_instances():
    registered = [Accumulator("Log"), Accumulator("Counter")]
    registered[0].get_entity(Attributes(Attribute("k", "v")))
    collector = Collector(registered)
    held = list(collector)
    assert len(collector) == 2
    assert [a.streams() for a in held] == [["Log"], ["Counter"]]
    assert all(a is not r for a, r in zip(held, registered))
    assert len(held[0].entities) == 0


def test_empty_collector_and_append():
    collector = Collector()
    assert len(collector) == 0
    acc = Accumulator("ValueMetric")
    collector.append(acc)
    assert len(collector) == 1
    assert list(collector) == [acc]


def test_iteration_is_snapshot():
    collector = Collector([Accumulator("Log")])
    for _ in collector:
        collector.append(Accumulator("Counter"))
    assert len(collector) == 2