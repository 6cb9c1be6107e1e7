"""In-memory store of the active accumulators."""

from __future__ import annotations

from typing import Iterable, Iterator

from pcfnozzle.accumulator import Accumulator


class Collector:
    """Holds a fresh instance of every registered accumulator."""

    def __init__(self, registry: Iterable[Accumulator] = ()) -> None:
        self._accumulators: list[Accumulator] = []
        for accumulator in registry:
            self.append(accumulator.new())

    def append(self, accumulator: Accumulator) -> None:
        self._accumulators.append(accumulator)

    def __iter__(self) -> Iterator[Accumulator]:
        return iter(list(self._accumulators))

    def __len__(self) -> int:
        return len(self._accumulators)