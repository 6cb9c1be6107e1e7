"""Named attribute values with a stable, order-independent signature."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, Iterator

from pcfnozzle.uid import concat


@dataclass
class Attribute:
    """A single named value."""

    name: str
    value: Any

    def __str__(self) -> str:
        return f"{{{self.name}:{self.value}}}"

    def contains(self, text: str) -> bool:
        """Whether ``text`` occurs in the attribute's name."""
        return text in self.name


class Attributes:
    """Thread-safe collection of attributes keyed by name.

    The signature is fixed on its first computation; attributes added later
    do not change it.
    """

    def __init__(self, *attrs: Attribute) -> None:
        self._map: dict[str, Attribute] = {}
        self._lock = threading.RLock()
        self._signature = ""
        for attr in attrs:
            self.append(attr)

    def set_attribute(self, name: str, value: Any) -> Attribute:
        """Set (or replace) the attribute ``name``."""
        attr = Attribute(name, value)
        with self._lock:
            self._map[name] = attr
        return attr

    def append(self, attr: Attribute) -> None:
        """Add ``attr`` unless an attribute of that name already exists."""
        with self._lock:
            self._map.setdefault(attr.name, attr)

    def append_all(self, other: "Attributes") -> None:
        """Add every attribute of ``other`` not already present."""
        for attr in list(other):
            self.append(attr)

    def get(self, name: str) -> Attribute | None:
        """Return the attribute called ``name`` or None."""
        with self._lock:
            return self._map.get(name)

    def float_value_of(self, name: str) -> float:
        """Numeric value of ``name`` as float, or 0.0 if missing or non-numeric."""
        with self._lock:
            attr = self._map.get(name)
        if attr is None:
            return 0.0
        value = attr.value
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return 0.0
        return float(value)

    def signature(self) -> str:
        """Values joined in order of their sorted names."""
        if self._signature:
            return self._signature
        with self._lock:
            signature = ""
            for key in sorted(self._map):
                signature = concat(signature, self._map[key].value)
            self._signature = signature
            return signature

    def marshal(self) -> dict[str, Any]:
        """Return a plain name-to-value dictionary."""
        with self._lock:
            return {name: attr.value for name, attr in self._map.items()}

    def __iter__(self) -> Iterator[Attribute]:
        with self._lock:
            snapshot = list(self._map.values())
        return iter(snapshot)

    def __len__(self) -> int:
        return len(self._map)