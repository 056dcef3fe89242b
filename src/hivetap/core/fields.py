"""
Ordered field selectors for the processing side of a table.

A ``Fields`` value names the columns a pipeline step reads or writes, in order. It is
the frame-side counterpart of the metastore column list: descriptors project their
declared columns into a ``Fields`` (dropping partition keys, which live in directory
names rather than rows), and schemes use it as the sink projection.

Notes:
    - Names are kept verbatim and positionally; duplicates are not rejected, so
      ``index_of`` resolves to the first match.
    - ``to_polars_schema`` types every field as Utf8. Hive types are carried as
      metadata only; no coercion happens on this side.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

import polars as pl

__all__ = ["Fields"]


@dataclass(frozen=True, init=False)
class Fields:
    """
    Immutable, ordered list of field names.

    Attributes:
        names (tuple[str, ...]): Field names in declaration order.

    Examples:
        >>> f = Fields(["id", "name"])
        >>> list(f), len(f), "id" in f
        (['id', 'name'], 2, True)
        >>> f + Fields(["dt"])
        Fields(names=('id', 'name', 'dt'))
    """

    names: tuple[str, ...]

    def __init__(self, names: Iterable[str] = ()) -> None:
        if isinstance(names, str):
            names = (names,)
        object.__setattr__(self, "names", tuple(names))

    def __len__(self) -> int:
        return len(self.names)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)

    def __contains__(self, name: object) -> bool:
        return name in self.names

    def __getitem__(self, pos: int) -> str:
        return self.names[pos]

    def __add__(self, other: Fields) -> Fields:
        if not isinstance(other, Fields):
            return NotImplemented
        return Fields(self.names + other.names)

    def index_of(self, name: str) -> int:
        """
        Position of the first field called ``name``.

        Raises:
            KeyError: If no field has that name.
        """
        try:
            return self.names.index(name)
        except ValueError:
            raise KeyError(f"field {name!r} not in {list(self.names)!r}") from None

    def select(self, names: Iterable[str]) -> Fields:
        """Return a new Fields with ``names`` in the given order; each must be present."""
        picked = tuple(names)
        for name in picked:
            self.index_of(name)
        return Fields(picked)

    def to_polars_schema(self) -> pl.Schema:
        """Polars schema with every field typed as Utf8 (string pass-through)."""
        return pl.Schema([(name, pl.Utf8) for name in self.names])
