"""
Hive-style partition descriptor and path codec.

A partitioned Hive table stores each partition in a directory chain named
``key=value`` per partition key, in partition-key order
(e.g. ``dt=2024-01-01/country=us``). ``HivePartition`` is keyed by those partition
field names and converts between value tuples and relative partition paths.

Escaping follows Hive's path-name rules: control characters and
``"#%'*/:=?\\{[]^`` plus DEL are written as ``%XX`` (upper-case hex); a NULL or
empty value maps to ``__HIVE_DEFAULT_PARTITION__``.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from .constants import DEFAULT_PARTITION_NAME
from .errors import InvalidConfiguration
from .fields import Fields

__all__ = [
    "HivePartition",
    "escape_path_name",
    "unescape_path_name",
]

_ESCAPED_CHARS = frozenset(
    [chr(c) for c in range(0x01, 0x20)] + list("\"#%'*/:=?\\\x7f{[]^")
)


def escape_path_name(value: str) -> str:
    """
    Escape a partition value for use as a path segment.

    Examples:
        >>> escape_path_name("a/b=c")
        'a%2Fb%3Dc'
    """
    return "".join(f"%{ord(ch):02X}" if ch in _ESCAPED_CHARS else ch for ch in value)


def unescape_path_name(segment: str) -> str:
    """Reverse ``escape_path_name``; malformed ``%`` sequences are kept verbatim."""
    out: list[str] = []
    i = 0
    while i < len(segment):
        ch = segment[i]
        if ch == "%" and _is_hex(segment[i + 1 : i + 3]):
            out.append(chr(int(segment[i + 1 : i + 3], 16)))
            i += 3
            continue
        out.append(ch)
        i += 1
    return "".join(out)


def _is_hex(s: str) -> bool:
    return len(s) == 2 and all(c in "0123456789abcdefABCDEF" for c in s)


@dataclass(frozen=True)
class HivePartition:
    """
    Partitioning descriptor keyed by partition field names.

    Attributes:
        partition_fields (Fields): Partition keys in directory nesting order.

    Examples:
        >>> p = HivePartition(Fields(["dt", "country"]))
        >>> p.to_partition({"dt": "2024-01-01", "country": "us"})
        'dt=2024-01-01/country=us'
        >>> p.parse("warehouse/events/dt=2024-01-01/country=us")
        {'dt': '2024-01-01', 'country': 'us'}
    """

    partition_fields: Fields

    def __post_init__(self) -> None:
        if len(self.partition_fields) == 0:
            raise InvalidConfiguration("partition requires at least one partition field")

    @property
    def path_depth(self) -> int:
        """Number of directory levels a partition occupies."""
        return len(self.partition_fields)

    def _ordered_values(
        self, values: Mapping[str, object] | Sequence[object]
    ) -> list[object]:
        if isinstance(values, Mapping):
            missing = [name for name in self.partition_fields if name not in values]
            if missing:
                raise InvalidConfiguration(f"missing partition values for {missing!r}")
            return [values[name] for name in self.partition_fields]
        if isinstance(values, str) or len(values) != self.path_depth:
            raise InvalidConfiguration(
                f"expected {self.path_depth} partition values for {list(self.partition_fields)!r}, "
                f"got {values!r}"
            )
        return list(values)

    def to_partition(self, values: Mapping[str, object] | Sequence[object]) -> str:
        """
        Build the relative partition path for ``values``.

        Args:
            values: Mapping of partition key to value, or a sequence aligned with
                ``partition_fields``. Non-string values are formatted with ``str``.

        Returns:
            str: ``key=value`` segments joined by ``/``.

        Raises:
            InvalidConfiguration: On missing keys or a wrong number of values.
        """
        segments = []
        for name, value in zip(self.partition_fields, self._ordered_values(values)):
            text = "" if value is None else str(value)
            encoded = escape_path_name(text) if text else DEFAULT_PARTITION_NAME
            segments.append(f"{escape_path_name(name)}={encoded}")
        return "/".join(segments)

    def parse(self, path: str) -> dict[str, str | None]:
        """
        Extract partition values from the trailing segments of ``path``.

        Args:
            path (str): A partition path, optionally prefixed by the table location.

        Returns:
            dict[str, str | None]: Values keyed by partition field, in partition order;
            the default-partition marker maps to None.

        Raises:
            InvalidConfiguration: If the path is too shallow or its keys do not match.
        """
        segments = [s for s in path.split("/") if s]
        if len(segments) < self.path_depth:
            raise InvalidConfiguration(
                f"path {path!r} has fewer than {self.path_depth} partition segments"
            )
        out: dict[str, str | None] = {}
        for name, segment in zip(self.partition_fields, segments[-self.path_depth :]):
            key, sep, raw = segment.partition("=")
            if not sep or unescape_path_name(key) != name:
                raise InvalidConfiguration(
                    f"segment {segment!r} in {path!r} does not match partition key {name!r}"
                )
            out[name] = None if raw == DEFAULT_PARTITION_NAME else unescape_path_name(raw)
        return out
