"""
Delimited-text serializer configuration.

``TextDelimited`` is the processing-side description of how a Hive text table's
rows are laid out: field delimiter, header policy, NULL marker, and the sink
projection (the fields written per row, which excludes partition keys). It carries
no file handles and performs no IO; ``polars_read_options`` and
``polars_write_options`` translate it into keyword arguments for ``pl.read_csv`` and
``DataFrame.write_csv`` so callers own the actual reads and writes.

Notes:
    - Hive text tables are headerless, so ``has_header`` defaults to False.
    - polars only supports single-byte separators; multi-byte delimiters can be
      described but not translated into polars options.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import polars as pl

from .constants import DEFAULT_DELIMITER, DEFAULT_NULL_FORMAT
from .errors import UnsupportedOperation
from .fields import Fields

__all__ = ["TextDelimited"]


@dataclass(frozen=True)
class TextDelimited:
    """
    Frozen configuration for a headerless delimited-text table.

    Attributes:
        delimiter (str): Field separator written between values.
        has_header (bool): Whether files carry a header row (Hive tables do not).
        sink_fields (Fields): Fields written per row, in order.
        null_format (str): Marker written for NULL cells.

    Examples:
        >>> from hivetap.core.fields import Fields
        >>> scheme = TextDelimited(delimiter=",", sink_fields=Fields(["id", "name"]))
        >>> scheme.polars_write_options()["separator"]
        ','
    """

    delimiter: str = DEFAULT_DELIMITER
    has_header: bool = False
    sink_fields: Fields = field(default_factory=Fields)
    null_format: str = DEFAULT_NULL_FORMAT

    def _separator(self) -> str:
        if len(self.delimiter.encode("utf-8")) != 1:
            raise UnsupportedOperation(
                f"delimiter {self.delimiter!r} is not a single byte; polars cannot use it as a separator"
            )
        return self.delimiter

    def polars_read_options(self) -> dict[str, Any]:
        """
        Keyword arguments for ``pl.read_csv`` / ``pl.scan_csv`` over this table's files.

        Returns:
            dict[str, Any]: separator, has_header, schema (all Utf8 over sink_fields),
            null_values and quote_char.

        Raises:
            UnsupportedOperation: If the delimiter is not a single byte.
        """
        return {
            "separator": self._separator(),
            "has_header": self.has_header,
            "schema": self.sink_fields.to_polars_schema(),
            "null_values": self.null_format,
            # Hive text rows are unquoted
            "quote_char": None,
        }

    def polars_write_options(self) -> dict[str, Any]:
        """
        Keyword arguments for ``DataFrame.write_csv`` producing Hive-readable rows.

        Raises:
            UnsupportedOperation: If the delimiter is not a single byte.
        """
        return {
            "separator": self._separator(),
            "include_header": self.has_header,
            "null_value": self.null_format,
            "quote_style": "never",
        }

    def sink(self, df: pl.DataFrame) -> pl.DataFrame:
        """
        Project a frame onto the sink fields, in order, with every column cast to Utf8.

        Raises:
            pl.exceptions.ColumnNotFoundError: If a sink field is missing from ``df``.
        """
        return df.select([pl.col(name).cast(pl.Utf8) for name in self.sink_fields])
