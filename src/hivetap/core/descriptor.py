"""
Frozen table descriptor translating between Hive metastore tables and processing fields.

A ``TableDescriptor`` holds the metadata of one Hive table (database, name, typed
columns, partition keys, delimiter, serde) and converts it into:

- a metastore ``Table`` ready for registration (``to_hive_table``), and
- the processing-side ``Fields``, ``TextDelimited`` scheme and ``HivePartition``
  used to read and write the table's files.

Notes:
    - Validation happens eagerly in ``__post_init__``; an instance that exists is valid.
    - Sequences are normalized to tuples, so attributes double as read-only accessors.
    - Column types are Hive type names passed through verbatim.
    - Partition keys are declared among the columns; the metastore stores them
      separately from the data columns, and rows written to files omit them.

Examples:
    >>> desc = TableDescriptor(
    ...     "users",
    ...     ["id", "name", "dt"],
    ...     ["int", "string", "string"],
    ...     partition_keys=["dt"],
    ... )
    >>> desc.is_partitioned(), list(desc.to_fields())
    (True, ['id', 'name'])
    >>> desc.filesystem_path()
    'users'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .constants import (
    DEFAULT_COLUMN_COMMENT,
    DEFAULT_DATABASE_NAME,
    DEFAULT_DELIMITER,
    DEFAULT_INPUT_FORMAT,
    DEFAULT_OUTPUT_FORMAT,
    DEFAULT_SERIALIZATION_LIB,
    SERDE_FIELD_DELIM_PARAM,
    SERDE_FORMAT_PARAM,
)
from .errors import InvalidConfiguration, UnsupportedOperation
from .fields import Fields
from .metastore import FieldSchema, SerDeInfo, StorageDescriptor, Table
from .partition import HivePartition
from .scheme import TextDelimited

__all__ = ["TableDescriptor"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TableDescriptor:
    """
    Validated, immutable metadata for a Hive text table.

    Attributes:
        table_name (str): Table name; required and non-empty.
        column_names (tuple[str, ...]): Column names, data and partition columns alike.
        column_types (tuple[str, ...]): Hive types aligned with ``column_names``.
        partition_keys (tuple[str, ...]): Partition columns, each one of ``column_names``.
        delimiter (str): Field delimiter; passing None selects DEFAULT_DELIMITER (0x01).
        serialization_lib (str): Serde class; passing None or "" selects DEFAULT_SERIALIZATION_LIB.
        database_name (str): Database; passing None or "" selects DEFAULT_DATABASE_NAME.

    Raises:
        InvalidConfiguration: If the table name is empty, columns/types are empty or of
            different lengths, a sequence holds a non-string, or a partition key is not a
            declared column.

    Notes:
        - Any iterable of strings is accepted for the sequence arguments.
        - Equality and hashing are structural over all seven attributes.
        - Column names are not required to be unique. With duplicates the two sides disagree:
          ``to_hive_table`` drops every column named like a partition key from ``sd.cols``,
          while ``to_fields`` drops only the first match, so the scheme writes fields the
          metastore schema does not list. Types resolve to the first column with that name.
    """

    table_name: str
    column_names: tuple[str, ...]
    column_types: tuple[str, ...]
    partition_keys: tuple[str, ...] = ()
    # None is a sentinel replaced with the Hive default in __post_init__.
    delimiter: str = None  # type: ignore[assignment]
    serialization_lib: str = None  # type: ignore[assignment]
    database_name: str = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if not self.table_name:
            raise InvalidConfiguration("table_name cannot be None or empty")

        # Defaults first, then structural checks.
        self._set("database_name", self.database_name or DEFAULT_DATABASE_NAME)
        self._set("delimiter", DEFAULT_DELIMITER if self.delimiter is None else self.delimiter)
        self._set("serialization_lib", self.serialization_lib or DEFAULT_SERIALIZATION_LIB)
        self._set("column_names", _as_tuple(self.column_names, "column_names"))
        self._set("column_types", _as_tuple(self.column_types, "column_types"))
        self._set("partition_keys", _as_tuple(self.partition_keys or (), "partition_keys"))

        if (
            not self.column_names
            or not self.column_types
            or len(self.column_names) != len(self.column_types)
        ):
            raise InvalidConfiguration(
                "column_names and column_types cannot be empty and must have the same size "
                f"(got {len(self.column_names)} names, {len(self.column_types)} types)"
            )
        for key in self.partition_keys:
            if key not in self.column_names:
                raise InvalidConfiguration(
                    f"given partition key {key!r} not present in column names"
                )

    def _set(self, name: str, value: object) -> None:
        object.__setattr__(self, name, value)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def is_partitioned(self) -> bool:
        """Return True when the table declares at least one partition key."""
        return len(self.partition_keys) > 0

    def column_type(self, name: str) -> str:
        """
        Hive type of the first column called ``name``.

        Raises:
            KeyError: If ``name`` is not a declared column.
        """
        try:
            return self.column_types[self.column_names.index(name)]
        except ValueError:
            raise KeyError(f"column {name!r} not declared on table {self.table_name!r}") from None

    def filesystem_path(self) -> str:
        """
        Path of the table relative to the warehouse directory.

        Returns:
            str: ``table_name`` for the default database, ``"<db>.db/<table>"`` otherwise.
        """
        if self.database_name == DEFAULT_DATABASE_NAME:
            return self.table_name
        return f"{self.database_name}.db/{self.table_name}"

    # ------------------------------------------------------------------
    # Metastore side
    # ------------------------------------------------------------------

    def partition_schema(self) -> list[FieldSchema]:
        """
        Partition columns as metastore field schemas.

        Returns:
            list[FieldSchema]: One entry per partition key, in ``partition_keys`` order
            (not column declaration order), each with an empty comment.
        """
        return [FieldSchema(name=key, type=self.column_type(key), comment="") for key in self.partition_keys]

    def to_hive_table(self) -> Table:
        """
        Build a metastore Table for registering this descriptor.

        Returns:
            Table: New table whose storage descriptor lists the non-partition columns,
            the delimited-text serde and default text input/output formats, plus the
            partition schema when the table is partitioned.
        """
        partition_columns = set(self.partition_keys)
        cols = [
            FieldSchema(name=name, type=ctype, comment=DEFAULT_COLUMN_COMMENT)
            for name, ctype in zip(self.column_names, self.column_types)
            if name not in partition_columns
        ]
        serde_info = SerDeInfo(
            serialization_lib=self.serialization_lib,
            parameters={
                SERDE_FORMAT_PARAM: self.delimiter,
                SERDE_FIELD_DELIM_PARAM: self.delimiter,
            },
        )
        sd = StorageDescriptor(
            cols=cols,
            serde_info=serde_info,
            input_format=DEFAULT_INPUT_FORMAT,
            output_format=DEFAULT_OUTPUT_FORMAT,
        )
        table = Table(
            db_name=self.database_name,
            table_name=self.table_name,
            sd=sd,
            partition_keys=self.partition_schema() if self.is_partitioned() else None,
        )
        logger.debug(
            "built hive table %s.%s with %d data columns and %d partition keys",
            self.database_name,
            self.table_name,
            len(cols),
            len(self.partition_keys),
        )
        return table

    @classmethod
    def from_hive_table(cls, table: Table) -> TableDescriptor:
        """
        Rebuild a descriptor from a metastore Table.

        Args:
            table (Table): Table as produced by ``to_hive_table`` or read from a metastore.

        Returns:
            TableDescriptor: Columns are the storage columns followed by the partition
            keys; the delimiter comes from the serde ``field.delim`` parameter, falling
            back to ``serialization.format`` and then the default.

        Raises:
            InvalidConfiguration: If the table does not satisfy descriptor invariants.
        """
        partition_cols = table.partition_keys or []
        all_cols = [*table.sd.cols, *partition_cols]
        params = table.sd.serde_info.parameters
        delimiter = params.get(SERDE_FIELD_DELIM_PARAM, params.get(SERDE_FORMAT_PARAM))
        return cls(
            table_name=table.table_name,
            column_names=[c.name for c in all_cols],
            column_types=[c.type for c in all_cols],
            partition_keys=[c.name for c in partition_cols],
            delimiter=delimiter,
            serialization_lib=table.sd.serde_info.serialization_lib,
            database_name=table.db_name,
        )

    # ------------------------------------------------------------------
    # Processing side
    # ------------------------------------------------------------------

    def to_fields(self) -> Fields:
        """
        Fields stored in the table's data files.

        Returns:
            Fields: ``column_names`` verbatim when unpartitioned; otherwise the columns
            with each partition key removed (first match by name), order preserved.
        """
        if not self.is_partitioned():
            return Fields(self.column_names)
        names = list(self.column_names)
        for key in self.partition_keys:
            names.remove(key)
        return Fields(names)

    def to_scheme(self) -> TextDelimited:
        """Headerless delimited-text scheme sinking ``to_fields()`` with this delimiter."""
        return TextDelimited(delimiter=self.delimiter, has_header=False, sink_fields=self.to_fields())

    def partition(self) -> HivePartition:
        """
        Partition descriptor keyed by the partition field names.

        Raises:
            UnsupportedOperation: If the table is not partitioned.
        """
        if not self.is_partitioned():
            raise UnsupportedOperation(
                f"non partitioned table {self.table_name!r} cannot be used in a partitioned context"
            )
        return HivePartition(Fields(self.partition_keys))


def _as_tuple(values: object, name: str) -> tuple[str, ...]:
    if values is None:
        raise InvalidConfiguration(f"{name} cannot be None")
    if isinstance(values, str):
        raise InvalidConfiguration(f"{name} must be a sequence of strings, not a single string")
    out = tuple(values)  # type: ignore[arg-type]
    for v in out:
        if not isinstance(v, str):
            raise InvalidConfiguration(f"{name} must contain only strings, got {v!r}")
    return out
