"""
Pydantic v2 models for the Hive metastore table boundary.

The models mirror the metastore thrift structs a client registers (Table,
StorageDescriptor, SerDeInfo, FieldSchema) with only the members this library
populates. Field names are lower_snake in Python; camelCase aliases reproduce the
thrift member names so ``model_dump(by_alias=True)`` yields a payload a metastore
client (or a Glue-style API adapter) can consume directly.

Style
- Zero-IO (stdlib + pydantic only).
- ``extra="forbid"`` on every model; unknown members are rejected on validation.

Examples:
    >>> from hivetap.core.metastore import FieldSchema
    >>> FieldSchema(name="id", type="int").model_dump(by_alias=True)
    {'name': 'id', 'type': 'int', 'comment': ''}
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

__all__ = [
    "FieldSchema",
    "SerDeInfo",
    "StorageDescriptor",
    "Table",
]

_MODEL_CONFIG = ConfigDict(extra="forbid", alias_generator=to_camel, populate_by_name=True)


class FieldSchema(BaseModel):
    """
    A single typed column as the metastore stores it.

    Attributes:
        name (str): Column name.
        type (str): Hive type name, passed through verbatim (e.g. "int", "string").
        comment (str): Free-form column comment; empty for partition keys.
    """

    model_config = _MODEL_CONFIG

    name: str
    type: str
    comment: str = ""


class SerDeInfo(BaseModel):
    """
    Serialization library and its parameters.

    Attributes:
        serialization_lib (str): Fully qualified serde class name.
        parameters (dict[str, str]): Serde parameters such as "field.delim".
    """

    model_config = _MODEL_CONFIG

    serialization_lib: str
    parameters: dict[str, str] = Field(default_factory=dict)


class StorageDescriptor(BaseModel):
    """
    Physical layout of the table's data columns.

    Attributes:
        cols (list[FieldSchema]): Data columns, excluding partition keys.
        serde_info (SerDeInfo): Row serialization settings.
        input_format (str): Hadoop input format class name.
        output_format (str): Hadoop output format class name.
    """

    model_config = _MODEL_CONFIG

    cols: list[FieldSchema] = Field(default_factory=list)
    serde_info: SerDeInfo
    input_format: str
    output_format: str


class Table(BaseModel):
    """
    Metastore table definition ready for registration.

    Attributes:
        db_name (str): Database the table belongs to.
        table_name (str): Table name.
        sd (StorageDescriptor): Storage descriptor for the data columns.
        partition_keys (list[FieldSchema] | None): Partition columns in partition order,
            or None for an unpartitioned table.
    """

    model_config = _MODEL_CONFIG

    db_name: str
    table_name: str
    sd: StorageDescriptor
    partition_keys: list[FieldSchema] | None = None

    def is_partition_keys_set(self) -> bool:
        """Return True when partition keys were attached to this table."""
        return self.partition_keys is not None
