"""
Hive metastore defaults shared by descriptors and schemes.

Defines the well-known database, delimiter, serde and storage format identifiers a
Hive metastore expects for plain delimited-text tables. This module is zero-IO and
uses only the Python standard library.

Notes:
    - Values must match the Hive ecosystem verbatim; metastore clients and readers
      key on these strings.
    - DEFAULT_DELIMITER is Hive's ^A (0x01) field separator.
    - DEFAULT_NULL_FORMAT is the LazySimpleSerDe marker for NULL cells.
"""

from __future__ import annotations

from typing import Final

__all__ = [
    "DEFAULT_DATABASE_NAME",
    "DEFAULT_DELIMITER",
    "DEFAULT_INPUT_FORMAT",
    "DEFAULT_OUTPUT_FORMAT",
    "DEFAULT_SERIALIZATION_LIB",
    "DEFAULT_COLUMN_COMMENT",
    "DEFAULT_NULL_FORMAT",
    "DEFAULT_PARTITION_NAME",
    "SERDE_FORMAT_PARAM",
    "SERDE_FIELD_DELIM_PARAM",
]

# Database used by Hive when none is given; tables in it live directly under the warehouse.
DEFAULT_DATABASE_NAME: Final[str] = "default"

DEFAULT_DELIMITER: Final[str] = "\x01"

DEFAULT_INPUT_FORMAT: Final[str] = "org.apache.hadoop.mapred.TextInputFormat"

DEFAULT_OUTPUT_FORMAT: Final[str] = "org.apache.hadoop.hive.ql.io.HiveIgnoreKeyTextOutputFormat"

DEFAULT_SERIALIZATION_LIB: Final[str] = "org.apache.hadoop.hive.serde2.lazy.LazySimpleSerDe"

# Comment attached to data columns registered through a descriptor.
DEFAULT_COLUMN_COMMENT: Final[str] = "created by hivetap"

DEFAULT_NULL_FORMAT: Final[str] = "\\N"

# Directory name Hive uses for a NULL or empty partition value.
DEFAULT_PARTITION_NAME: Final[str] = "__HIVE_DEFAULT_PARTITION__"

SERDE_FORMAT_PARAM: Final[str] = "serialization.format"
SERDE_FIELD_DELIM_PARAM: Final[str] = "field.delim"
