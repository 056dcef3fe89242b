"""
hivetap — translate Hive metastore table definitions to and from processing-side fields.

## Public API
- TableDescriptor — validated table metadata with metastore and processing translations.
- Fields, TextDelimited, HivePartition — processing-side field list, text scheme, partition codec.
- InvalidConfiguration, UnsupportedOperation — core errors.
- HiveSettings — runtime configuration for the io helpers.
"""

from __future__ import annotations

from .core.descriptor import TableDescriptor
from .core.errors import InvalidConfiguration, UnsupportedOperation
from .core.fields import Fields
from .core.partition import HivePartition
from .core.scheme import TextDelimited
from .io.config import HiveSettings

__all__ = [
    "TableDescriptor",
    "Fields",
    "TextDelimited",
    "HivePartition",
    "InvalidConfiguration",
    "UnsupportedOperation",
    "HiveSettings",
]
