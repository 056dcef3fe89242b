"""
Path and layout helpers for hivetap.io.

Overview (warehouse layout)
- <warehouse_dir>/<table>                                   (default database)
- <warehouse_dir>/<db>.db/<table>                           (any other database)
- <warehouse_dir>/<db>.db/<table>/<k1>=<v1>/<k2>=<v2>       (partitions)

Source of truth
- Table-relative layout: TableDescriptor.filesystem_path().
- Partition segments and escaping: HivePartition.to_partition().

Notes
- This module only builds path strings; it does not touch the filesystem.
"""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence

from hivetap.core.descriptor import TableDescriptor

from .config import HiveSettings


def table_location(settings: HiveSettings, desc: TableDescriptor) -> str:
    """
    Absolute or warehouse-relative location of a table.

    Args:
        settings (HiveSettings): Provides warehouse_dir.
        desc (TableDescriptor): Table to locate.

    Returns:
        str: ``os.path.join(warehouse_dir, desc.filesystem_path())``.
    """
    return os.path.join(settings.warehouse_dir, desc.filesystem_path())


def partition_location(
    settings: HiveSettings,
    desc: TableDescriptor,
    values: Mapping[str, object] | Sequence[object],
) -> str:
    """
    Location of a single partition of a table.

    Args:
        settings (HiveSettings): Provides warehouse_dir.
        desc (TableDescriptor): Partitioned table.
        values: Partition values keyed by partition key, or aligned with partition_keys.

    Returns:
        str: Table location joined with the ``key=value`` partition path.

    Raises:
        UnsupportedOperation: If the table is not partitioned.
        InvalidConfiguration: If ``values`` do not match the partition keys.
    """
    rel = desc.partition().to_partition(values)
    return os.path.join(table_location(settings, desc), *rel.split("/"))
