"""
Core package aggregator for hivetap contracts (descriptor, metastore models, fields, schemes, partitions).

## Contracts (single source of truth)
- Descriptor — `TableDescriptor`, validated Hive table metadata and its translations.
- Metastore — pydantic models for the metastore Table boundary.
- Fields/Scheme — processing-side field list and delimited-text configuration.
- Partition — `HivePartition` descriptor and `key=value` path codec.
- Constants/Errors — well-known Hive defaults and core exception types.

## Notes
- Zero-IO policy: stdlib + pydantic + polars (for schema objects only); no file/network IO.
- Column types are Hive type names carried verbatim; no coercion is performed.

## Downstream usage
- hivetap.io — resolves warehouse locations and validates polars frames against descriptors.
- Metastore clients — register `TableDescriptor.to_hive_table()` (dump with `by_alias=True`
  for thrift member names).

## Examples
```python
from hivetap.core.descriptor import TableDescriptor

desc = TableDescriptor(
    "users",
    ["id", "name", "dt"],
    ["int", "string", "string"],
    partition_keys=["dt"],
)
desc.to_hive_table().partition_keys  # [FieldSchema(name='dt', type='string', comment='')]
desc.partition().to_partition({"dt": "2024-01-01"})  # 'dt=2024-01-01'
```
"""
