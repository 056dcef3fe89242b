import pytest

from hivetap.core.constants import (
    DEFAULT_DATABASE_NAME,
    DEFAULT_DELIMITER,
    DEFAULT_SERIALIZATION_LIB,
)
from hivetap.core.descriptor import TableDescriptor
from hivetap.core.errors import InvalidConfiguration, UnsupportedOperation
from hivetap.core.fields import Fields


def _users(**kwargs) -> TableDescriptor:
    return TableDescriptor(
        "users",
        ["id", "name", "dt"],
        ["int", "string", "string"],
        **kwargs,
    )


def test_defaults_applied() -> None:
    desc = _users()
    assert desc.database_name == DEFAULT_DATABASE_NAME
    assert desc.delimiter == DEFAULT_DELIMITER
    assert desc.serialization_lib == DEFAULT_SERIALIZATION_LIB
    assert desc.partition_keys == ()
    assert not desc.is_partitioned()


def test_empty_database_falls_back_to_default() -> None:
    assert _users(database_name="").database_name == "default"
    assert _users(database_name=None).database_name == "default"


def test_sequences_normalized_to_tuples() -> None:
    desc = _users(partition_keys=["dt"])
    assert desc.column_names == ("id", "name", "dt")
    assert desc.column_types == ("int", "string", "string")
    assert desc.partition_keys == ("dt",)
    with pytest.raises(AttributeError):
        desc.column_names.append("x")  # type: ignore[attr-defined]


def test_frozen() -> None:
    desc = _users()
    with pytest.raises(AttributeError):
        desc.table_name = "other"  # type: ignore[misc]


@pytest.mark.parametrize("name", ["", None])
def test_table_name_required(name) -> None:
    with pytest.raises(InvalidConfiguration):
        TableDescriptor(name, ["id"], ["int"])


def test_empty_columns_rejected() -> None:
    with pytest.raises(InvalidConfiguration):
        TableDescriptor("t", [], [])


@pytest.mark.parametrize(
    ("names", "types"),
    [
        (["a", "b"], ["int"]),
        (["a"], ["int", "string"]),
        (["a"], []),
        ([], ["int"]),
    ],
)
def test_mismatched_columns_rejected(names, types) -> None:
    with pytest.raises(InvalidConfiguration):
        TableDescriptor("t", names, types)


def test_single_string_columns_rejected() -> None:
    with pytest.raises(InvalidConfiguration):
        TableDescriptor("t", "id", "int")


def test_unknown_partition_key_rejected() -> None:
    with pytest.raises(InvalidConfiguration, match="'country'"):
        _users(partition_keys=["country"])


def test_to_fields_unpartitioned_is_column_names() -> None:
    desc = TableDescriptor("t", ["c", "a", "b"], ["int", "int", "int"])
    assert desc.to_fields() == Fields(["c", "a", "b"])


def test_to_fields_drops_partition_keys_preserving_order() -> None:
    desc = TableDescriptor(
        "events",
        ["year", "id", "month", "payload", "day"],
        ["int", "bigint", "int", "string", "int"],
        partition_keys=["day", "year"],
    )
    assert list(desc.to_fields()) == ["id", "month", "payload"]


def test_to_fields_removes_first_match_only() -> None:
    desc = TableDescriptor("t", ["k", "v", "k"], ["string", "string", "int"], partition_keys=["k"])
    assert list(desc.to_fields()) == ["v", "k"]


def test_users_partitioned_by_dt() -> None:
    desc = _users(partition_keys=["dt"])
    assert desc.is_partitioned()
    assert list(desc.to_fields()) == ["id", "name"]

    table = desc.to_hive_table()
    assert [(c.name, c.type) for c in table.sd.cols] == [("id", "int"), ("name", "string")]
    assert table.partition_keys is not None
    assert [(c.name, c.type) for c in table.partition_keys] == [("dt", "string")]


def test_filesystem_path() -> None:
    assert _users().filesystem_path() == "users"
    assert _users(database_name="default").filesystem_path() == "users"
    assert _users(database_name="sales").filesystem_path() == "sales.db/users"


def test_to_scheme() -> None:
    desc = _users(partition_keys=["dt"], delimiter="|")
    scheme = desc.to_scheme()
    assert scheme.delimiter == "|"
    assert scheme.has_header is False
    assert scheme.sink_fields == Fields(["id", "name"])


def test_partition_descriptor() -> None:
    desc = _users(partition_keys=["dt"])
    part = desc.partition()
    assert part.partition_fields == Fields(["dt"])
    assert part.path_depth == 1


def test_partition_on_unpartitioned_table_raises() -> None:
    with pytest.raises(UnsupportedOperation):
        _users().partition()


def test_column_type_lookup() -> None:
    desc = _users()
    assert desc.column_type("id") == "int"
    with pytest.raises(KeyError):
        desc.column_type("missing")


def test_equality_and_hash() -> None:
    a = _users(partition_keys=["dt"], delimiter=",", database_name="db")
    b = TableDescriptor(
        table_name="users",
        column_names=("id", "name", "dt"),
        column_types=("int", "string", "string"),
        partition_keys=("dt",),
        delimiter=",",
        database_name="db",
    )
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


@pytest.mark.parametrize(
    "change",
    [
        {"table_name": "people"},
        {"column_names": ["id", "label", "dt"]},
        {"column_types": ["bigint", "string", "string"]},
        {"partition_keys": ["name"]},
        {"delimiter": "\t"},
        {"serialization_lib": "org.apache.hadoop.hive.serde2.OpenCSVSerde"},
        {"database_name": "other"},
    ],
)
def test_single_field_change_breaks_equality(change) -> None:
    base = {
        "table_name": "users",
        "column_names": ["id", "name", "dt"],
        "column_types": ["int", "string", "string"],
        "partition_keys": ["dt"],
        "delimiter": ",",
        "serialization_lib": DEFAULT_SERIALIZATION_LIB,
        "database_name": "db",
    }
    assert TableDescriptor(**base) != TableDescriptor(**{**base, **change})


def test_repr_dumps_all_fields() -> None:
    text = repr(_users(partition_keys=["dt"]))
    for fragment in ("users", "column_names", "column_types", "partition_keys", "delimiter", "serialization_lib", "database_name"):
        assert fragment in text


@pytest.mark.parametrize(
    ("names", "types", "partition_keys"),
    [
        ([1, 2], ["int", "int"], []),
        (["a", None], ["int", "int"], []),
        (["a", "b"], ["int", 5], []),
        (["a", "b"], ["int", "int"], [b"a"]),
    ],
)
def test_non_string_elements_rejected(names, types, partition_keys) -> None:
    with pytest.raises(InvalidConfiguration, match="must contain only strings"):
        TableDescriptor("t", names, types, partition_keys=partition_keys)


def test_none_sentinels_resolve_to_strings() -> None:
    desc = TableDescriptor("t", ["a"], ["int"], delimiter=None, serialization_lib=None, database_name=None)
    for value in (desc.delimiter, desc.serialization_lib, desc.database_name):
        assert isinstance(value, str)
    assert isinstance(desc.to_scheme().delimiter, str)
    assert isinstance(desc.to_hive_table().sd.serde_info.serialization_lib, str)


def test_duplicate_partition_name_metastore_and_fields_disagree() -> None:
    desc = TableDescriptor("t", ["k", "v", "k"], ["string", "string", "int"], partition_keys=["k"])
    assert [c.name for c in desc.to_hive_table().sd.cols] == ["v"]
    assert list(desc.to_fields()) == ["v", "k"]
