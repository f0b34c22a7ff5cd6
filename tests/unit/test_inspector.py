from __future__ import annotations

from decimal import Decimal

import pytest

from catalog_viewer import queries
from catalog_viewer.domain.models import NumericColumn, TextColumn
from catalog_viewer.exceptions import IncorrectResultSizeError, InvalidIdentifierError
from catalog_viewer.inspector import CatalogInspector, DatabaseViewer, map_primary_key
from tests.fakes import TABLE, FakeCatalogExecutor


def test_inspector_satisfies_viewer_protocol(employees_executor: FakeCatalogExecutor) -> None:
    assert isinstance(CatalogInspector(employees_executor), DatabaseViewer)


def test_get_schemas_and_tables_preserve_order(employees_executor: FakeCatalogExecutor) -> None:
    inspector = CatalogInspector(employees_executor)

    assert inspector.get_schemas() == ["HR", "SYS"]
    assert inspector.get_tables() == ["EMPLOYEES", "DEPARTMENTS"]
    assert employees_executor.calls == [
        ("query_for_list", queries.LIST_SCHEMAS, ()),
        ("query_for_list", queries.LIST_TABLES, ()),
    ]


def test_get_columns_binds_table_and_keeps_catalog_order() -> None:
    executor = FakeCatalogExecutor(
        columns={"Z_COL": ("NUMBER", []), "A_COL": ("NUMBER", []), "M_COL": ("DATE", [])}
    )

    assert CatalogInspector(executor).get_columns(TABLE) == ["Z_COL", "A_COL", "M_COL"]
    assert executor.calls == [("query_for_list", queries.LIST_COLUMNS, (TABLE,))]


@pytest.mark.parametrize("name", ["", "   "])
def test_get_columns_rejects_empty_table_name(name: str) -> None:
    executor = FakeCatalogExecutor()
    with pytest.raises(InvalidIdentifierError):
        CatalogInspector(executor).get_columns(name)
    assert executor.calls == []


def test_table_information_query_count(employees_executor: FakeCatalogExecutor) -> None:
    info = CatalogInspector(employees_executor).get_table_information(TABLE)

    column_count = len(employees_executor.columns)
    assert len(employees_executor.calls) == 2 + 2 * column_count
    assert info.column_count == len(info.columns) == column_count


def test_table_information_query_sequence(employees_executor: FakeCatalogExecutor) -> None:
    CatalogInspector(employees_executor).get_table_information(TABLE)

    calls = employees_executor.calls
    assert calls[0] == ("query", queries.LIST_CONSTRAINTS, (TABLE,))
    assert calls[1] == ("query_for_list", queries.LIST_COLUMNS, (TABLE,))
    for index, name in enumerate(["ID", "NAME", "SALARY"]):
        type_call, values_call = calls[2 + 2 * index], calls[3 + 2 * index]
        assert type_call == ("query_for_object", queries.COLUMN_DATA_TYPE, (TABLE, name))
        assert values_call == ("query_for_list", queries.column_values_sql(TABLE, name), ())


def test_numeric_column_carries_statistics(employees_executor: FakeCatalogExecutor) -> None:
    info = CatalogInspector(employees_executor).get_table_information(TABLE)
    id_column = info.columns[0]

    assert isinstance(id_column, NumericColumn)
    assert id_column.values == (Decimal("3"), Decimal("1"), Decimal("2"))
    assert (id_column.min, id_column.max, id_column.median) == (
        Decimal("1"),
        Decimal("3"),
        Decimal("2"),
    )


def test_numeric_column_statistics_skip_nulls(employees_executor: FakeCatalogExecutor) -> None:
    salary = CatalogInspector(employees_executor).get_table_information(TABLE).columns[2]

    assert isinstance(salary, NumericColumn)
    assert salary.values == (Decimal("100.50"), Decimal("99.25"), None)
    assert salary.min == Decimal("99.25")
    assert salary.max == Decimal("100.50")
    assert salary.median == Decimal("99.875")


def test_text_column_has_no_statistics(employees_executor: FakeCatalogExecutor) -> None:
    name_column = CatalogInspector(employees_executor).get_table_information(TABLE).columns[1]

    assert isinstance(name_column, TextColumn)
    assert name_column.values == ("Ann", "Bob", None)
    assert not name_column.has_statistics
    assert not hasattr(name_column, "median")


def test_text_column_values_are_strings() -> None:
    executor = FakeCatalogExecutor(columns={"CODE": ("CHAR", [1, "B"])})
    column = CatalogInspector(executor).get_table_information(TABLE).columns[0]
    assert column.values == ("1", "B")


def test_empty_numeric_column_leaves_statistics_unset() -> None:
    executor = FakeCatalogExecutor(columns={"AMOUNT": ("NUMBER", [])})
    column = CatalogInspector(executor).get_table_information(TABLE).columns[0]

    assert isinstance(column, NumericColumn)
    assert column.values == ()
    assert (column.min, column.max, column.median) == (None, None, None)


def test_binary_double_special_values_are_kept_but_not_summarized() -> None:
    executor = FakeCatalogExecutor(
        columns={"READING": ("BINARY_DOUBLE", [float("nan"), 4.0, float("inf"), 1.0])}
    )
    column = CatalogInspector(executor).get_table_information(TABLE).columns[0]

    assert isinstance(column, NumericColumn)
    assert column.values[0].is_nan()
    assert column.values[2] == Decimal("Infinity")
    assert (column.min, column.max, column.median) == (Decimal("1.0"), Decimal("4.0"), Decimal("2.5"))


def test_numeric_column_of_infinities_leaves_statistics_unset() -> None:
    executor = FakeCatalogExecutor(columns={"READING": ("BINARY_FLOAT", [float("inf"), float("-inf")])})
    column = CatalogInspector(executor).get_table_information(TABLE).columns[0]

    assert len(column.values) == 2
    assert (column.min, column.max, column.median) == (None, None, None)


def test_min_max_independent_of_fetch_order() -> None:
    forward = FakeCatalogExecutor(columns={"N": ("NUMBER", [5, -1, 8, 2])})
    backward = FakeCatalogExecutor(columns={"N": ("NUMBER", [2, 8, -1, 5])})

    a = CatalogInspector(forward).get_table_information(TABLE).columns[0]
    b = CatalogInspector(backward).get_table_information(TABLE).columns[0]

    assert (a.min, a.max, a.median) == (b.min, b.max, b.median)
    assert (a.min, a.max) == (Decimal("-1"), Decimal("8"))


def test_constraints_are_not_filtered(employees_executor: FakeCatalogExecutor) -> None:
    info = CatalogInspector(employees_executor).get_table_information(TABLE)

    assert [(pk.constraint_name, pk.constraint_type) for pk in info.primary_keys] == [
        ("EMP_PK", "P"),
        ("EMP_NAME_NN", "C"),
    ]
    assert [pk.constraint_name for pk in info.primary_key_constraints] == ["EMP_PK"]


def test_unknown_table_yields_empty_profile() -> None:
    executor = FakeCatalogExecutor(columns={"ID": ("NUMBER", [1])}, constraints=[("PK", "P")])
    info = CatalogInspector(executor).get_table_information("MISSING")

    assert info.column_count == 0
    assert info.columns == ()
    assert info.primary_keys == ()
    assert len(executor.calls) == 2


def test_type_lookup_failure_aborts_whole_call() -> None:
    class _MissingTypeExecutor(FakeCatalogExecutor):
        def query_for_object(self, sql, required_type, *params):
            self.calls.append(("query_for_object", sql, params))
            if params[1] == "NAME":
                raise IncorrectResultSizeError(expected=1, actual=2)
            return super().query_for_object(sql, required_type, *params)

    executor = _MissingTypeExecutor(
        columns={"ID": ("NUMBER", [1]), "NAME": ("VARCHAR2", ["x"]), "AGE": ("NUMBER", [3])}
    )

    with pytest.raises(IncorrectResultSizeError):
        CatalogInspector(executor).get_table_information(TABLE)
    assert not any(sql == queries.column_values_sql(TABLE, "AGE") for _, sql, _ in executor.calls)


def test_unsafe_catalog_column_name_is_rejected() -> None:
    executor = FakeCatalogExecutor(columns={'BAD"NAME': ("VARCHAR2", [])})
    with pytest.raises(InvalidIdentifierError):
        CatalogInspector(executor).get_table_information(TABLE)


def test_map_primary_key() -> None:
    pk = map_primary_key(("SYS_C001", "R"), 0)
    assert pk.constraint_name == "SYS_C001"
    assert pk.constraint_type == "R"
    assert not pk.is_primary
