"""
Domain models for the catalog viewer.

Describes what one inspection returns: the constraints of a table, its columns
with their observed values, and (for numeric columns) summary statistics. The
connection descriptor lives here too so configuration and infrastructure share
one definition.
"""
from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Literal, Optional, Tuple, Union

from pydantic import AllowInfNan, BaseModel, Field, model_validator

PRIMARY_KEY_TYPE = "P"

# BINARY_FLOAT / BINARY_DOUBLE columns may hold NaN and +-Infinity
ColumnDecimal = Annotated[Decimal, AllowInfNan(True)]


class _FrozenModel(BaseModel):
    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "arbitrary_types_allowed": False,
    }


class PrimaryKey(_FrozenModel):
    """
    One row of ALL_CONSTRAINTS for a table.

    Despite the name, the record may describe any constraint kind; check
    ``constraint_type`` (or ``is_primary``) before treating it as a key.
    """

    constraint_name: str = Field(..., description="Constraint name.")
    constraint_type: str = Field(..., description="Oracle constraint type code (P, U, R, C, ...).")

    @property
    def is_primary(self) -> bool:
        return self.constraint_type == PRIMARY_KEY_TYPE


class NumericColumn(_FrozenModel):
    """
    A column whose declared type is in the numeric family.

    ``values`` keeps database NULLs as ``None`` and any NaN or infinity as read;
    statistics only consider the finite values and are all unset when there
    are none.
    """

    kind: Literal["numeric"] = "numeric"
    name: str
    data_type: str
    values: Tuple[Optional[ColumnDecimal], ...] = ()
    min: Optional[Decimal] = None
    max: Optional[Decimal] = None
    median: Optional[Decimal] = None

    @model_validator(mode="after")
    def check_statistics_set_together(self) -> "NumericColumn":
        populated = [value is not None for value in (self.min, self.max, self.median)]
        if any(populated) and not all(populated):
            raise ValueError("min, max and median must be set together")
        return self

    @property
    def has_statistics(self) -> bool:
        return self.median is not None


class TextColumn(_FrozenModel):
    """A column of any non-numeric type; values are kept as text."""

    kind: Literal["text"] = "text"
    name: str
    data_type: str
    values: Tuple[Optional[str], ...] = ()

    @property
    def has_statistics(self) -> bool:
        return False


Column = Annotated[Union[NumericColumn, TextColumn], Field(discriminator="kind")]


class TableInformation(_FrozenModel):
    """
    Aggregated profile of one table.

    ``primary_keys`` holds every constraint returned for the table, unfiltered.
    """

    table_name: str
    column_count: int
    columns: Tuple[Column, ...] = ()
    primary_keys: Tuple[PrimaryKey, ...] = ()

    @model_validator(mode="after")
    def check_column_count(self) -> "TableInformation":
        if self.column_count != len(self.columns):
            raise ValueError(
                f"column_count={self.column_count} does not match {len(self.columns)} columns"
            )
        return self

    @property
    def primary_key_constraints(self) -> Tuple[PrimaryKey, ...]:
        return tuple(pk for pk in self.primary_keys if pk.is_primary)


class DataSourceConfig(_FrozenModel):
    """Connection information for a target database."""

    connection_name: str
    url: str
    username: str
    password: str = Field(..., repr=False)


__all__ = [
    "PRIMARY_KEY_TYPE",
    "PrimaryKey",
    "NumericColumn",
    "TextColumn",
    "Column",
    "TableInformation",
    "DataSourceConfig",
]
