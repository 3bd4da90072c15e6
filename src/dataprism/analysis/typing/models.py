"""Typed column models.

A column is classified once, from its raw values, and then carried as one
variant of a closed tagged union. Each variant holds the parsed values its
statistics calculator consumes, so downstream code never re-inspects cells.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class _ColumnBase(BaseModel):
    """Fields shared by every column variant."""

    model_config = ConfigDict(frozen=True)

    name: str
    raw_values: list[Any] = Field(default_factory=list)
    clean_values: list[Any] = Field(default_factory=list)  # raw minus None / ""


class NumericalColumn(_ColumnBase):
    """Column inferred as numerical."""

    kind: Literal["numerical"] = "numerical"
    values: list[float] = Field(default_factory=list)  # finite parsed numbers


class CategoricalColumn(_ColumnBase):
    """Column inferred as categorical."""

    kind: Literal["categorical"] = "categorical"
    values: list[str] = Field(default_factory=list)  # str() of each clean value


class DatetimeColumn(_ColumnBase):
    """Column inferred as datetime."""

    kind: Literal["datetime"] = "datetime"
    values: list[datetime] = Field(default_factory=list)  # naive UTC datetimes


Column = Annotated[
    NumericalColumn | CategoricalColumn | DatetimeColumn,
    Field(discriminator="kind"),
]
