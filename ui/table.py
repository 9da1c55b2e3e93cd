"""Generic table renderer.

``render_table(columns, data, class_name)`` projects an ordered list of column
descriptors over an ordered collection of rows and returns a ``TableView``: one
header cell per column and one body row per input row, each with one cell per
column. The projection is pure. Nothing is cached and neither input is mutated,
so calling it twice with the same inputs gives equal views.

Cell content comes from the column's ``render(value, row, index)`` when one is
given, otherwise from ``display_value(value)``:

    None        -> "null"
    UNDEFINED   -> "undefined"   (key missing on the row)
    True/False  -> "true"/"false"
    [1, 2]      -> "1,2"
    anything    -> str(value)

Exceptions raised by a render function reach the caller as they are.

The view can be turned into HTML (``to_html``) for ``st.markdown`` or into a
pandas DataFrame (``to_frame``) for ``st.dataframe``. In HTML, plain text is
escaped and ``markupsafe.Markup`` returned by a render function is kept as is.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from collections.abc import Set
from typing import Any, Callable, Iterable, List, Mapping, Optional, Tuple

import pandas as pd
from markupsafe import Markup, escape

from core.errors import TableInputError

BASE_CLASSES: Tuple[str, ...] = ("table", "is-fullwidth", "is-striped", "is-hoverable")
CONTAINER_CLASS = "table-container"

COLUMN_FIELDS = {"key", "header", "render", "width", "align"}


class _Undefined:
    """Value of a key that a row does not have."""

    _instance: Optional["_Undefined"] = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"


UNDEFINED = _Undefined()


class Align(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


# (value, row, index) -> displayable
CellRenderer = Callable[[Any, Any, int], Any]


@dataclass(frozen=True)
class TableColumn:
    key: str
    header: str
    render: Optional[CellRenderer] = None
    width: Optional[str] = None
    align: Align = Align.LEFT

    def __post_init__(self) -> None:
        if not isinstance(self.key, str) or not self.key:
            raise TableInputError("column key must be a non-empty string", argument="columns", key=self.key)
        if not isinstance(self.header, str):
            raise TableInputError(f"header of column {self.key!r} must be a string", argument="columns", key=self.key)
        if self.render is not None and not callable(self.render):
            raise TableInputError(f"render of column {self.key!r} is not callable", argument="columns", key=self.key)
        if self.width is not None and not isinstance(self.width, str):
            raise TableInputError(f"width of column {self.key!r} must be a string", argument="columns", key=self.key)

        if self.align is None:
            align = Align.LEFT
        else:
            try:
                align = Align(self.align)
            except (ValueError, TypeError):
                raise TableInputError(
                    f"align of column {self.key!r} must be one of left/center/right, got {self.align!r}",
                    argument="columns",
                    key=self.key,
                ) from None
        object.__setattr__(self, "align", align)

    @classmethod
    def from_mapping(cls, fields: Mapping[str, Any]) -> "TableColumn":
        unknown = set(fields) - COLUMN_FIELDS
        if unknown:
            raise TableInputError(f"unknown column fields: {sorted(unknown)}", argument="columns")
        missing = {"key", "header"} - set(fields)
        if missing:
            raise TableInputError(f"column is missing {sorted(missing)}", argument="columns")
        return cls(**dict(fields))


@dataclass(frozen=True)
class HeaderCell:
    text: str
    align: Align
    width: Optional[str] = None

    @property
    def style(self) -> str:
        if self.width:
            return f"width: {self.width}; text-align: {self.align.value}"
        return f"text-align: {self.align.value}"


@dataclass(frozen=True)
class BodyCell:
    content: Any
    align: Align

    @property
    def style(self) -> str:
        return f"text-align: {self.align.value}"

    @property
    def text(self) -> str:
        """Content as plain text, markup stripped."""
        content = self.content
        if content is None:
            return ""
        if isinstance(content, Markup):
            return content.striptags()
        if isinstance(content, str):
            return content
        if hasattr(content, "__html__"):
            return Markup(content.__html__()).striptags()
        return display_value(content)

    @property
    def html(self) -> Markup:
        content = self.content
        if content is None:
            return Markup("")
        if isinstance(content, str) or hasattr(content, "__html__"):
            return escape(content)
        return escape(display_value(content))


@dataclass(frozen=True)
class TableView:
    class_names: Tuple[str, ...]
    headers: Tuple[HeaderCell, ...]
    rows: Tuple[Tuple[BodyCell, ...], ...]

    @property
    def class_attr(self) -> str:
        return " ".join(self.class_names)

    def header_texts(self) -> List[str]:
        return [h.text for h in self.headers]

    def body_texts(self) -> List[List[str]]:
        return [[c.text for c in row] for row in self.rows]

    def to_html(self) -> Markup:
        head = "".join(
            f'<th style="{escape(h.style)}">{escape(h.text)}</th>' for h in self.headers
        )
        body = "".join(
            "<tr>" + "".join(f'<td style="{escape(c.style)}">{c.html}</td>' for c in row) + "</tr>"
            for row in self.rows
        )
        return Markup(
            f'<div class="{CONTAINER_CLASS}">'
            f'<table class="{escape(self.class_attr)}">'
            f"<thead><tr>{head}</tr></thead>"
            f"<tbody>{body}</tbody>"
            f"</table></div>"
        )

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(self.body_texts(), columns=self.header_texts())


def display_value(value: Any) -> str:
    if value is None:
        return "null"
    if value is UNDEFINED:
        return "undefined"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join("" if v is None or v is UNDEFINED else display_value(v) for v in value)
    return str(value)


def lookup(row: Any, key: str) -> Any:
    if isinstance(row, Mapping):
        return row.get(key, UNDEFINED)
    return getattr(row, key, UNDEFINED)


def _materialize(value: Any, argument: str) -> list:
    if value is None or isinstance(value, (str, bytes, Mapping, Set)):
        raise TableInputError(
            f"{argument} must be a sequence, got {type(value).__name__}", argument=argument
        )
    try:
        return list(value)
    except TypeError:
        raise TableInputError(
            f"{argument} must be iterable, got {type(value).__name__}", argument=argument
        ) from None


def _coerce_columns(columns: Iterable[Any]) -> List[TableColumn]:
    result = []
    for column in _materialize(columns, "columns"):
        if isinstance(column, TableColumn):
            result.append(column)
        elif isinstance(column, Mapping):
            result.append(TableColumn.from_mapping(column))
        else:
            raise TableInputError(
                f"column must be a TableColumn or a mapping, got {type(column).__name__}",
                argument="columns",
            )
    return result


def _coerce_rows(data: Any) -> list:
    if isinstance(data, pd.DataFrame):
        return data.to_dict("records")
    rows = _materialize(data, "data")
    for index, row in enumerate(rows):
        if row is None or isinstance(row, (str, bytes, int, float)):
            raise TableInputError(
                f"row {index} must be a mapping or a record object, got {type(row).__name__}",
                argument="data",
                index=index,
            )
    return rows


def _extra_classes(class_name: Optional[str]) -> Tuple[str, ...]:
    if class_name is None:
        return ()
    if not isinstance(class_name, str):
        raise TableInputError("class_name must be a string", argument="class_name")
    return tuple(class_name.split())


def _body_cell(column: TableColumn, row: Any, index: int) -> BodyCell:
    value = lookup(row, column.key)
    if column.render is not None:
        return BodyCell(column.render(value, row, index), column.align)
    return BodyCell(display_value(value), column.align)


def render_table(
    columns: Iterable[Any],
    data: Any,
    class_name: Optional[str] = None,
) -> TableView:
    cols = _coerce_columns(columns)
    rows = _coerce_rows(data)
    return TableView(
        class_names=BASE_CLASSES + _extra_classes(class_name),
        headers=tuple(HeaderCell(c.header, c.align, c.width) for c in cols),
        rows=tuple(
            tuple(_body_cell(c, row, index) for c in cols)
            for index, row in enumerate(rows)
        ),
    )
