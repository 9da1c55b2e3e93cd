"""
Unit tests: generic table renderer
"""
from dataclasses import dataclass

import pytest

from core.errors import MediaArchiveError, TableInputError
from ui.table import (
    Align,
    BASE_CLASSES,
    TableColumn,
    UNDEFINED,
    display_value,
    render_table,
)

PEOPLE = [
    {"id": 1, "name": "John Doe", "email": "john@example.com", "age": 30},
    {"id": 2, "name": "Jane Smith", "email": "jane@example.com", "age": 25},
    {"id": 3, "name": "Bob Johnson", "email": "bob@example.com", "age": 35},
]

BASIC_COLUMNS = [
    TableColumn(key="id", header="ID"),
    TableColumn(key="name", header="Name"),
    TableColumn(key="email", header="Email"),
    TableColumn(key="age", header="Age"),
]


class TestShape:
    """Header/body counts and ordering"""

    @pytest.mark.parametrize("n_rows", [0, 1, 3])
    @pytest.mark.parametrize("n_cols", [0, 1, 4])
    def test_counts(self, n_cols, n_rows):
        view = render_table(BASIC_COLUMNS[:n_cols], PEOPLE[:n_rows])

        assert len(view.headers) == n_cols
        assert len(view.rows) == n_rows
        assert all(len(row) == n_cols for row in view.rows)

    def test_end_to_end_example(self):
        columns = [TableColumn(key="id", header="ID"), TableColumn(key="name", header="Name")]
        data = [{"id": 1, "name": "A"}, {"id": 2, "name": "B"}]

        view = render_table(columns, data)

        assert view.header_texts() == ["ID", "Name"]
        assert view.body_texts() == [["1", "A"], ["2", "B"]]

    def test_column_order_is_kept_and_duplicates_are_not_removed(self):
        columns = [
            TableColumn(key="name", header="Name"),
            TableColumn(key="id", header="ID"),
            TableColumn(key="name", header="Name again"),
        ]

        view = render_table(columns, PEOPLE[:1])

        assert view.header_texts() == ["Name", "ID", "Name again"]
        assert view.body_texts() == [["John Doe", "1", "John Doe"]]

    def test_empty_data_keeps_header_row(self):
        view = render_table(BASIC_COLUMNS, [])

        assert view.header_texts() == ["ID", "Name", "Email", "Age"]
        assert view.rows == ()

    def test_nothing_at_all_is_a_valid_view(self):
        view = render_table([], [])

        assert view.headers == ()
        assert view.rows == ()
        assert view.class_names == BASE_CLASSES

    def test_row_order_follows_data(self):
        view = render_table([TableColumn(key="name", header="Name")], list(reversed(PEOPLE)))

        assert [r[0].text for r in view.rows] == ["Bob Johnson", "Jane Smith", "John Doe"]


class TestDefaultStringification:

    @pytest.mark.parametrize(
        "value, expected",
        [
            (None, "null"),
            (UNDEFINED, "undefined"),
            (True, "true"),
            (False, "false"),
            ([1, 2], "1,2"),
            (["tag1", "tag2"], "tag1,tag2"),
            ([], ""),
            ([1, None, 3], "1,,3"),
            ([[1, 2], 3], "1,2,3"),
            ((True, "x"), "true,x"),
            (95.5, "95.5"),
            (30, "30"),
            ("plain", "plain"),
        ],
    )
    def test_display_value(self, value, expected):
        assert display_value(value) == expected

    def test_mixed_row_types(self):
        data = [
            {"id": 1, "name": "Test", "active": True, "score": 95.5, "tags": ["tag1", "tag2"]},
            {"id": 2, "name": "Test2", "active": False, "score": None, "tags": []},
        ]
        columns = [TableColumn(key=k, header=k.title()) for k in ("id", "name", "active", "score", "tags")]

        view = render_table(columns, data)

        assert view.body_texts() == [
            ["1", "Test", "true", "95.5", "tag1,tag2"],
            ["2", "Test2", "false", "null", ""],
        ]

    def test_missing_key_renders_undefined_not_null(self):
        columns = [TableColumn(key="score", header="Score")]
        data = [{"score": None}, {}]

        view = render_table(columns, data)

        assert view.body_texts() == [["null"], ["undefined"]]

    def test_attribute_rows(self):
        @dataclass
        class Track:
            title: str
            length: int

        view = render_table(
            [TableColumn(key="title", header="Title"), TableColumn(key="bpm", header="BPM")],
            [Track("Roam", 295)],
        )

        assert view.body_texts() == [["Roam", "undefined"]]


class TestRenderOverrides:

    def test_age_group_override(self):
        columns = [
            TableColumn(key="age", header="Age Group", render=lambda v, row, i: "Senior" if v >= 30 else "Junior"),
        ]

        view = render_table(columns, [{"age": 30}, {"age": 25}])

        assert [row[0].text for row in view.rows] == ["Senior", "Junior"]

    def test_render_receives_looked_up_value_row_and_index(self):
        calls = []

        def spy(value, row, index):
            calls.append((value, row, index))
            return f"{value}-{row['name']}-{index}"

        view = render_table([TableColumn(key="age", header="Age", render=spy)], PEOPLE[:2])

        assert calls == [(30, PEOPLE[0], 0), (25, PEOPLE[1], 1)]
        assert view.body_texts() == [["30-John Doe-0"], ["25-Jane Smith-1"]]

    def test_render_gets_undefined_for_missing_key(self):
        seen = []
        render_table(
            [TableColumn(key="row_options", header="Options", render=lambda v, row, i: seen.append(v))],
            [{"id": 1}],
        )

        assert seen == [UNDEFINED]

    def test_render_exception_propagates_unwrapped(self):
        class FormattingBug(Exception):
            pass

        def broken(value, row, index):
            raise FormattingBug("bad value")

        with pytest.raises(FormattingBug, match="bad value"):
            render_table([TableColumn(key="id", header="ID", render=broken)], PEOPLE)

    def test_render_returning_none_gives_empty_text(self):
        view = render_table([TableColumn(key="id", header="ID", render=lambda v, r, i: None)], PEOPLE[:1])

        assert view.body_texts() == [[""]]


class TestAlignmentAndWidth:

    def test_default_alignment_is_left(self):
        view = render_table([TableColumn(key="id", header="ID")], PEOPLE[:1])

        assert view.headers[0].align is Align.LEFT
        assert view.rows[0][0].align is Align.LEFT

    def test_alignment_and_width(self):
        columns = [
            TableColumn(key="id", header="ID", width="50px", align="center"),
            TableColumn(key="name", header="Name", width="200px", align=Align.LEFT),
            TableColumn(key="email", header="Email", align="right"),
        ]

        view = render_table(columns, PEOPLE[:1])

        assert [(h.align, h.width) for h in view.headers] == [
            (Align.CENTER, "50px"),
            (Align.LEFT, "200px"),
            (Align.RIGHT, None),
        ]
        assert [c.align for c in view.rows[0]] == [Align.CENTER, Align.LEFT, Align.RIGHT]
        assert all("width" not in c.style for c in view.rows[0])

    def test_none_align_means_left(self):
        assert TableColumn(key="id", header="ID", align=None).align is Align.LEFT


class TestPurity:

    def test_same_inputs_same_view(self):
        columns = BASIC_COLUMNS + [TableColumn(key="age", header="Group", render=lambda v, r, i: v // 10)]

        assert render_table(columns, PEOPLE, "x") == render_table(columns, PEOPLE, "x")

    def test_inputs_are_not_mutated(self):
        columns = list(BASIC_COLUMNS)
        data = [dict(p) for p in PEOPLE]

        render_table(columns, data)

        assert columns == BASIC_COLUMNS
        assert data == PEOPLE

    def test_generators_are_accepted(self):
        view = render_table((c for c in BASIC_COLUMNS[:2]), (p for p in PEOPLE))

        assert view.header_texts() == ["ID", "Name"]
        assert len(view.rows) == 3


class TestClassNames:

    def test_base_classes(self):
        assert render_table(BASIC_COLUMNS, PEOPLE).class_attr == "table is-fullwidth is-striped is-hoverable"

    def test_extra_class_is_appended(self):
        view = render_table(BASIC_COLUMNS, PEOPLE, class_name="custom-class")

        assert view.class_names == BASE_CLASSES + ("custom-class",)

    def test_blank_class_name_adds_nothing(self):
        assert render_table(BASIC_COLUMNS, PEOPLE, class_name="  ").class_names == BASE_CLASSES


class TestInputErrors:

    @pytest.mark.parametrize(
        "columns",
        [None, 42, "id", {"key": "id", "header": "ID"}, {TableColumn(key="id", header="ID")}, frozenset()],
    )
    def test_bad_columns(self, columns):
        with pytest.raises(TableInputError):
            render_table(columns, PEOPLE)

    @pytest.mark.parametrize("data", [None, 7, "rows", {"id": 1}, set(), frozenset({frozenset({("id", 1)})})])
    def test_bad_data(self, data):
        with pytest.raises(TableInputError):
            render_table(BASIC_COLUMNS, data)

    def test_scalar_row(self):
        with pytest.raises(TableInputError) as exc_info:
            render_table(BASIC_COLUMNS, [PEOPLE[0], 5])

        assert exc_info.value.details["index"] == 1

    def test_input_errors_are_type_errors(self):
        with pytest.raises(TypeError):
            render_table(BASIC_COLUMNS, None)

        err = TableInputError("boom", argument="data")
        assert isinstance(err, MediaArchiveError)
        assert err.to_dict()["error_code"] == "TABLE_INPUT_ERROR"

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"key": "", "header": "X"},
            {"key": 3, "header": "X"},
            {"key": "id", "header": None},
            {"key": "id", "header": "ID", "align": "justify"},
            {"key": "id", "header": "ID", "width": 80},
            {"key": "id", "header": "ID", "render": "upper"},
        ],
    )
    def test_bad_column_fields(self, kwargs):
        with pytest.raises(TableInputError):
            TableColumn(**kwargs)

    def test_mapping_columns(self):
        view = render_table([{"key": "id", "header": "ID", "align": "right"}], PEOPLE[:1])

        assert view.headers[0].align is Align.RIGHT
        assert view.body_texts() == [["1"]]

    def test_mapping_column_with_unknown_field(self):
        with pytest.raises(TableInputError, match="unknown column fields"):
            render_table([{"key": "id", "header": "ID", "sortable": True}], PEOPLE)

    def test_mapping_column_without_header(self):
        with pytest.raises(TableInputError, match="missing"):
            render_table([{"key": "id"}], PEOPLE)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
