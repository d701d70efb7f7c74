"""Tests for result rendering in every output format."""

import csv
import json
from decimal import Decimal
from io import StringIO

import pytest

from resultview.errors import ConfigurationError, UnknownFormatError
from resultview.models.domain import RowSet
from resultview.models.types import RenderMeta
from resultview.render import ALLOWED_FORMATS, render

EMPTY = RowSet.from_rows([])


class TestRenderDispatch:
    """Test format selection and content types."""

    @pytest.mark.parametrize(
        "format,content_type",
        [
            ("csv", "text/csv"),
            ("html", "text/html"),
            ("json", "application/json"),
            ("json-pretty", "application/json"),
        ],
    )
    def test_content_types(self, people, format, content_type):
        assert render(format, people).content_type == content_type

    def test_allowed_formats(self):
        assert ALLOWED_FORMATS == ("csv", "html", "json", "json-pretty")

    def test_unknown_format_raises_distinct_error(self, people):
        """xml is rejected with UnknownFormatError, not a generic error."""
        with pytest.raises(UnknownFormatError) as exc_info:
            render("xml", people)
        assert exc_info.value.format == "xml"

    def test_unknown_format_is_a_configuration_error(self, people):
        with pytest.raises(ConfigurationError):
            render("xml", people)


class TestCsv:
    """Test csv encoding."""

    def test_header_and_rows(self):
        rows = RowSet.from_rows([{"a": 1, "b": "x"}, {"a": 2, "b": "y"}])
        assert render("csv", rows).payload == "a,b\r\n1,x\r\n2,y"

    def test_quoting(self, people):
        """Separators, quotes and newlines are quoted; quotes doubled."""
        payload = render("csv", people).payload
        assert '"Grace, Admiral"' in payload
        assert '"said ""hi"""' in payload
        assert '"line\nbreak"' in payload

    def test_nulls_and_booleans(self, people):
        first_row = render("csv", people).payload.split("\r\n")[1]
        assert first_row == "1,Ada,9.5,true,"

    def test_empty_rows_render_empty_payload(self):
        assert render("csv", EMPTY).payload == ""


class TestJson:
    """Test compact and indented json."""

    def test_compact_has_no_whitespace(self):
        rows = RowSet.from_rows([{"a": 1, "b": None}])
        assert render("json", rows).payload == '[{"a":1,"b":null}]'

    def test_pretty_uses_tab_indent(self):
        rows = RowSet.from_rows([{"a": 1}])
        assert render("json-pretty", rows).payload == '[\n\t{\n\t\t"a": 1\n\t}\n]'

    def test_compact_and_pretty_parse_equal(self, people):
        compact = json.loads(render("json", people).payload)
        pretty = json.loads(render("json-pretty", people).payload)
        assert compact == pretty

    def test_empty_rows_render_empty_array(self):
        assert json.loads(render("json", EMPTY).payload) == []
        assert json.loads(render("json-pretty", EMPTY).payload) == []

    def test_non_finite_numbers_render_null(self):
        """NaN and infinities are not valid JSON, so they become null."""
        rows = RowSet.from_rows([{"a": float("nan")}, {"a": float("inf")}, {"a": float("-inf")}])
        assert render("json", rows).payload == '[{"a":null},{"a":null},{"a":null}]'

    def test_non_finite_numbers_parse_equal_in_both_variants(self):
        rows = RowSet.from_rows(
            [{"a": float("nan"), "b": Decimal("NaN")}, {"a": 1.5, "b": Decimal("Infinity")}]
        )
        compact = json.loads(render("json", rows).payload)
        pretty = json.loads(render("json-pretty", rows).payload)
        assert compact == pretty == [{"a": None, "b": None}, {"a": 1.5, "b": None}]


class TestCsvJsonAgreement:
    """Parsing csv back gives the same keys and values as json."""

    def test_round_trip(self, people):
        records = list(csv.DictReader(StringIO(render("csv", people).payload, newline="")))
        documents = json.loads(render("json", people).payload)

        def as_text(value):
            if value is None:
                return ""
            if isinstance(value, bool):
                return "true" if value else "false"
            return str(value)

        assert len(records) == len(documents)
        for record, document in zip(records, documents):
            assert list(record.keys()) == list(document.keys())
            assert record == {key: as_text(value) for key, value in document.items()}


class TestHtml:
    """Test html table rendering."""

    def test_empty_rows_render_no_data(self):
        assert render("html", EMPTY).payload == "No data"

    def test_first_record_is_dropped_from_body(self):
        """Three records give two body rows: records 1 and 2."""
        rows = RowSet.from_rows([{"n": "first"}, {"n": "second"}, {"n": "third"}])
        payload = render("html", rows).payload
        body = payload.split("<tbody>", 1)[1].split("</tbody>", 1)[0]
        assert body.count("<tr>") == 2
        assert "first" not in body
        assert "second" in body and "third" in body

    def test_header_cells(self, people):
        payload = render("html", people).payload
        assert "<thead><tr><th>id</th><th>name</th><th>score</th>" in payload
        assert "<table class='data'>" in payload
        assert payload.count("</table>") == 1

    def test_cell_classes_and_null(self, people):
        payload = render("html", people).payload
        assert "<td class='value-number'>2</td>" in payload
        assert "<td class='value-boolean'>false</td>" in payload
        assert "<td class='value-string'>Grace, Admiral</td>" in payload

    def test_null_renders_literal(self):
        rows = RowSet.from_rows([{"a": 1}, {"a": None}])
        assert "<td class='value-undefined'>NULL</td>" in render("html", rows).payload

    def test_values_are_escaped(self):
        rows = RowSet.from_rows([{"a": "x"}, {"a": "<b>&"}])
        assert "&lt;b&gt;&amp;" in render("html", rows).payload

    def test_links_to_other_formats(self, people):
        payload = render("html", people).payload
        assert "href='?format=csv'" in payload
        assert "href='?format=json'" in payload
        assert "href='?format=json-pretty'" in payload
        assert "?format=html" not in payload

    def test_links_keep_other_params(self, people):
        meta = RenderMeta(params=[("limit", "5")])
        assert "href='?limit=5&amp;format=csv'" in render("html", people, meta).payload

    def test_meta_strip_shows_present_values(self, people):
        meta = RenderMeta(limit=10, offset=None, order="name ASC")
        payload = render("html", people, meta).payload
        assert "<b>Limit:</b> 10" in payload
        assert "<b>Order:</b> name ASC" in payload
        assert "Offset:" not in payload
        assert "Set with the 'limit' query parameter" in payload
