"""Tests for report rendering."""
import json

import pytest

from org_person_extractor.classifier import AnalysisResult
from org_person_extractor.config import REPORT_COLUMNS, REPORT_TITLE
from org_person_extractor.report import build_report_table, render_report, write_report

RESULT = AnalysisResult(
    organizations=("Acme corp",),
    personalities=("John Smith", "Ann Lee"),
)

EMPTY = AnalysisResult(organizations=(), personalities=())


class TestBuildReportTable:
    """Tests for build_report_table."""

    def test_columns(self):
        table = build_report_table(RESULT)

        assert list(table.columns) == list(REPORT_COLUMNS)

    def test_rows_padded_to_longest_list(self):
        table = build_report_table(RESULT)

        assert len(table) == 2
        assert table["No."].tolist() == [1, 2]
        assert table["Organization"].tolist() == ["Acme corp", ""]
        assert table["Person"].tolist() == ["John Smith", "Ann Lee"]

    def test_empty_result(self):
        table = build_report_table(EMPTY)

        assert table.empty
        assert list(table.columns) == list(REPORT_COLUMNS)


class TestRenderReport:
    """Tests for render_report."""

    def test_text(self):
        assert render_report(RESULT, "text").splitlines() == [
            REPORT_TITLE,
            "",
            "No.\tOrganization\t\tPerson",
            "-" * 44,
            "1\tAcme corp\t\tJohn Smith",
            "2\t\t\tAnn Lee",
        ]

    def test_csv(self):
        lines = render_report(RESULT, "csv").splitlines()

        assert lines == [
            "No.,Organization,Person",
            "1,Acme corp,John Smith",
            "2,,Ann Lee",
        ]

    def test_json(self):
        data = json.loads(render_report(RESULT, "json"))

        assert data == {
            "organizations": ["Acme corp"],
            "personalities": ["John Smith", "Ann Lee"],
        }

    def test_json_keeps_cyrillic(self):
        result = AnalysisResult(organizations=("ООО Ромашка",), personalities=())

        assert "ООО Ромашка" in render_report(result, "json")

    def test_table(self):
        output = render_report(RESULT)

        assert output.startswith(REPORT_TITLE)
        assert "John Smith" in output
        assert "Acme corp" in output

    def test_empty_table(self):
        assert "(no entities found)" in render_report(EMPTY, "table")

    def test_unknown_format(self):
        with pytest.raises(ValueError, match="Unknown report format"):
            render_report(RESULT, "xml")


class TestWriteReport:
    """Tests for write_report."""

    def test_text_by_default(self, tmp_path):
        path = write_report(RESULT, tmp_path / "report.txt")

        content = path.read_text(encoding="utf-8")
        assert content.startswith(REPORT_TITLE)
        assert "2\t\t\tAnn Lee" in content

    def test_format_from_suffix(self, tmp_path):
        csv_path = write_report(RESULT, tmp_path / "report.csv")
        json_path = write_report(RESULT, tmp_path / "report.json")

        assert csv_path.read_text(encoding="utf-8").startswith("No.,Organization,Person")
        assert json.loads(json_path.read_text(encoding="utf-8")) == RESULT.to_dict()

    def test_explicit_format_wins(self, tmp_path):
        path = write_report(RESULT, tmp_path / "report.txt", fmt="json")

        assert json.loads(path.read_text(encoding="utf-8")) == RESULT.to_dict()
