"""
Tests for CSV export.
"""

from fintrack.schemas.budgets import Budget
from fintrack.services.export_service import export_to_csv, to_csv, write_csv


class TestToCsv:
    """Tests for to_csv()"""

    def test_headers_from_first_record_and_comma_quoting(self):
        text = to_csv([{"a": "1,2", "b": "x"}])

        assert text.split("\n") == ["a,b", '"1,2",x']

    def test_empty_list(self):
        assert to_csv([]) == ""

    def test_numbers_and_missing_values(self):
        text = to_csv([
            {"amount": 10.5, "notes": None},
            {"amount": 3, "notes": "ok"},
        ])

        assert text == "amount,notes\n10.5,\n3,ok"

    def test_extra_keys_in_later_rows_are_ignored(self):
        text = to_csv([{"a": 1}, {"a": 2, "b": 3}])

        assert text == "a\n1\n2"

    def test_quotes_and_line_breaks_pass_through(self):
        text = to_csv([{"vendor": 'Joe "Pro"', "notes": "line1\nline2"}])

        assert text == 'vendor,notes\nJoe "Pro",line1\nline2'

    def test_only_the_comma_triggers_quoting(self):
        text = to_csv([{"vendor": 'Joe "Pro", LLC', "paid": True}])

        assert text == 'vendor,paid\n"Joe "Pro", LLC",true'

    def test_accepts_pydantic_rows(self):
        budget = Budget(
            id="bud-1",
            user_id="user-1",
            category="Ads",
            budget_limit=10.5,
            start_date="2025-06-01",
            created_at="2025-06-01T10:00:00Z",
            updated_at="2025-06-01T10:00:00Z",
        )

        lines = to_csv([budget]).split("\n")

        assert lines[0] == "id,user_id,category,budget_limit,start_date,created_at,updated_at"
        assert lines[1] == "bud-1,user-1,Ads,10.5,2025-06-01,2025-06-01T10:00:00Z,2025-06-01T10:00:00Z"


class TestExportToCsv:
    """Tests for export_to_csv() and write_csv()"""

    def test_empty_export_is_noop(self):
        assert export_to_csv([], "income.csv") is None

    def test_download_response(self):
        response = export_to_csv([{"a": "1,2", "b": "x"}], "f.csv")

        assert response.status_code == 200
        assert response.media_type.startswith("text/csv")
        assert response.headers["content-disposition"] == 'attachment; filename="f.csv"'
        assert response.body.decode("utf-8") == 'a,b\n"1,2",x'

    def test_write_csv(self, tmp_path):
        target = tmp_path / "expenses.csv"

        written = write_csv([{"category": "Ads", "amount": 15}], target)

        assert written == target
        assert target.read_text(encoding="utf-8") == "category,amount\nAds,15"

    def test_write_csv_empty_creates_nothing(self, tmp_path):
        target = tmp_path / "empty.csv"

        assert write_csv([], target) is None
        assert not target.exists()
