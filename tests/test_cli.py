"""Smoke tests for the command-line entry points and charts."""

from datetime import datetime, timedelta, timezone

import pytest
from family_expense_jp import Person, RentalHouse, estimate_family_expenses
from family_expense_jp import chart_cli, cli
from family_expense_jp.charts import plot_expense_stack, plot_member_expenses

CONFIG_TOML = """\
start_year = 2024
years = 4

[[people]]
name = "本人"
birth_date = 1990-05-10T00:00:00+09:00

[[people]]
name = "第一子"
birth_date = 2020-06-01T00:00:00+09:00
is_child = true

[[houses]]
kind = "rental"
start_year = 2024
end_year = 2030
rent = 100000
"""


@pytest.fixture
def config_path(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text(CONFIG_TOML, encoding="utf-8")
    return path


class TestCli:
    def test_yearly_table(self, config_path, capsys):
        cli.main(["--config", str(config_path)])
        out = capsys.readouterr().out
        assert "2024年-2027年" in out
        assert "第一子" in out
        for year in range(2024, 2028):
            assert str(year) in out

    def test_detail_year(self, config_path, capsys):
        cli.main(["--config", str(config_path), "--detail-year", "2025"])
        out = capsys.readouterr().out
        assert "【2025年の内訳（万円）】" in out
        assert "学費" in out

    def test_detail_year_out_of_range(self, config_path):
        with pytest.raises(SystemExit):
            cli.main(["--config", str(config_path), "--detail-year", "2050"])

    def test_invalid_every(self, config_path):
        with pytest.raises(SystemExit):
            cli.main(["--config", str(config_path), "--every", "0"])

    def test_invalid_household(self, tmp_path, capsys):
        path = tmp_path / "config.toml"
        path.write_text(
            CONFIG_TOML + '\n[[houses]]\nkind = "own"\nstart_year = 2030\nend_year = 2020\n',
            encoding="utf-8",
        )
        with pytest.raises(SystemExit):
            cli.main(["--config", str(path)])
        assert "住居2" in capsys.readouterr().err


class TestCharts:
    def setup_method(self):
        jst = timezone(timedelta(hours=9))
        people = [
            Person("本人", datetime(1990, 5, 10, tzinfo=jst)),
            Person("第一子", datetime(2026, 6, 1, tzinfo=jst), is_child=True),
        ]
        houses = [RentalHouse(start_year=2024, end_year=2040, rent=100000)]
        self.expenses = estimate_family_expenses(people, [], houses, 2024, 10)

    def test_expense_stack(self, tmp_path):
        path = plot_expense_stack(self.expenses, tmp_path, name="a")
        assert path == tmp_path / "expense_stack-a.png"
        assert path.exists()

    def test_member_expenses(self, tmp_path):
        path = plot_member_expenses(self.expenses, tmp_path / "charts")
        assert path.name == "member_expenses.png"
        assert path.exists()

    def test_member_duplicate_names(self, tmp_path):
        jst = timezone(timedelta(hours=9))
        twins = [
            Person("子", datetime(2020, 6, 1, tzinfo=jst), is_child=True),
            Person("子", datetime(2020, 6, 1, tzinfo=jst), is_child=True),
        ]
        expenses = estimate_family_expenses(twins, [], [], 2024, 2)
        with pytest.raises(ValueError, match="Duplicate member names in 2024"):
            plot_member_expenses(expenses, tmp_path)

    def test_empty(self, tmp_path):
        with pytest.raises(ValueError):
            plot_expense_stack([], tmp_path)

    def test_chart_cli(self, config_path, tmp_path):
        out_dir = tmp_path / "out"
        chart_cli.main(["--config", str(config_path), "--output", str(out_dir)])
        assert (out_dir / "expense_stack.png").exists()
        assert (out_dir / "member_expenses.png").exists()
