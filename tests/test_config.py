"""Tests for TOML config loading and household building."""

import argparse
from datetime import date, datetime, timedelta, timezone

import pytest
from family_expense_jp import OwnedHouse, RentalHouse
from family_expense_jp.config import (
    DEFAULT_HOUSEHOLD,
    DEFAULTS,
    build_cars,
    build_household,
    build_houses,
    build_people,
    load_config,
    parse_args,
    parse_birth_date,
    resolve,
)

SAMPLE_TOML = """\
start_year = 2030
years = 5

[[people]]
name = "本人"
birth_date = 1990-05-10T00:00:00+09:00

[[people]]
name = "子"
birth_date = 2031-01-15
is_child = true

[[cars]]
start_year = 2030
end_year = 2040
annual_gas_expense = 120000
loan = { interest_rate = 0.0, payment_years = 5, amount = 3000000 }

[[houses]]
kind = "rental"
start_year = 2030
end_year = 2035
rent = 90000

[[houses]]
kind = "own"
start_year = 2035
end_year = 2070
down_payment = 5000000
"""


class TestLoadConfig:
    def test_missing_file(self, tmp_path):
        assert load_config(tmp_path / "none.toml") == {}

    def test_valid_file(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text(SAMPLE_TOML, encoding="utf-8")
        config = load_config(path)
        assert config["start_year"] == 2030
        assert len(config["people"]) == 2

    def test_broken_file_exits(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("start_year = = 1", encoding="utf-8")
        with pytest.raises(SystemExit):
            load_config(path)


class TestResolve:
    def test_priority(self):
        args = argparse.Namespace(start_year=2040, years=None)
        r = resolve(args, {"start_year": 2030, "years": 10})
        assert r == {"start_year": 2040, "years": 10}

    def test_defaults(self):
        args = argparse.Namespace(start_year=None, years=None)
        assert resolve(args, {}) == DEFAULTS


class TestParseBirthDate:
    def test_aware_datetime(self):
        dt = datetime(1990, 5, 10, tzinfo=timezone(timedelta(hours=9)))
        assert parse_birth_date(dt) is dt

    def test_date(self):
        assert parse_birth_date(date(2031, 1, 15)) == datetime(2031, 1, 15)

    def test_iso_string(self):
        dt = parse_birth_date("1992-08-21T00:00:00+09:00")
        assert dt.utcoffset() == timedelta(hours=9)

    def test_invalid(self):
        with pytest.raises(ValueError):
            parse_birth_date(19900510)
        with pytest.raises(ValueError):
            parse_birth_date("not a date")


class TestBuildHousehold:
    def test_from_toml(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text(SAMPLE_TOML, encoding="utf-8")
        people, cars, houses = build_household(load_config(path))
        assert [p.name for p in people] == ["本人", "子"]
        assert people[0].birth_date.utcoffset() == timedelta(hours=9)
        assert not people[0].is_child
        assert people[1].is_child
        assert cars[0].loan.payment_years == 5
        assert cars[0].estimate_expense(2030) == 120000 + 600000
        assert isinstance(houses[0], RentalHouse)
        assert isinstance(houses[1], OwnedHouse)
        assert houses[1].loan is None

    def test_default_household(self):
        people, cars, houses = build_household({})
        assert len(people) == len(DEFAULT_HOUSEHOLD["people"])
        assert len(cars) == 1
        assert len(houses) == 2

    def test_cars_only_keeps_configured_car(self):
        config = {
            "cars": [{"start_year": 2030, "end_year": 2031, "annual_gas_expense": 1}],
            "houses": [],
        }
        people, cars, houses = build_household(config)
        assert people == []
        assert houses == []
        assert len(cars) == 1
        assert cars[0].annual_gas_expense == 1

    def test_houses_only_has_no_cars(self):
        config = {"houses": [{"kind": "rental", "start_year": 2024, "end_year": 2025, "rent": 1}]}
        people, cars, houses = build_household(config)
        assert people == []
        assert cars == []
        assert houses[0].rent == 1

    @pytest.mark.parametrize("value", ["false", "true", 0, 1])
    def test_is_child_must_be_bool(self, value):
        with pytest.raises(ValueError, match="people\\[1\\]: is_child"):
            build_people([{"name": "a", "birth_date": "2000-01-01", "is_child": value}])

    def test_duplicate_name(self):
        raw = [
            {"name": "子", "birth_date": "2020-01-01", "is_child": True},
            {"name": "子", "birth_date": "2022-01-01", "is_child": True},
        ]
        with pytest.raises(ValueError, match="people\\[2\\]: 名前 子 が重複"):
            build_people(raw)

    def test_unknown_person_key(self):
        with pytest.raises(ValueError, match="people\\[1\\]: 不明なキー age"):
            build_people([{"name": "a", "birth_date": "2000-01-01", "age": 3}])

    def test_missing_birth_date(self):
        with pytest.raises(ValueError, match="birth_date"):
            build_people([{"name": "a"}])

    def test_bad_birth_date(self):
        with pytest.raises(ValueError, match="people\\[1\\]"):
            build_people([{"name": "a", "birth_date": "yesterday"}])

    def test_unknown_house_kind(self):
        with pytest.raises(ValueError, match="kind"):
            build_houses([{"kind": "tent", "start_year": 2024, "end_year": 2025}])

    def test_rent_not_allowed_on_owned(self):
        with pytest.raises(ValueError, match="rent"):
            build_houses([{"kind": "own", "start_year": 2024, "end_year": 2025, "rent": 1}])

    def test_incomplete_loan(self):
        with pytest.raises(ValueError, match="ローン"):
            build_cars([{"start_year": 2024, "end_year": 2030, "loan": {"amount": 100}}])


class TestParseArgs:
    def test_config_and_flags(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text(SAMPLE_TOML, encoding="utf-8")
        r, people, cars, houses, args = parse_args("test", argv=["--config", str(path), "--years", "3"])
        assert r == {"start_year": 2030, "years": 3}
        assert len(people) == 2
        assert args.config == path

    def test_invalid_household_exits(self, tmp_path, capsys):
        path = tmp_path / "config.toml"
        path.write_text('[[people]]\nname = "a"\n', encoding="utf-8")
        with pytest.raises(SystemExit):
            parse_args("test", argv=["--config", str(path)])
        assert "設定エラー" in capsys.readouterr().err
