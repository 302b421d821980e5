"""TOML config loader with CLI > config > default resolution."""

import argparse
import sys
import tomllib
from datetime import date, datetime
from pathlib import Path
from typing import Callable

from family_expense_jp.car import Car
from family_expense_jp.housing import House, OwnedHouse, RentalHouse
from family_expense_jp.params import YearlyLoan
from family_expense_jp.person import Person

DEFAULT_CONFIG_PATH = Path("config.toml")

DEFAULTS = {
    "start_year": 2024,
    "years": 60,
}

# Sample household used when the config file defines no members
DEFAULT_HOUSEHOLD = {
    "people": [
        {"name": "本人", "birth_date": "1990-05-10T00:00:00+09:00", "is_child": False},
        {"name": "配偶者", "birth_date": "1992-08-21T00:00:00+09:00", "is_child": False},
        {"name": "第一子", "birth_date": "2024-06-01T00:00:00+09:00", "is_child": True},
        {"name": "第二子", "birth_date": "2027-01-15T00:00:00+09:00", "is_child": True},
    ],
    "cars": [
        {
            "start_year": 2026,
            "end_year": 2036,
            "annual_car_type_tax": 30500,
            "annual_weight_tax": 12300,
            "annual_liability_insurance_fee": 8850,
            "annual_optional_insurance_fee": 70000,
            "annual_inspection_fee": 50000,
            "annual_gas_expense": 120000,
            "annual_consumables_expense": 30000,
            "down_payment": 500000,
            "loan": {"interest_rate": 0.025, "payment_years": 5, "amount": 2500000},
        },
    ],
    "houses": [
        {"kind": "rental", "start_year": 2024, "end_year": 2030, "moving_expense": 150000, "rent": 120000},
        {
            "kind": "own",
            "start_year": 2030,
            "end_year": 2075,
            "moving_expense": 300000,
            "down_payment": 5000000,
            "loan": {"interest_rate": 0.009, "payment_years": 35, "amount": 50000000},
        },
    ],
}

_HOUSEHOLD_KEYS = ("people", "cars", "houses")
_PERSON_KEYS = {"name", "birth_date", "is_child"}
_LOAN_KEYS = {"interest_rate", "payment_years", "amount"}
_CAR_KEYS = {
    "start_year", "end_year",
    "annual_car_type_tax", "annual_weight_tax",
    "annual_liability_insurance_fee", "annual_optional_insurance_fee",
    "annual_inspection_fee", "annual_gas_expense", "annual_consumables_expense",
    "down_payment", "loan",
}
_HOUSE_KINDS: dict[str, type[House]] = {
    RentalHouse.KIND: RentalHouse,
    OwnedHouse.KIND: OwnedHouse,
}
_HOUSE_KEYS = {
    RentalHouse.KIND: {"kind", "start_year", "end_year", "moving_expense", "rent"},
    OwnedHouse.KIND: {"kind", "start_year", "end_year", "moving_expense", "down_payment", "loan"},
}


def load_config(path: Path | None = None) -> dict:
    """Load TOML config file. Returns empty dict if file doesn't exist."""
    if path is None:
        path = DEFAULT_CONFIG_PATH
    if not path.exists():
        return {}
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        print(f"設定ファイルの読み込みに失敗: {path}: {e}", file=sys.stderr)
        raise SystemExit(1)


def create_parser(description: str) -> argparse.ArgumentParser:
    """Create argparse parser with shared simulation flags."""
    d = DEFAULTS
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("--config", type=Path, default=None, help="設定ファイルパス (default: config.toml)")
    parser.add_argument("--start-year", type=int, default=None, help=f"開始年 (default: {d['start_year']})")
    parser.add_argument("--years", type=int, default=None, help=f"シミュレーション年数 (default: {d['years']})")
    return parser


def resolve(args: argparse.Namespace, config: dict) -> dict:
    """Resolve values with priority: CLI flag > config.toml > hardcoded default."""
    resolved = {}
    for key, default in DEFAULTS.items():
        cli_val = getattr(args, key, None)
        resolved[key] = cli_val if cli_val is not None else config.get(key, default)
    return resolved


def parse_birth_date(value) -> datetime:
    """Accept a TOML datetime/date or an ISO 8601 string.

    A date without time becomes midnight; its timezone is left unset.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str):
        return datetime.fromisoformat(value)
    raise ValueError(f"生年月日の形式が不正です: {value!r}")


def _check_keys(entry: dict, allowed: set[str], required: set[str], label: str) -> None:
    if not isinstance(entry, dict):
        raise ValueError(f"{label}: テーブルではありません: {entry!r}")
    unknown = sorted(set(entry) - allowed)
    if unknown:
        raise ValueError(f"{label}: 不明なキー {', '.join(unknown)}")
    missing = sorted(required - set(entry))
    if missing:
        raise ValueError(f"{label}: 必須キー {', '.join(missing)} がありません")


def build_loan(raw: dict | None, label: str) -> YearlyLoan | None:
    if raw is None:
        return None
    _check_keys(raw, _LOAN_KEYS, _LOAN_KEYS, f"{label}のローン")
    return YearlyLoan(
        interest_rate=float(raw["interest_rate"]),
        payment_years=int(raw["payment_years"]),
        amount=int(raw["amount"]),
    )


def build_people(raw: list[dict]) -> list[Person]:
    people = []
    for i, entry in enumerate(raw, start=1):
        label = f"people[{i}]"
        _check_keys(entry, _PERSON_KEYS, {"name", "birth_date"}, label)
        try:
            birth_date = parse_birth_date(entry["birth_date"])
        except ValueError as e:
            raise ValueError(f"{label}: {e}") from e
        is_child = entry.get("is_child", False)
        if not isinstance(is_child, bool):
            raise ValueError(f"{label}: is_child は true / false で指定してください: {is_child!r}")
        name = str(entry["name"])
        if any(p.name == name for p in people):
            raise ValueError(f"{label}: 名前 {name} が重複しています")
        people.append(Person(name=name, birth_date=birth_date, is_child=is_child))
    return people


def build_cars(raw: list[dict]) -> list[Car]:
    cars = []
    for i, entry in enumerate(raw, start=1):
        label = f"cars[{i}]"
        _check_keys(entry, _CAR_KEYS, {"start_year", "end_year"}, label)
        values = {k: int(v) for k, v in entry.items() if k != "loan"}
        cars.append(Car(**values, loan=build_loan(entry.get("loan"), label)))
    return cars


def build_houses(raw: list[dict]) -> list[House]:
    houses = []
    for i, entry in enumerate(raw, start=1):
        label = f"houses[{i}]"
        kind = entry.get("kind") if isinstance(entry, dict) else None
        if kind not in _HOUSE_KINDS:
            raise ValueError(f"{label}: kind は {' / '.join(_HOUSE_KINDS)} のいずれかです: {kind!r}")
        _check_keys(entry, _HOUSE_KEYS[kind], {"kind", "start_year", "end_year"}, label)
        values = {k: int(v) for k, v in entry.items() if k not in ("kind", "loan")}
        if kind == OwnedHouse.KIND:
            values["loan"] = build_loan(entry.get("loan"), label)
        houses.append(_HOUSE_KINDS[kind](**values))
    return houses


def build_household(config: dict) -> tuple[list[Person], list[Car], list[House]]:
    """Build (people, cars, houses) from a config dict.

    Falls back to DEFAULT_HOUSEHOLD only when the config defines none of
    people, cars and houses; otherwise a missing table means none.
    """
    if any(key in config for key in _HOUSEHOLD_KEYS):
        source = config
    else:
        source = DEFAULT_HOUSEHOLD
    return (
        build_people(source.get("people", [])),
        build_cars(source.get("cars", [])),
        build_houses(source.get("houses", [])),
    )


def parse_args(
    description: str,
    add_args_fn: Callable[[argparse.ArgumentParser], None] | None = None,
    argv: list[str] | None = None,
) -> tuple[dict, list[Person], list[Car], list[House], argparse.Namespace]:
    """Parse CLI args, load config, resolve values.

    Returns (resolved_dict, people, cars, houses, namespace).
    namespace: raw argparse.Namespace (for extra CLI args added via add_args_fn).
    """
    parser = create_parser(description)
    if add_args_fn:
        add_args_fn(parser)
    args = parser.parse_args(argv)
    config = load_config(args.config)
    r = resolve(args, config)
    try:
        people, cars, houses = build_household(config)
    except (ValueError, TypeError) as e:
        print(f"設定エラー: {e}", file=sys.stderr)
        raise SystemExit(1)
    return r, people, cars, houses, args
