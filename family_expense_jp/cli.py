"""CLI entry point for the yearly family expense table."""

import argparse
import sys

from family_expense_jp.car import Car
from family_expense_jp.config import parse_args
from family_expense_jp.housing import House, OwnedHouse, RentalHouse
from family_expense_jp.person import Person
from family_expense_jp.simulation import FamilyExpense, PersonExpense, estimate_family_expenses

# (label, PersonExpense attribute)
PERSON_EXPENSE_LABELS: list[tuple[str, str]] = [
    ("衣類", "clothing_expense"),
    ("食費", "food_expense"),
    ("光熱・水道", "fuel_light_water_expense"),
    ("家具", "furniture_expense"),
    ("医療", "medical_expense"),
    ("学費", "education_expense"),
    ("塾・予備校", "extra_education_expense"),
    ("習い事", "extracurricular_activities_expense"),
    ("携帯", "mobile_expense"),
    ("小遣い", "allowance"),
    ("一人暮らし", "living_alone_expense"),
    ("冠婚葬祭", "ceremony_expense"),
    ("レジャー", "leisure_expense"),
    ("免許取得", "driver_license_acquisition_fees"),
]


def _man(yen: int) -> str:
    """Format yen as 万円 with one decimal."""
    return f"{yen / 10000:,.1f}"


def _add_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--detail-year", type=int, default=None,
        help="指定年の一人ごとの内訳を表示",
    )
    parser.add_argument(
        "--every", type=int, default=1,
        help="年次表の表示間隔（年）(default: 1)",
    )


def _print_header(r: dict, people: list[Person], cars: list[Car], houses: list[House]):
    start_year = r["start_year"]
    years = r["years"]
    print("=" * 80)
    print(f"家計支出シミュレーション（{start_year}年-{start_year + years - 1}年、{years}年間）")
    for p in people:
        role = "子" if p.is_child else "大人"
        print(f"  {p.name}: {p.birth_date:%Y-%m-%d}生（{role}）")
    for i, car in enumerate(cars, start=1):
        loan = ""
        if car.loan is not None:
            loan = f" / ローン{_man(car.loan.amount)}万円・{car.loan.payment_years}年・年{car.loan.interest_rate:.2%}"
        print(f"  車{i}: {car.start_year}-{car.end_year - 1}年 維持費{_man(car.maintenance_expense())}万円/年{loan}")
    for i, house in enumerate(houses, start=1):
        period = f"{house.start_year}-{house.end_year - 1}年"
        if isinstance(house, RentalHouse):
            print(f"  住居{i}: 賃貸 {period} 家賃{_man(house.rent)}万円/月")
        elif isinstance(house, OwnedHouse):
            loan = ""
            if house.loan is not None:
                loan = f" / ローン{_man(house.loan.amount)}万円・{house.loan.payment_years}年・年{house.loan.interest_rate:.2%}"
            print(f"  住居{i}: 持家 {period} 頭金{_man(house.down_payment)}万円{loan}")
    print("=" * 80)
    print()


def _print_yearly_table(expenses: list[FamilyExpense], every: int):
    print("【年次支出（万円）】")
    print("-" * 80)
    print(
        f"{'年':<6} {'住居':>10} {'車':>10} {'基礎生活':>10} {'個人':>10} {'合計':>12}  人数"
    )
    print("-" * 80)
    for i, e in enumerate(expenses):
        if i % every != 0 and i != len(expenses) - 1:
            continue
        base = e.food_expense + e.fuel_light_water_expense + e.furniture_expense
        print(
            f"{e.year:<6} "
            f"{_man(e.house_expense):>10} "
            f"{_man(e.car_expense):>10} "
            f"{_man(base):>10} "
            f"{_man(e.members_total):>10} "
            f"{_man(e.total):>12}  "
            f"{len(e.member_expenses)}"
        )
    print("-" * 80)
    total = sum(e.total for e in expenses)
    print(f"{'累計':<6} {_man(total):>56}")


def _print_detail(expense: FamilyExpense):
    members: tuple[PersonExpense, ...] = expense.member_expenses
    print(f"\n【{expense.year}年の内訳（万円）】")
    print("-" * 80)
    print(f"{'項目':<12}" + "".join(f"{m.name:>10}" for m in members))
    print("-" * 80)
    for label, key in PERSON_EXPENSE_LABELS:
        print(f"{label:<12}" + "".join(f"{_man(getattr(m, key)):>10}" for m in members))
    print("-" * 80)
    print(f"{'小計':<12}" + "".join(f"{_man(m.total):>10}" for m in members))
    print(
        f"世帯共通: 住居{_man(expense.house_expense)} / 車{_man(expense.car_expense)}"
        f" / 食費{_man(expense.food_expense)} / 光熱{_man(expense.fuel_light_water_expense)}"
        f" / 家具{_man(expense.furniture_expense)}"
    )


def main(argv: list[str] | None = None):
    """Execute the yearly expense estimation and print tables."""
    r, people, cars, houses, args = parse_args("家計支出シミュレーション", _add_args, argv)

    if args.every < 1:
        print("--every は1以上を指定してください", file=sys.stderr)
        raise SystemExit(1)

    try:
        expenses = estimate_family_expenses(people, cars, houses, r["start_year"], r["years"])
    except ValueError as e:
        print(f"\n{e}\n", file=sys.stderr)
        raise SystemExit(1)

    _print_header(r, people, cars, houses)
    _print_yearly_table(expenses, args.every)

    if args.detail_year is not None:
        matching = [e for e in expenses if e.year == args.detail_year]
        if not matching:
            print(f"\n{args.detail_year}年はシミュレーション範囲外です", file=sys.stderr)
            raise SystemExit(1)
        _print_detail(matching[0])


if __name__ == "__main__":
    main()
