"""CLI entry point for chart generation."""

import argparse
import sys
from pathlib import Path

from family_expense_jp.charts import plot_expense_stack, plot_member_expenses
from family_expense_jp.config import parse_args
from family_expense_jp.simulation import estimate_family_expenses


def _add_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--output", type=Path, default=Path("reports/charts"),
        help="出力ディレクトリ (default: reports/charts)",
    )
    parser.add_argument(
        "--name", type=str, default="",
        help="出力ファイル名のサフィックス（例: a → expense_stack-a.png）",
    )


def main(argv: list[str] | None = None):
    r, people, cars, houses, args = parse_args("家計支出シミュレーション チャート生成", _add_args, argv)

    print(f"支出推計（{r['start_year']}年から{r['years']}年間）...", file=sys.stderr)
    try:
        expenses = estimate_family_expenses(people, cars, houses, r["start_year"], r["years"])
    except ValueError as e:
        print(f"\n{e}\n", file=sys.stderr)
        raise SystemExit(1)
    if not expenses:
        print("  有効な結果なし", file=sys.stderr)
        raise SystemExit(1)

    for plot in (plot_expense_stack, plot_member_expenses):
        path = plot(expenses, args.output, args.name)
        print(f"  → {path}", file=sys.stderr)
    print("完了", file=sys.stderr)


if __name__ == "__main__":
    main()
