"""Chart generation for yearly family expense results."""

import platform
from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import matplotlib.ticker as ticker

from family_expense_jp.simulation import FamilyExpense

# (label, color, yearly amount getter)
EXPENSE_GROUPS = [
    ("住居", "#1f77b4", lambda e: e.house_expense),
    ("車", "#7f7f7f", lambda e: e.car_expense),
    ("基礎生活費", "#2ca02c", lambda e: e.food_expense + e.fuel_light_water_expense + e.furniture_expense),
    ("教育", "#ff7f0e", lambda e: sum(
        m.education_expense + m.extra_education_expense + m.extracurricular_activities_expense
        for m in e.member_expenses
    )),
    ("一人暮らし支援", "#9467bd", lambda e: sum(m.living_alone_expense for m in e.member_expenses)),
    ("冠婚葬祭・免許", "#d62728", lambda e: sum(
        m.ceremony_expense + m.driver_license_acquisition_fees for m in e.member_expenses
    )),
    ("個人生活費", "#17becf", lambda e: sum(
        m.clothing_expense + m.food_expense + m.fuel_light_water_expense + m.furniture_expense
        + m.medical_expense + m.mobile_expense + m.allowance + m.leisure_expense
        for m in e.member_expenses
    )),
]


def _setup_japanese_font():
    """Configure matplotlib to use a Japanese font."""
    system = platform.system()
    if system == "Darwin":
        font_family = "Hiragino Sans"
    elif system == "Linux":
        font_family = "Noto Sans CJK JP"
    else:
        font_family = "sans-serif"
    plt.rcParams["font.family"] = font_family
    plt.rcParams["axes.unicode_minus"] = False


def _format_man_axis(ax: plt.Axes):
    """Show Y axis (yen) in 万円."""
    ax.yaxis.set_major_formatter(
        ticker.FuncFormatter(lambda x, _: f"{x / 10000:,.0f}万")
    )


def _save(fig, output_path: Path, stem: str, name: str) -> Path:
    output_path.mkdir(parents=True, exist_ok=True)
    suffix = f"-{name}" if name else ""
    filepath = output_path / f"{stem}{suffix}.png"
    fig.tight_layout()
    fig.savefig(filepath, dpi=150)
    plt.close(fig)
    return filepath


def plot_expense_stack(
    expenses: list[FamilyExpense], output_path: Path, name: str = "",
) -> Path:
    """Generate a stacked bar chart of yearly expenses by category group.

    Args:
        expenses: estimate_family_expenses() result.
        output_path: directory to save the PNG.
        name: optional suffix for the output filename (e.g. "a" → "expense_stack-a.png").

    Returns:
        Path to the generated PNG file.
    """
    if not expenses:
        raise ValueError("No FamilyExpense to plot")
    _setup_japanese_font()

    fig, ax = plt.subplots(figsize=(14, 8))
    years = [e.year for e in expenses]
    bottom = [0] * len(expenses)
    for label, color, getter in EXPENSE_GROUPS:
        values = [getter(e) for e in expenses]
        ax.bar(years, values, bottom=bottom, label=label, color=color, width=0.8)
        bottom = [b + v for b, v in zip(bottom, values)]

    ax.set_xlabel("年")
    ax.set_ylabel("年間支出")
    ax.set_title("年間支出の内訳")
    ax.legend(loc="upper left")
    ax.grid(True, axis="y", alpha=0.3)
    _format_man_axis(ax)
    return _save(fig, output_path, "expense_stack", name)


def plot_member_expenses(
    expenses: list[FamilyExpense], output_path: Path, name: str = "",
) -> Path:
    """Generate a line chart of each member's yearly total.

    Years in which a member is absent are left as gaps. Members are
    identified by name, so names must be unique within a year.
    """
    if not expenses:
        raise ValueError("No FamilyExpense to plot")
    _setup_japanese_font()

    names: list[str] = []
    for e in expenses:
        year_names = [m.name for m in e.member_expenses]
        if len(set(year_names)) != len(year_names):
            raise ValueError(f"Duplicate member names in {e.year}: {year_names}")
        for member_name in year_names:
            if member_name not in names:
                names.append(member_name)

    fig, ax = plt.subplots(figsize=(14, 8))
    years = [e.year for e in expenses]
    for member_name in names:
        totals = []
        for e in expenses:
            match = [m.total for m in e.member_expenses if m.name == member_name]
            totals.append(match[0] if match else float("nan"))
        ax.plot(years, totals, label=member_name, linewidth=2)

    ax.set_xlabel("年")
    ax.set_ylabel("年間支出")
    ax.set_title("一人あたりの年間支出")
    ax.legend(loc="upper left")
    ax.grid(True, alpha=0.3)
    _format_man_axis(ax)
    return _save(fig, output_path, "member_expenses", name)
