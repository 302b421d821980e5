"""Household constants and loan calculation helpers.

All amounts are yen (円) per year unless noted otherwise.
"""

from dataclasses import dataclass

# Life-event ages
LIFESPAN_YEARS = 80  # 想定寿命（これを超えると集計対象外）
MARRIAGE_AGE = 30  # 子の結婚年齢
DIFF_FROM_PARENT_AGE = 35  # 親との年齢差
DRIVER_LICENSE_ACQUISITION_AGE = 18
MOBILE_START_AGE = 10  # 携帯電話を持ち始める年齢

# 家計調査 2022（東京都区部）の平均世帯人数
GOV_STAT_FAMILY_NUM_PEOPLE = 2.87


def _split_household_expense(household_monthly: int, single_monthly: int) -> tuple[int, int]:
    """Split a household monthly statistic into (base, per_person) yearly amounts.

    The difference between an average household and a single-person household
    is attributed to the extra members; the remainder of the single-person
    figure is the base that does not scale with household size.
    """
    per_person = int(
        (household_monthly - single_monthly) / (GOV_STAT_FAMILY_NUM_PEOPLE - 1.0) * 12.0
    )
    return single_monthly * 12 - per_person, per_person


# 食費: 世帯 87,973円/月, 単身 39,069円/月
BASE_FOOD_EXPENSE, PERSON_FOOD_EXPENSE = _split_household_expense(87973, 39069)

# 光熱・水道: 世帯 22,846円/月, 単身 13,098円/月
BASE_FUEL_LIGHT_WATER_EXPENSE, PERSON_FUEL_LIGHT_WATER_EXPENSE = _split_household_expense(
    22846, 13098
)

# 家具・家事用品: 世帯 11,587円/月, 単身 5,487円/月
BASE_FURNITURE_EXPENSE, PERSON_FURNITURE_EXPENSE = _split_household_expense(11587, 5487)

# 衣類（単身世帯の月額を基準に年齢比率を掛ける）
CLOTHING_EXPENSE = 5047 * 12

# 携帯: 月額料金 + 端末買い替えの年割
MOBILE_EXPENSE = 3000 * 12 + 10000

# 一人暮らし: 初期費用（契約・引越し）と、家賃・仕送り・更新料の年額
INITIAL_LIVING_ALONE_EXPENSE = 480000
ANNUAL_LIVING_ALONE_EXPENSE = 200000 * 12 + 40000

CHILD_MARRIAGE_SUPPORT_EXPENSE = 1932000
PARENT_FUNERAL_EXPENSE = 1861000
DRIVER_LICENSE_ACQUISITION_EXPENSE = 302489  # 都内教習所の平均


def _calc_equal_payment(principal: float, monthly_rate: float, months: int) -> float:
    """Calculate monthly loan payment (元利均等返済)"""
    if monthly_rate == 0:
        return principal / months
    pvif = (1 + monthly_rate) ** months
    return monthly_rate / (pvif - 1) * (principal * pvif)


@dataclass(frozen=True)
class YearlyLoan:
    """Fixed-rate loan repaid in equal monthly installments."""

    interest_rate: float  # 年利
    payment_years: int
    amount: int

    def monthly_payment(self) -> int:
        """Monthly installment, truncated to whole yen."""
        return int(_calc_equal_payment(self.amount, self.interest_rate / 12, self.payment_years * 12))

    def yearly_payment(self) -> int:
        # Truncation happens per month, before scaling to a year
        return self.monthly_payment() * 12

    def is_paying(self, start_year: int, year: int) -> bool:
        """True while `year` falls inside [start_year, start_year + payment_years)."""
        return start_year <= year < start_year + self.payment_years


def validate_loan(loan: YearlyLoan, label: str) -> list[str]:
    """Validate loan terms. Returns list of error messages."""
    errors = []
    if loan.payment_years < 1:
        errors.append(f"{label}: ローン返済年数{loan.payment_years}年は1年以上が必要です")
    if loan.amount < 0:
        errors.append(f"{label}: ローン借入額{loan.amount}円が負の値です")
    if loan.interest_rate < 0:
        errors.append(f"{label}: ローン金利{loan.interest_rate}が負の値です")
    return errors
