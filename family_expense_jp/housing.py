"""Housing cost models (rental and owned)."""

from dataclasses import dataclass
from typing import ClassVar

from family_expense_jp.params import YearlyLoan, validate_loan

RENTAL_INITIAL_RENT_MONTHS = 2  # 敷金・礼金
RENTAL_RENEWAL_INTERVAL_YEARS = 2  # 2年ごとに更新料1ヶ月分


@dataclass
class House:
    """Base class for a residence occupied during [start_year, end_year)"""

    start_year: int
    end_year: int  # 含まない
    moving_expense: int = 0

    KIND: ClassVar[str] = ""

    def is_active(self, year: int) -> bool:
        return self.start_year <= year < self.end_year

    def estimate_expense(self, year: int) -> int:
        """Yearly cost: moving expense in the first year plus the kind-specific cost."""
        expense = 0
        if year == self.start_year:
            expense += self.moving_expense
        return expense + self.housing_cost(year)

    def housing_cost(self, year: int) -> int:
        raise NotImplementedError


@dataclass
class RentalHouse(House):
    rent: int = 0  # 月額家賃

    KIND: ClassVar[str] = "rental"

    def housing_cost(self, year: int) -> int:
        if not self.is_active(year):
            return 0
        expense = self.rent * 12
        if year == self.start_year:
            expense += self.rent * RENTAL_INITIAL_RENT_MONTHS
        elif (year - self.start_year) % RENTAL_RENEWAL_INTERVAL_YEARS == 0:
            expense += self.rent
        return expense


@dataclass
class OwnedHouse(House):
    down_payment: int = 0  # 頭金・諸費用
    loan: YearlyLoan | None = None

    KIND: ClassVar[str] = "own"

    def housing_cost(self, year: int) -> int:
        expense = 0
        if year == self.start_year:
            expense += self.down_payment
        # Payments follow the loan term even after moving out
        if self.loan is not None and self.loan.is_paying(self.start_year, year):
            expense += self.loan.yearly_payment()
        return expense


def validate_house(house: House, label: str = "住居") -> list[str]:
    """Validate a house's configuration. Returns list of error messages."""
    errors = []
    if house.end_year < house.start_year:
        errors.append(f"{label}: 終了年{house.end_year}が開始年{house.start_year}より前です")
    if house.moving_expense < 0:
        errors.append(f"{label}: 引越し費用{house.moving_expense}円が負の値です")
    if isinstance(house, RentalHouse) and house.rent < 0:
        errors.append(f"{label}: 家賃{house.rent}円が負の値です")
    if isinstance(house, OwnedHouse):
        if house.down_payment < 0:
            errors.append(f"{label}: 頭金{house.down_payment}円が負の値です")
        if house.loan is not None:
            errors.extend(validate_loan(house.loan, label))
    return errors
