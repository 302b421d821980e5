"""Vehicle ownership costs."""

from dataclasses import dataclass, fields

from family_expense_jp.params import YearlyLoan, validate_loan


@dataclass
class Car:
    """A vehicle owned during [start_year, end_year)."""

    start_year: int
    end_year: int  # 含まない
    annual_car_type_tax: int = 0  # 自動車税（種別割）
    annual_weight_tax: int = 0  # 自動車重量税の年割
    annual_liability_insurance_fee: int = 0  # 自賠責の年割
    annual_optional_insurance_fee: int = 0  # 任意保険
    annual_inspection_fee: int = 0  # 車検代の年割
    annual_gas_expense: int = 0
    annual_consumables_expense: int = 0  # タイヤ・オイル等
    down_payment: int = 0
    loan: YearlyLoan | None = None

    def maintenance_expense(self) -> int:
        """Sum of the yearly running costs (維持費)."""
        return (
            self.annual_car_type_tax
            + self.annual_weight_tax
            + self.annual_liability_insurance_fee
            + self.annual_optional_insurance_fee
            + self.annual_inspection_fee
            + self.annual_gas_expense
            + self.annual_consumables_expense
        )

    def is_active(self, year: int) -> bool:
        return self.start_year <= year < self.end_year

    def estimate_expense(self, year: int) -> int:
        """Yearly cost: running costs, first-year down payment and loan payment.

        The three parts are independent, so the start year can carry all of
        them at once.
        """
        expense = 0
        if self.is_active(year):
            expense += self.maintenance_expense()
        if year == self.start_year:
            expense += self.down_payment
        if self.loan is not None and self.loan.is_paying(self.start_year, year):
            expense += self.loan.yearly_payment()
        return expense


def validate_car(car: Car, label: str = "車") -> list[str]:
    """Validate a car's configuration. Returns list of error messages."""
    errors = []
    if car.end_year < car.start_year:
        errors.append(f"{label}: 終了年{car.end_year}が開始年{car.start_year}より前です")
    for f in fields(car):
        value = getattr(car, f.name)
        if f.name.startswith("annual_") or f.name == "down_payment":
            if value < 0:
                errors.append(f"{label}: {f.name}={value}が負の値です")
    if car.loan is not None:
        errors.extend(validate_loan(car.loan, label))
    return errors
