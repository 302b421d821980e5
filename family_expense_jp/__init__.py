"""Family Expense Estimation Package."""

from family_expense_jp.params import YearlyLoan, LIFESPAN_YEARS
from family_expense_jp.life_stage import LifeStage
from family_expense_jp.person import Person
from family_expense_jp.car import Car, validate_car
from family_expense_jp.housing import House, RentalHouse, OwnedHouse, validate_house
from family_expense_jp.cost_tables import (
    estimate_clothing_expense,
    estimate_person_food_expense,
    estimate_medical_expense,
    estimate_extra_education_expense,
    estimate_extracurricular_activities_expense,
    estimate_allowance,
    estimate_ceremony_expense,
    estimate_leisure_expense,
    estimate_driver_license_acquisition_fees,
)
from family_expense_jp.simulation import (
    PersonExpense,
    FamilyExpense,
    estimate_person_expense,
    estimate_year_expense,
    estimate_family_expenses,
    validate_household,
    validate_years,
)

__all__ = [
    "YearlyLoan",
    "LIFESPAN_YEARS",
    "LifeStage",
    "Person",
    "Car",
    "validate_car",
    "House",
    "RentalHouse",
    "OwnedHouse",
    "validate_house",
    "estimate_clothing_expense",
    "estimate_person_food_expense",
    "estimate_medical_expense",
    "estimate_extra_education_expense",
    "estimate_extracurricular_activities_expense",
    "estimate_allowance",
    "estimate_ceremony_expense",
    "estimate_leisure_expense",
    "estimate_driver_license_acquisition_fees",
    "PersonExpense",
    "FamilyExpense",
    "estimate_person_expense",
    "estimate_year_expense",
    "estimate_family_expenses",
    "validate_household",
    "validate_years",
]
