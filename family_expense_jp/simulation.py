"""Core yearly expense estimation engine."""

from dataclasses import dataclass, field, fields

from family_expense_jp.car import Car, validate_car
from family_expense_jp.cost_tables import (
    estimate_allowance,
    estimate_ceremony_expense,
    estimate_clothing_expense,
    estimate_driver_license_acquisition_fees,
    estimate_extra_education_expense,
    estimate_extracurricular_activities_expense,
    estimate_leisure_expense,
    estimate_medical_expense,
    estimate_person_food_expense,
)
from family_expense_jp.housing import House, validate_house
from family_expense_jp.life_stage import LifeStage
from family_expense_jp.params import (
    ANNUAL_LIVING_ALONE_EXPENSE,
    BASE_FOOD_EXPENSE,
    BASE_FUEL_LIGHT_WATER_EXPENSE,
    BASE_FURNITURE_EXPENSE,
    INITIAL_LIVING_ALONE_EXPENSE,
    MOBILE_EXPENSE,
    MOBILE_START_AGE,
    PERSON_FUEL_LIGHT_WATER_EXPENSE,
    PERSON_FURNITURE_EXPENSE,
)
from family_expense_jp.person import Person

MIN_YEAR = 1
MAX_YEAR = 9999  # datetime の上限


@dataclass(frozen=True)
class PersonExpense:
    name: str
    clothing_expense: int
    food_expense: int
    fuel_light_water_expense: int
    furniture_expense: int
    medical_expense: int
    education_expense: int
    extra_education_expense: int
    extracurricular_activities_expense: int
    mobile_expense: int
    allowance: int
    living_alone_expense: int
    ceremony_expense: int
    leisure_expense: int
    driver_license_acquisition_fees: int

    @property
    def total(self) -> int:
        return sum(getattr(self, f.name) for f in fields(self) if f.name != "name")


@dataclass(frozen=True)
class FamilyExpense:
    year: int
    car_expense: int
    house_expense: int
    food_expense: int
    fuel_light_water_expense: int
    furniture_expense: int
    member_expenses: tuple[PersonExpense, ...] = field(default_factory=tuple)

    @property
    def shared_total(self) -> int:
        return (
            self.car_expense
            + self.house_expense
            + self.food_expense
            + self.fuel_light_water_expense
            + self.furniture_expense
        )

    @property
    def members_total(self) -> int:
        return sum(m.total for m in self.member_expenses)

    @property
    def total(self) -> int:
        return self.shared_total + self.members_total


def validate_years(start_year: int, years: int) -> None:
    """Validate the simulated horizon. Raises ValueError if out of bounds."""
    if years < 0:
        raise ValueError(f"シミュレーション年数{years}年は対象外です（0年以上）")
    if start_year < MIN_YEAR or start_year + years - 1 > MAX_YEAR:
        raise ValueError(f"開始年{start_year}は対象外です（{MIN_YEAR}-{MAX_YEAR}年）")


def validate_household(cars: list[Car], houses: list[House]) -> list[str]:
    """Validate all vehicles and residences. Returns list of error messages."""
    errors = []
    for i, car in enumerate(cars, start=1):
        errors.extend(validate_car(car, f"車{i}"))
    for i, house in enumerate(houses, start=1):
        errors.extend(validate_house(house, f"住居{i}"))
    return errors


def estimate_person_expense(person: Person, year: int) -> PersonExpense | None:
    """Estimate one person's costs for a year, or None if they are not present.

    Stage transitions are found by re-deriving the stage at age - 1, so each
    year can be evaluated on its own.
    """
    age = person.grade_age(year)
    if age is None:
        return None

    stage = LifeStage.from_age(age)
    needs_living_alone_expense = person.is_child and stage.might_need_support_living_alone()
    if age > 0:
        prev_stage = LifeStage.from_age(age - 1)
        needs_school_initial_fees = person.is_child and stage != prev_stage
        needs_initial_living_alone_expense = (
            needs_living_alone_expense and not prev_stage.might_need_support_living_alone()
        )
    else:
        needs_school_initial_fees = False
        needs_initial_living_alone_expense = False

    # 一人暮らし・社会人は光熱費と家具を世帯で負担しない
    lives_at_home = not needs_living_alone_expense and stage != LifeStage.WORKING
    fuel_light_water_expense = PERSON_FUEL_LIGHT_WATER_EXPENSE if lives_at_home else 0
    furniture_expense = PERSON_FURNITURE_EXPENSE if lives_at_home else 0

    education_expense = stage.annual_tuition()
    if needs_school_initial_fees:
        education_expense += stage.initial_school_fees()

    living_alone_expense = 0
    if needs_initial_living_alone_expense:
        living_alone_expense += INITIAL_LIVING_ALONE_EXPENSE
    if needs_living_alone_expense:
        living_alone_expense += ANNUAL_LIVING_ALONE_EXPENSE

    return PersonExpense(
        name=person.name,
        clothing_expense=estimate_clothing_expense(age, person.is_child),
        food_expense=estimate_person_food_expense(age, person.is_child),
        fuel_light_water_expense=fuel_light_water_expense,
        furniture_expense=furniture_expense,
        medical_expense=estimate_medical_expense(age, person.is_child),
        education_expense=education_expense,
        extra_education_expense=estimate_extra_education_expense(age),
        extracurricular_activities_expense=estimate_extracurricular_activities_expense(age),
        mobile_expense=MOBILE_EXPENSE if age >= MOBILE_START_AGE else 0,
        allowance=estimate_allowance(age, person.is_child),
        living_alone_expense=living_alone_expense,
        ceremony_expense=estimate_ceremony_expense(age, person.is_child),
        leisure_expense=estimate_leisure_expense(age),
        driver_license_acquisition_fees=estimate_driver_license_acquisition_fees(age),
    )


def estimate_year_expense(
    people: list[Person], cars: list[Car], houses: list[House], year: int,
) -> FamilyExpense:
    members = []
    for person in people:
        expense = estimate_person_expense(person, year)
        if expense is not None:
            members.append(expense)
    return FamilyExpense(
        year=year,
        car_expense=sum(car.estimate_expense(year) for car in cars),
        house_expense=sum(house.estimate_expense(year) for house in houses),
        food_expense=BASE_FOOD_EXPENSE,
        fuel_light_water_expense=BASE_FUEL_LIGHT_WATER_EXPENSE,
        furniture_expense=BASE_FURNITURE_EXPENSE,
        member_expenses=tuple(members),
    )


def estimate_family_expenses(
    people: list[Person],
    cars: list[Car],
    houses: list[House],
    start_year: int,
    years: int,
) -> list[FamilyExpense]:
    """Estimate household expenses for each year in [start_year, start_year + years).

    Raises ValueError if the horizon or any vehicle/residence is invalid.
    Members not born yet or past the lifespan are left out of that year.
    """
    validate_years(start_year, years)
    errors = validate_household(cars, houses)
    if errors:
        raise ValueError("\n".join(errors))
    return [
        estimate_year_expense(people, cars, houses, year)
        for year in range(start_year, start_year + years)
    ]
