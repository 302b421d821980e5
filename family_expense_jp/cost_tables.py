"""Age-indexed yearly cost tables for per-person expenses.

Each schedule is an ascending tuple of (lo, hi, value) with inclusive bounds.
Ages that match no row fall back to the schedule's default.
"""

from family_expense_jp.life_stage import LifeStage
from family_expense_jp.params import (
    CHILD_MARRIAGE_SUPPORT_EXPENSE,
    CLOTHING_EXPENSE,
    DIFF_FROM_PARENT_AGE,
    DRIVER_LICENSE_ACQUISITION_AGE,
    DRIVER_LICENSE_ACQUISITION_EXPENSE,
    LIFESPAN_YEARS,
    MARRIAGE_AGE,
    PARENT_FUNERAL_EXPENSE,
    PERSON_FOOD_EXPENSE,
)

Schedule = tuple[tuple[int, int, float], ...]


def _per_age(*values: float) -> Schedule:
    """Build one row per age starting at 0."""
    return tuple((age, age, v) for age, v in enumerate(values))


def _lookup(schedule: Schedule, age: int, default: float) -> float:
    for lo, hi, value in schedule:
        if lo <= age <= hi:
            return value
    return default


# 衣類: 単身世帯の衣類支出に対する年齢別比率
_CLOTHING_RATES: Schedule = _per_age(
    0.904479703, 0.7528228185, 0.7174627804, 0.6809886838, 0.7081517868,
    0.61088451, 0.6791319195, 0.6869846738, 0.7422166185, 0.7433940788,
    0.8035622993, 0.8303631068, 0.9398669132, 0.8913555495, 0.7917605243,
) + (
    (15, 17, 1.108464734),
    (18, 21, 1.425168944),
    (22, 23, 1.741873153),
    (24, 25, 1.900225258),
    (26, 29, 2.058577363),
    (30, 34, 1.583521049),
    (35, 39, 1.266816839),
    (40, 49, 0.9501126292),
    (50, 59, 0.7917605243),
)
_CLOTHING_RATE_DEFAULT = 0.6334084194

# 食費: 一人当たり食費に対する年齢別比率
_FOOD_RATES: Schedule = _per_age(
    0.3461706859, 0.4840146905, 0.6132080103, 0.6628411973, 0.7058329511,
    0.7106333491, 0.7893866661, 0.821466159, 0.8453341988, 0.8866998607,
    0.9566342765, 0.9319469605, 1.050059803, 1.133703856, 1.151011456,
) + (
    (15, 17, 1.174031685),
    (18, 29, 1.070440654),
    (30, 49, 1.093460883),
    (50, 64, 1.047420425),
    (65, 74, 0.9783597377),
)
_FOOD_RATE_DEFAULT = 0.8632585921

# 医療費（自己負担分、円/年）
_MEDICAL: Schedule = _per_age(
    15027, 16168, 12232, 13030, 14814, 14209, 20840, 22906,
    26489, 27330, 23284, 23256, 23608, 29707, 21903,
) + (
    (15, 19, 19878),
    (20, 24, 19923),
    (25, 29, 24676),
    (30, 34, 28861),
    (35, 39, 32068),
    (40, 44, 36435),
    (45, 49, 44213),
    (50, 54, 56040),
    (55, 59, 88814),
    (60, 64, 88268),
    (65, 69, 110511),
    (70, 74, 93249),
)
_MEDICAL_DEFAULT = 57867

# 学校外教育費（塾・予備校）
_EXTRA_EDUCATION: Schedule = _per_age(
    26809, 34193, 35877, 44351, 55861, 55048, 87941, 91968, 109036,
    129767, 182600, 224482, 202826, 251784, 387870, 400000, 500000, 1000000,
)

# 習い事
_EXTRACURRICULAR_ACTIVITIES: Schedule = _per_age(
    28090, 38108, 45284, 49827, 77783, 90609, 100251, 112791, 117021,
    120734, 113773, 102553, 88245, 74513, 72897, 60000, 50000, 40000,
)

# お小遣い・プレゼント（誕生日、クリスマス、ご褒美）
_ALLOWANCE: Schedule = _per_age(
    51284, 33325, 29098, 33985, 30977, 31913, 43203, 35816, 39770,
    41291, 42502, 51609, 61493, 76845, 80005, 85000, 90000, 80000,
)
_ALLOWANCE_DEFAULT = 20000
LIVING_ALONE_ALLOWANCE = 30000
WORKING_CHILD_ALLOWANCE = 20000

# レジャー・旅行
_LEISURE: Schedule = _per_age(
    79163, 108488, 125141, 125299, 141137, 146071, 152708, 168690, 182467,
    171124, 177438, 177201, 173200, 174405, 123861, 175000, 175000, 120000,
)
_LEISURE_DEFAULT = 175000

PARENT_FUNERAL_AGE = LIFESPAN_YEARS - DIFF_FROM_PARENT_AGE


def _covered_by_support(age: int, is_child: bool) -> bool:
    """True when a child's cost is already included in the living-alone stipend."""
    if not is_child:
        return False
    stage = LifeStage.from_age(age)
    return stage.might_need_support_living_alone() or stage == LifeStage.WORKING


def estimate_clothing_expense(age: int, is_child: bool) -> int:
    if _covered_by_support(age, is_child):
        return 0
    return int(CLOTHING_EXPENSE * _lookup(_CLOTHING_RATES, age, _CLOTHING_RATE_DEFAULT))


def estimate_person_food_expense(age: int, is_child: bool) -> int:
    if _covered_by_support(age, is_child):
        return 0
    return int(PERSON_FOOD_EXPENSE * _lookup(_FOOD_RATES, age, _FOOD_RATE_DEFAULT))


def estimate_medical_expense(age: int, is_child: bool) -> int:
    if _covered_by_support(age, is_child):
        return 0
    return int(_lookup(_MEDICAL, age, _MEDICAL_DEFAULT))


def estimate_extra_education_expense(age: int) -> int:
    return int(_lookup(_EXTRA_EDUCATION, age, 0))


def estimate_extracurricular_activities_expense(age: int) -> int:
    return int(_lookup(_EXTRACURRICULAR_ACTIVITIES, age, 0))


def estimate_allowance(age: int, is_child: bool) -> int:
    """Yearly allowance and gifts.

    Children living alone or already working get a flat amount regardless
    of age.
    """
    if is_child:
        stage = LifeStage.from_age(age)
        if stage.might_need_support_living_alone():
            return LIVING_ALONE_ALLOWANCE
        if stage == LifeStage.WORKING:
            return WORKING_CHILD_ALLOWANCE
    return int(_lookup(_ALLOWANCE, age, _ALLOWANCE_DEFAULT))


def estimate_ceremony_expense(age: int, is_child: bool) -> int:
    """One-time ceremonial costs (冠婚葬祭).

    A child's wedding support at MARRIAGE_AGE; the funerals of both parents
    when an adult reaches PARENT_FUNERAL_AGE.
    """
    expense = 0
    if is_child and age == MARRIAGE_AGE:
        expense += CHILD_MARRIAGE_SUPPORT_EXPENSE
    if not is_child and age == PARENT_FUNERAL_AGE:
        expense += PARENT_FUNERAL_EXPENSE * 2
    return expense


def estimate_leisure_expense(age: int) -> int:
    return int(_lookup(_LEISURE, age, _LEISURE_DEFAULT))


def estimate_driver_license_acquisition_fees(age: int) -> int:
    if age == DRIVER_LICENSE_ACQUISITION_AGE:
        return DRIVER_LICENSE_ACQUISITION_EXPENSE
    return 0
