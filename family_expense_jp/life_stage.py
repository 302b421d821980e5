"""Life stages derived from grade age, with school fees per stage.

Fee estimates are deliberately on the high side (private-school figures from
Tokyo metropolitan and MEXT surveys, 2023).
"""

from enum import Enum


class LifeStage(Enum):
    PRE_SCHOOL = "未就学"
    KINDERGARTEN = "幼稚園"
    ELEMENTARY_SCHOOL = "小学校"
    MIDDLE_SCHOOL = "中学校"
    HIGH_SCHOOL = "高校"
    UNDERGRADUATE = "大学"
    MASTERS = "修士"
    DOCTORATE = "博士"
    WORKING = "社会人"

    @classmethod
    def from_age(cls, age: int) -> "LifeStage":
        """Classify a grade age. Ages past the last bound are WORKING."""
        for upper, stage in _STAGE_UPPER_AGES:
            if age <= upper:
                return stage
        return cls.WORKING

    def annual_tuition(self) -> int:
        return _ANNUAL_TUITION[self]

    def initial_school_fees(self) -> int:
        """One-time enrollment fees paid in the first year of the stage."""
        return _INITIAL_SCHOOL_FEES[self]

    def might_need_support_living_alone(self) -> bool:
        """Stages where a dependent child is assumed to live away from home."""
        return self in _LIVING_ALONE_STAGES


# (inclusive upper age, stage), ascending
_STAGE_UPPER_AGES: tuple[tuple[int, LifeStage], ...] = (
    (2, LifeStage.PRE_SCHOOL),
    (5, LifeStage.KINDERGARTEN),
    (11, LifeStage.ELEMENTARY_SCHOOL),
    (14, LifeStage.MIDDLE_SCHOOL),
    (17, LifeStage.HIGH_SCHOOL),
    (21, LifeStage.UNDERGRADUATE),
    (23, LifeStage.MASTERS),
    (25, LifeStage.DOCTORATE),
)

_ANNUAL_TUITION: dict[LifeStage, int] = {
    LifeStage.PRE_SCHOOL: 0,
    LifeStage.KINDERGARTEN: 377077 + 17133 + 31962,  # 授業料 + 施設費 + その他
    LifeStage.ELEMENTARY_SCHOOL: 552581 + 200522,  # 授業料等 + 学校外活動を除く諸経費
    LifeStage.MIDDLE_SCHOOL: 492209 + 199759,
    LifeStage.HIGH_SCHOOL: 483311 + 184399,
    LifeStage.UNDERGRADUATE: 967288,
    LifeStage.MASTERS: 776040,
    LifeStage.DOCTORATE: 628729,
    LifeStage.WORKING: 0,
}

# 入学金 + 施設費など、受験料は併願数を掛ける
_INITIAL_SCHOOL_FEES: dict[LifeStage, int] = {
    LifeStage.PRE_SCHOOL: 0,
    LifeStage.KINDERGARTEN: 109166 + 5483,
    LifeStage.ELEMENTARY_SCHOOL: 255357 + 52143 + 24446 * 2,
    LifeStage.MIDDLE_SCHOOL: 263020 + 34137 + 23897 * 2,
    LifeStage.HIGH_SCHOOL: 253113 + 39096 + 23322 * 3,
    # 初年度納付金から授業料分を除く
    LifeStage.UNDERGRADUATE: 1643466 - 967288 + 261004 * 3,
    LifeStage.MASTERS: 76206 + 202598 * 3,
    LifeStage.DOCTORATE: 51842 + 189623 * 3,
    LifeStage.WORKING: 0,
}

_LIVING_ALONE_STAGES = frozenset(
    {LifeStage.UNDERGRADUATE, LifeStage.MASTERS, LifeStage.DOCTORATE}
)
