"""Household members and grade-age resolution."""

from dataclasses import dataclass
from datetime import datetime

from family_expense_jp.params import LIFESPAN_YEARS

# 学年は4月2日時点の満年齢で決まる
GRADE_CUTOFF_MONTH = 4
GRADE_CUTOFF_DAY = 2


def _years_since(base: datetime, birth: datetime) -> int | None:
    """Completed years from birth to base, or None when base precedes birth."""
    if base < birth:
        return None
    years = base.year - birth.year
    base_key = (base.month, base.day, base.hour, base.minute, base.second, base.microsecond)
    birth_key = (birth.month, birth.day, birth.hour, birth.minute, birth.second, birth.microsecond)
    if base_key < birth_key:
        years -= 1
    return years


@dataclass(frozen=True)
class Person:
    name: str
    birth_date: datetime
    is_child: bool = False  # 扶養する子ならTrue、本人・配偶者はFalse

    def grade_age(self, year: int) -> int | None:
        """Age on April 2 of `year` in the birth date's timezone.

        Returns None when the person is not yet born on that date or has
        passed LIFESPAN_YEARS; such a person is excluded from that year.
        """
        cutoff = datetime(
            year, GRADE_CUTOFF_MONTH, GRADE_CUTOFF_DAY, tzinfo=self.birth_date.tzinfo
        )
        years = _years_since(cutoff, self.birth_date)
        if years is None or years > LIFESPAN_YEARS:
            return None
        return years
