"""Roster classification: who is a current executive and who is alumni.

Status is computed from the graduation year and the date the roster is viewed.
A same-year graduate flips to alumni only once the school year has ended.
"""

from datetime import date, datetime
from enum import Enum
from typing import Iterable, List, Tuple

# School year ends on June 20; graduates become alumni from June 21.
SCHOOL_YEAR_END_MONTH = 6
SCHOOL_YEAR_END_DAY = 20
FINAL_GRADE = 12


class MembershipStatus(str, Enum):
    CURRENT = "current"
    ALUMNI = "alumni"


def _as_date(today: date) -> date:
    # datetime is a date subclass but does not compare with plain dates
    if isinstance(today, datetime):
        return today.date()
    return today


def classify_year(graduation_year: int, today: date) -> MembershipStatus:
    today = _as_date(today)
    if graduation_year < today.year:
        return MembershipStatus.ALUMNI
    if graduation_year > today.year:
        return MembershipStatus.CURRENT
    school_year_end = date(today.year, SCHOOL_YEAR_END_MONTH, SCHOOL_YEAR_END_DAY)
    if today > school_year_end:
        return MembershipStatus.ALUMNI
    return MembershipStatus.CURRENT


def classify(executive, today: date) -> MembershipStatus:
    return classify_year(executive.graduation_year, today)


def derive_graduation(grade: int, today: date) -> Tuple[int, bool]:
    """Return ``(graduation_year, is_alumni)`` for an executive in ``grade``."""
    graduation_year = today.year + (FINAL_GRADE - grade)
    is_alumni = classify_year(graduation_year, today) is MembershipStatus.ALUMNI
    return graduation_year, is_alumni


def _role_rank(role: str) -> int:
    lowered = role.lower()
    if "vice president" in lowered:
        return 1
    if "president" in lowered:
        return 0
    return 2


def _current_sort_key(executive):
    rank = _role_rank(executive.role)
    if rank < 2:
        # presidents and vice presidents keep their incoming order
        return (rank, "", "")
    return (rank, executive.role.casefold(), executive.role)


def order_current(executives: Iterable) -> List:
    return sorted(executives, key=_current_sort_key)


def order_alumni(executives: Iterable) -> List:
    # most recent graduates first; sorted() is stable so store order breaks ties
    return sorted(executives, key=lambda executive: -executive.graduation_year)


def split_roster(executives: Iterable, today: date) -> Tuple[List, List]:
    current, alumni = [], []
    for executive in executives:
        if classify(executive, today) is MembershipStatus.ALUMNI:
            alumni.append(executive)
        else:
            current.append(executive)
    return order_current(current), order_alumni(alumni)
