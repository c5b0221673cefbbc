from enum import Enum
from typing import FrozenSet, Iterable

class Weekday(int, Enum):
    # Values follow ISO numbering, 1=Monday..7=Sunday
    SUNDAY = 7
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @property
    def bit(self) -> int:
        """Flag used when the day is stored inside a days-of-week bitmask."""
        return BIT_VALUES[self]

    @property
    def short_name(self) -> str:
        return self.name[:3].capitalize()

    @classmethod
    def from_bit(cls, value: int) -> "Weekday":
        for day, bit in BIT_VALUES.items():
            if bit == value:
                return day
        raise ValueError(f"{value} is not a weekday bit value")

# Sunday first, one bit per day
BIT_VALUE_SUNDAY = 1
BIT_VALUE_MONDAY = 2
BIT_VALUE_TUESDAY = 4
BIT_VALUE_WEDNESDAY = 8
BIT_VALUE_THURSDAY = 16
BIT_VALUE_FRIDAY = 32
BIT_VALUE_SATURDAY = 64

BIT_VALUES = {
    Weekday.SUNDAY: BIT_VALUE_SUNDAY,
    Weekday.MONDAY: BIT_VALUE_MONDAY,
    Weekday.TUESDAY: BIT_VALUE_TUESDAY,
    Weekday.WEDNESDAY: BIT_VALUE_WEDNESDAY,
    Weekday.THURSDAY: BIT_VALUE_THURSDAY,
    Weekday.FRIDAY: BIT_VALUE_FRIDAY,
    Weekday.SATURDAY: BIT_VALUE_SATURDAY,
}

ALL_DAYS_MASK = sum(BIT_VALUES.values())

def days_to_mask(days: Iterable[Weekday]) -> int:
    mask = 0
    for day in days:
        mask |= Weekday(day).bit
    return mask

def mask_to_days(mask: int) -> FrozenSet[Weekday]:
    if mask < 0 or mask & ~ALL_DAYS_MASK:
        raise ValueError(f"{mask} is not a valid days-of-week bitmask")
    return frozenset(day for day, bit in BIT_VALUES.items() if mask & bit)

def sort_days(days: Iterable[Weekday]) -> list:
    """Order days the way the week is displayed, Sunday first."""
    order = list(BIT_VALUES)
    return sorted(days, key=order.index)
