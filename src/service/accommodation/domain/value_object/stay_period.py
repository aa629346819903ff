from datetime import date
import math
from typing import Optional

import attrs

from src.platform.exception.exceptions import ValidationError


SECONDS_PER_NIGHT = 24 * 60 * 60


@attrs.define(frozen=True)
class StayPeriod:
    """
    Half-open date range [check_in, check_out)

    The check-out day is free for the next guest, so back-to-back stays never overlap.
    """

    check_in: date
    check_out: date

    @classmethod
    def of(
        cls,
        *,
        check_in: Optional[date],
        check_out: Optional[date],
        today: Optional[date] = None,
    ) -> 'StayPeriod':
        """
        Validate and build a stay period

        Args:
            check_in: First night
            check_out: Departure day (exclusive)
            today: When given, check_in must not be before it

        Raises:
            ValidationError: Missing dates, past check-in, or check_out not after check_in
        """
        if check_in is None or check_out is None:
            raise ValidationError('check_in_date and check_out_date are required')
        if today is not None and check_in < today:
            raise ValidationError('Check-in date cannot be in the past')
        if check_out <= check_in:
            raise ValidationError('Check-out date must be after check-in date')
        return cls(check_in=check_in, check_out=check_out)

    @property
    def nights(self) -> int:
        return math.ceil((self.check_out - self.check_in).total_seconds() / SECONDS_PER_NIGHT)

    def overlaps(self, other: 'StayPeriod') -> bool:
        return overlaps(self.check_in, self.check_out, other.check_in, other.check_out)


def overlaps(a_start: date, a_end: date, b_start: date, b_end: date) -> bool:
    return a_start < b_end and b_start < a_end
