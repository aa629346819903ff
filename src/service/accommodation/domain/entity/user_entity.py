from enum import Enum
from typing import Optional

import attrs


class UserRole(str, Enum):
    ADMIN = 'admin'
    ORGANIZER = 'organizer'
    PARTICIPANT = 'participant'
    JUDGE = 'judge'
    SPONSOR = 'sponsor'


STAFF_ROLES = frozenset({UserRole.ADMIN, UserRole.ORGANIZER})


@attrs.define
class UserEntity:
    """Caller identity rebuilt from the bearer token (users live in another service)"""

    id: int
    role: UserRole = UserRole.PARTICIPANT
    name: str = ''
    email: str = ''

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @property
    def is_staff(self) -> bool:
        return self.role in STAFF_ROLES

    def can_access_booking_of(self, owner_id: Optional[int]) -> bool:
        return self.is_staff or owner_id == self.id
