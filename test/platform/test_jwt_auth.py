from datetime import datetime, timedelta, timezone

import jwt
import pytest

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import AuthenticationError
from src.service.accommodation.domain.entity.user_entity import UserEntity, UserRole
from src.service.accommodation.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


pytestmark = pytest.mark.unit


class TestJwtAuth:
    def test_token_round_trips_identity(self, organizer_user):
        jwt_auth = JwtAuth()

        user = jwt_auth.get_current_user_info_from_jwt(jwt_auth.create_jwt_token(organizer_user))

        assert user.id == organizer_user.id
        assert user.role == UserRole.ORGANIZER
        assert user.email == organizer_user.email
        assert user.is_staff

    def test_missing_token(self):
        with pytest.raises(AuthenticationError) as exc_info:
            JwtAuth().get_current_user_info_from_jwt(None)

        assert exc_info.value.message == 'Not authenticated'
        assert exc_info.value.status_code == 401

    def test_tampered_token(self, participant_user):
        token = JwtAuth().create_jwt_token(participant_user)

        with pytest.raises(AuthenticationError) as exc_info:
            JwtAuth().get_current_user_info_from_jwt(token[:-2] + 'xx')

        assert exc_info.value.message == 'Invalid token'

    def test_expired_token(self):
        past = datetime.now(timezone.utc) - timedelta(hours=2)
        token = jwt.encode(
            {'user_id': 3, 'role': 'participant', 'iat': past, 'exp': past + timedelta(minutes=1)},
            settings.SECRET_KEY.get_secret_value(),
            algorithm=settings.ALGORITHM,
        )

        with pytest.raises(AuthenticationError):
            JwtAuth().get_current_user_info_from_jwt(token)

    def test_unknown_role(self):
        token = jwt.encode(
            {'user_id': 3, 'role': 'superuser'},
            settings.SECRET_KEY.get_secret_value(),
            algorithm=settings.ALGORITHM,
        )

        with pytest.raises(AuthenticationError) as exc_info:
            JwtAuth().get_current_user_info_from_jwt(token)

        assert exc_info.value.message == 'Invalid token'

    @pytest.mark.parametrize(
        'role,is_admin,is_staff',
        [
            (UserRole.ADMIN, True, True),
            (UserRole.ORGANIZER, False, True),
            (UserRole.PARTICIPANT, False, False),
            (UserRole.SPONSOR, False, False),
        ],
    )
    def test_role_capabilities(self, role, is_admin, is_staff):
        user = UserEntity(id=1, role=role)

        assert user.is_admin is is_admin
        assert user.is_staff is is_staff
        assert user.can_access_booking_of(1)
        assert user.can_access_booking_of(2) is is_staff
