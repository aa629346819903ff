from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.exception.exceptions import ForbiddenError
from src.service.accommodation.domain.entity.user_entity import UserEntity
from src.service.accommodation.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


bearer_scheme = HTTPBearer(auto_error=False)


class RoleAuthStrategy:
    @staticmethod
    def can_manage_inventory(user: UserEntity) -> bool:
        return user.is_admin

    @staticmethod
    def can_manage_bookings(user: UserEntity) -> bool:
        return user.is_staff


@inject
async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> UserEntity:
    """Caller identity from the Authorization: Bearer header (stateless, no DB query)"""
    token = credentials.credentials if credentials else None
    return jwt_auth.get_current_user_info_from_jwt(token)


async def require_admin(current_user: UserEntity = Depends(get_current_user)) -> UserEntity:
    tracer = trace.get_tracer(__name__)
    with tracer.start_as_current_span(
        'auth.require_admin',
        attributes={
            'user.id': current_user.id,
            'user.role': current_user.role.value,
        },
    ):
        if not RoleAuthStrategy.can_manage_inventory(current_user):
            raise ForbiddenError('Admin access required')
        return current_user


async def require_staff(current_user: UserEntity = Depends(get_current_user)) -> UserEntity:
    if not RoleAuthStrategy.can_manage_bookings(current_user):
        raise ForbiddenError('Only admins and organizers can perform this action')
    return current_user
