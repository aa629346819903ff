"""
Test Configuration and Fixtures

This module provides:
- Environment setup before application modules read settings
- In-memory store wired into the DI container for API tests
- Bearer token helpers for each role

Architecture:
- Unit tests (test/**/unit/): construct use cases directly with mocks or fakes
- API tests (test/**/api/): TestClient against test.test_main.app with in-memory repos
- Integration tests (marker `integration`): real PostgreSQL, skipped when unreachable
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings are read at import time (core_setting.settings, logging config)
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    os.environ.setdefault('POSTGRES_DB', 'accommodation_test_db')

    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    os.environ.setdefault('DB_POOL_SIZE', '2')
    os.environ.setdefault('DB_POOL_MAX_OVERFLOW', '2')


_early_setup_test_environment()

from collections.abc import Callable, Generator  # noqa: E402

from dependency_injector import providers  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402

from src.platform.config.di import container  # noqa: E402
from src.service.accommodation.domain.entity.user_entity import UserEntity, UserRole  # noqa: E402
from src.service.accommodation.driving_adapter.http_controller.auth.jwt_auth import (  # noqa: E402
    JwtAuth,
)
from test.service.accommodation.fakes import (  # noqa: E402
    FakeAccommodationQueryRepo,
    FakeBookingQueryRepo,
    FakePaymentQueryRepo,
    FakeReportQueryRepo,
    FakeUnitOfWork,
    InMemoryStore,
)
from test.util_constant import (  # noqa: E402
    ADMIN_EMAIL,
    ADMIN_USER_ID,
    ANOTHER_PARTICIPANT_EMAIL,
    ANOTHER_PARTICIPANT_USER_ID,
    ORGANIZER_EMAIL,
    ORGANIZER_USER_ID,
    PARTICIPANT_EMAIL,
    PARTICIPANT_USER_ID,
)


# =============================================================================
# Users
# =============================================================================
@pytest.fixture
def admin_user() -> UserEntity:
    return UserEntity(id=ADMIN_USER_ID, role=UserRole.ADMIN, name='Admin', email=ADMIN_EMAIL)


@pytest.fixture
def organizer_user() -> UserEntity:
    return UserEntity(
        id=ORGANIZER_USER_ID, role=UserRole.ORGANIZER, name='Organizer', email=ORGANIZER_EMAIL
    )


@pytest.fixture
def participant_user() -> UserEntity:
    return UserEntity(
        id=PARTICIPANT_USER_ID,
        role=UserRole.PARTICIPANT,
        name='Participant',
        email=PARTICIPANT_EMAIL,
    )


@pytest.fixture
def another_participant_user() -> UserEntity:
    return UserEntity(
        id=ANOTHER_PARTICIPANT_USER_ID,
        role=UserRole.PARTICIPANT,
        name='Another Participant',
        email=ANOTHER_PARTICIPANT_EMAIL,
    )


# =============================================================================
# In-memory persistence
# =============================================================================
@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def fake_uow(store: InMemoryStore) -> FakeUnitOfWork:
    return FakeUnitOfWork(store)


# =============================================================================
# HTTP client
# =============================================================================
@pytest.fixture
def client(store: InMemoryStore) -> Generator[TestClient, None, None]:
    from test.test_main import app

    container.unit_of_work.override(providers.Factory(FakeUnitOfWork, store))
    container.accommodation_query_repo.override(
        providers.Object(FakeAccommodationQueryRepo(store))
    )
    container.booking_query_repo.override(providers.Object(FakeBookingQueryRepo(store)))
    container.payment_query_repo.override(providers.Object(FakePaymentQueryRepo(store)))
    container.report_query_repo.override(providers.Object(FakeReportQueryRepo(store)))
    try:
        with TestClient(app, raise_server_exceptions=False) as test_client:
            yield test_client
    finally:
        container.unit_of_work.reset_override()
        container.accommodation_query_repo.reset_override()
        container.booking_query_repo.reset_override()
        container.payment_query_repo.reset_override()
        container.report_query_repo.reset_override()


@pytest.fixture
def auth_headers() -> Callable[[UserEntity], dict[str, str]]:
    jwt_auth = JwtAuth()

    def _headers(user: UserEntity) -> dict[str, str]:
        return {'Authorization': f'Bearer {jwt_auth.create_jwt_token(user)}'}

    return _headers


@pytest.fixture
def admin_headers(
    auth_headers: Callable[[UserEntity], dict[str, str]], admin_user: UserEntity
) -> dict[str, str]:
    return auth_headers(admin_user)


@pytest.fixture
def organizer_headers(
    auth_headers: Callable[[UserEntity], dict[str, str]], organizer_user: UserEntity
) -> dict[str, str]:
    return auth_headers(organizer_user)


@pytest.fixture
def participant_headers(
    auth_headers: Callable[[UserEntity], dict[str, str]], participant_user: UserEntity
) -> dict[str, str]:
    return auth_headers(participant_user)


@pytest.fixture
def another_participant_headers(
    auth_headers: Callable[[UserEntity], dict[str, str]], another_participant_user: UserEntity
) -> dict[str, str]:
    return auth_headers(another_participant_user)


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    # Anything not explicitly integration runs without infrastructure
    for item in items:
        markers = [m.name for m in item.iter_markers()]
        if 'integration' not in markers and 'unit' not in markers:
            item.add_marker(pytest.mark.unit)
