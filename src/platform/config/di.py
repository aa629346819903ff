"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.database.db_setting import Database
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.platform.metrics.booking_metrics import metrics
from src.service.accommodation.driven_adapter.repo.accommodation_query_repo_impl import (
    AccommodationQueryRepoImpl,
)
from src.service.accommodation.driven_adapter.repo.booking_query_repo_impl import (
    BookingQueryRepoImpl,
)
from src.service.accommodation.driven_adapter.repo.payment_query_repo_impl import (
    PaymentQueryRepoImpl,
)
from src.service.accommodation.driven_adapter.repo.report_query_repo_impl import (
    ReportQueryRepoImpl,
)
from src.service.accommodation.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


class Container(containers.DeclarativeContainer):
    # Database (uses AsyncEngineManager with settings from core_setting)
    database = providers.Singleton(Database)

    # Unit of Work (one fresh instance per use case call, owns the write transaction)
    unit_of_work = providers.Factory(
        SqlAlchemyUnitOfWork, session_factory=database.provided.session
    )

    # Query repositories (stateless - open a session per call)
    accommodation_query_repo = providers.Singleton(
        AccommodationQueryRepoImpl, session_factory=database.provided.session
    )
    booking_query_repo = providers.Singleton(
        BookingQueryRepoImpl, session_factory=database.provided.session
    )
    payment_query_repo = providers.Singleton(
        PaymentQueryRepoImpl, session_factory=database.provided.session
    )
    report_query_repo = providers.Singleton(
        ReportQueryRepoImpl, session_factory=database.provided.session
    )

    # Auth service
    jwt_auth = providers.Singleton(JwtAuth)

    # Prometheus collectors are process-global; expose the module instance
    booking_metrics = providers.Object(metrics)


container = Container()
