"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from drivent.platform.config.core_setting import Settings, settings
from drivent.platform.database.orm_db_setting import Database
from drivent.service.lodging.driven_adapter.repo.booking_command_repo_impl import (
    BookingCommandRepoImpl,
)
from drivent.service.lodging.driven_adapter.repo.booking_query_repo_impl import (
    BookingQueryRepoImpl,
)
from drivent.service.lodging.driven_adapter.repo.hotel_query_repo_impl import HotelQueryRepoImpl
from drivent.service.ticketing.driven_adapter.client.via_cep_client_impl import ViaCepClientImpl
from drivent.service.ticketing.driven_adapter.repo.enrollment_command_repo_impl import (
    EnrollmentCommandRepoImpl,
)
from drivent.service.ticketing.driven_adapter.repo.enrollment_query_repo_impl import (
    EnrollmentQueryRepoImpl,
)
from drivent.service.ticketing.driven_adapter.repo.event_query_repo_impl import EventQueryRepoImpl
from drivent.service.ticketing.driven_adapter.repo.payment_command_repo_impl import (
    PaymentCommandRepoImpl,
)
from drivent.service.ticketing.driven_adapter.repo.payment_query_repo_impl import (
    PaymentQueryRepoImpl,
)
from drivent.service.ticketing.driven_adapter.repo.session_repo_impl import SessionRepoImpl
from drivent.service.ticketing.driven_adapter.repo.ticket_command_repo_impl import (
    TicketCommandRepoImpl,
)
from drivent.service.ticketing.driven_adapter.repo.ticket_query_repo_impl import (
    TicketQueryRepoImpl,
)
from drivent.service.ticketing.driven_adapter.repo.user_command_repo_impl import (
    UserCommandRepoImpl,
)
from drivent.service.ticketing.driven_adapter.repo.user_query_repo_impl import UserQueryRepoImpl
from drivent.service.ticketing.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)
from drivent.service.ticketing.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database (uses AsyncEngineManager, one engine per event loop)
    database = providers.Singleton(Database)

    # Ticketing repositories (stateless - use session_factory per-request)
    user_command_repo = providers.Singleton(
        UserCommandRepoImpl, session_factory=database.provided.session
    )
    user_query_repo = providers.Singleton(
        UserQueryRepoImpl, session_factory=database.provided.session
    )
    session_repo = providers.Singleton(SessionRepoImpl, session_factory=database.provided.session)
    event_query_repo = providers.Singleton(
        EventQueryRepoImpl, session_factory=database.provided.session
    )
    enrollment_command_repo = providers.Singleton(
        EnrollmentCommandRepoImpl, session_factory=database.provided.session
    )
    enrollment_query_repo = providers.Singleton(
        EnrollmentQueryRepoImpl, session_factory=database.provided.session
    )
    ticket_command_repo = providers.Singleton(
        TicketCommandRepoImpl, session_factory=database.provided.session
    )
    ticket_query_repo = providers.Singleton(
        TicketQueryRepoImpl, session_factory=database.provided.session
    )
    payment_command_repo = providers.Singleton(
        PaymentCommandRepoImpl, session_factory=database.provided.session
    )
    payment_query_repo = providers.Singleton(
        PaymentQueryRepoImpl, session_factory=database.provided.session
    )

    # Lodging repositories
    hotel_query_repo = providers.Singleton(
        HotelQueryRepoImpl, session_factory=database.provided.session
    )
    booking_command_repo = providers.Singleton(
        BookingCommandRepoImpl, session_factory=database.provided.session
    )
    booking_query_repo = providers.Singleton(
        BookingQueryRepoImpl, session_factory=database.provided.session
    )

    # Auth services
    password_hasher = providers.Singleton(BcryptPasswordHasher, rounds=settings.BCRYPT_ROUNDS)
    jwt_auth = providers.Singleton(JwtAuth)

    # External postal code lookup (overridden in tests)
    via_cep_client = providers.Singleton(
        ViaCepClientImpl,
        base_url=settings.VIA_CEP_BASE_URL,
        timeout=settings.VIA_CEP_TIMEOUT,
    )


container = Container()


def setup() -> None:
    container.config_service()


def cleanup() -> None:
    container.reset_singletons()
