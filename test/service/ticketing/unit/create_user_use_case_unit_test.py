from datetime import timedelta
from unittest.mock import AsyncMock

import pytest

from drivent.platform.exception.exceptions import ConflictError, DomainError
from drivent.service.ticketing.app.command.create_user_use_case import (
    DUPLICATED_EMAIL_MESSAGE,
    CreateUserUseCase,
)
from drivent.service.ticketing.domain.entity.event_entity import EventEntity
from drivent.service.ticketing.domain.entity.user_entity import UserEntity
from drivent.service.ticketing.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)
from test.shared.constants import DEFAULT_PASSWORD, TEST_EMAIL
from test.shared.factories import utc_now


def _event(*, starts_in: timedelta) -> EventEntity:
    starts_at = utc_now() + starts_in
    return EventEntity(
        title='Driven.t',
        background_image_url='linear-gradient(to right, #FA4098, #FFD77F)',
        logo_image_url='https://example.com/logo.png',
        starts_at=starts_at,
        ends_at=starts_at + timedelta(days=3),
        id=1,
    )


@pytest.fixture
def event_query_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.get_first.return_value = _event(starts_in=timedelta(days=-1))
    return repo


@pytest.fixture
def user_query_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.get_by_email.return_value = None
    return repo


@pytest.fixture
def user_command_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.create.side_effect = lambda user: UserEntity(
        email=user.email, hashed_password=user.hashed_password, id=1
    )
    return repo


@pytest.fixture
def use_case(
    user_command_repo: AsyncMock, user_query_repo: AsyncMock, event_query_repo: AsyncMock
) -> CreateUserUseCase:
    return CreateUserUseCase(
        user_command_repo=user_command_repo,
        user_query_repo=user_query_repo,
        event_query_repo=event_query_repo,
        password_hasher=BcryptPasswordHasher(rounds=4),
    )


@pytest.mark.unit
class TestCreateUserUseCase:
    @pytest.mark.asyncio
    async def test_creates_user_with_hashed_password(self, use_case: CreateUserUseCase):
        # When
        user = await use_case.create_user(email='Ada@Drivent.com', password=DEFAULT_PASSWORD)

        # Then
        assert user.id == 1
        assert user.email == 'ada@drivent.com'
        assert user.hashed_password.startswith('$2')
        assert user.hashed_password != DEFAULT_PASSWORD

    @pytest.mark.asyncio
    async def test_event_not_started_is_rejected(
        self,
        use_case: CreateUserUseCase,
        event_query_repo: AsyncMock,
        user_command_repo: AsyncMock,
    ):
        # Given
        event_query_repo.get_first.return_value = _event(starts_in=timedelta(days=2))

        # When / Then
        with pytest.raises(DomainError) as exc_info:
            await use_case.create_user(email=TEST_EMAIL, password=DEFAULT_PASSWORD)

        assert exc_info.value.status_code == 400
        user_command_repo.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_no_event_keeps_sign_up_open(
        self, use_case: CreateUserUseCase, event_query_repo: AsyncMock
    ):
        event_query_repo.get_first.return_value = None

        user = await use_case.create_user(email=TEST_EMAIL, password=DEFAULT_PASSWORD)

        assert user.email == TEST_EMAIL

    @pytest.mark.asyncio
    async def test_duplicated_email_conflicts(
        self,
        use_case: CreateUserUseCase,
        user_query_repo: AsyncMock,
        user_command_repo: AsyncMock,
    ):
        user_query_repo.get_by_email.return_value = UserEntity(email=TEST_EMAIL, id=1)

        with pytest.raises(ConflictError, match=DUPLICATED_EMAIL_MESSAGE):
            await use_case.create_user(email=TEST_EMAIL.upper(), password=DEFAULT_PASSWORD)

        user_query_repo.get_by_email.assert_awaited_once_with(email=TEST_EMAIL)
        user_command_repo.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_short_password_is_rejected(self, use_case: CreateUserUseCase):
        with pytest.raises(DomainError):
            await use_case.create_user(email=TEST_EMAIL, password='12345')
