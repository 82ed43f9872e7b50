from unittest.mock import AsyncMock, Mock

from pydantic import SecretStr
import pytest

from drivent.platform.exception.exceptions import AuthenticationError
from drivent.service.ticketing.app.command.sign_in_use_case import SignInUseCase
from drivent.service.ticketing.domain.entity.session_entity import SessionEntity
from drivent.service.ticketing.domain.entity.user_entity import UserEntity
from drivent.service.ticketing.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)
from test.shared.constants import DEFAULT_PASSWORD, TEST_EMAIL


@pytest.fixture
def password_hasher() -> BcryptPasswordHasher:
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def user_query_repo(password_hasher: BcryptPasswordHasher) -> AsyncMock:
    repo = AsyncMock()
    repo.get_by_email.return_value = UserEntity(
        email=TEST_EMAIL,
        hashed_password=password_hasher.hash_password(plain_password=SecretStr(DEFAULT_PASSWORD)),
        id=1,
    )
    return repo


@pytest.fixture
def session_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.create.side_effect = lambda session: SessionEntity(
        user_id=session.user_id, token=session.token, id=10
    )
    return repo


@pytest.fixture
def token_service() -> Mock:
    service = Mock()
    service.issue.return_value = 'signed.jwt.token'
    return service


@pytest.fixture
def use_case(
    user_query_repo: AsyncMock,
    session_repo: AsyncMock,
    token_service: Mock,
    password_hasher: BcryptPasswordHasher,
) -> SignInUseCase:
    return SignInUseCase(
        user_query_repo=user_query_repo,
        session_repo=session_repo,
        token_service=token_service,
        password_hasher=password_hasher,
    )


@pytest.mark.unit
class TestSignInUseCase:
    @pytest.mark.asyncio
    async def test_issues_token_and_stores_session(
        self, use_case: SignInUseCase, token_service: Mock, session_repo: AsyncMock
    ):
        # When
        user, session = await use_case.sign_in(email=TEST_EMAIL, password=DEFAULT_PASSWORD)

        # Then
        assert user.id == 1
        assert session.token == 'signed.jwt.token'
        assert session.user_id == 1
        token_service.issue.assert_called_once_with(user_id=1)
        session_repo.create.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_wrong_password_is_unauthorized(
        self, use_case: SignInUseCase, session_repo: AsyncMock
    ):
        with pytest.raises(AuthenticationError) as exc_info:
            await use_case.sign_in(email=TEST_EMAIL, password='wrong-password')

        assert exc_info.value.status_code == 401
        session_repo.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_email_is_unauthorized(
        self, use_case: SignInUseCase, user_query_repo: AsyncMock
    ):
        user_query_repo.get_by_email.return_value = None

        with pytest.raises(AuthenticationError):
            await use_case.sign_in(email='nobody@drivent.com', password=DEFAULT_PASSWORD)

    @pytest.mark.asyncio
    async def test_email_lookup_is_case_insensitive(
        self, use_case: SignInUseCase, user_query_repo: AsyncMock
    ):
        await use_case.sign_in(email=TEST_EMAIL.upper(), password=DEFAULT_PASSWORD)

        user_query_repo.get_by_email.assert_awaited_once_with(email=TEST_EMAIL)
