from typing import Any, Dict

from fastapi.testclient import TestClient

from drivent.platform.constant.route_constant import AUTH_SIGN_IN, USER_BASE
from test.shared.constants import DEFAULT_PASSWORD


def assert_response_status(response, expected_status: int, message: str | None = None):
    response_text = getattr(response, 'text', getattr(response, 'content', 'N/A'))
    assert response.status_code == expected_status, (
        message or f'Expected {expected_status}, got {response.status_code}: {response_text}'
    )


def create_user(
    client: TestClient, email: str, password: str = DEFAULT_PASSWORD
) -> Dict[str, Any]:
    response = client.post(USER_BASE, json={'email': email, 'password': password})
    assert_response_status(response, 201, f'Failed to create user {email}')
    return response.json()


def sign_in(client: TestClient, email: str, password: str = DEFAULT_PASSWORD) -> Dict[str, Any]:
    response = client.post(AUTH_SIGN_IN, json={'email': email, 'password': password})
    assert_response_status(response, 200, f'Sign-in failed: {response.text}')
    return response.json()


def auth_headers(token: str) -> Dict[str, str]:
    return {'Authorization': f'Bearer {token}'}


def create_signed_in_user(client: TestClient, email: str) -> tuple[int, Dict[str, str]]:
    """Sign up + sign in through the API; returns (user_id, auth headers)."""
    user = create_user(client, email)
    session = sign_in(client, email)
    return user['id'], auth_headers(session['token'])
