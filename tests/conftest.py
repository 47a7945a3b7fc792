import pytest
from unittest.mock import AsyncMock, MagicMock
from app import create_app


@pytest.fixture
def gateway():
    gateway = MagicMock()
    gateway.submit_signup = AsyncMock(return_value={'id': 'test-id'})
    return gateway


@pytest.fixture
def app(gateway):
    app = create_app('testing')
    app.config['SIGNUP_GATEWAY'] = gateway
    return app


@pytest.fixture
def client(app):
    return app.test_client()
