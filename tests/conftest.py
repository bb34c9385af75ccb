import pytest

from bibliotheque import create_app
from bibliotheque.services import reset_all_services


@pytest.fixture(autouse=True)
def fresh_services():
    reset_all_services()
    yield
    reset_all_services()


@pytest.fixture
def app():
    return create_app({'TESTING': True, 'CATALOG_SEED_DEMO': False})


@pytest.fixture
def client(app):
    return app.test_client()
