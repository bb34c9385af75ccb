import importlib

import pytest

import config


@pytest.fixture
def reload_config(monkeypatch):
    def _reload(**env):
        for name in ('SITE_NAME', 'LOG_LEVEL', 'CATALOG_SEED_DEMO', 'API_PORT', 'SECRET_KEY'):
            monkeypatch.delenv(name, raising=False)
        for name, value in env.items():
            monkeypatch.setenv(name, value)
        return importlib.reload(config).Config

    yield _reload
    monkeypatch.undo()
    importlib.reload(config)


def test_defaults(reload_config):
    Config = reload_config()
    assert Config.SITE_NAME == 'Bibliotheque'
    assert Config.LOG_LEVEL == 'ERROR'
    assert Config.CATALOG_SEED_DEMO is True
    assert Config.API_PORT == 5054
    assert Config.SECRET_KEY


def test_environment_overrides(reload_config):
    Config = reload_config(
        SITE_NAME='Ma Bibliothèque',
        LOG_LEVEL='debug',
        CATALOG_SEED_DEMO='off',
        API_PORT='8080',
        SECRET_KEY='fixed',
    )
    assert Config.SITE_NAME == 'Ma Bibliothèque'
    assert Config.LOG_LEVEL == 'DEBUG'
    assert Config.CATALOG_SEED_DEMO is False
    assert Config.API_PORT == 8080
    assert Config.SECRET_KEY == 'fixed'


def test_create_app_applies_overrides_and_log_level():
    from bibliotheque import create_app

    app = create_app({'TESTING': True, 'LOG_LEVEL': 'INFO', 'SITE_NAME': 'Test'})
    assert app.config['SITE_NAME'] == 'Test'
    assert app.logger.level == 20
