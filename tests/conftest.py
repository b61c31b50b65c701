import pytest

from api.server import create_app
from config.env import ServerConfig


@pytest.fixture
def config():
    return ServerConfig(port=0, frontend_origin="http://localhost:5173")


@pytest.fixture
def app(config):
    app = create_app(config)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
