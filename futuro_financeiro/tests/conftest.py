from __future__ import annotations

import pytest
from flask import Flask
from flask.testing import FlaskClient

from futuro_financeiro.app import create_app
from futuro_financeiro.config import Settings


@pytest.fixture()
def app(tmp_path) -> Flask:
    settings = Settings(history_path=str(tmp_path / "historico.json"), log_level="DEBUG")
    return create_app(settings)


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client
