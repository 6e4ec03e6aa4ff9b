from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from investcalc.app import create_app


@pytest.fixture()
def client() -> FlaskClient:
    flask_app = create_app()
    flask_app.config["TESTING"] = True
    with flask_app.test_client() as test_client:
        yield test_client
