"""
Shared BDD steps (pytest-bdd): HTTP calls against the app with the fake search backend.
"""

import pytest
from fastapi.testclient import TestClient
from pytest_bdd import given, parsers, then, when

from ecommerce_search.main import app


@pytest.fixture
def bdd_client(override_es) -> TestClient:
    return TestClient(app)


@given("the search backend is reachable")
def backend_reachable(fake_es):
    fake_es.reachable = True


@given("the search backend is unreachable")
def backend_unreachable(fake_es):
    fake_es.reachable = False


@when(parsers.parse('I request "{method}" "{path}"'), target_fixture="response")
def request_path(bdd_client: TestClient, method: str, path: str):
    return bdd_client.request(method, path)


@then(parsers.parse("the response status should be {code:d}"))
def response_status(response, code: int):
    assert response.status_code == code


@then(parsers.parse('the response body should have "{key}" equals "{value}"'))
def body_field_equals(response, key: str, value: str):
    assert response.json().get(key) == value
