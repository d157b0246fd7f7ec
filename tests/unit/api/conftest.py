"""
Name: API Test Fixtures

Responsibilities:
  - Build a minimal app (router + exception handlers + request context)
  - Provide a TestClient backed by fresh in-memory repositories
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from masterdata.api.exception_handlers import register_exception_handlers
from masterdata.crosscutting.middleware import RequestContextMiddleware
from masterdata.interfaces.api.http.router import build_router


def _build_app() -> FastAPI:
    app = FastAPI()
    app.add_middleware(RequestContextMiddleware)
    register_exception_handlers(app)
    app.include_router(build_router(), prefix="/v1")
    return app


@pytest.fixture
def client() -> TestClient:
    return TestClient(_build_app())


@pytest.fixture
def create_user(client):
    def _create(**body):
        payload = {
            "email": "taro@acme.co.jp",
            "name": "Taro Yamada",
            "role": "USER",
            "status": "ACTIVE",
        }
        payload.update(body)
        response = client.post("/v1/users", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def create_facility(client):
    def _create(**body):
        payload = {
            "code": "TKY-001",
            "name": "Tokyo Head Office",
            "category": "HEAD",
            "status": "ACTIVE",
        }
        payload.update(body)
        response = client.post("/v1/facilities", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _create
