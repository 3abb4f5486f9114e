"""Integration tests for FastAPI integration across layers."""

import pytest

pytest.importorskip("fastapi")

from unittest.mock import Mock

from fastapi import Depends, FastAPI, Request
from starlette.responses import Response

from keyed_di import Container, entry, object_
from keyed_di.infrastructure.fastapi_integration.integration import (
    ContainerMiddleware,
    create_fastapi_dependency,
    create_request_dependency,
)


class Database:
    def get_data(self):
        return {"data": "test"}


class UserService:
    def __init__(self, db):
        self.db = db

    def get_users(self):
        return self.db.get_data()


class TestFastAPIIntegrationEndToEnd:
    """Test complete FastAPI integration scenarios."""

    def test_fastapi_app_with_dependency_injection(self):
        """Test creating a FastAPI app with container-backed dependencies."""
        app = FastAPI()
        container = Container(
            {
                "db": object_(Database),
                "users": object_(UserService, [entry("db")]),
            }
        )
        get_user_service = create_fastapi_dependency(container, "users")

        @app.get("/users")
        def get_users(service: UserService = Depends(get_user_service)):
            return service.get_users()

        service = get_user_service()
        assert isinstance(service, UserService)
        assert service.get_users() == {"data": "test"}

    def test_multiple_dependencies_share_registered_entry(self):
        """Test that dependencies for different entries share a registered dependency."""
        container = Container(
            {
                "db": object_(Database),
                "users": object_(UserService, [entry("db")], registered=False),
            }
        )
        get_users = create_fastapi_dependency(container, "users")
        get_db = create_fastapi_dependency(container, "db")

        assert get_users().db is get_db()
        assert get_users() is not get_users()

    @pytest.mark.asyncio
    async def test_middleware_and_request_dependency(self):
        """Test that a request dependency resolves through the middleware's container."""
        container = Container({"db": object_(Database)})
        middleware = ContainerMiddleware(FastAPI(), container)
        get_db = create_request_dependency("db")
        request = Mock(spec=Request)
        request.state = Mock(spec=[])
        resolved = []

        async def endpoint(req):
            resolved.append(get_db(req))
            return Response("OK", status_code=200)

        response = await middleware.dispatch(request, endpoint)

        assert response.status_code == 200
        assert resolved == [container.get("db")]
