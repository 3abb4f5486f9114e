from typing import Any, Awaitable, Callable

from fastapi import FastAPI, Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from keyed_di.domain import IContainer


def create_fastapi_dependency(container: IContainer, identifier: str) -> Callable[[], Any]:
    """Create a FastAPI Depends() callable that resolves an entry from the container.

    Whether the same instance is returned on every request follows the entry's
    definition: registered definitions are cached, unregistered ones are rebuilt.

    Args:
        container: The container to resolve the entry from.
        identifier: The identifier to resolve when the dependency is called.

    Returns:
        A callable that FastAPI can use with Depends().

    Example:
        >>> container = Container({
        ...     "users": object_("app.repositories.UserRepository", [entry("db")]),
        ... })
        >>>
        >>> get_users = create_fastapi_dependency(container, "users")
        >>>
        >>> @app.get("/users")
        >>> async def list_users(repo: UserRepository = Depends(get_users)):
        ...     return await repo.get_all()
    """

    def dependency() -> Any:
        """Resolve the entry from the container."""
        return container.get(identifier)

    return dependency


def create_request_dependency(identifier: str) -> Callable[[Request], Any]:
    """Create a FastAPI dependency that resolves from the container attached to the request.

    Requires the ContainerMiddleware to be installed.

    Args:
        identifier: The identifier to resolve.

    Returns:
        A callable that resolves from ``request.state.container``.

    Example:
        >>> app.add_middleware(ContainerMiddleware, container=container)
        >>>
        >>> get_settings = create_request_dependency("settings")
        >>>
        >>> @app.get("/settings")
        >>> async def show_settings(settings: dict = Depends(get_settings)):
        ...     return settings
    """

    def request_dependency(request: Request) -> Any:
        """Resolve from the request's container."""
        if not hasattr(request.state, "container"):
            raise RuntimeError(
                "Request does not have a DI container. Did you forget to add ContainerMiddleware?"
            )
        container: IContainer = request.state.container
        return container.get(identifier)

    return request_dependency


class ContainerMiddleware(BaseHTTPMiddleware):
    """Middleware that exposes a container on every request.

    The container is accessible via `request.state.container`.

    Attributes:
        container: The container attached to each request.

    Example:
        >>> app = FastAPI()
        >>> app.add_middleware(ContainerMiddleware, container=container)
        >>>
        >>> @app.get("/")
        >>> async def root(request: Request):
        ...     greeting = request.state.container.get("greeting")
        ...     return {"message": greeting}
    """

    def __init__(self, app: FastAPI, container: IContainer):
        """Initialize the middleware with the container to expose.

        Args:
            app: The FastAPI/Starlette application.
            container: The container attached to each request.
        """
        super().__init__(app)
        self.container = container

    async def dispatch(self, request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
        """Attach the container to the request and execute the endpoint.

        Args:
            request: The incoming HTTP request.
            call_next: The next middleware or endpoint handler.

        Returns:
            The response from the endpoint.
        """
        request.state.container = self.container
        return await call_next(request)
