import functools
import inspect
from typing import Any, Awaitable, Callable

from fastapi import FastAPI, Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from beanwire.domain import IResolver


def create_fastapi_dependency(resolver: IResolver, name: str) -> Callable[[], Any]:
    """Create a FastAPI Depends() callable that resolves a bean by name.

    The resolved instance follows the bean's access mode: singletons are
    shared across requests, transient beans are rebuilt on each call.

    Args:
        resolver: The resolver to resolve the bean from.
        name: Name of the bean.

    Returns:
        A callable that FastAPI can use with Depends().

    Example:
        >>> resolver = Resolver(bean_map)
        >>> get_user_repo = create_fastapi_dependency(resolver, "user_repository")
        >>>
        >>> @app.get("/users")
        >>> async def list_users(repo: UserRepository = Depends(get_user_repo)):
        ...     return await repo.get_all()
    """

    def dependency() -> Any:
        """Resolve the bean from the resolver."""
        return resolver.resolve(name)

    return dependency


def create_request_dependency(name: str) -> Callable[[Request], Any]:
    """Create a FastAPI dependency resolving from the request's resolver.

    Requires the ResolverMiddleware to be installed.

    Args:
        name: Name of the bean.

    Returns:
        A callable that resolves from ``request.state.resolver``.

    Example:
        >>> app.add_middleware(ResolverMiddleware, resolver=resolver)
        >>>
        >>> get_clock = create_request_dependency("clock")
        >>>
        >>> @app.get("/now")
        >>> async def now(clock: Clock = Depends(get_clock)):
        ...     return {"now": clock.now()}
    """

    def request_dependency(request: Request) -> Any:
        """Resolve from the request's resolver."""
        if not hasattr(request.state, "resolver"):
            raise RuntimeError("Request does not have a resolver. Did you forget to add ResolverMiddleware?")
        resolver: IResolver = request.state.resolver
        return resolver.resolve(name)

    return request_dependency


class ResolverMiddleware(BaseHTTPMiddleware):
    """Middleware that exposes a resolver on every request.

    The resolver is accessible via ``request.state.resolver``.

    Attributes:
        resolver: The resolver attached to requests.

    Example:
        >>> app = FastAPI()
        >>> app.add_middleware(ResolverMiddleware, resolver=Resolver(bean_map))
        >>>
        >>> @app.get("/")
        >>> async def root(request: Request):
        ...     mailer = request.state.resolver.resolve("mailer")
        ...     return {"message": "Hello"}
    """

    def __init__(self, app: FastAPI, resolver: IResolver):
        super().__init__(app)
        self.resolver = resolver

    async def dispatch(self, request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
        request.state.resolver = self.resolver
        return await call_next(request)


def inject_beans(resolver: IResolver, *names: str) -> Callable:
    """Decorator that injects beans into an endpoint as keyword arguments.

    Each name is both the bean name and the keyword argument it fills.
    Arguments already passed by the caller are left untouched.

    Args:
        resolver: The resolver to resolve beans from.
        *names: Bean names to inject.

    Returns:
        A decorator function.

    Example:
        >>> @inject_beans(resolver, "user_service")
        >>> async def list_users(user_service=None):
        ...     return await user_service.get_all()
    """

    def decorator(func: Callable) -> Callable:
        """Wrap the function with bean injection."""

        def inject(kwargs: dict) -> dict:
            for name in names:
                if kwargs.get(name) is None:
                    kwargs[name] = resolver.resolve(name)
            return kwargs

        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args, **kwargs):
                return await func(*args, **inject(kwargs))

            return async_wrapper

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **inject(kwargs))

        return wrapper

    return decorator
