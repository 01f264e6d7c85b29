"""ActionPipeline - synchronous, in-order action dispatch through middleware.

Each middleware is a factory ``middleware(next_dispatch) -> dispatch``. The
first middleware added is outermost, so it sees every action first and,
when it calls ``next_dispatch`` before acting, acts after all the others.

Architecture:
    dispatch(action)
           | middleware[0] → middleware[1] → ...
    base handler (state update)
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, List, Optional

from external_api.errors import PipelineError
from external_api.protocols import Action, Dispatch, LoggerProtocol, Middleware


def _identity_handler(action: Action) -> Action:
    return action


class MiddlewareRegistry:
    """Ordered collection of middleware factories.

    Usage:
        registry = MiddlewareRegistry()

        @registry.register
        def audit(next_dispatch):
            def dispatch(action):
                return next_dispatch(action)
            return dispatch

        pipeline = ActionPipeline.from_registry(registry)
    """

    def __init__(self) -> None:
        self._middleware: List[Middleware] = []

    def register(self, middleware: Middleware) -> Middleware:
        if middleware not in self._middleware:
            self._middleware.append(middleware)
        return middleware

    def unregister(self, middleware: Middleware) -> None:
        try:
            self._middleware.remove(middleware)
        except ValueError:
            pass

    def __iter__(self) -> Iterator[Middleware]:
        return iter(list(self._middleware))

    def __len__(self) -> int:
        return len(self._middleware)

    def __contains__(self, middleware: object) -> bool:
        return middleware in self._middleware


class ActionPipeline:
    """Delivers each action synchronously through the middleware chain."""

    def __init__(
        self,
        handler: Optional[Callable[[Action], Any]] = None,
        middleware: Iterable[Middleware] = (),
        logger: Optional[LoggerProtocol] = None,
    ) -> None:
        self._handler = handler or _identity_handler
        self._middleware: List[Middleware] = list(middleware)
        self._logger = logger.bind(component="action_pipeline") if logger else None
        self._building = False
        self._dispatch: Dispatch = self._handler
        self._build()

    @classmethod
    def from_registry(
        cls,
        registry: MiddlewareRegistry,
        handler: Optional[Callable[[Action], Any]] = None,
        logger: Optional[LoggerProtocol] = None,
    ) -> "ActionPipeline":
        return cls(handler=handler, middleware=registry, logger=logger)

    def use(self, middleware: Middleware) -> None:
        """Append middleware and rebuild the chain."""
        if middleware in self._middleware:
            return
        self._middleware.append(middleware)
        try:
            self._build()
        except Exception:
            self._middleware.remove(middleware)
            raise

    def remove(self, middleware: Middleware) -> None:
        try:
            self._middleware.remove(middleware)
        except ValueError:
            return
        self._build()

    @property
    def middleware(self) -> List[Middleware]:
        return list(self._middleware)

    def dispatch(self, action: Action) -> Any:
        if self._building:
            raise PipelineError(
                "Dispatching while constructing middleware is not allowed"
            )
        return self._dispatch(action)

    def _build(self) -> None:
        self._building = True
        try:
            dispatch: Dispatch = self._handler
            for factory in reversed(self._middleware):
                dispatch = factory(dispatch)
        finally:
            self._building = False
        self._dispatch = dispatch
        if self._logger:
            self._logger.debug(
                "action_pipeline_built",
                middleware_count=len(self._middleware),
            )


__all__ = ["ActionPipeline", "MiddlewareRegistry"]
