"""
Load Adapter
Normalizes the runtime's load-completion signal into one session handle.

Depending on the runtime build, the loaded session shows up as the context
bound to the on_load callback, as the constructor's return value, or as the
callback's argument. Everything downstream only ever sees the normalized
session.
"""

import asyncio
from typing import Any, Callable

from core import get_logger
from core.errors import FatalLoadError

from .access import has_method

logger = get_logger(__name__)


def is_session(candidate: Any) -> bool:
    """A usable session can play and carries a loaded file."""
    return has_method(candidate, "play") and getattr(candidate, "file", None) is not None


def normalize_session(bound: Any = None, constructed: Any = None, argument: Any = None) -> Any:
    """
    Pick the loaded session out of the three places it may appear.

    Priority: bound context, constructor return value, callback argument.

    Raises:
        FatalLoadError: If none of the candidates is a usable session
    """
    for source, candidate in (("bound", bound), ("constructed", constructed), ("argument", argument)):
        if is_session(candidate):
            logger.debug("session_identified", source=source)
            return candidate

    logger.error(
        "session_not_identified",
        bound=type(bound).__name__,
        constructed=type(constructed).__name__,
        argument=type(argument).__name__,
    )
    raise FatalLoadError("Failed to obtain valid Rive instance after load.")


def bound_context(argument: Any, kwargs: dict[str, Any]) -> Any:
    """Context bound to an on_load call: `context=` keyword or the event's target."""
    if "context" in kwargs:
        return kwargs["context"]
    return getattr(argument, "target", None)


def resolve_constructor(engine: Any) -> Callable[..., Any]:
    """
    Find the session constructor on a runtime engine.

    Raises:
        FatalLoadError: If no constructor is exposed
    """
    if engine is None:
        raise FatalLoadError("Rive engine not provided.")
    if callable(getattr(engine, "Rive", None)):
        return engine.Rive
    default = getattr(engine, "default", None)
    if default is not None and callable(getattr(default, "Rive", None)):
        return default.Rive
    if callable(engine) and getattr(engine, "__name__", "") == "Rive":
        return engine
    raise FatalLoadError("Rive constructor not found on engine or its .default attribute.")


class LoadOutcome:
    """
    Single-resolution outcome of a load.

    Settles exactly once: the first resolve/reject wins and later attempts
    are logged and dropped.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None):
        self._loop = loop or asyncio.get_running_loop()
        self.future: asyncio.Future[Any] = self._loop.create_future()

    @property
    def settled(self) -> bool:
        return self.future.done()

    def resolve(self, value: Any) -> bool:
        if self.settled:
            logger.warning("outcome_already_settled", attempted="resolve")
            return False
        self.future.set_result(value)
        return True

    def reject(self, error: BaseException) -> bool:
        if self.settled:
            logger.warning("outcome_already_settled", attempted="reject", error=str(error))
            return False
        self.future.set_exception(error)
        return True

    def __await__(self):
        return self.future.__await__()


class SessionLoader:
    """
    Bridges runtime callbacks to a LoadOutcome.

    `on_load` may fire before the constructor has returned. When no usable
    session is visible at that point the call is parked, and handled again
    once `attach` supplies the constructed object.
    """

    def __init__(self, outcome: LoadOutcome, on_session: Callable[[Any], Any]):
        self.outcome = outcome
        self.on_session = on_session
        self.constructed: Any = None
        self._constructor_returned = False
        self._pending: tuple[Any, Any] | None = None

    def on_load(self, *args: Any, **kwargs: Any) -> None:
        """Callback handed to the runtime as `on_load`."""
        argument = args[0] if args else None
        bound = bound_context(argument, kwargs)
        logger.debug("on_load_called", has_argument=argument is not None, has_bound=bound is not None)

        if not self._constructor_returned and not (is_session(bound) or is_session(argument)):
            self._pending = (bound, argument)
            return
        self._complete(bound, argument)

    def on_load_error(self, error: Any = None, *args: Any) -> None:
        """Callback handed to the runtime as `on_load_error`."""
        logger.error("runtime_load_error", error=str(error))
        original = error if isinstance(error, BaseException) else None
        self.outcome.reject(FatalLoadError(f"Rive failed to load file: {error}", original))

    def attach(self, constructed: Any) -> None:
        """Record the constructor's return value and flush a parked on_load."""
        self.constructed = constructed
        self._constructor_returned = True
        if self._pending is not None:
            bound, argument = self._pending
            self._pending = None
            self._complete(bound, argument)

    def _complete(self, bound: Any, argument: Any) -> None:
        if self.outcome.settled:
            logger.warning("on_load_after_settle")
            return
        try:
            session = normalize_session(bound, self.constructed, argument)
            result = self.on_session(session)
        except FatalLoadError as e:
            self.outcome.reject(e)
        except Exception as e:
            logger.error("pipeline_failed", error=str(e), exc_info=True)
            self.outcome.reject(FatalLoadError(f"Parsing failed: {e}", e))
        else:
            self.outcome.resolve(result)
