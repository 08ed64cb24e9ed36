"""
Fixture composition engine.

Fixtures are named setup functions whose parameters name the fixtures
they depend on. A generator fixture yields its value once; whatever
follows the ``yield`` is its teardown::

    registry = FixtureRegistry()

    @registry.fixture
    def browser_context(browser, config):
        context = browser.new_context(**config.context_options())
        yield context
        context.close()

Every test invocation opens its own :class:`FixtureScope`. The scope
resolves dependencies depth-first, sets each fixture up at most once,
and on close resumes the generators in exact reverse order of setup
completion, so a context always outlives the pages created in it.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Generator
from typing import Any

from harness.errors import (
    FixtureDefinitionError,
    FixtureLookupError,
    FixtureSetupError,
    HarnessError,
)

logger = logging.getLogger(__name__)

_VARIADIC = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


def _named_parameters(func: Callable[..., Any]) -> dict[str, inspect.Parameter]:
    """Parameters of ``func`` that can name a fixture (``*args``/``**kwargs`` excluded)."""
    return {
        name: param
        for name, param in inspect.signature(func).parameters.items()
        if param.kind not in _VARIADIC
    }


class FixtureDef:
    """A registered fixture: its name, setup function and dependency names."""

    def __init__(self, name: str, func: Callable[..., Any], dependencies: tuple[str, ...]):
        self.name = name
        self.func = func
        self.dependencies = dependencies
        self.is_generator = inspect.isgeneratorfunction(func)

    def __repr__(self) -> str:
        return f"FixtureDef({self.name!r}, dependencies={self.dependencies!r})"


class FixtureRegistry:
    """Collection of fixture definitions that scopes resolve against."""

    def __init__(self) -> None:
        self._defs: dict[str, FixtureDef] = {}

    def fixture(self, func: Callable[..., Any] | None = None, *, name: str | None = None):
        """
        Register a fixture function.

        Usable bare (``@registry.fixture``) or with a name override
        (``@registry.fixture(name="session")``). The function is returned
        unchanged so it can still be called directly.

        Raises:
            FixtureDefinitionError: The name is already registered.
        """

        def register(fn: Callable[..., Any]) -> Callable[..., Any]:
            fixture_name = name or fn.__name__
            if fixture_name in self._defs:
                raise FixtureDefinitionError(
                    f"Fixture '{fixture_name}' is already registered"
                )
            dependencies = tuple(_named_parameters(fn))
            self._defs[fixture_name] = FixtureDef(fixture_name, fn, dependencies)
            return fn

        if func is None:
            return register
        return register(func)

    def get(self, name: str) -> FixtureDef:
        try:
            return self._defs[name]
        except KeyError:
            available = ", ".join(sorted(self._defs)) or "<none>"
            raise FixtureLookupError(
                f"Fixture '{name}' not found (available: {available})"
            ) from None

    def __contains__(self, name: object) -> bool:
        return name in self._defs

    @property
    def names(self) -> list[str]:
        return sorted(self._defs)

    def scope(self, **provided: Any) -> FixtureScope:
        """
        Open a fresh resolution scope.

        Args:
            **provided: Ready-made values (e.g. ``browser``, ``config``)
                that fixtures may depend on. They have no setup or teardown.
        """
        return FixtureScope(self, provided)

    def run(self, func: Callable[..., Any], **provided: Any) -> Any:
        """Resolve ``func``'s parameters in a new scope, call it, then tear down."""
        with self.scope(**provided) as scope:
            return scope.call(func)


class FixtureScope:
    """
    Fixture instances belonging to one test invocation.

    Nothing is shared between scopes: two scopes over the same registry
    run every setup function independently.
    """

    def __init__(self, registry: FixtureRegistry, provided: dict[str, Any]):
        self._registry = registry
        self._values: dict[str, Any] = dict(provided)
        self._finalizers: list[tuple[str, Generator[Any, None, None]]] = []
        self._resolving: list[str] = []
        self._closed = False
        self.setup_order: list[str] = []

    def __enter__(self) -> FixtureScope:
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> bool:
        if exc_value is None:
            self.close()
            return False
        try:
            self.close()
        except Exception:
            # The consumer's failure is the one to report.
            logger.exception("Teardown failed while handling %s", exc_type.__name__)
        return False

    @property
    def closed(self) -> bool:
        return self._closed

    def request(self, name: str) -> Any:
        """
        Return the value of fixture ``name``, setting it up if needed.

        Raises:
            FixtureLookupError: Unknown name or a dependency cycle.
            FixtureSetupError: The fixture (or one of its dependencies)
                raised during setup.
        """
        if self._closed:
            raise HarnessError(f"Cannot request fixture '{name}' from a closed scope")
        if name in self._values:
            return self._values[name]
        if name in self._resolving:
            cycle = " -> ".join([*self._resolving[self._resolving.index(name):], name])
            raise FixtureLookupError(f"Fixture dependency cycle: {cycle}")

        fixturedef = self._registry.get(name)
        self._resolving.append(name)
        try:
            kwargs = {dep: self.request(dep) for dep in fixturedef.dependencies}
            value = self._setup(fixturedef, kwargs)
        finally:
            self._resolving.pop()

        self._values[name] = value
        return value

    def peek(self, name: str, default: Any = None) -> Any:
        """Value of ``name`` if it is already set up, without triggering setup."""
        return self._values.get(name, default)

    def call(self, func: Callable[..., Any]) -> Any:
        """Invoke ``func`` with each of its parameters bound to a fixture value."""
        kwargs = {}
        for param in _named_parameters(func).values():
            if param.default is not param.empty and param.name not in self._registry:
                continue
            kwargs[param.name] = self.request(param.name)
        return func(**kwargs)

    def close(self) -> None:
        """
        Tear down every fixture that finished setup, last acquired first.

        All teardowns run even when one of them raises; the first error is
        re-raised once the chain is done.
        """
        if self._closed:
            return
        self._closed = True

        first_error: Exception | None = None
        while self._finalizers:
            name, generator = self._finalizers.pop()
            try:
                self._teardown(name, generator)
            except Exception as exc:
                logger.warning("Teardown of fixture '%s' failed: %s", name, exc)
                if first_error is None:
                    first_error = exc
        self._values.clear()

        if first_error is not None:
            raise first_error

    def _setup(self, fixturedef: FixtureDef, kwargs: dict[str, Any]) -> Any:
        name = fixturedef.name
        logger.debug("Setting up fixture '%s'", name)
        try:
            if fixturedef.is_generator:
                generator = fixturedef.func(**kwargs)
                value = next(generator)
                self._finalizers.append((name, generator))
            else:
                value = fixturedef.func(**kwargs)
        except StopIteration:
            raise FixtureSetupError(name, f"Fixture '{name}' did not yield a value") from None
        except FixtureSetupError:
            raise
        except Exception as exc:
            raise FixtureSetupError(
                name, f"Setup of fixture '{name}' failed: {type(exc).__name__}: {exc}"
            ) from exc

        self.setup_order.append(name)
        return value

    def _teardown(self, name: str, generator: Generator[Any, None, None]) -> None:
        logger.debug("Tearing down fixture '%s'", name)
        try:
            next(generator)
        except StopIteration:
            return
        generator.close()
        raise FixtureDefinitionError(f"Fixture '{name}' yielded more than once")
