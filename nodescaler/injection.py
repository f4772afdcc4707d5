"""Values scoped to the current execution context."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, TypeVar

from nodescaler.model import NamespacedName
from nodescaler.options import Options

T = TypeVar("T")

_namespaced_name: ContextVar[NamespacedName | None] = ContextVar(
    "namespaced_name", default=None
)
_options: ContextVar[Options | None] = ContextVar("options", default=None)
_config: ContextVar[Any] = ContextVar("config", default=None)
_controller_name: ContextVar[str | None] = ContextVar("controller_name", default=None)


@contextmanager
def _bound(var: ContextVar, value: T) -> Iterator[T]:
    token = var.set(value)
    try:
        yield value
    finally:
        var.reset(token)


def with_namespaced_name(namespaced_name: NamespacedName):
    """Bind the namespaced name for the duration of a with block."""
    return _bound(_namespaced_name, namespaced_name)


def get_namespaced_name() -> NamespacedName:
    value = _namespaced_name.get()
    return NamespacedName() if value is None else value


def with_options(opts: Options):
    """Bind the options for the duration of a with block."""
    return _bound(_options, opts)


def get_options() -> Options:
    value = _options.get()
    return Options() if value is None else value


def with_config(config: Any):
    """Bind the client configuration for the duration of a with block."""
    return _bound(_config, config)


def get_config() -> Any:
    return _config.get()


def with_controller_name(name: str):
    """Bind the controller name for the duration of a with block."""
    return _bound(_controller_name, name)


def get_controller_name() -> str:
    value = _controller_name.get()
    return "" if value is None else value