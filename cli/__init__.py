"""CLI package for running and querying the CEP weather service."""

from importlib import import_module
from types import ModuleType


def __getattr__(name: str) -> ModuleType:
    # Lazy so ``cli.app`` stays the module, not the Typer instance.
    if name == "app":
        return import_module("cli.app")
    raise AttributeError(name)
