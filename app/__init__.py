"""TMDB Addon FastAPI application package."""

from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = ["app", "create_app", "build_manifest"]

_EXPORTS = {"app": "app.main", "create_app": "app.main", "build_manifest": "app.manifest"}


def __getattr__(name: str) -> Any:
    if name in _EXPORTS:
        module = import_module(_EXPORTS[name])
        return getattr(module, name)
    raise AttributeError(f"module 'app' has no attribute {name}")
