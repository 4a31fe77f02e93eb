# Copyright 2026 Codestub Contributors
# SPDX-License-Identifier: Apache-2.0

"""Registry mapping language names to generator backends.

Backends register themselves with :func:`register_backend` when the
``codestub.codegen.backends`` package is imported; new languages are added by
registering another backend class, never by editing a central switch.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from codestub.errors import UnsupportedLanguageError

if TYPE_CHECKING:
    from codestub.codegen.backends.base import Backend

_B = TypeVar("_B", bound="type[Backend]")

# ###############
# Public Interface
# ###############


def register_backend(backend_cls: _B) -> _B:
    """Class decorator that instantiates *backend_cls* and registers it under its language.

    Raises:
        ValueError: If another backend is already registered for the same language.
    """
    language = backend_cls.language
    existing = _REGISTRY.get(language)
    if existing is not None and type(existing) is not backend_cls:
        raise ValueError(f"A backend is already registered for language '{language}'")
    _REGISTRY[language] = backend_cls()
    return backend_cls


def get_backend(language: str) -> Backend:
    """Return the backend registered for *language*.

    Raises:
        UnsupportedLanguageError: If no backend is registered for *language*.
    """
    _load_builtin_backends()
    backend = _REGISTRY.get(language)
    if backend is None:
        raise UnsupportedLanguageError(language)
    return backend


def is_registered(language: str) -> bool:
    """Return True if a backend is registered for *language*."""
    _load_builtin_backends()
    return language in _REGISTRY


def registered_languages() -> tuple[str, ...]:
    """Return the registered language names in registration order."""
    _load_builtin_backends()
    return tuple(_REGISTRY)


# ################
# Implementation
# ################

_REGISTRY: dict[str, Backend] = {}


def _load_builtin_backends() -> None:
    """Import the built-in backend modules so that they self-register."""
    import codestub.codegen.backends  # noqa: F401
