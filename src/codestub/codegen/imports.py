# Copyright 2026 Codestub Contributors
# SPDX-License-Identifier: Apache-2.0

"""Import and include resolution for generated source files."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import TYPE_CHECKING, Any

from codestub.codegen.mapping import try_parse
from codestub.codegen.registry import get_backend
from codestub.model.entities import Parameter, ReturnSpec, signature_types
from codestub.model.types import TypeRef

if TYPE_CHECKING:
    from codestub.codegen.backends.base import Backend

# ###############
# Public Interface
# ###############


def collect_imports(backend: Backend, refs: Iterable[TypeRef]) -> list[str]:
    """Return *backend*'s baseline imports followed by the ones *refs* trigger.

    Duplicates are dropped while keeping the first occurrence, so an import
    triggered by several types appears once.
    """
    statements = list(backend.baseline_imports)
    statements.extend(backend.conditional_imports(list(refs)))
    return list(dict.fromkeys(statements))


def resolve_imports(
    parameters: Sequence[Parameter | Mapping[str, Any]],
    returns: ReturnSpec | Mapping[str, Any],
    language: str,
) -> list[str]:
    """Return the deduplicated import/include statements a signature needs in *language*.

    Type tokens that do not parse are ignored; type validation reports them.

    Raises:
        UnsupportedLanguageError: If no backend is registered for *language*.
    """
    backend = get_backend(language)
    refs = [ref for ref in (try_parse(t) for t in signature_types(parameters, returns)) if ref is not None]
    return collect_imports(backend, refs)
