# Copyright 2026 Codestub Contributors
# SPDX-License-Identifier: Apache-2.0

"""Code generation pipeline: type mapping, defaults, imports, helper types, and backends."""

from codestub.codegen.auxiliary import auxiliary_definition, needs_auxiliary_type, tree_value_type
from codestub.codegen.defaults import get_default_return, synthesize_default
from codestub.codegen.generator import coerce_signature, generate
from codestub.codegen.imports import resolve_imports
from codestub.codegen.mapped import MappedType, Shape
from codestub.codegen.mapping import (
    DEFAULT_MAX_NESTING_DEPTH,
    describe_type,
    get_type_mapping,
    map_type,
    resolve_type,
)
from codestub.codegen.registry import get_backend, is_registered, register_backend, registered_languages

__all__ = [
    "generate",
    "coerce_signature",
    "map_type",
    "describe_type",
    "get_type_mapping",
    "resolve_type",
    "DEFAULT_MAX_NESTING_DEPTH",
    "MappedType",
    "Shape",
    "get_default_return",
    "synthesize_default",
    "resolve_imports",
    "needs_auxiliary_type",
    "tree_value_type",
    "auxiliary_definition",
    "register_backend",
    "get_backend",
    "is_registered",
    "registered_languages",
]
