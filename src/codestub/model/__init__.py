# Copyright 2026 Codestub Contributors
# SPDX-License-Identifier: Apache-2.0

"""Signature model for codestub (DSL types, parameters, signatures)."""

from codestub.model.entities import (
    IDENTIFIER_PATTERN,
    MAX_PARAMETERS,
    FunctionSignature,
    Parameter,
    ReturnSpec,
    TargetLanguage,
    dsl_type_of,
    signature_types,
)
from codestub.model.types import (
    ArrayTypeRef,
    GraphTypeRef,
    ListTypeRef,
    PrimitiveType,
    PrimitiveTypeRef,
    TreeTypeRef,
    TypeCategory,
    TypeRef,
    category_of,
    contains_category,
    enumerate_types,
    format_type,
    nesting_depth,
    walk,
)

__all__ = [
    # Type system
    "PrimitiveType",
    "TypeCategory",
    "PrimitiveTypeRef",
    "ArrayTypeRef",
    "ListTypeRef",
    "TreeTypeRef",
    "GraphTypeRef",
    "TypeRef",
    "format_type",
    "category_of",
    "nesting_depth",
    "walk",
    "contains_category",
    "enumerate_types",
    # Entities
    "IDENTIFIER_PATTERN",
    "MAX_PARAMETERS",
    "TargetLanguage",
    "Parameter",
    "ReturnSpec",
    "FunctionSignature",
    "dsl_type_of",
    "signature_types",
]
