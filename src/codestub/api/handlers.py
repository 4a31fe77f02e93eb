# Copyright 2026 Codestub Contributors
# SPDX-License-Identifier: Apache-2.0

"""Transport-neutral request handlers and response envelopes.

Each ``handle_*`` function takes a decoded JSON body (or URL argument) and
returns a ``(payload, status)`` pair. The web layer only serializes these
pairs; it never builds payloads itself.
"""

from __future__ import annotations

import logging
import platform
import time
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from codestub.api.schemas import TemplateRequest, ValidationRequest, parse_template_request, parse_validation_request
from codestub.codegen.generator import generate
from codestub.codegen.mapping import get_type_mapping, map_type, try_parse
from codestub.config.loader import GeneratorConfig
from codestub.errors import (
    CodestubError,
    MalformedSignatureError,
    TypeValidationError,
    UnsupportedLanguageError,
    UnsupportedTypeError,
)
from codestub.model.types import PrimitiveType, TypeCategory, category_of
from codestub.validation.checks import check_types

# ###############
# Public Interface
# ###############

API_VERSION = "v1"
SERVICE_VERSION = "0.1.0"

Response = tuple[dict[str, Any], int]


def handle_template(data: Mapping[str, Any], config: GeneratorConfig) -> Response:
    """Validate a generation request and render its template (201 on success)."""
    request = parse_template_request(data, config)
    template = generate(request.signature, request.language, request.question_id, config=config)
    return template_response(request, template), 201


def handle_validate(data: Mapping[str, Any], config: GeneratorConfig) -> Response:
    """Dry-run a generation request: 200 when it would succeed, 400 otherwise."""
    request = parse_validation_request(data, config)
    payload = validation_response(request, config)
    return payload, 200 if payload["valid"] else 400


def handle_type_mappings(language: str, config: GeneratorConfig) -> Response:
    """Return the type table for *language*, or 404 if it is not enabled."""
    if language not in config.languages:
        return language_not_found_response(language, config)
    return type_mappings_response(language, config), 200


def template_response(request: TemplateRequest, template: str) -> dict[str, Any]:
    """Build the envelope returned for a generated template."""
    signature = request.signature
    return {
        "language": request.language,
        "template": template,
        "metadata": {
            "question_id": request.question_id,
            "title": request.title,
            "function_name": signature.function_name,
            "parameter_count": len(signature.parameters),
            "generated_at": _now(),
        },
    }


def validation_response(request: ValidationRequest, config: GeneratorConfig) -> dict[str, Any]:
    """Build the dry-run envelope: the error list, or a per-type mapping analysis."""
    signature = request.signature
    language = request.language
    errors = check_types(signature.parameters, signature.returns, language, config=config)
    if errors:
        return {"valid": False, "errors": [e.message for e in errors]}

    depth = config.max_nesting_depth
    return {
        "valid": True,
        "message": "Template can be generated successfully",
        "signature_analysis": {
            "function_name": signature.function_name,
            "parameter_count": len(signature.parameters),
            "return_type": signature.returns.type,
            "language_mapping": {
                "parameters": [
                    {
                        "name": param.name,
                        "dsl_type": param.type,
                        "mapped_type": map_type(param.type, language, max_nesting_depth=depth),
                    }
                    for param in signature.parameters
                ],
                "return_type": {
                    "dsl_type": signature.returns.type,
                    "mapped_type": map_type(signature.returns.type, language, max_nesting_depth=depth),
                },
            },
        },
    }


def languages_response(config: GeneratorConfig) -> dict[str, Any]:
    """Describe the enabled languages and the DSL type system."""
    return {
        "supported_languages": list(config.languages),
        "max_nesting_depth": config.max_nesting_depth,
        "type_system": {
            "primitives": [p.value for p in PrimitiveType],
            "collections": ["T[]", "List<T>"],
            "special": ["Tree<T>", "Graph"],
        },
        "examples": {
            "primitives": ["int", "string", "bool"],
            "arrays": ["int[]", "string[]", "int[][]"],
            "lists": ["List<int>", "List<string>", "List<List<int>>"],
            "trees": ["Tree<int>", "Tree<string>"],
            "graphs": ["Graph"],
        },
    }


def type_mappings_response(language: str, config: GeneratorConfig) -> dict[str, Any]:
    """Return the DSL-to-syntax table for *language* split into categories."""
    mapping = get_type_mapping(language, max_nesting_depth=config.max_nesting_depth)
    categories: dict[str, dict[str, str]] = {"primitives": {}, "collections": {}, "special": {}}
    for dsl_type, syntax in mapping.items():
        categories[_category_group(dsl_type)][dsl_type] = syntax
    return {
        "language": language,
        "type_mappings": mapping,
        "total_types": len(mapping),
        "categories": categories,
    }


def stats_response(config: GeneratorConfig, started_at: float) -> dict[str, Any]:
    """Report static service statistics and process uptime.

    Args:
        config: The active configuration.
        started_at: ``time.monotonic()`` value taken when the service started.
    """
    depth = config.max_nesting_depth
    return {
        "api_version": API_VERSION,
        "supported_languages": len(config.languages),
        "total_supported_types": {
            language: len(get_type_mapping(language, max_nesting_depth=depth)) for language in config.languages
        },
        "uptime_seconds": _uptime(started_at),
        "python_version": platform.python_version(),
        "last_updated": _now(),
    }


def health_response(config: GeneratorConfig, started_at: float, probe: str = "health") -> dict[str, Any]:
    """Build the payload of a health probe.

    Args:
        config: The active configuration.
        started_at: ``time.monotonic()`` value taken when the service started.
        probe: ``"health"`` (basic), ``"ready"`` (readiness) or ``"live"`` (liveness).
    """
    if probe == "live":
        return {"status": "alive", "timestamp": _now()}
    if probe == "ready":
        checks = {
            "template_service": bool(config.languages),
            "type_mappings": all(get_type_mapping(language) for language in config.languages),
            "validation_service": True,
        }
        return {
            "status": "ready" if all(checks.values()) else "not_ready",
            "checks": checks,
            "timestamp": _now(),
        }
    return {
        "status": "healthy",
        "timestamp": _now(),
        "uptime": _uptime(started_at),
        "environment": config.environment,
        "version": SERVICE_VERSION,
    }


def language_not_found_response(language: str, config: GeneratorConfig) -> Response:
    """Build the 404 returned for a language named in a URL that is not enabled."""
    return {
        "error": "Language not supported",
        "message": str(UnsupportedLanguageError(language)),
        "supported_languages": list(config.languages),
    }, 404


def error_response(exc: Exception, config: GeneratorConfig) -> Response:
    """Map an exception raised by a handler to an error envelope and status.

    Request and type errors become 400; anything else becomes 500, with the
    message hidden in the production environment.
    """
    if isinstance(exc, MalformedSignatureError):
        return {"error": "Validation Error", "details": exc.details}, 400
    if isinstance(exc, TypeValidationError):
        return {
            "error": "Type Validation Error",
            "message": str(exc),
            "errors": [{"field": e.field, "dsl_type": e.dsl_type, "message": e.message} for e in exc.errors],
        }, 400
    if isinstance(exc, (UnsupportedLanguageError, UnsupportedTypeError)):
        return {"error": "Type Validation Error", "message": str(exc)}, 400
    if not isinstance(exc, CodestubError):
        _logger.error("Unhandled error while serving a request", exc_info=exc)
    message = "Internal Server Error" if config.environment == "production" else str(exc)
    return {"error": "Internal Server Error", "message": message}, 500


def service_start() -> float:
    """Return the reference timestamp used for uptime reporting."""
    return time.monotonic()


# ################
# Implementation
# ################

_logger = logging.getLogger(__name__)

_CATEGORY_GROUPS = {
    TypeCategory.PRIMITIVE: "primitives",
    TypeCategory.ARRAY: "collections",
    TypeCategory.LIST: "collections",
    TypeCategory.TREE: "special",
    TypeCategory.GRAPH: "special",
}


def _category_group(dsl_type: str) -> str:
    ref = try_parse(dsl_type)
    if ref is None:
        return "special"
    return _CATEGORY_GROUPS[category_of(ref)]


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _uptime(started_at: float) -> int:
    return int(time.monotonic() - started_at)
