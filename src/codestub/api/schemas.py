# Copyright 2026 Codestub Contributors
# SPDX-License-Identifier: Apache-2.0

"""Request schemas for the template endpoints.

Structural validation (identifier grammar, length limits, parameter count,
language membership) happens here, before the generator sees a request.
Type support is left to the generator so that all unsupported types are
reported together.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, ValidationInfo, field_validator
from pydantic import Field as _Field

from codestub.codegen.generator import pydantic_details
from codestub.codegen.registry import registered_languages
from codestub.config.loader import GeneratorConfig
from codestub.errors import MalformedSignatureError
from codestub.model.entities import FunctionSignature

# ###############
# Public Interface
# ###############

QUESTION_ID_PATTERN = r"^[a-zA-Z0-9_-]+$"
MAX_QUESTION_ID_LENGTH = 100
MAX_TITLE_LENGTH = 200
MAX_DESCRIPTION_LENGTH = 5000


class ValidationRequest(BaseModel):
    """Payload of a dry-run validation request."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    signature: FunctionSignature
    language: str

    @field_validator("language")
    @classmethod
    def check_language_enabled(cls, value: str, info: ValidationInfo) -> str:
        languages = _enabled_languages(info)
        if value not in languages:
            raise ValueError(f"language must be one of: {', '.join(languages)}")
        return value


class TemplateRequest(ValidationRequest):
    """Payload of a template generation request."""

    question_id: str = _Field(pattern=QUESTION_ID_PATTERN, min_length=1, max_length=MAX_QUESTION_ID_LENGTH)
    title: str = _Field(min_length=1, max_length=MAX_TITLE_LENGTH)
    description: str = _Field(min_length=1, max_length=MAX_DESCRIPTION_LENGTH)


def parse_template_request(data: Mapping[str, Any], config: GeneratorConfig | None = None) -> TemplateRequest:
    """Validate a generation payload.

    Raises:
        MalformedSignatureError: With one detail entry per violation.
    """
    return _parse(TemplateRequest, data, config)


def parse_validation_request(data: Mapping[str, Any], config: GeneratorConfig | None = None) -> ValidationRequest:
    """Validate a dry-run validation payload.

    Raises:
        MalformedSignatureError: With one detail entry per violation.
    """
    return _parse(ValidationRequest, data, config)


# ################
# Implementation
# ################


def _enabled_languages(info: ValidationInfo) -> tuple[str, ...]:
    context = info.context or {}
    return tuple(context.get("languages") or registered_languages())


def _parse(model: type[ValidationRequest], data: Mapping[str, Any], config: GeneratorConfig | None) -> Any:
    if not isinstance(data, Mapping):
        raise MalformedSignatureError([{"field": "", "message": "request body must be a JSON object", "value": None}])
    languages = config.languages if config is not None else registered_languages()
    try:
        return model.model_validate(dict(data), context={"languages": languages})
    except ValidationError as exc:
        raise MalformedSignatureError(pydantic_details(exc)) from exc
