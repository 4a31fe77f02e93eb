# Copyright 2026 Codestub Contributors
# SPDX-License-Identifier: Apache-2.0

"""Request schemas and response envelopes for the codestub web service."""

from codestub.api.handlers import (
    error_response,
    handle_template,
    handle_type_mappings,
    handle_validate,
    health_response,
    languages_response,
    stats_response,
    template_response,
    type_mappings_response,
    validation_response,
)
from codestub.api.schemas import (
    TemplateRequest,
    ValidationRequest,
    parse_template_request,
    parse_validation_request,
)

__all__ = [
    "TemplateRequest",
    "ValidationRequest",
    "parse_template_request",
    "parse_validation_request",
    "handle_template",
    "handle_validate",
    "handle_type_mappings",
    "template_response",
    "validation_response",
    "languages_response",
    "type_mappings_response",
    "stats_response",
    "health_response",
    "error_response",
]
