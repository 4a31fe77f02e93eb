# Copyright 2026 Codestub Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the request handlers and response envelopes."""

from datetime import datetime
from typing import Any

import pytest

from codestub.api.handlers import (
    error_response,
    handle_template,
    handle_type_mappings,
    handle_validate,
    health_response,
    languages_response,
    service_start,
    stats_response,
)
from codestub.config.loader import GeneratorConfig
from codestub.errors import MalformedSignatureError, TypeValidationError, UnsupportedLanguageError
from codestub.validation.checks import TypeCheckError

# ###############
# Test Helpers
# ###############

CONFIG = GeneratorConfig()


def _request(language: str = "python", **signature_overrides: Any) -> dict[str, Any]:
    signature: dict[str, Any] = {
        "function_name": "mergeKLists",
        "parameters": [{"name": "lists", "type": "List<List<int>>"}],
        "returns": {"type": "List<int>"},
    }
    signature.update(signature_overrides)
    return {
        "question_id": "merge-k",
        "title": "Merge k Sorted Lists",
        "description": "Merge all lists into one sorted list.",
        "signature": signature,
        "language": language,
    }


# ###############
# Template Generation
# ###############


class TestHandleTemplate:
    def test_created_envelope(self) -> None:
        payload, status = handle_template(_request(), CONFIG)
        assert status == 201
        assert payload["language"] == "python"
        assert "def mergeKLists(self, lists: List[List[int]]) -> List[int]:" in payload["template"]
        metadata = payload["metadata"]
        assert metadata["question_id"] == "merge-k"
        assert metadata["title"] == "Merge k Sorted Lists"
        assert metadata["function_name"] == "mergeKLists"
        assert metadata["parameter_count"] == 1
        assert datetime.fromisoformat(metadata["generated_at"]).tzinfo is not None

    def test_unsupported_type_raises(self) -> None:
        with pytest.raises(TypeValidationError):
            handle_template(_request(returns={"type": "NotAType"}), CONFIG)

    def test_malformed_request_raises(self) -> None:
        with pytest.raises(MalformedSignatureError):
            handle_template({"language": "python"}, CONFIG)


# ###############
# Dry-Run Validation
# ###############


class TestHandleValidate:
    def test_valid_signature(self) -> None:
        payload, status = handle_validate(_request("java"), CONFIG)
        assert status == 200
        assert payload["valid"] is True
        assert payload["message"] == "Template can be generated successfully"
        analysis = payload["signature_analysis"]
        assert analysis["function_name"] == "mergeKLists"
        assert analysis["parameter_count"] == 1
        assert analysis["return_type"] == "List<int>"
        assert analysis["language_mapping"]["parameters"] == [
            {"name": "lists", "dsl_type": "List<List<int>>", "mapped_type": "List<List<Integer>>"}
        ]
        assert analysis["language_mapping"]["return_type"] == {"dsl_type": "List<int>", "mapped_type": "List<Integer>"}

    def test_invalid_signature(self) -> None:
        payload, status = handle_validate(_request("cpp", parameters=[{"name": "x", "type": "Foo"}]), CONFIG)
        assert status == 400
        assert payload == {"valid": False, "errors": ["Unsupported parameter type: Foo for language: cpp"]}


# ###############
# Type Tables
# ###############


class TestTypeMappings:
    def test_categories(self) -> None:
        payload, status = handle_type_mappings("java", CONFIG)
        assert status == 200
        assert payload["language"] == "java"
        assert payload["total_types"] == len(payload["type_mappings"])
        categories = payload["categories"]
        assert categories["primitives"]["string"] == "String"
        assert categories["collections"]["List<int>"] == "List<Integer>"
        assert categories["collections"]["int[]"] == "int[]"
        assert categories["special"] == {
            key: value for key, value in payload["type_mappings"].items() if key.startswith(("Tree", "Graph"))
        }

    def test_categories_partition_the_table(self) -> None:
        payload, _ = handle_type_mappings("cpp", CONFIG)
        total = sum(len(group) for group in payload["categories"].values())
        assert total == payload["total_types"]

    def test_unknown_language_is_not_found(self) -> None:
        payload, status = handle_type_mappings("cobol", CONFIG)
        assert status == 404
        assert payload["message"] == "Unsupported language: cobol"
        assert payload["supported_languages"] == ["java", "python", "cpp", "javascript"]

    def test_disabled_language_is_not_found(self) -> None:
        _, status = handle_type_mappings("java", GeneratorConfig(languages=("python",)))
        assert status == 404


# ###############
# Informational Envelopes
# ###############


class TestInformational:
    def test_languages(self) -> None:
        payload = languages_response(CONFIG)
        assert payload["supported_languages"] == ["java", "python", "cpp", "javascript"]
        assert payload["type_system"]["primitives"] == ["int", "long", "float", "double", "bool", "string"]
        assert payload["type_system"]["special"] == ["Tree<T>", "Graph"]

    def test_stats(self) -> None:
        payload = stats_response(CONFIG, service_start())
        assert payload["api_version"] == "v1"
        assert payload["supported_languages"] == 4
        assert payload["total_supported_types"]["java"] > 20
        assert payload["uptime_seconds"] == 0

    @pytest.mark.parametrize(("probe", "status"), [("health", "healthy"), ("ready", "ready"), ("live", "alive")])
    def test_health_probes(self, probe: str, status: str) -> None:
        payload = health_response(CONFIG, service_start(), probe=probe)
        assert payload["status"] == status
        assert "timestamp" in payload

    def test_health_reports_environment(self) -> None:
        payload = health_response(GeneratorConfig(environment="test"), service_start())
        assert payload["environment"] == "test"


# ###############
# Error Mapping
# ###############


class TestErrorResponse:
    def test_malformed_request(self) -> None:
        details = [{"field": "title", "message": "Field required", "value": None}]
        payload, status = error_response(MalformedSignatureError(details), CONFIG)
        assert status == 400
        assert payload == {"error": "Validation Error", "details": details}

    def test_type_validation(self) -> None:
        errors = [TypeCheckError("returns.type", "Foo", "java", "Unsupported return type: Foo for language: java")]
        payload, status = error_response(TypeValidationError(errors), CONFIG)
        assert status == 400
        assert payload["error"] == "Type Validation Error"
        assert payload["message"] == "Unsupported return type: Foo for language: java"
        assert payload["errors"][0]["field"] == "returns.type"

    def test_unsupported_language(self) -> None:
        payload, status = error_response(UnsupportedLanguageError("cobol"), CONFIG)
        assert status == 400
        assert payload["message"] == "Unsupported language: cobol"

    def test_unexpected_error_in_development(self) -> None:
        payload, status = error_response(RuntimeError("boom"), CONFIG)
        assert status == 500
        assert payload == {"error": "Internal Server Error", "message": "boom"}

    def test_unexpected_error_is_hidden_in_production(self) -> None:
        payload, status = error_response(RuntimeError("boom"), GeneratorConfig(environment="production"))
        assert status == 500
        assert "boom" not in payload["message"]
