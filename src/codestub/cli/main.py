# Copyright 2026 Codestub Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the codestub command-line interface."""

import argparse
import sys
from pathlib import Path
from typing import Any

import yaml

from codestub.api.schemas import parse_validation_request
from codestub.codegen.generator import generate
from codestub.codegen.mapping import get_type_mapping
from codestub.config.loader import CONFIG_FILE_NAME, ConfigError, GeneratorConfig, load_config, load_config_or_default
from codestub.errors import CodestubError, MalformedSignatureError
from codestub.log import setup_logging
from codestub.validation.checks import check_types

# ###############
# Public Interface
# ###############

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def main() -> None:
    """Run the codestub CLI."""
    parser = argparse.ArgumentParser(
        prog="codestub",
        description="codestub: boilerplate function stubs from a language-neutral signature",
    )
    parser.add_argument(
        "--config",
        default=None,
        help=f"Path to the configuration file (default: ./{CONFIG_FILE_NAME} if present)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=_LOG_LEVELS,
        help="Logging level (overrides the configuration file)",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # generate subcommand
    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate a template from a request file",
        description="Read a JSON or YAML request and print the generated template.",
    )
    generate_parser.add_argument("request", help="Path to the request file (JSON or YAML)")
    generate_parser.add_argument(
        "--language",
        default=None,
        help="Target language (overrides the language in the request)",
    )

    # validate subcommand
    validate_parser = subparsers.add_parser(
        "validate",
        help="Check that every type in a request is supported",
        description="Dry-run type validation of a JSON or YAML request.",
    )
    validate_parser.add_argument("request", help="Path to the request file (JSON or YAML)")
    validate_parser.add_argument(
        "--language",
        default=None,
        help="Target language (overrides the language in the request)",
    )

    # languages subcommand
    subparsers.add_parser(
        "languages",
        help="List the supported target languages",
        description="List the enabled target languages.",
    )

    # types subcommand
    types_parser = subparsers.add_parser(
        "types",
        help="Show the type table of a language",
        description="Print every supported DSL type and its spelling in the given language.",
    )
    types_parser.add_argument("language", help="Target language")

    # serve subcommand
    serve_parser = subparsers.add_parser(
        "serve",
        help="Launch the template preview and REST API",
        description="Launch the web-based template preview together with the REST API.",
    )
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to run the server on (default: from configuration, 8050)",
    )
    serve_parser.add_argument(
        "--host",
        default=None,
        help="Host to bind the server to (default: from configuration, 127.0.0.1)",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Load the configuration and dispatch to the subcommand handler."""
    try:
        config = _load_config(args.config)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    setup_logging(args.log_level or config.log_level)

    if args.command == "generate":
        return _cmd_generate(args, config)
    if args.command == "validate":
        return _cmd_validate(args, config)
    if args.command == "languages":
        return _cmd_languages(config)
    if args.command == "types":
        return _cmd_types(args, config)
    if args.command == "serve":
        return _cmd_serve(args, config)
    return 0


def _load_config(path: str | None) -> GeneratorConfig:
    if path is not None:
        return load_config(Path(path))
    default_path = Path.cwd() / CONFIG_FILE_NAME
    return load_config_or_default(default_path if default_path.exists() else None)


def _load_request(path: str, language: str | None) -> dict[str, Any]:
    """Read a request file and apply the ``--language`` override.

    Raises:
        ValueError: If the file cannot be read or is not a mapping.
    """
    request_file = Path(path)
    try:
        data = yaml.safe_load(request_file.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ValueError(f"cannot read request file '{request_file}': {exc}") from exc
    except yaml.YAMLError as exc:
        raise ValueError(f"invalid request file '{request_file}': {exc}") from exc

    if not isinstance(data, dict):
        raise ValueError(f"request file '{request_file}' must contain a mapping")
    if language is not None:
        data["language"] = language
    return data


def _print_malformed(exc: MalformedSignatureError) -> None:
    for detail in exc.details:
        print(f"Error: {detail['field']}: {detail['message']}", file=sys.stderr)


def _cmd_generate(args: argparse.Namespace, config: GeneratorConfig) -> int:
    """Handle the generate subcommand."""
    try:
        data = _load_request(args.request, args.language)
        request = parse_validation_request(data, config)
        template = generate(request.signature, request.language, data.get("question_id"), config=config)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except MalformedSignatureError as exc:
        _print_malformed(exc)
        return 1
    except CodestubError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(template, end="")
    return 0


def _cmd_validate(args: argparse.Namespace, config: GeneratorConfig) -> int:
    """Handle the validate subcommand."""
    try:
        data = _load_request(args.request, args.language)
        request = parse_validation_request(data, config)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except MalformedSignatureError as exc:
        _print_malformed(exc)
        return 1

    signature = request.signature
    errors = check_types(signature.parameters, signature.returns, request.language, config=config)
    if errors:
        for error in errors:
            print(f"Error: {error.field}: {error.message}", file=sys.stderr)
        return 1

    print(f"No issues found. {signature.function_name} can be generated for {request.language}.")
    return 0


def _cmd_languages(config: GeneratorConfig) -> int:
    """Handle the languages subcommand."""
    for language in config.languages:
        print(language)
    return 0


def _cmd_types(args: argparse.Namespace, config: GeneratorConfig) -> int:
    """Handle the types subcommand."""
    if args.language not in config.languages:
        print(f"Error: Unsupported language: {args.language}", file=sys.stderr)
        return 1

    mapping = get_type_mapping(args.language, max_nesting_depth=config.max_nesting_depth)
    width = max(len(dsl_type) for dsl_type in mapping)
    for dsl_type, syntax in mapping.items():
        print(f"{dsl_type:<{width}}  {syntax}")
    return 0


def _cmd_serve(args: argparse.Namespace, config: GeneratorConfig) -> int:
    """Handle the serve subcommand."""
    from codestub.webui.app import create_app

    host = args.host or config.server.host
    port = args.port or config.server.port
    print(f"Serving template preview at http://{host}:{port}/")
    app = create_app(config=config)
    app.run(host=host, port=port, debug=False)
    return 0

