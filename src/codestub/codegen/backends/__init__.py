# Copyright 2026 Codestub Contributors
# SPDX-License-Identifier: Apache-2.0

"""Built-in target-language backends. Importing this package registers them."""

from codestub.codegen.backends.base import Backend, RenderContext, RenderedParameter
from codestub.codegen.backends.java import JavaBackend
from codestub.codegen.backends.python import PythonBackend
from codestub.codegen.backends.cpp import CppBackend
from codestub.codegen.backends.javascript import JavaScriptBackend

__all__ = [
    "Backend",
    "RenderContext",
    "RenderedParameter",
    "JavaBackend",
    "PythonBackend",
    "CppBackend",
    "JavaScriptBackend",
]
