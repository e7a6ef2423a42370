"""
Error types raised while generating router and test scaffolds.

Every error here is raised at construction time and aborts the run before
anything is written to disk.
"""

from __future__ import annotations


class GenerateError(Exception):
    """Base class for all generation failures."""


class ArtifactNotFound(GenerateError):
    def __init__(self, module: str, detail: str | None = None):
        self.module = module
        message = f"No cached artifact found for contract `{module}`"
        if detail:
            message += f" ({detail})"
        super().__init__(message)


class MissingBytecode(GenerateError):
    def __init__(self, module: str):
        self.module = module
        super().__init__(f"No bytecode found for contract `{module}`")


class MissingAbi(GenerateError):
    def __init__(self, module: str):
        self.module = module
        super().__init__(f"No ABI found for contract `{module}`")


class DuplicateSelector(GenerateError):
    """Two functions across the module set share a 4-byte selector."""

    def __init__(self, selector: str, first_module: str, second_module: str):
        self.selector = selector
        self.first_module = first_module
        self.second_module = second_module
        super().__init__(
            f"Duplicate selector {selector} found in `{first_module}` and `{second_module}`"
        )


class ConflictingSpecialFunction(GenerateError):
    """More than one module declares a fallback (or receive) function."""

    def __init__(self, kind: str, first_module: str, second_module: str):
        self.kind = kind
        self.first_module = first_module
        self.second_module = second_module
        super().__init__(
            f"Multiple {kind} functions found: `{first_module}` and `{second_module}`"
        )


class CompilationError(GenerateError):
    def __init__(self, message: str, stderr: str = ""):
        self.stderr = stderr
        if stderr:
            message = f"{message}\n{stderr.strip()}"
        super().__init__(message)
