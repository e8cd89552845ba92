"""Exceptions raised while turning a Swagger document into client code."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .lint import LintFinding


class CodegenError(Exception):
    """Base class for every error raised by jscodegen."""


class SpecError(CodegenError):
    """The input document cannot be turned into a view model."""


class UnsupportedSpecVersion(SpecError):
    def __init__(self, version: Any) -> None:
        self.version = version
        super().__init__(f"Unsupported specification version {version!r}: only Swagger 2.0 documents are supported")


class UnresolvedReference(SpecError):
    def __init__(self, ref: str) -> None:
        self.ref = ref
        super().__init__(f"Cannot resolve reference {ref!r}")


class UnsupportedTarget(CodegenError):
    """Unknown dialect, or a dialect whose templates are unusable."""


class InvalidCustomTemplate(UnsupportedTarget):
    def __init__(self) -> None:
        super().__init__(
            "Custom target requires a template bundle with 'class' and 'method' template strings"
            " (and optionally 'type')"
        )


class LintFailure(CodegenError):
    """Rendered source contains an error-class lint finding."""

    def __init__(self, finding: LintFinding) -> None:
        self.finding = finding
        super().__init__(f"{finding.reason} in {finding.evidence} ({finding.code})")
