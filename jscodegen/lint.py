"""Lint rendered JavaScript before it is returned.

The source is parsed with esprima. A parse failure is an error-class finding
(code starting with 'E'); problems esprima tolerates, trailing whitespace and
a missing "use strict" directive are warning-class findings.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

import esprima
from esprima.error_handler import Error as EsprimaError

from .errors import LintFailure

logger = logging.getLogger(__name__)

_USE_STRICT = re.compile(r"""^\s*(?:/\*.*?\*/\s*|//[^\n]*\n\s*)*['"]use strict['"]""", re.DOTALL)


@dataclass(frozen=True)
class LintOptions:
    esnext: bool = False
    strict: bool = True
    trailing: bool = True
    maxerr: int = 999


@dataclass(frozen=True)
class LintFinding:
    code: str
    reason: str
    evidence: str
    line: int = 0

    @property
    def is_error(self) -> bool:
        return self.code.startswith("E")


def _evidence(lines: list[str], line: int) -> str:
    if 1 <= line <= len(lines):
        return lines[line - 1].strip()
    return ""


def lint_source(source: str, options: LintOptions | None = None) -> list[LintFinding]:
    """Return lint findings for `source`, at most `options.maxerr` of them."""
    options = options or LintOptions()
    lines = source.splitlines()
    findings: list[LintFinding] = []

    parse = esprima.parseModule if options.esnext else esprima.parseScript
    try:
        program = parse(source, {"tolerant": True})
    except EsprimaError as exc:
        line = getattr(exc, "lineNumber", 0) or 0
        findings.append(LintFinding("E001", getattr(exc, "description", None) or str(exc), _evidence(lines, line), line))
    else:
        for error in getattr(program, "errors", None) or []:
            line = getattr(error, "lineNumber", 0) or 0
            findings.append(LintFinding("W001", getattr(error, "description", None) or str(error), _evidence(lines, line), line))

    if options.trailing:
        for number, text in enumerate(lines, start=1):
            if text != text.rstrip():
                findings.append(LintFinding("W004", "Trailing whitespace.", text.strip(), number))

    # ES modules are strict by definition.
    if options.strict and not options.esnext and not _USE_STRICT.match(source):
        findings.append(LintFinding("W097", 'Missing "use strict" statement.', _evidence(lines, 1), 1))

    return findings[: options.maxerr]


def check_source(source: str, options: LintOptions | None = None) -> None:
    """Raise LintFailure on the first error-class finding; ignore the rest."""
    findings = lint_source(source, options)
    for finding in findings:
        if finding.is_error:
            raise LintFailure(finding)
    logger.debug("Lint passed with %d non-error findings", len(findings))
