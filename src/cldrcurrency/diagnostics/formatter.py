"""Rendering of Diagnostic objects for logs, terminals and tools.

Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]

# Control characters are escaped so user-supplied codes and strings cannot
# inject fake lines into logs.
_CONTROL_ESCAPES = {ord(c): repr(c)[1:-1] for c in ("\n", "\r", "\t", "\x1b")}

# ANSI SGR parameters per severity
_SEVERITY_COLORS = {"error": "1;31", "warning": "1;33"}


class OutputFormat(StrEnum):
    """Rendering style of a DiagnosticFormatter."""

    RUST = "rust"  # Multi-line, rustc style (default)
    SIMPLE = "simple"  # CODE: message
    JSON = "json"  # One JSON object per diagnostic


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Renders diagnostics in one of the OutputFormat styles.

    Attributes:
        output_format: Rendering style
        sanitize: Truncate message and hint to ``max_content_length``
        color: Color the severity label with ANSI escapes (RUST only)
        max_content_length: Truncation limit used when sanitizing

    Example:
        >>> diagnostic = ErrorTemplate.currency_unknown("GGG")
        >>> print(DiagnosticFormatter().format(diagnostic))
        error[CURRENCY_UNKNOWN]: The currency 'GGG' is unknown
          = currency: GGG
          = help: Use a code returned by known_currency_codes() or register a private currency
          = note: see https://www.iso.org/iso-4217-currency-codes.html
        >>> simple = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(simple.format(diagnostic))
        CURRENCY_UNKNOWN: The currency 'GGG' is unknown
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Render one diagnostic in the configured style."""
        match self.output_format:
            case OutputFormat.RUST:
                return self._as_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return f"{diagnostic.code.name}: {self._text(diagnostic.message)}"
            case OutputFormat.JSON:
                return self._as_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Render several diagnostics separated by blank lines."""
        return "\n\n".join(map(self.format, diagnostics))

    def _context(self, diagnostic: Diagnostic) -> Iterator[tuple[str, str]]:
        """Yield (field, value) pairs for the optional diagnostic fields that are set."""
        if diagnostic.currency_code:
            yield "currency_code", _escape(diagnostic.currency_code)
        if diagnostic.locale_code:
            yield "locale_code", _escape(diagnostic.locale_code)
        if diagnostic.hint:
            yield "hint", self._text(diagnostic.hint)
        if diagnostic.help_url:
            yield "help_url", diagnostic.help_url

    def _as_rust(self, diagnostic: Diagnostic) -> str:
        """Render rustc style.

        Example output:
            error[CURRENCY_ALREADY_DEFINED]: Currency 'XBC' is already defined
              = currency: XBC
              = help: Private currencies cannot be redefined; pick another code
        """
        severity = "warning" if diagnostic.severity == "warning" else "error"
        label = f"\033[{_SEVERITY_COLORS[severity]}m{severity}\033[0m" if self.color else severity

        lines = [f"{label}[{diagnostic.code.name}]: {self._text(diagnostic.message)}"]
        for field, value in self._context(diagnostic):
            match field:
                case "currency_code":
                    lines.append(f"  = currency: {value}")
                case "locale_code":
                    lines.append(f"  = locale: {value}")
                case "hint":
                    lines.append(f"  = help: {value}")
                case _:
                    lines.append(f"  = note: see {value}")
        return "\n".join(lines)

    def _as_json(self, diagnostic: Diagnostic) -> str:
        """Render a single-line JSON object; unset optional fields are omitted."""
        payload: dict[str, str | int] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._text(diagnostic.message),
            "severity": diagnostic.severity,
        }
        payload.update(self._context(diagnostic))
        return json.dumps(payload, ensure_ascii=False)

    def _text(self, text: str) -> str:
        text = _escape(text)
        if self.sanitize and len(text) > self.max_content_length:
            text = f"{text[: self.max_content_length]}..."
        return text


def _escape(text: str) -> str:
    return text.translate(_CONTROL_ESCAPES)
