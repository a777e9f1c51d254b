"""Terminal formatting for CLI output.

Respects TTY detection — no ANSI codes when piped or redirected.

Example output of ``format_violations`` (with color)::

    ── devboy deploy ───────────────────────────────────────────

      ✗  Handler not found for route: /users (GET)
         api/users/get/index.py · function api

      ✗  1 error · deployment blocked

    ─────────────────────────────────────────────────────────────

"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from devboy.registry.checks import Violation
    from devboy.registry.model import Registry

# Banner width
_W = 65


def _use_color(stream: object | None = None) -> bool:
    """True if the output stream supports ANSI color."""
    s = stream or sys.stdout
    try:
        return s.isatty()  # type: ignore[union-attr]
    except (AttributeError, ValueError):
        return False


class _Palette:
    """ANSI escape sequences — empty strings when color is disabled."""

    __slots__ = ("blue", "bold", "dim", "gray", "green", "red", "reset", "yellow")

    def __init__(self, *, enabled: bool) -> None:
        if enabled:
            self.reset = "\033[0m"
            self.bold = "\033[1m"
            self.dim = "\033[2m"
            self.red = "\033[31m"
            self.green = "\033[32m"
            self.yellow = "\033[33m"
            self.blue = "\033[34m"
            self.gray = "\033[90m"
        else:
            self.reset = ""
            self.bold = ""
            self.dim = ""
            self.red = ""
            self.green = ""
            self.yellow = ""
            self.blue = ""
            self.gray = ""


def palette(color: bool | None = None, stream: object | None = None) -> _Palette:
    """Palette for *stream*; ``color`` forces it on or off."""
    return _Palette(enabled=color if color is not None else _use_color(stream))


def _title(text: str, c: _Palette) -> str:
    pad = _W - len(text) - 4  # 4 = "── " + " "
    return f"  {c.dim}──{c.reset} {c.bold}{text}{c.reset} {c.dim}{'─' * max(pad, 1)}{c.reset}"


def format_violations(violations: Sequence[Violation], *, color: bool | None = None) -> str:
    """Render a batch of deployment violations."""
    c = palette(color)
    lines = [_title("devboy deploy", c), ""]
    for violation in violations:
        lines.append(f"  {c.red}{c.bold}✗{c.reset}  {c.bold}{violation.message}{c.reset}")
        lines.append(
            f"     {c.dim}{violation.handler_path} · function {violation.function_name}{c.reset}"
        )
        lines.append("")

    count = len(violations)
    lines.append(
        f"  {c.red}{c.bold}✗{c.reset}  "
        f"{c.red}{count} error{'s' if count != 1 else ''}{c.reset}"
        f" {c.dim}·{c.reset} deployment blocked"
    )
    lines.append("")
    lines.append(f"  {c.dim}{'─' * _W}{c.reset}")
    lines.append("")
    return "\n".join(lines)


def format_route_table(registry: Registry, *, color: bool | None = None) -> str:
    """Render METHOD / PATH / FUNCTION / HANDLER columns for every route."""
    c = palette(color)
    rows = [
        (str(route.method), route.path, function.name, route.handler_path)
        for function, route in registry.routes()
    ]
    if not rows:
        return "No routes registered."

    headers = ("METHOD", "PATH", "FUNCTION", "HANDLER")
    widths = [max(len(h), *(len(r[i]) for r in rows)) for i, h in enumerate(headers[:3])]
    fmt = f"{{:<{widths[0]}}}  {{:<{widths[1]}}}  {{:<{widths[2]}}}  {{}}"

    lines = [f"{c.bold}{fmt.format(*headers)}{c.reset}"]
    sep_len = sum(widths) + 6 + max(len(r[3]) for r in rows)
    lines.append("-" * min(sep_len, 80))
    lines.extend(f"{c.gray}{fmt.format(*row)}{c.reset}" for row in rows)
    return "\n".join(lines)
