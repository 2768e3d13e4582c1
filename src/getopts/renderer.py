"""Usage, help, version and failure text.

Output follows a fixed layout so it can be compared byte for byte:
- Lines wrap at 76 columns.
- Option help is cut into fixed-width chunks by character count.
- Options are listed in lexicographic name order.
"""

from __future__ import annotations

from .constants import (
    ANY_PARAMS_TOKEN,
    HELP_DELIMITER,
    HELP_OPTION_NAME,
    IMPLICIT_OPTION_NAMES,
    MAX_COLUMNS,
    OPTION_INDENT,
    OPTION_SPEC_GUTTER,
    OPTIONS_HEADER,
    SUMMARY_TEMPLATE,
    USAGE_HEADER,
    USAGE_INDENT,
    VERSION_LINE_TEMPLATE,
    VERSION_OPTION_NAME,
)
from .models import Option
from .registry import OptionRegistry

_QUOTE_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\\n",
    "\r": "\\r",
    "\0": "\\0",
}


def quote(text: str) -> str:
    """Double-quote text for error messages, escaping quotes and controls."""
    return '"' + "".join(_QUOTE_ESCAPES.get(char, char) for char in text) + '"'


def chunk_text(text: str, width: int) -> list[str]:
    """Split text into consecutive chunks of at most width characters."""
    if width < 1:
        return [text] if text else []
    return [text[i:i + width] for i in range(0, len(text), width)]


class _UsageLines:
    """Accumulates usage tokens, starting a new line past the column limit."""

    def __init__(self, command_name: str) -> None:
        self.lines = [f"{USAGE_INDENT}{command_name}"]

    def add(self, token: str, *, required: bool) -> None:
        if not required:
            token = f"[{token}]"
        if len(self.lines[-1]) > MAX_COLUMNS:
            self.lines.append(USAGE_INDENT)
        self.lines[-1] = f"{self.lines[-1]} {token}"

    def render(self) -> str:
        return "\n".join(self.lines)


def render_option_row(option: Option, max_spec_width: int) -> list[str]:
    """Render one option table entry, plus its description entry if any."""
    row = f"{OPTION_INDENT}{option.spec}"
    if option.help is not None:
        row = row.ljust(max_spec_width + OPTION_SPEC_GUTTER)
        padding = " " * len(row)
        chunks = chunk_text(option.help, MAX_COLUMNS - (len(row) + len(HELP_DELIMITER)))
        row = row + HELP_DELIMITER + f"\n{padding}{HELP_DELIMITER}".join(chunks)

    entries = [row]
    if option.desc is not None:
        entries.append(f"\n{OPTION_INDENT}{option.desc}\n")
    return entries


def _render_params(registry: OptionRegistry, usage: _UsageLines) -> None:
    command = registry.command
    if command.params is None:
        usage.add(ANY_PARAMS_TOKEN, required=False)
        return

    params = command.params
    required_count = command.params_required
    for name in params[:required_count]:
        usage.add(name, required=True)

    optional = params[required_count:]
    if optional:
        nested = "[" + " [".join(optional) + "]" * len(optional)
        usage.add(nested, required=True)


def render_usage(registry: OptionRegistry) -> str:
    """Render the Usage block and the option table."""
    command = registry.command
    usage = _UsageLines(command.name)
    rows: list[str] = []

    for name in registry.sorted_names():
        option = registry.option(name)
        if name not in IMPLICIT_OPTION_NAMES:
            usage.add(option.usage, required=option.required)
        rows.extend(render_option_row(option, registry.max_spec_width))

    _render_params(registry, usage)

    parts = [USAGE_HEADER, usage.render()]

    help_usage = _UsageLines(command.name)
    help_usage.add(registry.option(HELP_OPTION_NAME).usage, required=True)
    parts.append(help_usage.render())

    if registry.has_version:
        version_usage = _UsageLines(command.name)
        version_usage.add(registry.option(VERSION_OPTION_NAME).usage, required=True)
        parts.append(version_usage.render())

    parts.extend(["", OPTIONS_HEADER, "\n".join(rows), ""])
    return "\n".join(parts) + "\n"


def render_help(registry: OptionRegistry) -> str:
    command = registry.command
    if command.summary is not None:
        header = SUMMARY_TEMPLATE.format(name=command.name, summary=command.summary)
    else:
        header = command.name

    segments = [header]
    if command.desc is not None:
        segments.append(command.desc)
    if command.version is not None:
        segments.append(VERSION_LINE_TEMPLATE.format(version=command.version))
    return "".join(f"{segment}\n\n" for segment in segments) + render_usage(registry)


def render_version(registry: OptionRegistry) -> str:
    return f"{registry.command.version}\n"


def render_failure(registry: OptionRegistry, message: str) -> str:
    return f"{message}\n\n{render_usage(registry)}"
