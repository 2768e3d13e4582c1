"""Process boundary: write parse outcomes and exit."""

from __future__ import annotations

import sys
from collections.abc import Mapping, Sequence
from typing import Any, TextIO

from .models import CommandSpec, OptionSpec, OptionValue
from .parser import (
    HelpRequested,
    ParsedArgs,
    UsageFailure,
    VersionRequested,
    evaluate,
)
from .registry import OptionRegistry


def run(
    command: CommandSpec | Mapping[str, Any],
    options: Mapping[str, OptionSpec | Mapping[str, Any]],
    argv: Sequence[str] | None = None,
    *,
    out: TextIO | None = None,
) -> tuple[int, ParsedArgs | None]:
    """Parse argv and write any help, version or error text to out.

    Returns the exit status and, when parsing succeeded, the parsed
    arguments. SpecError from malformed specifications propagates.
    """
    registry = OptionRegistry.build(command, options)
    args = list(argv) if argv is not None else sys.argv[1:]
    outcome = evaluate(registry, args)
    if isinstance(outcome, ParsedArgs):
        return outcome.exit_code, outcome

    if not isinstance(outcome, (HelpRequested, VersionRequested, UsageFailure)):
        raise TypeError(f"Unexpected parse outcome: {outcome!r}")

    stream = out if out is not None else sys.stdout
    stream.write(outcome.text)
    stream.flush()
    return outcome.exit_code, None


def parse(
    command: CommandSpec | Mapping[str, Any],
    options: Mapping[str, OptionSpec | Mapping[str, Any]],
    argv: Sequence[str] | None = None,
    *,
    out: TextIO | None = None,
) -> dict[str | int, OptionValue]:
    """Parse argv into a result mapping, or print and exit.

    Option values are keyed by option name and positionals by their
    0-based position. Help and version requests exit with status 0, usage
    errors with status 1.
    """
    exit_code, parsed = run(command, options, argv, out=out)
    if parsed is None:
        sys.exit(exit_code)
    return parsed.to_mapping()

