"""Declarative command-line option parsing."""

from .cli import parse, run
from .errors import GetoptsError, SpecError, UsageError
from .models import CommandSpec, Option, OptionSpec, OptionType
from .parser import (
    HelpRequested,
    ParsedArgs,
    ParseOutcome,
    UsageFailure,
    VersionRequested,
    evaluate,
)
from .registry import OptionRegistry, build_registry
from .renderer import render_help, render_usage, render_version

__all__ = [
    "CommandSpec",
    "GetoptsError",
    "HelpRequested",
    "Option",
    "OptionRegistry",
    "OptionSpec",
    "OptionType",
    "ParseOutcome",
    "ParsedArgs",
    "SpecError",
    "UsageError",
    "UsageFailure",
    "VersionRequested",
    "build_registry",
    "evaluate",
    "parse",
    "render_help",
    "render_usage",
    "render_version",
]
