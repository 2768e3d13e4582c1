"""Argument scanning and validation against an option registry."""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass, field

from .constants import (
    EXIT_OK,
    EXIT_USAGE_ERROR,
    HELP_OPTION_NAME,
    LONG_PREFIX,
    MAX_OPTION_PREFIX_LEN,
    MSG_PARAMS_REQUIRED,
    MSG_REQUIRED_OPTION,
    MSG_SPECIFIED_TWICE,
    MSG_TOO_MANY_PARAMETERS,
    MSG_UNKNOWN_OPTION,
    MSG_VALUE_NOT_BOOLEAN,
    MSG_VALUE_NOT_NUMBER,
    MSG_VALUE_NOT_SPECIFIED,
    OPTION_TOKEN_PATTERN,
    VERSION_OPTION_NAME,
)
from .errors import UsageError
from .models import Option, OptionType, OptionValue
from .registry import OptionRegistry
from .renderer import quote, render_failure, render_help, render_version
from .values import coerce_value

logger = logging.getLogger(__name__)

_OPTION_TOKEN_RE = re.compile(OPTION_TOKEN_PATTERN, re.DOTALL)


@dataclass(frozen=True)
class ParseOutcome:
    pass


@dataclass(frozen=True)
class ParsedArgs(ParseOutcome):
    options: dict[str, OptionValue] = field(default_factory=dict)
    params: tuple[str, ...] = ()
    exit_code: int = EXIT_OK

    def to_mapping(self) -> dict[str | int, OptionValue]:
        """Merge options and positionals (0-based integer keys) into one dict."""
        mapping: dict[str | int, OptionValue] = dict(self.options)
        mapping.update(enumerate(self.params))
        return mapping


@dataclass(frozen=True)
class HelpRequested(ParseOutcome):
    text: str
    exit_code: int = EXIT_OK


@dataclass(frozen=True)
class VersionRequested(ParseOutcome):
    text: str
    exit_code: int = EXIT_OK


@dataclass(frozen=True)
class UsageFailure(ParseOutcome):
    message: str
    text: str
    exit_code: int = EXIT_USAGE_ERROR


def evaluate(registry: OptionRegistry, argv: Sequence[str]) -> ParseOutcome:
    """Scan argv against registry and return the terminal outcome.

    Only the first usage error is reported. Help and version requests are
    honored only when the whole scan succeeds.
    """
    scanner = _Scanner(registry)
    try:
        scanner.scan(argv)
        if HELP_OPTION_NAME in scanner.options:
            return HelpRequested(text=render_help(registry))
        if VERSION_OPTION_NAME in scanner.options:
            return VersionRequested(text=render_version(registry))
        scanner.finish()
    except UsageError as exc:
        logger.debug("usage error for %s: %s", registry.command.name, exc.message)
        return UsageFailure(message=exc.message, text=render_failure(registry, exc.message))

    logger.debug(
        "parsed %d options and %d params for %s",
        len(scanner.options),
        len(scanner.params),
        registry.command.name,
    )
    return ParsedArgs(options=scanner.options, params=tuple(scanner.params))


class _Scanner:
    """Single left-to-right pass over the argument list."""

    def __init__(self, registry: OptionRegistry) -> None:
        self._registry = registry
        self.options: dict[str, OptionValue] = {}
        self.params: list[str] = []

    def scan(self, argv: Sequence[str]) -> None:
        index = 0
        while index < len(argv):
            token = argv[index]
            index += 1

            match = _OPTION_TOKEN_RE.match(token)
            if match is None:
                self._add_param(token)
                continue

            prefix, key = match.groups()
            if len(prefix) > MAX_OPTION_PREFIX_LEN:
                raise UsageError(MSG_UNKNOWN_OPTION.format(token=quote(token)))
            option = self._registry.lookup(key)
            if option is None:
                raise UsageError(MSG_UNKNOWN_OPTION.format(token=quote(token)))
            if option.name in self.options:
                raise UsageError(MSG_SPECIFIED_TWICE.format(token=quote(token)))

            if option.is_flag:
                self.options[option.name] = True
                continue

            if index >= len(argv):
                raise UsageError(MSG_VALUE_NOT_SPECIFIED.format(token=quote(token)))
            self.options[option.name] = _convert(option, token, argv[index])
            index += 1

    def finish(self) -> None:
        """Apply defaults, then check required options and parameters."""
        for name, value in self._registry.defaults.items():
            self.options.setdefault(name, value)

        for name in self._registry.required_names:
            if name not in self.options:
                raise UsageError(
                    MSG_REQUIRED_OPTION.format(token=quote(f"{LONG_PREFIX}{name}"))
                )

        required_count = self._registry.command.params_required
        if len(self.params) < required_count:
            raise UsageError(MSG_PARAMS_REQUIRED.format(count=required_count))

    def _add_param(self, token: str) -> None:
        params = self._registry.command.params
        if params is not None and len(self.params) >= len(params):
            raise UsageError(MSG_TOO_MANY_PARAMETERS)
        self.params.append(token)


def _convert(option: Option, token: str, text: str) -> OptionValue:
    value_type = option.type or OptionType.STRING
    try:
        return coerce_value(value_type, text)
    except ValueError:
        if value_type == OptionType.NUMBER:
            template = MSG_VALUE_NOT_NUMBER
        else:
            template = MSG_VALUE_NOT_BOOLEAN
        raise UsageError(template.format(token=quote(token), value=quote(text))) from None
