"""Option registry: validates specifications and derives display data.

Building a registry is the single validation gate for command and option
specifications. Every problem found here is a programmer error and is
raised as SpecError; user input is never involved.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import ValidationError

from .constants import (
    DEFAULT_ANNOTATION_TEMPLATE,
    HELP_OPTION_ALIAS,
    HELP_OPTION_HELP,
    HELP_OPTION_NAME,
    LONG_PREFIX,
    NAME_PATTERN,
    SHORT_PREFIX,
    VERSION_OPTION_ALIAS,
    VERSION_OPTION_HELP,
    VERSION_OPTION_NAME,
)
from .errors import SpecError
from .models import CommandSpec, Option, OptionSpec, OptionValue, is_valid_name
from .values import format_value

logger = logging.getLogger(__name__)


class OptionRegistry:
    """Immutable lookup table of resolved options for one command."""

    def __init__(self, command: CommandSpec) -> None:
        self._command = command
        self._by_name: dict[str, Option] = {}
        self._by_alias: dict[str, str] = {}
        self._names: list[str] = []
        self._required: list[str] = []
        self._defaults: dict[str, OptionValue] = {}
        self._max_spec_width = 0

    @classmethod
    def build(
        cls,
        command: CommandSpec | Mapping[str, Any],
        options: Mapping[str, OptionSpec | Mapping[str, Any]],
    ) -> OptionRegistry:
        """Validate command and option specifications and build a registry.

        The implicit help option is always registered; the implicit version
        option is registered when the command has a version. User options
        follow in mapping order.

        Raises:
            SpecError: If any specification is malformed
        """
        registry = cls(_validate_command(command))
        registry._add(
            HELP_OPTION_NAME,
            OptionSpec(alias=HELP_OPTION_ALIAS, is_flag=True, help=HELP_OPTION_HELP),
        )
        if registry._command.version is not None:
            registry._add(
                VERSION_OPTION_NAME,
                OptionSpec(
                    alias=VERSION_OPTION_ALIAS, is_flag=True, help=VERSION_OPTION_HELP
                ),
            )

        if not isinstance(options, Mapping):
            raise SpecError("options must be a mapping of option name to spec")
        for name, spec in options.items():
            registry._add(name, _validate_option(name, spec))

        logger.debug(
            "built option registry for %s: %d options, %d required",
            registry._command.name,
            len(registry._names),
            len(registry._required),
        )
        return registry

    def _add(self, name: str, spec: OptionSpec) -> None:
        if name in self._by_name:
            raise SpecError(f"option {name!r} is already defined")
        if spec.alias is not None and spec.alias in self._by_alias:
            raise SpecError(
                f"{name}.alias {spec.alias!r} is already used by "
                f"{self._by_alias[spec.alias]!r} option"
            )

        option = _resolve_option(name, spec)
        self._by_name[name] = option
        if option.alias is not None:
            self._by_alias[option.alias] = name
        self._names.append(name)
        if option.required:
            self._required.append(name)
        if option.default is not None:
            self._defaults[name] = option.default
        self._max_spec_width = max(self._max_spec_width, len(option.spec))

    @property
    def command(self) -> CommandSpec:
        return self._command

    @property
    def names(self) -> tuple[str, ...]:
        """Option names in registration order."""
        return tuple(self._names)

    @property
    def required_names(self) -> tuple[str, ...]:
        return tuple(self._required)

    @property
    def defaults(self) -> Mapping[str, OptionValue]:
        return MappingProxyType(self._defaults)

    @property
    def max_spec_width(self) -> int:
        return self._max_spec_width

    @property
    def has_version(self) -> bool:
        return self._command.version is not None

    def sorted_names(self) -> list[str]:
        return sorted(self._names)

    def option(self, name: str) -> Option:
        return self._by_name[name]

    def lookup(self, key: str) -> Option | None:
        """Resolve an option by canonical name or single-character alias."""
        option = self._by_name.get(key)
        if option is not None:
            return option
        name = self._by_alias.get(key)
        if name is None:
            return None
        return self._by_name[name]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.lookup(key) is not None

    def __len__(self) -> int:
        return len(self._names)


def build_registry(
    command: CommandSpec | Mapping[str, Any],
    options: Mapping[str, OptionSpec | Mapping[str, Any]],
) -> OptionRegistry:
    return OptionRegistry.build(command, options)


def _validate_command(command: CommandSpec | Mapping[str, Any]) -> CommandSpec:
    if isinstance(command, CommandSpec):
        return command
    if not isinstance(command, Mapping):
        raise SpecError("cmd must be a CommandSpec or a mapping")
    try:
        return CommandSpec.model_validate(dict(command))
    except ValidationError as exc:
        raise SpecError(_describe_validation_error("cmd", exc)) from exc


def _validate_option(name: Any, spec: OptionSpec | Mapping[str, Any]) -> OptionSpec:
    if not isinstance(name, str) or not is_valid_name(name):
        raise SpecError(f"option name {name!r} must be the form of {NAME_PATTERN}")
    if isinstance(spec, OptionSpec):
        return spec
    if not isinstance(spec, Mapping):
        raise SpecError(f"{name} option must be an OptionSpec or a mapping")
    try:
        return OptionSpec.model_validate(dict(spec))
    except ValidationError as exc:
        raise SpecError(_describe_validation_error(name, exc)) from exc


def _resolve_option(name: str, spec: OptionSpec) -> Option:
    usage = f"{LONG_PREFIX}{name}"
    value_type = spec.value_type
    if value_type is not None:
        usage = f"{usage} <{value_type}>"

    option_spec = usage
    if spec.alias is not None:
        option_spec = f"{SHORT_PREFIX}{spec.alias}, {usage}"

    help_text = spec.help
    if help_text is not None and spec.default is not None:
        help_text = DEFAULT_ANNOTATION_TEMPLATE.format(
            help=help_text, value=format_value(spec.default)
        )

    return Option(
        name=name,
        alias=spec.alias,
        required=spec.required,
        is_flag=spec.is_flag,
        type=value_type,
        default=spec.default,
        help=help_text,
        desc=spec.desc,
        usage=usage,
        spec=option_spec,
    )


def _describe_validation_error(prefix: str, exc: ValidationError) -> str:
    """Reduce a pydantic error to one line naming the offending field."""
    error = exc.errors()[0]
    if error["type"] == "value_error" and "error" in error.get("ctx", {}):
        message = str(error["ctx"]["error"])
    else:
        message = error["msg"]
    location = ".".join(str(part) for part in error["loc"])
    if location:
        return f"{prefix}.{location}: {message}"
    return f"{prefix}: {message}"
