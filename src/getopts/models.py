"""Specification models for getopts."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .constants import NAME_PATTERN

_NAME_RE = re.compile(NAME_PATTERN)

OptionValue = str | int | float | bool


class OptionType(StrEnum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"


def is_valid_name(name: str) -> bool:
    """Return True when name can be used as an option or parameter name."""
    return _NAME_RE.fullmatch(name) is not None


def value_matches_type(value: OptionValue, value_type: OptionType) -> bool:
    # bool is an int subclass, so it has to be ruled out for numbers explicitly.
    if value_type == OptionType.BOOLEAN:
        return isinstance(value, bool)
    if value_type == OptionType.NUMBER:
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    return isinstance(value, str)


class CommandSpec(BaseModel):
    """Command name, version, positional parameters and help text."""

    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")

    name: str
    version: str | None = None
    params: list[str] | None = None
    params_required: int = Field(default=0, ge=0)
    summary: str | None = None
    desc: str | None = None

    @field_validator("name")
    @classmethod
    def check_name(cls, value: str) -> str:
        if not is_valid_name(value):
            raise ValueError(f"{value!r} must be the form of {NAME_PATTERN}")
        return value

    @field_validator("params")
    @classmethod
    def check_params(cls, value: list[str] | None) -> list[str] | None:
        if value is None:
            return value
        for index, name in enumerate(value, start=1):
            if not is_valid_name(name):
                raise ValueError(
                    f"#{index} {name!r} must be the form of {NAME_PATTERN}"
                )
        return value

    @model_validator(mode="after")
    def check_params_required(self) -> CommandSpec:
        if self.params is not None and self.params_required > len(self.params):
            raise ValueError(
                "params_required must be less than or equal to "
                f"{len(self.params)} (params length)"
            )
        return self


class OptionSpec(BaseModel):
    """Declaration of a single option, keyed by name in the option mapping."""

    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")

    alias: str | None = None
    required: bool = False
    is_flag: bool = False
    # Plain strings such as "number" are accepted here.
    type: OptionType | None = Field(default=None, strict=False)
    default: bool | int | float | str | None = None
    help: str | None = None
    desc: str | None = None

    @field_validator("alias")
    @classmethod
    def check_alias(cls, value: str | None) -> str | None:
        if value is None:
            return value
        if len(value) != 1:
            raise ValueError(f"{value!r} must be single character")
        if value == "-":
            raise ValueError("alias cannot be '-'")
        return value

    @model_validator(mode="after")
    def check_flag_type_default(self) -> OptionSpec:
        if self.is_flag:
            if self.type is not None:
                raise ValueError("type cannot be set when is_flag is true")
            if self.default is not None:
                raise ValueError("default cannot be set when is_flag is true")
        elif self.default is not None:
            value_type = self.value_type
            assert value_type is not None
            if not value_matches_type(self.default, value_type):
                raise ValueError(f"default must be {value_type}")
        return self

    @property
    def value_type(self) -> OptionType | None:
        """Effective value type; None for flag options."""
        if self.is_flag:
            return None
        return self.type or OptionType.STRING


@dataclass(frozen=True)
class Option:
    """Resolved option descriptor shared by name and alias lookups."""

    name: str
    alias: str | None
    required: bool
    is_flag: bool
    type: OptionType | None
    default: OptionValue | None
    help: str | None
    desc: str | None
    usage: str  # --name or --name <type>
    spec: str  # -a, --name <type>
