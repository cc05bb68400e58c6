"""Rules about enum declarations and their values."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .model import ProtoInfo, Rule, _iter_enums


def pascal_to_upper_snake(name: str) -> str:
    """Turn a PascalCase name into UPPER_SNAKE_CASE, one underscore per capital."""
    result = ""
    for char in name:
        if char.isupper():
            if result:
                result += "_"
            result += char
        else:
            result += char.upper()
    return result


class EnumFirstValueZero(Rule):
    """The first value of every enum must be zero."""

    message = "enum first value must be zero"

    def validate(self, proto_info: ProtoInfo):
        firsts = (enum.fields[0] for enum in _iter_enums(proto_info.proto))
        return self._collect(
            (value.position, value.number, value.comments)
            for value in firsts
            if value.number != "0"
        )


class EnumNoAllowAlias(Rule):
    """Enums must not set the allow_alias option."""

    message = "enum must not allow alias"

    def validate(self, proto_info: ProtoInfo):
        return self._collect(
            (enum.position, enum.name, enum.comments)
            for enum in _iter_enums(proto_info.proto)
            for option in enum.options
            if option.name == "allow_alias"
        )


_PASCAL_CASE = re.compile(r"[A-Z][a-z]+(?:[A-Z][a-z]+)*")


class EnumPascalCase(Rule):
    """Enum names must be PascalCase."""

    message = "enum name must be in PascalCase"

    def validate(self, proto_info: ProtoInfo):
        return self._collect(
            (enum.position, enum.name, enum.comments)
            for enum in _iter_enums(proto_info.proto)
            if not _PASCAL_CASE.fullmatch(enum.name)
        )


class EnumValuePrefix(Rule):
    """Enum value names must start with the enum name in UPPER_SNAKE_CASE."""

    message = "enum value prefix is not valid"

    def validate(self, proto_info: ProtoInfo):
        return self._collect(
            (value.position, value.ident, value.comments)
            for enum in _iter_enums(proto_info.proto)
            for value in enum.fields
            if not value.ident.startswith(pascal_to_upper_snake(enum.name))
        )


_UPPER_SNAKE_CASE = re.compile(r"[A-Z]+(?:_[A-Z]+)*")


class EnumValueUpperSnakeCase(Rule):
    """Enum value names must be UPPER_SNAKE_CASE."""

    message = "enum value must be in UPPER_SNAKE_CASE"

    def validate(self, proto_info: ProtoInfo):
        return self._collect(
            (value.position, value.ident, value.comments)
            for enum in _iter_enums(proto_info.proto)
            for value in enum.fields
            if not _UPPER_SNAKE_CASE.fullmatch(value.ident)
        )


@dataclass
class EnumZeroValueSuffix(Rule):
    """The zero value of every enum must be named ENUM_NAME_<suffix>."""

    suffix: str = ""

    message = "enum zero value suffix is not valid"

    def validate(self, proto_info: ProtoInfo):
        candidates = []
        for enum in _iter_enums(proto_info.proto):
            zero = enum.fields[0]
            if zero.ident != f"{pascal_to_upper_snake(enum.name)}_{self.suffix}":
                candidates.append((zero.position, zero.ident, zero.comments))
        return self._collect(candidates)