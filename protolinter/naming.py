"""Rules about the naming of files, packages, messages, fields, oneofs, services and RPCs."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass

from .model import Position, ProtoInfo, Rule

_LOWER_SNAKE_CASE_DOTTED = re.compile(r"[a-z]+(?:[_|\[.][a-z0-9]+)*")


def is_lower_snake_case(name: str) -> bool:
    """Tell whether a name is lower_snake_case, dots allowed between parts."""
    return _LOWER_SNAKE_CASE_DOTTED.fullmatch(name) is not None


class FileLowerSnakeCase(Rule):
    """Proto file names must be lower_snake_case.proto."""

    message = "file name should be lower_snake_case.proto"

    def validate(self, proto_info: ProtoInfo):
        if is_lower_snake_case(os.path.basename(proto_info.path)):
            return []
        return self._collect(
            [(Position(filename=proto_info.path), proto_info.path, None)]
        )


_FIELD_NAME = re.compile(r"[a-z0-9]+(?:_[a-z0-9]+)*")


class FieldLowerSnakeCase(Rule):
    """Message field names must be lower_snake_case."""

    message = "message field should be lower_snake_case"

    def validate(self, proto_info: ProtoInfo):
        return self._collect(
            (fld.position, fld.name, fld.comments)
            for message in proto_info.proto.messages
            for fld in message.fields
            if not _FIELD_NAME.fullmatch(fld.name)
        )


_MESSAGE_NAME = re.compile(r"[A-Z][a-zA-Z0-9]+(?:[A-Z][a-zA-Z0-9]+)*")


class MessagePascalCase(Rule):
    """Message names must be PascalCase."""

    message = "message name should be PascalCase"

    def validate(self, proto_info: ProtoInfo):
        return self._collect(
            (message.position, message.name, message.comments)
            for message in proto_info.proto.messages
            if not _MESSAGE_NAME.fullmatch(message.name)
        )


_ONEOF_NAME = re.compile(r"[a-z]+(?:_[a-z]+)*")


class OneofLowerSnakeCase(Rule):
    """Oneof names must be lower_snake_case."""

    message = "oneof name should be lower_snake_case"

    def validate(self, proto_info: ProtoInfo):
        return self._collect(
            (oneof.position, oneof.name, oneof.comments)
            for message in proto_info.proto.messages
            for oneof in message.oneofs
            if not _ONEOF_NAME.fullmatch(oneof.name)
        )


class PackageLowerSnakeCase(Rule):
    """Package names must be lower_snake_case."""

    message = "package name should be lower_snake_case"

    def validate(self, proto_info: ProtoInfo):
        return self._collect(
            (package.position, package.name, package.comments)
            for package in proto_info.proto.packages
            if not is_lower_snake_case(package.name)
        )


_VERSION_SUFFIX = re.compile(
    r".*v\d+|.*v\d+test.*|.*v\d+(?:alpha|beta)\d*|.*v\d+p\d+(?:alpha|beta)\d*\Z",
    re.ASCII,
)


class PackageVersionSuffix(Rule):
    """Package names must carry a version component such as v1."""

    message = "package name should have a version suffix"

    def validate(self, proto_info: ProtoInfo):
        return self._collect(
            (package.position, package.name, package.comments)
            for package in proto_info.proto.packages
            if not _VERSION_SUFFIX.search(package.name)
        )


_RPC_NAME = re.compile(r"[A-Z][a-zA-Z0-9]*")


class RPCPascalCase(Rule):
    """RPC names must be PascalCase."""

    message = "RPC names should be PascalCase"

    def validate(self, proto_info: ProtoInfo):
        return self._collect(
            (rpc.position, rpc.name, rpc.comments)
            for service in proto_info.proto.services
            for rpc in service.rpcs
            if not _RPC_NAME.fullmatch(rpc.name)
        )


_SERVICE_NAME = re.compile(r"[A-Z][a-z]+(?:[A-Z]|[a-z]+)*")


class ServicePascalCase(Rule):
    """Service names must be PascalCase."""

    message = "service names must be PascalCase"

    def validate(self, proto_info: ProtoInfo):
        return self._collect(
            (service.position, service.name, service.comments)
            for service in proto_info.proto.services
            if not _SERVICE_NAME.fullmatch(service.name)
        )


@dataclass
class ServiceSuffix(Rule):
    """Service names must end with the configured suffix."""

    suffix: str = ""

    message = "service name should have suffix"

    def validate(self, proto_info: ProtoInfo):
        return self._collect(
            (service.position, service.name, service.comments)
            for service in proto_info.proto.services
            if not service.name.endswith(self.suffix)
        )