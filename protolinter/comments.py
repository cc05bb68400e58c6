"""Rules requiring comments on proto elements."""

from __future__ import annotations

from .model import ProtoInfo, Rule, _iter_enums


class CommentEnum(Rule):
    """Enums must have non-empty comments."""

    message = "enum comments must not be empty"

    def validate(self, proto_info: ProtoInfo):
        return self._collect(
            (enum.position, enum.name, enum.comments)
            for enum in _iter_enums(proto_info.proto)
            if not enum.comments
        )


class CommentEnumValue(Rule):
    """Enum values must have non-empty comments."""

    message = "enum value comments must not be empty"

    def validate(self, proto_info: ProtoInfo):
        return self._collect(
            (value.position, value.ident, value.comments)
            for enum in _iter_enums(proto_info.proto)
            for value in enum.fields
            if not value.comments
        )


class CommentField(Rule):
    """Message fields must have non-empty comments."""

    message = "field comments must not be empty"

    def validate(self, proto_info: ProtoInfo):
        return self._collect(
            (fld.position, fld.name, fld.comments)
            for message in proto_info.proto.messages
            for fld in message.fields
            if not fld.comments
        )


class CommentMessage(Rule):
    """Messages must have non-empty comments."""

    message = "message comment is empty"

    def validate(self, proto_info: ProtoInfo):
        return self._collect(
            (message.position, message.name, message.comments)
            for message in proto_info.proto.messages
            if not message.comments
        )


class CommentOneof(Rule):
    """Oneofs must have non-empty comments."""

    message = "oneof comments must not be empty"

    def validate(self, proto_info: ProtoInfo):
        return self._collect(
            (oneof.position, oneof.name, oneof.comments)
            for message in proto_info.proto.messages
            for oneof in message.oneofs
            if not oneof.comments
        )


class CommentRPC(Rule):
    """RPCs are reported when their service carries no comment."""

    message = "rpc comments must not be empty"

    def validate(self, proto_info: ProtoInfo):
        return self._collect(
            (rpc.position, rpc.name, service.comments)
            for service in proto_info.proto.services
            for rpc in service.rpcs
            if not service.comments
        )


class CommentService(Rule):
    """Services must have non-empty comments."""

    message = "service comments must not be empty"

    def validate(self, proto_info: ProtoInfo):
        return self._collect(
            (service.position, service.name, service.comments)
            for service in proto_info.proto.services
            if not service.comments
        )