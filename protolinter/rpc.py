"""Rules about RPC methods."""

from __future__ import annotations

from .model import ProtoInfo, Rule


class RPCNoClientStreaming(Rule):
    """RPCs must not be client streaming."""

    message = "client streaming RPCs are not allowed"

    def validate(self, proto_info: ProtoInfo):
        return self._collect(
            (rpc.position, rpc.name, rpc.comments)
            for service in proto_info.proto.services
            for rpc in service.rpcs
            if rpc.request.is_stream
        )


class RPCNoServerStreaming(Rule):
    """RPCs must not be server streaming."""

    message = "server streaming RPCs are not allowed"

    def validate(self, proto_info: ProtoInfo):
        return self._collect(
            (rpc.position, rpc.name, rpc.comments)
            for service in proto_info.proto.services
            for rpc in service.rpcs
            if rpc.response.is_stream
        )


class RPCRequestResponseUnique(Rule):
    """Each request and response type may be used by one RPC only."""

    message = "request and response types must be unique across all RPCs"

    def validate(self, proto_info: ProtoInfo):
        seen: set[str] = set()
        candidates = []
        for service in proto_info.proto.services:
            for rpc in service.rpcs:
                for message_type in (rpc.request.message_type, rpc.response.message_type):
                    if message_type in seen:
                        candidates.append((rpc.position, message_type, rpc.comments))
                    else:
                        seen.add(message_type)
        return self._collect(candidates)


class RPCRequestStandardName(Rule):
    """Requests must be named <Rpc>Request or <Service><Rpc>Request."""

    message = "rpc request should have suffix 'Request'"

    def validate(self, proto_info: ProtoInfo):
        return self._collect(
            (rpc.position, rpc.request.message_type, rpc.comments)
            for service in proto_info.proto.services
            for rpc in service.rpcs
            if rpc.request.message_type
            not in (f"{rpc.name}Request", f"{service.name}{rpc.name}Request")
        )


class RPCResponseStandardName(Rule):
    """Responses must be named <Rpc>Response or <Service><Rpc>Response."""

    message = "rpc response should have suffix 'Response'"

    def validate(self, proto_info: ProtoInfo):
        return self._collect(
            (rpc.position, rpc.response.message_type, rpc.comments)
            for service in proto_info.proto.services
            for rpc in service.rpcs
            if rpc.response.message_type
            not in (f"{rpc.name}Response", f"{service.name}{rpc.name}Response")
        )