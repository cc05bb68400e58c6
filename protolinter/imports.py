"""Rules about import statements."""

from __future__ import annotations

from typing import Iterator

from .model import ImportModifier, Message, Proto, ProtoInfo, Rule


class ImportNoPublic(Rule):
    """Imports must not be declared public."""

    message = "import should not be public"

    def validate(self, proto_info: ProtoInfo):
        return self._collect(
            (imp.position, imp.location, imp.comments)
            for imp in proto_info.proto.imports
            if imp.modifier is ImportModifier.PUBLIC
        )


class ImportNoWeak(Rule):
    """Imports must not be declared weak."""

    message = "import should not be weak"

    def validate(self, proto_info: ProtoInfo):
        return self._collect(
            (imp.position, imp.location, imp.comments)
            for imp in proto_info.proto.imports
            if imp.modifier is ImportModifier.WEAK
        )


def _package_name(proto: Proto) -> str:
    return proto.packages[0].name if proto.packages else ""


def _import_path(location: str) -> str:
    return location.strip("\"'")


def _split_reference(reference: str, source_package: str) -> tuple[str, str]:
    """Split a type or option reference into its package and its local name."""
    name = reference.strip("()").lstrip(".")
    package, dot, ident = name.rpartition(".")
    if not dot:
        return source_package, name
    return package, ident


def _message_references(messages: list[Message]) -> Iterator[str]:
    for message in messages:
        yield from _message_references(message.messages)
        for fld in message.fields:
            yield fld.type
            for option in fld.options:
                yield option.name
        for oneof in message.oneofs:
            for fld in oneof.fields:
                yield fld.type


def _references(proto: Proto) -> Iterator[str]:
    for service in proto.services:
        for rpc in service.rpcs:
            yield rpc.request.message_type
            yield rpc.response.message_type
            for option in rpc.options:
                yield option.name
    yield from _message_references(proto.messages)
    for extend in proto.extends:
        yield extend.message_type


def _declares(proto: Proto, name: str) -> bool:
    """Tell whether an imported file declares the name at top level."""
    return (
        any(fld.name == name for extend in proto.extends for fld in extend.fields)
        or any(message.name == name for message in proto.messages)
        or any(enum.name == name for enum in proto.enums)
    )


class ImportUsed(Rule):
    """Every import must be used by the file that declares it."""

    message = "import is not used"

    def validate(self, proto_info: ProtoInfo):
        source_package = _package_name(proto_info.proto)

        by_package: dict[str, list[str]] = {}
        for path, imported in proto_info.imported.items():
            package = _package_name(imported)
            if package:
                by_package.setdefault(package, []).append(path)

        declared = {_import_path(imp.location): imp for imp in proto_info.proto.imports}

        used: set[str] = set()
        for reference in _references(proto_info.proto):
            package, name = _split_reference(reference, source_package)
            for path in by_package.get(package, ()):
                if path in declared and _declares(proto_info.imported[path], name):
                    used.add(path)

        return self._collect(
            (imp.position, imp.location, imp.comments)
            for path, imp in declared.items()
            if path not in used
        )