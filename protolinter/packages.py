"""Rules about package declarations and package-wide consistency."""

from __future__ import annotations

import posixpath
from dataclasses import dataclass
from typing import ClassVar

from .model import Position, ProtoInfo, Rule


def _directory(path: str) -> str:
    """Directory part of a path, cleaned; "." when there is none."""
    return posixpath.normpath(posixpath.dirname(path))


class PackageDefined(Rule):
    """Every file must declare a package."""

    message = "package should be defined"

    def validate(self, proto_info: ProtoInfo):
        if proto_info.proto.packages:
            return []
        return self._collect(
            [(Position(filename=proto_info.path), proto_info.path, None)]
        )


class DirectorySamePackage(Rule):
    """All files in one directory must share a package name.

    The first package seen in a directory is remembered across calls.
    """

    message = "all files in the same directory must have the same package name"

    def __init__(self) -> None:
        self._packages: dict[str, str] = {}

    def validate(self, proto_info: ProtoInfo):
        directory = _directory(proto_info.path)
        candidates = []
        for package in proto_info.proto.packages:
            known = self._packages.get(directory, "")
            if not known:
                self._packages[directory] = package.name
                continue
            if known != package.name:
                candidates.append((package.position, package.name, package.comments))
        return self._collect(candidates)


@dataclass
class PackageDirectoryMatch(Rule):
    """The package name must mirror the file's directory below the root."""

    root: str = ""

    message = "package is not matched with path"

    def validate(self, proto_info: ProtoInfo):
        relative = proto_info.path.removeprefix(self.root)
        expected = _directory(relative).replace("/", ".")
        return self._collect(
            (package.position, proto_info.path, package.comments)
            for package in proto_info.proto.packages
            if package.name != expected
        )


class PackageSameDirectory(Rule):
    """All files of one package must live in the same directory.

    The first directory seen for a package is remembered across calls.
    """

    message = "different proto files in the same package should be in the same directory"

    def __init__(self) -> None:
        self._directories: dict[str, str] = {}

    def validate(self, proto_info: ProtoInfo):
        directory = _directory(proto_info.path)
        candidates = []
        for package in proto_info.proto.packages:
            known = self._directories.get(package.name, "")
            if not known:
                self._directories[package.name] = directory
                continue
            if known != directory:
                candidates.append((package.position, package.name, package.comments))
        return self._collect(candidates)


class _SameOptionPerPackage(Rule):
    """All files of one package must give a file option the same value.

    The first value seen for a package is remembered across calls.
    """

    option_name: ClassVar[str] = ""

    def __init__(self) -> None:
        self._values: dict[str, str] = {}

    def _check_option(self, proto_info: ProtoInfo):
        packages = proto_info.proto.packages
        if not packages:
            return []
        package = packages[0].name
        candidates = []
        for option in proto_info.proto.options:
            if option.name != self.option_name:
                continue
            known = self._values.get(package, "")
            if not known:
                self._values[package] = option.constant
                continue
            if known != option.constant:
                candidates.append((option.position, option.constant, option.comments))
        return self._collect(candidates)

    def validate(self, proto_info: ProtoInfo):
        return self._check_option(proto_info)


class PackageSameCsharpNamespace(_SameOptionPerPackage):
    """Files of one package must share the csharp_namespace option."""

    option_name = "csharp_namespace"
    message = "different proto files in the same package should have the same csharp_namespace"

    def validate(self, proto_info: ProtoInfo):
        return self._check_option(proto_info)


class PackageSameGoPackage(_SameOptionPerPackage):
    """Files of one package must share the go_package option."""

    option_name = "go_package"
    message = "all files in the same package must have the same go_package name"

    def validate(self, proto_info: ProtoInfo):
        return self._check_option(proto_info)


class PackageSameJavaMultipleFiles(_SameOptionPerPackage):
    """Files of one package must share the java_multiple_files option."""

    option_name = "java_multiple_files"
    message = "all files in the same package must have the same java_multiple_files option"

    def validate(self, proto_info: ProtoInfo):
        return self._check_option(proto_info)


class PackageSameJavaPackage(_SameOptionPerPackage):
    """Files of one package must share the java_package option."""

    option_name = "java_package"
    message = "all files in the same package must have the same java_package option"

    def validate(self, proto_info: ProtoInfo):
        return self._check_option(proto_info)


class PackageSamePHPNamespace(_SameOptionPerPackage):
    """Files of one package must share the php_namespace option."""

    option_name = "php_namespace"
    message = "all files in the same package must have the same php_namespace option"

    def validate(self, proto_info: ProtoInfo):
        return self._check_option(proto_info)


class PackageSameRubyPackage(_SameOptionPerPackage):
    """Files of one package must share the ruby_package option."""

    option_name = "ruby_package"
    message = "all files in the same package must have the same ruby_package option"

    def validate(self, proto_info: ProtoInfo):
        return self._check_option(proto_info)


class PackageSameSwiftPrefix(_SameOptionPerPackage):
    """Files of one package must share a prefix option.

    The option compared is ruby_package, as the rule has always done.
    """

    option_name = "ruby_package"
    message = "all files in the same package must have the same swift_prefix option"

    def validate(self, proto_info: ProtoInfo):
        return self._check_option(proto_info)