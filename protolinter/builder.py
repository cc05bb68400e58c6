"""Selection of lint rules from a configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, Sequence

from .comments import (
    CommentEnum,
    CommentEnumValue,
    CommentField,
    CommentMessage,
    CommentOneof,
    CommentRPC,
    CommentService,
)
from .enums import (
    EnumFirstValueZero,
    EnumNoAllowAlias,
    EnumPascalCase,
    EnumValuePrefix,
    EnumValueUpperSnakeCase,
    EnumZeroValueSuffix,
)
from .imports import ImportNoPublic, ImportNoWeak, ImportUsed
from .model import InvalidRuleError, Rule
from .naming import (
    FieldLowerSnakeCase,
    FileLowerSnakeCase,
    MessagePascalCase,
    OneofLowerSnakeCase,
    PackageLowerSnakeCase,
    PackageVersionSuffix,
    RPCPascalCase,
    ServicePascalCase,
    ServiceSuffix,
)
from .packages import (
    DirectorySamePackage,
    PackageDefined,
    PackageDirectoryMatch,
    PackageSameCsharpNamespace,
    PackageSameDirectory,
    PackageSameGoPackage,
    PackageSameJavaMultipleFiles,
    PackageSameJavaPackage,
    PackageSamePHPNamespace,
    PackageSameRubyPackage,
    PackageSameSwiftPrefix,
)
from .rpc import (
    RPCNoClientStreaming,
    RPCNoServerStreaming,
    RPCRequestResponseUnique,
    RPCRequestStandardName,
    RPCResponseStandardName,
)

MINIMAL_GROUP = "MINIMAL"
BASIC_GROUP = "BASIC"
DEFAULT_GROUP = "DEFAULT"
COMMENTS_GROUP = "COMMENTS"
UNARY_RPC_GROUP = "UNARY_RPC"


@dataclass
class LintConfig:
    """Which rules to run, which to skip, and where to ignore them."""

    use: list[str] = field(default_factory=list)
    except_: list[str] = field(default_factory=list)
    ignore_only: dict[str, list[str]] = field(default_factory=dict)
    enum_zero_value_suffix: str = ""
    service_suffix: str = ""


_MINIMAL = (
    DirectorySamePackage,
    PackageDefined,
    PackageDirectoryMatch,
    PackageSameDirectory,
)

_BASIC = (
    EnumFirstValueZero,
    EnumNoAllowAlias,
    EnumPascalCase,
    EnumValueUpperSnakeCase,
    FieldLowerSnakeCase,
    ImportNoPublic,
    ImportNoWeak,
    ImportUsed,
    MessagePascalCase,
    OneofLowerSnakeCase,
    PackageLowerSnakeCase,
    PackageSameCsharpNamespace,
    PackageSameGoPackage,
    PackageSameJavaMultipleFiles,
    PackageSameJavaPackage,
    PackageSamePHPNamespace,
    PackageSameRubyPackage,
    PackageSameSwiftPrefix,
    RPCPascalCase,
    ServicePascalCase,
)

_DEFAULT = (
    EnumValuePrefix,
    EnumZeroValueSuffix,
    FileLowerSnakeCase,
    RPCRequestResponseUnique,
    RPCRequestStandardName,
    RPCResponseStandardName,
    PackageVersionSuffix,
    ServiceSuffix,
)

_COMMENTS = (
    CommentEnum,
    CommentEnumValue,
    CommentField,
    CommentMessage,
    CommentOneof,
    CommentRPC,
    CommentService,
)

_UNARY_RPC = (
    RPCNoClientStreaming,
    RPCNoServerStreaming,
)

GROUPS: dict[str, tuple[str, ...]] = {
    MINIMAL_GROUP: tuple(cls.name for cls in _MINIMAL),
    BASIC_GROUP: tuple(cls.name for cls in _BASIC),
    DEFAULT_GROUP: tuple(cls.name for cls in _DEFAULT),
    COMMENTS_GROUP: tuple(cls.name for cls in _COMMENTS),
    UNARY_RPC_GROUP: tuple(cls.name for cls in _UNARY_RPC),
}


def _factories(config: LintConfig) -> dict[str, Callable[[], Rule]]:
    factories: dict[str, Callable[[], Rule]] = {
        cls.name: cls for cls in (*_MINIMAL, *_BASIC, *_DEFAULT, *_COMMENTS, *_UNARY_RPC)
    }
    factories[PackageDirectoryMatch.name] = lambda: PackageDirectoryMatch(root=".")
    factories[EnumZeroValueSuffix.name] = lambda: EnumZeroValueSuffix(
        suffix=config.enum_zero_value_suffix
    )
    factories[ServiceSuffix.name] = lambda: ServiceSuffix(suffix=config.service_suffix)
    return factories


def unwrap_lint_groups(use: Iterable[str]) -> list[str]:
    """Expand group names into rule names.

    Names that occur more than once after expansion are dropped entirely;
    the rest keep their order.
    """
    expanded: list[str] = []
    for name in use:
        expanded.extend(GROUPS.get(name, (name,)))
    counts: dict[str, int] = {}
    for name in expanded:
        counts[name] = counts.get(name, 0) + 1
    return [name for name in expanded if counts[name] == 1]


def unwrap_ignore_only(ignore_only: dict[str, list[str]]) -> dict[str, list[str]]:
    """Expand group names used as keys into one entry per rule of the group."""
    result: dict[str, list[str]] = {}
    for name, paths in ignore_only.items():
        for rule_name in GROUPS.get(name, (name,)):
            result[rule_name] = paths
    return result


def remove_except(except_: Sequence[str], use: Iterable[str]) -> list[str]:
    """Drop the excepted names from the list of rules to use."""
    excluded = set(except_)
    return [name for name in use if name not in excluded]


def new_rules(config: LintConfig) -> tuple[list[Rule], dict[str, list[str]]]:
    """Build the rules the configuration asks for, and its ignore-only map.

    Raises InvalidRuleError for a rule name that does not exist.
    """
    factories = _factories(config)
    names = remove_except(config.except_, unwrap_lint_groups(config.use))
    rules: list[Rule] = []
    for name in names:
        factory = factories.get(name)
        if factory is None:
            raise InvalidRuleError(f"invalid rule: {name}")
        rules.append(factory())
    return rules, unwrap_ignore_only(config.ignore_only)