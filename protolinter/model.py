"""Data model of a parsed proto file and the base class of lint rules."""

from __future__ import annotations

import enum
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import ClassVar, Iterable, Iterator, Optional, Sequence, Tuple


@dataclass(frozen=True)
class Position:
    """A location inside a proto file."""

    filename: str = ""
    offset: int = 0
    line: int = 0
    column: int = 0


@dataclass(frozen=True)
class Comment:
    """A comment attached to a proto element, kept verbatim."""

    raw: str


@dataclass
class Option:
    """An `option name = constant;` declaration."""

    name: str
    constant: str = ""
    position: Position = field(default_factory=Position)
    comments: list[Comment] = field(default_factory=list)


@dataclass
class EnumField:
    """A single value of an enum."""

    ident: str
    number: str
    position: Position = field(default_factory=Position)
    comments: list[Comment] = field(default_factory=list)


@dataclass
class Enum:
    """An enum declaration."""

    name: str
    fields: list[EnumField] = field(default_factory=list)
    options: list[Option] = field(default_factory=list)
    position: Position = field(default_factory=Position)
    comments: list[Comment] = field(default_factory=list)


@dataclass
class Field:
    """A message field."""

    name: str
    type: str = ""
    options: list[Option] = field(default_factory=list)
    position: Position = field(default_factory=Position)
    comments: list[Comment] = field(default_factory=list)


@dataclass
class Oneof:
    """A oneof group inside a message."""

    name: str
    fields: list[Field] = field(default_factory=list)
    position: Position = field(default_factory=Position)
    comments: list[Comment] = field(default_factory=list)


@dataclass
class Message:
    """A message declaration with its nested elements."""

    name: str
    fields: list[Field] = field(default_factory=list)
    oneofs: list[Oneof] = field(default_factory=list)
    enums: list[Enum] = field(default_factory=list)
    messages: list["Message"] = field(default_factory=list)
    position: Position = field(default_factory=Position)
    comments: list[Comment] = field(default_factory=list)


@dataclass
class RPCMessage:
    """The request or response side of an RPC."""

    message_type: str
    is_stream: bool = False


@dataclass
class RPC:
    """An RPC method of a service."""

    name: str
    request: RPCMessage
    response: RPCMessage
    options: list[Option] = field(default_factory=list)
    position: Position = field(default_factory=Position)
    comments: list[Comment] = field(default_factory=list)


@dataclass
class Service:
    """A service declaration."""

    name: str
    rpcs: list[RPC] = field(default_factory=list)
    position: Position = field(default_factory=Position)
    comments: list[Comment] = field(default_factory=list)


@dataclass
class Package:
    """A package statement."""

    name: str
    position: Position = field(default_factory=Position)
    comments: list[Comment] = field(default_factory=list)


class ImportModifier(enum.Enum):
    """The modifier of an import statement."""

    NONE = ""
    PUBLIC = "public"
    WEAK = "weak"


@dataclass
class Import:
    """An import statement; the location keeps its quotes."""

    location: str
    modifier: ImportModifier = ImportModifier.NONE
    position: Position = field(default_factory=Position)
    comments: list[Comment] = field(default_factory=list)


@dataclass
class Extend:
    """An `extend` block."""

    message_type: str
    fields: list[Field] = field(default_factory=list)
    position: Position = field(default_factory=Position)
    comments: list[Comment] = field(default_factory=list)


@dataclass
class Proto:
    """The top-level contents of a proto file."""

    packages: list[Package] = field(default_factory=list)
    imports: list[Import] = field(default_factory=list)
    options: list[Option] = field(default_factory=list)
    messages: list[Message] = field(default_factory=list)
    enums: list[Enum] = field(default_factory=list)
    services: list[Service] = field(default_factory=list)
    extends: list[Extend] = field(default_factory=list)


@dataclass
class ProtoInfo:
    """A proto file under lint, with the files it imports keyed by import path."""

    path: str
    proto: Proto
    imported: dict[str, Proto] = field(default_factory=dict)


@dataclass(frozen=True)
class Issue:
    """A problem found by a rule."""

    position: Position
    source_name: str
    message: str
    rule_name: str


class InvalidRuleError(ValueError):
    """Raised when a configuration names a rule that does not exist."""


_IGNORE_MARKER = re.compile(r"\b(?:buf|easyp):lint:ignore\s+([A-Za-z0-9_]+)")


def is_ignored(comments: Optional[Iterable[Comment]], rule_name: str) -> bool:
    """Tell whether the comments hold an ignore directive for the rule."""
    return any(
        rule_name in _IGNORE_MARKER.findall(comment.raw) for comment in comments or ()
    )


_WORD_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def _rule_name(class_name: str) -> str:
    return _WORD_BOUNDARY.sub("_", class_name).upper()


Candidate = Tuple[Position, str, Sequence[Comment]]


class Rule(ABC):
    """A lint rule; its name is derived from the class name in UPPER_SNAKE_CASE."""

    name: ClassVar[str]
    message: ClassVar[str] = ""

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if "name" not in cls.__dict__:
            cls.name = _rule_name(cls.__name__)

    @abstractmethod
    def validate(self, proto_info: ProtoInfo) -> list[Issue]:
        """Check one proto file and return the issues found."""

    def issue(
        self,
        position: Position,
        source_name: str,
        comments: Optional[Sequence[Comment]] = None,
    ) -> Optional[Issue]:
        """Build an issue for this rule, or None when the comments ignore it."""
        if is_ignored(comments, self.name):
            return None
        return Issue(position, source_name, self.message, self.name)

    def _collect(self, candidates: Iterable[Candidate]) -> list[Issue]:
        issues = (self.issue(pos, source, comments) for pos, source, comments in candidates)
        return [issue for issue in issues if issue is not None]


def _iter_enums(proto: Proto) -> Iterator[Enum]:
    """Top-level enums, then enums declared directly in top-level messages."""
    yield from proto.enums
    for message in proto.messages:
        yield from message.enums