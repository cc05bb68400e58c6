# protolinter

Lint rules for Protocol Buffers definitions. Each rule looks at one
already-interpreted `.proto` file, given as a `ProtoInfo` that holds a `Proto`
model. It returns a list of `Issue` objects.

## Installing

```
pip install protolinter
```

To run the test suite:

```
pip install "protolinter[test]"
pytest
```

## The model

`protolinter.model` describes a proto file with plain dataclasses:

- `Proto`, `Package`, `Import` (with an `ImportModifier` of `NONE`, `PUBLIC` or `WEAK`)
- `Option`, `Message`, `Field`, `Oneof`
- `Enum`, `EnumField`
- `Service`, `RPC`, `RPCMessage`
- `Extend`

Each element carries a `Position` (`filename`, `offset`, `line`, `column`)
and its `Comment`s. A `Comment` keeps its raw text.

A `ProtoInfo` binds a `Proto` to its `path`. Its `imported` field is a dict
from import path (without quotes) to the `Proto` of each imported file.

An `Issue` has these fields:

- `position`
- `source_name`, which is the offending name or value
- `message`
- `rule_name`

## Rules

Every rule subclasses `protolinter.model.Rule`. A rule's `name` is its class
name in UPPER_SNAKE_CASE, for example `ServicePascalCase` has the name
`SERVICE_PASCAL_CASE`. Its `message` is a fixed text.

The rules are spread over these modules:

- `protolinter.comments`: `CommentEnum`, `CommentEnumValue`, `CommentField`,
  `CommentMessage`, `CommentOneof`, `CommentRPC`, `CommentService`.
- `protolinter.enums`: `EnumFirstValueZero`, `EnumNoAllowAlias`,
  `EnumPascalCase`, `EnumValuePrefix`, `EnumValueUpperSnakeCase`,
  `EnumZeroValueSuffix(suffix=...)`. The helper `pascal_to_upper_snake` is
  also here.
- `protolinter.naming`: `FileLowerSnakeCase`, `FieldLowerSnakeCase`,
  `MessagePascalCase`, `OneofLowerSnakeCase`, `PackageLowerSnakeCase`,
  `PackageVersionSuffix`, `RPCPascalCase`, `ServicePascalCase`,
  `ServiceSuffix(suffix=...)`. The helper `is_lower_snake_case` is also here.
- `protolinter.imports`: `ImportNoPublic`, `ImportNoWeak`, `ImportUsed`.
  `ImportUsed` looks up referenced types in the files given in
  `ProtoInfo.imported`.
- `protolinter.rpc`: `RPCNoClientStreaming`, `RPCNoServerStreaming`,
  `RPCRequestResponseUnique`, `RPCRequestStandardName`,
  `RPCResponseStandardName`.
- `protolinter.packages`: `PackageDefined`, `PackageDirectoryMatch(root=...)`,
  and the cross-file checks listed below.

The cross-file checks in `protolinter.packages` are:

- `DirectorySamePackage`
- `PackageSameDirectory`
- `PackageSameCsharpNamespace`
- `PackageSameGoPackage`
- `PackageSameJavaMultipleFiles`
- `PackageSameJavaPackage`
- `PackageSamePHPNamespace`
- `PackageSameRubyPackage`
- `PackageSameSwiftPrefix`

These rules remember what they saw in earlier calls. Use one instance for all
the files of a project. `PackageSameSwiftPrefix` compares the `ruby_package`
option.

### Ignoring a rule

A rule reports nothing for an element whose comments hold
`buf:lint:ignore RULE_NAME` or `easyp:lint:ignore RULE_NAME`.
`protolinter.model.is_ignored(comments, rule_name)` makes this check.

## Example

```python
from protolinter.model import Package, Position, Proto, ProtoInfo, Service
from protolinter.naming import ServicePascalCase

proto = Proto(
    packages=[Package("api.session.v1", position=Position(line=3, column=1))],
    services=[Service("auth", position=Position(line=10, column=1))],
)
info = ProtoInfo(path="api/session/v1/session.proto", proto=proto)

for issue in ServicePascalCase().validate(info):
    print(issue.position.line, issue.rule_name, issue.message, issue.source_name)
# 10 SERVICE_PASCAL_CASE service names must be PascalCase auth
```

## Building a rule set from configuration

```python
from protolinter.builder import LintConfig, new_rules

config = LintConfig(
    use=["MINIMAL", "BASIC", "DEFAULT"],
    except_=["PACKAGE_VERSION_SUFFIX"],
    enum_zero_value_suffix="UNSPECIFIED",
    service_suffix="Service",
)
rules, ignore_only = new_rules(config)
```

### Groups

`protolinter.builder.GROUPS` maps each group to its rule names. The groups are
`MINIMAL`, `BASIC`, `DEFAULT`, `COMMENTS` and `UNARY_RPC`.

`unwrap_lint_groups` expands groups into rule names. A name that occurs more
than once after expansion is dropped altogether.

`remove_except` removes the excepted names.

`unwrap_ignore_only` expands group keys of the ignore-only map. `new_rules`
returns that expanded map alongside the rules.

`new_rules` raises `InvalidRuleError` for an unknown rule name.

`PackageDirectoryMatch` is built with the root `"."`.

## What it does not do

This package does not read or parse `.proto` files. The caller must build the
`Proto` model.

It has no command-line tool.

It does not apply the ignore-only map to files or directories. `new_rules`
only returns that map.