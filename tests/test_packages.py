import pytest

from protolinter.model import Comment, Issue, Option, Package, Position, Proto, ProtoInfo
from protolinter.packages import (
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

INVALID_AUTH = "./../../testdata/auth/service.proto"
INVALID_AUTH2 = "./../../testdata/auth/queue.proto"
INVALID_PKG_QUEUE = "./../../testdata/invalid_pkg/queue.proto"
INVALID_OPTIONS_QUEUE = "./../../testdata/invalid_options/queue.proto"
INVALID_OPTIONS_SESSION = "./../../testdata/invalid_options/session.proto"
EMPTY_PKG = "./../../testdata/auth/empty_pkg.proto"
VALID_SESSION = "./../../testdata/api/session/v1/session.proto"
VALID_EVENTS = "./../../testdata/api/session/v1/events.proto"

PKG_POS = Position(offset=20, line=3, column=1)


def info(path, package=None, options=(), package_comments=()):
    packages = []
    if package is not None:
        packages.append(Package(package, PKG_POS, list(package_comments)))
    return ProtoInfo(path, Proto(packages=packages, options=list(options)))


def opt(name, constant, line=9, offset=142):
    return Option(name, constant, Position(offset=offset, line=line, column=1))


# PackageDefined


def test_package_defined_message():
    assert PackageDefined().message == "package should be defined"


def test_package_defined_missing():
    issues = PackageDefined().validate(info(EMPTY_PKG))
    assert issues == [
        Issue(
            Position(filename=EMPTY_PKG),
            EMPTY_PKG,
            "package should be defined",
            "PACKAGE_DEFINED",
        )
    ]


def test_package_defined_valid():
    assert PackageDefined().validate(info(VALID_SESSION, "api.session.v1")) == []


# DirectorySamePackage


def test_directory_same_package_message():
    assert (
        DirectorySamePackage().message
        == "all files in the same directory must have the same package name"
    )


def test_directory_same_package_invalid():
    rule = DirectorySamePackage()
    issues = rule.validate(info(INVALID_AUTH, "Session"))
    issues += rule.validate(info(INVALID_AUTH2, "Queue"))
    assert Issue(
        PKG_POS,
        "Queue",
        "all files in the same directory must have the same package name",
        "DIRECTORY_SAME_PACKAGE",
    ) in issues


def test_directory_same_package_valid():
    rule = DirectorySamePackage()
    issues = rule.validate(info(VALID_SESSION, "api.session.v1"))
    issues += rule.validate(info(VALID_EVENTS, "api.session.v1"))
    assert issues == []


def test_directory_same_package_other_directory_is_independent():
    rule = DirectorySamePackage()
    rule.validate(info(INVALID_AUTH, "Session"))
    assert rule.validate(info(INVALID_PKG_QUEUE, "Queue")) == []


def test_directory_same_package_ignore_comment():
    rule = DirectorySamePackage()
    rule.validate(info(INVALID_AUTH, "Session"))
    issues = rule.validate(
        info(
            INVALID_AUTH2,
            "Queue",
            package_comments=[Comment("// buf:lint:ignore DIRECTORY_SAME_PACKAGE")],
        )
    )
    assert issues == []


# PackageDirectoryMatch


def test_package_directory_match_message():
    assert PackageDirectoryMatch().message == "package is not matched with path"


def test_package_directory_match_invalid():
    rule = PackageDirectoryMatch(root="./../../testdata/")
    issues = rule.validate(info(INVALID_AUTH, "Session"))
    assert Issue(
        PKG_POS,
        INVALID_AUTH,
        "package is not matched with path",
        "PACKAGE_DIRECTORY_MATCH",
    ) in issues


def test_package_directory_match_valid():
    rule = PackageDirectoryMatch(root="./../../testdata/")
    assert rule.validate(info(VALID_SESSION, "api.session.v1")) == []


def test_package_directory_match_file_without_package():
    rule = PackageDirectoryMatch(root="./../../testdata/")
    assert rule.validate(info(EMPTY_PKG)) == []


# PackageSameDirectory


def test_package_same_directory_message():
    assert (
        PackageSameDirectory().message
        == "different proto files in the same package should be in the same directory"
    )


def test_package_same_directory_invalid():
    rule = PackageSameDirectory()
    issues = rule.validate(info(INVALID_AUTH2, "queue"))
    issues += rule.validate(info(INVALID_PKG_QUEUE, "queue"))
    assert [(i.rule_name, i.source_name) for i in issues] == [
        ("PACKAGE_SAME_DIRECTORY", "queue")
    ]


def test_package_same_directory_valid():
    rule = PackageSameDirectory()
    issues = rule.validate(info(VALID_SESSION, "api.session.v1"))
    issues += rule.validate(info(VALID_EVENTS, "api.session.v1"))
    assert issues == []


def test_package_same_directory_ignore_comment():
    rule = PackageSameDirectory()
    rule.validate(info(INVALID_AUTH2, "queue"))
    issues = rule.validate(
        info(
            INVALID_PKG_QUEUE,
            "queue",
            package_comments=[Comment("// easyp:lint:ignore PACKAGE_SAME_DIRECTORY")],
        )
    )
    assert issues == []


# PackageSameCsharpNamespace


def test_package_same_csharp_namespace_message():
    assert (
        PackageSameCsharpNamespace().message
        == "different proto files in the same package should have the same csharp_namespace"
    )


def test_package_same_csharp_namespace_invalid():
    rule = PackageSameCsharpNamespace()
    issues = rule.validate(
        info(
            INVALID_OPTIONS_QUEUE,
            "session.v1",
            [opt("csharp_namespace", '"Example.Api.Session.V1"', line=7, offset=100)],
        )
    )
    issues += rule.validate(
        info(
            INVALID_OPTIONS_SESSION,
            "session.v1",
            [opt("csharp_namespace", '"Example.Api.Session.V2"')],
        )
    )
    assert Issue(
        Position(offset=142, line=9, column=1),
        '"Example.Api.Session.V2"',
        "different proto files in the same package should have the same csharp_namespace",
        "PACKAGE_SAME_CSHARP_NAMESPACE",
    ) in issues


def test_package_same_csharp_namespace_valid():
    rule = PackageSameCsharpNamespace()
    value = '"Example.Api.Session.V1"'
    issues = rule.validate(
        info(VALID_SESSION, "api.session.v1", [opt("csharp_namespace", value)])
    )
    issues += rule.validate(
        info(VALID_EVENTS, "api.session.v1", [opt("csharp_namespace", value)])
    )
    assert issues == []


OPTION_RULES = [
    (PackageSameGoPackage, "go_package", "PACKAGE_SAME_GO_PACKAGE",
     "all files in the same package must have the same go_package name"),
    (PackageSameJavaMultipleFiles, "java_multiple_files", "PACKAGE_SAME_JAVA_MULTIPLE_FILES",
     "all files in the same package must have the same java_multiple_files option"),
    (PackageSameJavaPackage, "java_package", "PACKAGE_SAME_JAVA_PACKAGE",
     "all files in the same package must have the same java_package option"),
    (PackageSamePHPNamespace, "php_namespace", "PACKAGE_SAME_PHP_NAMESPACE",
     "all files in the same package must have the same php_namespace option"),
    (PackageSameRubyPackage, "ruby_package", "PACKAGE_SAME_RUBY_PACKAGE",
     "all files in the same package must have the same ruby_package option"),
    (PackageSameSwiftPrefix, "ruby_package", "PACKAGE_SAME_SWIFT_PREFIX",
     "all files in the same package must have the same swift_prefix option"),
]


@pytest.mark.parametrize("rule_cls, option_name, rule_name, message", OPTION_RULES)
def test_option_rule_message(rule_cls, option_name, rule_name, message):
    rule = rule_cls()
    rule.validate(info(VALID_SESSION, "a.v1", [opt(option_name, '"x"')]))
    issues = rule.validate(info(VALID_EVENTS, "a.v1", [opt(option_name, '"y"')]))
    assert rule.message == message
    assert [i.message for i in issues] == [message]


@pytest.mark.parametrize("rule_cls, option_name, rule_name, message", OPTION_RULES)
def test_option_rule_reports_differing_value(rule_cls, option_name, rule_name, message):
    rule = rule_cls()
    first = rule.validate(
        info(INVALID_OPTIONS_QUEUE, "session.v1", [opt(option_name, '"one"')])
    )
    second = rule.validate(
        info(INVALID_OPTIONS_SESSION, "session.v1", [opt(option_name, '"two"')])
    )
    assert first == []
    assert second == [
        Issue(Position(offset=142, line=9, column=1), '"two"', message, rule_name)
    ]


@pytest.mark.parametrize("rule_cls, option_name, rule_name, message", OPTION_RULES)
def test_option_rule_accepts_same_value(rule_cls, option_name, rule_name, message):
    rule = rule_cls()
    issues = rule.validate(info(VALID_SESSION, "api.session.v1", [opt(option_name, '"x"')]))
    issues += rule.validate(info(VALID_EVENTS, "api.session.v1", [opt(option_name, '"x"')]))
    assert issues == []


@pytest.mark.parametrize("rule_cls, option_name, rule_name, message", OPTION_RULES)
def test_option_rule_separates_packages(rule_cls, option_name, rule_name, message):
    rule = rule_cls()
    rule.validate(info(VALID_SESSION, "a.v1", [opt(option_name, '"x"')]))
    assert rule.validate(info(VALID_EVENTS, "b.v1", [opt(option_name, '"y"')])) == []


@pytest.mark.parametrize("rule_cls, option_name, rule_name, message", OPTION_RULES)
def test_option_rule_without_package(rule_cls, option_name, rule_name, message):
    rule = rule_cls()
    rule.validate(info(VALID_SESSION, "a.v1", [opt(option_name, '"x"')]))
    assert rule.validate(info(EMPTY_PKG, None, [opt(option_name, '"y"')])) == []


@pytest.mark.parametrize("rule_cls, option_name, rule_name, message", OPTION_RULES)
def test_option_rule_ignore_comment(rule_cls, option_name, rule_name, message):
    rule = rule_cls()
    rule.validate(info(VALID_SESSION, "a.v1", [opt(option_name, '"x"')]))
    ignored = Option(
        option_name, '"y"', Position(line=4), [Comment(f"// buf:lint:ignore {rule_name}")]
    )
    assert rule.validate(info(VALID_EVENTS, "a.v1", [ignored])) == []


def test_option_rule_ignores_other_options():
    rule = PackageSameGoPackage()
    rule.validate(info(VALID_SESSION, "a.v1", [opt("java_package", '"x"')]))
    assert rule.validate(info(VALID_EVENTS, "a.v1", [opt("java_package", '"y"')])) == []


def test_swift_prefix_rule_compares_ruby_package_only():
    rule = PackageSameSwiftPrefix()
    rule.validate(info(VALID_SESSION, "a.v1", [opt("swift_prefix", '"X"')]))
    assert rule.validate(info(VALID_EVENTS, "a.v1", [opt("swift_prefix", '"Y"')])) == []