import pytest

from servitor.arguments import parse_argument, parse_arguments, resolve_argument
from servitor.config import ContainerConfig
from servitor.domain import Literal, OptionMap, Reference
from servitor.errors import InvalidArgumentError


@pytest.fixture
def config():
    return ContainerConfig()


@pytest.mark.parametrize("spec", [None, [], (), {}, ""])
def test_empty_specifications_have_no_arguments(spec, config):
    assert parse_arguments(spec, config) == []


def test_single_value_is_wrapped(config):
    assert parse_arguments("plain", config) == [Literal("plain")]
    assert parse_arguments(0, config) == [Literal(0)]
    assert parse_arguments({"a": 1}, config) == [Literal({"a": 1})]


def test_strings_with_delimiter_are_references(config):
    assert parse_arguments(["logger.default", "plain-string", 3], config) == [
        Reference("logger.default"),
        Literal("plain-string"),
        Literal(3),
    ]


def test_nested_sequence_becomes_option_map(config):
    argument = parse_argument(["color::theme.color", "size::theme.size"], config)

    assert argument == OptionMap(
        {"color": Reference("theme.color"), "size": Reference("theme.size")}
    )


def test_option_items_split_on_first_separator(config):
    argument = parse_argument(["key::a.b::c"], config)

    assert argument == OptionMap({"key": Reference("a.b::c")})


def test_option_items_without_reference_are_skipped(config):
    argument = parse_argument(["color::plainvalue", "no-separator.here", "size::theme.size"], config)

    assert argument == OptionMap({"size": Reference("theme.size")})


def test_strict_options_reject_items_without_reference():
    with pytest.raises(InvalidArgumentError, match="color::plainvalue"):
        parse_argument(["color::plainvalue"], ContainerConfig(strict_options=True))


def test_sequences_of_non_strings_stay_literal(config):
    assert parse_argument([1, 2, 3], config) == Literal([1, 2, 3])
    assert parse_argument(("color::theme.color", 7), config) == Literal(("color::theme.color", 7))


def test_tagged_arguments_are_kept(config):
    tagged = [Literal("a.b"), Reference("plain"), OptionMap({"x": Literal(1)})]

    assert parse_arguments(tagged, config) == tagged


def test_custom_delimiters():
    config = ContainerConfig(reference_delimiter="@", option_separator="=")

    assert parse_arguments(["@logger", "a.b", ["color=@color"]], config) == [
        Reference("@logger"),
        Literal("a.b"),
        OptionMap({"color": Reference("@color")}),
    ]


def test_resolution_looks_up_references():
    entries = {"theme.color": "red", "theme.size": 12}
    argument = OptionMap(
        {"color": Reference("theme.color"), "nested": OptionMap({"size": Reference("theme.size")})}
    )

    assert resolve_argument(argument, entries.__getitem__) == {
        "color": "red",
        "nested": {"size": 12},
    }
    assert resolve_argument(Literal("theme.color"), entries.__getitem__) == "theme.color"


def test_resolution_rejects_untagged_values():
    with pytest.raises(InvalidArgumentError):
        resolve_argument("theme.color", lambda name: None)
