import pytest

from servitor.domain import Entry, EntryKind
from servitor.errors import IllegalMutationError, InvalidArgumentError, UnmappedEntryError
from servitor.registry import EntryRegistry


@pytest.fixture
def registry():
    return EntryRegistry()


def test_value_is_stored_with_kind(registry):
    registry.map_value("app.name", "demo")

    assert registry.exists("app.name")
    assert registry.lookup("app.name") == Entry("app.name", EntryKind.VALUE, "demo")


def test_service_and_factory_keep_arguments(registry):
    registry.map_service("logger", "sample_components.Logger", ["app.channel"])
    registry.map_factory("widget", "sample_components.Widget")

    assert registry.lookup("logger").kind is EntryKind.SERVICE
    assert registry.lookup("logger").arguments == ["app.channel"]
    assert registry.lookup("widget").kind is EntryKind.FACTORY
    assert registry.lookup("widget").arguments is None


def test_remapping_overwrites_silently(registry):
    registry.map_value("thing", 1)
    registry.map_factory("thing", "sample_components.Widget")

    assert registry.lookup("thing").kind is EntryKind.FACTORY
    assert len(registry) == 1


def test_remapping_discards_cached_singleton(registry):
    registry.map_service("thing", "sample_components.Widget")
    registry.cache("thing", object())

    registry.map_service("thing", "sample_components.Logger")

    assert not registry.is_cached("thing")


def test_unmap_removes_entry_and_singleton(registry):
    registry.map_service("thing", "sample_components.Widget")
    registry.cache("thing", object())

    registry.unmap("thing")

    assert not registry.exists("thing")
    assert not registry.is_cached("thing")


def test_unmap_of_unknown_name_is_a_no_op(registry):
    registry.unmap("missing")

    assert len(registry) == 0


def test_lookup_of_unknown_name_raises(registry):
    with pytest.raises(UnmappedEntryError, match='"missing" is not mapped') as e:
        registry.lookup("missing")

    assert e.value.name == "missing"


@pytest.mark.parametrize("name", ["", None, 3])
def test_entry_names_must_be_non_empty_strings(registry, name):
    with pytest.raises(InvalidArgumentError):
        registry.map_value(name, "value")


def test_direct_writes_are_rejected(registry):
    with pytest.raises(IllegalMutationError, match="map_value, map_service or map_factory"):
        registry["thing"] = "value"

    with pytest.raises(TypeError):
        registry.entries["thing"] = Entry("thing", EntryKind.VALUE, "value")

    assert not registry.exists("thing")


def test_names_follow_registration(registry):
    registry.map_value("a", 1)
    registry.map_value("b", 2)

    assert registry.names() == ["a", "b"]
    assert list(registry) == ["a", "b"]
    assert "a" in registry


def test_evict_drops_only_named_singletons(registry):
    registry.map_service("a", "sample_components.Widget")
    registry.map_service("b", "sample_components.Widget")
    registry.cache("a", object())
    registry.cache("b", object())

    registry.evict({"a", "unknown"})

    assert registry.cached_names() == {"b"}
    assert registry.exists("a")
