from __future__ import annotations

from zcw.runtime import CoreRegistry, HostObject, MappingHostObject, method_names, resolve_method


class Browser(HostObject):
    def method_names(self):
        return ["back", "title"]

    def back(self):
        return "back"

    # listed but not callable
    title = "Home"

    def close(self):
        return "closed"


def test_host_object_exposes_listed_callables_only() -> None:
    browser = Browser()

    assert resolve_method(browser, "back")() == "back"
    assert resolve_method(browser, "title") is None
    assert resolve_method(browser, "close") is None
    assert method_names(browser) == ["back", "title"]


def test_mapping_host_object() -> None:
    host = HostObject.from_mapping({"click": lambda label: label, "name": "page"})

    assert isinstance(host, MappingHostObject)
    assert resolve_method(host, "click")("Save") == "Save"
    assert resolve_method(host, "name") is None
    assert resolve_method(host, "missing") is None


def test_plain_mapping_lists_callable_entries() -> None:
    page = {"click": print, "url": "https://example.com", 3: print}

    assert resolve_method(page, "click") is print
    assert resolve_method(page, "url") is None
    assert method_names(page) == ["click"]


def test_registry_as_bound_value() -> None:
    registry = CoreRegistry({"open": print})

    assert resolve_method(registry, "open") is print
    assert method_names(registry) == ["open"]


def test_other_values_have_no_methods() -> None:
    for value in ("text", 1.5, None, ["a"], object()):
        assert resolve_method(value, "upper") is None
        assert method_names(value) == []
