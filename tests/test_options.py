"""Tests for option list parsing and provider lookup."""

from __future__ import annotations

from sitesettings.options import NONE_LABEL, OptionsRegistry, parse_options


def test_literal_pairs_keep_order():
    assert parse_options("1=Enabled|0=Disabled") == {"1": "Enabled", "0": "Disabled"}


def test_bare_item_is_its_own_label():
    assert parse_options("red|green=Green") == {"red": "red", "green": "Green"}


def test_empty_options():
    assert parse_options(None) == {}
    assert parse_options("") == {}


def test_translate_replaces_known_labels():
    labels = {"Enabled": "Activé"}

    result = parse_options("1=Enabled|0=Disabled", translate=labels.get)

    assert result == {"1": "Activé", "0": "Disabled"}


def test_registered_provider_supplies_options():
    registry = OptionsRegistry()

    @registry.register("timezones")
    def timezones():
        return {"UTC": "UTC", "Europe/Paris": "Paris"}

    assert parse_options("func:timezones", registry) == {"UTC": "UTC", "Europe/Paris": "Paris"}


def test_path_qualified_provider_resolves_last_segment():
    registry = OptionsRegistry()
    registry.register("categories", lambda: [(1, "News"), (2, "Events")])

    assert "blog/categories" in registry
    assert parse_options("func:blog/categories", registry) == {"1": "News", "2": "Events"}


def test_full_path_registration_wins():
    registry = OptionsRegistry()
    registry.register("categories", lambda: ["a=plain"])
    registry.register("blog/categories", lambda: ["b=qualified"])

    assert parse_options("func:blog/categories", registry) == {"b": "qualified"}


def test_provider_may_return_pipe_string():
    registry = OptionsRegistry()
    registry.register("yesno", lambda: "1=Yes|0=No")

    assert parse_options("func:yesno", registry) == {"1": "Yes", "0": "No"}


def test_unknown_provider_yields_none_choice():
    assert parse_options("func:missing", OptionsRegistry()) == {"": NONE_LABEL}
    assert parse_options("func:missing") == {"": NONE_LABEL}
    assert parse_options("func:missing", none_label="Nothing") == {"": "Nothing"}
