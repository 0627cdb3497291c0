"""Tests for flextrigger.context.catalog."""

import pytest

from flextrigger.context.catalog import CatalogOptions, Trigger, TriggerCatalog, prefix_matches


def _catalog(*pairs, **options):
    return TriggerCatalog(
        [Trigger(text, content) for text, content in pairs],
        CatalogOptions(**options),
    )


class TestTrigger:
    def test_from_dict(self):
        t = Trigger.from_dict({"trigger": "gb", "content": "Goodbye!"})
        assert t == Trigger("gb", "Goodbye!")

    def test_to_dict(self):
        assert Trigger("gb", "Goodbye!").to_dict() == {"trigger": "gb", "content": "Goodbye!"}


class TestCatalogOptions:
    def test_defaults(self):
        opts = CatalogOptions()
        assert opts.max_trigger_length == 10
        assert opts.case_sensitive is True

    def test_zero_length_rejected(self):
        with pytest.raises(ValueError):
            CatalogOptions(max_trigger_length=0)

    def test_non_integer_rejected(self):
        with pytest.raises(ValueError):
            CatalogOptions(max_trigger_length="5")

    def test_fold_case_insensitive(self):
        assert CatalogOptions(case_sensitive=False).fold("GB") == "gb"

    def test_fold_case_sensitive(self):
        assert CatalogOptions().fold("GB") == "GB"


class TestReplace:
    def test_preserves_insertion_order(self):
        cat = _catalog(("b", 1), ("a", 2), ("c", 3))
        assert [t.text for t in cat] == ["b", "a", "c"]

    def test_accepts_mappings(self):
        cat = TriggerCatalog([{"trigger": "gb", "content": "Goodbye!"}])
        assert cat.triggers == (Trigger("gb", "Goodbye!"),)

    def test_full_replacement(self):
        cat = _catalog(("gb", "x"))
        cat.replace([Trigger("hi", "Hello")])
        assert [t.text for t in cat] == ["hi"]

    def test_long_triggers_dropped(self):
        cat = _catalog(("short", 1), ("muchtoolongtrigger", 2))
        assert [t.text for t in cat] == ["short"]
        assert [t.text for t in cat.dropped] == ["muchtoolongtrigger"]
        assert len(cat.source) == 2

    def test_empty_trigger_dropped(self):
        cat = _catalog(("", "nothing"), ("gb", "x"))
        assert [t.text for t in cat] == ["gb"]

    def test_replace_swaps_reference(self):
        cat = _catalog(("gb", "x"))
        before = cat.triggers
        cat.replace([Trigger("hi", "Hello")])
        assert before == (Trigger("gb", "x"),)
        assert cat.triggers is not before


class TestSetOptions:
    def test_lowering_limit_drops_triggers(self):
        cat = _catalog(("gb", 1), ("gballs", 2))
        cat.set_options(max_trigger_length=3)
        assert [t.text for t in cat] == ["gb"]

    def test_raising_limit_restores_triggers(self):
        cat = _catalog(("gb", 1), ("gballs", 2), max_trigger_length=3)
        assert len(cat) == 1
        cat.set_options(max_trigger_length=6)
        assert [t.text for t in cat] == ["gb", "gballs"]

    def test_merge_keeps_other_option(self):
        cat = _catalog(("gb", 1), max_trigger_length=4)
        opts = cat.set_options(case_sensitive=False)
        assert opts.max_trigger_length == 4
        assert opts.case_sensitive is False

    def test_no_changes(self):
        cat = _catalog(("gb", 1))
        assert cat.set_options() == CatalogOptions()

    def test_invalid_limit_keeps_previous_options(self):
        cat = _catalog(("gb", 1))
        with pytest.raises(ValueError):
            cat.set_options(max_trigger_length=0)
        assert cat.options.max_trigger_length == 10
        assert len(cat) == 1


class TestLookup:
    def setup_method(self):
        self.cat = _catalog(("gb", "Goodbye!"), ("gballs", "Golf balls"), ("goodbye", "Farewell!"))

    def test_completions_in_catalog_order(self):
        assert self.cat.completions("g") == ["gb", "gballs", "goodbye"]

    def test_completions_narrow(self):
        assert self.cat.completions("gba") == ["gballs"]

    def test_completions_none(self):
        assert self.cat.completions("x") == []

    def test_completions_case_sensitive(self):
        assert self.cat.completions("GB") == []

    def test_completions_case_insensitive_keep_catalog_casing(self):
        self.cat.set_options(case_sensitive=False)
        assert self.cat.completions("GB") == ["gb", "gballs"]

    def test_find(self):
        assert self.cat.find("gballs") == Trigger("gballs", "Golf balls")

    def test_find_missing(self):
        assert self.cat.find("gbal") is None

    def test_find_case_insensitive(self):
        self.cat.set_options(case_sensitive=False)
        assert self.cat.find("GB") == Trigger("gb", "Goodbye!")

    def test_find_exact_ignores_case_mode(self):
        cat = _catalog(("ab", "lower"), ("AB", "UPPER"))
        cat.set_options(case_sensitive=False)
        assert cat.find("AB") == Trigger("ab", "lower")
        assert cat.find("AB", exact=True) == Trigger("AB", "UPPER")
        assert cat.find("aB", exact=True) is None


class TestPrefixMatches:
    def test_returns_triggers_in_order(self):
        triggers = [Trigger("gb", 1), Trigger("x", 2), Trigger("gballs", 3)]
        assert prefix_matches(triggers, str, "gb") == [Trigger("gb", 1), Trigger("gballs", 3)]

    def test_fold_applies_to_both_sides(self):
        triggers = [Trigger("ab", 1), Trigger("AB", 2), Trigger("ac", 3)]
        assert prefix_matches(triggers, str.lower, "Ab") == [Trigger("ab", 1), Trigger("AB", 2)]
