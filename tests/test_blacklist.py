"""Tests for the blacklist store and the add/remove word API."""

from __future__ import annotations

from censor.engine.blacklist import BlacklistStore
from censor.engine.censor_engine import CensorEngine


class TestBlacklistStore:
    def test_initial_exclusions_are_lowercased(self) -> None:
        store = BlacklistStore(["Hells"], excluded=["HELLS"])
        assert store.excluded == ("hells",)
        assert store.is_excluded("Hells")

    def test_add_terms_keeps_duplicates_and_case(self) -> None:
        store = BlacklistStore()
        store.add_terms(["Dog", "Dog"])
        assert store.terms == ("Dog", "Dog")

    def test_remove_terms_only_excludes(self) -> None:
        store = BlacklistStore(["hells"])
        store.remove_terms(["Hells"])

        assert store.terms == ("hells",)
        assert store.excluded == ("hells",)
        assert "hells" in store

    def test_add_terms_lifts_exclusion(self) -> None:
        store = BlacklistStore(["dog"])
        store.remove_terms(["dog", "DOG", "cat"])
        store.add_terms(["Dog"])

        assert store.excluded == ("cat",)
        assert not store.is_excluded("dog")
        assert store.terms == ("dog", "Dog")

    def test_snapshots_are_immutable_copies(self) -> None:
        store = BlacklistStore(["dog"])
        snapshot = store.terms
        store.add_terms(["cat"])

        assert snapshot == ("dog",)
        assert list(store) == ["dog", "cat"]
        assert len(store) == 2

    def test_caller_list_is_copied(self) -> None:
        terms = ["dog"]
        store = BlacklistStore(terms)
        store.add_terms(["cat"])
        assert terms == ["dog"]


class TestAddWords:
    def test_appends_words(self, engine: CensorEngine) -> None:
        engine.add_words("dog", "go")
        assert engine.clean("Go dog go") == "** *** **"

    def test_appends_unpacked_list(self, engine: CensorEngine) -> None:
        words = ["go", "dog"]
        engine.add_words(*words)
        assert engine.clean("Go dog go") == "** *** **"

    def test_does_not_touch_default_asset(self, engine: CensorEngine) -> None:
        engine.add_words("dog")
        assert not CensorEngine().is_profane("dog")


class TestRemoveWords:
    def test_removed_word_is_case_insensitive(self, engine: CensorEngine) -> None:
        engine.remove_words("Hells")
        assert engine.clean("This is a hells good test") == "This is a hells good test"

    def test_removes_several_words(self, engine: CensorEngine) -> None:
        engine.remove_words(*["hells", "sadist"])
        assert (
            engine.clean("This is a hells sadist test") == "This is a hells sadist test"
        )

    def test_words_stay_listed(self, engine: CensorEngine) -> None:
        engine.remove_words("hells")
        assert "hells" in engine.words
        assert "hells" in engine.excluded

    def test_exclusion_at_construction(self) -> None:
        engine = CensorEngine(exclude=["Hells"])
        assert not engine.is_profane("hells")

    def test_add_after_remove_restores_matching(self, engine: CensorEngine) -> None:
        engine.remove_words("shit")
        assert not engine.is_profane("SHIT")

        engine.add_words("Shit")
        assert engine.is_profane("shit")
        assert engine.is_profane("SHIT")

    def test_add_after_repeated_remove(self, engine: CensorEngine) -> None:
        engine.remove_words("shit")
        engine.remove_words("Shit")
        engine.add_words("shit")
        assert engine.is_profane("shit")
