from coffee_bot.services.menu_catalog import default_catalog
from coffee_bot.services.order_interpreter.lexicon import Lexicon, find_best_match
from coffee_bot.services.order_interpreter.models import LexiconEntry
from coffee_bot.services.order_interpreter.similarity import similarity


class TestFindBestMatch:
    """Tests for find_best_match."""

    def setup_method(self):
        self.catalog = default_catalog()

    def test_alias_exact_match(self):
        """Alias hits score as exact matches."""
        match = find_best_match("cap", self.catalog.menu)
        assert match is not None
        assert match.key == "cappuccino"
        assert match.value.name == "Cappuccino"
        assert match.score == 1.0

    def test_typo_match(self):
        """Small typos still resolve."""
        match = find_best_match("lattee", self.catalog.menu)
        assert match is not None
        assert match.value.name == "Latte"

    def test_no_match_below_threshold(self):
        """Distant terms return no match."""
        assert find_best_match("espresso", self.catalog.menu) is None
        assert find_best_match("blah", self.catalog.menu) is None

    def test_threshold_is_exclusive(self):
        """A score equal to the threshold is rejected."""
        lexicon = Lexicon([LexiconEntry("abc", 1)])
        threshold = similarity("abx", "abc")
        assert find_best_match("abx", lexicon, threshold) is None
        assert find_best_match("abx", lexicon, threshold - 0.01).value == 1

    def test_first_entry_wins_ties(self):
        """Earlier entries win when scores tie."""
        lexicon = Lexicon([LexiconEntry("abc", "first"), LexiconEntry("abd", "second")])
        match = find_best_match("abx", lexicon, threshold=0.5)
        assert match.value == "first"

    def test_best_score_beats_declaration_order(self):
        """A higher score wins regardless of order."""
        lexicon = Lexicon([LexiconEntry("abc", "first"), LexiconEntry("abx", "second")])
        assert find_best_match("abx", lexicon, threshold=0.5).value == "second"

    def test_size_and_milk_lexicons_have_no_aliases(self):
        """Modifier lexicons carry plain keys."""
        assert all(not e.aliases for e in self.catalog.sizes)
        assert find_best_match("larg", self.catalog.sizes).value.name == "Large"
        assert find_best_match("oat", self.catalog.milks).value.name == "Oat Milk"


def test_lexicon_lookup_helpers():
    lexicon = Lexicon([LexiconEntry("small", 1), LexiconEntry("large", 2)])
    assert len(lexicon) == 2
    assert "small" in lexicon
    assert lexicon.get("large") == 2
    assert lexicon.get("medium") is None
    assert lexicon.keys() == ["small", "large"]
