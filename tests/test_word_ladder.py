"""
Unit tests for the WordLadder graph.
"""

import pytest

from pathfinder.graph import DirectedEdge, WordLadder


class TestDictionary:
    """Test adding and loading words."""

    def test_add_word_lowercases(self):
        """Words are stored in lowercase."""
        ladder = WordLadder()
        assert ladder.add_word("Cold") is True
        assert "cold" in ladder
        assert "Cold" not in ladder

    @pytest.mark.parametrize("token", ["co1d", "cold!", "ice-cream", "two words", ""])
    def test_add_word_rejects_non_alphabetic(self, token):
        """Only purely alphabetic tokens are accepted."""
        ladder = WordLadder()
        assert ladder.add_word(token) is False
        assert ladder.node_count() == 0

    def test_charset(self):
        """The charset holds every letter of every accepted word."""
        ladder = WordLadder(["abc", "Cab", "d4d"])
        assert ladder.charset == {"a", "b", "c"}

    def test_from_file(self, tmp_path):
        """Comments, blank lines and invalid tokens are skipped."""
        path = tmp_path / "words.txt"
        path.write_text("# comment\n\ncold\n  Warm  \nab12\n#skip\ncord\n", encoding="utf-8")
        ladder = WordLadder.from_file(path)
        assert ladder.dictionary == {"cold", "warm", "cord"}
        assert len(ladder) == 3

    def test_from_file_missing(self, tmp_path):
        """A missing dictionary raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            WordLadder.from_file(tmp_path / "nope.txt")

    def test_sample_dictionary_loads(self, data_dir):
        """The bundled sample dictionary loads."""
        ladder = WordLadder.from_file(data_dir / "words.txt")
        assert "cold" in ladder
        assert "warm" in ladder


class TestEdges:
    """Test neighbour generation."""

    def test_one_letter_neighbours(self, ladder):
        """cord connects to words one substitution away."""
        targets = {e.target for e in ladder.outgoing_edges("cord")}
        assert targets == {"cold", "card", "word", "corn"}

    def test_no_self_loops(self, ladder):
        """A word is not its own neighbour."""
        assert all(e.target != "cold" for e in ladder.outgoing_edges("cold"))

    def test_edges_have_unit_weight(self, ladder):
        """Every ladder step costs 1."""
        edges = ladder.outgoing_edges("cold")
        assert edges == [DirectedEdge("cold", "cord", 1.0)]

    def test_isolated_word(self, ladder):
        """A word without neighbours has no edges (not an error)."""
        assert ladder.outgoing_edges("hate") == []

    def test_word_not_in_dictionary(self, ladder):
        """Unknown words can still be expanded."""
        targets = {e.target for e in ladder.outgoing_edges("wold")}
        assert targets == {"cold", "word"}

    def test_different_lengths_never_connected(self):
        """Substitutions keep the word length."""
        ladder = WordLadder(["cat", "cats", "cot"])
        assert {e.target for e in ladder.outgoing_edges("cat")} == {"cot"}

    def test_words_added_later_bring_new_letters(self):
        """Letters introduced after a lookup are used by the next lookup."""
        ladder = WordLadder(["cat"])
        assert ladder.outgoing_edges("cat") == []
        ladder.add_word("cot")
        ladder.add_word("cut")
        assert {e.target for e in ladder.outgoing_edges("cat")} == {"cot", "cut"}

    def test_edges_in_letter_order(self):
        """Neighbours at a position come out in alphabetical order."""
        ladder = WordLadder(["pin", "tin", "bin", "din"])
        targets = [e.target for e in ladder.outgoing_edges("pin")]
        assert targets == ["bin", "din", "tin"]


class TestHeuristic:
    """Test the Hamming-distance heuristic."""

    def test_identical(self, ladder):
        assert ladder.guess_cost("cold", "cold") == 0.0

    def test_hamming_distance(self, ladder):
        """Counts differing positions."""
        assert ladder.guess_cost("cold", "cord") == 1.0
        assert ladder.guess_cost("cold", "warm") == 4.0

    def test_unequal_lengths(self, ladder):
        """Length difference is added for words of different length."""
        assert ladder.guess_cost("cold", "colder") == 2.0

    def test_admissible_on_sample(self, ladder):
        """The estimate never exceeds the true ladder length."""
        from pathfinder.search import dijkstra

        for word in ladder.dictionary:
            result = dijkstra(ladder, word, "warm")
            if result.success:
                assert ladder.guess_cost(word, "warm") <= result.cost


class TestDescribe:
    """Test the text summary."""

    def test_describe_header(self, ladder):
        """The header names the word count and charset."""
        text = ladder.describe()
        assert text.startswith(f"Word ladder with {ladder.node_count()} words, charset: ")

    def test_describe_examples(self):
        """Five-letter words with neighbours are listed as examples."""
        ladder = WordLadder(["stone", "store", "shore", "cat"])
        text = str(ladder)
        assert "stone --> store" in text
        assert "cat -->" not in text

    def test_describe_limit(self):
        """At most `limit` example lines are listed."""
        ladder = WordLadder(["aaaaa", "aaaab", "aaaac", "aaaad"])
        lines = ladder.describe(limit=2).splitlines()
        assert len([line for line in lines if "-->" in line]) == 2
