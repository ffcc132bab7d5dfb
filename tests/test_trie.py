"""
Tests for abstrie.core.trie — insertion and structural queries.

Covers:
  - Character and word tries from the reference scenarios
  - Empty sequence marks the root terminal
  - Prefix sharing and the no-duplicate-edges invariant
  - Re-insertion changes counts only
  - Pass-through and terminal counts
  - matches / ``in`` on concrete and generalized paths
  - Folding independently built tries together
  - Very long sequences do not hit the recursion limit
  - Sibling order ties broken by qualified type and repr
"""

import sys

import pytest

from abstrie import Concrete, Generalized, GeneralizationTrie, TrieNode


def _assert_edges_consistent(trie: GeneralizationTrie):
    for node in trie.iter_nodes():
        labels = list(node.edges)
        assert len(labels) == len(set(labels))
        for label, child in node.edges.items():
            assert child.label == label
            assert child.depth == node.depth + 1


def test_char_trie_has_four_terminals(char_trie):
    assert len(char_trie.terminal_nodes()) == 4
    assert char_trie.total_sequences == 4


def test_word_trie_structure(word_trie):
    root = word_trie.root
    assert set(root.edges) == {Concrete("the"), Concrete("a")}

    the = root.get_child(Concrete("the"))
    assert set(the.edges) == {Concrete("cat"), Concrete("dog")}

    a = root.get_child(Concrete("a"))
    assert set(a.edges) == {Concrete("dog")}

    assert len(word_trie.terminal_nodes()) == 3


def test_empty_sequence_marks_root_terminal():
    trie = GeneralizationTrie()
    end = trie.insert([])

    assert end is trie.root
    assert trie.root.is_terminal
    assert trie.root.edges == {}
    assert trie.root.label is None


def test_root_not_terminal_by_default(char_trie):
    assert not char_trie.root.is_terminal
    assert char_trie.root.label is None


def test_shared_prefix_uses_same_nodes():
    trie = GeneralizationTrie()
    end_cat = trie.insert("cat")
    end_car = trie.insert("car")

    node = trie.root
    for token in "ca":
        node = node.get_child(Concrete(token))
    assert node.get_child(Concrete("t")) is end_cat
    assert node.get_child(Concrete("r")) is end_car
    assert trie.node_count() == 5


def test_no_duplicate_edges(char_trie, word_trie):
    _assert_edges_consistent(char_trie)
    _assert_edges_consistent(word_trie)


def test_reinsertion_changes_counts_not_structure():
    once = GeneralizationTrie.from_words(["cat", "car"])
    twice = GeneralizationTrie.from_words(["cat", "car", "cat"])

    assert once.visualize() == twice.visualize()
    assert once.node_count() == twice.node_count()
    assert len(once.terminal_nodes()) == len(twice.terminal_nodes())
    assert twice.total_sequences == 3


def test_counts_accumulate_along_path():
    trie = GeneralizationTrie.from_words(["cat", "cat", "car"])

    c = trie.root.get_child(Concrete("c"))
    a = c.get_child(Concrete("a"))
    t = a.get_child(Concrete("t"))
    r = a.get_child(Concrete("r"))

    assert trie.root.count == 3
    assert c.count == 3
    assert a.count == 3
    assert (t.count, t.terminal_count) == (2, 2)
    assert (r.count, r.terminal_count) == (1, 1)
    assert a.terminal_count == 0


def test_terminal_inside_longer_path():
    trie = GeneralizationTrie.from_words(["app", "apple"])
    app = trie.root.get_child(Concrete("a")).get_child(Concrete("p")).get_child(Concrete("p"))

    assert app.is_terminal
    assert not app.is_leaf
    assert len(trie.terminal_nodes()) == 2


def test_integer_tokens():
    trie = GeneralizationTrie.from_sequences([[1, 2], [1, 3], [1, 2, 4, 5], [2, 3]])

    assert len(trie.terminal_nodes()) == 4
    assert [1, 2, 4, 5] in trie
    assert [1, 2, 4] not in trie


def test_matches(char_trie):
    assert char_trie.matches("cat")
    assert "dot" in char_trie
    assert "ca" not in char_trie
    assert "cats" not in char_trie
    assert "" not in char_trie


def test_insert_many_returns_count():
    trie = GeneralizationTrie()
    assert trie.insert_many(["ab", "ac", "b"]) == 3
    assert trie.total_sequences == 3


def test_update_folds_tries():
    left = GeneralizationTrie.from_words(["cat", "car"])
    right = GeneralizationTrie.from_words(["car", "dog"])

    left.update(right)

    assert left.total_sequences == 4
    assert {"cat", "car", "dog"} == {w for w in ["cat", "car", "dog", "cow"] if w in left}
    r = left.root.get_child(Concrete("c")).get_child(Concrete("a")).get_child(Concrete("r"))
    assert r.terminal_count == 2
    _assert_edges_consistent(left)


def test_node_str_lists_sorted_children(char_trie):
    assert str(char_trie.root) == "[c, d]"
    assert str(TrieNode()) == "[]"


def test_long_sequence_is_iterative():
    length = sys.getrecursionlimit() * 5
    sequence = list(range(length))
    trie = GeneralizationTrie.from_sequences([sequence])

    assert sequence in trie
    assert trie.node_count() == length + 1
    patterns = list(trie.extract_patterns())
    assert len(patterns) == 1
    assert len(patterns[0]) == length
    assert trie.root.copy().subtree_size() == length + 1
    assert trie.visualize(token_separator="").endswith(".")


@pytest.mark.parametrize(
    "sequences",
    [
        [["x", "y"], ["x", "z"]],
        ["hello", "help", "held"],
        [[(1, 2), (3, 4)], [(1, 2)]],
    ],
    ids=["words", "chars", "tuples"],
)
def test_every_inserted_sequence_is_matched(sequences):
    trie = GeneralizationTrie.from_sequences(sequences)
    for sequence in sequences:
        assert sequence in trie


def _token_type(module):
    return type("Token", (), {"__module__": module, "__str__": lambda self: "t"})


def test_sibling_order_breaks_ties_on_qualified_type():
    alpha = _token_type("alpha")()
    beta = _token_type("beta")()

    for order in ([alpha, beta], [beta, alpha]):
        trie = GeneralizationTrie.from_sequences([[token] for token in order])
        assert [label.value for label, _ in trie.root.sorted_edges()] == [alpha, beta]


def test_generalized_order_breaks_ties_on_member_types():
    ints = Generalized("NUM", frozenset({1}))
    strs = Generalized("NUM", frozenset({"1"}))

    for order in ([ints, strs], [strs, ints]):
        node = TrieNode()
        for label in order:
            node.add_child(label)
        assert [label for label, _ in node.sorted_edges()] == [ints, strs]
