"""Tests for abstrie.core.visualizer.TreeVisualizer."""

from abstrie import GeneralizationTrie, VisualizationConfig
from abstrie.core.visualizer import TreeVisualizer


def test_char_trie_rendering(char_trie):
    expected = "\n".join([
        "├── c-a",
        "│  ├── r.",
        "│  └── t.",
        "└── d-o",
        "   ├── g.",
        "   └── t.",
    ])
    assert char_trie.visualize() == expected


def test_word_trie_rendering(word_trie):
    expected = "\n".join([
        "├── a dog.",
        "└── the",
        "   ├── cat.",
        "   └── dog.",
    ])
    assert word_trie.visualize(token_separator=" ") == expected


def test_uncompressed_rendering_is_one_line_per_node():
    trie = GeneralizationTrie.from_words(["ab", "ac"])
    config = VisualizationConfig(compress_paths=False)

    rendered = TreeVisualizer(config).render(trie.root)

    assert rendered.splitlines() == [
        "└── a",
        "   ├── b.",
        "   └── c.",
    ]
    assert len(rendered.splitlines()) == trie.node_count() - 1


def test_counts_and_custom_ender():
    trie = GeneralizationTrie.from_words(["cat", "car", "car"])

    rendered = trie.visualize(show_counts=True, sequence_ender="$")

    assert rendered.splitlines() == [
        "c-a (3)",
        "├── r$ (2)",
        "└── t$ (1)",
    ]


def test_terminal_root_gets_a_line():
    trie = GeneralizationTrie.from_words(["", "a"])
    assert trie.visualize().splitlines() == [".", "└── a."]


def test_empty_trie_renders_nothing():
    assert GeneralizationTrie().visualize() == ""


def test_rendering_does_not_depend_on_insertion_order():
    words = ["dog", "cat", "dot", "car"]
    assert (
        GeneralizationTrie.from_words(words).visualize()
        == GeneralizationTrie.from_words(sorted(words)).visualize()
    )
