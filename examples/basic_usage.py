"""
Basic usage examples for abstrie.
"""
from abstrie import (
    GeneralizationTrie,
    IdentityStrategy,
    MaskingStrategy,
    setup_logger,
)
from abstrie.utils.metrics import TrieMetrics


def example_1_character_trie():
    """Example 1: Build a character trie and read it back."""
    print("=" * 60)
    print("Example 1: Character Trie")
    print("=" * 60)

    words = ["ape", "app", "application", "bans", "bat", "banner", "pot", "potion"]
    trie = GeneralizationTrie.from_words(words)

    print(f"\nWords: {words}")
    print("\nTrie:")
    print(trie.visualize())

    print("\nPatterns (identity strategy):")
    for pattern in trie.extract_patterns(IdentityStrategy()):
        print(f"  {pattern.render()}")

    prefixes, lengths = trie.get_prefixes_dict()
    print(f"\nBranch prefixes: {prefixes}")
    print(f"Branch lengths: {lengths}")
    print()


def example_2_word_trie():
    """Example 2: Word sequences."""
    print("=" * 60)
    print("Example 2: Word Trie")
    print("=" * 60)

    sentences = [
        ["the", "dog", "ate", "choco"],
        ["the", "dog", "ate", "cookie"],
        ["the", "dog"],
        ["a", "big", "dog", "ate", "choco"],
        ["a", "cat"],
        ["a", "big", "dog", "ate", "cookie"],
    ]
    trie = GeneralizationTrie.from_sequences(sentences)

    print("\nTrie:")
    print(trie.visualize(token_separator=" ", show_counts=True))
    print()


def example_3_integer_trie():
    """Example 3: Integer tokens."""
    print("=" * 60)
    print("Example 3: Integer Trie")
    print("=" * 60)

    trie = GeneralizationTrie.from_sequences([[1, 2], [1, 3], [1, 2, 4, 5], [2, 3], [2, 3, 4]])

    print("\nTrie:")
    print(trie.visualize(token_separator=","))
    print(f"\nStatistics: {trie.get_statistics()}")
    print()


def example_4_log_templates():
    """Example 4: Mine log templates with the masking strategy."""
    print("=" * 60)
    print("Example 4: Log Template Mining")
    print("=" * 60)

    logs = [
        "Connected to 10.0.0.1 on port 5432",
        "Connected to 10.0.0.2 on port 5433",
        "Connected to 192.168.1.7 on port 5432",
        "request took 15 ms",
        "request took 230 ms",
        "request failed with code 0x1F",
        "request failed with code 0x2A",
    ]
    sequences = [log.split() for log in logs]

    trie = GeneralizationTrie.from_sequences(sequences)
    strategy = MaskingStrategy()

    print("\nBefore merge:")
    print(trie.visualize(token_separator=" "))

    stats = trie.merge_with_strategy(strategy)

    print("\nAfter merge:")
    print(trie.visualize(token_separator=" ", show_counts=True))

    print("\nTemplates:")
    patterns = []
    for pattern, count in trie.extractor().extract_with_counts():
        patterns.append(pattern)
        print(f"  {strategy.format_pattern(pattern)} (count: {count})")

    print(f"\nMerge statistics: {stats.to_dict()}")
    print(f"Compression ratio: {TrieMetrics.compression_ratio(len(logs), len(patterns)):.2f}")
    print(f"Coverage of input: {TrieMetrics.coverage(trie, sequences):.0%}")

    print("\nAs a DataFrame:")
    print(trie.extractor().to_dataframe())
    print()


if __name__ == "__main__":
    setup_logger(log_level="INFO")

    example_1_character_trie()
    example_2_word_trie()
    example_3_integer_trie()
    example_4_log_templates()
