from __future__ import annotations

PATTERN_A = "the cat sat on mat"


def repeated_pattern(repeats: int, pattern: str = PATTERN_A) -> str:
    """Repeat a five-word pattern so every sliding window holds the same set."""
    return " ".join([pattern] * repeats)


def distinct_words(count: int, prefix: str = "word") -> str:
    """Return count mutually distinct words, none of which occur in PATTERN_A."""
    return " ".join(f"{prefix}{_letters(idx)}" for idx in range(count))


def disrupted_text() -> str:
    """15 pattern words, 15 disjoint words, 15 pattern words."""
    return " ".join([repeated_pattern(3), distinct_words(15), repeated_pattern(3)])


def _letters(idx: int) -> str:
    # Letters only so tokenization leaves the words untouched.
    letters = ""
    idx += 1
    while idx:
        idx, rem = divmod(idx - 1, 26)
        letters = chr(ord("a") + rem) + letters
    return letters
