"""Sliding-window tokenizer producing address candidates."""

from typing import List

DEFAULT_WINDOW_SIZE = 10


def tokenize(text: str, window_size: int = DEFAULT_WINDOW_SIZE) -> List[str]:
    """Split text into overlapping windows of ``window_size`` consecutive words.

    Words are runs of non-whitespace. Each window is joined by single spaces
    and consecutive windows share ``window_size - 1`` words. A text with fewer
    than ``window_size`` words yields no windows at all.

    Example:
        >>> tokenize("the big bad wolf and the beautiful fox", 3)[:3]
        ['the big bad', 'big bad wolf', 'bad wolf and']

    Args:
        text: Whitespace-normalized text
        window_size: Words per candidate (must be >= 1)

    Returns:
        Candidates in text order

    Raises:
        ValueError: If window_size is less than 1
    """
    if window_size < 1:
        raise ValueError(f"window_size must be >= 1, got: {window_size}")

    words = text.split()
    return [
        " ".join(words[start:start + window_size])
        for start in range(len(words) - window_size + 1)
    ]
