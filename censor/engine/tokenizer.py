# censor/engine/tokenizer.py

"""Splitting text into tokens and joining them back."""

from typing import List, Pattern, Sequence, Tuple


class Tokenizer:
    """Splits text with a boundary pattern and rejoins it.

    The first delimiter matched in the text is reused for every join. With
    the default zero-width word boundary the delimiter is the empty string,
    so joining reproduces the input exactly.
    """

    def __init__(self, split_pattern: Pattern[str]) -> None:
        self.split_pattern = split_pattern

    def tokenize(self, text: str) -> Tuple[List[str], str]:
        """Splits ``text`` into tokens.

        Args:
            text: Input text

        Returns:
            Tuple of (tokens, delimiter). Empty input gives ``([], "")``.
        """
        if not text:
            return [], ""

        tokens = self.split_pattern.split(text)
        match = self.split_pattern.search(text)
        delimiter = match.group(0) if match else ""
        return tokens, delimiter

    @staticmethod
    def join(tokens: Sequence[str], delimiter: str) -> str:
        return delimiter.join(tokens)
