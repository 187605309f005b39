# censor/engine/redactor.py

"""Masking of flagged tokens."""

from typing import Pattern


class Redactor:
    """Rewrites a profane token with placeholder characters.

    Two passes: characters matched by the sanitize pattern are dropped, then
    characters matched by the replace pattern become the placeholder. With
    the defaults, "ash0le" becomes "******" and "français" becomes "*******".
    """

    def __init__(
        self,
        placeholder: str,
        sanitize_pattern: Pattern[str],
        replace_pattern: Pattern[str],
    ) -> None:
        self.placeholder = placeholder
        self.sanitize_pattern = sanitize_pattern
        self.replace_pattern = replace_pattern

    def sanitize(self, word: str) -> str:
        return self.sanitize_pattern.sub("", word)

    def mask(self, word: str) -> str:
        # Callable replacement keeps backslashes in the placeholder literal.
        return self.replace_pattern.sub(lambda _: self.placeholder, word)

    def redact(self, word: str) -> str:
        """Sanitizes then masks ``word``.

        Args:
            word: Token flagged as profane

        Returns:
            Masked token
        """
        return self.mask(self.sanitize(word))
