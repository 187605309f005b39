# censor/engine/matcher.py

"""Word-boundary matching of blacklisted terms."""

import logging
import re
from typing import Dict, Optional, Pattern

from censor.core.definitions import TERM_PATTERN_FLAGS
from censor.engine.blacklist import BlacklistStore

logger = logging.getLogger(__name__)


def build_term_pattern(term: str) -> Pattern[str]:
    """Compiles the case-insensitive pattern for a single blacklist term.

    The term is escaped so metacharacters match literally, then wrapped as
    ``\\bTERM(?:TERM)*\\b``: one or more back-to-back occurrences bounded by
    word boundaries. "shitshit" therefore matches "shit", while "classes"
    does not match "ass". Boundaries use ASCII word characters; case
    folding covers all letters, so "Français" matches "FRANÇAIS".

    Args:
        term: Blacklist entry, taken verbatim

    Returns:
        Compiled pattern
    """
    escaped = re.escape(term)
    return re.compile(
        rf"(?a:\b){escaped}(?:{escaped})*(?a:\b)", TERM_PATTERN_FLAGS
    )


class Matcher:
    """Tests candidate strings against every non-excluded blacklist term.

    Compiled patterns are memoized per term string, since the blacklist
    only grows and the same term always yields the same pattern.
    """

    def __init__(self, store: BlacklistStore) -> None:
        self._store = store
        self._patterns: Dict[str, Pattern[str]] = {}

    def _pattern_for(self, term: str) -> Pattern[str]:
        pattern = self._patterns.get(term)
        if pattern is None:
            pattern = build_term_pattern(term)
            self._patterns[term] = pattern
        return pattern

    def first_match(self, candidate: str) -> Optional[str]:
        """Returns the first blacklist term found in ``candidate``.

        Excluded and empty terms are skipped. The whole candidate is
        searched, so a sentence works as well as a single token.

        Args:
            candidate: Text to search

        Returns:
            The matching term as stored, or None
        """
        if not candidate:
            return None

        for term in self._store:
            if not term or self._store.is_excluded(term):
                continue
            if self._pattern_for(term).search(candidate):
                return term

        return None

    def is_profane(self, candidate: str) -> bool:
        return self.first_match(candidate) is not None

    def __repr__(self) -> str:
        return f"<Matcher terms={len(self._store)} compiled={len(self._patterns)}>"
