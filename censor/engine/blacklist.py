# censor/engine/blacklist.py

"""Blacklist and exclusion (whitelist) storage for a single engine."""

import logging
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)


class BlacklistStore:
    """Ordered blacklist of terms plus an ordered exclusion set.

    Terms are stored verbatim. Exclusions are stored lowercase and suppress
    matching of any blacklisted term with the same lowercase form. A term
    present in both is never matched.

    Both lists are owned by the instance and only change through
    ``add_terms`` and ``remove_terms``. Not safe for concurrent mutation;
    callers sharing a store across threads must serialize writes.
    """

    def __init__(
        self,
        terms: Optional[Iterable[str]] = None,
        excluded: Optional[Iterable[str]] = None,
    ) -> None:
        self._terms: List[str] = list(terms or [])
        self._excluded: List[str] = [t.lower() for t in (excluded or [])]

    @property
    def terms(self) -> Tuple[str, ...]:
        """Snapshot of the blacklist in insertion order."""
        return tuple(self._terms)

    @property
    def excluded(self) -> Tuple[str, ...]:
        """Snapshot of the exclusion set in insertion order."""
        return tuple(self._excluded)

    def add_terms(self, terms: Sequence[str]) -> None:
        """Appends terms to the blacklist and lifts any exclusion on them.

        Duplicates are kept. Every exclusion entry equal to a term's
        lowercase form is dropped.

        Args:
            terms: Terms to blacklist
        """
        terms = list(terms)
        self._terms.extend(terms)

        lowered = {t.lower() for t in terms}
        if lowered.intersection(self._excluded):
            self._excluded = [t for t in self._excluded if t not in lowered]

        logger.debug(
            "Terms added to blacklist",
            extra={"added": len(terms), "blacklist_size": len(self._terms)},
        )

    def remove_terms(self, terms: Sequence[str]) -> None:
        """Excludes terms from matching without deleting them.

        Args:
            terms: Terms to whitelist, compared case-insensitively
        """
        terms = list(terms)
        self._excluded.extend(t.lower() for t in terms)

        logger.debug(
            "Terms added to exclusion set",
            extra={"added": len(terms), "excluded_size": len(self._excluded)},
        )

    def is_excluded(self, term: str) -> bool:
        return term.lower() in self._excluded

    def __iter__(self) -> Iterator[str]:
        return iter(self._terms)

    def __len__(self) -> int:
        return len(self._terms)

    def __contains__(self, term: object) -> bool:
        return term in self._terms

    def __repr__(self) -> str:
        return (
            f"<BlacklistStore terms={len(self._terms)} "
            f"excluded={len(self._excluded)}>"
        )
