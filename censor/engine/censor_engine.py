# censor/engine/censor_engine.py

"""Profanity detection and censoring engine."""

import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Pattern, Sequence, Tuple, Union

from censor.core.definitions import (
    DEFAULT_PLACEHOLDER,
    DEFAULT_REPLACE_PATTERN,
    DEFAULT_SANITIZE_PATTERN,
    DEFAULT_SPLIT_PATTERN,
    PATTERN_FLAGS,
)
from censor.core.domain import CensorResult, FlaggedToken
from censor.core.exceptions import ConfigurationError, ValidationError
from censor.core.loader import default_words
from censor.engine.blacklist import BlacklistStore
from censor.engine.matcher import Matcher
from censor.engine.redactor import Redactor
from censor.engine.tokenizer import Tokenizer

if TYPE_CHECKING:
    from censor.service.config import Settings

logger = logging.getLogger(__name__)

PatternLike = Union[str, Pattern[str]]


def compile_pattern(
    value: Optional[PatternLike], default: Pattern[str], name: str
) -> Pattern[str]:
    """Resolves a pattern override.

    Args:
        value: None for the default, a compiled pattern, or a pattern string
            (compiled with ASCII word semantics)
        default: Pattern used when ``value`` is None
        name: Option name reported in errors

    Returns:
        Compiled pattern

    Raises:
        ConfigurationError: If the string does not compile.
    """
    if value is None:
        return default
    if isinstance(value, re.Pattern):
        return value
    try:
        return re.compile(value, PATTERN_FLAGS)
    except re.error as e:
        logger.error(f"Invalid {name} pattern: {value!r}", exc_info=True)
        raise ConfigurationError(f"Invalid {name} pattern {value!r}: {e}") from e


@dataclass(frozen=True)
class EngineConfig:
    """Immutable rendering options of a CensorEngine.

    Attributes:
        placeholder: Character written in place of each masked character
        sanitize_pattern: Characters stripped from a flagged token
        replace_pattern: Characters of a flagged token that are masked
        split_pattern: Token boundary rule
    """

    placeholder: str = DEFAULT_PLACEHOLDER
    sanitize_pattern: Pattern[str] = DEFAULT_SANITIZE_PATTERN
    replace_pattern: Pattern[str] = DEFAULT_REPLACE_PATTERN
    split_pattern: Pattern[str] = DEFAULT_SPLIT_PATTERN

    @classmethod
    def build(
        cls,
        placeholder: Optional[str] = None,
        regex: Optional[PatternLike] = None,
        replace_regex: Optional[PatternLike] = None,
        split_regex: Optional[PatternLike] = None,
    ) -> "EngineConfig":
        return cls(
            placeholder=placeholder or DEFAULT_PLACEHOLDER,
            sanitize_pattern=compile_pattern(regex, DEFAULT_SANITIZE_PATTERN, "regex"),
            replace_pattern=compile_pattern(
                replace_regex, DEFAULT_REPLACE_PATTERN, "replace_regex"
            ),
            split_pattern=compile_pattern(
                split_regex, DEFAULT_SPLIT_PATTERN, "split_regex"
            ),
        )


class CensorEngine:
    """Detects blacklisted words and masks them with a placeholder.

    Each instance owns its own copy of the blacklist, seeded from the bundled
    default word list. Detection and cleaning are pure in-memory operations.
    ``add_words`` and ``remove_words`` mutate the instance; an engine shared
    between threads must not be mutated without external locking.

    Example::

        engine = CensorEngine(placeholder="x")
        engine.clean("This is a hells good test")  # "This is a xxxxx good test"
    """

    def __init__(
        self,
        empty_list: bool = False,
        words: Optional[Sequence[str]] = None,
        exclude: Optional[Sequence[str]] = None,
        placeholder: Optional[str] = None,
        regex: Optional[PatternLike] = None,
        replace_regex: Optional[PatternLike] = None,
        split_regex: Optional[PatternLike] = None,
        word_list: Optional[Sequence[str]] = None,
    ) -> None:
        """Initialize the engine.

        Args:
            empty_list: Start without the default terms
            words: Extra terms, appended after the defaults (or the only
                terms when ``empty_list`` is set)
            exclude: Initial exclusion set, compared case-insensitively
            placeholder: Masking character, "*" when empty
            regex: Sanitize pattern, characters removed from flagged tokens
            replace_regex: Characters of flagged tokens replaced by the
                placeholder
            split_regex: Token boundary rule used by ``clean``
            word_list: Replacement for the bundled default terms

        Raises:
            ConfigurationError: If a pattern override does not compile or the
                bundled word list cannot be loaded.
        """
        self.config = EngineConfig.build(
            placeholder=placeholder,
            regex=regex,
            replace_regex=replace_regex,
            split_regex=split_regex,
        )

        terms: List[str] = []
        if not empty_list:
            terms.extend(word_list if word_list is not None else default_words())
        terms.extend(words or [])

        self._store = BlacklistStore(terms, exclude)
        self._matcher = Matcher(self._store)
        self._tokenizer = Tokenizer(self.config.split_pattern)
        self._redactor = Redactor(
            self.config.placeholder,
            self.config.sanitize_pattern,
            self.config.replace_pattern,
        )

        logger.debug(
            "CensorEngine created",
            extra={
                "blacklist_size": len(self._store),
                "excluded_size": len(self._store.excluded),
                "empty_list": empty_list,
            },
        )

    @classmethod
    def from_settings(cls, settings: "Settings") -> "CensorEngine":
        """Builds an engine from application settings."""
        return cls(
            empty_list=settings.empty_list,
            words=settings.extra_words,
            exclude=settings.exclude,
            placeholder=settings.placeholder,
            regex=settings.sanitize_pattern,
            replace_regex=settings.replace_pattern,
            split_regex=settings.split_pattern,
        )

    @property
    def words(self) -> Tuple[str, ...]:
        return self._store.terms

    @property
    def excluded(self) -> Tuple[str, ...]:
        return self._store.excluded

    @staticmethod
    def _require_text(text: object) -> None:
        if not isinstance(text, str):
            raise ValidationError(f"Expected str input, got {type(text).__name__}")

    def is_profane(self, text: str) -> bool:
        """Checks whether ``text`` contains a blacklisted term.

        Args:
            text: Word or sentence to evaluate

        Returns:
            True if any non-excluded term matches as a whole word

        Raises:
            ValidationError: If ``text`` is not a string.
        """
        self._require_text(text)
        return self._matcher.is_profane(text)

    def first_match(self, text: str) -> Optional[str]:
        """Returns the first blacklisted term found in ``text``, if any."""
        self._require_text(text)
        return self._matcher.first_match(text)

    def replace_word(self, word: str) -> str:
        """Masks ``word`` unconditionally with the placeholder."""
        self._require_text(word)
        return self._redactor.redact(word)

    def censor(self, text: str) -> CensorResult:
        """Masks every profane token of ``text`` and reports what changed.

        Args:
            text: Sentence to filter

        Returns:
            CensorResult with the censored text and flagged tokens

        Raises:
            ValidationError: If ``text`` is not a string.
        """
        self._require_text(text)

        tokens, delimiter = self._tokenizer.tokenize(text)
        flagged: List[FlaggedToken] = []
        output: List[str] = []

        for index, token in enumerate(tokens):
            term = self._matcher.first_match(token)
            if term is not None:
                replacement = self._redactor.redact(token)
                flagged.append(FlaggedToken(index, token, replacement, term))
                output.append(replacement)
            else:
                output.append(token)

        censored = self._tokenizer.join(output, delimiter) if tokens else text

        logger.debug(
            "Text censored",
            extra={
                "text_length": len(text),
                "token_count": len(tokens),
                "flagged_count": len(flagged),
            },
        )

        return CensorResult(
            original_text=text,
            censored_text=censored,
            flagged_tokens=flagged,
            metadata={"token_count": len(tokens), "delimiter": delimiter},
        )

    def clean(self, text: str) -> str:
        """Returns ``text`` with profane tokens masked.

        Example::

            engine.clean("<div>Fuck this</div>")  # "<div>**** this</div>"
        """
        return self.censor(text).censored_text

    def add_words(self, *words: str) -> None:
        """Blacklists words and lifts any exclusion on them."""
        self._store.add_terms(words)

    def remove_words(self, *words: str) -> None:
        """Whitelists words; they stay listed but no longer match."""
        self._store.remove_terms(words)

    def __repr__(self) -> str:
        return (
            f"<CensorEngine words={len(self._store)} "
            f"excluded={len(self._store.excluded)} "
            f"placeholder={self.config.placeholder!r}>"
        )
