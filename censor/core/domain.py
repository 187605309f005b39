# censor/core/domain.py

"""Domain models for censoring and moderation results."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class FlaggedToken:
    """A token that matched the blacklist and was masked.

    Attributes:
        index: Position of the token in the tokenized input
        text: Original token text
        replacement: Masked text written to the output
        term: Blacklist entry that matched the token
    """

    index: int
    text: str
    replacement: str
    term: str = ""


@dataclass
class CensorResult:
    """Result object returned by the engine and the censor service.

    Attributes:
        original_text: Uncensored input text
        censored_text: Text with profane tokens masked
        flagged_tokens: Tokens that were masked, in input order
        metadata: Additional processing information
    """

    original_text: str
    censored_text: str
    flagged_tokens: List[FlaggedToken] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_profane(self) -> bool:
        return bool(self.flagged_tokens)


@dataclass
class ModerationResult:
    """Classification returned by the remote moderation API.

    Attributes:
        flag: Whether the content was flagged (profane text or NSFW image)
        categories: Detected content categories
        provider: Provider that classified text content, if known
        raw: Decoded response body
    """

    flag: bool
    categories: List[str] = field(default_factory=list)
    provider: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict)
