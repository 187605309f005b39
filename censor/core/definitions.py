# censor/core/definitions.py

"""Default patterns and constants for the censorship engine."""

import re


DEFAULT_PLACEHOLDER = "*"

# Characters stripped from a flagged token before masking.
DEFAULT_SANITIZE_PATTERN = re.compile(r"[^a-zA-Z0-9|$@]|\^")

# Characters of a flagged token that become placeholders.
DEFAULT_REPLACE_PATTERN = re.compile(r"\w", re.ASCII)

# Zero-width split between word and non-word characters.
DEFAULT_SPLIT_PATTERN = re.compile(r"\b", re.ASCII)

# Flags for strings given as pattern overrides.
PATTERN_FLAGS = re.ASCII

# Flags for the per-term blacklist patterns. Case folding is Unicode; the
# word boundaries inside the pattern are scoped to ASCII.
TERM_PATTERN_FLAGS = re.IGNORECASE


class ModerationProvider:
    """Constants naming the providers behind the moderation API."""

    OPENAI = "openai"
    GOOGLE_PERSPECTIVE = "google-perspective-api"
    GOOGLE_NATURAL_LANGUAGE = "google-natural-language-api"
