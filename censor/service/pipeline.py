# censor/service/pipeline.py

"""Main censoring service pipeline."""

import logging
import threading
from typing import List, Optional, Set

from censor.service.config import settings
from censor.service.moderation import OpenModeratorClient, ProfanityCheckConfig
from censor.engine.censor_engine import CensorEngine
from censor.core.domain import CensorResult, ModerationResult
from censor.core.exceptions import ConfigurationError, ValidationError

logger = logging.getLogger(__name__)


def parse_terms(raw_input: str) -> List[str]:
    """Parse a raw string of words into a deduplicated list.

    Words can be separated by newlines or commas. Leading/trailing whitespace
    is stripped from each word. Empty entries and duplicates are removed.

    Args:
        raw_input: Raw text containing words separated by newlines or commas.

    Returns:
        Ordered list of unique, non-empty words.
    """
    seen: Set[str] = set()
    terms: List[str] = []
    for line in raw_input.splitlines():
        for part in line.split(","):
            term = part.strip()
            if term and term not in seen:
                seen.add(term)
                terms.append(term)
    return terms


class CensorService:
    """Singleton service wrapper for the censor engine.

    The shared engine is only read through this service. Callers that need
    to add or whitelist words should build their own CensorEngine.
    """

    _instance: Optional[CensorEngine] = None
    _lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> CensorEngine:
        """Returns singleton censor engine instance.

        Returns:
            Initialized CensorEngine

        Raises:
            ConfigurationError: If engine initialization fails
        """
        if cls._instance is None:
            with cls._lock:
                # Double-checked locking pattern
                if cls._instance is None:
                    try:
                        logger.info("Initializing censor engine")
                        cls._instance = CensorEngine.from_settings(settings)
                        logger.info(
                            "Censor engine initialized successfully",
                            extra={"blacklist_size": len(cls._instance.words)},
                        )

                    except Exception as e:
                        logger.error(
                            "Failed to initialize censor engine", exc_info=True
                        )
                        if isinstance(e, ConfigurationError):
                            raise
                        raise ConfigurationError(
                            "Censor engine initialization failed"
                        ) from e

        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drops the shared engine so the next call rebuilds it."""
        with cls._lock:
            cls._instance = None


def build_engine(
    extra_words: Optional[List[str]] = None,
    allowed_words: Optional[List[str]] = None,
) -> CensorEngine:
    """Returns an engine with per-request word changes applied.

    Without changes the shared engine is returned. Otherwise a private engine
    is built from settings so the shared blacklist is never mutated.

    Args:
        extra_words: Words to blacklist for this request
        allowed_words: Words to whitelist for this request
    """
    if not extra_words and not allowed_words:
        return CensorService.get_instance()

    engine = CensorEngine.from_settings(settings)
    if extra_words:
        engine.add_words(*extra_words)
    if allowed_words:
        engine.remove_words(*allowed_words)
    return engine


def censor_text(text: str, engine: Optional[CensorEngine] = None) -> CensorResult:
    """Main entry point for text censoring.

    Args:
        text: Input text to censor
        engine: Engine to use instead of the shared one

    Returns:
        CensorResult with censored text and flagged tokens.
        On failure, returns a result indicating the error safely.
    """
    if not isinstance(text, str):
        logger.error(f"Invalid input type received: {type(text)}")
        return CensorResult(
            original_text=str(text),
            censored_text=str(text),
            metadata={"error": "Invalid input format", "status": "failed"},
        )

    if not text:
        logger.warning("Empty text provided for censoring")
        return CensorResult(original_text="", censored_text="")

    try:
        engine = engine or CensorService.get_instance()

        logger.info("Starting censor request", extra={"text_length": len(text)})

        result = engine.censor(text)

        logger.info(
            "Censoring completed",
            extra={
                "text_length": len(text),
                "flagged_count": len(result.flagged_tokens),
            },
        )

        return result

    except (ConfigurationError, ValidationError) as e:
        # Known errors, log with context but hide internal details in response
        logger.error(
            f"Known error during censoring: {type(e).__name__}",
            exc_info=True,
            extra={"text_length": len(text)},
        )
        return CensorResult(
            original_text=text,
            censored_text=text,
            metadata={
                "error": "The censor service encountered a processing error.",
                "status": "failed",
                "error_type": type(e).__name__,
            },
        )

    except Exception:
        # Catch-all for unexpected bugs
        logger.error(
            "Unexpected critical error in censor pipeline",
            exc_info=True,
            extra={"text_length": len(text)},
        )
        return CensorResult(
            original_text=text,
            censored_text=text,
            metadata={
                "error": "An unexpected system error occurred.",
                "status": "failed",
            },
        )


async def moderate_text(
    text: str,
    config: Optional[ProfanityCheckConfig] = None,
    client: Optional[OpenModeratorClient] = None,
) -> ModerationResult:
    """Classifies text with the remote moderation API.

    Errors from the client propagate to the caller.

    Args:
        text: Text to evaluate
        config: Provider selection and manual list option
        client: Client to use; a temporary one is created and closed if omitted
    """
    if client is not None:
        return await client.moderate_text(text, config)

    async with OpenModeratorClient() as temp_client:
        return await temp_client.moderate_text(text, config)


async def moderate_image(
    image: bytes,
    filename: str = "image",
    content_type: Optional[str] = None,
    client: Optional[OpenModeratorClient] = None,
) -> ModerationResult:
    """Checks an image for NSFW content with the remote moderation API."""
    if client is not None:
        return await client.moderate_image(image, filename, content_type)

    async with OpenModeratorClient() as temp_client:
        return await temp_client.moderate_image(image, filename, content_type)
