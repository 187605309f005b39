# censor/core/loader.py

"""Loader for the bundled default blacklist."""

import yaml
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from censor.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_WORDLIST_PATH = Path(__file__).parent / "wordlist.yaml"


def load_word_file(path: Union[str, Path]) -> List[str]:
    """Reads a YAML word list file.

    The file must be a mapping with a ``words`` key holding a list of
    non-empty strings.

    Args:
        path: Location of the YAML file

    Returns:
        Terms in file order

    Raises:
        ConfigurationError: If the file is missing, unparsable or malformed.
    """
    path = Path(path)

    if not path.exists():
        error_msg = f"Word list file not found: {path}"
        logger.error(error_msg)
        raise ConfigurationError(error_msg)

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.error(f"YAML parsing error: {e}", exc_info=True)
        raise ConfigurationError(f"Failed to parse {path.name}: {e}") from e

    return _validate_words(data, path)


def _validate_words(data: Any, path: Path) -> List[str]:
    if not data or not isinstance(data, dict):
        raise ConfigurationError(f"Word list file is empty or invalid: {path}")

    words = data.get("words")
    if not isinstance(words, list):
        raise ConfigurationError(f"Missing 'words' list in {path}")

    invalid = [w for w in words if not isinstance(w, str) or not w]
    if invalid:
        error_msg = f"Word list {path.name} contains invalid entries: {invalid[:5]}"
        logger.error(error_msg)
        raise ConfigurationError(error_msg)

    return list(words)


class WordListLoader:
    """Singleton loader for the default blacklist asset.

    Reads wordlist.yaml once and caches it for the process lifetime.
    Callers receive copies, so engines never share a mutable list.
    """

    _instance: Optional["WordListLoader"] = None
    _words: List[str] = []
    _metadata: Dict[str, Any] = {}
    _loaded: bool = False

    def __new__(cls) -> "WordListLoader":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        if not WordListLoader._loaded:
            self._load()

    def _load(self) -> None:
        """Loads wordlist.yaml from the module directory.

        Raises:
            ConfigurationError: If the asset is missing or malformed.
        """
        WordListLoader._words = load_word_file(DEFAULT_WORDLIST_PATH)
        WordListLoader._metadata = {
            "path": str(DEFAULT_WORDLIST_PATH),
            "word_count": len(WordListLoader._words),
        }
        WordListLoader._loaded = True

        logger.info("Default word list loaded", extra=WordListLoader._metadata)

    @classmethod
    def get_instance(cls) -> "WordListLoader":
        """Returns the singleton instance of WordListLoader."""
        if cls._instance is None or not cls._loaded:
            cls._instance = cls()
        return cls._instance

    def get_words(self) -> List[str]:
        """Returns a fresh copy of the default terms."""
        return list(self._words)

    def get_metadata(self) -> Dict[str, Any]:
        return dict(self._metadata)


def default_words() -> List[str]:
    """Shortcut for ``WordListLoader.get_instance().get_words()``."""
    return WordListLoader.get_instance().get_words()
