# censor/__init__.py

"""Word-boundary-aware profanity detection and censoring.

Usage::

    from censor import CensorEngine

    engine = CensorEngine()
    engine.is_profane("Don't be an ash0le")   # True
    engine.clean("Don't be an ash0le")        # "Don't be an ******"
"""

from censor.core.domain import CensorResult, FlaggedToken, ModerationResult
from censor.engine.censor_engine import CensorEngine

__all__ = ["CensorEngine", "CensorResult", "FlaggedToken", "ModerationResult"]
