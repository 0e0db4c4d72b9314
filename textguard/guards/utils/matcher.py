# guards/utils/matcher.py
import logging
import re
from typing import Optional, Protocol

logger = logging.getLogger("matcher")


class MatcherError(ValueError):
    """Raised when a matcher cannot apply the pattern it was given."""


class PatternMatcher(Protocol):
    def first_match(self, pattern: str, text: str) -> Optional[str]:
        ...


class ReMatcher:
    """
    Pattern matcher backed by the standard library ``re`` engine.
    """

    def first_match(self, pattern: str, text: str) -> Optional[str]:
        """
        Return the first substring of ``text`` matching ``pattern``, or None.
        """
        try:
            compiled = re.compile(pattern)
        except re.error as e:
            logger.error(f"Invalid pattern {pattern!r}: {e}")
            raise MatcherError(f"Invalid pattern {pattern!r}: {e}") from e

        match = compiled.search(text)
        if match is None:
            return None
        return match.group(0)


_default_matcher = ReMatcher()


def first_match(pattern: str, text: str) -> Optional[str]:
    return _default_matcher.first_match(pattern, text)
