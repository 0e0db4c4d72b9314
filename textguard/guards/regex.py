import logging
from typing import Optional

from .base import BaseGuard, Invalid, NON_ALPHANUMERIC_REASON, Valid, ValidationResult
from .utils.matcher import PatternMatcher, ReMatcher

logger = logging.getLogger("regex_guard")

# Letters, digits and whitespace only, anchored to the whole string.
# Python's \s also accepts the \x1c-\x1f separators, which are control characters.
ALPHANUMERIC_PATTERN = r"^(?:(?![\x1c-\x1f])[a-zA-Z0-9\s])+$"


class RegexGuard(BaseGuard):
    def __init__(self, pattern: str, reason: str, matcher: Optional[PatternMatcher] = None):
        self.pattern = pattern
        self.reason = reason
        self.matcher = matcher if matcher is not None else ReMatcher()

    def validate(self, text: str) -> ValidationResult:
        matched = self.matcher.first_match(self.pattern, text)
        if matched is None:
            logger.debug(f"No match for {text!r}")
            return Invalid(self.reason)

        if matched != text:
            logger.warning(f"Matched span {matched!r} differs from input {text!r}; echoing input")
        return Valid(text)


class AlphanumericGuard(RegexGuard):
    def __init__(self, matcher: Optional[PatternMatcher] = None):
        super().__init__(ALPHANUMERIC_PATTERN, NON_ALPHANUMERIC_REASON, matcher)


_guard = AlphanumericGuard()


def validate_text(text: str) -> str:
    """
    Validate ``text`` against the alphanumeric policy and return the rendered
    outcome, either ``"VALID: <text>"`` or
    ``"INVALID: Text contains non-alphanumeric characters"``.
    """
    return _guard.validate(text).render()
