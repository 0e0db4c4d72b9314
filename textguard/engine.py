import logging

from textguard.guards.base import ValidationResult
from textguard.guards.regex import AlphanumericGuard

logger = logging.getLogger("engine")


class Engine:
    def __init__(self, guards):
        self.guards = list(guards)
        if not self.guards:
            raise ValueError("Engine requires at least one guard")

    @classmethod
    def default(cls):
        return cls([AlphanumericGuard()])

    def run(self, text: str) -> ValidationResult:
        # All guards must pass; the first rejection wins
        result = None
        for guard in self.guards:
            result = guard.validate(text)
            if not result.is_valid:
                logger.debug(f"{type(guard).__name__} rejected input: {result.reason}")
                return result
        return result

    def render(self, text: str) -> str:
        return self.run(text).render()
