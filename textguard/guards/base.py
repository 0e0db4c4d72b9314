from dataclasses import dataclass
from typing import Union

NON_ALPHANUMERIC_REASON = "Text contains non-alphanumeric characters"


@dataclass(frozen=True)
class Valid:
    text: str

    @property
    def is_valid(self) -> bool:
        return True

    def render(self) -> str:
        return f"VALID: {self.text}"


@dataclass(frozen=True)
class Invalid:
    reason: str

    @property
    def is_valid(self) -> bool:
        return False

    def render(self) -> str:
        return f"INVALID: {self.reason}"


ValidationResult = Union[Valid, Invalid]


class BaseGuard:
    def validate(self, text: str) -> ValidationResult:
        """Return Valid(text) if text passes the guard, Invalid(reason) otherwise."""
        raise NotImplementedError
