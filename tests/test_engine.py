import pytest

from textguard.engine import Engine
from textguard.guards.base import Invalid, Valid
from textguard.guards.regex import AlphanumericGuard, RegexGuard


class TestEngine:
    """Test cases for running guards through the engine."""

    def test_requires_a_guard(self):
        with pytest.raises(ValueError):
            Engine([])

    def test_default_engine(self):
        engine = Engine.default()
        assert engine.render("Hello123") == "VALID: Hello123"
        assert engine.render("") == "INVALID: Text contains non-alphanumeric characters"

    def test_all_guards_must_pass(self):
        letters = RegexGuard(r"^[a-zA-Z ]+$", "Letters and spaces only")
        engine = Engine([AlphanumericGuard(), letters])

        assert engine.run("Hello StreamKnight") == Valid("Hello StreamKnight")
        assert engine.run("Hello123") == Invalid("Letters and spaces only")

    def test_first_rejection_wins(self):
        letters = RegexGuard(r"^[a-zA-Z ]+$", "Letters and spaces only")
        engine = Engine([AlphanumericGuard(), letters])
        assert engine.render("Hello World!") == "INVALID: Text contains non-alphanumeric characters"

    def test_accepts_any_iterable(self):
        engine = Engine(guard for guard in [AlphanumericGuard()])
        assert engine.run("abc") == Valid("abc")
