import pytest


class ScriptedConsole:
    """Feeds canned lines to a session and records what it prints."""

    def __init__(self, lines):
        self._lines = list(lines)
        self.prompts = []
        self.output = []

    def read_line(self, prompt):
        self.prompts.append(prompt)
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)

    def write_line(self, text):
        self.output.append(text)

    @property
    def remaining(self):
        return len(self._lines)


@pytest.fixture
def console_factory():
    return ScriptedConsole


@pytest.fixture
def fixed_moves():
    """Build a computer-move chooser that replays the given moves in order."""

    def factory(*moves):
        it = iter(moves)
        return lambda: next(it)

    return factory
