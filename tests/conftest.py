import pytest


class ScriptedRng:
    """randrange() that hands out preset values, in order."""

    def __init__(self, values):
        self.values = list(values)

    def randrange(self, stop):
        value = self.values.pop(0)
        assert 0 <= value < stop
        return value


@pytest.fixture
def scripted_rng():
    return ScriptedRng
