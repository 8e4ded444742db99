import numpy as np
import pytest


class ScriptedRng:
    """Stands in for a numpy Generator, handing out a fixed list of draws"""

    def __init__(self, draws):
        self.draws = list(draws)

    def integers(self, high):
        value = self.draws.pop(0)
        assert 0 <= value < high, f"scripted draw {value} out of range for {high}"
        return value


@pytest.fixture()
def rng():
    return np.random.default_rng(12345)


@pytest.fixture()
def scripted_rng():
    return ScriptedRng


@pytest.fixture()
def small_config():
    return {
        'trials': 500,
        'seed': 7,
        'verbose': 0,
        'rules': {'n_doors': 4, 'max_choices': None},
    }
