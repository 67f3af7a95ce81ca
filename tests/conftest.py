import random

import pytest

from primeroids.entities import Controls

class SoundRecorder:
    def __init__(self):
        self.played = []

    def __call__(self, name):
        self.played.append(name)

@pytest.fixture
def rng():
    return random.Random(1234)

@pytest.fixture
def sounds():
    return SoundRecorder()

@pytest.fixture
def idle():
    return Controls()
