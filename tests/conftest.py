import os
import random

# pygame sem janela nem placa de som
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from flappy.session import Session, Viewport


class RecordingAudio:
    def __init__(self):
        self.calls = []

    def play_music(self):
        self.calls.append("play_music")

    def stop_music(self):
        self.calls.append("stop_music")

    def play_die(self):
        self.calls.append("play_die")


@pytest.fixture
def audio():
    return RecordingAudio()


@pytest.fixture
def session(audio):
    return Session(viewport=Viewport(800, 600), audio=audio, rng=random.Random(1234))
