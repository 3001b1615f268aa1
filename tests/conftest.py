"""Shared fixtures for the starfield tests."""

import os

# Headless SDL so display tests run without a window system.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from star import RandomSource, StarFactory
from starfield import StarField
from pixel_buffer import PixelBuffer

WIDTH = 800
HEIGHT = 600


@pytest.fixture
def rng() -> RandomSource:
    return RandomSource(seed=1234)


@pytest.fixture
def factory(rng: RandomSource) -> StarFactory:
    return StarFactory(rng, WIDTH, HEIGHT)


@pytest.fixture
def field(factory: StarFactory) -> StarField:
    return StarField(factory, count=10)


@pytest.fixture
def buffer() -> PixelBuffer:
    return PixelBuffer(WIDTH, HEIGHT)
