"""Pytest fixtures for the Monty Hall tests."""

from collections.abc import Iterator

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded generator so every test sees the same draws."""
    return np.random.default_rng(20240417)


@pytest.fixture
def no_show(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Make plt.show / plt.pause no-ops."""
    import matplotlib.pyplot as plt

    monkeypatch.setattr(plt, "show", lambda *args, **kwargs: None)
    monkeypatch.setattr(plt, "pause", lambda *args, **kwargs: None)
    yield
    plt.close("all")
