"""Deterministic sequence generators for performance benchmarks.

All generators produce fixed, reproducible sequences from a seeded RNG.
Three tiers: 64, 256 and 1024 symbols per side.
Each tier provides both "similar" (a few point edits) and "dissimilar"
(independently drawn) pair generators.
"""

from __future__ import annotations

import random

import pytest

ALPHABET = "ACGT"


def generate_sequence(length: int, seed: int) -> str:
    """Generate a DNA-like string of ``length`` symbols."""
    rng = random.Random(seed)
    return "".join(rng.choice(ALPHABET) for _ in range(length))


def _make_similar(length: int) -> tuple[str, str]:
    """Generate a pair differing by one substitution per ~20 symbols."""
    left = generate_sequence(length, seed=length)
    rng = random.Random(length + 1)
    symbols = list(left)
    for idx in rng.sample(range(length), k=max(1, length // 20)):
        symbols[idx] = "A" if symbols[idx] != "A" else "C"
    return left, "".join(symbols)


def _make_dissimilar(length: int) -> tuple[str, str]:
    """Generate two independently drawn sequences of the same length."""
    return generate_sequence(length, seed=length), generate_sequence(
        length, seed=length * 7 + 3
    )


# --- Fixtures for each size tier ---


@pytest.fixture
def pair_64_similar() -> tuple[str, str]:
    return _make_similar(64)


@pytest.fixture
def pair_256_similar() -> tuple[str, str]:
    return _make_similar(256)


@pytest.fixture
def pair_256_dissimilar() -> tuple[str, str]:
    return _make_dissimilar(256)


@pytest.fixture
def pair_1024_dissimilar() -> tuple[str, str]:
    """Large enough that default-config wavefronts stay inline (1024 <= 4096)."""
    return _make_dissimilar(1024)
