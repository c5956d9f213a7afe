"""
Shared Faker instance for data builders.

All builders draw from one ``Faker``; ``seed_builders`` makes the whole
set reproducible.
"""

from __future__ import annotations

from faker import Faker

fake = Faker()


def seed_builders(seed: int) -> None:
    """Seed the shared Faker so builders produce the same data every run."""
    Faker.seed(seed)


def sentence(min_words: int = 3, max_words: int = 8) -> str:
    """A lorem sentence with between ``min_words`` and ``max_words`` words."""
    words = fake.random_int(min=min_words, max=max_words)
    return fake.sentence(nb_words=words, variable_nb_words=False)
