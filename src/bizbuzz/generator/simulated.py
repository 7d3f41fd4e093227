"""Randomized business data generator.

Stands in for a real reputation backend: ratings, review counts and
headlines are drawn at random within fixed ranges.
"""

import random
from datetime import date

from bizbuzz.data import BusinessIdentity, GeneratedMetrics
from bizbuzz.generator.templates import (
    MAX_RATING,
    MIN_RATING,
    RECORD_HEADLINE_TEMPLATES,
    REGENERATED_HEADLINE_TEMPLATES,
    REVIEW_BANDS,
)


class BusinessDataGenerator:
    """Generate plausible reputation metrics for a business.

    Args:
        rng: Random source. Defaults to a fresh unseeded ``random.Random``.
        year: Year used by year-bearing headlines (defaults to today's year).
    """

    def __init__(self, rng: random.Random | None = None, *, year: int | None = None) -> None:
        self._rng = rng or random.Random()
        self._year = year

    def generate_record(self, identity: BusinessIdentity) -> GeneratedMetrics:
        """Generate rating, review count and an initial headline.

        Args:
            identity: Business to generate data for. Never modified.

        Returns:
            GeneratedMetrics with rating in [3.8, 4.9] (one decimal) and
            reviews inside one of ``REVIEW_BANDS``.
        """
        return GeneratedMetrics(
            rating=self._rating(),
            reviews=self._reviews(),
            headline=self._render(RECORD_HEADLINE_TEMPLATES, identity),
        )

    def generate_headline(self, identity: BusinessIdentity) -> str:
        """Pick a replacement headline from the regeneration family."""
        return self._render(REGENERATED_HEADLINE_TEMPLATES, identity)

    def _rating(self) -> float:
        span = MAX_RATING - MIN_RATING
        rating = round(MIN_RATING + self._rng.random() * span, 1)
        # Float error can push 3.8 + x * 1.1 a hair past either bound
        return min(max(rating, MIN_RATING), MAX_RATING)

    def _reviews(self) -> int:
        low, high = self._rng.choice(REVIEW_BANDS)
        return self._rng.randint(low, high)

    def _render(self, templates: tuple[str, ...], identity: BusinessIdentity) -> str:
        template = self._rng.choice(templates)
        year = self._year if self._year is not None else date.today().year
        return template.format(name=identity.name, location=identity.location, year=year)


_default_generator = BusinessDataGenerator()


def generate_record(identity: BusinessIdentity) -> GeneratedMetrics:
    """Generate metrics with the module-level default generator."""
    return _default_generator.generate_record(identity)


def generate_headline(identity: BusinessIdentity) -> str:
    """Generate a replacement headline with the module-level default generator."""
    return _default_generator.generate_headline(identity)
