"""Tests for BusinessDataGenerator."""

import random
import re

import pytest

from bizbuzz.data import BusinessIdentity, GeneratedMetrics
from bizbuzz.generator import (
    MAX_RATING,
    MIN_RATING,
    RECORD_HEADLINE_TEMPLATES,
    REGENERATED_HEADLINE_TEMPLATES,
    REVIEW_BANDS,
    BusinessDataGenerator,
    generate_headline,
    generate_record,
)

SAMPLES = 2000

IDENTITIES = [
    BusinessIdentity(name="Cake & Co", location="Mumbai"),
    BusinessIdentity(name="Joe's {Diner}", location="São Paulo"),
    BusinessIdentity(name="  Padded  ", location=" Town "),
]


def _render_all(templates: tuple[str, ...], identity: BusinessIdentity, year: int) -> set[str]:
    return {t.format(name=identity.name, location=identity.location, year=year) for t in templates}


@pytest.fixture
def generator() -> BusinessDataGenerator:
    return BusinessDataGenerator(random.Random(1234), year=2026)


def test_template_family_sizes() -> None:
    assert len(RECORD_HEADLINE_TEMPLATES) == 8
    assert len(REGENERATED_HEADLINE_TEMPLATES) == 12
    assert len(set(RECORD_HEADLINE_TEMPLATES)) == 8
    assert len(set(REGENERATED_HEADLINE_TEMPLATES)) == 12


def test_template_families_are_disjoint() -> None:
    assert not set(RECORD_HEADLINE_TEMPLATES) & set(REGENERATED_HEADLINE_TEMPLATES)


def test_every_template_mentions_name_and_location() -> None:
    for template in RECORD_HEADLINE_TEMPLATES + REGENERATED_HEADLINE_TEMPLATES:
        assert "{name}" in template
        assert "{location}" in template


def test_review_bands_are_disjoint_and_ordered() -> None:
    for (_, high), (next_low, _) in zip(REVIEW_BANDS, REVIEW_BANDS[1:], strict=False):
        assert high < next_low
    assert REVIEW_BANDS[0][0] == 25
    assert REVIEW_BANDS[-1][1] == 500


@pytest.mark.parametrize("identity", IDENTITIES)
def test_rating_in_range_and_one_decimal(
    generator: BusinessDataGenerator, identity: BusinessIdentity
) -> None:
    for _ in range(SAMPLES):
        rating = generator.generate_record(identity).rating
        assert MIN_RATING <= rating <= MAX_RATING
        assert round(rating, 1) == rating


def test_rating_covers_range(generator: BusinessDataGenerator) -> None:
    ratings = {generator.generate_record(IDENTITIES[0]).rating for _ in range(SAMPLES)}
    assert MIN_RATING in ratings
    assert MAX_RATING in ratings
    assert len(ratings) == 12


def test_reviews_inside_a_band(generator: BusinessDataGenerator) -> None:
    for _ in range(SAMPLES):
        reviews = generator.generate_record(IDENTITIES[0]).reviews
        assert isinstance(reviews, int)
        assert any(low <= reviews <= high for low, high in REVIEW_BANDS)


def test_reviews_reach_every_band(generator: BusinessDataGenerator) -> None:
    hits = {i: 0 for i in range(len(REVIEW_BANDS))}
    for _ in range(SAMPLES):
        reviews = generator.generate_record(IDENTITIES[0]).reviews
        for i, (low, high) in enumerate(REVIEW_BANDS):
            if low <= reviews <= high:
                hits[i] += 1
    # Bands are picked uniformly, so each should get roughly a quarter
    for count in hits.values():
        assert count > SAMPLES * 0.15


@pytest.mark.parametrize("identity", IDENTITIES)
def test_record_headline_from_record_family(
    generator: BusinessDataGenerator, identity: BusinessIdentity
) -> None:
    allowed = _render_all(RECORD_HEADLINE_TEMPLATES, identity, 2026)
    for _ in range(200):
        headline = generator.generate_record(identity).headline
        assert headline in allowed
        assert identity.name in headline
        assert identity.location in headline


@pytest.mark.parametrize("identity", IDENTITIES)
def test_regenerated_headline_from_regeneration_family(
    generator: BusinessDataGenerator, identity: BusinessIdentity
) -> None:
    allowed = _render_all(REGENERATED_HEADLINE_TEMPLATES, identity, 2026)
    initial = _render_all(RECORD_HEADLINE_TEMPLATES, identity, 2026)
    for _ in range(200):
        headline = generator.generate_headline(identity)
        assert headline in allowed
        assert headline not in initial
        assert identity.name in headline
        assert identity.location in headline


def test_regenerated_headlines_use_whole_family(generator: BusinessDataGenerator) -> None:
    seen = {generator.generate_headline(IDENTITIES[0]) for _ in range(SAMPLES)}
    assert len(seen) == 12


def test_year_interpolated() -> None:
    year_template = RECORD_HEADLINE_TEMPLATES[0]
    assert "{year}" in year_template
    gen = BusinessDataGenerator(random.Random(7), year=2031)
    headlines = {gen.generate_record(IDENTITIES[0]).headline for _ in range(500)}
    dated = [h for h in headlines if re.search(r"\d{4}$", h)]
    assert dated
    assert all(h.endswith("2031") for h in dated)


def test_seeded_generators_agree() -> None:
    a = BusinessDataGenerator(random.Random(42), year=2026)
    b = BusinessDataGenerator(random.Random(42), year=2026)
    assert a.generate_record(IDENTITIES[0]) == b.generate_record(IDENTITIES[0])
    assert a.generate_headline(IDENTITIES[0]) == b.generate_headline(IDENTITIES[0])


def test_identity_not_modified(generator: BusinessDataGenerator) -> None:
    identity = BusinessIdentity(name=" Spaced ", location=" Out ")
    generator.generate_record(identity)
    assert identity == BusinessIdentity(name=" Spaced ", location=" Out ")


def test_module_level_functions() -> None:
    identity = IDENTITIES[0]
    metrics = generate_record(identity)
    assert isinstance(metrics, GeneratedMetrics)
    assert MIN_RATING <= metrics.rating <= MAX_RATING
    assert identity.name in generate_headline(identity)
