"""Business data generation."""

from bizbuzz.generator.base import DataGenerator
from bizbuzz.generator.simulated import BusinessDataGenerator, generate_headline, generate_record
from bizbuzz.generator.templates import (
    MAX_RATING,
    MIN_RATING,
    RECORD_HEADLINE_TEMPLATES,
    REGENERATED_HEADLINE_TEMPLATES,
    REVIEW_BANDS,
)

__all__ = [
    "MAX_RATING",
    "MIN_RATING",
    "RECORD_HEADLINE_TEMPLATES",
    "REGENERATED_HEADLINE_TEMPLATES",
    "REVIEW_BANDS",
    "BusinessDataGenerator",
    "DataGenerator",
    "generate_headline",
    "generate_record",
]
