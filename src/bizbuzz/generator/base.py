from typing import Protocol

from bizbuzz.data import BusinessIdentity, GeneratedMetrics


class DataGenerator(Protocol):
    """Interface for producing business metrics and headlines from an identity."""

    def generate_record(self, identity: BusinessIdentity) -> GeneratedMetrics: ...

    def generate_headline(self, identity: BusinessIdentity) -> str: ...
