from typing import Protocol

from bizbuzz.data import BusinessIdentity, BusinessRecord


class BusinessGateway(Protocol):
    """Interface for the remote business-data service boundary.

    Implementations perform no retries. Failures surface as
    ``bizbuzz.errors.NetworkError``.
    """

    async def fetch_record(self, identity: BusinessIdentity) -> BusinessRecord:
        """Fetch the full business record for an identity.

        Args:
            identity: Validated business identity.

        Returns:
            BusinessRecord whose name and location equal the identity's.
        """
        ...

    async def fetch_headline(self, identity: BusinessIdentity) -> str:
        """Fetch a replacement marketing headline for an identity."""
        ...
