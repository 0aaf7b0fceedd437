#
#
#

"""Protocol definitions for traffic controller pool clients.

This module defines structural typing (PEP 544) for pool clients,
allowing type checking without requiring explicit inheritance.
"""

from typing import List, Optional, Protocol

from .domain import (
    PoolRecordSpec,
    TrafficControllerPool,
    TrafficControllerPoolRecord,
    UpdatePoolRecord,
)


class TrafficControllerPoolClient(Protocol):
    """Protocol defining the pool and pool record operations of a zone.

    Every method is a single, independent remote call. Not-found and
    already-exists conditions raise UltraDnsClientNotFound and
    UltraDnsClientAlreadyExists; lookups return None for absence.
    """

    def list(self) -> List[TrafficControllerPool]:
        """Return all traffic controller pools in the zone.

        Raises:
            UltraDnsClientNotFound: if the zone doesn't exist
        """
        ...

    def create_pool_for_hostname(self, name: str, hostname: str) -> str:
        """Create a traffic controller pool.

        Args:
            name: Pool name
            hostname: Fully qualified dname of the pool, e.g. www.example.com.

        Returns:
            The id of the new pool

        Raises:
            UltraDnsClientAlreadyExists: if a pool with the same attrs exists
        """
        ...

    def get_name_by_dname(self, dname: str) -> Optional[str]:
        """Return the name of the pool answering for dname, or None."""
        ...

    def delete(self, id: str) -> None:
        """Remove a pool and all its records and probes."""
        ...

    def list_records(self, pool_id: str) -> List[TrafficControllerPoolRecord]:
        """Return all records in the pool.

        Raises:
            UltraDnsClientNotFound: if the pool doesn't exist
        """
        ...

    def add_record_to_pool_with_ttl(
        self, points_to: str, pool_id: str, ttl: int
    ) -> str:
        """Add a record with the default weight.

        Args:
            points_to: IPv4 address or hostname
            pool_id: Pool to add the record to
            ttl: Record TTL in seconds

        Returns:
            The id of the new record

        Raises:
            UltraDnsClientAlreadyExists: if a record with the same attrs exists
        """
        ...

    def add_record_to_pool_with_ttl_and_weight(
        self, points_to: str, pool_id: str, ttl: int, weight: int
    ) -> str:
        """Add a record with an explicit weight.

        Args:
            points_to: IPv4 address or hostname
            pool_id: Pool to add the record to
            ttl: Record TTL in seconds
            weight: Relative share of traffic

        Returns:
            The id of the new record

        Raises:
            UltraDnsClientAlreadyExists: if a record with the same attrs exists
        """
        ...

    def get_record_spec(self, pool_record_id: str) -> Optional[PoolRecordSpec]:
        """Return the record's current spec, or None if not found."""
        ...

    def update_record(
        self, pool_record_id: str, update: UpdatePoolRecord
    ) -> None:
        """Replace an existing record's spec.

        Args:
            pool_record_id: Record identifier
            update: New spec, usually primed via UpdatePoolRecord.from_spec

        Raises:
            UltraDnsClientNotFound: if the record doesn't exist
        """
        ...

    def delete_record(self, pool_record_id: str) -> None:
        """Delete a single pool record."""
        ...
