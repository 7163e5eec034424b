"""
Context aggregator.

Reads the six alumni collections concurrently and bundles them for the
prompt builder.

Dependencies: asyncio, backend.core.context.gateway, backend.configs
System role: Fan-out/fan-in of collection reads per chat request
"""

import asyncio
import logging
from dataclasses import dataclass, field

from backend.configs import CollectionSettings
from backend.core.context.gateway import FetchResult, Record, RecordStoreGateway

logger = logging.getLogger(__name__)


@dataclass
class ContextBundle:
    """
    All collection data for one chat request.

    Every field is always present; missing data is an empty list.
    """

    events: list[Record] = field(default_factory=list)
    fundraising: list[Record] = field(default_factory=list)
    internships: list[Record] = field(default_factory=list)
    notifications: list[Record] = field(default_factory=list)
    users: list[Record] = field(default_factory=list)
    mentorships: list[Record] = field(default_factory=list)


class ContextAggregator:
    """
    Gathers the context bundle.

    Issues one gateway read per collection concurrently and waits for all
    of them. The gateway never raises, so the join cannot fail on a single
    collection.
    """

    def __init__(self, gateway: RecordStoreGateway, collections: CollectionSettings) -> None:
        """
        Args:
            gateway: Record store gateway
            collections: Configured collection names
        """
        self.gateway = gateway
        self.collections = collections

    async def gather(self) -> ContextBundle:
        """
        Fetch all six collections and build the bundle.

        Returns:
            ContextBundle: One list per collection, possibly empty
        """
        names = self.collections
        results: list[FetchResult] = await asyncio.gather(
            self.gateway.fetch(names.events),
            self.gateway.fetch(names.fundraising),
            self.gateway.fetch(names.internships),
            self.gateway.fetch(names.notifications),
            self.gateway.fetch(names.users),
            self.gateway.fetch(names.mentorship),
        )
        events, fundraising, internships, notifications, users, mentorships = results

        failed = [result.collection for result in results if result.failed]
        if failed:
            logger.warning(
                f"{__name__}:gather - Collections defaulted to empty: {', '.join(failed)}",
                extra={"failed_collections": failed},
            )

        bundle = ContextBundle(
            events=events.records,
            fundraising=fundraising.records,
            internships=internships.records,
            notifications=notifications.records,
            users=users.records,
            mentorships=mentorships.records,
        )
        logger.info(
            f"{__name__}:gather - events={len(bundle.events)} fundraising={len(bundle.fundraising)} "
            f"internships={len(bundle.internships)} notifications={len(bundle.notifications)} "
            f"users={len(bundle.users)} mentorships={len(bundle.mentorships)}"
        )
        return bundle
