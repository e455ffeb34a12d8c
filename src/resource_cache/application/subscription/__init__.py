"""Application subscription – request diffing, staleness scheduling and fetch dedup."""
from resource_cache.application.subscription.binding import (
    Performer,
    Render,
    StateChanges,
    SubscriptionBinding,
)
from resource_cache.application.subscription.in_flight import InFlightSet
from resource_cache.application.subscription.resource_map import (
    Perform,
    PerformerFactory,
    ResourceMap,
    ResourcesFn,
)

__all__ = [
    "InFlightSet",
    "Perform",
    "PerformerFactory",
    "Performer",
    "Render",
    "ResourceMap",
    "ResourcesFn",
    "StateChanges",
    "SubscriptionBinding",
]
