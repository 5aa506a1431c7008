"""SimpleStore bounded context — catalog, carts and per-user orders.

Carts and orders are plain aggregates persisted as JSON documents through a
DocumentStore. All store activity is serialized by the Store's lock.
"""

import structlog
from protean.domain import Domain

simplestore = Domain(name="simplestore")

logger = structlog.get_logger(__name__)
