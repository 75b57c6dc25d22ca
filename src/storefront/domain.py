"""Storefront domain: users, catalogue and orders.

Single composition root for the application. Every aggregate, entity,
command and handler under this package registers itself against
``storefront`` and is picked up by ``storefront.init()``.
"""

import logging

from protean.domain import Domain

from storefront.utils.logging import configure_logging, get_logger

configure_logging()

# Suppress noisy library loggers
logging.getLogger("protean").setLevel(logging.WARNING)

logger = get_logger(__name__)

storefront = Domain(name="storefront")
