"""Domain initialization and configuration.

ShopSmart runs as a single Protean domain so that one Unit of Work can span
the catalogue, cart and order aggregates touched by checkout and cancellation.
"""

from protean.domain import Domain

from shopsmart.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
shopsmart = Domain(name="shopsmart")
