"""JSON config store with dotted-path access and split-file persistence.

Usage:

    store = ConfigStore("config.json")
    store.restore()
    store.set("server.port", 8080)
    store.add_reference("plugins", "plugins.json")
    store.save()   # config.json gets "plugins": "@{plugins.json}"
"""

from loguru import logger

from splitconfig.core.references import is_marker, make_marker
from splitconfig.core.store import ConfigFormatError, ConfigStore
from splitconfig.infrastructure.logging import init_logging

logger.disable(__name__)

__all__ = ["ConfigFormatError", "ConfigStore", "init_logging", "is_marker", "make_marker"]
