"""store-config — validated license-store configuration values.

Provides the immutable :class:`StoreConfig` record and the
:func:`create_store` factory that normalizes and validates its input.
"""

import logging

from store_config.core.factory import create_store
from store_config.core.models import StoreConfig
from store_config.version import __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = ["StoreConfig", "__version__", "create_store"]
