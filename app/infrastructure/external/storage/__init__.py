"""Storage: local filesystem, Google Cloud Storage and Cloudflare R2 sinks.

StorageFactory.create_dispatcher() picks one sink from STORAGE_PROVIDER at
startup. Cloud implementations are loaded lazily inside the factory so a
local deployment never imports the cloud SDKs.

Every sink implements StorageProtocol (provider, ready, upload).
"""

from app.infrastructure.external.storage.dispatcher import StorageDispatcher
from app.infrastructure.external.storage.factory import StorageFactory
from app.infrastructure.external.storage.protocol import StorageProtocol

__all__ = [
    "StorageDispatcher",
    "StorageFactory",
    "StorageProtocol",
]
