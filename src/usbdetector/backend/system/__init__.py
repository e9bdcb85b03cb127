from .protocol import OsVersionSourceProtocol
from .service import PlatformOsVersionService

__all__ = [
    "OsVersionSourceProtocol",
    "PlatformOsVersionService",
]
