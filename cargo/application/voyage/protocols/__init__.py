from .location_repository import LocationRepositoryProtocol
from .voyage_repository import VoyageRepositoryProtocol

__all__ = [
    "LocationRepositoryProtocol",
    "VoyageRepositoryProtocol",
]
