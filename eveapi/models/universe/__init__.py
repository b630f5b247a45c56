from eveapi.models.universe.universe_name import UniverseName
from eveapi.models.universe.universe_station import UniverseStation

__all__ = ["UniverseName", "UniverseStation"]
