from eveapi.models.sde.map_denormalize import MapDenormalize
from eveapi.models.sde.map_sovereignty import MapSovereignty

__all__ = ["MapDenormalize", "MapSovereignty"]
