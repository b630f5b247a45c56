from eveapi.models.market.corporation_order import CorporationOrder

__all__ = ["CorporationOrder"]
