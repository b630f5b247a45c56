from eveapi.models.assets.corporation_asset import CorporationAsset

__all__ = ["CorporationAsset"]
