from eveapi.models.contracts.corporation_contract import CorporationContract

__all__ = ["CorporationContract"]
