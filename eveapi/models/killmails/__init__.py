from eveapi.models.killmails.corporation_killmail import CorporationKillmail

__all__ = ["CorporationKillmail"]
