from eveapi.models.alliances.alliance import Alliance

__all__ = ["Alliance"]
