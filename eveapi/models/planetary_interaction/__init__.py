from eveapi.models.planetary_interaction.corporation_customs_office import CorporationCustomsOffice

__all__ = ["CorporationCustomsOffice"]
