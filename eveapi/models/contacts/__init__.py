from eveapi.models.contacts.corporation_contact import CorporationContact
from eveapi.models.contacts.corporation_label import CorporationLabel

__all__ = ["CorporationContact", "CorporationLabel"]
