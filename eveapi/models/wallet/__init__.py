from eveapi.models.wallet.corporation_wallet_balance import CorporationWalletBalance
from eveapi.models.wallet.corporation_wallet_journal import CorporationWalletJournal
from eveapi.models.wallet.corporation_wallet_transaction import CorporationWalletTransaction

__all__ = ["CorporationWalletBalance", "CorporationWalletJournal", "CorporationWalletTransaction"]
