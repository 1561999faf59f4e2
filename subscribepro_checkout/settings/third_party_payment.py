"""
Accès aux réglages « paiements tiers » (store scope).
"""
from typing import List, Optional

from subscribepro_checkout.settings.scope_config import ScopeConfig, SCOPE_STORE

XML_PATH_IS_ALLOWED = "swarming_subscribepro/third_party_payment/is_allowed"
XML_PATH_ALLOWED_METHODS = "swarming_subscribepro/third_party_payment/allowed_methods"

# module subscribepro_checkout.settings.third_party_payment
class ThirdPartyPayment:
    def __init__(self, scope_config: ScopeConfig):
        self.scope_config = scope_config

    def is_allowed(self, store_id: Optional[int] = None) -> bool:
        return self.scope_config.is_set_flag(XML_PATH_IS_ALLOWED, SCOPE_STORE, store_id)

    def get_allowed_methods(self, store_id: Optional[int] = None) -> List[str]:
        """
        Codes des méthodes tierces autorisées, dans l'ordre configuré.
        - [] si le flag is_allowed est désactivé ou si la valeur est vide
        - sinon découpage brut sur "," (pas de dédoublonnage)
        """
        value = self.scope_config.get_value(XML_PATH_ALLOWED_METHODS, SCOPE_STORE, store_id)
        if not self.is_allowed(store_id) or not value:
            return []
        return str(value).split(",")
