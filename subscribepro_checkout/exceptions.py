"""
Exceptions métier de l'intégration.
- LocalizedException: erreur destinée à l'utilisateur (message affichable), mappée en 400 par l'app.
- VaultNotFoundError: arrêt net du pipeline gateway (pas de token vault sur le paiement).
- PlatformApiError: réponse non-2xx de la plateforme Subscribe Pro (propagée telle quelle).
"""
from typing import Optional

# module subscribepro_checkout.exceptions
class LocalizedException(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

class BillingAddressEmptyError(LocalizedException):
    def __init__(self):
        super().__init__("The billing address is empty.")

class InvalidCardTypeError(LocalizedException):
    def __init__(self, card_type):
        super().__init__(f"Invalid credit card type: {card_type}")
        self.card_type = card_type

class CouldNotPlaceOrderError(LocalizedException):
    pass

class VaultNotFoundError(Exception):
    def __init__(self, message: str = "The vault is not found."):
        super().__init__(message)

class PlatformApiError(Exception):
    def __init__(self, status_code: int, message: str, body: Optional[dict] = None):
        super().__init__(f"Subscribe Pro API error ({status_code}): {message}")
        self.status_code = status_code
        self.message = message
        self.body = body or {}

class PlatformCustomerNotFoundError(LocalizedException):
    def __init__(self, email: str):
        super().__init__(f"Platform customer not found for email {email}")
        self.email = email
