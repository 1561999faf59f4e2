# module subscribepro_checkout.checkout.session
"""Sessions checkout et client: accès au panier actif et au profil du client connecté."""
from typing import Any, Dict, Optional

from subscribepro_checkout.checkout.models import Quote
from subscribepro_checkout.checkout.repository import QuoteRepository
from subscribepro_checkout.exceptions import LocalizedException


class CheckoutSession:
    def __init__(self, quote_repository: QuoteRepository, quote_id: Any):
        self.quote_repository = quote_repository
        self.quote_id = quote_id

    def get_quote(self) -> Quote:
        quote = self.quote_repository.get(self.quote_id)
        if quote is None:
            raise LocalizedException("The cart could not be found.")
        return quote


class CustomerSession:
    def __init__(self, customer_data: Optional[Dict[str, Any]] = None):
        self._customer_data = customer_data

    def is_logged_in(self) -> bool:
        return bool(self._customer_data)

    def get_customer_data(self) -> Dict[str, Any]:
        return dict(self._customer_data or {})
