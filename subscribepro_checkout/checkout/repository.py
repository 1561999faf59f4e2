"""
Accès aux données pour la feature 'checkout' (paniers et commandes en mémoire, par processus).
Une boutique hôte branche ses propres repositories via les dépendances FastAPI.
"""
import itertools
import logging
from typing import Any, Dict, List, Optional

from subscribepro_checkout.checkout.models import Order, Quote

logger = logging.getLogger(__name__)

# module subscribepro_checkout.checkout.repository
class QuoteRepository:
    def __init__(self):
        self._quotes: Dict[str, Quote] = {}

    def get(self, quote_id: Any) -> Optional[Quote]:
        if quote_id is None:
            return None
        return self._quotes.get(str(quote_id))

    def save(self, quote: Quote) -> Quote:
        self._quotes[str(quote.id)] = quote
        return quote


class OrderRepository:
    def __init__(self, start: int = 100000001):
        self._orders: Dict[str, Order] = {}
        self._sequence = itertools.count(start)

    def next_increment_id(self) -> str:
        return str(next(self._sequence))

    def save(self, order: Order) -> Order:
        self._orders[order.increment_id] = order
        logger.info("checkout.repository order saved increment_id=%s quote_id=%s", order.increment_id, order.quote_id)
        return order

    def list(self) -> List[Order]:
        return list(self._orders.values())


_quote_repository = QuoteRepository()
_order_repository = OrderRepository()

def get_quote_repository() -> QuoteRepository:
    return _quote_repository

def get_order_repository() -> OrderRepository:
    return _order_repository
