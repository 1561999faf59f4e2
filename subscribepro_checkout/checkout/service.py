"""
Cas d'usage 'checkout': soumission du panier et création de commande.
- QuoteManagement.place_order: lève CouldNotPlaceOrderError si le panier n'est pas soumettable
- OrderService.create_order: même flux, mais renvoie un booléen (échec métier = False)
"""
import logging
from typing import Any, Optional

from subscribepro_checkout.checkout.models import Order, Payment
from subscribepro_checkout.checkout.repository import OrderRepository, QuoteRepository
from subscribepro_checkout.exceptions import CouldNotPlaceOrderError

logger = logging.getLogger(__name__)

# module subscribepro_checkout.checkout.service
class QuoteManagement:
    def __init__(self, quote_repository: QuoteRepository, order_repository: OrderRepository):
        self.quote_repository = quote_repository
        self.order_repository = order_repository

    def place_order(self, cart_id: Any, payment_method: Optional[Payment] = None) -> str:
        """
        Transforme le panier en commande et renvoie l'increment_id.
        - payment_method (optionnel) remplace le paiement déjà porté par le panier
        - Le panier est désactivé après soumission
        """
        quote = self.quote_repository.get(cart_id)
        if quote is None or not quote.is_active:
            raise CouldNotPlaceOrderError(f"No active cart with id {cart_id}.")
        payment = payment_method if payment_method is not None else quote.payment
        if not quote.billing_address:
            raise CouldNotPlaceOrderError("Please check the billing address information.")
        if not quote.shipping_address.shipping_method:
            raise CouldNotPlaceOrderError("The shipping method is missing. Select the shipping method and try again.")
        if payment is None or not payment.method:
            raise CouldNotPlaceOrderError("Enter a valid payment method and try again.")

        # Le panier n'est modifié qu'une fois toutes les vérifications passées
        quote.payment = payment
        order = Order(
            increment_id=self.order_repository.next_increment_id(),
            quote_id=quote.id,
            grand_total=quote.grand_total,
            payment=payment,
            customer_email=quote.customer_email,
        )
        self.order_repository.save(order)
        quote.is_active = False
        self.quote_repository.save(quote)
        return order.increment_id


class OrderService:
    def __init__(self, quote_repository: QuoteRepository, quote_management: QuoteManagement):
        self.quote_repository = quote_repository
        self.quote_management = quote_management

    def create_order(self, quote_id: Any, shipping_method: Optional[str] = None) -> bool:
        quote = self.quote_repository.get(quote_id)
        if quote is None:
            logger.error("checkout.service.create_order: panier introuvable quote_id=%s", quote_id)
            return False
        shipping_address = quote.get_shipping_address()
        if not shipping_address.shipping_method and shipping_method:
            shipping_address.shipping_method = shipping_method
        try:
            increment_id = self.quote_management.place_order(quote.id)
        except CouldNotPlaceOrderError as e:
            logger.warning("checkout.service.create_order failed quote_id=%s: %s", quote_id, e.message)
            return False
        logger.info("checkout.service.create_order ok quote_id=%s order=%s", quote_id, increment_id)
        return True
