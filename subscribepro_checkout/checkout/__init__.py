"""
Module 'checkout' (feature-first): modèles boutique, repositories, sessions, devise, régions et soumission de commande.
"""
from .models import Address, QuoteAddress, Quote, Payment, Order
from .repository import QuoteRepository, OrderRepository, get_quote_repository, get_order_repository
from .session import CheckoutSession, CustomerSession
from .currency import Currency, NO_SYMBOL, USE_SYMBOL
from .regions import Region, RegionDirectory
from .service import QuoteManagement, OrderService

__all__ = [
    # models
    "Address",
    "QuoteAddress",
    "Quote",
    "Payment",
    "Order",
    # repository
    "QuoteRepository",
    "OrderRepository",
    "get_quote_repository",
    "get_order_repository",
    # sessions
    "CheckoutSession",
    "CustomerSession",
    # currency / regions
    "Currency",
    "NO_SYMBOL",
    "USE_SYMBOL",
    "Region",
    "RegionDirectory",
    # services
    "QuoteManagement",
    "OrderService",
]
