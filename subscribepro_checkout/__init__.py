"""
Intégration Subscribe Pro pour le checkout: paiements tiers, vault gateway, Apple Pay.
"""

__version__ = "1.0.0"
