"""
Formatage des montants dans la devise de la boutique.
- 2 décimales (arrondi au demi supérieur), séparateur de milliers "," sauf si options["grouping"] est False
- symbole en préfixe sauf si options["display"] == NO_SYMBOL
- include_container=True entoure le résultat d'un <span class="price">
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, Optional

NO_SYMBOL = "no_symbol"
USE_SYMBOL = "use_symbol"

SYMBOLS = {
    "USD": "$",
    "CAD": "CA$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "AUD": "A$",
}

# module subscribepro_checkout.checkout.currency
class Currency:
    def __init__(self, code: str = "USD", precision: int = 2):
        self.code = (code or "USD").upper()
        self.precision = precision

    def format(self, amount: Any, options: Optional[Dict[str, Any]] = None, include_container: bool = True) -> str:
        options = options or {}
        quantum = Decimal(1).scaleb(-self.precision)
        value = Decimal(str(amount or 0)).quantize(quantum, rounding=ROUND_HALF_UP)
        separator = "," if options.get("grouping", True) else ""
        text = f"{abs(value):{separator}.{self.precision}f}"
        if options.get("display", USE_SYMBOL) != NO_SYMBOL:
            text = SYMBOLS.get(self.code, self.code + " ") + text
        if value < 0:
            text = "-" + text
        if include_container:
            return f'<span class="price">{text}</span>'
        return text
