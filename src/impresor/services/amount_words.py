from __future__ import annotations

from collections.abc import Awaitable, Callable
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from num2words import num2words

AmountToWords = Callable[[Decimal, str | None], Awaitable[str]]

# (singular, plural); currencies not listed are named by their code
_CURRENCY_NAMES = {
    "MXN": ("PESO", "PESOS"),
    "USD": ("DOLAR", "DOLARES"),
    "CAD": ("DOLAR CANADIENSE", "DOLARES CANADIENSES"),
    "EUR": ("EURO", "EUROS"),
    "GBP": ("LIBRA ESTERLINA", "LIBRAS ESTERLINAS"),
    "JPY": ("YEN", "YENES"),
}


def _integer_words(n: int) -> str:
    words = num2words(n, lang="es").upper()
    # Apocope before the currency noun: "UNO PESOS" -> "UN PESOS"
    if words.endswith("UNO"):
        words = words[:-1]
    return words


def amount_to_words(amount: str | float | Decimal, currency: str | None) -> str:
    """Spell out *amount* the way Mexican invoices print it.

    Example: 1234.5, "MXN" -> "MIL DOSCIENTOS TREINTA Y CUATRO PESOS 50/100 M.N."
    Raises ValueError for a non-numeric amount.
    """
    try:
        d = Decimal(str(amount))
        if not d.is_finite():
            raise InvalidOperation
    except InvalidOperation:
        raise ValueError(f"Invalid amount: '{amount}'") from None

    code = (currency or "MXN").upper()
    d = abs(d).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    integer = int(d)
    cents = int((d - integer) * 100)

    singular, plural = _CURRENCY_NAMES.get(code, (code, code))
    name = singular if integer == 1 else plural
    if integer and integer % 1_000_000 == 0:
        name = f"DE {name}"
    suffix = "M.N." if code == "MXN" else code

    words = f"{_integer_words(integer)} {name} {cents:02d}/100 {suffix}"
    if Decimal(str(amount)) < 0:
        words = f"MENOS {words}"
    return words


async def to_words(amount: str | float | Decimal, currency: str | None) -> str:
    """Default amount-in-words service used by the document builder."""
    return amount_to_words(amount, currency)
