"""Display formats for money and dates.

Numbers render with a comma decimal separator and a dot thousands
separator (``2.009,44``); dates render as ``dd/mm/yyyy``.

INVARIANT: DisplayFormat instances are immutable. The module-level
``BRAZILIAN_FORMAT`` is built once at import and only ever read.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from rosterctl.domain.errors import InvalidArgument

CENTS = Decimal("0.01")


def to_cents(value: Decimal) -> Decimal:
    """Round *value* to two decimal places, half-up.

    Raises:
        InvalidArgument: If *value* has more digits than the active decimal
            context can hold once expressed in cents.
    """
    try:
        return value.quantize(CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation as exc:
        raise InvalidArgument(f"Amount too large to round to cents: {value}") from exc


@dataclass(frozen=True)
class DisplayFormat:
    """Separators and date pattern used for human-readable output."""

    decimal_separator: str = ","
    thousands_separator: str = "."
    date_pattern: str = "%d/%m/%Y"

    def number(self, value: Decimal) -> str:
        """Render *value* with two decimals and grouped thousands.

        Examples:
            >>> BRAZILIAN_FORMAT.number(Decimal("19119.88"))
            '19.119,88'
            >>> BRAZILIAN_FORMAT.number(Decimal("1.8237"))
            '1,82'
        """
        raw = f"{to_cents(value):,.2f}"
        table = str.maketrans({",": self.thousands_separator, ".": self.decimal_separator})
        return raw.translate(table)

    def date(self, value: date) -> str:
        return value.strftime(self.date_pattern)


BRAZILIAN_FORMAT = DisplayFormat()
