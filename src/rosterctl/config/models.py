"""Pydantic configuration models with code-baked defaults.

Every constant the report run depends on lives here. Instances are
frozen: built once at startup and only read afterwards.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from rosterctl.domain.formatting import DisplayFormat


class ReportConfig(BaseModel):
    """Constants driving the report pipeline."""

    model_config = {"frozen": True}

    excluded_name: str = Field(default="João", min_length=1)
    raise_percent: Decimal = Field(default=Decimal("10"), ge=0)
    birthday_months: tuple[int, ...] = (10, 12)
    minimum_wage: Decimal = Field(default=Decimal("1212.00"), gt=0)

    @field_validator("birthday_months")
    @classmethod
    def _months_in_range(cls, value: tuple[int, ...]) -> tuple[int, ...]:
        bad = [m for m in value if not 1 <= m <= 12]
        if bad:
            msg = f"birthday months must be between 1 and 12, got {bad}"
            raise ValueError(msg)
        return value


class FormatConfig(BaseModel):
    """Separators and layout for human-readable output."""

    model_config = {"frozen": True}

    decimal_separator: str = ","
    thousands_separator: str = "."
    date_pattern: str = "%d/%m/%Y"
    rule_width: int = Field(default=80, gt=0)

    def display_format(self) -> DisplayFormat:
        return DisplayFormat(
            decimal_separator=self.decimal_separator,
            thousands_separator=self.thousands_separator,
            date_pattern=self.date_pattern,
        )
