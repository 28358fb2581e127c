"""Formatting service for EVM data display."""

from __future__ import annotations
from typing import Any, Iterable, Optional

import pandas as pd
from dateutil import parser as date_parser

from core.classifier import classify_health, classify_status, index_severity
from core.utils import is_valid_finite_number
from models.evm import DisplayConfig


REGISTRY_COLUMNS = ['ID', 'Code', 'Project Name', 'Stage', 'Type', 'Budget', 'CPI', 'SPI', 'Health', 'Status']
PROBLEM_COLUMNS = ['ID', 'Code', 'Project Name', 'PM', 'CPI', 'SPI', 'Cost Risk', 'Cost Deviation']


class FormattingService:
    """Service for formatting EVM data for display.

    This is the only place values are rounded; the engine keeps full precision.
    """

    def __init__(self, config: Optional[DisplayConfig] = None):
        self.config = config or DisplayConfig()

    def format_currency(self, amount: Any, decimals: int = 0) -> str:
        """Currency with thousands separators and the unit postfix, e.g. $12,500M."""
        if not is_valid_finite_number(amount):
            return "—"
        return f"{self.config.currency_symbol}{float(amount):,.{decimals}f}{self.config.currency_postfix}"

    def format_percentage(self, value: Any, decimals: int = 0) -> str:
        """Format percentage values consistently."""
        if not is_valid_finite_number(value):
            return "—"
        return f"{float(value):.{decimals}f}%"

    def format_performance_index(self, value: Any, decimals: Optional[int] = None) -> str:
        """Format performance indices (CPI, SPI) consistently."""
        if not is_valid_finite_number(value):
            return "N/A"
        if decimals is None:
            decimals = self.config.decimals
        return f"{float(value):.{decimals}f}"

    def round_index(self, value: Any) -> Optional[float]:
        """Index rounded for tables; None when not a finite number."""
        if not is_valid_finite_number(value):
            return None
        return round(float(value), self.config.decimals)

    def format_date(self, date_input: Any) -> str:
        """Format an opaque date string; unparseable values are shown as-is."""
        if not date_input or str(date_input).strip() in ('', '-', 'N/A'):
            return "—"
        output_format = '%d-%m-%Y' if self.config.date_format == 'DD-MM-YYYY' else '%Y-%m-%d'
        try:
            return date_parser.parse(str(date_input)).strftime(output_format)
        except (ValueError, OverflowError):
            return str(date_input)

    def format_cost_deviation(self, deviation: Any) -> str:
        """'$700M Under' / '$700M Over' for a VAC value."""
        if not is_valid_finite_number(deviation):
            return "—"
        deviation = float(deviation)
        label = 'Under' if deviation >= 0 else 'Over'
        return f"{self.format_currency(abs(deviation))} {label}"

    def format_schedule_deviation(self, days: Any) -> str:
        """'47 Days Late' / '3 Days Early'."""
        if not is_valid_finite_number(days):
            return "—"
        days = int(days)
        label = 'Late' if days > 0 else 'Early'
        return f"{abs(days)} Days {label}"

    def format_index_badge(self, label: str, value: Any) -> str:
        """Short badge text with a severity marker, e.g. '🔴 CPI 0.83'."""
        marker = {'good': '🟢', 'neutral': '🔵', 'bad': '🔴'}[index_severity(value).value]
        return f"{marker} {label} {self.format_performance_index(value)}"

    # Tables
    def build_registry_frame(self, projects: Iterable[Any]) -> pd.DataFrame:
        """Registry table: one row per project, indices rounded for display."""
        rows = []
        for p in projects:
            evm = p.evm
            rows.append({
                'ID': p.id,
                'Code': p.code,
                'Project Name': p.name,
                'Stage': p.stage,
                'Type': p.type,
                'Budget': p.bac,
                'CPI': self.round_index(evm.cpi),
                'SPI': self.round_index(evm.spi),
                'Health': classify_health(p).value,
                'Status': classify_status(p).value,
            })
        return pd.DataFrame(rows, columns=REGISTRY_COLUMNS)

    def build_problem_frame(self, projects: Iterable[Any]) -> pd.DataFrame:
        """'Projects requiring attention' table."""
        rows = []
        for p in projects:
            evm = p.evm
            rows.append({
                'ID': p.id,
                'Code': p.code,
                'Project Name': p.name,
                'PM': p.pm,
                'CPI': self.round_index(evm.cpi),
                'SPI': self.round_index(evm.spi),
                'Cost Risk': p.risk_cost,
                'Cost Deviation': self.format_cost_deviation(evm.cost_deviation),
            })
        return pd.DataFrame(rows, columns=PROBLEM_COLUMNS)
