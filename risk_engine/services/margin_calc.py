from __future__ import annotations

from risk_engine.schemas.margin import PositionInput

ACCOUNT_CAPITAL = 1_000_000.0
_INITIAL_MARGIN_RATE = 0.10
_MAINTENANCE_MARGIN_RATE = 0.05
_VAR_95_RATE = 0.02
_VAR_99_RATE = 0.035


def total_notional(positions: list[PositionInput] | None) -> float:
    return sum((p.quantity * p.price for p in positions or []), 0.0)


def calculate_margin(positions: list[PositionInput] | None) -> dict[str, float]:
    """Flat-rate margin and VaR over the summed position notional.

    ``available_margin`` is not clamped and goes negative once initial margin
    exceeds the account capital.
    """
    notional = total_notional(positions)
    initial = notional * _INITIAL_MARGIN_RATE

    return {
        'initial_margin': initial,
        'maintenance_margin': notional * _MAINTENANCE_MARGIN_RATE,
        'available_margin': ACCOUNT_CAPITAL - initial,
        'margin_utilization_pct': initial / ACCOUNT_CAPITAL * 100.0,
        'var_95': notional * _VAR_95_RATE,
        'var_99': notional * _VAR_99_RATE,
    }
