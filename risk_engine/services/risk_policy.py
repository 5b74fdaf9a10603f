from risk_engine.schemas.risk import PreTradeCheckRequest

_POSITION_LIMIT_NOTIONAL = 1_000_000.0
_APPROVAL_THRESHOLD = 0.8
_LARGE_ORDER_NOTIONAL = 500_000.0
_MARGIN_IMPACT_RATE = 0.1

REASON_POSITION_LIMIT = 'Position limit exceeded'
REASON_LARGE_ORDER = 'Large order flag'

# highest threshold first; first match wins
_CIRCUIT_BREAKER_LADDER = (
    (20.0, 'L3', 3600),
    (13.0, 'L2', 900),
    (7.0, 'L1', 300),
)


def evaluate_pretrade(req: PreTradeCheckRequest) -> dict[str, bool | float | list[str]]:
    notional = req.quantity * req.price
    # negative notional (short or negative qty) scores as zero risk
    risk_score = min(max(notional / _POSITION_LIMIT_NOTIONAL, 0.0), 1.0)
    approved = risk_score < _APPROVAL_THRESHOLD

    reasons: list[str] = []
    if not approved:
        reasons.append(REASON_POSITION_LIMIT)
    if notional > _LARGE_ORDER_NOTIONAL:
        reasons.append(REASON_LARGE_ORDER)

    return {
        'approved': approved,
        'reasons': reasons,
        'risk_score': risk_score,
        'margin_impact': notional * _MARGIN_IMPACT_RATE,
        'position_limit_used_pct': risk_score * 100.0,
    }


def evaluate_circuit_breaker(price_change_pct: float) -> dict[str, bool | str | int]:
    abs_change = abs(price_change_pct)
    for threshold, level, halt_secs in _CIRCUIT_BREAKER_LADDER:
        if abs_change >= threshold:
            return {'triggered': True, 'level': level, 'halt_duration_secs': halt_secs}
    return {'triggered': False, 'level': 'none', 'halt_duration_secs': 0}
