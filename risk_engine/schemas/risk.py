from pydantic import BaseModel

from risk_engine.schemas.numbers import FiniteFloat


class PreTradeCheckRequest(BaseModel):
    account: str
    instrument: str
    side: str
    quantity: FiniteFloat
    price: FiniteFloat


class PreTradeCheckResponse(BaseModel):
    check_id: str
    approved: bool
    reasons: list[str]
    risk_score: float
    margin_impact: float
    position_limit_used_pct: float
    elapsed_us: int
