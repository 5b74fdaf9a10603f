from pydantic import BaseModel

from risk_engine.schemas.numbers import FiniteFloat


class CircuitBreakerRequest(BaseModel):
    instrument: str
    price_change_pct: FiniteFloat


class CircuitBreakerResponse(BaseModel):
    instrument: str
    triggered: bool
    level: str
    halt_duration_secs: int
    price_change_pct: float
