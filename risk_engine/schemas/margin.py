from pydantic import BaseModel

from risk_engine.schemas.numbers import FiniteFloat


class PositionInput(BaseModel):
    instrument: str
    quantity: FiniteFloat
    price: FiniteFloat


class MarginRequest(BaseModel):
    account: str
    positions: list[PositionInput] | None = None


class MarginResponse(BaseModel):
    account: str
    initial_margin: float
    maintenance_margin: float
    available_margin: float
    margin_utilization_pct: float
    var_95: float
    var_99: float
    elapsed_us: int
