from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    version: str
    uptime_secs: int
    total_ops: int


class StatsResponse(BaseModel):
    total_checks: int
    total_margin_calcs: int
    total_alerts: int
    trades_blocked: int
    block_rate_pct: float
