import time
import uuid

from fastapi import APIRouter, Request

from risk_engine.schemas.circuit_breaker import CircuitBreakerRequest, CircuitBreakerResponse
from risk_engine.schemas.margin import MarginRequest, MarginResponse
from risk_engine.schemas.risk import PreTradeCheckRequest, PreTradeCheckResponse
from risk_engine.schemas.stats import HealthResponse, StatsResponse
from risk_engine.schemas.stress_test import StressTestRequest, StressTestResponse
from risk_engine.services.margin_calc import calculate_margin
from risk_engine.services.risk_policy import evaluate_circuit_breaker, evaluate_pretrade
from risk_engine.services.stats_store import stats_store
from risk_engine.services.stress_test import run_stress_test

router = APIRouter()
health_router = APIRouter()


def _elapsed_us(started_ns: int) -> int:
    return (time.perf_counter_ns() - started_ns) // 1000


@health_router.get('/health', response_model=HealthResponse)
def health(request: Request):
    snapshot = stats_store.snapshot()
    return HealthResponse(
        status='ok',
        version=request.app.version,
        uptime_secs=int(time.monotonic() - request.app.state.started_at),
        total_ops=snapshot.total_ops,
    )


@router.post('/pretrade', response_model=PreTradeCheckResponse)
def pretrade_check(req: PreTradeCheckRequest):
    started_ns = time.perf_counter_ns()
    result = evaluate_pretrade(req)
    check_id = str(uuid.uuid4())

    stats_store.record_check(blocked=not result['approved'])
    if not result['approved']:
        print(
            f"[RISK][pretrade_blocked] check_id={check_id} account={req.account} "
            f"instrument={req.instrument} risk_score={result['risk_score']:.4f}",
            flush=True,
        )

    return PreTradeCheckResponse(
        check_id=check_id,
        **result,
        elapsed_us=_elapsed_us(started_ns),
    )


@router.post('/margin', response_model=MarginResponse)
def margin_calc(req: MarginRequest):
    started_ns = time.perf_counter_ns()
    result = calculate_margin(req.positions)
    stats_store.record_margin_calc()

    return MarginResponse(
        account=req.account,
        **result,
        elapsed_us=_elapsed_us(started_ns),
    )


@router.post('/circuit-breaker', response_model=CircuitBreakerResponse)
def circuit_breaker(req: CircuitBreakerRequest):
    result = evaluate_circuit_breaker(req.price_change_pct)
    if result['triggered']:
        stats_store.record_alert()
        print(
            f"[RISK][circuit_breaker_triggered] instrument={req.instrument} "
            f"level={result['level']} halt_duration_secs={result['halt_duration_secs']}",
            flush=True,
        )

    return CircuitBreakerResponse(
        instrument=req.instrument,
        price_change_pct=req.price_change_pct,
        **result,
    )


@router.post('/stress-test', response_model=StressTestResponse)
def stress_test(req: StressTestRequest):
    return StressTestResponse(**run_stress_test(req.scenario, req.shock_pct))


@router.get('/stats', response_model=StatsResponse)
def stats():
    snapshot = stats_store.snapshot()
    return StatsResponse(
        **snapshot.model_dump(),
        block_rate_pct=snapshot.block_rate_pct,
    )
