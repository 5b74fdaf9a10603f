import os
from functools import lru_cache

from pydantic import BaseModel, field_validator

_DEFAULT_ADDR = "0.0.0.0:8081"


class Settings(BaseModel):
    RISK_ADDR: str = _DEFAULT_ADDR
    RISK_HTTP_TRACE: bool = True

    @field_validator("RISK_ADDR")
    @classmethod
    def validate_addr(cls, value: str) -> str:
        host, sep, port = value.strip().rpartition(":")
        if not sep or not host:
            raise ValueError("RISK_ADDR must be host:port")
        if not port.isdigit() or not 1 <= int(port) <= 65535:
            raise ValueError(f"invalid port in RISK_ADDR: {port!r}")
        return f"{host}:{port}"

    @property
    def bind_host(self) -> str:
        return self.RISK_ADDR.rpartition(":")[0].strip("[]")

    @property
    def bind_port(self) -> int:
        return int(self.RISK_ADDR.rpartition(":")[2])

    @classmethod
    def from_env(cls) -> "Settings":
        raw_addr = os.getenv("RISK_ADDR", "").strip() or _DEFAULT_ADDR
        raw_trace = os.getenv("RISK_HTTP_TRACE", "").strip() or True

        return cls.model_validate(
            {
                "RISK_ADDR": raw_addr,
                "RISK_HTTP_TRACE": raw_trace,
            }
        )


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()
