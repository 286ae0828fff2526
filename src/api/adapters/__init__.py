"""API adapters for transforming between application results and HTTP."""

from src.api.adapters.service_result import status_for, to_http_exception, unwrap

__all__: list[str] = ["status_for", "to_http_exception", "unwrap"]
