import logging
import time
import uuid
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from versionapp.core.logger import logger, trace_id_var, client_ip_var

# 스크레이프 요청은 요청 로그에서 제외
UNLOGGED_PATHS = frozenset({"/metrics"})


def resolve_client_ip(request: Request) -> str:
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()
    return request.client.host if request.client else "-"


def classify_status(status_code: int):
    """응답 코드 -> (로그 이벤트, 로그 레벨)"""
    if status_code >= 500:
        return "SYSTEM_ERROR", logging.ERROR
    if status_code >= 400:
        return "CLIENT_ERROR", logging.WARNING
    return "REQUEST_COMPLETED", logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    요청마다 trace_id 를 부여하고, 서비스 버전/환경과 함께 한 줄 로그를 남긴다.
    """

    async def dispatch(self, request: Request, call_next):
        trace_id = request.headers.get("X-Trace-Id") or uuid.uuid4().hex
        trace_id_var.set(trace_id)
        client_ip_var.set(resolve_client_ip(request))

        path = request.url.path
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            # 핸들러 예외는 프레임워크 기본 500 으로 넘기되 기록은 남긴다
            self._log(request, path, 500, started)
            raise

        response.headers["X-Trace-Id"] = trace_id
        if path not in UNLOGGED_PATHS:
            self._log(request, path, response.status_code, started)
        return response

    @staticmethod
    def _log(request: Request, path: str, status_code: int, started: float):
        event, level = classify_status(status_code)
        state = request.app.state
        logger.log(level, event, extra={
            "method": request.method,
            "path": path,
            "status": status_code,
            "duration": round(time.perf_counter() - started, 4),
            "app_version": getattr(state, "version", None),
            "environment": getattr(state, "environment", None)
        })
