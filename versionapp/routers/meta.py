from datetime import datetime, timezone
from fastapi import APIRouter, Depends, Request
from versionapp.schemas import VersionResponse, HealthResponse, InfoResponse

router = APIRouter()

APPLICATION_NAME = "VersionApp"

ENDPOINTS = (
    "/version - Get current version",
    "/health - Health check",
    "/swagger - API documentation",
)


def get_app_version(request: Request) -> str:
    # 시작 시 한 번 확정된 버전 (app.state 에 보관)
    return request.app.state.version


@router.get(
    "/version",
    response_model=VersionResponse,
    operation_id="GetVersion",
)
async def get_version(version: str = Depends(get_app_version)):
    return VersionResponse(version=version)


@router.get(
    "/health",
    response_model=HealthResponse,
    operation_id="HealthCheck",
)
async def health_check():
    # timestamp 는 요청 시점마다 새로 계산
    return HealthResponse(status="healthy", timestamp=datetime.now(timezone.utc))


@router.get(
    "/",
    response_model=InfoResponse,
    operation_id="GetInfo",
)
async def get_info(version: str = Depends(get_app_version)):
    return InfoResponse(
        application=APPLICATION_NAME,
        version=version,
        endpoints=list(ENDPOINTS)
    )
