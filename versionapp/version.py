from importlib import metadata
from typing import Callable
import versionapp
from versionapp.core.logger import logger

DISTRIBUTION_NAME = "versionapp"
FALLBACK_VERSION = "1.0.0"


def resolve_version(
    distribution: str = DISTRIBUTION_NAME,
    lookup: Callable[[str], str] = metadata.version,
) -> str:
    """
    빌드 시 기록된 표시용(informational) 버전을 확정한다.

    순서:
      1. 빌드가 기록한 versionapp.__version__ (문자열 그대로 유지)
      2. 설치된 배포 패키지 메타데이터 - PEP 440 으로 정규화된 값이므로
         "2.3.1-beta" 는 "2.3.1b0" 으로 보인다
      3. FALLBACK_VERSION

    예외를 던지지 않으며, 폴백은 정상 경로로 취급한다.
    """
    stamped = versionapp.__version__
    if stamped and stamped.strip():
        return stamped.strip()

    try:
        version = lookup(distribution)
    except metadata.PackageNotFoundError:
        version = None

    if version and version.strip():
        return version.strip()

    logger.debug("VERSION_METADATA_MISSING", extra={
        "distribution": distribution,
        "fallback": FALLBACK_VERSION
    })
    return FALLBACK_VERSION
