from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    PROJECT_NAME: str = "VersionApp"

    # 환경 구분 (Development 일 때만 Swagger 노출)
    ENVIRONMENT: str = "Production"

    # 리스너 설정
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # 로깅 설정 - LOG_FILE 이 비어 있으면 stdout 만 사용
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = ""

    # Prometheus 메트릭 (/metrics)
    METRICS_ENABLED: bool = False

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT.strip().lower() == "development"


settings = Settings()
