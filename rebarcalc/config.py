from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "RebarCalc"
    LOG_LEVEL: str = "INFO"

    # Profile bound to requests that carry neither a profile nor a project config
    DEFAULT_PROFILE_ID: str = "IS456"
    DEFAULT_CONCRETE_GRADE: str = "M30"

    # Comma-separated list, "*" for any origin
    CORS_ORIGINS: str = "*"

    class Config:
        env_file = ".env"


settings = Settings()
