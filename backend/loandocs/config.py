from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    CORS_ORIGINS: list[str] = ["http://localhost:3000"]
    LOG_LEVEL: str = "INFO"
    LENDER_NAME: str = "[Lender Name]"
    RECORDING_FEE_ESTIMATE: float = 150.0
    PAYMENT_DATE_RULE: str = "clamp_28"
    APR_MAX_ITERATIONS: int = 100
    APR_TOLERANCE: float = 1e-10

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
