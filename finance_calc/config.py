from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "FINANCE_CALC_"}

    # Rounding for every monetary output
    default_digits: int = 2

    # Amortization rows allowed per nominal month before giving up
    max_term_multiple: int = 10

    # App
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]


settings = Settings()
