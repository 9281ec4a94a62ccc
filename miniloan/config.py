from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "MINILOAN_"}

    # App
    app_name: str = "MiniLoan"
    debug: bool = False
    log_level: str = "INFO"
    log_format: str = "standard"  # "standard" or "json"

    # API
    cors_origins: list[str] = ["*"]


settings = Settings()
