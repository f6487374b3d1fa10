from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "BrewTuner API"
    api_prefix: str = "/api/v1"
    database_url: str = "sqlite:///./brewtuner.db"
    database_echo: bool = False
    auto_create_tables: bool = False

    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


settings = Settings()
