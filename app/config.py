from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    anthropic_api_key: str
    meta_csv_url: str = ""
    events_csv_url: str = ""
    hotels_csv_url: str = ""
    guests_csv_url: str = ""
    cache_ttl_seconds: float = 300.0
    http_timeout: float = 30.0
    max_message_length: int = 500
    static_dir: str = "public"
    log_level: str = "INFO"
