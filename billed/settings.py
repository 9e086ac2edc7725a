from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="BILLED_", extra="ignore")

    store_backend: str = "memory"

    api_url: str = "http://localhost:5678"
    api_token: str = ""
    api_timeout: float = 10.0

    db_url: str = "sqlite:///billed.db"

    storage_backend: str = "local"
    storage_local_path: str = "./justificatifs"
    storage_prefix: str = "bills"

    s3_bucket: str = ""
    s3_region: str = ""
    s3_access_key_id: str = ""
    s3_secret_access_key: str = ""
    s3_endpoint_url: str = ""
    s3_url_expiry: int = 604800  # 7 days in seconds

    user_email: str = ""
    user_type: str = "Employee"

    default_pct: int = 20

    log_level: str = "INFO"
    log_json: bool = False


settings = Settings()
