from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    DATABASE_URL: str = "sqlite:///./discipline.db"
    APP_ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    # Single storage slot holding the whole habit table.
    STORAGE_KEY: str = "discipline-table-v1"

    # Habits created on first run, when nothing has been persisted yet.
    SEED_HABITS: list[str] = ["Wake early", "Exercise", "Deep work (2h)"]

    # Comma-separated allowed origins, or "*" to allow all.
    # Example: "https://myapp.com,https://api.myapp.com"
    CORS_ORIGINS: str = "*"

    @property
    def cors_origins_list(self) -> list[str]:
        if self.CORS_ORIGINS.strip() == "*":
            return ["*"]
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


settings = Settings()
