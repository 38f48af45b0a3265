# eventboard/core/config.py

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Values come from the process environment; unknown keys are ignored so the
    # service can share a .env file with the frontend.
    model_config = SettingsConfigDict(extra="ignore")

    # The environment mode: 'local' or 'prod'
    ENV: str = "local"

    # --- Database URLs ---
    DATABASE_URL_LOCAL: str = "sqlite:///./eventboard.db"
    DATABASE_URL_PROD: str = "sqlite:///./eventboard.db"

    # Origin of the dashboard frontend, the only origin allowed by CORS
    FRONTEND_URL: str = "http://localhost:5173"

    LOG_LEVEL: str = "INFO"

    # The session cookie is always HttpOnly + SameSite=None; browsers only
    # accept SameSite=None together with Secure.
    SESSION_COOKIE_SECURE: bool = True

    # --- Dynamic Properties ---
    @property
    def DATABASE_URL(self) -> str:
        return (
            self.DATABASE_URL_LOCAL if self.ENV == "local" else self.DATABASE_URL_PROD
        )


# Create a single instance of the settings
settings = Settings()
