from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    APP_NAME: str = "NariCare Emotion API"
    APP_ENV: str = "dev"
    APP_DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    DATABASE_URL: str
    DB_AUTO_CREATE: bool = False

    JWT_SECRET: str | None = None
    JWT_ALGORITHM: str = "HS256"
    DEV_USER_ID: str = "123e4567-e89b-12d3-a456-426614174000"

    SENDGRID_API_KEY: str | None = None
    SENDGRID_API_URL: str = "https://api.sendgrid.com/v3/mail/send"
    SENDGRID_FROM_EMAIL: str = "support@naricare.app"
    SENDGRID_FROM_NAME: str = "NariCare Support"
    SENDGRID_TIMEOUT_SECONDS: float = 10.0

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

settings = Settings()  # type: ignore
