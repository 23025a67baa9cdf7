from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_NAME: str = "blogpost-publisher-api"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    GITHUB_API_KEY: str | None = None
    GITHUB_API_BASE: str = "https://api.github.com"

    DEV_TO_API_KEY: str | None = None
    DEV_TO_ARTICLES_URL: str = "https://dev.to/api/articles"

    HTTP_TIMEOUT_SECONDS: float = 30.0

settings = Settings()


def get_settings() -> Settings:
    # read per request so the API keys are injected for each invocation
    return Settings()
