from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    PROJECT_NAME: str = "URL Shortener"

    # Server
    HOST: str = "127.0.0.1"
    PORT: int = 3000
    # Host name placed into generated short URLs
    PUBLIC_HOST: str = "localhost"

    # Shortener
    COUNTER_START: int = 1000
    MAX_BODY_BYTES: int = 1024 * 1024

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

    @property
    def base_url(self) -> str:
        return f"http://{self.PUBLIC_HOST}:{self.PORT}"

settings = Settings()
