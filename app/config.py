from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "Daily Diet"
    database_url: str = "sqlite:///./daily_diet.db"
    database_echo: bool = False

    # Server settings
    host: str = "0.0.0.0"
    port: int = 3333
    log_level: str = "INFO"

    # Session cookie settings
    session_cookie_name: str = "sessionId"
    session_cookie_path: str = "/meals"
    session_max_age: int = 86400 * 7  # 7 days
    session_cookie_secure: bool = False  # True in production

    class Config:
        env_file = ".env"


settings = Settings()
