from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    access_token: str = ""
    base_url: str = "https://api.miro.com/"
    api_version: str = "v1"
    user_agent: str = ""
    timeout: float = 30.0
    log_format: str = "text"
    log_level: str = "INFO"

    model_config = {
        "env_prefix": "MIRO_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }


settings = Settings()
