from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    ENV: str = "dev"
    APP_TITLE: str = "Timeline Service"
    LOG_LEVEL: str = "INFO"

    # Set when served behind API Gateway so the docs resolve
    ROOT_PATH: str = ""

    model_config = {
        "env_file": "dev.env",
        "extra": "ignore"
    }

settings = Settings()
