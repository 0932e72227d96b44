from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    app_name: str = "BoardCollab"
    database_url: str
    database_echo: bool = False

    # Доски, к которым не обращались дольше этого срока, удаляются
    board_ttl_hours: int = 24

    log_level: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}

settings = Settings()
