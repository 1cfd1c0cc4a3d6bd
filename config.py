"""
Configuration management for the dice bot
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class BotConfig(BaseSettings):
    """Application configuration with environment variable support."""

    # Discord settings
    bot_token: str
    command_prefix: str = "!"

    # Discord Limits
    discord_message_limit: int = 2000

    # Storage
    data_file: str = "./data.json"
    merits_dir: str = "./merits"

    # Dice limits
    max_dice_pool: int = 100

    # Application settings
    log_level: str = "INFO"
    log_dir: str = "logs"
    environment: str = "development"
    testing: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore"  # Ignore extra environment variables
    )

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment.lower() == "development"

    @property
    def is_testing(self) -> bool:
        """Check if running in test mode."""
        return self.testing


# Global configuration instance - lazily initialized to avoid import-time errors
_config = None

def get_config() -> BotConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = BotConfig()  # type: ignore
    return _config
