"""Library configuration settings"""


from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings, read from ISOPERIOD_* environment variables"""

    model_config = SettingsConfigDict(env_prefix="ISOPERIOD_", case_sensitive=False)

    # Logging
    log_level: str = Field(default="WARNING")
    log_format: str = Field(default="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    debug: bool = Field(default=False)

    @property
    def effective_log_level(self) -> str:
        """Level applied to the package logger"""
        return "DEBUG" if self.debug else self.log_level.upper()


# Global settings instance
settings = Settings()
