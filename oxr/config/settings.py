from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from oxr.infrastructure.client import DEFAULT_API_URL, Protocol
from oxr.monitoring.logger import LogFormat, LogLevel


class Settings(BaseSettings):
	PROTOCOL: Protocol = Protocol.HTTPS
	API_URL: str = DEFAULT_API_URL

	# Logging
	LOG_LEVEL: LogLevel = LogLevel.WARNING
	LOG_FORMAT: LogFormat = LogFormat.TEXT

	model_config = SettingsConfigDict(
		env_prefix='OXR_', env_file='.env', case_sensitive=False, extra='ignore'
	)

	@field_validator('LOG_LEVEL', mode='before')
	@classmethod
	def _upper_log_level(cls, value):
		return value.upper() if isinstance(value, str) else value


@lru_cache
def get_settings() -> Settings:
	return Settings()
