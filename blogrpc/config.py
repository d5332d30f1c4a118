from functools import lru_cache
from typing import Optional
import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class BaseConfig(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

class GlobalConfig(BaseConfig):
    XMLRPC_PATH: str = "/api/xmlrpc"
    MAX_PAYLOAD_BYTES: int = 20 * 1024 * 1024
    LOG_FILE: str = "blogrpc.log"

    #Sentry
    SENTRY_DSN: Optional[str] = None

class DevConfig(GlobalConfig):
    model_config = SettingsConfigDict(env_prefix="DEV_", extra="ignore")

class ProdConfig(GlobalConfig):
    # Platforms set the standard name; PROD_ prefixed names are the fallback
    SENTRY_DSN: Optional[str] = Field(default=None, validation_alias="SENTRY_DSN")

    model_config = SettingsConfigDict(extra="ignore")

    def model_post_init(self, __context):
        if not self.SENTRY_DSN:
            self.SENTRY_DSN = os.getenv("PROD_SENTRY_DSN")

class TestConfig(GlobalConfig):
    # Small limit so the size guard is exercised without huge fixtures
    MAX_PAYLOAD_BYTES: int = 64 * 1024
    LOG_FILE: str = "test-blogrpc.log"

    model_config = SettingsConfigDict(env_prefix="TEST_", extra="ignore")

@lru_cache()
def get_config(env_state: str):
    configs = {"dev": DevConfig, "test": TestConfig, "prod": ProdConfig}
    return configs[env_state]()

# Prefer test config automatically when running under pytest unless ENV is set
detected_env = os.getenv("ENV")
if not detected_env and os.getenv("PYTEST_CURRENT_TEST"):
    detected_env = "test"
env_state = detected_env or "prod"
config = get_config(env_state)
