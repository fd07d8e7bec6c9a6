# src/kaltura_params/config.py
import os
import sys
import logging
from enum import Enum
from typing import ClassVar, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from .types import Param
from .params import ParamFactory
from .request import RequestParams, DuplicateKeyPolicy

logger = logging.getLogger(__name__)


class Environment(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TEST = "test"


class Settings(BaseSettings):
    """Request defaults read from KALTURA_* variables or the environment's .env file."""

    ENVIRONMENT: str = Environment.PRODUCTION.value
    KS: Optional[str] = None
    LANGUAGE: Optional[str] = None
    CURRENCY: Optional[str] = None
    USER_ID: Optional[str] = None
    DUPLICATE_KEY_POLICY: DuplicateKeyPolicy = DuplicateKeyPolicy.LAST_WINS

    model_config = SettingsConfigDict(
        env_prefix="KALTURA_",
        env_file=".env.production",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == Environment.PRODUCTION.value

    @property
    def is_test(self) -> bool:
        return self.ENVIRONMENT == Environment.TEST.value or "pytest" in sys.modules


class SettingsManager:
    _instance: ClassVar[Optional[Settings]] = None

    @classmethod
    def get_settings(cls) -> Settings:
        if cls._instance is None:
            env = os.getenv("KALTURA_ENVIRONMENT", Environment.PRODUCTION.value)
            try:
                environment = Environment(env)
            except ValueError:
                logger.warning(f"Unknown environment '{env}', falling back to production settings")
                environment = Environment.PRODUCTION
            logger.info(f"Loading request defaults from .env.{environment.value}")
            cls._instance = Settings(_env_file=f".env.{environment.value}")

        return cls._instance

    @classmethod
    def reset(cls) -> None:
        cls._instance = None


def get_settings() -> Settings:
    return SettingsManager.get_settings()


def default_params(settings: Optional[Settings] = None) -> list[Param]:
    """Params configured through the environment, unset ones skipped."""
    settings = settings or get_settings()
    params: list[Param] = []
    if settings.KS is not None:
        params.append(ParamFactory.session_token(settings.KS))
    if settings.LANGUAGE is not None:
        params.append(ParamFactory.language(settings.LANGUAGE))
    if settings.CURRENCY is not None:
        params.append(ParamFactory.currency(settings.CURRENCY))
    if settings.USER_ID is not None:
        params.append(ParamFactory.user_id(settings.USER_ID))
    return params


def request_params(settings: Optional[Settings] = None) -> RequestParams:
    """A RequestParams seeded with the configured defaults and duplicate key policy."""
    settings = settings or get_settings()
    return RequestParams(default_params(settings), policy=settings.DUPLICATE_KEY_POLICY)
