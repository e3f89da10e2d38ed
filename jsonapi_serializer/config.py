"""Serializer configuration and environment-based settings."""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from jsonapi_serializer.utils.naming import camel_case, get_naming_policy

logger = logging.getLogger(__name__)

DEFAULT_VERSION = "1.1"
# keeps the encoder below the interpreter recursion limit
MAX_DEPTH_LIMIT = 256


class SerializerConfig(BaseModel):
    """Immutable settings held by a serializer for its whole lifetime."""

    model_config = ConfigDict(frozen=True)

    id_field_name: str = "Id"
    naming_policy: Callable[[str], str] = camel_case
    case_sensitive_id: bool = True
    strict_attributes: bool = False
    resource_fields: Mapping[type, Sequence[str]] = Field(default_factory=dict)
    indent: int | None = Field(default=None, ge=0)
    max_depth: int = Field(default=64, ge=1, le=MAX_DEPTH_LIMIT)

    @field_validator("naming_policy", mode="before")
    @classmethod
    def _resolve_policy_name(cls, v: Any) -> Any:
        """Accept a registered policy name in place of a callable."""
        if isinstance(v, str):
            return get_naming_policy(v)
        return v

    def is_id_field(self, name: Any) -> bool:
        """Return True if ``name`` designates the identifier field."""
        if self.case_sensitive_id:
            return name == self.id_field_name
        return str(name).casefold() == self.id_field_name.casefold()


class SerializerSettings(BaseSettings):
    """Reads serializer settings from ``JSONAPI_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="JSONAPI_",
        env_file=".env",
        extra="ignore",
    )

    version: str = DEFAULT_VERSION
    id_field_name: str = "Id"
    naming_policy: str = "camel"
    case_sensitive_id: bool = True
    strict_attributes: bool = False
    indent: int | None = None
    max_depth: int = Field(default=64, ge=1, le=MAX_DEPTH_LIMIT)

    @field_validator("naming_policy")
    @classmethod
    def _check_policy(cls, v: str) -> str:
        get_naming_policy(v)
        return v

    def to_config(self) -> SerializerConfig:
        """Build the immutable serializer configuration."""
        logger.debug(
            "Serializer settings: id_field_name=%s naming_policy=%s",
            self.id_field_name,
            self.naming_policy,
        )
        return SerializerConfig(
            id_field_name=self.id_field_name,
            naming_policy=self.naming_policy,
            case_sensitive_id=self.case_sensitive_id,
            strict_attributes=self.strict_attributes,
            indent=self.indent,
            max_depth=self.max_depth,
        )
