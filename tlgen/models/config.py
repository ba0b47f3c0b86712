"""Configuration models for label generation"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from tlgen.constants import (
    COMMON_MIDDLEWARES,
    DEFAULT_ENTRYPOINT,
    DEFAULT_NETWORK,
    DEFAULT_OUTPUT_FILE,
    DEFAULT_PORT,
)
from tlgen.core.validators import is_valid_namespace, is_valid_port

PORT_HELP = "number between 1 and 65535 without leading zeros"


class LabelConfig(BaseModel):
    """Collected wizard answers, validated once and then read-only"""

    model_config = ConfigDict(frozen=True)

    namespace: str = Field(..., description="Router and service name")
    network: str = Field(..., min_length=1, description="Docker network Traefik reaches the container on")
    rule: str = Field(..., min_length=1, description="Traefik router rule")
    port: str = Field(..., description="Container port behind the load balancer")
    entrypoints: str = Field(..., min_length=1, description="Traefik entrypoint name(s)")
    middlewares: str = Field(default="", description="Comma separated middleware names")
    service_name: str = Field(default="", description="Explicit service, empty for implicit discovery")

    @field_validator("namespace")
    @classmethod
    def validate_namespace(cls, v: str) -> str:
        """Namespace becomes part of label keys"""
        if not is_valid_namespace(v):
            raise ValueError("Namespace may only contain letters, digits, dash (-) and underscore (_)")
        return v

    @field_validator("port")
    @classmethod
    def validate_port(cls, v: str) -> str:
        """Port must be in 1-65535"""
        if not is_valid_port(v):
            raise ValueError(f"Port must be a {PORT_HELP}")
        return v


class WizardDefaults(BaseModel):
    """Answers used for blank input, overridable from the CLI"""

    entrypoint: str = Field(default=DEFAULT_ENTRYPOINT, min_length=1)
    port: str = Field(default=DEFAULT_PORT)
    network: str = Field(default=DEFAULT_NETWORK, min_length=1)
    output_file: str = Field(default=DEFAULT_OUTPUT_FILE, min_length=1)
    middlewares: List[str] = Field(default_factory=lambda: list(COMMON_MIDDLEWARES))

    @field_validator("port")
    @classmethod
    def validate_port(cls, v: str) -> str:
        if not is_valid_port(v):
            raise ValueError(f"Port must be a {PORT_HELP}")
        return v
