"""Pydantic configuration models for check definitions."""

from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Annotated, Dict, List, Literal, Optional, Union


class PingProbeConfig(BaseModel):
    """ICMP echo probe."""
    kind: Literal["ping"]
    ip: str
    timeout: float = Field(default=1.0, gt=0)


class TCPProbeConfig(BaseModel):
    """TCP port reachability probe."""
    kind: Literal["tcp"]
    ip: str
    port: int = Field(ge=1, le=65535)
    timeout: float = Field(default=5.0, gt=0)


class RabbitMQProbeConfig(BaseModel):
    """RabbitMQ queue depth probe."""
    kind: Literal["rabbitmq"]
    amqp_uri: str
    queue: str
    max_len: int = Field(ge=0)

    @field_validator('amqp_uri')
    @classmethod
    def validate_uri(cls, v: str) -> str:
        """Validate AMQP URI scheme."""
        if not v.startswith(('amqp://', 'amqps://')):
            raise ValueError('AMQP URI must start with amqp:// or amqps://')
        return v


class MySQLProbeConfig(BaseModel):
    """MySQL connectivity probe."""
    kind: Literal["mysql"]
    uri: str

    @field_validator('uri')
    @classmethod
    def validate_uri(cls, v: str) -> str:
        """Validate MySQL URI scheme."""
        if not v.startswith('mysql://'):
            raise ValueError('MySQL URI must start with mysql://')
        return v


class PostgresProbeConfig(BaseModel):
    """PostgreSQL connectivity probe."""
    kind: Literal["postgres"]
    uri: str

    @field_validator('uri')
    @classmethod
    def validate_uri(cls, v: str) -> str:
        """Validate PostgreSQL URI scheme."""
        if not v.startswith(('postgres://', 'postgresql://')):
            raise ValueError('PostgreSQL URI must start with postgres:// or postgresql://')
        return v


class HTTPProbeConfig(BaseModel):
    """HTTP endpoint probe."""
    kind: Literal["http"]
    url: str
    timeout: float = Field(default=5.0, gt=0)

    @field_validator('url')
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate URL format."""
        if not v.startswith(('http://', 'https://')):
            raise ValueError('URL must start with http:// or https://')
        return v


ProbeConfig = Annotated[
    Union[
        PingProbeConfig,
        TCPProbeConfig,
        RabbitMQProbeConfig,
        MySQLProbeConfig,
        PostgresProbeConfig,
        HTTPProbeConfig,
    ],
    Field(discriminator="kind"),
]


class ThresholdsConfig(BaseModel):
    """Metric thresholds; each one is optional and strict (< or >)."""
    warning_above: Optional[float] = None
    warning_below: Optional[float] = None
    critical_above: Optional[float] = None
    critical_below: Optional[float] = None


class RetryConfig(BaseModel):
    """Retry policy: up to `times` attempts, `sleep` seconds apart."""
    times: int = Field(default=3, ge=1)
    sleep: float = Field(default=1.0, ge=0)


class CheckConfig(BaseModel):
    """One check chain: a probe plus its decorations."""
    name: str
    host: str
    service: Optional[str] = None  # Defaults to name
    probe: ProbeConfig
    thresholds: Optional[ThresholdsConfig] = None
    retry: Optional[RetryConfig] = None
    ttl: Optional[float] = Field(default=None, ge=0)
    tags: List[str] = Field(default_factory=list)
    attributes: Dict[str, str] = Field(default_factory=dict)

    @model_validator(mode='after')
    def default_service(self) -> "CheckConfig":
        """Use the check name as service when none is given."""
        if not self.service:
            self.service = self.name
        return self


class LoggingConfig(BaseModel):
    """Logging configuration."""
    level: str = "INFO"

    @field_validator('level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level name."""
        level = v.upper()
        if level not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            raise ValueError(f'Unknown log level: {v}')
        return level


class ChecksFileConfig(BaseModel):
    """Root configuration model for a checks file."""
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    checks: List[CheckConfig] = Field(default_factory=list)

    @field_validator('checks')
    @classmethod
    def unique_names(cls, v: List[CheckConfig]) -> List[CheckConfig]:
        """Ensure check names are unique."""
        names = [check.name for check in v]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate check names: {', '.join(duplicates)}")
        return v
