"""Configuration values, API models and typed application errors."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt

from modelconfig import config

if TYPE_CHECKING:
    EnvLookup = Callable[[str], Optional[str]]


class ModelConfig(BaseModel):
    """Resolved settings for one model.

    Values are immutable; the ``with_*`` helpers return updated copies so a
    config can be passed around without anyone mutating it underneath.
    """

    model_config = ConfigDict(frozen=True, protected_namespaces=())

    model_name: str
    # None means "use DEFAULT_CONTEXT_LIMIT"; read through get_context_limit().
    context_limit: Optional[NonNegativeInt] = None
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
    toolshim: bool = False
    toolshim_model: Optional[str] = None

    @classmethod
    def from_env(
        cls,
        model_name: str,
        context_env_var: str | None = None,
        *,
        getenv: EnvLookup | None = None,
    ) -> ModelConfig:
        """Build a config for ``model_name`` from environment defaults.

        See :func:`modelconfig.resolver.resolve_model_config`.
        """
        from modelconfig.resolver import resolve_model_config

        return resolve_model_config(model_name, context_env_var, getenv=getenv)

    def get_context_limit(self) -> int:
        if self.context_limit is None:
            return config.DEFAULT_CONTEXT_LIMIT
        return self.context_limit

    def with_context_limit(self, limit: int | None) -> ModelConfig:
        # Only overlay a concrete value so optional overrides can be passed straight through.
        if limit is None:
            return self
        return self.model_copy(update={"context_limit": limit})

    def with_temperature(self, temperature: float | None) -> ModelConfig:
        return self.model_copy(update={"temperature": temperature})

    def with_max_tokens(self, max_tokens: int | None) -> ModelConfig:
        return self.model_copy(update={"max_tokens": max_tokens})

    def with_toolshim(self, toolshim: bool) -> ModelConfig:
        return self.model_copy(update={"toolshim": toolshim})

    def with_toolshim_model(self, model: str | None) -> ModelConfig:
        return self.model_copy(update={"toolshim_model": model})


class ModelLimitConfig(BaseModel):
    pattern: str
    context_limit: int


class ResolveRequest(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    model_name: str = Field(..., examples=["claude-3-5-sonnet-latest"])
    context_env_var: Optional[str] = Field(default=None, examples=[config.LEAD_CONTEXT_LIMIT_ENV])
    context_limit: Optional[NonNegativeInt] = None
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None


class ResolveResponse(BaseModel):
    config: ModelConfig
    effective_context_limit: int
    matched_patterns: list[str]


class ErrorBody(BaseModel):
    code: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)


class ErrorResponse(BaseModel):
    error: ErrorBody


@dataclass
class AppError(Exception):
    code: str
    message: str
    status_code: int = 500
    details: dict[str, Any] = field(default_factory=dict)

    def to_payload(self) -> ErrorResponse:
        # Shared helper for consistent API error serialization.
        return ErrorResponse(error=ErrorBody(code=self.code, message=self.message, details=self.details))
