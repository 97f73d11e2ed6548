"""Configuration: frozen Config resolved from arguments and the environment."""

from __future__ import annotations

from dataclasses import dataclass
import os

from dotenv import load_dotenv

from gemini_mcp.constants import (
    DEFAULT_MODEL,
    DEFAULT_SAMPLING_CONTROL,
    SamplingControl,
)
from gemini_mcp.errors import ConfigurationError

load_dotenv()

API_KEY_ENV_VAR = "GEMINI_API_KEY"
MODEL_ENV_VAR = "GEMINI_MODEL"
SAMPLING_CONTROL_ENV_VAR = "GEMINI_SAMPLING_CONTROL"
USE_MOCK_ENV_VAR = "GEMINI_MCP_USE_MOCK"

_TRUTHY = frozenset({"1", "true", "yes"})


@dataclass(frozen=True)
class Config:
    """Immutable server configuration.

    The API key is auto-resolved from ``GEMINI_API_KEY`` when not passed.
    A missing key is reported here, before any network call is attempted.

    Example:
        config = Config(model="gemini-2.5-flash")
        # API key is automatically resolved from GEMINI_API_KEY
    """

    #: Auto-resolved from ``GEMINI_API_KEY`` when *None*.
    api_key: str | None = None
    model: str = DEFAULT_MODEL
    #: Which secondary control ``ask_gemini`` accepts.
    sampling_control: SamplingControl = DEFAULT_SAMPLING_CONTROL
    use_mock: bool = False

    def __post_init__(self) -> None:
        """Auto-resolve API key and validate configuration."""
        if not isinstance(self.model, str) or not self.model.strip():
            raise ConfigurationError(
                "model must be a non-empty string",
                hint=f"Set {MODEL_ENV_VAR} or pass model='{DEFAULT_MODEL}'.",
            )
        object.__setattr__(self, "model", self.model.strip())

        try:
            control = SamplingControl(self.sampling_control)
        except ValueError:
            allowed = ", ".join(repr(c.value) for c in SamplingControl)
            raise ConfigurationError(
                f"Unknown sampling control: {self.sampling_control!r}",
                hint=f"Supported values: {allowed}",
            ) from None
        object.__setattr__(self, "sampling_control", control)

        if self.api_key is None and not self.use_mock:
            object.__setattr__(self, "api_key", os.environ.get(API_KEY_ENV_VAR))

        if not self.use_mock and not self.api_key:
            raise ConfigurationError(
                f"{API_KEY_ENV_VAR} environment variable is required",
                hint=f"export {API_KEY_ENV_VAR}=your_api_key_here",
            )

    @classmethod
    def from_env(
        cls,
        *,
        model: str | None = None,
        sampling_control: str | None = None,
        use_mock: bool | None = None,
    ) -> Config:
        """Build a Config from the environment, letting explicit values win."""
        if use_mock is None:
            use_mock = os.environ.get(USE_MOCK_ENV_VAR, "").strip().lower() in _TRUTHY
        return cls(
            model=model or os.environ.get(MODEL_ENV_VAR) or DEFAULT_MODEL,
            sampling_control=sampling_control  # type: ignore[arg-type]
            or os.environ.get(SAMPLING_CONTROL_ENV_VAR)
            or DEFAULT_SAMPLING_CONTROL,
            use_mock=use_mock,
        )

    def __str__(self) -> str:
        """Return a redacted, developer-friendly representation."""
        return (
            f"Config(model={self.model!r}, "
            f"api_key={'[REDACTED]' if self.api_key else None}, "
            f"sampling_control={self.sampling_control.value!r}, "
            f"use_mock={self.use_mock})"
        )

    __repr__ = __str__
