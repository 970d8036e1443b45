"""Configuration management with Pydantic models."""

from pathlib import Path

from pydantic import BaseModel, Field

from rss_agent_discovery import __version__


class DiscoveryConfig(BaseModel):
    """Configuration for feed discovery on a single input URL."""

    timeout_ms: int = Field(default=10000, ge=1)  # covers root + every section scan
    max_blog_sections: int = Field(default=5, ge=1)
    blog_section_paths: list[str] | None = None
    skip_blog_sections: bool = False
    max_concurrent_validations: int = Field(default=5, ge=1, le=50)
    verbose: bool = False


class FetcherConfig(BaseModel):
    """Configuration for HTTP fetching."""

    timeout_ms: int = Field(default=10000, ge=1)
    user_agent: str = f"rss-agent-discovery/{__version__}"


class AppConfig(BaseModel):
    """Main application configuration."""

    discovery: DiscoveryConfig = Field(default_factory=DiscoveryConfig)
    fetcher: FetcherConfig = Field(default_factory=FetcherConfig)
    verbose: bool = False

    @classmethod
    def from_toml(cls, path: Path) -> "AppConfig":
        """Load config from a TOML file."""
        try:
            import tomllib  # type: ignore[import-not-found]
        except ModuleNotFoundError:
            import tomli as tomllib  # type: ignore[import-not-found]
        with open(path, "rb") as f:
            data = tomllib.load(f)
        return cls.model_validate(data)
