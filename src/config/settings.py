"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use CODEIMPORT_ prefix (e.g., CODEIMPORT_WRAP_CODE=true).

Settings can also be loaded from a .env file in the project root.

Only the command line host reads these settings. The resolver itself is
handed a RenderOptions value built with renderOptions_make().
"""

from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..models.directives import RenderOptions


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use CODEIMPORT_ prefix.

    Examples:
        CODEIMPORT_SHOW_FILE_NAME=false
        CODEIMPORT_WRAP_CODE=true
        CODEIMPORT_PYGMENTS_STYLE=monokai
        CODEIMPORT_VERBATIM_TAGS='["code", "pre", "samp"]'
    """

    model_config = SettingsConfigDict(
        env_prefix="CODEIMPORT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Presentation
    show_file_name: bool = Field(
        default=True,
        description="Display the file name above imported code blocks",
    )

    wrap_code: bool = Field(
        default=False,
        description="Wrap long lines instead of horizontal scrolling",
    )

    pygments_style: str = Field(
        default="default",
        description="Pygments style used to highlight imported code",
    )

    # Document scanning
    verbatim_tags: List[str] = Field(
        default_factory=lambda: ["code", "pre"],
        description="Tags whose text is never scanned for directives",
    )

    import_token: str = Field(
        default="@import",
        description="Literal a text leaf must contain before it is parsed",
    )

    document_pattern: str = Field(
        default="**/*.html",
        description="Glob (relative to inputdir) selecting documents to render",
    )

    def renderOptions_make(self, **overrides: bool) -> RenderOptions:
        """
        Build the RenderOptions value handed to the resolver.

        Args:
            **overrides: show_file_name / wrap_code values taking precedence
                         over the configured ones (e.g. from CLI flags)

        Example:
            >>> AppSettings().renderOptions_make(wrap_code=True)
            RenderOptions(show_file_name=True, wrap_code=True)
        """
        values = {"show_file_name": self.show_file_name, "wrap_code": self.wrap_code}
        values.update(overrides)
        return RenderOptions(**values)


# Singleton instance - import this in your code
appsettings = AppSettings()
