"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use HUGODOWN_ prefix (e.g., HUGODOWN_DEBUG_MODE=true).
The Hugo root directory is also picked up from the conventional $HUGODIR.

Settings can also be loaded from a .env file in the project root.
"""

from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use HUGODOWN_ prefix.

    Examples:
        HUGODIR=~/blog
        HUGODOWN_SOURCE_SUFFIX=.go
        HUGODOWN_FENCE_LANGUAGE=golang
    """

    model_config = SettingsConfigDict(
        env_prefix="HUGODOWN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Output layout
    hugo_dir: str = Field(
        default="",
        validation_alias=AliasChoices("hugodown_hugo_dir", "hugodir"),
        description="Hugo root directory. When set, posts and media follow Hugo's directory layout",
    )

    post_subdir: str = Field(
        default="content/post",
        description="Post directory relative to the Hugo root",
    )

    media_subdir: str = Field(
        default="static/media",
        description="Media directory relative to the Hugo root (as seen on disk)",
    )

    public_media_dir: str = Field(
        default="media",
        description="Media directory as the web server sees it (Hugo layout only)",
    )

    # Source files
    source_suffix: str = Field(
        default=".go",
        description="Suffix of annotated source files picked up by --recursive",
    )

    output_suffix: str = Field(
        default=".md",
        description="Suffix of generated Markdown files",
    )

    fence_language: str = Field(
        default="",
        description="Language tag for code fences. Empty means: guess from the source file name",
    )

    debug_mode: bool = Field(
        default=False,
        description="Enable debug output during conversion",
    )

    def hugoLayout_is(self) -> bool:
        """True if a Hugo root directory is configured"""
        return bool(self.hugo_dir)

    def outputName_make(self, basename: str) -> str:
        """
        Build the Markdown file name for a document base name.

        Example:
            >>> AppSettings().outputName_make('gotohugo')
            'gotohugo.md'
        """
        return f"{basename}{self.output_suffix}"

    def sourcePath_make(self, directory: Path) -> Path:
        """
        Build the conventional `<name>/<name><suffix>` source path for a
        project directory.

        Example:
            >>> AppSettings().sourcePath_make(Path('posts/intro'))
            PosixPath('posts/intro/intro.go')
        """
        return directory / f"{directory.name}{self.source_suffix}"


# Singleton instance - import this in your code
appsettings = AppSettings()
