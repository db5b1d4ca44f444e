"""
Configuration for lazy_transform

Options are pydantic models; environment defaults come from pydantic-settings
(LAZY_TRANSFORM_ prefix, optional .env file).

Usage:
    from lazy_transform.config import TransformOptions

    options = TransformOptions(only_default_exports=True)
    options = TransformOptions.from_settings()
"""

from __future__ import annotations

from collections.abc import Callable
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from lazy_transform.domain.factory import create_property_access
from lazy_transform.domain.models import Expression, ImportDeclaration


class FrameworkConfig(BaseModel):
    """Names that identify the host UI framework."""

    model_config = ConfigDict(frozen=True)

    module_specifier: str = Field(default="react", min_length=1)
    """Entry module a file must import to be considered at all"""

    root_identifier: str = Field(default="React", min_length=1)
    """Identifier the framework namespace is bound to"""

    base_component_name: str = Field(default="Component", min_length=1)
    """Member of the root identifier that component classes extend"""

    element_type_name: str = Field(default="Element", min_length=1)
    """Name of the renderable-element type symbol"""

    element_namespace: str = Field(default="JSX", min_length=1)
    """Namespace enclosing the renderable-element type symbol"""

    lazy_member: str = Field(default="lazy", min_length=1)
    """Member of the root identifier used as the default wrapper factory"""


def _default_should_rewrite(module_specifier: str, importing_file: str) -> bool:
    return True


def _no_import_declaration(current_file: str) -> ImportDeclaration | None:
    return None


class TransformOptions(BaseModel):
    """
    Transformer options.

    Attributes:
        only_default_exports: Only a default binding may become lazy
        only_rewrite_if_fully_removable: Leave a statement alone when a residual
            import would remain
        should_rewrite: Per-statement opt-out, called with (specifier, importing file)
        create_wrapper_expression: Builds the wrapper factory expression
            (None: `<root_identifier>.<lazy_member>`)
        create_import_declaration: Builds an import prepended to each rewritten
            statement, called with the importing file
        framework: Framework naming
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    only_default_exports: bool = False
    only_rewrite_if_fully_removable: bool = False
    should_rewrite: Callable[[str, str], bool] = _default_should_rewrite
    create_wrapper_expression: Callable[[], Expression] | None = None
    create_import_declaration: Callable[[str], ImportDeclaration | None] = _no_import_declaration
    framework: FrameworkConfig = Field(default_factory=FrameworkConfig)

    def wrapper_expression(self) -> Expression:
        if self.create_wrapper_expression is not None:
            return self.create_wrapper_expression()
        return create_property_access(self.framework.root_identifier, self.framework.lazy_member)

    @classmethod
    def from_settings(cls, settings: TransformSettings | None = None, **overrides) -> TransformOptions:
        """
        Build options from environment settings.

        Args:
            settings: Settings to read (None: cached process settings)
            **overrides: Option values that win over the settings

        Returns:
            TransformOptions
        """
        settings = settings or get_settings()
        values = {
            "only_default_exports": settings.only_default_exports,
            "only_rewrite_if_fully_removable": settings.only_rewrite_if_fully_removable,
            "framework": FrameworkConfig(
                module_specifier=settings.framework_module,
                root_identifier=settings.framework_root,
            ),
        }
        values.update(overrides)
        return cls(**values)


class TransformSettings(BaseSettings):
    """
    Environment settings.

    Example: LAZY_TRANSFORM_LOG_LEVEL=DEBUG, LAZY_TRANSFORM_ONLY_DEFAULT_EXPORTS=true
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LAZY_TRANSFORM_",
        extra="ignore",
    )

    log_level: str = "INFO"
    log_json: bool = False

    only_default_exports: bool = False
    only_rewrite_if_fully_removable: bool = False
    framework_module: str = "react"
    framework_root: str = "React"


@lru_cache(maxsize=1)
def get_settings() -> TransformSettings:
    return TransformSettings()
