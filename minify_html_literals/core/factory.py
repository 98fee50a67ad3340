"""Component Factory for pipeline assembly.

Turns settings plus per-call ``MinifyOptions`` into a fully resolved
pipeline. Options that accept either a boolean or a custom object are
resolved exactly once per run into default, disabled or custom.
"""

import functools
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from minify_html_literals.core.config import Settings, get_settings
from minify_html_literals.core.options import (
    MagicStringFactory,
    MinifyOptions,
    ShouldMinify,
    SourceMapGenerator,
)
from minify_html_literals.interfaces.literals import ParseLiterals
from minify_html_literals.interfaces.strategy import BaseStrategy
from minify_html_literals.interfaces.validation import BaseValidation
from minify_html_literals.strategies.buffers import MagicString, default_generate_source_map
from minify_html_literals.strategies.filters import default_should_minify
from minify_html_literals.strategies.placeholders import (
    DEFAULT_MINIFY_OPTIONS,
    PlaceholderStrategy,
)
from minify_html_literals.strategies.scanners import parse_literals
from minify_html_literals.strategies.validators import DefaultValidation

logger = logging.getLogger(__name__)


class Toggle(Enum):
    """Resolved state of an option that accepts a boolean or a custom value."""

    DEFAULT = "default"
    DISABLED = "disabled"
    CUSTOM = "custom"

    @classmethod
    def resolve(cls, value: Any, enabled_by_default: bool) -> "Toggle":
        """Classify an option value.

        Args:
            value: None, True, False or a custom object.
            enabled_by_default: Whether None means the default is enabled.
        """
        if value is None:
            return cls.DEFAULT if enabled_by_default else cls.DISABLED
        if value is True:
            return cls.DEFAULT
        if value is False:
            return cls.DISABLED
        return cls.CUSTOM


@dataclass(frozen=True)
class ResolvedPipeline:
    """Concrete components for one run.

    ``validation`` and ``generate_source_map`` are None when disabled.
    """

    file_name: str
    minify_options: dict[str, Any]
    parse_literals: ParseLiterals
    should_minify: ShouldMinify
    strategy: BaseStrategy
    validation: BaseValidation | None
    generate_source_map: SourceMapGenerator | None
    magic_string: MagicStringFactory


class ComponentFactory:
    """Factory for the default pipeline components.

    Example:
        ```python
        factory = ComponentFactory(Settings(validate_templates=False))
        pipeline = factory.resolve(MinifyOptions(file_name="app.js"))
        ```
    """

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize the factory with optional settings.

        Args:
            settings: Settings supplying defaults. If None, uses global settings.
        """
        self._settings = settings or get_settings()
        self._strategy_cache: BaseStrategy | None = None
        self._validation_cache: BaseValidation | None = None

    @property
    def settings(self) -> Settings:
        return self._settings

    def get_strategy(self) -> BaseStrategy:
        """Get the default placeholder strategy."""
        if self._strategy_cache is None:
            logger.debug("Instantiating placeholder strategy")
            self._strategy_cache = PlaceholderStrategy()
        return self._strategy_cache

    def get_validation(
        self, validate: bool | BaseValidation | None = None
    ) -> BaseValidation | None:
        """Resolve the ``validate`` option.

        Returns:
            The validation to run, or None when validation is disabled.
        """
        match Toggle.resolve(validate, self._settings.validate_templates):
            case Toggle.DISABLED:
                logger.debug("Template validation disabled")
                return None
            case Toggle.CUSTOM:
                return validate
            case _:
                if self._validation_cache is None:
                    self._validation_cache = DefaultValidation()
                return self._validation_cache

    def get_source_map_generator(
        self, generate_source_map: bool | SourceMapGenerator | None = None
    ) -> SourceMapGenerator | None:
        """Resolve the ``generate_source_map`` option.

        Returns:
            The generator to call, or None when no map should be produced.
        """
        match Toggle.resolve(generate_source_map, self._settings.generate_source_map):
            case Toggle.DISABLED:
                return None
            case Toggle.CUSTOM:
                return generate_source_map
            case _:
                return functools.partial(
                    default_generate_source_map,
                    hires=self._settings.source_map_hires,
                    include_content=self._settings.include_source_content,
                )

    def resolve(self, options: MinifyOptions) -> ResolvedPipeline:
        """Resolve per-call options against the defaults.

        Args:
            options: The caller's options.

        Returns:
            The components to run the pipeline with.
        """
        minify_options = (
            options.minify_options
            if options.minify_options is not None
            else dict(DEFAULT_MINIFY_OPTIONS)
        )

        return ResolvedPipeline(
            file_name=options.file_name,
            minify_options=minify_options,
            parse_literals=options.parse_literals or parse_literals,
            should_minify=options.should_minify or default_should_minify,
            strategy=options.strategy or self.get_strategy(),
            validation=self.get_validation(options.validate),
            generate_source_map=self.get_source_map_generator(options.generate_source_map),
            magic_string=options.magic_string or MagicString,
        )

    def clear_cache(self) -> None:
        """Clear cached component instances.

        Useful for testing or when settings change.
        """
        self._strategy_cache = None
        self._validation_cache = None
        logger.debug("Component factory cache cleared")


# Global factory instance
_factory: ComponentFactory | None = None


def get_factory() -> ComponentFactory:
    """Get or create the global ComponentFactory instance.

    Returns:
        The singleton ComponentFactory instance.
    """
    global _factory
    if _factory is None:
        _factory = ComponentFactory()
    return _factory
