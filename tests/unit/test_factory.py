"""Unit tests for settings and pipeline resolution."""

import functools

import pytest

from minify_html_literals.core.config import Settings
from minify_html_literals.core.factory import ComponentFactory, Toggle
from minify_html_literals.core.options import MinifyOptions
from minify_html_literals.strategies.buffers import MagicString, default_generate_source_map
from minify_html_literals.strategies.filters import default_should_minify
from minify_html_literals.strategies.placeholders import DEFAULT_MINIFY_OPTIONS, PlaceholderStrategy
from minify_html_literals.strategies.scanners import parse_literals
from minify_html_literals.strategies.validators import DefaultValidation


class TestSettings:
    """Test suite for Settings."""

    def test_defaults(self):
        """Test the documented defaults."""
        settings = Settings(_env_file=None)

        assert settings.validate_templates is True
        assert settings.generate_source_map is True
        assert settings.source_map_hires is True
        assert settings.include_source_content is False
        assert settings.log_level == "INFO"
        assert settings.log_format == "console"
        assert settings.log_file is None

    def test_environment_overrides(self, monkeypatch):
        """Test that prefixed environment variables override defaults."""
        monkeypatch.setenv("MINIFY_HTML_LITERALS_VALIDATE_TEMPLATES", "false")
        monkeypatch.setenv("MINIFY_HTML_LITERALS_LOG_LEVEL", "debug")

        settings = Settings(_env_file=None)

        assert settings.validate_templates is False
        assert settings.log_level == "DEBUG"


class TestToggle:
    """Test suite for Toggle.resolve()."""

    @pytest.mark.parametrize(
        ("value", "enabled_by_default", "expected"),
        [
            (None, True, Toggle.DEFAULT),
            (None, False, Toggle.DISABLED),
            (True, False, Toggle.DEFAULT),
            (False, True, Toggle.DISABLED),
            (DefaultValidation(), True, Toggle.CUSTOM),
            (lambda ms, name: None, False, Toggle.CUSTOM),
        ],
    )
    def test_resolve(self, value, enabled_by_default, expected):
        """Test classification of boolean, unset and custom values."""
        assert Toggle.resolve(value, enabled_by_default) is expected


class TestComponentFactory:
    """Test suite for ComponentFactory."""

    def test_resolve_defaults(self, factory):
        """Test that unset options resolve to the default components."""
        pipeline = factory.resolve(MinifyOptions(file_name="app.js"))

        assert pipeline.file_name == "app.js"
        assert pipeline.minify_options == DEFAULT_MINIFY_OPTIONS
        assert pipeline.minify_options is not DEFAULT_MINIFY_OPTIONS
        assert pipeline.parse_literals is parse_literals
        assert pipeline.should_minify is default_should_minify
        assert isinstance(pipeline.strategy, PlaceholderStrategy)
        assert isinstance(pipeline.validation, DefaultValidation)
        assert pipeline.magic_string is MagicString
        assert isinstance(pipeline.generate_source_map, functools.partial)
        assert pipeline.generate_source_map.func is default_generate_source_map

    def test_default_instances_are_cached(self, factory):
        """Test that default components are reused until the cache is cleared."""
        first = factory.resolve(MinifyOptions())
        second = factory.resolve(MinifyOptions())

        assert first.strategy is second.strategy
        assert first.validation is second.validation

        factory.clear_cache()

        assert factory.resolve(MinifyOptions()).strategy is not first.strategy

    def test_custom_components_pass_through(self, factory):
        """Test that caller-supplied components are used as given."""
        strategy = PlaceholderStrategy()
        validation = DefaultValidation()

        def generator(ms, file_name):
            return None

        pipeline = factory.resolve(
            MinifyOptions(
                minify_options={"remove_comments": False},
                strategy=strategy,
                validate=validation,
                generate_source_map=generator,
            )
        )

        assert pipeline.minify_options == {"remove_comments": False}
        assert pipeline.strategy is strategy
        assert pipeline.validation is validation
        assert pipeline.generate_source_map is generator

    def test_disabled_components(self, factory):
        """Test that False disables validation and source maps."""
        pipeline = factory.resolve(MinifyOptions(validate=False, generate_source_map=False))

        assert pipeline.validation is None
        assert pipeline.generate_source_map is None

    def test_settings_supply_defaults_for_unset_options(self):
        """Test that settings decide what an unset option means."""
        factory = ComponentFactory(
            Settings(_env_file=None, validate_templates=False, generate_source_map=False)
        )

        pipeline = factory.resolve(MinifyOptions())

        assert pipeline.validation is None
        assert pipeline.generate_source_map is None

    def test_explicit_true_overrides_settings(self):
        """Test that True enables a component the settings turn off."""
        factory = ComponentFactory(Settings(_env_file=None, validate_templates=False))

        pipeline = factory.resolve(MinifyOptions(validate=True))

        assert isinstance(pipeline.validation, DefaultValidation)

    def test_source_map_settings_reach_generator(self):
        """Test that map resolution settings are bound into the generator."""
        factory = ComponentFactory(
            Settings(_env_file=None, source_map_hires=False, include_source_content=True)
        )

        generator = factory.resolve(MinifyOptions()).generate_source_map

        assert generator.keywords == {"hires": False, "include_content": True}
