"""Minify HTML inside template literals.

Every template the filter accepts is fused into one markup document with a
placeholder for each expression, minified, split back on the placeholder and
written over the original literal text. Expressions are never touched, and
every overwrite uses offsets from the initial scan.
"""

import logging

from minify_html_literals.core.factory import ComponentFactory, ResolvedPipeline, get_factory
from minify_html_literals.core.options import MinifyOptions
from minify_html_literals.interfaces.buffer import BaseMagicString
from minify_html_literals.interfaces.literals import Template
from minify_html_literals.models import MinifyResult

logger = logging.getLogger(__name__)


def minify_html_literals(
    source: str,
    options: MinifyOptions | None = None,
    factory: ComponentFactory | None = None,
) -> MinifyResult | None:
    """Minify the HTML template literals of a source file.

    Args:
        source: JavaScript or TypeScript source text.
        options: Per-call options. Unset fields use the defaults.
        factory: Factory resolving the defaults. If None, uses the global one.

    Returns:
        The rewritten code and its source map, or None when minifying would
        not change the source.

    Raises:
        InvalidPlaceholderError: If the strategy's placeholder is unusable.
        PartCountMismatchError: If minification lost or added an expression.
        LiteralParseError: If the source cannot be scanned.
    """
    pipeline = (factory or get_factory()).resolve(options or MinifyOptions())
    buffer = pipeline.magic_string(source)
    templates = pipeline.parse_literals(source)

    minified_count = 0
    for template in templates:
        if not pipeline.should_minify(template):
            continue

        try:
            _rewrite_template(template, pipeline, buffer)
        except Exception as e:
            logger.error(
                f"Failed to minify template tagged {template.tag!r} at offset "
                f"{template.start} in {pipeline.file_name or '<source>'}: {e}"
            )
            raise
        minified_count += 1

    code = buffer.to_string()
    if code == source:
        logger.debug(f"No changes for {pipeline.file_name or '<source>'}")
        return None

    source_map = None
    if pipeline.generate_source_map is not None:
        source_map = pipeline.generate_source_map(buffer, pipeline.file_name)

    logger.info(
        f"Minified {minified_count} template(s) in {pipeline.file_name or '<source>'}: "
        f"{len(source)} -> {len(code)} characters"
    )
    return MinifyResult(code=code, map=source_map)


def _rewrite_template(
    template: Template, pipeline: ResolvedPipeline, buffer: BaseMagicString
) -> None:
    """Minify one template and stage the overwrite of each literal part."""
    strategy = pipeline.strategy
    validation = pipeline.validation

    placeholder = strategy.get_placeholder(template.parts)
    if validation is not None:
        validation.ensure_placeholder_valid(placeholder)

    html = strategy.combine_html_strings(template.parts, placeholder)
    minified = strategy.minify_html(html, pipeline.minify_options)
    html_parts = strategy.split_html_by_placeholder(minified, placeholder)
    if validation is not None:
        validation.ensure_html_parts_valid(template.parts, html_parts)

    # Tag, delimiters and expressions lie outside the part ranges.
    for part, html_part in zip(template.parts, html_parts):
        if part.start < part.end:
            buffer.overwrite(part.start, part.end, html_part)
