"""Command line entry point.

Usage:
    minify-html-literals src/components
    minify-html-literals app.js --out-dir dist --no-source-map
    minify-html-literals src --pattern "*.ts" --check
"""

import re
from pathlib import Path

import structlog
import typer

from minify_html_literals.core.config import get_settings
from minify_html_literals.core.factory import ComponentFactory
from minify_html_literals.core.logging_config import setup_logging
from minify_html_literals.core.options import MinifyOptions
from minify_html_literals.interfaces.validation import MinifyValidationError
from minify_html_literals.minifier import minify_html_literals

app = typer.Typer(help="Minify HTML inside tagged template literals.", add_completion=False)
log = structlog.get_logger(__name__)

_SOURCE_MAPPING_URL_RE = re.compile(r"^//[#@] sourceMappingURL=.*$", re.MULTILINE)


def collect_files(paths: list[Path], pattern: str) -> list[tuple[Path, Path]]:
    """Expand directories into matching files.

    Returns:
        ``(file, relative_path)`` pairs, where the relative path is used to
        mirror the input layout inside an output directory.
    """
    files = []
    for path in paths:
        if path.is_dir():
            for file in sorted(path.rglob(pattern)):
                if file.is_file():
                    files.append((file, file.relative_to(path)))
        else:
            files.append((path, Path(path.name)))
    return files


def add_source_mapping_url(code: str, map_name: str) -> str:
    """Point the code at its map, replacing an existing sourceMappingURL comment."""
    comment = f"//# sourceMappingURL={map_name}"
    matches = list(_SOURCE_MAPPING_URL_RE.finditer(code))
    if not matches:
        return f"{code}\n{comment}\n"
    # Swapped in place so the lines the map points at do not move.
    last = matches[-1]
    return f"{code[:last.start()]}{comment}{code[last.end():]}"


@app.command()
def minify(
    paths: list[Path] = typer.Argument(..., exists=True, help="Files or directories to minify."),
    pattern: str = typer.Option("*.js", "--pattern", help="Glob for files inside directories."),
    out_dir: Path | None = typer.Option(
        None, "--out-dir", help="Write results here instead of rewriting files in place."
    ),
    source_map: bool | None = typer.Option(
        None, "--source-map/--no-source-map", help="Write a .map file next to each output."
    ),
    validate: bool | None = typer.Option(
        None, "--validate/--no-validate", help="Check that no expression is lost by minification."
    ),
    check: bool = typer.Option(
        False, "--check", help="Write nothing; exit with status 1 if any file would change."
    ),
    log_level: str | None = typer.Option(None, "--log-level", help="DEBUG, INFO, WARNING or ERROR."),
) -> None:
    """Minify every HTML template literal in the given files."""
    settings = get_settings()
    if log_level:
        settings = settings.model_copy(update={"log_level": log_level.upper()})
    setup_logging(settings)
    factory = ComponentFactory(settings)

    changed = 0
    failed = 0
    for file, relative in collect_files(paths, pattern):
        target = out_dir / relative if out_dir else file
        try:
            source = file.read_text(encoding="utf-8")
            result = minify_html_literals(
                source,
                MinifyOptions(
                    file_name=file.name,
                    validate=validate,
                    generate_source_map=False if check else source_map,
                ),
                factory=factory,
            )
        except (MinifyValidationError, ValueError, OSError) as e:
            failed += 1
            log.error("minify_failed", file=str(file), error=str(e))
            continue

        if result is None:
            typer.echo(f"unchanged {file}")
            if out_dir and not check:
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_text(source, encoding="utf-8")
            continue

        changed += 1
        if check:
            typer.echo(f"would minify {file}")
            continue

        code = result.code
        target.parent.mkdir(parents=True, exist_ok=True)
        if result.map is not None:
            map_path = target.with_name(f"{target.name}.map")
            map_path.write_text(result.map.to_json(), encoding="utf-8")
            code = add_source_mapping_url(code, map_path.name)
        target.write_text(code, encoding="utf-8")

        typer.echo(f"minified {file} -> {target} ({len(source):,} -> {len(result.code):,} characters)")
        log.debug("file_minified", file=str(file), target=str(target))

    typer.echo(f"{changed} changed, {failed} failed")
    if failed or (check and changed):
        raise typer.Exit(code=1)


def main() -> None:
    app(prog_name="minify-html-literals")


if __name__ == "__main__":
    main()
