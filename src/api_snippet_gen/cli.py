"""CLI entry point for api-snippet-gen."""

import logging
from pathlib import Path

import click

from api_snippet_gen.config import Settings, load_settings
from api_snippet_gen.errors import SnippetGenError
from api_snippet_gen.generator.batch import generate_batch
from api_snippet_gen.generator.snippet import SnippetGenerator
from api_snippet_gen.generator.validator import validate_snippet, validate_snippets
from api_snippet_gen.grammar.loader import available_languages, get_grammar
from api_snippet_gen.parser.loader import load_descriptor, load_descriptors


def _fail(ctx: click.Context, error: SnippetGenError) -> None:
    click.echo(f"Error: {error}", err=True)
    ctx.exit(error.exit_code)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.option("--config", "config_path", default=None, type=click.Path(exists=True, path_type=Path), help="YAML settings file.")
@click.pass_context
def main(ctx: click.Context, verbose: bool, config_path: Path | None):
    """API Snippet Gen — render REST request descriptors as SDK code snippets."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        ctx.obj = load_settings(config_path)
    except SnippetGenError as e:
        _fail(ctx, e)


@main.command()
def languages():
    """List the languages snippets can be generated for."""
    for name in available_languages():
        click.echo(name)


@main.command()
@click.argument("descriptor_path", type=click.Path(exists=True, path_type=Path))
@click.option("-l", "--language", default=None, help="Target language (default: first configured language).")
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Write the snippet to this file instead of stdout.")
@click.option("--check", is_flag=True, help="Run structural checks on the generated snippet.")
@click.pass_context
def gen_snippet(ctx: click.Context, descriptor_path: Path, language: str | None, output: Path | None, check: bool):
    """Generate one snippet from a single request descriptor file."""
    settings: Settings = ctx.obj
    try:
        descriptor = load_descriptor(descriptor_path)
        generator = SnippetGenerator(get_grammar(language or settings.languages[0]))
        snippet = generator.generate(descriptor).unwrap()
    except SnippetGenError as e:
        _fail(ctx, e)
        return

    if check or settings.check:
        for problem in validate_snippet(snippet):
            click.echo(f"Warning: {problem}", err=True)

    if output is None:
        click.echo(snippet)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(snippet, encoding="utf-8")
    click.echo(f"Snippet saved to {output}")


@main.command()
@click.argument("descriptors_path", type=click.Path(exists=True, path_type=Path))
@click.option("-l", "--language", "languages_", multiple=True, help="Target language; repeat for several.")
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Output directory for generated snippets.")
@click.option("--workers", default=None, type=click.IntRange(min=1), help="Number of worker threads.")
@click.option("--append", is_flag=True, help="Keep existing snippet files instead of overwriting them.")
@click.option("--check", is_flag=True, help="Run structural checks on generated snippets.")
@click.pass_context
def batch(ctx: click.Context, descriptors_path: Path, languages_: tuple[str, ...], output: Path | None,
          workers: int | None, append: bool, check: bool):
    """Generate snippets for every request in a file, for every language."""
    settings: Settings = ctx.obj
    output = output or settings.output_dir
    langs = list(languages_) or settings.languages

    click.echo(f"Loading {descriptors_path}...")
    try:
        descriptors = load_descriptors(descriptors_path)
        for lang in langs:
            get_grammar(lang)
    except SnippetGenError as e:
        _fail(ctx, e)
        return
    click.echo(f"Found {len(descriptors)} requests, generating for: {', '.join(langs)}")

    items = generate_batch(descriptors, langs, max_workers=workers or settings.max_workers)

    files: dict[str, str] = {}
    skipped = 0
    for item in items:
        if not item.ok:
            click.echo(f"  Failed {item.name} ({item.language}): {item.result.error}", err=True)
            continue
        rel_path = f"{item.language.lower()}/{item.name}.{item.file_extension}"
        file_path = output / rel_path
        if append and file_path.exists():
            skipped += 1
            continue
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(item.result.snippet, encoding="utf-8")
        files[rel_path] = item.result.snippet
        click.echo(f"  Created {file_path}")

    if check or settings.check:
        for fname, err in validate_snippets(files).items():
            click.echo(f"  Check failed for {fname}: {err}", err=True)

    failed = sum(1 for item in items if not item.ok)
    click.echo(f"Generated {len(files)} snippets in {output} ({failed} failed, {skipped} kept)")
    if failed:
        ctx.exit(1)
