"""Batch generation — fans (descriptor, language) pairs out over a thread pool."""

import logging
from concurrent.futures import ThreadPoolExecutor

from pydantic import BaseModel, ConfigDict

from api_snippet_gen.generator.snippet import SnippetGenerator, SnippetResult
from api_snippet_gen.grammar.loader import get_grammar
from api_snippet_gen.parser.base import RequestDescriptor

logger = logging.getLogger(__name__)

DEFAULT_MAX_WORKERS = 4


class BatchItem(BaseModel):
    """Result of one (descriptor, language) pair."""

    model_config = ConfigDict(frozen=True)

    name: str
    language: str
    file_extension: str
    result: SnippetResult

    @property
    def ok(self) -> bool:
        return self.result.ok


def generate_batch(
    descriptors: dict[str, RequestDescriptor],
    languages: list[str],
    max_workers: int = DEFAULT_MAX_WORKERS,
) -> list[BatchItem]:
    """Generate every descriptor in every language.

    Returns one item per pair, descriptors in input order and languages in the
    given order within each descriptor. A failed pair is recorded, never fatal.
    """
    generators = [SnippetGenerator(get_grammar(lang)) for lang in languages]
    pairs = [(name, desc, gen) for name, desc in descriptors.items() for gen in generators]

    def _run(pair: tuple[str, RequestDescriptor, SnippetGenerator]) -> BatchItem:
        name, descriptor, generator = pair
        return BatchItem(
            name=name,
            language=generator.grammar.name,
            file_extension=generator.grammar.file_extension,
            result=generator.generate(descriptor),
        )

    with ThreadPoolExecutor(max_workers=max(1, max_workers)) as executor:
        items = list(executor.map(_run, pairs))

    failed = [item for item in items if not item.ok]
    for item in failed:
        logger.warning("Skipping %s (%s): %s", item.name, item.language, item.result.error)
    logger.info("Generated %d of %d snippets", len(items) - len(failed), len(items))
    return items
