"""Descriptor file loader.

Reads request descriptors from YAML or JSON files. A file holds either a single
descriptor mapping or a collection::

    requests:
      - id: list-messages
        method: GET
        path: /me/messages
        modifiers: {top: 5}
      - ...

Each entry's optional ``id`` names its generated snippet; without one the name
is derived from the method and path.
"""

import json
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from api_snippet_gen.errors import DescriptorError
from api_snippet_gen.parser.base import RequestDescriptor


def detect_format(file_path: Path) -> str:
    """Return 'batch' for a ``requests:`` collection, otherwise 'single'."""
    doc = _read_document(file_path)
    return "batch" if "requests" in doc else "single"


def load_descriptors(file_path: Path) -> dict[str, RequestDescriptor]:
    """Load every descriptor in a file, keyed by name in file order."""
    doc = _read_document(file_path)
    entries = doc["requests"] if "requests" in doc else [doc]
    if not isinstance(entries, list):
        raise DescriptorError(f"{file_path}: 'requests' must be a list")

    descriptors: dict[str, RequestDescriptor] = {}
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise DescriptorError(f"{file_path}: request #{index + 1} is not a mapping")
        name, descriptor = _parse_entry(entry, f"{file_path}: request #{index + 1}")
        if name in descriptors:
            raise DescriptorError(f"{file_path}: duplicate request id '{name}'")
        descriptors[name] = descriptor
    return descriptors


def load_descriptor(file_path: Path) -> RequestDescriptor:
    """Load a file that must contain exactly one descriptor."""
    descriptors = load_descriptors(file_path)
    if len(descriptors) != 1:
        raise DescriptorError(f"{file_path}: expected one request, found {len(descriptors)}")
    return next(iter(descriptors.values()))


def descriptor_name(method: str, path: str) -> str:
    """Derive a file-safe name, e.g. ``GET /me/messages`` -> ``get-me-messages``."""
    slug = re.sub(r"[^A-Za-z0-9]+", "-", path).strip("-").lower()
    return f"{method.lower()}-{slug}" if slug else method.lower()


def _read_document(file_path: Path) -> dict:
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as e:
        raise DescriptorError(f"Cannot read {file_path}: {e}") from e
    try:
        doc = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DescriptorError(f"{file_path} is not valid YAML/JSON: {e}") from e
    if not isinstance(doc, dict):
        raise DescriptorError(f"{file_path} must contain a mapping")
    return doc


def _parse_entry(entry: dict, where: str) -> tuple[str, RequestDescriptor]:
    data = dict(entry)
    name = data.pop("id", None)

    # bodies may be written as structured YAML/JSON instead of raw text
    body = data.get("request_body")
    if isinstance(body, (dict, list)):
        data["request_body"] = json.dumps(body, indent=4, ensure_ascii=False)

    try:
        descriptor = RequestDescriptor.model_validate(data)
    except ValidationError as e:
        raise DescriptorError(f"{where} is invalid:\n{e}") from e
    return str(name or descriptor_name(descriptor.method, descriptor.path)), descriptor
