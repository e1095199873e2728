"""
Document sources for the parser.

Bundled schemas are listed in a ``registry.json`` file next to the Turtle
files it names::

    [
      {"id": "cards", "name": "Card Game", "file": "cards.ttl",
       "description": "Cards and decks"}
    ]

User-supplied documents skip the registry and are parsed straight from their
text with :func:`parse_uploaded_schema`.
"""
import json
import logging
import os
import time
from typing import List

from .errors import RegistryError, TtlSchemaError
from .model import SchemaEntry
from .parser import parse_ttl

logger = logging.getLogger(__name__)

REGISTRY_FILE = "registry.json"


def _read_registry(directory: str) -> list:
    path = os.path.join(directory, REGISTRY_FILE)
    try:
        with open(path, encoding="utf-8") as f:
            registry = json.load(f)
    except FileNotFoundError as e:
        raise RegistryError(f"No {REGISTRY_FILE} found in {directory}") from e
    except json.JSONDecodeError as e:
        raise RegistryError(f"{path} is not valid JSON: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise RegistryError(f"Cannot read {path}: {e}") from e

    if not isinstance(registry, list):
        raise RegistryError(f"{path} must contain a list of schema entries")
    return registry


def load_builtin_schemas(directory: str) -> List[SchemaEntry]:
    """Parse every schema listed in ``directory/registry.json``, in registry order.

    An entry whose file is missing, unreadable or not text is logged and
    skipped; the remaining entries are still returned.
    """
    entries = []
    registry = _read_registry(directory)
    for item in registry:
        if not isinstance(item, dict):
            logger.error("Skipping malformed registry entry: %r", item)
            continue
        try:
            file_name = item["file"]
            if not isinstance(file_name, str):
                logger.error("Skipping schema %s: file must be a string, got %r", item.get("id"), file_name)
                continue
            with open(os.path.join(directory, file_name), "rb") as f:
                parsed = parse_ttl(f.read())
            entries.append(SchemaEntry(
                id=item["id"],
                name=item.get("name", item["id"]),
                description=item.get("description", ""),
                file_name=file_name,
                parsed=parsed,
                is_user_uploaded=False,
            ))
        except (KeyError, OSError, TtlSchemaError) as e:
            logger.error("Failed to load schema %s: %s", item.get("id"), e)
    logger.debug("Loaded %d of %d registered schemas", len(entries), len(registry))
    return entries


def parse_uploaded_schema(file_name: str, content) -> SchemaEntry:
    """Wrap a user-supplied document in a :class:`SchemaEntry`.

    The display name comes from the ontology label, falling back to the file
    name without its ``.ttl`` extension.
    """
    parsed = parse_ttl(content)
    ontology = parsed.ontology
    name = (ontology.label if ontology else "") or file_name.replace(".ttl", "", 1)
    description = ontology.comment if ontology else ""
    return SchemaEntry(
        id=f"user-{int(time.time() * 1000)}",
        name=name,
        description=description,
        file_name=file_name,
        parsed=parsed,
        is_user_uploaded=True,
    )
