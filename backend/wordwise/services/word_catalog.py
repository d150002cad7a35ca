"""
Word Catalog
Static seed vocabulary, also used as offline fallback content.
"""
import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from wordwise.models.vocabulary import Word

logger = logging.getLogger(__name__)

CATALOG_PATH = Path(__file__).resolve().parent.parent / "data" / "word_catalog.json"


def load_word_catalog(path: Optional[Path] = None) -> tuple[Word, ...]:
    """
    Load and validate the word catalog from a JSON file.

    Args:
        path: Catalog file (defaults to the packaged catalog)

    Returns:
        Words in file order

    Raises:
        ValueError: if two entries share the same word
    """
    catalog_path = path or CATALOG_PATH
    with open(catalog_path, "r", encoding="utf-8") as f:
        data = json.load(f)

    words = tuple(Word(**entry) for entry in data.get("words", []))

    seen: set[str] = set()
    for word in words:
        if word.word in seen:
            raise ValueError(f"Duplicate catalog entry: {word.word}")
        seen.add(word.word)

    logger.debug(f"Loaded {len(words)} catalog words from {catalog_path}")
    return words


@lru_cache()
def get_word_catalog() -> tuple[Word, ...]:
    """Packaged catalog, loaded once."""
    return load_word_catalog()
