"""YAML seed files for building tries.

A seed file lists the keys to load, either as a plain list or as a mapping
of key to value:

    config:
      default_value: 0

    words:
      - cat
      - cake

    # or
    words:
      cat: 1
      cake: 2

List entries get ``config.default_value`` (None when unset).
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

import yaml

from .compressed import CompressedTrie

logger = logging.getLogger(__name__)


@dataclass
class SeedConfig:
    """Parsed seed file."""
    config: Dict[str, Any] = field(default_factory=dict)
    words: List[Tuple[str, Any]] = field(default_factory=list)


class SeedParseError(Exception):
    """Error parsing or validating a seed file."""
    pass


def parse_seed_file(path: Union[str, Path]) -> SeedConfig:
    """Parse and validate a seed file.

    Args:
        path: Path to the YAML file

    Returns:
        SeedConfig with the config section and (key, value) pairs

    Raises:
        SeedParseError: If the file is invalid
        FileNotFoundError: If the file doesn't exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Seed file not found: {path}")

    with open(path) as f:
        return parse_seed_string(f.read())


def parse_seed_string(content: str) -> SeedConfig:
    """Parse seed YAML content from a string.

    Args:
        content: YAML content as string

    Returns:
        SeedConfig with the config section and (key, value) pairs
    """
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise SeedParseError(f"Invalid YAML syntax: {e}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise SeedParseError("YAML root must be a mapping")

    return _validate_seed_data(data)


def _validate_seed_data(data: Dict[str, Any]) -> SeedConfig:
    config = data.get('config', {})
    if config is None:
        config = {}
    if not isinstance(config, dict):
        raise SeedParseError("'config' must be a mapping")

    words = data.get('words', [])
    if words is None:
        words = []

    if isinstance(words, dict):
        pairs = list(words.items())
    elif isinstance(words, list):
        default = config.get('default_value')
        pairs = [(key, default) for key in words]
    else:
        raise SeedParseError("'words' must be a list or a mapping")

    for index, (key, _) in enumerate(pairs):
        if not isinstance(key, str):
            raise SeedParseError(f"Word {index} must be a string, got {key!r}")
        if not key:
            raise SeedParseError(f"Word {index} is empty")

    return SeedConfig(config=config, words=pairs)


def build_trie(seed: SeedConfig) -> CompressedTrie:
    """Insert every word of a parsed seed into a new trie.

    Duplicate words keep the first value, as with ``CompressedTrie.insert``.
    """
    trie: CompressedTrie = CompressedTrie()
    for key, value in seed.words:
        trie.insert(key, value)
    logger.debug("Built trie with %d keys from %d seed words", len(trie), len(seed.words))
    return trie


def load_trie(path: Union[str, Path]) -> CompressedTrie:
    """Parse a seed file and build a trie from it."""
    logger.debug("Loading seed file %s", path)
    return build_trie(parse_seed_file(path))
