"""
Taxonomy loader.

Reads taxonomy YAML files (bundled under components/taxonomy/data or any
path on disk) into frozen Taxonomy models.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import List, Union

import yaml
from pydantic import ValidationError as PydanticValidationError

from components.base.exceptions import ConfigurationError
from components.taxonomy.models import Taxonomy

logger = logging.getLogger(__name__)

TAXONOMY_DIR = Path(__file__).parent / "data"
DEFAULT_TAXONOMY = "campus"


def available_taxonomies() -> List[str]:
    """Names of the taxonomies bundled with the package."""
    return sorted(path.stem for path in TAXONOMY_DIR.glob("*.yaml"))


def _resolve_path(name_or_path: Union[str, Path]) -> Path:
    path = Path(name_or_path)
    if path.suffix in (".yaml", ".yml"):
        return path
    return TAXONOMY_DIR / f"{name_or_path}.yaml"


def load_taxonomy(name_or_path: Union[str, Path] = DEFAULT_TAXONOMY) -> Taxonomy:
    """
    Load and validate a taxonomy.

    Args:
        name_or_path: Bundled taxonomy name ("campus", "civic") or a path
            to a YAML file

    Returns:
        Frozen Taxonomy model

    Raises:
        ConfigurationError: If the file is missing or does not validate
    """
    path = _resolve_path(name_or_path)

    if not path.exists():
        raise ConfigurationError(
            f"Taxonomy not found at {path}. Available: {', '.join(available_taxonomies())}",
            component="taxonomy",
        )

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid taxonomy YAML in {path}: {e}", component="taxonomy")

    if not isinstance(raw, dict):
        raise ConfigurationError(f"Taxonomy {path} must be a mapping", component="taxonomy")

    raw.setdefault("name", path.stem)

    try:
        taxonomy = Taxonomy.model_validate(raw)
    except PydanticValidationError as e:
        missing = [".".join(str(part) for part in err["loc"]) for err in e.errors()]
        raise ConfigurationError(
            f"Taxonomy {path} failed validation",
            component="taxonomy",
            missing_keys=missing,
        )

    logger.debug(
        "Loaded taxonomy %s with %d categories", taxonomy.name, len(taxonomy.categories)
    )
    return taxonomy


@lru_cache(maxsize=8)
def get_taxonomy(name_or_path: str = DEFAULT_TAXONOMY) -> Taxonomy:
    """Get a cached taxonomy instance."""
    return load_taxonomy(name_or_path)


def reload_taxonomies():
    """Drop cached taxonomies so the next lookup reads from disk."""
    get_taxonomy.cache_clear()
