"""
YAML contract loader with per-path caching for page ordering rules.

Loads rule contract YAML files, validates them against the Pydantic
schema models, and caches the result per resolved file path.

Usage::

    from pageorder.rules.loader import RuleSetLoader

    loader = RuleSetLoader()
    spec = loader.load(Path("manual.rules.yaml"))
    store = spec.build_store()
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, ClassVar

import yaml

from pageorder.rules.schema import RuleSetSpec

logger = logging.getLogger(__name__)


class RuleSetLoader:
    """Loads and caches page ordering rule contracts from YAML files."""

    _cache: ClassVar[dict[str, RuleSetSpec]] = {}

    @classmethod
    def clear_cache(cls) -> None:
        """Clear the contract cache (useful in tests)."""
        cls._cache.clear()

    def load(self, path: Path) -> RuleSetSpec:
        """Load a contract from a YAML file.

        Args:
            path: Path to the YAML contract file.

        Returns:
            Validated ``RuleSetSpec`` instance.

        Raises:
            FileNotFoundError: If the file does not exist.
            TypeError: If the YAML root is not a mapping.
            yaml.YAMLError: If the file contains invalid YAML.
            pydantic.ValidationError: If the YAML does not match the schema.
        """
        path = Path(path)
        key = str(path.resolve())
        if key in self._cache:
            logger.debug("Rule contract cache hit: %s", key)
            return self._cache[key]

        if not path.exists():
            raise FileNotFoundError(f"Contract file not found: {path}")

        with open(path) as fh:
            raw = yaml.safe_load(fh)

        spec = self._validate(raw, source=str(path))
        self._cache[key] = spec

        logger.debug(
            "Loaded rule contract: ruleset=%s, rules=%d",
            spec.ruleset_id,
            len(spec.rules),
        )
        return spec

    def load_from_string(self, yaml_str: str) -> RuleSetSpec:
        """Load a contract from a YAML string (convenience for testing).

        Args:
            yaml_str: YAML content as a string.

        Returns:
            Validated ``RuleSetSpec`` instance.
        """
        return self._validate(yaml.safe_load(yaml_str), source="<string>")

    @staticmethod
    def _validate(raw: Any, source: str) -> RuleSetSpec:
        if not isinstance(raw, dict):
            raise TypeError(
                f"Expected YAML mapping at root of {source}, "
                f"got {type(raw).__name__}"
            )
        return RuleSetSpec.model_validate(raw)
