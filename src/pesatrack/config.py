"""Runtime configuration for pesatrack.

Settings come from, in increasing priority: built-in defaults, an optional
JSON file (``--config`` or ``PESATRACK_CONFIG``), and the
``PESATRACK_MAX_WORKERS`` / ``PESATRACK_STORE_TIMEOUT`` environment
variables. Example file::

    {
        "aliases": {"date": ["Completion Time"], "amount": ["Paid In"]},
        "max_workers": 8,
        "store_timeout": 10,
        "rules_file": "rules.json"
    }
"""

import json
import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Optional

from pesatrack.database.models import DEFAULT_STORE_TIMEOUT
from pesatrack.domain.classifier import Classifier, load_rules
from pesatrack.domain.errors import ValidationError
from pesatrack.domain.ingestion import DEFAULT_MAX_WORKERS
from pesatrack.domain.row_parser import FieldAliases

_KNOWN_KEYS = {"aliases", "max_workers", "store_timeout", "rules_file"}


@dataclass(frozen=True)
class PesaTrackConfig:
    """Resolved settings."""

    aliases: FieldAliases = field(default_factory=FieldAliases)
    max_workers: int = DEFAULT_MAX_WORKERS
    store_timeout: float = DEFAULT_STORE_TIMEOUT
    rules_file: Optional[str] = None

    def build_classifier(self) -> Classifier:
        """Create a classifier from the configured rule table."""
        if self.rules_file is None:
            return Classifier()
        return Classifier(load_rules(self.rules_file))


def _positive_int(name: str, value: Any) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{name} must be an integer, got {value!r}")
    if number < 1:
        raise ValidationError(f"{name} must be at least 1")
    return number


def _positive_float(name: str, value: Any) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{name} must be a number, got {value!r}")
    if number <= 0:
        raise ValidationError(f"{name} must be greater than 0")
    return number


def config_from_data(data: dict[str, Any], base_dir: Optional[Path] = None) -> PesaTrackConfig:
    """Build a config from decoded JSON.

    A relative ``rules_file`` is resolved against ``base_dir``.

    Raises:
        ValidationError: If keys are unknown or values are invalid
    """
    unknown = set(data) - _KNOWN_KEYS
    if unknown:
        raise ValidationError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")

    config = PesaTrackConfig()
    if "aliases" in data:
        if not isinstance(data["aliases"], dict):
            raise ValidationError("aliases must be an object")
        config = replace(config, aliases=FieldAliases.from_mapping(data["aliases"]))
    if "max_workers" in data:
        config = replace(config, max_workers=_positive_int("max_workers", data["max_workers"]))
    if "store_timeout" in data:
        config = replace(
            config, store_timeout=_positive_float("store_timeout", data["store_timeout"])
        )
    if data.get("rules_file"):
        rules_path = Path(data["rules_file"])
        if base_dir is not None and not rules_path.is_absolute():
            rules_path = base_dir / rules_path
        config = replace(config, rules_file=str(rules_path))
    return config


def load_config(config_path: Optional[str] = None) -> PesaTrackConfig:
    """Load configuration.

    Args:
        config_path: Path to a JSON config file. If None, checks the
            PESATRACK_CONFIG environment variable; without either, defaults
            are used.

    Raises:
        FileNotFoundError: If the config file doesn't exist
        ValidationError: If the file or environment values are invalid
    """
    if config_path is None:
        config_path = os.environ.get("PESATRACK_CONFIG")

    config = PesaTrackConfig()
    if config_path is not None:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValidationError(f"Config file '{config_path}' is not valid JSON: {e}")
        if not isinstance(data, dict):
            raise ValidationError("Config file must contain a JSON object")
        config = config_from_data(data, base_dir=path.parent)

    max_workers = os.environ.get("PESATRACK_MAX_WORKERS")
    if max_workers:
        config = replace(config, max_workers=_positive_int("PESATRACK_MAX_WORKERS", max_workers))
    store_timeout = os.environ.get("PESATRACK_STORE_TIMEOUT")
    if store_timeout:
        config = replace(
            config, store_timeout=_positive_float("PESATRACK_STORE_TIMEOUT", store_timeout)
        )
    return config
