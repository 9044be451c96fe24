"""
Threshold and behaviour configuration for accessibility checks.

Values can be set in code, overridden from the environment (a `.env` file is
honoured) or loaded from a YAML file.
"""

import os
from dataclasses import dataclass, field, fields, replace
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml
from dotenv import load_dotenv

from ..errors import ConfigurationError

load_dotenv()


class ItemLabel(str, Enum):
    """Which element attribute names an element in reports."""

    LABEL = "label"
    IDENTIFIER = "identifier"
    BOTH = "both"


IMAGE_WORDS = ("image", "picture", "graphic", "icon")
FILENAME_TOKENS = (
    "_",
    "-",
    ".png",
    ".jpg",
    ".jpeg",
    ".pdf",
    ".avci",
    ".heic",
    ".heif",
    ".svg",
)


@dataclass
class CheckConfig:
    """
    Centralized rule thresholds.

    Prevents magic numbers scattered across the rule catalogue.
    """

    min_meaningful_length: int = 2
    """Labels must be longer than this many characters"""

    max_meaningful_length: int = 40
    """Labels longer than this are reported"""

    min_size: float = 14
    """Minimum width and height of any visible element"""

    min_interactive_size: float = 44
    """Minimum width and height of interactive elements"""

    tolerance: float = 0.1
    """Floating point slack for size and frame comparisons"""

    all_interactive_elements: bool = True
    """Apply the interactive size rule to every control, not just buttons and cells"""

    image_words: Tuple[str, ...] = IMAGE_WORDS
    """Words that should not appear in image labels"""

    filename_tokens: Tuple[str, ...] = FILENAME_TOKENS
    """Substrings suggesting a file name was used as an image label"""

    ignored_identifiers: Tuple[str, ...] = ()
    """Elements with these accessibility identifiers are skipped"""

    item_label: ItemLabel = ItemLabel.LABEL
    """How elements are named in reports"""

    snapshot_dir: Optional[str] = None
    """Default directory for reference snapshots"""

    extra: Dict[str, Any] = field(default_factory=dict, repr=False)

    def validate(self) -> "CheckConfig":
        """
        Reject values no rule can work with.

        Returns:
            self, to allow chaining

        Raises:
            ConfigurationError: On negative thresholds or inverted length bounds
        """
        for name in (
            "min_meaningful_length",
            "max_meaningful_length",
            "min_size",
            "min_interactive_size",
            "tolerance",
        ):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigurationError(f"{name} must be a number, got {value!r}")
            if value < 0:
                raise ConfigurationError(f"{name} must not be negative, got {value}")

        if not isinstance(self.all_interactive_elements, bool):
            raise ConfigurationError(
                "all_interactive_elements must be true or false, "
                f"got {self.all_interactive_elements!r}"
            )

        if self.min_meaningful_length > self.max_meaningful_length:
            raise ConfigurationError(
                "min_meaningful_length "
                f"({self.min_meaningful_length}) exceeds max_meaningful_length "
                f"({self.max_meaningful_length})"
            )

        if self.extra:
            unknown = ", ".join(sorted(self.extra))
            raise ConfigurationError(f"Unknown configuration keys: {unknown}")

        return self


DEFAULT_CONFIG = CheckConfig()

_ENV_OVERRIDES = {
    "A11Y_MIN_MEANINGFUL_LENGTH": ("min_meaningful_length", int),
    "A11Y_MAX_MEANINGFUL_LENGTH": ("max_meaningful_length", int),
    "A11Y_MIN_SIZE": ("min_size", float),
    "A11Y_MIN_INTERACTIVE_SIZE": ("min_interactive_size", float),
    "A11Y_TOLERANCE": ("tolerance", float),
    "A11Y_ALL_INTERACTIVE_ELEMENTS": ("all_interactive_elements", None),
    "A11Y_SNAPSHOT_DIR": ("snapshot_dir", str),
}

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _parse_bool(raw: str) -> bool:
    return raw.strip().lower() in _TRUE_VALUES


def get_check_config() -> CheckConfig:
    """
    Get the configuration, applying environment overrides to the defaults.

    Environment Variables:
    - A11Y_MIN_MEANINGFUL_LENGTH / A11Y_MAX_MEANINGFUL_LENGTH
    - A11Y_MIN_SIZE / A11Y_MIN_INTERACTIVE_SIZE / A11Y_TOLERANCE
    - A11Y_ALL_INTERACTIVE_ELEMENTS: "true" or "false"
    - A11Y_SNAPSHOT_DIR: Reference snapshot directory

    Raises:
        ConfigurationError: If a variable cannot be parsed
    """
    overrides: Dict[str, Any] = {}
    for env_name, (attr, cast) in _ENV_OVERRIDES.items():
        raw = os.getenv(env_name)
        if raw is None or raw == "":
            continue
        try:
            overrides[attr] = _parse_bool(raw) if cast is None else cast(raw)
        except ValueError as e:
            raise ConfigurationError(f"Invalid value for {env_name}: {raw!r}") from e

    if not overrides:
        return DEFAULT_CONFIG

    return replace(DEFAULT_CONFIG, **overrides).validate()


def config_from_dict(data: Dict[str, Any], base: Optional[CheckConfig] = None) -> CheckConfig:
    """
    Build a configuration from a plain mapping.

    Args:
        data: Keys named after CheckConfig fields
        base: Configuration to start from (defaults to get_check_config())

    Returns:
        Validated CheckConfig
    """
    base = base or get_check_config()
    known = {f.name for f in fields(CheckConfig) if f.name != "extra"}

    values: Dict[str, Any] = {}
    extra: Dict[str, Any] = {}
    for key, value in (data or {}).items():
        if key not in known:
            extra[key] = value
            continue
        if key in ("image_words", "filename_tokens", "ignored_identifiers"):
            if isinstance(value, str) or not hasattr(value, "__iter__"):
                raise ConfigurationError(f"{key} must be a list of strings")
            value = tuple(str(item) for item in value)
        elif key == "item_label":
            try:
                value = ItemLabel(value)
            except ValueError as e:
                raise ConfigurationError(f"Invalid item_label: {value!r}") from e
        values[key] = value

    return replace(base, extra=extra, **values).validate()


def load_check_config(path: Union[str, Path]) -> CheckConfig:
    """
    Load a configuration from a YAML file.

    Args:
        path: YAML file with CheckConfig keys at the top level

    Raises:
        ConfigurationError: If the file is missing, malformed or invalid
    """
    config_path = Path(path)
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read config file {config_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Malformed config file {config_path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {config_path} must contain a mapping")

    return config_from_dict(data)


def create_custom_config(
    min_meaningful_length: Optional[int] = None,
    max_meaningful_length: Optional[int] = None,
    min_size: Optional[float] = None,
    min_interactive_size: Optional[float] = None,
    tolerance: Optional[float] = None,
    all_interactive_elements: Optional[bool] = None,
) -> CheckConfig:
    """
    Create a configuration overriding only the given thresholds.

    Returns:
        Validated CheckConfig with custom values
    """
    config = replace(get_check_config())

    if min_meaningful_length is not None:
        config.min_meaningful_length = min_meaningful_length
    if max_meaningful_length is not None:
        config.max_meaningful_length = max_meaningful_length
    if min_size is not None:
        config.min_size = min_size
    if min_interactive_size is not None:
        config.min_interactive_size = min_interactive_size
    if tolerance is not None:
        config.tolerance = tolerance
    if all_interactive_elements is not None:
        config.all_interactive_elements = all_interactive_elements

    return config.validate()
