"""
Settings for AllTranslations.

Handles:
- Locating the translations directory
- Choosing the placeholder substitution mode
- Reading overrides from the environment and from an alltranslations.yaml file

Resolution order for each setting:
1. Environment variable (ALLTRANSLATIONS_DIR, ALLTRANSLATIONS_SINGLE_PASS)
2. Settings file (ALLTRANSLATIONS_CONFIG, or ./alltranslations.yaml)
3. Defaults
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

DEFAULT_DIRECTORY = "i18n"
SETTINGS_FILE = "alltranslations.yaml"

DIR_ENV = "ALLTRANSLATIONS_DIR"
SINGLE_PASS_ENV = "ALLTRANSLATIONS_SINGLE_PASS"
CONFIG_ENV = "ALLTRANSLATIONS_CONFIG"

_TRUTHY = ("1", "true", "yes")


@dataclass(frozen=True)
class TranslationSettings:
    """Where catalogs live and how placeholders are substituted."""

    directory: Path = Path(DEFAULT_DIRECTORY)
    single_pass: bool = False


def _settings_path() -> Path:
    override = os.environ.get(CONFIG_ENV, "")
    return Path(override) if override else Path.cwd() / SETTINGS_FILE


def _load_settings_file(path: Path) -> dict[str, Any]:
    """
    Load the settings file.

    Returns:
        Dictionary of settings, or empty dict on failure

    Handles:
        - Missing file (returns empty dict)
        - Malformed YAML (returns empty dict, logs warning)
        - Empty file (returns empty dict)
        - Invalid types (returns empty dict if not a dict)
    """
    try:
        if not path.exists():
            return {}

        content = path.read_text(encoding="utf-8")
        if not content.strip():
            return {}

        data = yaml.safe_load(content)
        if data is None:
            return {}
        if not isinstance(data, dict):
            logger.warning(
                f"Settings file contains invalid type: {type(data).__name__}, "
                "expected dict. Using defaults."
            )
            return {}

        return data

    except yaml.YAMLError as e:
        logger.warning(f"Malformed YAML in settings file {path}: {e}. Using defaults.")
        return {}
    except OSError as e:
        logger.debug(f"Could not read settings file {path}: {e}")
        return {}


def load_settings() -> TranslationSettings:
    """
    Resolve the effective settings.

    Returns:
        TranslationSettings built from environment, settings file and defaults
    """
    file_settings = _load_settings_file(_settings_path())

    directory = os.environ.get(DIR_ENV, "")
    if not directory:
        saved_dir = file_settings.get("directory")
        directory = saved_dir if isinstance(saved_dir, str) and saved_dir else DEFAULT_DIRECTORY

    env_single_pass = os.environ.get(SINGLE_PASS_ENV, "")
    if env_single_pass:
        single_pass = env_single_pass.lower() in _TRUTHY
    else:
        saved_single_pass = file_settings.get("single_pass")
        single_pass = saved_single_pass if isinstance(saved_single_pass, bool) else False

    return TranslationSettings(directory=Path(directory), single_pass=single_pass)
