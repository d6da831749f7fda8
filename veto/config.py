"""Moderation configuration.

The engine reads nothing from the environment itself; a
:class:`ModerationConfig` is built once (from the environment or a YAML
file) and handed to :meth:`ModerationEngine.from_config`.

Example ``veto.yaml``::

    moderation:
      enabled: true
      max_length: 10000
      custom_words: [frack, smeg]
      removed_words: [damn]
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

import yaml

from veto.errors import ConfigError

ENABLED_ENV_VAR = "CONTENT_MODERATION_ENABLED"
CUSTOM_WORDS_ENV_VAR = "VETO_CUSTOM_WORDS"

DEFAULT_MAX_LENGTH = 10_000


@dataclass
class ModerationConfig:
    """Process-wide moderation settings."""

    enabled: bool = True
    custom_words: list[str] = field(default_factory=list)
    removed_words: list[str] = field(default_factory=list)
    max_length: int = DEFAULT_MAX_LENGTH

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ModerationConfig:
        """Build a config from environment variables.

        Moderation is switched off only when ``CONTENT_MODERATION_ENABLED``
        is literally ``false``; any other value (or no value) leaves it on.
        """
        env = os.environ if environ is None else environ
        return cls(
            enabled=_enabled_from(env, default=True),
            custom_words=_split_words(env.get(CUSTOM_WORDS_ENV_VAR, "")),
        )


def load_config(
    path: str | Path, environ: Mapping[str, str] | None = None
) -> ModerationConfig:
    """Load a config from a YAML file.

    ``CONTENT_MODERATION_ENABLED`` in the environment, when set, wins over
    the file's ``enabled`` value.
    """
    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    section = data.get("moderation", {}) or {}
    if not isinstance(section, dict):
        raise ConfigError("'moderation' must be a mapping")

    enabled = section.get("enabled", True)
    if not isinstance(enabled, bool):
        raise ConfigError(f"'enabled' must be a boolean, got {enabled!r}")

    max_length = section.get("max_length", DEFAULT_MAX_LENGTH)
    if not isinstance(max_length, int) or isinstance(max_length, bool) or max_length <= 0:
        raise ConfigError(f"'max_length' must be a positive integer, got {max_length!r}")

    env = os.environ if environ is None else environ
    return ModerationConfig(
        enabled=_enabled_from(env, default=enabled),
        custom_words=_word_list(section, "custom_words"),
        removed_words=_word_list(section, "removed_words"),
        max_length=max_length,
    )


def _enabled_from(env: Mapping[str, str], default: bool) -> bool:
    raw = env.get(ENABLED_ENV_VAR)
    if raw is None:
        return default
    return raw.strip().lower() != "false"


def _split_words(raw: str) -> list[str]:
    return [w.strip() for w in raw.split(",") if w.strip()]


def _word_list(section: dict, key: str) -> list[str]:
    words = section.get(key, []) or []
    if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
        raise ConfigError(f"'{key}' must be a list of strings")
    return words
