from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional, Union

import yaml

DEFAULT_MODEL = "gemini-3-flash-preview"


@dataclass
class Settings:
    model: str = DEFAULT_MODEL
    api_key_env: str = "API_KEY"
    fallback_api_key_env: str = "GEMINI_API_KEY"
    temperature: Optional[float] = None
    verbose: bool = False


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("1", "true", "yes", "on")


def load_settings(
    path: Optional[Union[str, Path]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Settings:
    """
    Build Settings from an optional YAML file, then environment overrides.

    YAML layout:

        verbose: true
        llm:
          model: gemini-2.5-flash
          api_key_env: API_KEY
          temperature: 0.4
    """
    env = os.environ if environ is None else environ
    cfg: dict = {}

    if path is not None:
        cfg_path = Path(path)
        if cfg_path.exists():
            try:
                cfg = yaml.safe_load(cfg_path.read_text(encoding="utf-8")) or {}
            except yaml.YAMLError as exc:
                raise ValueError(f"Could not parse config file {cfg_path}: {exc}") from exc
            if not isinstance(cfg, dict):
                raise ValueError(f"Config file {cfg_path} must contain a mapping at the top level")

    llm_cfg = cfg.get("llm") or {}
    if not isinstance(llm_cfg, dict):
        raise ValueError("config key 'llm' must be a mapping")

    settings = Settings()
    settings.model = str(llm_cfg.get("model", settings.model))
    settings.api_key_env = str(llm_cfg.get("api_key_env", settings.api_key_env))
    if llm_cfg.get("temperature") is not None:
        settings.temperature = float(llm_cfg["temperature"])
    settings.verbose = _as_bool(cfg.get("verbose", settings.verbose))

    # Environment wins over the file
    if env.get("BUILDER_MODEL"):
        settings.model = env["BUILDER_MODEL"]
    if env.get("BUILDER_VERBOSE"):
        settings.verbose = _as_bool(env["BUILDER_VERBOSE"])

    return settings


def resolve_api_key(settings: Settings, environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    env = os.environ if environ is None else environ
    for name in (settings.api_key_env, settings.fallback_api_key_env):
        value = (env.get(name) or "").strip()
        if value:
            return value
    return None
