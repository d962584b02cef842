from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from importlib.resources import files
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

logger = logging.getLogger(__name__)


def _config_dir() -> Path:
    xdg = os.getenv("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "lyricscrape"
    return Path.home() / ".config" / "lyricscrape"


def _config_file() -> Path:
    return _config_dir() / "config.json"


@dataclass(frozen=True)
class AppConfig:
    config_dir: Path

    # Defaults applied to every request
    default_source: str
    user_agent: str
    timeout_s: float
    max_workers: int | None  # None lets ThreadPoolExecutor pick

    # Raw per-source entries; validated by SourceResolver at resolve time
    sources: Mapping[str, Any]


def load_config() -> AppConfig:
    """
    Bundled defaults.json -> user config.json -> LYRICSCRAPE_* environment.
    """
    data = _load_defaults()
    config_dir = _config_dir()
    _merge_user_config(data, config_dir / "config.json")

    default_source = os.getenv("LYRICSCRAPE_DEFAULT_SOURCE") or data.get("default") or ""
    user_agent = os.getenv("LYRICSCRAPE_USER_AGENT") or data.get("user_agent") or ""
    timeout_s = float(os.getenv("LYRICSCRAPE_TIMEOUT", data.get("timeout", 5.0)))

    workers_env = os.getenv("LYRICSCRAPE_MAX_WORKERS")
    max_workers = data.get("max_workers")
    if workers_env:
        max_workers = int(workers_env)

    return AppConfig(
        config_dir=config_dir,
        default_source=str(default_source),
        user_agent=str(user_agent),
        timeout_s=timeout_s,
        max_workers=int(max_workers) if max_workers else None,
        sources=MappingProxyType(dict(data.get("sources") or {})),
    )


def _load_defaults() -> dict[str, Any]:
    path = files("lyricscrape") / "defaults.json"
    return json.loads(path.read_text(encoding="utf-8"))


def _merge_user_config(data: dict[str, Any], cfg_path: Path) -> None:
    if not cfg_path.exists():
        return
    try:
        user = json.loads(cfg_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable config %s: %s", cfg_path, e)
        return
    if not isinstance(user, dict):
        logger.warning("Ignoring config %s: top level must be an object", cfg_path)
        return

    user_sources = user.pop("sources", None)
    data.update(user)
    if isinstance(user_sources, dict):
        sources = dict(data.get("sources") or {})
        for name, entry in user_sources.items():
            # null removes a bundled source
            if entry is None:
                sources.pop(name, None)
            else:
                sources[name] = entry
        data["sources"] = sources
    elif user_sources is not None:
        logger.warning("Ignoring 'sources' in %s: expected an object", cfg_path)


def save_config_default_source(source: str) -> None:
    cfg_path = _config_file()
    cfg_path.parent.mkdir(parents=True, exist_ok=True)
    data: dict[str, Any] = {}
    if cfg_path.exists():
        try:
            data = json.loads(cfg_path.read_text(encoding="utf-8"))
        except ValueError:
            logger.warning("Overwriting unreadable config %s", cfg_path)
    if not isinstance(data, dict):
        data = {}
    data["default"] = source
    cfg_path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
