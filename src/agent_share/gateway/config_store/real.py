"""Production ConfigStore backed by a JSON file in the user's config directory."""

import json
import logging
from pathlib import Path
from typing import Any

from agent_share.artifacts.models import LINK_METHODS, LinkMethod
from agent_share.core.config import AgentShareConfig
from agent_share.gateway.config_store.abc import ConfigStore

logger = logging.getLogger(__name__)


def _config_path() -> Path:
    """Return path to the config file.

    Note: Not cached to allow tests to monkeypatch Path.home().
    """
    return Path.home() / ".config" / "agent-share" / "config.json"


class RealConfigStore(ConfigStore):
    """Reads and writes the JSON config file."""

    def path(self) -> Path:
        return _config_path()

    def _read_raw(self) -> dict[str, Any]:
        config_path = self.path()
        if not config_path.exists():
            return {}
        try:
            data = json.loads(config_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.debug("ignoring unreadable config %s: %s", config_path, e)
            return {}
        if not isinstance(data, dict):
            logger.debug("ignoring config %s: not a JSON object", config_path)
            return {}
        return data

    def load(self) -> AgentShareConfig:
        data = self._read_raw()

        default_target = data.get("defaultTarget")
        if not isinstance(default_target, str) or not default_target:
            default_target = None

        link_method: LinkMethod | None = None
        raw_method = data.get("linkMethod")
        if raw_method in LINK_METHODS:
            link_method = raw_method
        elif raw_method is not None:
            logger.debug("ignoring unknown linkMethod %r", raw_method)

        return AgentShareConfig(default_target=default_target, link_method=link_method)

    def save(self, config: AgentShareConfig) -> None:
        data = self._read_raw()
        if config.default_target is not None:
            data["defaultTarget"] = config.default_target
        if config.link_method is not None:
            data["linkMethod"] = config.link_method

        config_path = self.path()
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
        logger.debug("wrote config %s", config_path)
