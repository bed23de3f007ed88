"""YAML config loader with environment overrides."""

import os
from pathlib import Path

import yaml

from nwsclient.config.schema import ClientConfig

USER_AGENT_ENV = "NWSCLIENT_USER_AGENT"


def load_config(path: str | Path | None = None) -> ClientConfig:
    """Load and validate config from a YAML file.

    A missing path or an empty file yields the defaults. NWSCLIENT_USER_AGENT,
    when set, overrides the file's user_agent.
    """
    raw: dict = {}
    if path is not None:
        with open(Path(path)) as f:
            raw = yaml.safe_load(f) or {}

    user_agent = os.environ.get(USER_AGENT_ENV)
    if user_agent:
        raw["user_agent"] = user_agent

    return ClientConfig(**raw)
