"""Shared fixtures: an application root with a config index and resources."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from confpath.resolver import ConfigResolver


def write_yaml(path: Path, data: dict[str, Any] | str) -> Path:
    """Write a dict as YAML or raw string to a file, creating parent dirs."""
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(data, str):
        path.write_text(data)
    else:
        path.write_text(yaml.dump(data, default_flow_style=False))
    return path


@pytest.fixture
def app_root(tmp_path: Path) -> Path:
    """An application root laid out like::

    config/config.yaml     index: config -> config, lang -> resources/lang, top -> ""
    config/resource.yaml
    config/database.yaml
    resources/lang/messages.yaml
    top.yaml
    """
    root = tmp_path / "app"
    write_yaml(
        root / "config" / "config.yaml",
        {
            "config": {"path": "config"},
            "lang": {"path": "resources/lang"},
            "top": {"path": ""},
        },
    )
    write_yaml(root / "config" / "resource.yaml", {"db": {"host": "localhost", "port": 5432}})
    write_yaml(
        root / "config" / "database.yaml",
        {
            "default": "mysql",
            "connections": {
                "mysql": {"host": "127.0.0.1", "port": 3306, "options": None},
                "sqlite": {"database": ":memory:"},
            },
            "redis.cluster": {"nodes": 3},
            "redis": {"cluster": {"nodes": 6}},
            "replicas": [{"host": "replica-a"}, {"host": "replica-b"}],
        },
    )
    write_yaml(root / "resources" / "lang" / "messages.yaml", {"welcome": "Hello", "errors": {"404": "Not found"}})
    write_yaml(root / "top.yaml", {"name": "top-level"})
    return root


@pytest.fixture
def resolver(app_root: Path) -> ConfigResolver:
    return ConfigResolver(app_root)
