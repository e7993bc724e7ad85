from __future__ import annotations

from pathlib import Path
from typing import Any

from omegaconf import DictConfig, OmegaConf


def load_config(config_path: str | Path | None, overrides: dict[str, Any] | None = None) -> dict[str, Any]:
    """读取 YAML 配置并应用 a.b.c 形式的覆盖项；config_path 为 None 时从空配置开始。"""

    if config_path is None:
        cfg_obj = OmegaConf.create()
    else:
        p = Path(config_path)
        if not p.exists():
            raise FileNotFoundError(f"配置文件不存在: {p}")
        cfg_obj = OmegaConf.load(str(p))
    if not isinstance(cfg_obj, DictConfig):
        raise ValueError(f"配置文件顶层必须是映射: {config_path}")

    for key, value in (overrides or {}).items():
        if value is None:
            continue
        OmegaConf.update(cfg_obj, key, value, merge=False)

    cfg = OmegaConf.to_container(cfg_obj, resolve=True)
    assert isinstance(cfg, dict)
    return cfg


def section(cfg: dict[str, Any], name: str) -> dict[str, Any]:
    node = cfg.get(name) or {}
    if not isinstance(node, dict):
        raise ValueError(f"配置节 '{name}' 必须是映射")
    return node
