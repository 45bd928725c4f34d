# skelmat/config/loader.py
from pydantic_settings import BaseSettings
from omegaconf import OmegaConf, ListConfig
from dotenv import load_dotenv
from pathlib import Path
from typing import Optional
import os, warnings
from functools import lru_cache

class Settings(BaseSettings):
    LOG_LEVEL: Optional[str] = None
    SKELMAT_CONFIG: Optional[str] = None

def _to_container(cfg):
    # resolve interpolations before merging as plain python
    return OmegaConf.to_container(cfg, resolve=True)

def _deep_soft_merge(a, b):
    """
    Dict-vs-dict → recursive merge.
    Any other type conflict → b replaces a.
    """
    if isinstance(a, dict) and isinstance(b, dict):
        out = dict(a)
        for k, v in b.items():
            if k in out:
                out[k] = _deep_soft_merge(out[k], v)
            else:
                out[k] = v
        return out
    else:
        return b

def _merge_yaml(cfg, path_obj):
    """
    Load YAML and merge into cfg.
    1) Missing file or top-level list → warn and keep cfg
    2) Try OmegaConf.merge
    3) If it fails due to type conflicts, soft-merge in python
    """
    p = Path(path_obj)
    if not p.exists():
        warnings.warn(f"[loader] overlay '{p}' does not exist; using defaults.")
        return cfg
    y = OmegaConf.load(p)
    if isinstance(y, ListConfig):
        warnings.warn(f"[loader] '{p}' has a top-level list; ignoring it.")
        return cfg

    try:
        return OmegaConf.merge(cfg, y)
    except Exception as e:
        warnings.warn(f"[loader] Hard merge failed for '{p}' ({e.__class__.__name__}); "
                      f"falling back to soft replace-on-mismatch.")
        merged = _deep_soft_merge(_to_container(cfg), _to_container(y))
        return OmegaConf.create(merged)

def load_cfg():
    load_dotenv()

    def _env_resolver(var, default=None):
        return os.environ.get(var, default)
    OmegaConf.register_new_resolver("env", _env_resolver, replace=True)

    root = Path(__file__).resolve().parents[1]
    conf = OmegaConf.load(root / "configs" / "pipeline.yaml")

    s = Settings()
    if s.SKELMAT_CONFIG:
        conf = _merge_yaml(conf, s.SKELMAT_CONFIG)
    if s.LOG_LEVEL:
        conf.logging.level = s.LOG_LEVEL.upper()

    conf.env = s.model_dump()
    conf.root = str(root)
    return conf

@lru_cache(maxsize=1)
def default_cfg():
    """load_cfg() read once per process; used when callers pass no cfg."""
    return load_cfg()
