# ataxx/config.py
from dataclasses import dataclass, field
import logging
import os
import tomllib

logger = logging.getLogger(__name__)

# Plies searched before falling back to static evaluation
MAX_DEPTH = 4

# Consecutive jumps (no extends) after which the game ends
JUMP_LIMIT = 25

@dataclass
class SearchConfig:
    depth: int = MAX_DEPTH
    use_pruning: bool = True
    seed: int = 0  # reserved for randomized tie-breaking

@dataclass
class BoardConfig:
    jump_limit: int = JUMP_LIMIT

@dataclass
class UIConfig:
    engine_name: str = "AtaxxEngine"
    engine_author: str = "Ataxx"
    api_port: int = 8000

@dataclass
class Config:
    search: SearchConfig = field(default_factory=SearchConfig)
    board: BoardConfig = field(default_factory=BoardConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    log_level: str = "INFO"

    @staticmethod
    def load_from_toml(path: str = "config.toml") -> "Config":
        cfg = Config()
        if not os.path.exists(path):
            return cfg
        with open(path, "rb") as f:
            raw = tomllib.load(f)
        for section in ("search", "board", "ui"):
            target = getattr(cfg, section)
            for k, v in raw.get(section, {}).items():
                if hasattr(target, k):
                    setattr(target, k, v)
        if "log_level" in raw:
            cfg.log_level = str(raw["log_level"])
        return cfg

# single globally importable config instance
CONFIG = Config.load_from_toml(os.environ.get("ATAXX_CONFIG_TOML", "config.toml"))
# allow env override of depth for quick debugging
override_depth = os.environ.get("ATAXX_SEARCH_DEPTH")
if override_depth:
    try:
        CONFIG.search.depth = int(override_depth)
    except ValueError:
        logger.warning("ignoring non-integer ATAXX_SEARCH_DEPTH=%r", override_depth)
