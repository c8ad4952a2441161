import json
from pathlib import Path

from core.errors import ConfigError

_DEFAULT_CONFIG = Path(__file__).parent / "config.json"


class SimulationConfig:
    __slots__ = ("tick_interval", "world_width", "world_height", "alive_probability", "seed", "generations")

    def __init__(self, tick_interval=0.1, world_width=150, world_height=40, alive_probability=0.2,
                 seed=None, generations=None):
        self.tick_interval = tick_interval
        self.world_width = world_width
        self.world_height = world_height
        self.alive_probability = alive_probability
        self.seed = seed
        self.generations = generations


class LoggingConfig:
    __slots__ = ("level", "file", "crash_file")

    def __init__(self, level="INFO", file="logs/life.log", crash_file="logs/crash.log"):
        self.level = level
        self.file = file
        self.crash_file = crash_file


_SECTIONS = {"simulation": SimulationConfig, "logging": LoggingConfig}


class Config:
    __slots__ = ("simulation", "logging")

    def __init__(self, simulation=None, logging=None):
        self.simulation = simulation or SimulationConfig()
        self.logging = logging or LoggingConfig()

    @classmethod
    def from_dict(cls, d):
        if not isinstance(d, dict):
            raise ConfigError(f"config must be an object, got {type(d).__name__}")
        unknown = sorted(set(d) - set(_SECTIONS))
        if unknown:
            raise ConfigError(f"unknown config sections: {', '.join(unknown)}")

        sections = []
        for name, section_cls in _SECTIONS.items():
            section = d.get(name, {})
            if not isinstance(section, dict):
                raise ConfigError(f"config section '{name}' must be an object, got {type(section).__name__}")
            try:
                sections.append(section_cls(**section))
            except TypeError as exc:
                raise ConfigError(f"invalid {name} config: {exc}", cause=exc) from exc
        return cls(*sections)


def load_config(path=None):
    config_path = Path(path) if path else _DEFAULT_CONFIG

    if not config_path.exists():
        return Config()

    try:
        with open(config_path) as file:
            data = json.load(file)
    except (OSError, ValueError) as exc:
        raise ConfigError(f"cannot read config: {exc}", path=config_path, cause=exc) from exc
    try:
        return Config.from_dict(data)
    except ConfigError as exc:
        exc.context.setdefault("path", str(config_path))
        raise
