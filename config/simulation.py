"""
Simulation Configuration

Building limits, engine connection and traffic settings.
"""

from dataclasses import dataclass, field
from typing import Optional

ENGINE_TYPES = ("local", "http")


def _section(data: dict, name: str, prefix: str = '') -> dict:
    """Return data[name] as a mapping ({} when absent)"""
    if name not in data:
        return {}
    value = data[name]
    if not isinstance(value, dict):
        raise ValueError(f"{prefix}{name} must be a mapping, got {type(value).__name__}")
    return value


@dataclass
class BuildingConfig:
    """Building specifications"""
    lower_floor: int = 0
    higher_floor: int = 9
    max_riders: int = 10

    def __post_init__(self):
        if self.higher_floor <= self.lower_floor:
            raise ValueError("higher_floor must be above lower_floor")
        if self.max_riders < 0:
            raise ValueError("max_riders cannot be negative")


@dataclass
class EngineConfig:
    """Engine driving the car"""
    type: str = "local"  # local, http
    url: str = "http://localhost:8081/"
    connect_timeout: float = 1.0  # seconds
    read_timeout: float = 1.0  # seconds
    max_workers: int = 4  # notification threads

    def __post_init__(self):
        if self.type not in ENGINE_TYPES:
            raise ValueError(f"engine type must be one of {', '.join(ENGINE_TYPES)}")
        if self.connect_timeout <= 0:
            raise ValueError("connect_timeout must be positive")
        if self.read_timeout <= 0:
            raise ValueError("read_timeout must be positive")
        if self.max_workers < 1:
            raise ValueError("max_workers must be at least 1")


@dataclass
class TrafficConfig:
    """Traffic pattern configuration"""
    ticks: int = 100
    rider_probability: float = 0.3  # new rider chance per tick

    def __post_init__(self):
        if self.ticks < 0:
            raise ValueError("ticks cannot be negative")
        if not 0.0 <= self.rider_probability <= 1.0:
            raise ValueError("rider_probability must be between 0 and 1")


@dataclass
class SimulationConfig:
    """
    Complete simulation configuration

    Combines building, engine and traffic settings.
    """
    building: BuildingConfig = field(default_factory=BuildingConfig)
    engine: EngineConfig = field(default_factory=EngineConfig)
    traffic: TrafficConfig = field(default_factory=TrafficConfig)
    random_seed: Optional[int] = None
    tick_seconds: float = 0.0  # wall clock seconds per tick, 0 = as fast as possible

    def __post_init__(self):
        if self.tick_seconds < 0:
            raise ValueError("tick_seconds cannot be negative")

    @classmethod
    def from_dict(cls, data: dict) -> 'SimulationConfig':
        """
        Create from dictionary

        Missing keys take their default value. A section that is present
        but is not a mapping (e.g. an empty `building:`) is an error.

        Raises:
            ValueError: If the document or one of its sections is not a mapping
        """
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"configuration must be a mapping, got {type(data).__name__}")
        sim_data = _section(data, 'simulation')

        building_data = _section(sim_data, 'building', 'simulation.')
        building = BuildingConfig(
            lower_floor=building_data.get('lower_floor', 0),
            higher_floor=building_data.get('higher_floor', 9),
            max_riders=building_data.get('max_riders', 10)
        )

        engine_data = _section(sim_data, 'engine', 'simulation.')
        engine = EngineConfig(
            type=engine_data.get('type', 'local'),
            url=engine_data.get('url', 'http://localhost:8081/'),
            connect_timeout=engine_data.get('connect_timeout', 1.0),
            read_timeout=engine_data.get('read_timeout', 1.0),
            max_workers=engine_data.get('max_workers', 4)
        )

        traffic_data = _section(sim_data, 'traffic', 'simulation.')
        traffic = TrafficConfig(
            ticks=traffic_data.get('ticks', 100),
            rider_probability=traffic_data.get('rider_probability', 0.3)
        )

        return cls(
            building=building,
            engine=engine,
            traffic=traffic,
            random_seed=sim_data.get('random_seed'),
            tick_seconds=sim_data.get('tick_seconds', 0.0)
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization"""
        result = {
            'simulation': {
                'building': {
                    'lower_floor': self.building.lower_floor,
                    'higher_floor': self.building.higher_floor,
                    'max_riders': self.building.max_riders
                },
                'engine': {
                    'type': self.engine.type,
                    'url': self.engine.url,
                    'connect_timeout': self.engine.connect_timeout,
                    'read_timeout': self.engine.read_timeout,
                    'max_workers': self.engine.max_workers
                },
                'traffic': {
                    'ticks': self.traffic.ticks,
                    'rider_probability': self.traffic.rider_probability
                },
                'tick_seconds': self.tick_seconds
            }
        }

        if self.random_seed is not None:
            result['simulation']['random_seed'] = self.random_seed

        return result

    def validate(self):
        """Validate configuration consistency"""
        if self.engine.type == "http" and not self.engine.url.startswith(("http://", "https://")):
            raise ValueError(f"engine.url must be an http(s) URL, got {self.engine.url!r}")
