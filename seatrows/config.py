"""
Configuration handling for seatrows
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml


@dataclass
class EstimatorConfig:
    """Configuration for row capacity estimation"""

    # Rounding of metric / spacing into a seat count: "half_up" or "half_even"
    rounding: str = "half_up"

    # Lower bound on any estimated row
    min_seats_per_row: int = 1


@dataclass
class SearchConfig:
    """Configuration for the row count search"""

    # Upper bound on candidate row counts, as a multiple of the requested seats
    max_rows_factor: float = 1.0


@dataclass
class BalancerConfig:
    """Configuration for seat balancing"""

    # How a row's capacity metric follows its seat count: "carry" or "scale"
    metric_update: str = "carry"


@dataclass
class Config:
    """Master configuration for seatrows"""

    # General settings
    log_level: str = "INFO"
    log_dir: Optional[str] = None

    # Component configurations
    estimator: EstimatorConfig = field(default_factory=EstimatorConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    balancer: BalancerConfig = field(default_factory=BalancerConfig)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "Config":
        """Load configuration from a YAML file"""
        with open(path, "r") as f:
            config_dict = yaml.safe_load(f)
        return cls.from_dict(config_dict or {})

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "Config":
        """Create configuration from a dictionary"""
        config = Config()

        # Update top-level fields
        for key, value in config_dict.items():
            if key not in ["estimator", "search", "balancer"] and hasattr(config, key):
                setattr(config, key, value)

        # Update nested configs
        if "estimator" in config_dict:
            config.estimator = EstimatorConfig(**config_dict["estimator"])
        if "search" in config_dict:
            config.search = SearchConfig(**config_dict["search"])
        if "balancer" in config_dict:
            config.balancer = BalancerConfig(**config_dict["balancer"])

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to a dictionary"""
        return {
            # General settings
            "log_level": self.log_level,
            "log_dir": self.log_dir,
            # Component configurations
            "estimator": {
                "rounding": self.estimator.rounding,
                "min_seats_per_row": self.estimator.min_seats_per_row,
            },
            "search": {
                "max_rows_factor": self.search.max_rows_factor,
            },
            "balancer": {
                "metric_update": self.balancer.metric_update,
            },
        }

    def to_yaml(self, path: Union[str, Path]) -> None:
        """Save configuration to a YAML file"""
        with open(path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False)


def load_config(config_path: Optional[Union[str, Path]] = None) -> Config:
    """Load configuration from a YAML file or use defaults"""
    if config_path and os.path.exists(config_path):
        return Config.from_yaml(config_path)

    # Use environment variables if available
    log_level = os.environ.get("SEATROWS_LOG_LEVEL")
    rounding = os.environ.get("SEATROWS_ROUNDING")

    config = Config()
    if log_level:
        config.log_level = log_level.upper()
    if rounding:
        config.estimator.rounding = rounding

    return config
