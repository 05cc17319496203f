#!/usr/bin/env python3
"""
Simulation Module

Simulation clock for LEO constellation mobility. Steps simulated time,
queries every satellite's position and rebuilds the inter-satellite links
after each step.

The simulation can run independently of visualization for batch processing,
testing, or analysis.
"""

import json
import logging
import math
from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional

from .constellation import ConstellationConfig, InterSatelliteLink, LeoConstellation
from .position import GeoPosition


logger = logging.getLogger(__name__)


@dataclass
class SimulationConfig:
    """
    Configuration for a simulation.

    Attributes
    ----------
    num_planes : int
        Number of orbital planes.
    sats_per_plane : int
        Satellites per plane.
    altitude : float
        Orbital altitude (km).
    start_time : float
        Simulation time at which satellites sit at their starting positions (s).
    max_link_range : float, optional
        Maximum inter-satellite link length (km). None = unlimited.

    Raises
    ------
    ConfigurationError
        If the constellation shape, altitude, start time or link range is invalid.
    """

    num_planes: int = 10
    sats_per_plane: int = 12
    altitude: float = 2000.0
    start_time: float = 0.0
    max_link_range: Optional[float] = None

    def __post_init__(self):
        self.to_constellation_config()

    def to_constellation_config(self) -> ConstellationConfig:
        return ConstellationConfig(
            num_planes=self.num_planes,
            sats_per_plane=self.sats_per_plane,
            altitude=self.altitude,
            start_time=self.start_time,
            max_link_range=self.max_link_range,
        )


@dataclass
class SimulationState:
    """
    Current simulation state.

    Attributes
    ----------
    time : float
        Current simulation time (seconds).
    step_count : int
        Number of simulation steps executed.
    satellite_positions : dict
        Satellite index -> GeoPosition.
    links : list
        Inter-satellite links at the current time.
    """

    time: float = 0.0
    step_count: int = 0
    satellite_positions: Dict[int, GeoPosition] = field(default_factory=dict)
    links: List[InterSatelliteLink] = field(default_factory=list)


class Simulation:
    """
    Drives a LeoConstellation forward in simulated time.

    Parameters
    ----------
    config : SimulationConfig, optional
        Simulation configuration.
    enable_logging : bool
        Record a snapshot of every step for ``save_log``.

    Attributes
    ----------
    config : SimulationConfig
        Current configuration.
    constellation : LeoConstellation
        The satellites and their links (None before ``initialize``).
    state : SimulationState
        Current simulation state.
    """

    def __init__(self, config: Optional[SimulationConfig] = None, enable_logging: bool = False):
        self.config = config or SimulationConfig()
        self.enable_logging = enable_logging
        self.constellation: Optional[LeoConstellation] = None
        self.state = SimulationState()
        self._time_series: List[Dict[str, Any]] = []
        self._initialized = False

    def initialize(self) -> None:
        """
        Create the constellation and compute the initial links.

        Must be called before stepping the simulation.
        """
        self.constellation = LeoConstellation(self.config.to_constellation_config())
        self.state = SimulationState(time=self.config.start_time)
        self._time_series = []
        self._update_state(self.config.start_time, 0)
        self._initialized = True
        logger.info(
            f"Simulation initialized: {self.num_satellites} satellites, "
            f"{len(self.state.links)} links at t={self.state.time:.1f}s"
        )

    def _update_state(self, now: float, step_count: int) -> None:
        """Advance satellites to ``now`` and rebuild links, then commit the clock."""
        links = self.constellation.update_links(now)

        self.state.time = now
        self.state.step_count = step_count
        self.state.links = links
        self.state.satellite_positions = self.constellation.current_positions()

        if self.enable_logging:
            self._time_series.append(self._snapshot())

    def _snapshot(self) -> Dict[str, Any]:
        return {
            "time": self.state.time,
            "step": self.state.step_count,
            "positions": {
                str(index): [pos.latitude, pos.longitude, pos.altitude]
                for index, pos in self.state.satellite_positions.items()
            },
            "links": [link.to_dict() for link in self.state.links],
        }

    def step(self, timestep: float) -> SimulationState:
        """
        Advance simulation by one timestep.

        Parameters
        ----------
        timestep : float
            Time to advance (seconds).

        Returns
        -------
        SimulationState
            Updated simulation state.

        Raises
        ------
        RuntimeError
            If simulation not initialized.
        ValueError
            If the timestep is negative or not finite.
        """
        if not self._initialized:
            raise RuntimeError("Simulation not initialized. Call initialize() first.")
        if not math.isfinite(timestep) or timestep < 0:
            raise ValueError(f"Timestep must be finite and non-negative, got {timestep}")

        self._update_state(self.state.time + timestep, self.state.step_count + 1)

        return self.state

    def run(self, duration: float, timestep: float) -> List[SimulationState]:
        """
        Run simulation for specified duration.

        Parameters
        ----------
        duration : float
            Total simulation time (seconds).
        timestep : float
            Time step (seconds), positive.

        Returns
        -------
        list
            List of states at each timestep.
        """
        if not math.isfinite(timestep) or timestep <= 0:
            raise ValueError(f"Timestep must be finite and positive, got {timestep}")
        if not math.isfinite(duration):
            raise ValueError(f"Duration must be finite, got {duration}")
        if not self._initialized:
            self.initialize()

        states = []
        elapsed = 0.0

        while elapsed < duration:
            self.step(timestep)
            states.append(
                SimulationState(
                    time=self.state.time,
                    step_count=self.state.step_count,
                    satellite_positions=dict(self.state.satellite_positions),
                    links=list(self.state.links),
                )
            )
            elapsed += timestep

        return states

    def reset(self) -> None:
        """Reset simulation to initial state."""
        self.initialize()

    @property
    def num_satellites(self) -> int:
        """Number of satellites."""
        if self.constellation is None:
            return 0
        return self.constellation.num_satellites

    @property
    def satellites(self) -> list:
        if self.constellation is None:
            return []
        return self.constellation.satellites

    @property
    def simulation_time(self) -> float:
        """Current simulation time (seconds)."""
        return self.state.time

    def get_link_statistics(self) -> Dict[str, float]:
        """Count and min/max/average length of the current links."""
        lengths = [link.distance_km for link in self.state.links]
        if not lengths:
            return {"count": 0, "min_km": 0.0, "max_km": 0.0, "avg_km": 0.0}
        return {
            "count": len(lengths),
            "min_km": min(lengths),
            "max_km": max(lengths),
            "avg_km": sum(lengths) / len(lengths),
        }

    def get_summary(self) -> Dict[str, Any]:
        """Get simulation summary."""
        period = self.satellites[0].orbit.period if self.satellites else 0.0
        return {
            "num_planes": self.config.num_planes,
            "sats_per_plane": self.config.sats_per_plane,
            "num_satellites": self.num_satellites,
            "altitude_km": self.config.altitude,
            "orbital_period_s": period,
            "simulation_time": self.state.time,
            "step_count": self.state.step_count,
            "num_links": len(self.state.links),
            "initialized": self._initialized,
        }

    def save_log(self, path: str) -> None:
        """
        Write the run to a JSON file.

        The file holds a ``header`` with the configuration and summary, and a
        ``time_series`` with one snapshot per recorded step (empty unless the
        simulation was created with ``enable_logging=True``).

        Parameters
        ----------
        path : str
            Output file path.
        """
        log = {
            "header": {
                "config": {f.name: getattr(self.config, f.name) for f in fields(self.config)},
                "summary": self.get_summary(),
            },
            "time_series": self._time_series,
        }
        with open(path, "w") as f:
            json.dump(log, f, indent=2)
        logger.info(f"Saved simulation log to {path}")

    def __repr__(self) -> str:
        return (
            f"Simulation(\n"
            f"  planes={self.config.num_planes},\n"
            f"  sats_per_plane={self.config.sats_per_plane},\n"
            f"  satellites={self.num_satellites},\n"
            f"  altitude={self.config.altitude:.0f} km,\n"
            f"  time={self.state.time:.2f}s,\n"
            f"  steps={self.state.step_count},\n"
            f"  links={len(self.state.links)}\n"
            f")"
        )


def create_simulation(enable_logging: bool = False, **kwargs) -> Simulation:
    """
    Create simulation with configuration overrides.

    Parameters
    ----------
    enable_logging : bool
        Record per-step snapshots.
    **kwargs
        SimulationConfig fields.

    Returns
    -------
    Simulation
        Configured simulation (not yet initialized).
    """
    known = {f.name for f in fields(SimulationConfig)}
    unknown = set(kwargs) - known
    if unknown:
        raise ValueError(f"Unknown configuration parameters: {sorted(unknown)}")

    return Simulation(SimulationConfig(**kwargs), enable_logging=enable_logging)
