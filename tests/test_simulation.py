#!/usr/bin/env python3
"""
Tests for the simulation clock.

These tests verify:
1. Stepping advances time and every satellite together
2. Links are rebuilt after every step
3. Run logs are written as JSON with a header and a time series
"""

import json
import math
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from mobility import (
    ConfigurationError,
    DomainError,
    Simulation,
    SimulationConfig,
    create_simulation,
)


class TestInitialization:

    def test_step_before_initialize(self, simulation_config):
        sim = Simulation(simulation_config)

        with pytest.raises(RuntimeError):
            sim.step(10.0)

    def test_initialize(self, small_simulation):
        assert small_simulation.num_satellites == 6
        assert small_simulation.simulation_time == 0.0
        assert small_simulation.state.step_count == 0
        assert sorted(small_simulation.state.satellite_positions) == [1, 2, 3, 4, 5, 6]
        # Two rings of three plus one link per satellite of the first plane
        assert len(small_simulation.state.links) == 9

    def test_empty_before_initialize(self):
        sim = Simulation()

        assert sim.num_satellites == 0
        assert sim.satellites == []

    @pytest.mark.parametrize("overrides", [
        {"num_planes": 0},
        {"sats_per_plane": -2},
        {"altitude": float("nan")},
        {"start_time": float("inf")},
        {"max_link_range": 0.0},
    ])
    def test_invalid_configuration(self, overrides):
        """Configuration is rejected when built, before any satellite exists."""
        with pytest.raises(ConfigurationError):
            SimulationConfig(**overrides)

    def test_factory_rejects_invalid_configuration(self):
        with pytest.raises(ConfigurationError):
            create_simulation(num_planes=0)

    def test_start_time(self):
        sim = Simulation(SimulationConfig(num_planes=1, sats_per_plane=2, start_time=500.0))
        sim.initialize()

        assert sim.simulation_time == 500.0
        for satellite in sim.satellites:
            assert satellite.last_update_time == 500.0


class TestStepping:

    def test_step_advances_time(self, small_simulation):
        state = small_simulation.step(30.0)

        assert state.time == 30.0
        assert state.step_count == 1
        for satellite in small_simulation.satellites:
            assert satellite.last_update_time == 30.0

    def test_step_moves_satellites(self, small_simulation):
        """A twelfth of an orbit moves every satellite 30 degrees of latitude."""
        before = dict(small_simulation.state.satellite_positions)
        small_simulation.step(small_simulation.satellites[0].orbit.period / 12)
        after = small_simulation.state.satellite_positions

        for index in before:
            assert abs(after[index].latitude - before[index].latitude) == pytest.approx(30.0)
            assert after[index].altitude == 550.0

    def test_zero_step(self, small_simulation):
        before = dict(small_simulation.state.satellite_positions)
        small_simulation.step(0.0)

        assert small_simulation.state.satellite_positions == before
        assert small_simulation.state.step_count == 1

    def test_negative_step(self, small_simulation):
        with pytest.raises(ValueError):
            small_simulation.step(-1.0)

    def test_run(self, simulation_config):
        sim = Simulation(simulation_config)
        states = sim.run(duration=300.0, timestep=60.0)

        assert len(states) == 5
        assert [s.time for s in states] == [60.0, 120.0, 180.0, 240.0, 300.0]
        assert states[-1].step_count == 5
        # Each state is a snapshot, not the live state
        assert states[-1].satellite_positions is not sim.state.satellite_positions
        assert states[-1].satellite_positions == sim.state.satellite_positions

    @pytest.mark.parametrize("timestep", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_step_leaves_state_untouched(self, small_simulation, timestep):
        small_simulation.step(60.0)
        before = dict(small_simulation.state.satellite_positions)

        with pytest.raises(ValueError):
            small_simulation.step(timestep)

        assert small_simulation.simulation_time == 60.0
        assert small_simulation.state.step_count == 1
        assert small_simulation.state.satellite_positions == before

        # The clock keeps working afterwards
        small_simulation.step(60.0)
        assert small_simulation.simulation_time == 120.0
        assert math.isfinite(small_simulation.satellites[0].latitude)

    def test_failed_update_keeps_clock(self, small_simulation, monkeypatch):
        """Time and step count move only once the links were rebuilt."""
        def fail(now):
            raise DomainError("propagation failed")

        monkeypatch.setattr(small_simulation.constellation, "update_links", fail)

        with pytest.raises(DomainError):
            small_simulation.step(60.0)

        assert small_simulation.simulation_time == 0.0
        assert small_simulation.state.step_count == 0

    @pytest.mark.parametrize("timestep", [0.0, -10.0, float("nan"), float("inf")])
    def test_run_needs_positive_timestep(self, small_simulation, timestep):
        with pytest.raises(ValueError):
            small_simulation.run(duration=60.0, timestep=timestep)

    def test_run_needs_finite_duration(self, small_simulation):
        with pytest.raises(ValueError):
            small_simulation.run(duration=float("inf"), timestep=60.0)
        assert small_simulation.state.step_count == 0

    def test_reset(self, small_simulation):
        initial = dict(small_simulation.state.satellite_positions)
        small_simulation.run(duration=120.0, timestep=60.0)
        small_simulation.reset()

        assert small_simulation.simulation_time == 0.0
        assert small_simulation.state.step_count == 0
        assert small_simulation.state.satellite_positions == initial


class TestReporting:

    def test_link_statistics(self, small_simulation):
        stats = small_simulation.get_link_statistics()
        lengths = [link.distance_km for link in small_simulation.state.links]

        assert stats["count"] == 9
        assert stats["min_km"] == min(lengths)
        assert stats["max_km"] == max(lengths)
        assert stats["min_km"] <= stats["avg_km"] <= stats["max_km"]

    def test_link_statistics_without_links(self):
        sim = Simulation(SimulationConfig(num_planes=1, sats_per_plane=1))
        sim.initialize()

        assert sim.get_link_statistics() == {
            "count": 0, "min_km": 0.0, "max_km": 0.0, "avg_km": 0.0
        }

    def test_summary(self, small_simulation):
        small_simulation.step(10.0)
        summary = small_simulation.get_summary()

        assert summary["num_planes"] == 2
        assert summary["sats_per_plane"] == 3
        assert summary["num_satellites"] == 6
        assert summary["altitude_km"] == 550.0
        assert summary["orbital_period_s"] == small_simulation.satellites[0].orbit.period
        assert summary["simulation_time"] == 10.0
        assert summary["step_count"] == 1
        assert summary["num_links"] == 9
        assert summary["initialized"] is True

    def test_save_log(self, small_simulation, tmp_path):
        small_simulation.run(duration=120.0, timestep=60.0)
        path = tmp_path / "run.json"
        small_simulation.save_log(str(path))

        log = json.loads(path.read_text())

        assert log["header"]["config"]["num_planes"] == 2
        assert log["header"]["config"]["max_link_range"] is None
        assert log["header"]["summary"]["step_count"] == 2

        series = log["time_series"]
        assert [entry["time"] for entry in series] == [0.0, 60.0, 120.0]
        assert sorted(series[0]["positions"], key=int) == ["1", "2", "3", "4", "5", "6"]
        assert len(series[-1]["positions"]["1"]) == 3
        assert series[-1]["links"][0]["type"] in ("intra_plane", "inter_plane")

    def test_save_log_without_recording(self, simulation_config, tmp_path):
        sim = Simulation(simulation_config)
        sim.initialize()
        sim.step(60.0)
        path = tmp_path / "run.json"
        sim.save_log(str(path))

        log = json.loads(path.read_text())
        assert log["time_series"] == []
        assert log["header"]["summary"]["simulation_time"] == 60.0


class TestFactory:

    def test_create_simulation(self):
        sim = create_simulation(num_planes=3, sats_per_plane=2, altitude=780.0)

        assert sim.config.num_planes == 3
        assert sim.config.altitude == 780.0
        assert sim.num_satellites == 0

    def test_unknown_parameter(self):
        with pytest.raises(ValueError):
            create_simulation(num_orbits=3)


@pytest.mark.slow
@pytest.mark.integration
class TestReferenceRun:

    def test_one_hour(self):
        """The 10 x 12 constellation at 2000 km over an hour."""
        sim = create_simulation()
        states = sim.run(duration=3600.0, timestep=60.0)

        assert len(states) == 60
        assert sim.num_satellites == 120
        for position in states[-1].satellite_positions.values():
            assert -90.0 <= position.latitude <= 90.0
            assert -180.0 <= position.longitude <= 180.0
