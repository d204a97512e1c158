"""Commands, diagnostics and the main simulation loop."""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod

from picsim.world import World

logger = logging.getLogger(__name__)


class Command(ABC):
    """Action applied to the simulation before the run or on each step."""

    @abstractmethod
    def execute(self, timestep):
        """Perform the action at the outer time step ``timestep``."""

    def needs_to_be_removed(self, timestep):
        """Whether the command should leave the command list after ``timestep``."""
        return False


class CommandOnce(Command):
    """Command that runs a single time in the simulation cycle."""

    def needs_to_be_removed(self, timestep):
        return True


class Diagnostic(ABC):
    """Output produced during the simulation, stored under ``out_dir``."""

    def __init__(self, out_dir):
        self.out_dir = out_dir

    @abstractmethod
    def diagnose(self, timestep):
        """Record the state of the simulation at ``timestep``."""


class Simulation(ABC):
    """Base of concrete simulations: owns the world, presets and diagnostics."""

    def __init__(self, configuration):
        self.configuration = configuration
        self.world = None
        self.start = 0
        self.step_presets = []
        self.diagnostics = []

    def initialize(self):
        """Set up the world and the implementation, then diagnose the start."""
        self.world = World.from_configuration(self.configuration)
        self.initialize_implementation()
        self.log_information()
        self.diagnose(self.start)

    def calculate(self):
        """Run every time step after ``start`` up to the last one."""
        geometry = self.configuration.geometry
        for t in range(self.start + 1, geometry.nt + 1):
            logger.info("Timestep = %.4f [1/w_pe] = %d [dt]", t * geometry.dt, t)

            for command in self.step_presets:
                command.execute(t)

            self.timestep_implementation(t)
            self.diagnose(t)

            self.step_presets = [
                command for command in self.step_presets
                if not command.needs_to_be_removed(t)
            ]

    @abstractmethod
    def initialize_implementation(self):
        """Prepare the concrete simulation."""

    @abstractmethod
    def timestep_implementation(self, timestep):
        """Advance the concrete simulation by one step."""

    def diagnose(self, timestep):
        """Run all diagnostics at ``timestep``."""
        for diagnostic in self.diagnostics:
            diagnostic.diagnose(timestep)

    def log_information(self):
        """Log reference units and the geometry of the current setup."""
        g = self.configuration.geometry
        n0 = math.sqrt(1e13)
        lines = [
            "Note: Dimensionless units are used.",
            "For reference, using density 1e13 cm^(-3):",
            f"  frequency,   w_pe = {5.64e4 * n0} [1/sec]",
            f"  time,      1/w_pe = {1.77e-5 / n0} [sec]",
            f"  length,    c/w_pe = {5.32e5 / n0} [cm]",
            f"  electric field, E = {9.63e-7 * n0} [MV/cm]",
            f"  magnetic field, B = {3.21e-7 * n0} [T]",
            "Geometric constants for the current setup:",
            f"  (length along x axis) = {g.size_x} [c/w_pe] = {g.nx} [dx]",
            f"  (length along y axis) = {g.size_y} [c/w_pe] = {g.ny} [dy]",
            f"  (length along z axis) = {g.size_z} [c/w_pe] = {g.nz} [dz]",
            f"  (simulation time)     = {g.size_t} [1/w_pe] = {g.nt} [dt]",
        ]
        for line in lines:
            logger.info(line)