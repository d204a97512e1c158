"""Simulation configuration read from a JSON file."""

from __future__ import annotations

import json
import shutil
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from picsim.indexing import to_step
from picsim.vector3 import Vector3

_AXES = ("x", "y", "z")


class BoundaryType(Enum):
    """Grid boundary kinds understood by the simulation."""

    NONE = "DM_BOUNDARY_NONE"
    GHOSTED = "DM_BOUNDARY_GHOSTED"
    PERIODIC = "DM_BOUNDARY_PERIODIC"

    @classmethod
    def from_string(cls, name):
        """Map a configuration string to a boundary; anything unknown is ``NONE``."""
        try:
            return cls(name)
        except ValueError:
            return cls.NONE


@dataclass(frozen=True)
class Geometry:
    """Grid steps and domain sizes, in dimensionless units."""

    dx: float
    dy: float
    dz: float
    dt: float
    size_x: float
    size_y: float
    size_z: float
    size_t: float
    diagnose_period_time: float

    @staticmethod
    def from_json(data):
        """Build from the ``Geometry`` section of the configuration."""
        return Geometry(
            dx=float(data["dx"]),
            dy=float(data["dy"]),
            dz=float(data["dz"]),
            dt=float(data["dt"]),
            size_x=float(data["size_x"]),
            size_y=float(data["size_y"]),
            size_z=float(data["size_z"]),
            size_t=float(data["size_t"]),
            diagnose_period_time=float(data["diagnose_period"]),
        )

    @property
    def nx(self):
        return to_step(self.size_x, self.dx)

    @property
    def ny(self):
        return to_step(self.size_y, self.dy)

    @property
    def nz(self):
        return to_step(self.size_z, self.dz)

    @property
    def nt(self):
        return to_step(self.size_t, self.dt)

    @property
    def diagnose_period(self):
        """Diagnostic period in time steps."""
        return to_step(self.diagnose_period_time, self.dt)

    @property
    def spacing(self):
        return Vector3(self.dx, self.dy, self.dz)

    @property
    def sizes(self):
        return Vector3(self.size_x, self.size_y, self.size_z)

    @property
    def steps(self):
        return Vector3(self.nx, self.ny, self.nz)


@dataclass
class Configuration:
    """Parsed configuration together with the file it came from."""

    path: Path
    json: dict
    out_dir: str
    geometry: Geometry = field(repr=False)

    @staticmethod
    def from_file(path):
        """Read and parse the configuration stored at ``path``."""
        path = Path(path)
        with path.open(encoding="utf-8") as file:
            data = json.load(file)
        return Configuration(
            path=path,
            json=data,
            out_dir=str(data["Out_dir"]),
            geometry=Geometry.from_json(data["Geometry"]),
        )

    def save(self, to=""):
        """Copy the configuration file into ``out_dir/to``, overwriting a previous copy."""
        self._copy(self.path, to, recursive=False)

    def save_sources(self, source_dir="src", to=""):
        """Copy the whole ``source_dir`` tree into ``out_dir/to``."""
        self._copy(Path(source_dir), to, recursive=True)

    def _copy(self, source, to, recursive):
        target = Path(self.out_dir) / to
        try:
            target.mkdir(parents=True, exist_ok=True)
            if recursive:
                shutil.copytree(source, target, dirs_exist_ok=True)
            else:
                shutil.copy2(source, target)
        except OSError as ex:
            raise RuntimeError(f"cannot copy {source} to {target}: {ex}") from ex

    def boundaries(self):
        """Boundary types along x, y and z."""
        geometry = self.json["Geometry"]
        return tuple(
            BoundaryType.from_string(geometry[f"da_boundary_{axis}"]) for axis in _AXES
        )

    def processors(self):
        """Number of processes along x, y and z."""
        geometry = self.json["Geometry"]
        return tuple(int(geometry[f"da_processors_{axis}"]) for axis in _AXES)