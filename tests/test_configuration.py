import json
from pathlib import Path

import pytest

from picsim.configuration import BoundaryType, Configuration, Geometry


def _data(out_dir):
    return {
        "Simulation": "basic",
        "Out_dir": str(out_dir),
        "Geometry": {
            "dx": 0.5,
            "dy": 0.5,
            "dz": 1.0,
            "dt": 0.25,
            "size_x": 10.0,
            "size_y": 5.0,
            "size_z": 4.0,
            "size_t": 100.0,
            "diagnose_period": 2.5,
            "da_boundary_x": "DM_BOUNDARY_PERIODIC",
            "da_boundary_y": "DM_BOUNDARY_GHOSTED",
            "da_boundary_z": "DM_BOUNDARY_NONE",
            "da_processors_x": 1,
            "da_processors_y": 1,
            "da_processors_z": 1,
        },
    }


def _write(tmp_path, data):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def config(tmp_path):
    return Configuration.from_file(_write(tmp_path, _data(tmp_path / "out")))


def test_geometry_steps(config):
    geometry = config.geometry
    assert geometry.nx == 20
    assert geometry.nt == 400
    assert geometry.diagnose_period == 10


def test_steps_times_spacing_give_sizes(config):
    geometry = config.geometry
    assert geometry.steps.elementwise_product(geometry.spacing) == geometry.sizes


def test_out_dir_and_json_kept(config, tmp_path):
    assert config.out_dir == str(tmp_path / "out")
    assert config.json["Simulation"] == "basic"


def test_boundaries(config):
    assert config.boundaries() == (
        BoundaryType.PERIODIC,
        BoundaryType.GHOSTED,
        BoundaryType.NONE,
    )


def test_unknown_boundary_is_none():
    assert BoundaryType.from_string("DM_BOUNDARY_MIRROR") is BoundaryType.NONE


def test_processors(config):
    assert config.processors() == (1, 1, 1)


def test_missing_out_dir(tmp_path):
    data = _data(tmp_path)
    del data["Out_dir"]
    with pytest.raises(KeyError):
        Configuration.from_file(_write(tmp_path, data))


def test_missing_geometry_key(tmp_path):
    data = _data(tmp_path)
    del data["Geometry"]["dt"]
    with pytest.raises(KeyError):
        Geometry.from_json(data["Geometry"])


def test_save_copies_file(config, tmp_path):
    config.save()
    copied = tmp_path / "out" / "config.json"
    assert copied.read_text(encoding="utf-8") == config.path.read_text(encoding="utf-8")


def test_save_into_subdirectory_overwrites(config, tmp_path):
    target = tmp_path / "out" / "run" / "config.json"
    target.parent.mkdir(parents=True)
    target.write_text("old", encoding="utf-8")
    config.save("run")
    assert json.loads(target.read_text(encoding="utf-8")) == config.json


def test_save_sources_copies_tree(config, tmp_path):
    sources = tmp_path / "sources"
    (sources / "nested").mkdir(parents=True)
    (sources / "nested" / "module.txt").write_text("content", encoding="utf-8")
    config.save_sources(sources, "src")
    copied = Path(config.out_dir) / "src" / "nested" / "module.txt"
    assert copied.read_text(encoding="utf-8") == "content"


def test_save_missing_source_raises(config):
    config.path.unlink()
    with pytest.raises(RuntimeError):
        config.save()