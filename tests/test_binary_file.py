import numpy as np
import pytest

from picsim.binary_file import BinaryFile


def read(path):
    return np.fromfile(path, dtype=np.float32)


def test_creates_directories_and_file(tmp_path):
    directory = tmp_path / "a" / "b"
    with BinaryFile(directory, "field") as file:
        file.write_floats([1.0, 2.0])
    assert file.path == directory / "field.bin"
    assert file.path.exists()


def test_plain_write_round_trip(tmp_path):
    data = [0.1, 2.5, -3.0, 4.0]
    with BinaryFile(tmp_path, "plain") as file:
        file.write_floats(data)
        file.write_floats([7.0])
    assert np.array_equal(read(tmp_path / "plain.bin"), np.array(data + [7.0], dtype=np.float32))


def test_values_are_single_precision(tmp_path):
    with BinaryFile(tmp_path, "single") as file:
        file.write_floats([0.1])
    assert (tmp_path / "single.bin").stat().st_size == 4
    assert read(tmp_path / "single.bin")[0] == np.float32(0.1)


def test_open_replaces_existing_file(tmp_path):
    with BinaryFile(tmp_path, "again") as file:
        file.write_floats([1.0, 2.0, 3.0])
    with BinaryFile(tmp_path, "again") as file:
        file.write_floats([5.0])
    assert np.array_equal(read(tmp_path / "again.bin"), np.array([5.0], dtype=np.float32))


def test_fileview_places_frames(tmp_path):
    with BinaryFile(tmp_path, "view") as file:
        file.set_fileview_subarray([4], [2], [1])
        file.write_floats([1.0, 2.0])
        file.write_floats([3.0, 4.0])
    expected = np.array([0.0, 1.0, 2.0, 0.0, 0.0, 3.0, 4.0], dtype=np.float32)
    assert np.array_equal(read(tmp_path / "view.bin"), expected)


def test_two_dimensional_fileview(tmp_path):
    with BinaryFile(tmp_path, "grid") as file:
        file.set_fileview_subarray([3, 3], [2, 2], [0, 1])
        file.write_floats([1.0, 2.0, 3.0, 4.0])
    values = read(tmp_path / "grid.bin")
    expected = np.array([0.0, 1.0, 2.0, 0.0, 3.0, 4.0], dtype=np.float32)
    assert values.size in (6, 9)
    assert np.array_equal(values[:6], expected)
    assert np.array_equal(values[6:], np.zeros(values.size - 6, dtype=np.float32))


def test_memview_selects_block(tmp_path):
    data = np.arange(6, dtype=float).reshape(2, 3)
    with BinaryFile(tmp_path, "mem") as file:
        file.set_memview_subarray([2, 3], [1, 2], [1, 1])
        file.write_floats(data)
    assert np.array_equal(read(tmp_path / "mem.bin"), data[1, 1:3].astype(np.float32))


def test_memview_requires_enough_data(tmp_path):
    with BinaryFile(tmp_path, "short") as file:
        file.set_memview_subarray([2, 3], [1, 2], [1, 1])
        with pytest.raises(ValueError):
            file.write_floats([1.0, 2.0])


@pytest.mark.parametrize(
    "sizes, subsizes, starts",
    [([4], [3], [2]), ([4, 4], [2], [0]), ([4], [0], [0]), ([4], [1], [-1])],
)
def test_invalid_subarray(tmp_path, sizes, subsizes, starts):
    with BinaryFile(tmp_path, "bad") as file:
        with pytest.raises(ValueError):
            file.set_fileview_subarray(sizes, subsizes, starts)


def test_write_without_open_raises():
    file = BinaryFile()
    with pytest.raises(ValueError):
        file.write_floats([1.0])


def test_write_after_close_raises(tmp_path):
    file = BinaryFile(tmp_path, "closed")
    file.flush()
    file.close()
    with pytest.raises(ValueError):
        file.write_floats([1.0])