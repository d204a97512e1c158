"""Binary output of single-precision floats laid out through subarray views."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from pathlib import Path

import numpy as np

_FLOAT = np.dtype(np.float32)


@dataclass(frozen=True)
class _Subarray:
    """C-ordered block ``starts .. starts + subsizes`` of an array of ``sizes``."""

    sizes: tuple
    subsizes: tuple
    starts: tuple

    @classmethod
    def create(cls, sizes, subsizes, starts):
        sizes = tuple(int(v) for v in sizes)
        subsizes = tuple(int(v) for v in subsizes)
        starts = tuple(int(v) for v in starts)
        if not sizes or not len(sizes) == len(subsizes) == len(starts):
            raise ValueError("sizes, subsizes and starts must have the same non-zero length")
        for n, m, s in zip(sizes, subsizes, starts):
            if n <= 0 or m <= 0 or s < 0 or s + m > n:
                raise ValueError(
                    f"invalid subarray: sizes={sizes}, subsizes={subsizes}, starts={starts}"
                )
        return cls(sizes, subsizes, starts)

    @property
    def frame_size(self):
        return math.prod(self.sizes)

    @property
    def _slices(self):
        return tuple(slice(s, s + m) for s, m in zip(self.starts, self.subsizes))

    def select(self, flat):
        """Elements of the block taken from the flat array ``flat``."""
        return flat[: self.frame_size].reshape(self.sizes)[self._slices].ravel()

    def offsets(self):
        """Flat offsets of the block elements within one frame."""
        return np.arange(self.frame_size).reshape(self.sizes)[self._slices].ravel()


class BinaryFile:
    """File of native-endian floats with optional memory and file views.

    The memory view picks the block of the data passed to :meth:`write_floats`
    that is written; the file view places the written elements into a frame of
    the file. Each further write continues where the previous one stopped,
    moving on to the next frame once a block is filled.
    """

    def __init__(self, directory_path=None, file_name=None):
        self.path = None
        self._stream = None
        self._memview = None
        self._fileview = None
        self._position = 0
        if directory_path is not None and file_name is not None:
            self.open(directory_path, file_name)

    def open(self, directory_path, file_name):
        """Create ``directory_path`` and open a fresh ``file_name.bin`` inside it."""
        self.close()
        directory = Path(directory_path)
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / f"{file_name}.bin"
        path.unlink(missing_ok=True)
        self._stream = path.open("wb")
        self.path = path
        self._position = 0

    def flush(self):
        """Push written data to the disk."""
        stream = self._require_open()
        stream.flush()
        os.fsync(stream.fileno())

    def close(self):
        """Close the file if it is open."""
        if self._stream is not None:
            self._stream.close()
            self._stream = None

    def set_memview_subarray(self, sizes, subsizes, starts):
        """Write only the given block of the data passed to :meth:`write_floats`."""
        self._memview = _Subarray.create(sizes, subsizes, starts)

    def set_fileview_subarray(self, sizes, subsizes, starts):
        """Place written elements into the given block of each file frame."""
        self._fileview = _Subarray.create(sizes, subsizes, starts)

    def _require_open(self):
        if self._stream is None:
            raise ValueError("file is not open")
        return self._stream

    def write_floats(self, data):
        """Write ``data`` converted to single-precision floats."""
        stream = self._require_open()
        values = np.asarray(data, dtype=_FLOAT).ravel()

        if self._memview is not None:
            if values.size < self._memview.frame_size:
                raise ValueError(
                    f"data holds {values.size} values, the memory view needs "
                    f"{self._memview.frame_size}"
                )
            values = self._memview.select(values)

        k = np.arange(values.size) + self._position
        if self._fileview is None:
            offsets = k
        else:
            tile = self._fileview.offsets()
            offsets = (k // tile.size) * self._fileview.frame_size + tile[k % tile.size]
        self._position += values.size

        breaks = np.flatnonzero(np.diff(offsets) != 1) + 1
        for run_offsets, run_values in zip(np.split(offsets, breaks), np.split(values, breaks)):
            if run_values.size == 0:
                continue
            stream.seek(int(run_offsets[0]) * _FLOAT.itemsize)
            stream.write(run_values.tobytes())

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()