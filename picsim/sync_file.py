"""Output files that create their parent directories when opened."""

from __future__ import annotations

from pathlib import Path

import numpy as np


class SyncFile:
    """Text output file, truncated on open."""

    _mode = "w"

    def __init__(self, filename=None):
        self.stream = None
        if filename is not None:
            self.open(filename)

    def open(self, filename):
        """Create the parent directories of ``filename`` and open a new file there."""
        self.close()
        path = Path(filename)
        path.parent.mkdir(parents=True, exist_ok=True)
        if "b" in self._mode:
            self.stream = path.open(self._mode)
        else:
            self.stream = path.open(self._mode, encoding="utf-8")

    def flush(self):
        """Flush buffered output."""
        if self.stream is not None:
            self.stream.flush()

    def close(self):
        """Flush and close the file if it is open."""
        if self.stream is not None:
            self.stream.flush()
            self.stream.close()
            self.stream = None

    def _require_open(self):
        if self.stream is None:
            raise ValueError("file is not open")
        return self.stream

    def write(self, text):
        """Write ``text`` to the file."""
        self._require_open().write(text)

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()


class SyncBinaryFile(SyncFile):
    """Binary output file of native-endian reals."""

    _mode = "wb"

    def write(self, text):
        """Write raw bytes to the file."""
        self._require_open().write(bytes(text))

    def write_real(self, value):
        """Write one value as a double."""
        self.write_reals([value])

    def write_reals(self, data):
        """Write ``data`` as doubles."""
        self._require_open().write(np.asarray(data, dtype=np.float64).tobytes())

    def write_float(self, value):
        """Write one value as a single-precision float."""
        self.write_floats([value])

    def write_floats(self, data):
        """Write ``data`` converted to single-precision floats."""
        self._require_open().write(np.asarray(data, dtype=np.float32).tobytes())