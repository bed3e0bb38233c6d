"""A dense row-major two-dimensional matrix of floats."""

import sys

import numpy as np


def _cell(value, prec):
    return f"{value:>{prec + 6}.{prec}f}"


class Mat2d:
    """Dense matrix with fixed element count and fixed-width text output."""

    def __init__(self, nrow, ncol, data=None):
        size = nrow * ncol
        if data is None or len(data) == 0:
            values = np.zeros(size, dtype=float)
        else:
            values = np.asarray(data, dtype=float).reshape(-1)
            if values.size != size:
                raise ValueError("Raw data size does not match matrix dimensions.")
            values = values.copy()
        self._data = values.reshape(nrow, ncol)

    @property
    def nrow(self):
        return self._data.shape[0]

    @property
    def ncol(self):
        return self._data.shape[1]

    @property
    def size(self):
        return self._data.size

    @property
    def shape(self):
        return self._data.shape

    def to_numpy(self):
        """Return a copy of the matrix as a numpy array."""
        return self._data.copy()

    def resize(self, nrow, ncol):
        """Change the shape, keeping the element count and row-major order."""
        if nrow * ncol != self.size:
            raise ValueError("New size does not match matrix dimensions.")
        self._data = self._data.reshape(nrow, ncol)

    def __getitem__(self, key):
        value = self._data[key]
        if isinstance(value, np.ndarray):
            return value.copy()
        return float(value)

    def __setitem__(self, key, value):
        self._data[key] = value

    def __iter__(self):
        return (row.copy() for row in self._data)

    def __len__(self):
        return self.nrow

    def format(self, prec=8):
        """Render every row on its own line, followed by a blank line."""
        lines = "".join(
            "".join(_cell(v, prec) for v in row) + "\n" for row in self._data
        )
        return lines + "\n"

    def format_col(self, j, prec=8):
        """Render column ``j`` on a single line."""
        return "".join(_cell(v, prec) for v in self._data[:, j]) + "\n\n"

    def format_row(self, i, prec=8):
        """Render row ``i`` on a single line."""
        return "".join(_cell(v, prec) for v in self._data[i, :]) + "\n\n"

    def format_limited_columns(self, columns_per_line=6, prec=8):
        """Render the matrix in blocks of at most ``columns_per_line`` columns."""
        if columns_per_line <= 0:
            raise ValueError("Number of columns per line must be greater than 0.")
        parts = []
        for start in range(0, self.ncol, columns_per_line):
            block = self._data[:, start:start + columns_per_line]
            parts.extend("".join(_cell(v, prec) for v in row) + "\n" for row in block)
            parts.append("\n")
        parts.append("\n")
        return "".join(parts)

    @staticmethod
    def _emit(text):
        sys.stdout.write(text)
        return text

    def show_shape(self):
        """Write the shape to standard output and return the text written."""
        return self._emit(f"Matrix shape: {self.nrow} x {self.ncol}\n\n")

    def show(self, prec=8):
        """Write the whole matrix to standard output and return the text."""
        return self._emit(self.format(prec))

    def show_col(self, j, prec=8):
        """Write column ``j`` to standard output and return the text."""
        return self._emit(self.format_col(j, prec))

    def show_row(self, i, prec=8):
        """Write row ``i`` to standard output and return the text."""
        return self._emit(self.format_row(i, prec))

    def show_limited_columns(self, columns_per_line=6, prec=8):
        """Write the column blocks to standard output and return the text."""
        return self._emit(self.format_limited_columns(columns_per_line, prec))

    def __repr__(self):
        return f"Mat2d({self.nrow}, {self.ncol})"