"""Two-electron repulsion integrals stored with eight-fold permutational symmetry."""

import numpy as np

from mole.gaussian import shell_eri


def pair_index(i, j, n):
    """Packed index of the unordered pair (i, j) out of ``n`` items."""
    if i < j:
        return j + i * n - i * (i + 1) // 2
    return i + j * n - j * (j + 1) // 2


def _packed(i, j, n):
    lo = np.minimum(i, j)
    hi = np.maximum(i, j)
    return hi + lo * n - lo * (lo + 1) // 2


def _unique_quartets(n):
    """Yield one representative (s1, s2, s3, s4) of each symmetry-unique quartet."""
    for s1 in range(n):
        for s2 in range(s1 + 1):
            for s3 in range(s1 + 1):
                last = s3 if s3 < s1 else s2
                for s4 in range(last + 1):
                    yield s1, s2, s3, s4


class Int2e:
    """Electron repulsion integrals (ij|kl) over ``aosize`` basis functions."""

    def __init__(self, aosize):
        if aosize < 0:
            raise ValueError("Basis size must be non-negative.")
        self.aosize = aosize
        self.pair_size = aosize * (aosize + 1) // 2
        self.size = self.pair_size * (self.pair_size + 1) // 2
        self.has_value = False
        self._data = np.zeros(self.size)

    def _offset(self, key):
        if len(key) != 4:
            raise TypeError("An integral is addressed by four indices.")
        if not all(0 <= idx < self.aosize for idx in key):
            raise IndexError(f"index {key} out of range for basis size {self.aosize}")
        i, j, k, l = key
        return pair_index(
            pair_index(i, j, self.aosize), pair_index(k, l, self.aosize), self.pair_size
        )

    def __getitem__(self, key):
        return float(self._data[self._offset(key)])

    def __setitem__(self, key, value):
        self._data[self._offset(key)] = value

    def to_dense(self):
        """Return the full (n, n, n, n) integral tensor."""
        n = self.aosize
        i, j, k, l = np.meshgrid(*(np.arange(n),) * 4, indexing="ij")
        idx = _packed(_packed(i, j, n), _packed(k, l, n), self.pair_size)
        return self._data[idx]

    def create_int2e_inmem(self, env):
        """Compute every symmetry-unique integral of ``env`` and store it."""
        if env.nbasis != self.aosize:
            raise ValueError("Basis size does not match the integral storage size.")
        shells = env.shells
        starts = env.shell2bf
        for quartet in _unique_quartets(env.nshell):
            block = shell_eri(*(shells[s] for s in quartet))
            ranges = [
                np.arange(starts[s], starts[s] + shells[s].size) for s in quartet
            ]
            i, j, k, l = np.meshgrid(*ranges, indexing="ij")
            idx = _packed(
                _packed(i, j, self.aosize), _packed(k, l, self.aosize), self.pair_size
            )
            self._data[idx.ravel()] = block.ravel()
        self.has_value = True

    def format(self):
        """Render every symmetry-unique integral, one per line."""
        if not self.has_value:
            raise RuntimeError("Don`t have value now")
        return "".join(
            f"{s1} {s2} {s3} {s4}   {self[s1, s2, s3, s4]:>16.10f}\n"
            for s1, s2, s3, s4 in _unique_quartets(self.aosize)
        )

    def show_int2e(self):
        print(self.format(), end="")