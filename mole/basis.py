"""Atoms, contracted Gaussian shells and the basis-set environment."""

import json
import math
import sys
from dataclasses import dataclass, field
from pathlib import Path

_SQRT_PI_CUBED = math.pi ** 1.5


def _odd_double_factorial(l):
    """Return (2l - 1)!!, with the value 1 for l == 0."""
    return math.prod(range(2 * l - 1, 0, -2))


@dataclass
class Atom:
    """A nucleus given by its atomic number and Cartesian position (bohr)."""

    atom_number: int
    x: float
    y: float
    z: float

    @property
    def position(self):
        return (self.x, self.y, self.z)


@dataclass(frozen=True)
class Contraction:
    """Contraction coefficients of one angular momentum."""

    l: int
    pure: bool
    coeff: tuple = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "coeff", tuple(float(c) for c in self.coeff))

    @property
    def size(self):
        if self.pure:
            return 2 * self.l + 1
        return (self.l + 1) * (self.l + 2) // 2


class Shell:
    """A contracted Gaussian shell whose coefficients are normalized on creation."""

    def __init__(self, exponents, contractions, origin):
        self.exponents = tuple(float(a) for a in exponents)
        origin = tuple(float(v) for v in origin)
        if len(origin) != 3:
            raise ValueError("Shell origin must have three coordinates.")
        self.origin = origin
        contractions = tuple(contractions)
        for c in contractions:
            if len(c.coeff) != len(self.exponents):
                raise ValueError("Coefficient count does not match exponent count.")
        self.contractions = tuple(self._normalized(c) for c in contractions)

    def _normalized(self, contraction):
        l = contraction.l
        dfact = _odd_double_factorial(l)
        coeff = [
            c * math.sqrt(2.0 ** l * (2.0 * a) ** (l + 1.5) / (_SQRT_PI_CUBED * dfact))
            if a != 0.0
            else c
            for a, c in zip(self.exponents, contraction.coeff)
        ]
        norm = sum(
            dfact * _SQRT_PI_CUBED * cp * cq / (2.0 ** l * (ap + aq) ** (l + 1.5))
            for ap, cp in zip(self.exponents, coeff)
            for aq, cq in zip(self.exponents, coeff)
        )
        scale = 1.0 / math.sqrt(norm)
        return Contraction(l, contraction.pure, tuple(c * scale for c in coeff))

    @property
    def nprim(self):
        return len(self.exponents)

    @property
    def size(self):
        return sum(c.size for c in self.contractions)

    @property
    def max_l(self):
        return max((c.l for c in self.contractions), default=0)

    def __str__(self):
        x, y, z = self.origin
        lines = [f"Shell:( O={{{x:g},{y:g},{z:g}}}"]
        lines.append(
            "  " + "".join(f" {{l={c.l},sph={int(c.pure)}}}" for c in self.contractions)
        )
        for p, alpha in enumerate(self.exponents):
            coeffs = "".join(f" {c.coeff[p]:g}" for c in self.contractions)
            lines.append(f"  {alpha:g}{coeffs}")
        return "\n".join(lines) + "\n"

    def __repr__(self):
        return (
            f"Shell(nprim={self.nprim}, "
            f"l={[c.l for c in self.contractions]}, origin={self.origin})"
        )


def load_basis_json(path):
    """Read a basis-set JSON document."""
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Basis file not found: {path}")
    with path.open(encoding="utf-8") as handle:
        return json.load(handle)


def build_shells(basis_data, atoms):
    """Create the shells of every atom, one shell per angular momentum entry."""
    shells = []
    for atom in atoms:
        try:
            element = basis_data["elements"][str(atom.atom_number)]
        except KeyError:
            raise KeyError(
                f"element {atom.atom_number} is not in the basis set"
            ) from None
        for entry in element["electron_shells"]:
            exponents = [float(e) for e in entry["exponents"]]
            for l, coeffs in zip(entry["angular_momentum"], entry["coefficients"]):
                contraction = Contraction(int(l), False, tuple(float(c) for c in coeffs))
                shells.append(Shell(exponents, [contraction], atom.position))
    return shells


class BasisEnv:
    """The shells of a molecule together with their bookkeeping data."""

    def __init__(self, basis, atoms):
        self._setup(load_basis_json(f"{basis}.json"), atoms)

    @classmethod
    def from_data(cls, basis_data, atoms):
        """Build the environment from an already parsed basis-set document."""
        env = cls.__new__(cls)
        env._setup(basis_data, atoms)
        return env

    def _setup(self, basis_data, atoms):
        self.shells = build_shells(basis_data, atoms)
        if not self.shells:
            raise ValueError("No shells found")
        self.nshell = len(self.shells)
        self.nbasis = sum(s.size for s in self.shells)
        self.max_nprim = max(s.nprim for s in self.shells)
        self.max_l = max(s.max_l for s in self.shells)
        self.shell2bf = []
        start = 0
        for shell in self.shells:
            self.shell2bf.append(start)
            start += shell.size

    def describe(self):
        """Return a textual summary of the environment."""
        parts = [
            f"Number of shells: {self.nshell}\n",
            f"Number of basis functions: {self.nbasis}\n",
            f"Max angular momentum: {self.max_l}\n",
            f"Max number of primitives: {self.max_nprim}\n",
            "Shell to basis function mapping:\n",
            "shell2bf\n",
        ]
        parts.extend(f"{start}\n" for start in self.shell2bf)
        parts.extend(f"{shell}\n" for shell in self.shells)
        parts.extend(f"{shell.size}\n" for shell in self.shells)
        return "".join(parts)

    def show_data(self):
        """Write the summary to standard output and return the text written."""
        text = self.describe()
        sys.stdout.write(text)
        return text