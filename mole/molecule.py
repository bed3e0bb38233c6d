"""A molecule read from an XYZ file, with its basis set and integrals."""

import argparse
from enum import Enum
from pathlib import Path

from mole.basis import Atom, BasisEnv
from mole.constants import COOR_AU2A, atomic_number_of
from mole.int1e import Int1eKind, calc_nuclear, calc_other_1e
from mole.int2e import Int2e
from mole.mat2d import Mat2d


class CoordUnit(Enum):
    """Length unit of the coordinates in an XYZ file."""

    AU = "au"
    ANG = "ang"


def read_xyz(path, unit):
    """Read an XYZ file made of whitespace-separated tokens.

    The first token is the atom count, followed by ``symbol x y z`` for each
    atom. Returns the atom labels, their atomic numbers and an ``natom x 3``
    coordinate matrix in bohr.
    """
    unit = CoordUnit(unit)
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError:
        raise FileNotFoundError(f"Failed to open file: {path}") from None

    tokens = text.split()
    if not tokens:
        raise ValueError(f"Empty XYZ file: {path}")
    try:
        natom = int(tokens[0])
    except ValueError:
        raise ValueError(f"Invalid atom count in {path}: {tokens[0]!r}") from None
    if natom < 0:
        raise ValueError(f"Negative atom count in {path}: {natom}")

    records = tokens[1:1 + 4 * natom]
    if len(records) < 4 * natom:
        raise ValueError(f"XYZ file {path} holds fewer than {natom} atoms.")

    labels = records[0::4]
    numbers = [atomic_number_of(label) for label in labels]
    scale = 1.0 / COOR_AU2A if unit is CoordUnit.ANG else 1.0
    try:
        coords = [
            float(value) * scale
            for x, y, z in zip(records[1::4], records[2::4], records[3::4])
            for value in (x, y, z)
        ]
    except ValueError as exc:
        raise ValueError(f"Invalid coordinate in {path}: {exc}") from None
    return labels, numbers, Mat2d(natom, 3, coords)


class Mol:
    """A molecule: geometry, electron count and basis-set environment."""

    def __init__(self, xyzname, basis, unit):
        self.xyzname = str(xyzname)
        self.basis = str(basis)
        self.unit = CoordUnit(unit)
        self.atomlabel, self.atomnumsequ, self.coor = read_xyz(xyzname, self.unit)
        self.natom = len(self.atomlabel)
        self.nele = sum(self.atomnumsequ)
        self._atoms = [
            Atom(number, *self.coor[i, :].tolist())
            for i, number in enumerate(self.atomnumsequ)
        ]
        self._env = BasisEnv(self.basis, self._atoms)

    @property
    def nbasis(self):
        return self._env.nbasis

    @property
    def nshell(self):
        return self._env.nshell

    @property
    def basis_env(self):
        return self._env

    def _nuclear_charges(self):
        return [(float(atom.atom_number), atom.position) for atom in self._atoms]

    def intor_1e(self, need):
        """Return the requested one-electron integral matrix."""
        kind = Int1eKind(need)
        if kind is Int1eKind.NUCLEAR:
            return calc_nuclear(self._env, self._nuclear_charges())
        return calc_other_1e(kind, self._env)

    def intor_2e(self):
        """Return all electron repulsion integrals of the basis."""
        result = Int2e(self._env.nbasis)
        result.create_int2e_inmem(self._env)
        return result

    def show_coor(self):
        self.coor.show()

    def show_basis_env(self):
        self._env.show_data()


def main(argv=None):
    """Print the basis data, overlap matrix and two-electron integrals of a molecule."""
    parser = argparse.ArgumentParser(
        description="Compute overlap and electron repulsion integrals of a molecule."
    )
    parser.add_argument("xyz", nargs="?", default="./h2o.xyz", help="XYZ file")
    parser.add_argument(
        "--basis",
        default="sto-3g",
        help="basis-set name; the file <basis>.json is read",
    )
    parser.add_argument(
        "--unit",
        choices=[u.value for u in CoordUnit],
        default=CoordUnit.ANG.value,
        help="unit of the coordinates in the XYZ file",
    )
    parser.add_argument(
        "--col", type=int, default=5, help="column of the overlap matrix to print"
    )
    args = parser.parse_args(argv)

    mol = Mol(args.xyz, args.basis, CoordUnit(args.unit))
    mol.show_basis_env()
    overlap = mol.intor_1e(Int1eKind.OVERLAP)
    overlap.show()
    overlap.show_limited_columns()
    overlap.show_col(args.col)
    mol.intor_2e().show_int2e()
    return 0