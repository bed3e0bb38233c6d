# mole

`mole` reads a molecule from an XYZ file and a Gaussian basis set in the
Basis Set Exchange JSON format. From these it computes one-electron
integrals and two-electron repulsion integrals over contracted Cartesian
Gaussians. The one-electron integrals are overlap, kinetic energy and
nuclear attraction. The integrals are evaluated with the McMurchie-Davidson
scheme, using numpy and scipy.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Inputs

- **An XYZ file.** The file is read as whitespace-separated tokens. The
  first token is the number of atoms. Each atom then follows as four
  tokens: an element symbol, then x, y and z. Element symbols H to Cl are
  recognised.
- **A basis-set file named `<basis>.json`,** for example `sto-3g.json`, in
  the Basis Set Exchange JSON layout. Every entry of `angular_momentum` in
  an electron shell becomes its own shell. The contraction coefficients of
  each shell are normalised when the shell is created.

## Command line

```
mole [XYZ] [--basis NAME] [--unit {au,ang}] [--col N]
```

| Argument  | Default     | Meaning                                              |
|-----------|-------------|------------------------------------------------------|
| `XYZ`     | `./h2o.xyz` | The XYZ file to read.                                |
| `--basis` | `sto-3g`    | The basis-set name. The file `<NAME>.json` is read.  |
| `--unit`  | `ang`       | The unit of the coordinates in the XYZ file.         |
| `--col`   | `5`         | The column of the overlap matrix to print.           |

The command prints, in this order:

1. a summary of the basis-set environment,
2. the full overlap matrix,
3. the overlap matrix again, in blocks of six columns,
4. the chosen column of the overlap matrix,
5. every symmetry-unique two-electron integral, one per line.

## Library use

```python
from mole.molecule import Mol, CoordUnit
from mole.int1e import Int1eKind

mol = Mol("h2o.xyz", "sto-3g", CoordUnit.ANG)
print(mol.natom, mol.nele, mol.nbasis, mol.nshell)
mol.show_basis_env()

overlap = mol.intor_1e(Int1eKind.OVERLAP)
kinetic = mol.intor_1e(Int1eKind.KINETIC)
nuclear = mol.intor_1e(Int1eKind.NUCLEAR)
overlap.show()
overlap.show_limited_columns(6, 8)
print(overlap[0, 1])

eri = mol.intor_2e()
print(eri[0, 0, 1, 1])
dense = eri.to_dense()   # numpy array of shape (n, n, n, n)
eri.show_int2e()
```

`read_xyz(path, unit)` returns three things:

- the atom labels,
- the atomic numbers,
- an `natom x 3` `Mat2d` of the coordinates in bohr.

Coordinates given in Ångström are converted to bohr.

### Modules

- **`mole.constants`** holds unit conversion factors such as `COOR_AU2A`
  and `AMU2AU`. It also has the `ATOMIC_NUMBER` and `AMU_MASS` tables, with
  the lookups `atomic_number_of(symbol)` and `amu_mass_of(symbol)`. An
  unknown symbol raises `KeyError`.
- **`mole.mat2d.Mat2d`** is a dense row-major matrix.
  - Elements are read and written with `m[i, j]`, and slices are accepted.
  - `resize` changes the shape but keeps the number of elements.
  - `to_numpy` returns a copy of the matrix.
  - The `format`, `format_col`, `format_row` and `format_limited_columns`
    methods return fixed-width text.
  - The matching `show*` methods, together with `show_shape`, write that
    text to standard output and also return it.
- **`mole.basis`** provides the basis-set types.
  - `Atom`, `Contraction` and `Shell` describe atoms and shells.
  - `load_basis_json(path)` reads a basis-set document.
  - `build_shells(basis_data, atoms)` builds the shells for a list of atoms.
  - `BasisEnv(basis, atoms)` reads `<basis>.json` and builds an
    environment. `BasisEnv.from_data` does the same from a document that
    is already parsed.
  - A `BasisEnv` has the attributes `shells`, `nshell`, `nbasis`, `max_l`,
    `max_nprim` and `shell2bf`.
  - `describe()` returns a summary as text, and `show_data()` prints it.
- **`mole.gaussian`** holds the shell-level integrals:
  - `boys(n, t)`,
  - `cartesian_powers(l)`,
  - `shell_overlap`,
  - `shell_kinetic`,
  - `shell_nuclear(a, b, charges)`, where the charges are given as
    `(Z, (x, y, z))` pairs,
  - `shell_eri(a, b, c, d)`.
- **`mole.int1e`** assembles the full symmetric matrices.
  `calc_other_1e(Int1eKind.OVERLAP | Int1eKind.KINETIC, env)` builds the
  overlap or kinetic matrix, and `calc_nuclear(env, charges)` builds the
  nuclear attraction matrix.
- **`mole.int2e`** stores two-electron integrals.
  - `Int2e` keeps only the integrals that are unique under the eight-fold
    permutational symmetry. Any equivalent index order gives the same value.
  - `create_int2e_inmem(env)` computes all of the integrals.
  - `format()` and `show_int2e()` list the unique integrals. They raise
    `RuntimeError` before the integrals have been computed.
  - `pair_index(i, j, n)` gives the packed index of a symmetric pair.

## Limitations

- Only Cartesian shells are supported. Spherical (pure) shells raise
  `ValueError`.
- The package computes integrals only. It does not do a self-consistent
  field or any other electronic-structure calculation on top of them.
- All integrals are held in memory. Nothing is written to disk.