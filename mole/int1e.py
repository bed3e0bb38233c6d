"""One-electron integral matrices over a basis-set environment."""

from enum import Enum

from mole.gaussian import shell_kinetic, shell_nuclear, shell_overlap
from mole.mat2d import Mat2d


class Int1eKind(Enum):
    """The kinds of one-electron integrals."""

    OVERLAP = "overlap"
    KINETIC = "kinetic"
    NUCLEAR = "nuclear"


def _assemble(env, compute):
    """Fill a symmetric nbasis x nbasis matrix from shell-pair blocks."""
    result = Mat2d(env.nbasis, env.nbasis)
    spans = [
        (shell, slice(start, start + shell.size))
        for shell, start in zip(env.shells, env.shell2bf)
    ]
    for s1, (shell1, rows) in enumerate(spans):
        for shell2, cols in spans[: s1 + 1]:
            block = compute(shell1, shell2)
            result[rows, cols] = block
            result[cols, rows] = block.T
    return result


def calc_other_1e(need, env):
    """Return the overlap or kinetic energy matrix of ``env``."""
    kind = Int1eKind(need)
    if kind is Int1eKind.OVERLAP:
        return _assemble(env, shell_overlap)
    if kind is Int1eKind.KINETIC:
        return _assemble(env, shell_kinetic)
    raise ValueError("Invalid integral type")


def calc_nuclear(env, charges):
    """Return the nuclear attraction matrix for (Z, (x, y, z)) point charges."""
    charges = list(charges)
    return _assemble(env, lambda a, b: shell_nuclear(a, b, charges))