"""Unit conversion factors and per-element data tables."""

from types import MappingProxyType
from typing import Mapping

AMU2AU = 1822.888515
TEMP_AU2SI = 3.1577464e5
COOR_AU2A = 0.52917721092
TIME_AU2FS = 2.418884326505e-2

AMU_MASS: Mapping[str, float] = MappingProxyType(
    {
        "H": 1.007947,
        "He": 4.0026022,
        "C": 12.01078,
        "N": 14.00672,
        "O": 15.99943,
        "F": 18.9984032,
        "P": 30.9737612,
        "S": 32.0655,
        "Cl": 35.4532,
    }
)

ATOMIC_NUMBER: Mapping[str, int] = MappingProxyType(
    {
        "H": 1,
        "He": 2,
        "Li": 3,
        "Be": 4,
        "B": 5,
        "C": 6,
        "N": 7,
        "O": 8,
        "F": 9,
        "Ne": 10,
        "Na": 11,
        "Mg": 12,
        "Al": 13,
        "Si": 14,
        "P": 15,
        "S": 16,
        "Cl": 17,
    }
)


def atomic_number_of(symbol):
    """Return the atomic number of an element symbol."""
    try:
        return ATOMIC_NUMBER[symbol]
    except KeyError:
        raise KeyError(f"unknown element symbol: {symbol!r}") from None


def amu_mass_of(symbol):
    """Return the average atomic mass (in amu) of an element symbol."""
    try:
        return AMU_MASS[symbol]
    except KeyError:
        raise KeyError(f"no mass known for element symbol: {symbol!r}") from None