import math

import numpy as np
import pytest

from mole.basis import Contraction, Shell
from mole.gaussian import (
    boys,
    cartesian_powers,
    shell_eri,
    shell_kinetic,
    shell_nuclear,
    shell_overlap,
)


def _prim(l, alpha, origin=(0.0, 0.0, 0.0)):
    return Shell([alpha], [Contraction(l, False, (1.0,))], origin)


def _contracted(l, origin):
    return Shell([2.0, 0.4], [Contraction(l, False, (0.4, 0.7))], origin)


def test_boys_at_zero_is_reciprocal_odd():
    assert boys(0, 0.0) == pytest.approx(1.0)
    for n in range(5):
        assert boys(n, 0.0) == pytest.approx(1.0 / (2 * n + 1))


@pytest.mark.parametrize("t", [0.1, 1.0, 5.0, 30.0])
def test_boys_zero_order_matches_error_function(t):
    expected = 0.5 * math.sqrt(math.pi / t) * math.erf(math.sqrt(t))
    assert boys(0, t) == pytest.approx(expected, rel=1e-12)


@pytest.mark.parametrize("t", [0.01, 0.7, 3.0, 12.0])
def test_boys_downward_recursion(t):
    for n in range(4):
        lhs = boys(n, t)
        rhs = (2.0 * t * boys(n + 1, t) + math.exp(-t)) / (2 * n + 1)
        assert lhs == pytest.approx(rhs, rel=1e-10)


def test_boys_rejects_negative_arguments():
    with pytest.raises(ValueError):
        boys(0, -1.0)
    with pytest.raises(ValueError):
        boys(-1, 1.0)


def test_cartesian_powers_order():
    assert cartesian_powers(0) == [(0, 0, 0)]
    assert cartesian_powers(1) == [(1, 0, 0), (0, 1, 0), (0, 0, 1)]
    assert cartesian_powers(2) == [
        (2, 0, 0), (1, 1, 0), (1, 0, 1), (0, 2, 0), (0, 1, 1), (0, 0, 2)
    ]


@pytest.mark.parametrize("l", range(6))
def test_cartesian_powers_complete(l):
    powers = cartesian_powers(l)
    assert len(powers) == len(set(powers)) == (l + 1) * (l + 2) // 2
    assert all(sum(p) == l and min(p) >= 0 for p in powers)


def test_cartesian_powers_negative():
    with pytest.raises(ValueError):
        cartesian_powers(-1)


@pytest.mark.parametrize("l", [0, 1])
def test_overlap_of_normalized_shell_has_unit_diagonal(l):
    shell = _contracted(l, (0.3, -0.2, 0.1))
    s = shell_overlap(shell, shell)
    np.testing.assert_allclose(np.diag(s), 1.0, rtol=1e-10)


def test_overlap_d_shell_axis_component_normalized():
    shell = _prim(2, 0.8)
    s = shell_overlap(shell, shell)
    for f in (0, 3, 5):
        assert s[f, f] == pytest.approx(1.0, rel=1e-10)


def test_overlap_symmetric_and_translation_invariant():
    a = _contracted(1, (0.0, 0.0, 0.0))
    b = _contracted(2, (0.4, -0.3, 0.9))
    sab = shell_overlap(a, b)
    np.testing.assert_allclose(shell_overlap(b, a), sab.T, atol=1e-12)
    shift = np.array([1.5, -2.0, 0.25])
    a2 = _contracted(1, tuple(np.array(a.origin) + shift))
    b2 = _contracted(2, tuple(np.array(b.origin) + shift))
    np.testing.assert_allclose(shell_overlap(a2, b2), sab, atol=1e-12)


def test_s_and_p_on_same_center_are_orthogonal():
    s = _contracted(0, (0.1, 0.2, 0.3))
    p = _contracted(1, (0.1, 0.2, 0.3))
    np.testing.assert_allclose(shell_overlap(s, p), 0.0, atol=1e-12)


def test_kinetic_of_s_primitive():
    shell = _prim(0, 1.0)
    assert shell_kinetic(shell, shell)[0, 0] == pytest.approx(1.5, rel=1e-10)


def test_kinetic_symmetric_with_positive_diagonal():
    a = _contracted(1, (0.0, 0.0, 0.0))
    b = _contracted(2, (0.5, 0.2, -0.4))
    tab = shell_kinetic(a, b)
    np.testing.assert_allclose(shell_kinetic(b, a), tab.T, atol=1e-12)
    assert np.all(np.diag(shell_kinetic(a, a)) > 0)


def test_nuclear_far_charge_is_point_like():
    shell = _contracted(0, (0.0, 0.0, 0.0))
    v = shell_nuclear(shell, shell, [(2.0, (0.0, 0.0, 50.0))])
    assert v[0, 0] == pytest.approx(-2.0 / 50.0, rel=1e-6)


def test_nuclear_is_additive_over_charges():
    a = _contracted(1, (0.0, 0.0, 0.0))
    b = _contracted(0, (0.0, 0.8, 0.3))
    c1 = (1.0, (0.2, 0.0, 0.0))
    c2 = (8.0, (0.0, -0.5, 1.0))
    both = shell_nuclear(a, b, [c1, c2])
    np.testing.assert_allclose(
        both, shell_nuclear(a, b, [c1]) + shell_nuclear(a, b, [c2]), atol=1e-12
    )
    np.testing.assert_allclose(shell_nuclear(b, a, [c1, c2]), both.T, atol=1e-12)


def test_eri_far_apart_is_coulomb():
    a = _contracted(0, (0.0, 0.0, 0.0))
    b = _contracted(0, (0.0, 0.0, 50.0))
    assert shell_eri(a, a, b, b)[0, 0, 0, 0] == pytest.approx(1.0 / 50.0, rel=1e-6)


def test_eri_p_distribution_far_away():
    p = _contracted(1, (0.0, 0.0, 0.0))
    s = _contracted(0, (0.0, 0.0, 50.0))
    eri = shell_eri(p, p, s, s)
    for f in range(3):
        assert eri[f, f, 0, 0] == pytest.approx(1.0 / 50.0, rel=1e-3)


def test_eri_permutational_symmetry():
    a = _prim(1, 0.8, (0.0, 0.0, 0.0))
    b = _prim(0, 1.1, (0.3, 0.0, 0.5))
    c = _prim(1, 0.5, (0.0, 0.7, 0.0))
    d = _prim(0, 1.3, (1.0, 1.0, 1.0))
    e = shell_eri(a, b, c, d)
    np.testing.assert_allclose(shell_eri(b, a, c, d), e.transpose(1, 0, 2, 3), atol=1e-12)
    np.testing.assert_allclose(shell_eri(a, b, d, c), e.transpose(0, 1, 3, 2), atol=1e-12)
    np.testing.assert_allclose(shell_eri(c, d, a, b), e.transpose(2, 3, 0, 1), atol=1e-12)


def test_eri_translation_invariant():
    a = _prim(1, 0.8, (0.0, 0.0, 0.0))
    b = _prim(0, 1.1, (0.3, 0.0, 0.5))
    shift = np.array([2.0, -1.0, 0.5])
    a2 = _prim(1, 0.8, tuple(np.array(a.origin) + shift))
    b2 = _prim(0, 1.1, tuple(np.array(b.origin) + shift))
    np.testing.assert_allclose(shell_eri(a2, b2, a2, b2), shell_eri(a, b, a, b), atol=1e-12)


def test_spherical_shells_rejected():
    shell = Shell([1.0], [Contraction(1, True, (1.0,))], (0.0, 0.0, 0.0))
    with pytest.raises(ValueError):
        shell_overlap(shell, shell)