"""Integrals over contracted Cartesian Gaussian shells (McMurchie-Davidson scheme).

Functions within a shell are ordered by contraction, then for angular momentum
``l`` by powers ``(i, j, k)`` with ``i`` from ``l`` down to 0 and ``j`` from
``l - i`` down to 0.
"""

import math

import numpy as np
from scipy.special import gamma, gammainc

_SMALL_T = 1e-10


def boys(n, t):
    """Return the Boys function F_n(t) for integer ``n >= 0`` and ``t >= 0``."""
    if n < 0:
        raise ValueError("Boys function order must be non-negative.")
    if t < 0:
        raise ValueError("Boys function argument must be non-negative.")
    if t < _SMALL_T:
        return 1.0 / (2 * n + 1) - t / (2 * n + 3)
    a = n + 0.5
    return float(gamma(a) * gammainc(a, t) / (2.0 * t ** a))


def cartesian_powers(l):
    """Return the Cartesian exponent triples of angular momentum ``l`` in shell order."""
    if l < 0:
        raise ValueError("Angular momentum must be non-negative.")
    return [(i, j, l - i - j) for i in range(l, -1, -1) for j in range(l - i, -1, -1)]


def _layout(shell):
    """Return the powers (nf, 3) and contraction coefficients (nf, nprim) of a shell."""
    powers, coeffs = [], []
    for contraction in shell.contractions:
        if contraction.pure:
            raise ValueError("Only Cartesian shells are supported.")
        for triple in cartesian_powers(contraction.l):
            powers.append(triple)
            coeffs.append(contraction.coeff)
    return (
        np.array(powers, dtype=int).reshape(-1, 3),
        np.array(coeffs, dtype=float).reshape(len(powers), shell.nprim),
    )


def _hermite_e(la, lb, a, b, xa, xb):
    """Hermite expansion coefficients E[i, j, t] along one Cartesian axis."""
    p = a + b
    xpa = b * (xb - xa) / p
    xpb = a * (xa - xb) / p
    half = 0.5 / p
    tdim = la + lb + 2
    rising = np.arange(1, tdim)
    e = np.zeros((la + 1, lb + 1, tdim))
    e[0, 0, 0] = math.exp(-a * b / p * (xa - xb) ** 2)
    for i in range(la + 1):
        for j in range(lb + 1):
            if i == 0 and j == 0:
                continue
            prev, shift = (e[i - 1, 0], xpa) if j == 0 else (e[i, j - 1], xpb)
            cur = shift * prev
            cur[1:] += half * prev[:-1]
            cur[:-1] += rising * prev[1:]
            e[i, j] = cur
    return e


def _hermite_r(lmax, alpha, pc):
    """Hermite Coulomb integrals R[t, u, v] (order 0) for t + u + v <= lmax."""
    xyz = [float(c) for c in pc]
    arg = alpha * sum(c * c for c in xyz)
    upper = None
    for n in range(lmax, -1, -1):
        cur = np.zeros((lmax + 1,) * 3)
        cur[0, 0, 0] = (-2.0 * alpha) ** n * boys(n, arg)
        for t in range(lmax - n + 1):
            for u in range(lmax - n + 1 - t):
                for v in range(lmax - n + 1 - t - u):
                    idx = [t, u, v]
                    if not any(idx):
                        continue
                    axis = next(k for k in range(3) if idx[k])
                    idx[axis] -= 1
                    val = xyz[axis] * upper[tuple(idx)]
                    if idx[axis] > 0:
                        idx[axis] -= 1
                        val += (idx[axis] + 1) * upper[tuple(idx)]
                    cur[t, u, v] = val
        upper = cur
    return upper


def _pick(table, pa, pb, axis):
    """Select table[pa[f, axis], pb[g, axis], ...] for all function pairs (f, g)."""
    return table[pa[:, axis][:, None], pb[:, axis][None, :]]


def _pairs(a, b, extra=0):
    """Return both shells' powers and, per primitive pair, (beta, p, P, weights, E tables)."""
    pa, ca = _layout(a)
    pb, cb = _layout(b)
    origin_a, origin_b = np.array(a.origin), np.array(b.origin)
    prims = []
    for alpha, wa in zip(a.exponents, ca.T):
        for beta, wb in zip(b.exponents, cb.T):
            p = alpha + beta
            tables = [
                _hermite_e(a.max_l, b.max_l + extra, alpha, beta, xa, xb)
                for xa, xb in zip(a.origin, b.origin)
            ]
            center = (alpha * origin_a + beta * origin_b) / p
            prims.append((beta, p, center, np.outer(wa, wb), tables))
    return pa, pb, prims


def _hermite_product(pa, pb, weights, tables, top):
    """Weighted Hermite tensor (na, nb, top, top, top) of one primitive pair."""
    ex, ey, ez = (_pick(t[:, :, :top], pa, pb, axis) for axis, t in enumerate(tables))
    return (
        weights[:, :, None, None, None]
        * ex[:, :, :, None, None]
        * ey[:, :, None, :, None]
        * ez[:, :, None, None, :]
    )


def shell_overlap(a, b):
    """Overlap integrals between the functions of two shells, shape (na, nb)."""
    pa, pb, prims = _pairs(a, b)
    result = np.zeros((len(pa), len(pb)))
    for _, p, _, weights, tables in prims:
        sx, sy, sz = (_pick(t[:, :, 0], pa, pb, axis) for axis, t in enumerate(tables))
        result += weights * sx * sy * sz * (math.pi / p) ** 1.5
    return result


def _kinetic_1d(s, beta, lb):
    """One-dimensional kinetic integrals from overlaps with raised ket powers."""
    j = np.arange(lb + 1)
    t = beta * (2 * j + 1) * s[:, j] - 2.0 * beta * beta * s[:, j + 2]
    if lb >= 2:
        t[:, 2:] -= 0.5 * (j[2:] * (j[2:] - 1)) * s[:, : lb - 1]
    return t


def shell_kinetic(a, b):
    """Kinetic energy integrals between the functions of two shells."""
    pa, pb, prims = _pairs(a, b, extra=2)
    result = np.zeros((len(pa), len(pb)))
    for beta, p, _, weights, tables in prims:
        root = math.sqrt(math.pi / p)
        s1d = [t[:, :, 0] * root for t in tables]
        sx, sy, sz = (_pick(s, pa, pb, axis) for axis, s in enumerate(s1d))
        tx, ty, tz = (
            _pick(_kinetic_1d(s, beta, b.max_l), pa, pb, axis) for axis, s in enumerate(s1d)
        )
        result += weights * (tx * sy * sz + sx * ty * sz + sx * sy * tz)
    return result


def shell_nuclear(a, b, charges):
    """Nuclear attraction integrals for point charges given as (Z, (x, y, z)) pairs."""
    charges = [(float(z), np.asarray(pos, dtype=float)) for z, pos in charges]
    pa, pb, prims = _pairs(a, b)
    top = a.max_l + b.max_l + 1
    result = np.zeros((len(pa), len(pb)))
    for _, p, center, weights, tables in prims:
        herm = _hermite_product(pa, pb, weights, tables, top)
        for z, pos in charges:
            r = _hermite_r(top - 1, p, center - pos)
            result -= z * 2.0 * math.pi / p * np.einsum("abtuv,tuv->ab", herm, r)
    return result


def shell_eri(a, b, c, d):
    """Electron repulsion integrals (ab|cd), shape (na, nb, nc, nd)."""
    lab = a.max_l + b.max_l
    lcd = c.max_l + d.max_l
    pa, pb, bra = _pairs(a, b)
    pc, pd, ket = _pairs(c, d)
    k = np.arange(lcd + 1)
    sign = (-1.0) ** (k[:, None, None] + k[None, :, None] + k[None, None, :])
    bra_h = [(p, P, _hermite_product(pa, pb, w, t, lab + 1)) for _, p, P, w, t in bra]
    ket_h = [(q, Q, _hermite_product(pc, pd, w, t, lcd + 1) * sign) for _, q, Q, w, t in ket]
    shifted = np.add.outer(np.arange(lab + 1), k)
    idx = (
        shifted[:, :, None, None, None, None],
        shifted[None, None, :, :, None, None],
        shifted[None, None, None, None, :, :],
    )
    result = np.zeros((len(pa), len(pb), len(pc), len(pd)))
    for p, p_center, p_herm in bra_h:
        for q, q_center, q_herm in ket_h:
            r6 = _hermite_r(lab + lcd, p * q / (p + q), p_center - q_center)[idx]
            prefactor = 2.0 * math.pi ** 2.5 / (p * q * math.sqrt(p + q))
            result += prefactor * np.einsum("abtuv,cdTUV,tTuUvV->abcd", p_herm, q_herm, r6)
    return result