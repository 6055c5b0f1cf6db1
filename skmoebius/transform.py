"""
.. currentmodule:: skmoebius.transform

========================================
transform (:mod:`skmoebius.transform`)
========================================

Provides the Moebius transform over an arbitrary algebra.

A Moebius (fractional-linear) transform maps a point `x` of an algebra to

.. math::

    \\frac{a x + b}{c x + d}

It is the action of the 2x2 matrix :math:`[[a, b], [c, d]]` on `x`, and
composing two transforms is multiplying their matrices.

Associativity caveat
--------------------
:meth:`Moebius.chain` relies on the associativity of the algebra's
multiplication. Over reals, complex numbers and quaternions the chained
transform acts like the sequential application of its factors. Over
octonions it is still computable, but the two results differ.

Contracts
=========
.. autosummary::
   :toctree: generated/

   Transform
   Chain

Moebius Class
=============
.. autosummary::
   :toctree: generated/

   Moebius

Misc
====
.. autosummary::
   :toctree: generated/

   DegenerateTransformError

"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Generic, Sequence, Tuple, TypeVar

import numpy as npy

from .constants import ALMOST_ZERO

__all__ = ['Transform', 'Chain', 'Moebius', 'DegenerateTransformError']

logger = logging.getLogger(__name__)

A = TypeVar('A')


class DegenerateTransformError(ValueError):
    """Raised if a transform's coefficient matrix is singular
    """
    pass


class Transform(ABC, Generic[A]):
    """
    Maps points of an algebra to points of the same algebra.
    """

    @abstractmethod
    def apply(self, x: A) -> A:
        pass


class Chain(ABC, Generic[A]):
    """
    Composes two transforms into an equivalent single one.
    """

    @abstractmethod
    def chain(self, other: Chain[A]) -> Chain[A]:
        pass


def _is_small(x, tol: float) -> bool:
    return bool(abs(x) <= tol)


def _has_array(*xs) -> bool:
    return any(isinstance(x, npy.ndarray) for x in xs)


def _pivot_a(a, b, c, d) -> tuple:
    # Schur complement of a
    ai = 1 / a
    si = 1 / (d - c * ai * b)
    return (ai + ai * b * si * c * ai, -(ai * b * si), -(si * c * ai), si)


def _pivot_c(a, b, c, d) -> tuple:
    # rows swapped, Schur complement of c
    ci = 1 / c
    si = 1 / (b - a * ci * d)
    return (-(ci * d * si), ci + ci * d * si * a * ci, si, -(si * a * ci))


def _is_sequence(x) -> bool:
    return isinstance(x, (list, tuple, npy.ndarray))


class Moebius(Transform[A], Chain[A]):
    """
    A Moebius transform with coefficients `a`, `b`, `c`, `d`.

    The coefficients may be any values supporting ``+``, ``*`` and ``/``:
    python numbers, numpy arrays, or elements of :mod:`skmoebius.algebra`.
    Non-degeneracy is not checked by the constructor, use :meth:`validated`
    for that. Instances are immutable, every operation returns a new one.

    Examples
    --------
    >>> m = Moebius(2, 0, 0, 1)
    >>> m.apply(3)
    6.0
    >>> m.chain(m).coefficients
    (4, 0, 0, 1)
    """

    def __init__(self, a: A, b: A, c: A, d: A) -> None:
        self._a = a
        self._b = b
        self._c = c
        self._d = d

    @classmethod
    def validated(cls, a: A, b: A, c: A, d: A,
                  tol: float = ALMOST_ZERO) -> Moebius[A]:
        """
        Create a transform, refusing a singular coefficient matrix.

        Raises
        ------
        DegenerateTransformError
            if :meth:`is_degenerate` holds for the coefficients.
        """
        out = cls(a, b, c, d)
        if out.is_degenerate(tol=tol):
            raise DegenerateTransformError(
                'coefficient matrix of %r is singular' % (out,))
        return out

    @classmethod
    def from_matrix(cls, h) -> Moebius:
        """
        Create a transform from its coefficient matrix.

        Parameters
        ----------
        h : 2x2 array-like, or sequence of 4 values
            ``[[a, b], [c, d]]`` or ``[a, b, c, d]``.
        """
        h = list(h)
        if len(h) == 2 and all(_is_sequence(row) and len(row) == 2 for row in h):
            (a, b), (c, d) = h
        elif len(h) == 4 and not any(_is_sequence(x) for x in h):
            a, b, c, d = h
        else:
            raise ValueError('expected a 2x2 matrix or 4 coefficients')
        return cls(a, b, c, d)

    @classmethod
    def identity(cls, one=1, zero=0) -> Moebius:
        """
        The identity transform, built from the algebra's `one` and `zero`.
        """
        return cls(one, zero, zero, one)

    @classmethod
    def from_points(cls, z: Sequence, w: Sequence,
                    tol: float = ALMOST_ZERO) -> Moebius:
        r"""
        The unique transform mapping three points onto three points.

        Each triplet is sent to :math:`(0, 1, \infty)` through its
        cross-ratio normal form

        .. math::

            T_z(x) = \frac{(x - z_0)(z_1 - z_2)}{(x - z_2)(z_1 - z_0)}

        and the result is :math:`T_w^{-1} \circ T_z`. Only valid for
        commutative algebras, such as complex numbers.

        Parameters
        ----------
        z : sequence of 3 distinct points, source
        w : sequence of 3 distinct points, destination
        tol : float
            threshold under which two points coincide

        Returns
        -------
        m : Moebius
            with ``m.apply(z[k]) == w[k]``

        See Also
        --------
        inverse
        """
        if len(z) != 3 or len(w) != 3:
            raise ValueError('from_points needs exactly three points on each side')
        tz = cls._normal_form(*z)
        tw = cls._normal_form(*w)
        if tz.is_degenerate(tol=tol) or tw.is_degenerate(tol=tol):
            raise ValueError('the three points on each side must be distinct')
        logger.debug('normal forms: source %r, destination %r', tz, tw)
        return tw.inverse(tol=tol).chain(tz)

    @classmethod
    def _normal_form(cls, z0, z1, z2) -> Moebius:
        return cls(z1 - z2, -z0 * (z1 - z2), z1 - z0, -z2 * (z1 - z0))

    @property
    def a(self) -> A:
        return self._a

    @property
    def b(self) -> A:
        return self._b

    @property
    def c(self) -> A:
        return self._c

    @property
    def d(self) -> A:
        return self._d

    @property
    def coefficients(self) -> Tuple[A, A, A, A]:
        return (self._a, self._b, self._c, self._d)

    @property
    def h(self) -> npy.ndarray:
        """
        Coefficient matrix ``[[a, b], [c, d]]`` as a numpy object array.
        """
        out = npy.empty((2, 2), dtype=object)
        out[0, 0] = self._a
        out[0, 1] = self._b
        out[1, 0] = self._c
        out[1, 1] = self._d
        return out

    def __repr__(self) -> str:
        return 'Moebius(%r, %r, %r, %r)' % self.coefficients

    def __call__(self, x: A) -> A:
        return self.apply(x)

    def apply(self, x: A) -> A:
        """
        Evaluate the transform at `x`.

        Computes ``(a*x + b) / (c*x + d)`` with the coefficient on the left
        of each product. Whatever the algebra yields for a vanishing
        denominator is returned or raised unchanged.
        """
        return (self._a * x + self._b) / (self._c * x + self._d)

    def chain(self, other: Moebius[A]) -> Moebius[A]:
        """
        Compose with `other`, applied first.

        The result has the coefficient matrix ``self.h @ other.h``. For an
        associative algebra ``m.chain(n).apply(x)`` equals
        ``m.apply(n.apply(x))`` up to rounding. For a non-associative
        algebra, such as octonions, the two sides differ and the chained
        transform is not a substitute for sequential application.
        """
        return self.__class__(
            self._a * other._a + self._b * other._c,
            self._a * other._b + self._b * other._d,
            self._c * other._a + self._d * other._c,
            self._c * other._b + self._d * other._d,
        )

    def is_degenerate(self, tol: float = ALMOST_ZERO) -> bool:
        """
        Test whether the coefficient matrix is singular.

        If `c` vanishes the matrix is singular when `a` or `d` does.
        Otherwise it is singular when ``a * c**-1 * d - b`` vanishes,
        which for commutative algebras is ``a*d - b*c == 0``. The
        criterion holds in any associative division algebra.

        With numpy array coefficients the criterion is evaluated entry by
        entry, and the transform is degenerate if any entry is.

        Parameters
        ----------
        tol : float
            absolute threshold applied to ``abs()`` of the elements
        """
        a, b, c, d = self.coefficients
        if _has_array(a, b, c, d):
            a, b, c, d = (npy.asarray(x) for x in (a, b, c, d))
            with npy.errstate(all='ignore'):
                reduced = abs(a * (1 / c) * d - b) <= tol
            singular = npy.where(abs(c) <= tol,
                                 (abs(a) <= tol) | (abs(d) <= tol), reduced)
            return bool(npy.any(singular))
        if _is_small(c, tol):
            return _is_small(a, tol) or _is_small(d, tol)
        return _is_small(a * (1 / c) * d - b, tol)

    def inverse(self, tol: float = ALMOST_ZERO) -> Moebius[A]:
        """
        The inverse transform.

        Inverts the coefficient matrix by block elimination, pivoting on
        `a` when it is invertible and on `c` otherwise. Requires an
        associative algebra, in which ``self.chain(self.inverse())`` acts
        as the identity. With numpy array coefficients the pivot is
        chosen entry by entry.

        Raises
        ------
        DegenerateTransformError
            if the transform is degenerate.
        """
        if self.is_degenerate(tol=tol):
            raise DegenerateTransformError(
                'cannot invert degenerate transform %r' % (self,))
        a, b, c, d = self.coefficients
        if _has_array(a, b, c, d):
            a, b, c, d = (npy.asarray(x) for x in (a, b, c, d))
            with npy.errstate(all='ignore'):
                on_a = _pivot_a(a, b, c, d)
                on_c = _pivot_c(a, b, c, d)
            small_a = abs(a) <= tol
            return self.__class__(*(npy.where(small_a, p, q)
                                    for p, q in zip(on_c, on_a)))
        if not _is_small(a, tol):
            return self.__class__(*_pivot_a(a, b, c, d))
        logger.debug('a vanishes, pivoting on c')
        return self.__class__(*_pivot_c(a, b, c, d))

    def inverse_apply(self, x: A, tol: float = ALMOST_ZERO) -> A:
        """
        Evaluate the inverse transform at `x`.

        See Also
        --------
        inverse
        """
        return self.inverse(tol=tol).apply(x)
