"""
.. currentmodule:: skmoebius.algebra

========================================
algebra (:mod:`skmoebius.algebra`)
========================================

Provides the algebra capability contract and the hypercomplex algebras
obtained by Cayley-Dickson doubling of the real numbers.

A Moebius transform only needs its coefficients and points to support
``+``, ``*`` and ``/``. Python numbers and numpy arrays already do;
:class:`Complex`, :class:`Quaternion` and :class:`Octonion` extend the
choice to non-commutative and non-associative algebras.

Algebra Contract
================
.. autosummary::
   :toctree: generated/

   Algebra

Cayley-Dickson Algebras
=======================
.. autosummary::
   :toctree: generated/

   CayleyDickson
   Complex
   Quaternion
   Octonion

"""
from __future__ import annotations

from abc import ABC, abstractmethod
from numbers import Real
from typing import Iterator, Union

import numpy as npy

from .constants import ALMOST_ZERO, RTOL, NumberLike

__all__ = ['Algebra', 'CayleyDickson', 'Complex', 'Quaternion', 'Octonion']


class Algebra(ABC):
    """
    Capability contract of an algebra element.

    Elements must be closed under addition, multiplication and division.
    Division by a non-invertible element is the algebra's own business:
    it may return a non-finite sentinel or raise.
    """

    @abstractmethod
    def __add__(self, other):
        pass

    @abstractmethod
    def __mul__(self, other):
        pass

    @abstractmethod
    def __truediv__(self, other):
        pass


def _conj(x: npy.ndarray) -> npy.ndarray:
    out = -x
    out[0] = x[0]
    return out


def _mul(x: npy.ndarray, y: npy.ndarray) -> npy.ndarray:
    r"""
    Cayley-Dickson product of two component vectors.

    .. math::

        (a, b)(c, d) = (ac - d^*b, da + bc^*)

    """
    n = x.shape[0]
    if n == 1:
        return x * y
    h = n // 2
    a, b = x[:h], x[h:]
    c, d = y[:h], y[h:]
    return npy.concatenate((_mul(a, c) - _mul(_conj(d), b),
                            _mul(d, a) + _mul(b, _conj(c))))


class CayleyDickson(Algebra):
    """
    Element of a real Cayley-Dickson algebra.

    The element is stored as a vector of :attr:`dim` real components, the
    first one being the real part. An element of dimension `2n` is a pair
    ``(lo, hi)`` of elements of dimension `n`, see :meth:`new2`.

    Real scalars can be mixed freely with elements on either side of an
    operator. Mixing two different algebras raises :class:`TypeError`.
    """
    dim = 1
    """
    Number of real components.
    """

    half = None
    """
    Algebra of half dimension, None when the halves are reals.
    """

    commutative = True
    associative = True

    # make numpy scalars defer to the reflected operators
    __array_ufunc__ = None

    def __init__(self, *components: float) -> None:
        """
        Element initializer.

        Parameters
        ----------
        \\*components : real numbers
            components in order, starting with the real part. Missing
            trailing components are zero.

        Examples
        --------
        >>> q = Quaternion(1, 2, 3, 4)
        >>> z = Complex(0, 1)
        """
        if len(components) > self.dim:
            raise ValueError('%s takes at most %i components, got %i' %
                             (type(self).__name__, self.dim, len(components)))
        self._c = npy.zeros(self.dim)
        self._c[:len(components)] = components

    @classmethod
    def from_components(cls, components: NumberLike) -> CayleyDickson:
        """
        Create an element from a vector of exactly :attr:`dim` components.
        """
        components = npy.array(components, dtype=float)
        if components.shape != (cls.dim,):
            raise ValueError('%s needs %i components, got shape %s' %
                             (cls.__name__, cls.dim, components.shape))
        out = cls.__new__(cls)
        out._c = components
        return out

    @classmethod
    def new2(cls, lo, hi) -> CayleyDickson:
        """
        Create an element from its two halves.

        Parameters
        ----------
        lo, hi : element of :attr:`half`, or real number
            the halves. Real numbers are promoted to the half algebra.

        Examples
        --------
        >>> Quaternion.new2(Complex(1, 2), Complex(3, 4))
        Quaternion(1.0, 2.0, 3.0, 4.0)
        """
        return cls.from_components(npy.concatenate((cls._half_components(lo),
                                                    cls._half_components(hi))))

    @classmethod
    def _half_components(cls, x) -> npy.ndarray:
        n = cls.dim // 2
        if cls.half is not None and isinstance(x, cls.half):
            return x._c
        if isinstance(x, Real):
            out = npy.zeros(n)
            out[0] = x
            return out
        raise TypeError('cannot use %r as half of a %s' % (x, cls.__name__))

    @classmethod
    def from_scalar(cls, x: float) -> CayleyDickson:
        return cls(x)

    @classmethod
    def one(cls) -> CayleyDickson:
        return cls(1.)

    @classmethod
    def zero(cls) -> CayleyDickson:
        return cls()

    @property
    def components(self) -> npy.ndarray:
        """
        Copy of the component vector.
        """
        return self._c.copy()

    @property
    def real(self) -> float:
        return float(self._c[0])

    @property
    def lo(self) -> Union[CayleyDickson, float]:
        """
        First half, see :meth:`new2`.
        """
        return self._half(self._c[:self.dim // 2])

    @property
    def hi(self) -> Union[CayleyDickson, float]:
        """
        Second half, see :meth:`new2`.
        """
        return self._half(self._c[self.dim // 2:])

    def _half(self, c: npy.ndarray):
        if self.half is None:
            return float(c[0])
        return self.half.from_components(c)

    def _new(self, c: npy.ndarray) -> CayleyDickson:
        out = self.__class__.__new__(self.__class__)
        out._c = c
        return out

    def _coerce(self, other):
        if type(other) is type(self):
            return other._c
        if isinstance(other, Real):
            out = npy.zeros(self.dim)
            out[0] = other
            return out
        return None

    def __len__(self) -> int:
        return self.dim

    def __iter__(self) -> Iterator[float]:
        return iter(self._c.tolist())

    def __getitem__(self, key):
        return self._c[key].tolist()

    def __repr__(self) -> str:
        return '%s(%s)' % (type(self).__name__,
                           ', '.join(repr(v) for v in self._c.tolist()))

    def __eq__(self, other) -> bool:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return bool(npy.array_equal(self._c, o))

    __hash__ = None

    def __neg__(self) -> CayleyDickson:
        return self._new(-self._c)

    def __add__(self, other) -> CayleyDickson:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._new(self._c + o)

    __radd__ = __add__

    def __sub__(self, other) -> CayleyDickson:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._new(self._c - o)

    def __rsub__(self, other) -> CayleyDickson:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._new(o - self._c)

    def __mul__(self, other) -> CayleyDickson:
        if isinstance(other, Real):
            return self._new(self._c * other)
        if type(other) is not type(self):
            return NotImplemented
        return self._new(_mul(self._c, other._c))

    def __rmul__(self, other) -> CayleyDickson:
        # reals are central, so only the scalar case lands here
        if isinstance(other, Real):
            return self._new(other * self._c)
        return NotImplemented

    def __truediv__(self, other) -> CayleyDickson:
        """
        Right division, ``x / y == x * y.inverse()``.
        """
        if isinstance(other, Real):
            return self._new(self._c / other)
        if type(other) is not type(self):
            return NotImplemented
        return self * other.inverse()

    def __rtruediv__(self, other) -> CayleyDickson:
        if isinstance(other, Real):
            return self.inverse() * other
        return NotImplemented

    def __abs__(self) -> float:
        return float(npy.sqrt(self.norm_sqr()))

    def conjugate(self) -> CayleyDickson:
        return self._new(_conj(self._c))

    def norm_sqr(self) -> float:
        return float(npy.dot(self._c, self._c))

    def inverse(self) -> CayleyDickson:
        """
        Multiplicative inverse, ``conjugate / norm_sqr``.

        The inverse of zero has non-finite components, numpy emits a
        RuntimeWarning.
        """
        return self._new(_conj(self._c) / npy.float64(self.norm_sqr()))

    def isclose(self, other, rtol: float = RTOL,
                atol: float = ALMOST_ZERO) -> bool:
        """
        Test whether ``|self - other| <= atol + rtol * |other|``.
        """
        return abs(self - other) <= atol + rtol * abs(other)


class Complex(CayleyDickson):
    """
    Complex number ``re + im*i``.
    """
    dim = 2

    @property
    def imag(self) -> float:
        return float(self._c[1])

    @classmethod
    def from_complex(cls, z: complex) -> Complex:
        return cls(z.real, z.imag)

    def __complex__(self) -> complex:
        return complex(self._c[0], self._c[1])


class Quaternion(CayleyDickson):
    """
    Quaternion ``w + x*i + y*j + z*k``.

    Associative, but not commutative: ``i*j == k == -j*i``.
    """
    dim = 4
    half = Complex
    commutative = False


class Octonion(CayleyDickson):
    """
    Octonion, a pair of quaternions.

    Neither commutative nor associative. Octonions are only alternative,
    ``(x*x)*y == x*(x*y)``, which is not enough to compose Moebius
    transforms.
    """
    dim = 8
    half = Quaternion
    commutative = False
    associative = False
