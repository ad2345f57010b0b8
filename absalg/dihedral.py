from typing import Self
import logging
import math

from .element import GroupElement
from .errors import DegreeMismatch, InvalidPolygon
from .group import Group
from .permutation import Permutation

__all__ = ['Dihedral']

logger = logging.getLogger(__name__)


def _check_sides(n: int):
	if not isinstance(n, int):
		raise TypeError(f'object {n!r} is not an int')
	if n < 1:
		logger.debug('rejected polygon with %d sides', n)
		raise InvalidPolygon(f'a polygon needs at least one side, got {n}')


# DIHEDRAL GROUP
# --------------

class Dihedral(GroupElement):
	'''
	symmetry of a regular n-gon (dihedral group D_n, of order 2n).

	elements are written `r^k s^b`: first reflect (if b = 1) across the axis
	through vertex 0, then rotate k steps. this is the semidirect product
	Z_n ⋊ Z_2, where the reflection inverts rotations (`s r = r⁻¹ s`):

		(r^a s^b) * (r^c s^d) = r^(a + (-1)^b c) s^(b + d)
	'''

	_rotation: int
	_reflection: bool
	_n: int

	def __init__(self, rotation: int, reflection: bool, n: int):
		_check_sides(n)
		if not isinstance(rotation, int):
			raise TypeError(f'object {rotation!r} is not an int')
		self._rotation = rotation % n
		self._reflection = bool(reflection)
		self._n = n

	@property
	def rotation(self) -> int:
		return self._rotation

	@property
	def reflection(self) -> bool:
		return self._reflection

	@property
	def n(self) -> int:
		''' number of sides of the polygon '''
		return self._n

	def _cmpkey(self):
		return (self.n, self.reflection, self.rotation)

	def _check_compatible(self, other: Self):
		if self.n != other.n:
			logger.debug('polygon mismatch: %d != %d', self.n, other.n)
			raise DegreeMismatch(f'polygon mismatch: {self.n} != {other.n} sides')

	# construction

	@classmethod
	def identity(cls, n: int) -> Self:
		return cls(0, False, n)

	@classmethod
	def generators(cls, n: int) -> tuple[Self, Self]:
		''' the rotation `r` by one step and the reflection `s` '''
		return cls(1, False, n), cls(0, True, n)

	@classmethod
	def generate_group(cls, n: int) -> Group[Self]:
		''' all 2n symmetries: rotations first, then reflections '''
		_check_sides(n)
		return Group._trusted(
			cls(k, b, n) for b in (False, True) for k in range(n)
		)

	# formatting

	def __repr__(self):
		return f'{type(self).__name__}({self.rotation}, {self.reflection}, {self.n})'

	def __str__(self):
		if not self:
			return 'e'
		parts = []
		if self.rotation:
			parts.append('r' if self.rotation == 1 else f'r^{self.rotation}')
		if self.reflection:
			parts.append('s')
		return ' '.join(parts)

	# core group operations

	def _id(self) -> Self:
		return type(self)(0, False, self.n)

	def _mul(self, other: Self) -> Self:
		turn = -other.rotation if self.reflection else other.rotation
		return type(self)(self.rotation + turn, self.reflection != other.reflection, self.n)

	@property
	def inverse(self) -> Self:
		if self.reflection:
			return self
		return type(self)(-self.rotation, False, self.n)

	# other operations

	def order(self) -> int:
		if self.reflection:
			return 2
		return self.n // math.gcd(self.n, self.rotation)

	def to_permutation(self) -> Permutation:
		'''
		action on the polygon's vertices 0..n-1: vertex i goes to
		`(-1)^b i + k (mod n)`. this is a homomorphism into S_n, injective for n >= 3.
		'''
		sign = -1 if self.reflection else 1
		return Permutation( (sign * i + self.rotation) % self.n for i in range(self.n) )
