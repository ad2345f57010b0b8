from typing import Self
from typing import Iterator
import itertools
import logging
import math

from .element import GroupElement
from .errors import DegreeMismatch, EmptyGroup, GroupTooLarge
from .group import Group

__all__ = ['DirectProduct']

logger = logging.getLogger(__name__)


# DIRECT PRODUCT
# --------------

class DirectProduct(GroupElement):
	'''
	element of a direct product of groups, with tuple shape.

	components may be of any element class; two products are compatible when
	they have the same amount of components and each pair of components is.
	ordering matches Python's lexicographical tuple comparison.
	'''

	_value: tuple[GroupElement, ...]

	def __init__(self, *value: GroupElement):
		'''
		construct an element of the product from one element of each factor.
		'''
		if not value:
			raise EmptyGroup('a direct product needs at least one component')
		for x in value:
			if not isinstance(x, GroupElement):
				raise TypeError(f'object {x!r} is not a group element')
		self._value = value

	@property
	def value(self) -> tuple[GroupElement, ...]:
		''' underlying value '''
		return self._value

	def _cmpkey(self):
		return tuple( (type(x).__name__, x._cmpkey()) for x in self._value )

	def _check_compatible(self, other: Self):
		if len(self) != len(other):
			logger.debug('component count mismatch: %d != %d', len(self), len(other))
			raise DegreeMismatch(f'component count mismatch: {len(self)} != {len(other)}')
		for a, b in zip(self, other):
			if type(a) is not type(b):
				raise TypeError(f'cannot operate {type(a).__name__} with {type(b).__name__}')
			a._check_compatible(b)

	@classmethod
	def generate_group(cls, *groups: Group) -> Group[Self]:
		''' the product of the given groups, enumerated lexicographically '''
		if not groups:
			raise EmptyGroup('a direct product needs at least one factor')
		order = math.prod(map(len, groups))
		if order > Group.MAX_ORDER:
			logger.debug('refusing to enumerate a product of order %d', order)
			raise GroupTooLarge(f'product of order {order} exceeds {Group.MAX_ORDER} elements')
		product = Group._trusted( cls(*xs) for xs in itertools.product(*groups) )
		if not all(g._closed for g in groups):
			product._closed = None
		return product

	# formatting

	def __repr__(self):
		return f'{type(self).__name__}(' + ', '.join(map(repr, self._value)) + ')'

	def __str__(self):
		return '(' + ', '.join(map(str, self._value)) + ')'

	# pass sequence protocol to underlying tuple

	def __len__(self, *a, **k):
		return type(self.value).__len__(self.value, *a, **k)
	def __getitem__(self, *a, **k):
		return type(self.value).__getitem__(self.value, *a, **k)
	def __iter__(self, *a, **k) -> Iterator[GroupElement]:
		return type(self.value).__iter__(self.value, *a, **k)

	# core group operations

	def _id(self) -> Self:
		return type(self)(*( x.ID for x in self ))

	def _mul(self, other: Self) -> Self:
		return type(self)(*( a._mul(b) for a, b in zip(self, other) ))

	@property
	def inverse(self) -> Self:
		return type(self)(*( a.inverse for a in self ))

	# other operations

	def _pow(self, x: int) -> Self:
		return type(self)(*( a ** x for a in self ))

	def order(self) -> int:
		return math.lcm(*( a.order() for a in self ))
