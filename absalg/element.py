from typing import Self
from abc import ABC, abstractmethod
from typing import Optional, Iterator, Iterable, TypeVar

T = TypeVar('T')

__all__ = ['GroupElement', 'circular_pairwise']


def circular_pairwise(x: Iterable[T]) -> Iterator[tuple[T, T]]:
	''' like pairwise, but with a trailing (last, first) entry '''
	x = iter(x)
	try:
		start = next(x)
	except StopIteration:
		return
	e1 = start
	for e2 in x:
		yield (e1, e2)
		e1 = e2
	yield (e1, start)


# GROUP ELEMENT
# -------------

class GroupElement(ABC):
	'''
	Base class for elements of finite groups.

	A concrete subclass describes a whole family of groups (Z/nZ for every n,
	S_n for every n...) and each instance carries the parameters that select
	its member of the family. Two elements are *compatible* if they belong to
	the same group; combining incompatible elements raises the error chosen by
	`_check_compatible` (ModulusMismatch, DegreeMismatch...).

	Instances are hashable, which means all subclasses are expected to be immutable.
	'''

	__slots__ = ()

	# core group operations:

	@abstractmethod
	def _id(self) -> Self:
		''' the identity element of the group this element belongs to

		internal method; users should use `x.ID` '''

	@abstractmethod
	def _mul(self, other: Self) -> Self:
		''' the group operation

		internal method; users should use `op()` or the `*` operator,
		which validate the other object. '''

	@property
	@abstractmethod
	def inverse(self) -> Self:
		''' inverse element. equivalent to the notation `x ** -1` '''

	def _check_compatible(self, other: Self) -> None:
		'''
		raise if `other` (already known to be of the same class) belongs
		to a different group than this element. the default accepts everything,
		which is right for classes describing a single group.
		'''

	# comparison / equality / hashing

	@abstractmethod
	def _cmpkey(self):
		'''
		internal method to return comparison key, to which comparison & hashing
		methods will delegate. the key must include the parameters of the
		group (so that equal keys imply compatible elements).
		'''

	def __hash__(self):
		return self._cmpkey().__hash__()

	def __eq__(self, other):
		if not isinstance(other, type(self)):
			return NotImplemented
		return self._cmpkey() == other._cmpkey()

	def __ne__(self, other):
		if not isinstance(other, type(self)):
			return NotImplemented
		return self._cmpkey() != other._cmpkey()

	# ordering is only defined between compatible elements

	def __lt__(self, other: Self):
		if not isinstance(other, type(self)):
			return NotImplemented
		self._check_compatible(other)
		return self._cmpkey() < other._cmpkey()

	def __le__(self, other: Self):
		if not isinstance(other, type(self)):
			return NotImplemented
		self._check_compatible(other)
		return self._cmpkey() <= other._cmpkey()

	def __gt__(self, other: Self):
		if not isinstance(other, type(self)):
			return NotImplemented
		self._check_compatible(other)
		return self._cmpkey() > other._cmpkey()

	def __ge__(self, other: Self):
		if not isinstance(other, type(self)):
			return NotImplemented
		self._check_compatible(other)
		return self._cmpkey() >= other._cmpkey()

	# operations provided by the implementation

	@property
	def ID(self) -> Self:
		''' identity of the group this element belongs to '''
		return self._id()

	@property
	def inv(self) -> Self:
		''' short alias of `inverse` '''
		return self.inverse

	def op(self, other: Self) -> Self:
		'''
		the group operation, validated: `other` must be an element of the same
		class (TypeError otherwise) and of the same group (see `_check_compatible`).
		'''
		if not isinstance(other, type(self)):
			raise TypeError(f'cannot operate {type(self).__name__} with {type(other).__name__}')
		self._check_compatible(other)
		return self._mul(other)

	def __bool__(self):
		return self != self.ID

	def __mul__(self, other: Self) -> Self:
		if isinstance(other, type(self)):
			return self.op(other)
		return NotImplemented

	def __rmul__(self, other: Self) -> Self:
		if isinstance(other, type(self)):
			return type(self).op(other, self)
		return NotImplemented

	def __pow__(self, other: int) -> Self:
		if not isinstance(other, int):
			return NotImplemented
		if other == -1:
			# to allow `x ** -1` notation
			return self.inverse
		return self._pow(other)

	def __str__(self):
		return repr(self)

	# optional auxiliary operations

	def order(self) -> int:
		'''
		returns the order of this element (lowest non-zero natural `x`
		satisfying `self ** x == ID`).

		the default implementation multiplies until the identity comes back,
		which always terminates in a finite group. subclasses override it when
		there's a closed formula.
		'''
		ID = self.ID
		power, k = self, 1
		while power != ID:
			power = power._mul(self)
			k += 1
		return k

	def _pow(self, x: int, order_threshold: Optional[int]=4) -> Self:
		'''
		raises an element to an integer power (may be negative). the default
		implementation uses exponentiation by squaring (together with an optional
		inverse), and it may be overriden if there are more efficient ways to calculate
		powers.

		internal method; users should use `self ** x` notation, which validates for
		integers.
		'''
		# for non-small exponents, round to modulo order of the element
		if order_threshold and abs(x) > order_threshold:
			order = self.order()
			if abs(x) >= order:
				x = x % order
		# for negative exponents, invert the base
		if x < 0:
			self = self.inverse
			x = -x
		# exponentiation by squaring
		result = self.ID
		mult = self
		while True:
			if x & 1: result = result._mul(mult)
			x >>= 1
			if not x: break
			mult = mult._mul(mult)
		return result

	def conj(self, other: Self) -> Self:
		''' (left) conjugate an element using this element: equivalent to `self.inv * other * self` '''
		return self.inverse * other * self

	def conj_by(self, other: Self) -> Self:
		''' (left) conjugate this element by `other`: equivalent to `other.inv * self * other` '''
		return type(self).conj(other, self)

	def comm(self, other: Self) -> Self:
		''' obtains a commutator element: equivalent to `self.inv * other.inv * self * other` '''
		return self.inverse * other.inverse * self * other
