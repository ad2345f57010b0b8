from typing import Self
from typing import Any, ClassVar, Iterable, Iterator, Optional
import collections
import copy
import logging
import math

from .element import GroupElement, circular_pairwise
from .errors import DegreeMismatch, GroupTooLarge, IndexOutOfRange, InvalidMapping, NonDisjointCycles
from .group import Group

__all__ = ['Permutation']

logger = logging.getLogger(__name__)


def _check_degree(degree: int):
	if not isinstance(degree, int):
		raise TypeError(f'object {degree!r} is not an int')
	if degree < 0:
		raise ValueError(f'degree must be nonnegative, got {degree}')


# PERMUTATION
# -----------

class Permutation(GroupElement):
	'''
	permutation of N_n = {0, ..., n-1}, stored as the tuple of images:
	`mapping[i]` is where `i` is sent. n is the *degree*.

	the implemented operation follows usual left action notation, meaning
	`a * b` is equivalent to the composition `a ∘ b` of their associated
	functions (b is performed first, then a): `(a * b)[i] == a[b[i]]`.

	elements of the same degree are ordered lexicographically by mapping,
	which matches the rank (big-endian factorial number system, see `rank()`)
	and puts the identity first:

		(0, 1, ..., n-1, n) < (0, 1, ..., n, n-1) < ... < (n, n-1, ..., 1, 0)
	'''

	__slots__ = ('_mapping',)

	MAX_DEGREE: ClassVar[int] = 9
	''' largest degree `generate_group()` accepts unless told otherwise (9! = 362880) '''

	_mapping: tuple[int, ...]

	def __init__(self, mapping: Iterable[int]):
		'''
		construct a permutation from its images. the mapping must be a bijection
		of 0..n-1 (each value appears exactly once) or InvalidMapping is raised.
		'''
		mapping = tuple(mapping)
		for k in mapping:
			if not isinstance(k, int):
				raise TypeError(f'object {k!r} is not an int')
		n = len(mapping)
		if not (len(set(mapping)) == n and all(0 <= k < n for k in mapping)):
			logger.debug('invalid mapping: %r', mapping)
			raise InvalidMapping(f'{mapping} is not a bijection of 0..{n - 1}')
		self._mapping = mapping

	@classmethod
	def _trusted(cls, mapping: tuple[int, ...]) -> Self:
		''' skip validation, for mappings that are bijective by construction '''
		result = cls.__new__(cls)
		result._mapping = mapping
		return result

	@property
	def mapping(self) -> tuple[int, ...]:
		''' underlying permutation value (tuple of images) '''
		return self._mapping

	@property
	def degree(self) -> int:
		return len(self._mapping)

	def _cmpkey(self):
		return self._mapping

	def _check_compatible(self, other: Self):
		if self.degree != other.degree:
			logger.debug('degree mismatch: %d != %d', self.degree, other.degree)
			raise DegreeMismatch(f'degree mismatch: {self.degree} != {other.degree}')

	# construction

	@classmethod
	def from_mapping(cls, mapping: Iterable[int]) -> Self:
		''' same as the constructor '''
		return cls(mapping)

	@classmethod
	def identity(cls, degree: int) -> Self:
		_check_degree(degree)
		return cls._trusted(tuple(range(degree)))

	@classmethod
	def from_cycles(cls, cycles: Iterable[Iterable[int]], degree: int) -> Self:
		'''
		construct a permutation of the given degree from disjoint cycles.

		each cycle `[c0, c1, ..., ck]` sends c0 to c1, c1 to c2, ... and ck back
		to c0. indices not mentioned in any cycle are fixed points.

		raises IndexOutOfRange if an index isn't in 0..degree-1, and
		NonDisjointCycles if an index appears more than once (in the same
		cycle or across cycles).
		'''
		_check_degree(degree)
		result = list(range(degree))
		seen: set[int] = set()
		for cycle in cycles:
			cycle = list(cycle)
			for i in cycle:
				if not isinstance(i, int):
					raise TypeError(f'object {i!r} is not an int')
				if not (0 <= i < degree):
					logger.debug('cycle index %d out of range for degree %d', i, degree)
					raise IndexOutOfRange(f'cycle index {i} out of range for degree {degree}')
				if i in seen:
					logger.debug('index %d repeated in cycles', i)
					raise NonDisjointCycles(f'index {i} appears in more than one place')
				seen.add(i)
			for i, j in circular_pairwise(cycle):
				result[i] = j
		return cls._trusted(tuple(result))

	@classmethod
	def transposition(cls, i: int, j: int, degree: int) -> Self:
		''' the permutation swapping `i` and `j` '''
		return cls.from_cycles([[i, j]], degree)

	@classmethod
	def full_cycle(cls, degree: int) -> Self:
		''' the full cycle permutation, `f(i) = (i + 1) % degree` '''
		_check_degree(degree)
		return cls._trusted(tuple( (i+1) % degree for i in range(degree) ))

	@classmethod
	def reversal(cls, degree: int) -> Self:
		''' the order reversing permutation, `f(i) = (degree - 1) - i` '''
		return cls._trusted(cls.identity(degree).mapping[::-1])

	# formatting

	def format(self, base: int=0) -> str:
		'''
		disjoint cycle notation, fixed points omitted, e.g. `(0 2 4)(1 3)`.
		the identity is `()`. `base=1` numbers the points from 1 instead of 0.
		'''
		cycles = self.to_cycles()
		if not cycles:
			return '()'
		return ''.join( '(' + ' '.join(str(i + base) for i in c) + ')' for c in cycles )

	def __str__(self):
		return self.format()

	def __repr__(self):
		name = type(self).__name__
		if not self:
			return f'{name}.identity({self.degree})'
		return f'{name}.from_cycles({self.to_cycles()!r}, {self.degree})'

	# core group operations

	def _id(self) -> Self:
		return type(self)._trusted(tuple(range(self.degree)))

	def _mul(self, other: Self) -> Self:
		return type(self)._trusted(tuple( self._mapping[j] for j in other._mapping ))

	@property
	def inverse(self) -> Self:
		result = [-1] * self.degree
		for i, j in enumerate(self._mapping):
			result[j] = i
		return type(self)._trusted(tuple(result))

	# rank (bijection with 0..n!-1)

	def rank(self) -> int:
		''' lexicographic index of this permutation among those of its degree '''
		n = self.degree
		index = 0; seen = 0
		for i, j in enumerate(self._mapping):
			diff = i - (seen >> j).bit_count()
			seen |= 1 << j
			index = index * (n - i) + (j - diff)
		return index

	@classmethod
	def from_rank(cls, index: int, degree: int) -> Self:
		''' inverse of `rank()` '''
		_check_degree(degree)
		if not isinstance(index, int):
			raise TypeError(f'element indices must be integers, not {type(index)}')
		if not (0 <= index < math.factorial(degree)):
			raise IndexError(f'element index {index} out of range')
		value = []
		for i in range(degree):
			index, j = divmod(index, i + 1)
			value.append(j)
			for i2 in range(i):
				if value[i2] >= j:
					value[i2] += 1
		return cls._trusted(tuple(reversed(value)))

	# whole groups

	@classmethod
	def _enumerate(cls, degree: int) -> Iterator[Self]:
		''' all permutations of the given degree, in rank order '''
		options = collections.deque(range(degree))
		value: list[int] = []
		def generator():
			if not len(options):
				return (yield value)
			value.append(options.popleft())
			for i in range(len(options)):
				yield from generator()
				value[-1], options[i] = options[i], value[-1]
			yield from generator()
			options.append(value.pop())
		return (cls._trusted(tuple(x)) for x in generator())

	@classmethod
	def _check_ceiling(cls, degree: int, max_degree: Optional[int]):
		_check_degree(degree)
		limit = cls.MAX_DEGREE if max_degree is None else max_degree
		if degree > limit:
			logger.debug('refusing to enumerate S_%d (ceiling is %d)', degree, limit)
			raise GroupTooLarge(f'degree {degree} exceeds the ceiling of {limit} ({degree}! elements)')

	@classmethod
	def generate_group(cls, degree: int, max_degree: Optional[int]=None) -> Group[Self]:
		'''
		the full symmetric group S_n (all n! permutations of the given degree),
		in rank order, so the identity comes first.

		the element count grows factorially, so degrees above `max_degree`
		(default `MAX_DEGREE`) are refused with GroupTooLarge.
		'''
		cls._check_ceiling(degree, max_degree)
		group = Group._trusted(cls._enumerate(degree))
		logger.debug('generated S_%d with %d elements', degree, len(group))
		return group

	@classmethod
	def alternating_group(cls, degree: int, max_degree: Optional[int]=None) -> Group[Self]:
		''' the alternating group A_n (even permutations of the given degree), in rank order '''
		cls._check_ceiling(degree, max_degree)
		group = Group._trusted(p for p in cls._enumerate(degree) if p.is_even())
		logger.debug('generated A_%d with %d elements', degree, len(group))
		return group

	# cycle decomposition

	def cycles_iter(self) -> Iterator[list[int]]:
		''' like to_cycles(fixpoints=True), but yields an iterator over the discovered cycles '''
		seen = 0
		while True:
			# consult start of next cycle to extract
			pending = ~seen
			start_bit = pending & ~(pending - 1)
			start = start_bit.bit_length() - 1
			if not (start < self.degree):
				break
			# extract cycle
			cursor, cycle = start, []
			while True:
				cycle.append(cursor)
				seen |= 1 << cursor
				cursor = self._mapping[cursor]
				if cursor == start: break
			yield cycle

	def to_cycles(self, fixpoints=False, sort=False) -> list[list[int]]:
		'''
		expresses this permutation as a (normalized) product of disjoint cycles.

		normalization: each cycle begins with its minimal element, and cycles
		are ordered by their minimal element.

		parameters:
		 - fixpoints: if True, keep 1-cycles (fixed points).
		 - sort: if True, sort cycles by descending size (cycles of the
		   same size are still ordered by minimal element).
		'''
		cycles = self.cycles_iter()
		if not fixpoints:
			cycles = filter(lambda x: len(x) != 1, cycles)
		if sort:
			cycles = sorted(cycles, key=len, reverse=True)
		return list(cycles)

	# cycle type & derived properties

	def cycle_type(self) -> tuple[int, ...]:
		''' returns the cycle type (conjugation class) of this permutation (a partition of the degree) in descending order '''
		return tuple(sorted(map(len, self.cycles_iter()), reverse=True))

	def order(self) -> int:
		return math.lcm(*map(len, self.cycles_iter()))

	def sign(self) -> int:
		''' returns the sign (0 → even, 1 → odd) of this permutation '''
		# equivalent to ( degree - len(cycles) ) % 2
		return sum(len(c) - 1 for c in self.cycles_iter()) % 2

	def is_even(self) -> bool:
		return self.sign() == 0

	def _pow(self, x: int) -> Self:
		result = [-1] * self.degree
		for cycle in self.cycles_iter():
			for i in range(len(cycle)):
				result[cycle[i]] = cycle[(i + x) % len(cycle)]
		return type(self)._trusted(tuple(result))

	# group action

	def __call__(self, x: int) -> int:
		''' interprets this permutation as a function from N_n to N_n '''
		if not (isinstance(x, int) and 0 <= x < self.degree):
			raise IndexOutOfRange(f'point {x!r} out of range for degree {self.degree}')
		return self._mapping[x]

	def __len__(self, *a, **k):
		return type(self._mapping).__len__(self._mapping, *a, **k)
	def __getitem__(self, *a, **k):
		return type(self._mapping).__getitem__(self._mapping, *a, **k)
	def __iter__(self, *a, **k):
		return type(self._mapping).__iter__(self._mapping, *a, **k)

	def apply(self, x: Any) -> Any:
		'''
		creates a shallow copy of the passed container and copies values from
		source to copy using this permutation: the value at position `i` moves
		to position `self(i)`. returns the copy.

		the container must support __getitem__ and __setitem__ at the domain, and
		must support `copy.copy()`.
		'''
		y = copy.copy(x)
		for i, j in enumerate(self._mapping):
			if i == j:
				continue # optimization for common case
			y[j] = x[i]
		return y

	def shuffle(self, x: Any):
		'''
		shuffles the elements of a container, in-place, using this permutation
		(same movement as `apply()`).

		the container must support __getitem__ and __setitem__ at the domain.
		'''
		for cycle in self.cycles_iter():
			if len(cycle) == 1:
				continue # optimization for common case
			v = x[cycle[0]]
			for i in cycle[1:]:
				v, x[i] = x[i], v
			x[cycle[0]] = v
