from typing import Self
from typing import ClassVar, Generic, Iterable, Iterator, Optional, TypeVar, Union
import collections
import enum
import logging
import math

from .element import GroupElement
from .errors import CosetMismatch, EmptyGroup, GroupTooLarge, NotASubgroup, NotNormal

__all__ = ['Group', 'Coset', 'CosetSide']

logger = logging.getLogger(__name__)

E = TypeVar('E', bound=GroupElement)


def _collect(elements: Iterable[E]) -> dict[E, None]:
	'''
	deduplicate `elements` keeping first-seen order, checking they all are
	instances of one class and belong to the same group.
	'''
	seen: dict[E, None] = {}
	first = None
	for x in elements:
		if not isinstance(x, GroupElement):
			raise TypeError(f'object {x!r} is not a group element')
		if first is None:
			first = x
		elif type(x) is not type(first):
			raise TypeError(f'cannot mix {type(first).__name__} and {type(x).__name__} in one group')
		else:
			first._check_compatible(x)
		seen.setdefault(x)
	if first is None:
		raise EmptyGroup('a group needs at least one element')
	return seen


# GROUP
# -----

class Group(Generic[E]):
	'''
	finite group, stored as an ordered, duplicate-free collection of elements
	of a single element class.

	the container exposes set-like syntax: `len(G)`, `x in G`, `iter(G)` (in
	insertion order) and `G[i]`. it is immutable and hashable; equality compares
	the element sets, ignoring order.

	`Group(elements)` takes the elements as given (only deduplicating), so it may
	hold a subset that is not a group; see `is_closed()`. use `from_generators()`
	to obtain a closed group, or the `generate_group()` constructors of the
	element classes.
	'''

	MAX_ORDER: ClassVar[int] = math.factorial(9)
	''' ceiling on the order reached by `from_generators()` '''

	_elements: tuple[E, ...]
	_positions: dict[E, int]
	_closed: Optional[bool]

	def __init__(self, elements: Iterable[E]):
		self._set(_collect(elements))

	def _set(self, elements: Iterable[E]):
		self._elements = tuple(elements)
		self._positions = { x: i for i, x in enumerate(self._elements) }
		self._closed = None

	@classmethod
	def _trusted(cls, elements: Iterable[E]) -> Self:
		''' build from elements already known to form a group (distinct, compatible and closed) '''
		group = cls.__new__(cls)
		group._set(elements)
		group._closed = True
		return group

	# generation

	@classmethod
	def from_generators(cls, generators: Iterable[E], max_order: Optional[int]=None) -> Self:
		'''
		computes the closure of `generators`: the smallest group containing them.

		this is a fixed point iteration over a worklist seeded with the identity:
		each discovered element is multiplied (on the right) by every generator
		and every generator inverse, and new products are queued until nothing
		new appears. in a finite group every element of the closure is such a
		product, so the result is closed under the operation and inversion.

		the identity comes first and elements follow in breadth-first order.
		raises GroupTooLarge if more than `max_order` elements (default
		`MAX_ORDER`) are discovered.
		'''
		steps = list(_collect(generators))
		limit = cls.MAX_ORDER if max_order is None else max_order
		steps += [g.inverse for g in steps if g.inverse not in steps]

		ID = steps[0].ID
		found: dict[E, None] = { ID: None }
		queue = collections.deque([ID])
		while queue:
			x = queue.popleft()
			for g in steps:
				y = x._mul(g)
				if y in found:
					continue
				found[y] = None
				if len(found) > limit:
					logger.debug('closure exceeded %d elements, giving up', limit)
					raise GroupTooLarge(f'closure exceeds {limit} elements')
				queue.append(y)

		logger.debug('closure of %d generators reached order %d', len(steps), len(found))
		return cls._trusted(found)

	def subgroup(self, generators: Iterable[E]) -> 'Group[E]':
		'''
		subgroup of this group generated by `generators`, which must be members.
		with no generators, this is the trivial subgroup.
		'''
		generators = list(generators) or [self.identity]
		for g in generators:
			if g not in self:
				raise NotASubgroup(f'generator {g} is not a member of the group')
		return type(self).from_generators(generators, max_order=self.order())

	# container protocol

	@property
	def elements(self) -> tuple[E, ...]:
		return self._elements

	@property
	def identity(self) -> E:
		''' the identity element of the elements' group '''
		return self._elements[0].ID

	def order(self) -> int:
		''' amount of elements (the order of the group) '''
		return len(self._elements)

	def __len__(self) -> int:
		return len(self._elements)

	def __iter__(self) -> Iterator[E]:
		return iter(self._elements)

	def __getitem__(self, index: int) -> E:
		return self._elements[index]

	def __contains__(self, x) -> bool:
		return isinstance(x, GroupElement) and x in self._positions

	def index(self, x: E) -> int:
		''' position of `x` in iteration order (ValueError if missing) '''
		try:
			return self._positions[x]
		except KeyError:
			raise ValueError(f'{x} is not in the group') from None

	def __eq__(self, other):
		if not isinstance(other, Group):
			return NotImplemented
		return self._positions.keys() == other._positions.keys()

	def __hash__(self):
		return hash(frozenset(self._elements))

	def __repr__(self):
		name = type(self).__name__
		kind = type(self._elements[0]).__name__
		return f'<{name} of order {len(self)} over {kind}>'

	# structure checks

	def is_closed(self) -> bool:
		''' checks that the identity, all products and all inverses are members '''
		if self._closed is None:
			self._closed = self._check_closed()
		return self._closed

	def _check_closed(self) -> bool:
		has = self._positions.__contains__
		if not has(self.identity):
			return False
		for a in self._elements:
			if not has(a.inverse):
				return False
			for b in self._elements:
				if not has(a._mul(b)):
					return False
		return True

	def is_subgroup_of(self, parent: 'Group') -> bool:
		''' true iff every element is a member of `parent` and this subset is closed '''
		return all(x in parent for x in self._elements) and self.is_closed()

	def is_abelian(self) -> bool:
		return all(a._mul(b) == b._mul(a) for a in self._elements for b in self._elements)

	def is_normal(self, subgroup: 'Group[E]') -> bool:
		'''
		checks that `subgroup` is invariant under conjugation: `g * n * g⁻¹`
		is in `subgroup` for all g in this group and n in `subgroup`.

		raises NotASubgroup if `subgroup` isn't a subgroup of this group.
		'''
		self._require_subgroup(subgroup)
		for g in self._elements:
			ginv = g.inverse
			for n in subgroup:
				if g._mul(n)._mul(ginv) not in subgroup:
					return False
		return True

	def _require_subgroup(self, subgroup: 'Group[E]'):
		if not self.is_closed():
			logger.debug('%r is not closed', self)
			raise NotASubgroup(f'{self!r} is not closed, so it has no subgroups')
		if not subgroup.is_subgroup_of(self):
			logger.debug('%r is not a subgroup of %r', subgroup, self)
			raise NotASubgroup(f'{subgroup!r} is not a subgroup of {self!r}')

	# derived groups

	def center(self) -> 'Group[E]':
		''' subgroup of elements commuting with every element '''
		center = type(self)._trusted(
			z for z in self._elements
			if all(z._mul(g) == g._mul(z) for g in self._elements)
		)
		if not self._closed:
			center._closed = None
		return center

	def conjugacy_class(self, x: E) -> tuple[E, ...]:
		''' distinct conjugates `g * x * g⁻¹` of `x`, in the order of the group's elements '''
		if x not in self:
			raise ValueError(f'{x} is not in the group')
		return tuple(dict.fromkeys( g._mul(x)._mul(g.inverse) for g in self._elements ))

	def cosets(self, subgroup: 'Group[E]', side: Union['CosetSide', str]='left') -> list['Coset[E]']:
		'''
		partitions this group into the cosets of `subgroup`.

		`x` and `y` share a left coset iff `x⁻¹ * y` is in `subgroup` (they share a
		right coset iff `y * x⁻¹` is). cosets are returned in the order their first
		element appears in this group, that first element is the coset's
		representative, and the elements of each coset keep this group's order.

		raises NotASubgroup if `subgroup` isn't a subgroup of this group, or if
		this group itself isn't closed.
		'''
		side = CosetSide(side)
		self._require_subgroup(subgroup)

		partition: dict[E, Coset[E]] = {}
		result: list[Coset[E]] = []
		for x in self._elements:
			if x in partition:
				continue
			if side is CosetSide.LEFT:
				members = [ x._mul(h) for h in subgroup ]
			else:
				members = [ h._mul(x) for h in subgroup ]
			members.sort(key=self._positions.__getitem__)
			coset = Coset(x, tuple(members), subgroup, side, partition)
			for y in members:
				partition[y] = coset
			result.append(coset)

		logger.debug('%s cosets of a subgroup of order %d: %d classes', side.value, len(subgroup), len(result))
		return result

	def factor_group(self, normal_subgroup: 'Group[E]') -> 'Group[Coset[E]]':
		'''
		quotient of this group by `normal_subgroup`, as a group of (left) cosets
		with operation `aN * bN = (ab)N`.

		raises NotASubgroup if `normal_subgroup` isn't a subgroup, and NotNormal
		if it isn't normal (the operation wouldn't be well defined).
		'''
		if not self.is_normal(normal_subgroup):
			logger.debug('%r is not normal in %r', normal_subgroup, self)
			raise NotNormal(f'{normal_subgroup!r} is not a normal subgroup of {self!r}')
		return Group._trusted(self.cosets(normal_subgroup, CosetSide.LEFT))


# COSETS
# ------

class CosetSide(enum.Enum):
	LEFT = 'left'
	RIGHT = 'right'


class Coset(GroupElement, Generic[E]):
	'''
	a left (`gH`) or right (`Hg`) coset of a subgroup, as produced by `Group.cosets()`.

	cosets from the same partition are group elements: `aH * bH` is the coset
	containing `a * b` (well defined when the subgroup is normal; see
	`Group.factor_group()`). a coset behaves as a container of its elements.
	'''

	representative: E
	''' first element of the coset in the parent group's order '''
	elements: tuple[E, ...]
	subgroup: Group[E]
	side: CosetSide

	def __init__(self, representative: E, elements: tuple[E, ...], subgroup: Group[E], side: CosetSide, partition: dict[E, 'Coset[E]']):
		self.representative = representative
		self.elements = elements
		self.subgroup = subgroup
		self.side = side
		self._partition = partition

	def __repr__(self):
		if self.side is CosetSide.LEFT:
			return f'{self.representative}H'
		return f'H{self.representative}'

	# container protocol

	def __len__(self):
		return len(self.elements)

	def __iter__(self):
		return iter(self.elements)

	def __contains__(self, x):
		return self._partition.get(x) is self

	# core group operations

	def _check_compatible(self, other: Self):
		if other._partition is not self._partition:
			raise CosetMismatch('cosets come from different partitions')

	def _id(self) -> Self:
		return self._partition[self.representative.ID]

	def _mul(self, other: Self) -> Self:
		return self._partition[self.representative._mul(other.representative)]

	@property
	def inverse(self) -> Self:
		return self._partition[self.representative.inverse]

	# comparison: a coset is determined by its partition and representative

	def _cmpkey(self):
		return self.representative._cmpkey()

	def __eq__(self, other):
		if not isinstance(other, Coset):
			return NotImplemented
		return self._partition is other._partition and self.representative == other.representative

	def __ne__(self, other):
		if not isinstance(other, Coset):
			return NotImplemented
		return not self == other

	def __hash__(self):
		return hash((self.side, self.representative))
