'''
maps between finite groups that preserve the group structure.

a `Homomorphism` wraps a plain function from elements of one group to
elements of another. `verify()` (or `Homomorphism.verify()`) checks the
homomorphism property exhaustively over a source group, which costs a
quadratic amount of operations in the order of the source.
'''

from typing import Self
from typing import Callable, Generic, Optional, TypeVar
import logging

from .element import GroupElement
from .errors import NotAHomomorphism
from .group import Group

__all__ = ['Homomorphism', 'verify']

logger = logging.getLogger(__name__)

S = TypeVar('S', bound=GroupElement)
T = TypeVar('T', bound=GroupElement)


def _fail(message: str, pair: tuple) -> NotAHomomorphism:
	logger.debug('not a homomorphism: %s', message)
	return NotAHomomorphism(message, pair)


class Homomorphism(Generic[S, T]):
	'''
	a map `f: G → H` between groups, given by a function on elements.

	the constructor doesn't check anything; use `verify()` to build one
	from a mapping that is known to be valid only after checking.
	'''

	def __init__(self, mapping: Callable[[S], T], description: Optional[str]=None):
		self.mapping = mapping
		self.description = description

	def __repr__(self):
		desc = self.description if self.description is not None else '<function>'
		return f'{type(self).__name__}({desc})'

	def apply(self, x: S) -> T:
		return self.mapping(x)

	__call__ = apply

	@classmethod
	def verify(cls, source: Group[S], target: Group[T], mapping: Callable[[S], T], description: Optional[str]=None) -> Self:
		'''
		checks that `mapping` is a homomorphism from `source` to `target`:

		 - the identity of `source` maps to the identity of `target`,
		 - every image is a member of `target`,
		 - `f(a * b) == f(a) * f(b)` for every pair of elements of `source`.

		returns the homomorphism, or raises NotAHomomorphism carrying the first
		violation found (see its `pair` attribute).
		'''
		e = source.identity
		fe = mapping(e)
		if fe != target.identity:
			raise _fail(f'identity {e} maps to {fe}, not to {target.identity}', (e,))

		images = {}
		for x in source:
			y = mapping(x)
			if y not in target:
				raise _fail(f'image of {x} is {y}, which is not in the target group', (x,))
			images[x] = y

		for a in source:
			fa = images[a]
			for b in source:
				ab = a * b
				fab = images[ab] if ab in images else mapping(ab)
				fafb = fa * images[b]
				if fab != fafb:
					raise _fail(f'f({a} * {b}) = {fab} but f({a}) * f({b}) = {fafb}', (a, b))

		logger.debug('verified homomorphism over %d pairs', len(source) ** 2)
		return cls(mapping, description)

	# derived groups

	def kernel(self, source: Group[S]) -> Group[S]:
		''' elements of `source` sent to the identity, in the order of `source` '''
		return Group( x for x in source if not self.mapping(x) )

	def image(self, source: Group[S]) -> Group[T]:
		''' images of the elements of `source`, in first-seen order '''
		return Group( self.mapping(x) for x in source )

	# properties

	def is_injective(self, source: Group[S]) -> bool:
		seen = set()
		for x in source:
			y = self.mapping(x)
			if y in seen:
				return False
			seen.add(y)
		return True

	def is_surjective(self, source: Group[S], target: Group[T]) -> bool:
		image = self.image(source)
		return len(image) == len(target) and image == target

	def is_isomorphism(self, source: Group[S], target: Group[T]) -> bool:
		return self.is_injective(source) and self.is_surjective(source, target)


def verify(source: Group[S], target: Group[T], mapping: Callable[[S], T], description: Optional[str]=None) -> Homomorphism[S, T]:
	''' shorthand for `Homomorphism.verify()` '''
	return Homomorphism.verify(source, target, mapping, description)
