'''
exceptions raised by absalg.

every failure derives from `AlgebraError`. the kinds that report a bad value
also derive from the matching builtin (ValueError, IndexError) so that callers
may catch them generically.
'''

from typing import Any, Optional

__all__ = [
	'AlgebraError',
	'InvalidModulus', 'ModulusMismatch', 'ElementNotInGroup', 'InvalidPolygon',
	'InvalidMapping', 'IndexOutOfRange', 'NonDisjointCycles', 'DegreeMismatch',
	'EmptyGroup', 'NotASubgroup', 'NotNormal', 'CosetMismatch', 'NotAHomomorphism',
	'GroupTooLarge',
]


class AlgebraError(Exception):
	''' base class for all errors raised by this package '''


# elements

class InvalidModulus(AlgebraError, ValueError):
	''' modulus is not a positive integer '''

class ModulusMismatch(AlgebraError, ValueError):
	''' operands live in Z/nZ for different n '''

class ElementNotInGroup(AlgebraError, ValueError):
	''' value is not a member of the requested group (e.g. a non-unit mod n) '''

class InvalidPolygon(AlgebraError, ValueError):
	''' dihedral group parameter (number of sides) is not a positive integer '''

class InvalidMapping(AlgebraError, ValueError):
	''' sequence is not a bijection of 0..n-1 '''

class IndexOutOfRange(AlgebraError, IndexError):
	''' cycle index is negative or not smaller than the degree '''

class NonDisjointCycles(AlgebraError, ValueError):
	''' an index appears more than once among the cycles '''

class DegreeMismatch(AlgebraError, ValueError):
	''' operands act on sets of different size '''


# containers

class EmptyGroup(AlgebraError, ValueError):
	''' no elements to derive an identity from '''

class NotASubgroup(AlgebraError):
	''' candidate is not a closed subset of the parent group '''

class NotNormal(AlgebraError):
	''' subgroup is not invariant under conjugation by the parent group '''

class CosetMismatch(AlgebraError, ValueError):
	''' cosets come from different partitions (other subgroup, side or parent) '''

class NotAHomomorphism(AlgebraError):
	'''
	mapping does not preserve the group structure.

	`pair` holds the first offending input: `(a, b)` when `f(a * b) != f(a) * f(b)`,
	or a 1-tuple `(x,)` when the image of `x` alone is wrong (identity not preserved,
	or image outside the target group).
	'''

	def __init__(self, message: str, pair: Optional[tuple[Any, ...]] = None):
		super().__init__(message)
		self.pair = pair


# resources

class GroupTooLarge(AlgebraError):
	''' requested group exceeds the configured size ceiling '''
