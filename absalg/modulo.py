from typing import Self
import logging
import math

from .element import GroupElement
from .errors import ElementNotInGroup, InvalidModulus, ModulusMismatch
from .group import Group

__all__ = ['Modulo', 'ModuloUnit']

logger = logging.getLogger(__name__)


def _check_modulus(modulus: int):
	if not isinstance(modulus, int):
		raise TypeError(f'object {modulus!r} is not an int')
	if modulus <= 0:
		logger.debug('rejected modulus %d', modulus)
		raise InvalidModulus(f'modulus must be positive, got {modulus}')


class _Residue(GroupElement):
	''' common part of residue classes modulo n '''

	_value: int
	_modulus: int

	def __init__(self, value: int, modulus: int):
		_check_modulus(modulus)
		if not isinstance(value, int):
			raise TypeError(f'object {value!r} is not an int')
		self._value = value % modulus
		self._modulus = modulus

	@property
	def value(self) -> int:
		''' representative in [0, modulus) '''
		return self._value

	@property
	def modulus(self) -> int:
		return self._modulus

	def __repr__(self):
		return f'{type(self).__name__}({self.value}, {self.modulus})'

	def __str__(self):
		return f'{self.value} (mod {self.modulus})'

	def __int__(self) -> int:
		return self.value

	def _cmpkey(self):
		return (self.modulus, self.value)

	def _check_compatible(self, other: Self):
		if self.modulus != other.modulus:
			logger.debug('modulus mismatch: %d != %d', self.modulus, other.modulus)
			raise ModulusMismatch(f'modulus mismatch: {self.modulus} != {other.modulus}')


# ADDITIVE
# --------

class Modulo(_Residue):
	''' integers modulo n under addition (the cyclic group Z_n) '''

	@classmethod
	def identity(cls, modulus: int) -> Self:
		return cls(0, modulus)

	@classmethod
	def generator(cls, modulus: int) -> Self:
		''' generator of the group (value 1) '''
		return cls(1, modulus)

	@classmethod
	def generate_group(cls, modulus: int) -> Group[Self]:
		''' all of Z_n, in increasing order of value '''
		_check_modulus(modulus)
		return Group._trusted(cls(i, modulus) for i in range(modulus))

	# group operations

	def _id(self) -> Self:
		return type(self)(0, self.modulus)

	def _mul(self, other: Self) -> Self:
		return type(self)(self.value + other.value, self.modulus)

	@property
	def inverse(self) -> Self:
		return type(self)(self.modulus - self.value, self.modulus)

	# other operations

	def _pow(self, x: int) -> Self:
		return type(self)(self.value * x, self.modulus)

	def order(self) -> int:
		return self.modulus // math.gcd(self.modulus, self.value)


# MULTIPLICATIVE
# --------------

class ModuloUnit(_Residue):
	'''
	units modulo n under multiplication, the group (Z/nZ)^×.

	only values coprime to n are members; other values raise ElementNotInGroup.
	'''

	def __init__(self, value: int, modulus: int):
		super().__init__(value, modulus)
		if math.gcd(self.value, modulus) != 1:
			logger.debug('%d is not a unit mod %d', self.value, modulus)
			raise ElementNotInGroup(f'{self.value} is not invertible mod {modulus}')

	@classmethod
	def identity(cls, modulus: int) -> Self:
		return cls(1, modulus)

	@classmethod
	def generate_group(cls, modulus: int) -> Group[Self]:
		''' all units mod n, in increasing order of value '''
		_check_modulus(modulus)
		return Group._trusted(
			cls(k, modulus) for k in range(modulus)
			if math.gcd(k, modulus) == 1
		)

	# group operations

	def _id(self) -> Self:
		return type(self)(1, self.modulus)

	def _mul(self, other: Self) -> Self:
		return type(self)(self.value * other.value, self.modulus)

	@property
	def inverse(self) -> Self:
		if self.modulus == 1:
			return self
		return type(self)(pow(self.value, -1, self.modulus), self.modulus)

	def _pow(self, x: int) -> Self:
		if self.modulus == 1:
			return self
		return type(self)(pow(self.value, x, self.modulus), self.modulus)
