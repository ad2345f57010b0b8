'''
finite groups and their elements: integers mod n, permutations, dihedral
symmetries and direct products, collected into `Group` containers that
support closure, subgroups, cosets, factor groups and homomorphism checks.

short names build common groups on access, e.g. `absalg.S4` (symmetric),
`absalg.A4` (alternating), `absalg.Z6` (cyclic), `absalg.U8` (units mod 8)
and `absalg.D5` (dihedral, order 10). every access returns a new container.
'''

from typing import Callable
import re

from .element import GroupElement
from .errors import (
	AlgebraError,
	InvalidModulus, ModulusMismatch, ElementNotInGroup, InvalidPolygon,
	InvalidMapping, IndexOutOfRange, NonDisjointCycles, DegreeMismatch,
	EmptyGroup, NotASubgroup, NotNormal, CosetMismatch, NotAHomomorphism,
	GroupTooLarge,
)
from .group import Group, Coset, CosetSide
from .modulo import Modulo, ModuloUnit
from .permutation import Permutation
from .dihedral import Dihedral
from .product import DirectProduct
from .homomorphism import Homomorphism, verify

__all__ = [
	'GroupElement', 'Group', 'Coset', 'CosetSide',
	'Modulo', 'ModuloUnit',
	'Permutation',
	'Dihedral',
	'DirectProduct',
	'Homomorphism', 'verify',
	'AlgebraError',
	'InvalidModulus', 'ModulusMismatch', 'ElementNotInGroup', 'InvalidPolygon',
	'InvalidMapping', 'IndexOutOfRange', 'NonDisjointCycles', 'DegreeMismatch',
	'EmptyGroup', 'NotASubgroup', 'NotNormal', 'CosetMismatch', 'NotAHomomorphism',
	'GroupTooLarge',
]


# AUTOMAGICAL GROUP CREATION
# --------------------------

PREFIXES: dict[str, Callable[[int], Group]] = {
	'S': Permutation.generate_group,
	'A': Permutation.alternating_group,
	'Z': Modulo.generate_group,
	'U': ModuloUnit.generate_group,
	'D': Dihedral.generate_group,
}

def __getattr__(name: str):
	if (m := re.fullmatch(r'(\D+)(\d+)', name)) and (make := PREFIXES.get(m.group(1))) != None:
		return make(int(m.group(2)))
	raise AttributeError(f'module {__name__!r} has no attribute {name!r}')
