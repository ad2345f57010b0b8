import pytest

import absalg
from absalg import (
	Group, Coset, CosetSide, Modulo, Permutation, Dihedral,
	EmptyGroup, ModulusMismatch, NotASubgroup, NotNormal, CosetMismatch, GroupTooLarge,
)


def cycles(*c, degree=4):
	return Permutation.from_cycles(list(c), degree)

def klein_four(degree=4):
	return Group.from_generators([ cycles([0, 1], [2, 3], degree=degree), cycles([0, 2], [1, 3], degree=degree) ])

def z6_evens():
	return Group([ Modulo(0, 6), Modulo(2, 6), Modulo(4, 6) ])


# container

def test_is_closed():
	assert Group([ Modulo(0, 3), Modulo(1, 3), Modulo(2, 3) ]).is_closed()
	assert not Group([ Modulo(0, 3), Modulo(1, 3) ]).is_closed()
	assert not Group([ Modulo(1, 3), Modulo(2, 3) ]).is_closed()

def test_deduplicates_in_order():
	G = Group([ Modulo(1, 3), Modulo(4, 3), Modulo(0, 3) ])
	assert len(G) == G.order() == 2
	assert list(G) == [ Modulo(1, 3), Modulo(0, 3) ]
	assert G.index(Modulo(0, 3)) == 1
	with pytest.raises(ValueError):
		G.index(Modulo(2, 3))

def test_rejects_bad_contents():
	with pytest.raises(EmptyGroup):
		Group([])
	with pytest.raises(TypeError):
		Group([ Modulo(0, 3), Permutation.identity(3) ])
	with pytest.raises(TypeError):
		Group([ 1, 2 ])
	with pytest.raises(ModulusMismatch):
		Group([ Modulo(0, 3), Modulo(0, 4) ])

def test_membership():
	Z6 = Modulo.generate_group(6)
	assert Modulo(5, 6) in Z6
	assert Modulo(5, 7) not in Z6
	assert Permutation.identity(6) not in Z6
	assert 5 not in Z6

def test_equality_ignores_order():
	a = Group([ Modulo(0, 3), Modulo(1, 3), Modulo(2, 3) ])
	b = Group([ Modulo(2, 3), Modulo(0, 3), Modulo(1, 3) ])
	assert a == b
	assert hash(a) == hash(b)
	assert a != z6_evens()

def test_repr():
	assert repr(Modulo.generate_group(6)) == '<Group of order 6 over Modulo>'


# closure

def test_from_generators_cyclic():
	G = Group.from_generators([ Modulo(2, 6) ])
	assert G == z6_evens()
	assert G[0] == Modulo(0, 6)
	assert G.identity == Modulo(0, 6)

def test_from_generators_symmetric():
	G = Group.from_generators([ Permutation.transposition(0, 1, 4), Permutation.full_cycle(4) ])
	assert len(G) == 24
	assert G == Permutation.generate_group(4)
	assert G[0] == Permutation.identity(4)
	assert G.is_closed()

def test_from_generators_dihedral():
	G = Group.from_generators(Dihedral.generators(5))
	assert len(G) == 10
	assert G == Dihedral.generate_group(5)

def test_from_generators_identity_only():
	G = Group.from_generators([ Permutation.identity(3) ])
	assert list(G) == [ Permutation.identity(3) ]

def test_closure_is_idempotent():
	G = klein_four()
	H = Group.from_generators(G)
	assert len(H) == len(G) == 4
	assert set(H) == set(G)

def test_from_generators_errors():
	with pytest.raises(EmptyGroup):
		Group.from_generators([])
	with pytest.raises(GroupTooLarge):
		Group.from_generators([ Permutation.transposition(0, 1, 6), Permutation.full_cycle(6) ], max_order=100)
	with pytest.raises(ModulusMismatch):
		Group.from_generators([ Modulo(1, 3), Modulo(1, 4) ])

def test_closure_ceiling_is_configurable():
	class SmallGroup(Group):
		MAX_ORDER = 10
	with pytest.raises(GroupTooLarge):
		SmallGroup.from_generators([ Modulo(1, 11) ])
	assert len(SmallGroup.from_generators([ Modulo(1, 10) ])) == 10


# subgroups

def test_is_subgroup_of():
	Z6 = Modulo.generate_group(6)
	assert z6_evens().is_subgroup_of(Z6)
	assert Z6.is_subgroup_of(Z6)
	assert not Group([ Modulo(0, 6), Modulo(1, 6) ]).is_subgroup_of(Z6)
	assert not Permutation.generate_group(3).is_subgroup_of(Permutation.generate_group(4))
	assert klein_four().is_subgroup_of(Permutation.generate_group(4))

def test_subgroup():
	S4 = Permutation.generate_group(4)
	C4 = S4.subgroup([ cycles([0, 1, 2, 3]) ])
	assert len(C4) == 4
	assert C4.is_subgroup_of(S4)
	with pytest.raises(NotASubgroup):
		S4.subgroup([ Permutation.full_cycle(5) ])

def test_trivial_subgroup():
	S4 = Permutation.generate_group(4)
	T = S4.subgroup([])
	assert list(T) == [ Permutation.identity(4) ]
	assert T.is_subgroup_of(S4)
	assert S4.is_normal(T)
	assert len(S4.factor_group(T)) == 24

def test_is_normal():
	S4 = Permutation.generate_group(4)
	assert S4.is_normal(Permutation.alternating_group(4))
	assert S4.is_normal(klein_four())
	assert not S4.is_normal(S4.subgroup([ cycles([0, 1]) ]))
	with pytest.raises(NotASubgroup):
		S4.is_normal(Group([ cycles([0, 1, 2]) ]))

def test_center_and_conjugacy():
	S3 = Permutation.generate_group(3)
	assert list(S3.center()) == [ Permutation.identity(3) ]
	assert set(Dihedral.generate_group(4).center()) == { Dihedral.identity(4), Dihedral(2, False, 4) }
	assert Modulo.generate_group(5).center() == Modulo.generate_group(5)
	assert len(S3.conjugacy_class(Permutation.transposition(0, 1, 3))) == 3
	assert S3.conjugacy_class(S3.identity) == (S3.identity,)

def test_is_abelian():
	assert Modulo.generate_group(6).is_abelian()
	assert klein_four().is_abelian()
	assert not Permutation.generate_group(3).is_abelian()


# cosets

def test_cosets_of_z6():
	Z6 = Modulo.generate_group(6)
	cosets = Z6.cosets(z6_evens())
	assert [ c.representative for c in cosets ] == [ Modulo(0, 6), Modulo(1, 6) ]
	assert [ [ x.value for x in c ] for c in cosets ] == [ [0, 2, 4], [1, 3, 5] ]
	assert all(c.side is CosetSide.LEFT for c in cosets)
	assert Modulo(3, 6) in cosets[1] and Modulo(3, 6) not in cosets[0]

@pytest.mark.parametrize('side', ['left', 'right', CosetSide.LEFT, CosetSide.RIGHT])
def test_cosets_partition_the_group(side):
	S4 = Permutation.generate_group(4)
	H = S4.subgroup([ cycles([0, 1, 2]) ])
	cosets = S4.cosets(H, side)
	assert len(cosets) == len(S4) // len(H) == 8
	assert all(len(c) == len(H) for c in cosets)
	seen = [ x for c in cosets for x in c ]
	assert len(seen) == len(set(seen)) == len(S4)
	assert set(seen) == set(S4)
	assert all(c.representative == c.elements[0] for c in cosets)

def test_coset_membership_criterion():
	S3 = Permutation.generate_group(3)
	H = S3.subgroup([ Permutation.transposition(0, 1, 3) ])
	left = S3.cosets(H, 'left')
	right = S3.cosets(H, 'right')
	def same_class(cosets, x, y):
		return any(x in c and y in c for c in cosets)
	for x in S3:
		for y in S3:
			assert same_class(left, x, y) == (x.inverse * y in H)
			assert same_class(right, x, y) == (y * x.inverse in H)
	assert { frozenset(c) for c in left } != { frozenset(c) for c in right }

def test_cosets_require_subgroup():
	Z6 = Modulo.generate_group(6)
	with pytest.raises(NotASubgroup):
		Z6.cosets(Group([ Modulo(0, 6), Modulo(1, 6) ]))
	with pytest.raises(ValueError):
		Z6.cosets(z6_evens(), 'up')

def test_cosets_of_a_non_closed_parent():
	parent = Group([ Modulo(0, 6), Modulo(1, 6), Modulo(3, 6) ])
	with pytest.raises(NotASubgroup):
		parent.cosets(Group([ Modulo(0, 6), Modulo(3, 6) ]))

def test_cosets_of_a_union_of_cosets():
	# {0, 3} ∪ {1, 4} is split evenly by {0, 3} but isn't closed (1 + 1 = 2)
	parent = Group([ Modulo(0, 6), Modulo(3, 6), Modulo(1, 6), Modulo(4, 6) ])
	H = Group([ Modulo(0, 6), Modulo(3, 6) ])
	assert not parent.is_closed()
	with pytest.raises(NotASubgroup):
		parent.cosets(H)
	with pytest.raises(NotASubgroup):
		parent.factor_group(H)
	with pytest.raises(NotASubgroup):
		parent.is_normal(H)

def test_closedness_is_remembered():
	G = Group([ Modulo(0, 4), Modulo(2, 4) ])
	assert G.is_closed() and G.is_closed()
	assert Modulo.generate_group(4).is_closed()
	assert not Group([ Modulo(1, 4) ]).center().is_closed()
	assert Modulo.generate_group(4).center().is_closed()

def test_coset_display():
	Z6 = Modulo.generate_group(6)
	assert str(Z6.cosets(z6_evens())[1]) == '1 (mod 6)H'
	assert str(Z6.cosets(z6_evens(), 'right')[1]) == 'H1 (mod 6)'


# factor groups

def test_factor_group_of_z6():
	Z6 = Modulo.generate_group(6)
	Q = Z6.factor_group(z6_evens())
	assert len(Q) == 2
	assert Q.is_abelian() and Q.is_closed()
	zero, one = Q
	assert isinstance(one, Coset)
	assert Q.identity == zero
	assert one * one == zero
	assert one.inverse == one
	assert one.order() == 2

def test_factor_group_of_s4_by_klein_four():
	S4 = Permutation.generate_group(4)
	Q = S4.factor_group(klein_four())
	assert len(Q) == 6
	assert Q.is_closed()
	assert not Q.is_abelian()
	# the operation doesn't depend on the chosen representatives
	for a in Q:
		for b in Q:
			product = a * b
			assert all(x * y in product for x in a for y in b)

def test_factor_group_requires_normal_subgroup():
	S3 = Permutation.generate_group(3)
	with pytest.raises(NotNormal):
		S3.factor_group(S3.subgroup([ Permutation.transposition(0, 1, 3) ]))
	with pytest.raises(NotASubgroup):
		S3.factor_group(Group([ Permutation.transposition(0, 1, 3) ]))

def test_cosets_of_different_partitions_do_not_mix():
	Z6 = Modulo.generate_group(6)
	a = Z6.cosets(z6_evens())
	b = Z6.cosets(z6_evens())
	assert a[1] != b[1]
	with pytest.raises(CosetMismatch):
		a[1] * b[1]


# short names

def test_short_names():
	assert len(absalg.S4) == 24
	assert len(absalg.A4) == 12
	assert len(absalg.Z6) == 6
	assert len(absalg.U8) == 4
	assert len(absalg.D5) == 10
	assert absalg.S3 is not absalg.S3
	with pytest.raises(AttributeError):
		absalg.Q8
