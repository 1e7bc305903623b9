from __future__ import annotations

from hypothesis import given

from hasse_diagram.graph.closure import compute_transitive_closure, is_transitive
from hasse_diagram.graph.ir import Poset

from poset_strategies import dag_posets, relation_posets


def test_chain_closure() -> None:
    poset = Poset(elements=["a", "b", "c"], relations=[("a", "b"), ("b", "c")])
    assert compute_transitive_closure(poset) == {("a", "b"), ("b", "c"), ("a", "c")}


def test_empty_relations_give_empty_closure() -> None:
    assert compute_transitive_closure(Poset(elements=["a", "b"])) == frozenset()
    assert compute_transitive_closure(Poset()) == frozenset()


def test_duplicate_relations_collapse() -> None:
    poset = Poset(elements=["a", "b"], relations=[("a", "b"), ("a", "b")])
    assert compute_transitive_closure(poset) == {("a", "b")}


def test_cycle_produces_reflexive_pairs() -> None:
    poset = Poset(elements=["a", "b"], relations=[("a", "b"), ("b", "a")])
    closure = compute_transitive_closure(poset)
    assert closure == {("a", "b"), ("b", "a"), ("a", "a"), ("b", "b")}


def test_long_chain_reaches_both_ends() -> None:
    # Declared in reverse order so a single naive pass would miss pairs.
    names = [f"n{i}" for i in range(6)]
    relations = [(names[i], names[i + 1]) for i in reversed(range(5))]
    closure = compute_transitive_closure(Poset(elements=names, relations=relations))
    assert ("n0", "n5") in closure
    assert len(closure) == 15


def test_is_transitive_flags_missing_pair() -> None:
    assert is_transitive({("a", "b"), ("b", "c"), ("a", "c")})
    assert not is_transitive({("a", "b"), ("b", "c")})


@given(relation_posets())
def test_closure_is_transitive(poset) -> None:
    closure = compute_transitive_closure(poset)
    assert is_transitive(closure)
    assert set(poset.relations) <= closure


@given(dag_posets())
def test_closure_of_dag_is_irreflexive(poset) -> None:
    closure = compute_transitive_closure(poset)
    assert all(a != b for a, b in closure)
