"""
Hypothesis strategies for generating posets.
"""

from __future__ import annotations

from hypothesis import strategies as st

from hasse_diagram.graph.ir import Poset


@st.composite
def dag_posets(draw, max_elements=8):
    """
    Acyclic posets: relations only point from a lower index to a higher one,
    may repeat, and are usually not covering relations.
    """
    n = draw(st.integers(min_value=0, max_value=max_elements))
    elements = [f"e{i}" for i in range(n)]
    if n < 2:
        return Poset(elements=elements, relations=[])
    pairs = draw(
        st.lists(
            st.integers(0, n - 2).flatmap(
                lambda i: st.tuples(st.just(i), st.integers(i + 1, n - 1))
            ),
            max_size=3 * n,
        )
    )
    return Poset(elements=elements, relations=[(elements[i], elements[j]) for i, j in pairs])


@st.composite
def relation_posets(draw, max_elements=6):
    """Arbitrary relations, cycles and self-loops included."""
    n = draw(st.integers(min_value=1, max_value=max_elements))
    elements = [f"e{i}" for i in range(n)]
    pairs = draw(st.lists(st.tuples(st.integers(0, n - 1), st.integers(0, n - 1)), max_size=3 * n))
    return Poset(elements=elements, relations=[(elements[i], elements[j]) for i, j in pairs])


number_sets = st.lists(st.integers(min_value=1, max_value=60), min_size=1, max_size=10)
