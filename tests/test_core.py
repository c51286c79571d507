import numpy as np
import pytest
from bnmini.core import (Domain, BooleanDomain, RandomVariable, Named, NamedVariable,
                         enumerate_joint_assignments, CPT, TabularCPT)


def test_domain():
    d = Domain(["lo", "mid", "hi", "lo"])
    assert len(d) == 3
    assert list(d) == ["lo", "mid", "hi"]
    assert d.index("hi") == 2
    assert d.outcomes == ("lo", "mid", "hi")
    with pytest.raises(ValueError):
        d.index("top")
    assert str(d) == "{lo, mid, hi}"


def test_variables_are_compared_by_identity():
    X1 = NamedVariable("X", BooleanDomain())
    X2 = NamedVariable("X", BooleanDomain())
    assert X1 != X2
    assert X1 == X1
    assert isinstance(X1, Named)
    assert not isinstance(RandomVariable(BooleanDomain()), Named)
    assert str(X1) == "X"


def test_enumerate_joint_assignments():
    A = NamedVariable("A", BooleanDomain())
    B = NamedVariable("B", Domain("xyz"))
    assignments = list(enumerate_joint_assignments([A, B]))
    assert len(assignments) == 6
    assert assignments[0] == {A: True, B: "x"}
    assert assignments[-1] == {A: False, B: "z"}
    assert list(enumerate_joint_assignments([])) == [{}]


def test_abstract_cpt():
    cpt = CPT()
    with pytest.raises(NotImplementedError):
        cpt.get(True, {})
    with pytest.raises(NotImplementedError):
        cpt.copy()


def test_tabular_cpt_get_set():
    A = NamedVariable("A", BooleanDomain())
    B = NamedVariable("B", Domain(["x", "y", "z"]))
    cpt = TabularCPT(B, [A])
    assert cpt.table.shape == (2, 3)
    assert cpt.get("y", {A: False}) == 0.0
    cpt.set("y", {A: False, B: "x"}, 0.25)
    assert cpt.get("y", {A: False}) == 0.25
    assert isinstance(cpt.get("y", {A: False}), float)
    assert cpt.table[1, 1] == 0.25


def test_tabular_cpt_errors():
    A = NamedVariable("A", BooleanDomain())
    B = NamedVariable("B", BooleanDomain())
    with pytest.raises(ValueError):
        TabularCPT(B, [A], table=[0.5, 0.5])
    with pytest.raises(ValueError):
        TabularCPT(B, [A, A])
    cpt = TabularCPT(B, [A])
    with pytest.raises(ValueError):
        cpt.set(True, {A: True}, 1.5)
    with pytest.raises(ValueError):
        cpt.get("maybe", {A: True})
    with pytest.raises(KeyError):
        cpt.get(True, {})  # parent not assigned


def test_tabular_cpt_copy_is_independent():
    A = NamedVariable("A", BooleanDomain())
    cpt = TabularCPT(A, table=[0.3, 0.7])
    other = cpt.copy()
    assert other is not cpt
    assert other.variable is A
    assert np.array_equal(other.table, cpt.table)
    other.set(True, {}, 0.9)
    assert cpt.get(True, {}) == pytest.approx(0.3)
    assert other.get(True, {}) == pytest.approx(0.9)


def test_tabular_cpt_normalization():
    A = NamedVariable("A", BooleanDomain())
    B = NamedVariable("B", BooleanDomain())
    assert TabularCPT(B, [A], table=[[0.8, 0.2], [0.4, 0.6]]).is_normalized()
    assert not TabularCPT(B, [A], table=[[0.8, 0.1], [0.4, 0.6]]).is_normalized()
    assert not TabularCPT(B, [A]).is_normalized()


def test_tabular_cpt_str():
    A = NamedVariable("A", BooleanDomain())
    B = NamedVariable("B", BooleanDomain())
    text = str(TabularCPT(B, [A], table=[[0.8, 0.2], [0.4, 0.6]]))
    assert "B=True" in text and "B=False" in text
    assert "0.8" in text and "0.6" in text
