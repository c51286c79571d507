import pytest
from bnmini import BayesianNetwork, NamedVariable, BooleanDomain, TabularCPT


@pytest.fixture
def ab_network():
    """A -> B, both boolean, filled in through set_probability"""
    A = NamedVariable("A", BooleanDomain())
    B = NamedVariable("B", BooleanDomain())
    bn = BayesianNetwork()
    bn.add(A)
    bn.add(B)
    bn.connect(A, [], TabularCPT(A))
    bn.connect(B, [A], TabularCPT(B, [A]))
    bn.set_probability(A, {A: True}, 0.6)
    bn.set_probability(A, {A: False}, 0.4)
    bn.set_probability(B, {A: True, B: True}, 0.8)
    bn.set_probability(B, {A: True, B: False}, 0.2)
    bn.set_probability(B, {A: False, B: True}, 0.4)
    bn.set_probability(B, {A: False, B: False}, 0.6)
    return bn, A, B


@pytest.fixture
def sprinkler():
    """The classic cloudy/sprinkler/rain/wet-grass network, added in a non-topological order"""
    W, S, R, C = (NamedVariable(name, BooleanDomain()) for name in "WSRC")
    bn = BayesianNetwork([W, S, R, C])
    bn.connect(C, [], TabularCPT(C, table=[0.5, 0.5]))
    bn.connect(S, [C], TabularCPT(S, [C], table=[[0.1, 0.9], [0.5, 0.5]]))
    bn.connect(R, [C], TabularCPT(R, [C], table=[[0.8, 0.2], [0.2, 0.8]]))
    bn.connect(W, [S, R], TabularCPT(W, [S, R], table=[[[0.99, 0.01], [0.9, 0.1]],
                                                       [[0.9, 0.1], [0.0, 1.0]]]))
    return bn, dict(C=C, S=S, R=R, W=W)
