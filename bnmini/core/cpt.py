import itertools
import numpy as np
from tabulate import tabulate


class CPT:
    """
    Abstract conditional probability table of a variable given its parents.

    A CPT is keyed by an outcome of its own variable and an assignment
    that contains (at least) the outcomes of its parents.
    """

    def get(self, value, assignment: dict) -> float:
        """Return P(variable=value | parents as in assignment)"""
        raise NotImplementedError

    def set(self, value, assignment: dict, p: float):
        """Store P(variable=value | parents as in assignment) = p"""
        raise NotImplementedError

    def copy(self) -> 'CPT':
        """Return a CPT with the same entries that can be modified independently"""
        raise NotImplementedError


class TabularCPT(CPT):
    """
    A CPT represented as a table (a dense numpy array).

    The order of the parents has no semantics in a CPT,
    but in its _tabular_ representation it tells us which axis of the underlying table captures
    which parent's domain. The last axis is the domain of the variable itself.
    """

    def __init__(self, variable, parents=(), table=None, tol=1e-6):
        """
        variable: the RandomVariable this CPT is a distribution over
        parents: the parent RandomVariables, no duplicates
        table: optional array of shape (|parent_1|, ..., |parent_k|, |variable|)
            if None the table starts with all zeros and is filled with set
        tol: tolerance used by is_normalized
        """
        self.variable = variable
        self.parents = tuple(parents)
        if len(set(map(id, self.parents))) != len(self.parents):
            raise ValueError("Any one parent should be listed only once")
        self.tol = tol
        shape = tuple(len(par.domain) for par in self.parents) + (len(variable.domain),)
        if table is None:
            self.table = np.zeros(shape, dtype=float)
        else:
            self.table = np.array(table, dtype=float)
            if self.table.shape != shape:
                raise ValueError(f"I need a table of shape {shape} but got {self.table.shape}")

    def _index(self, value, assignment: dict):
        # parents' outcomes first, in the order we established for the axes of the np.array
        ctxt_idx = tuple(par.domain.index(assignment[par]) for par in self.parents)
        return ctxt_idx + (self.variable.domain.index(value),)

    def get(self, value, assignment: dict) -> float:
        """
        Return the probability of the variable taking the value,
        given the outcomes the assignment gives to the parents.
        Irrelevant variables in the assignment are ignored.
        """
        return float(self.table[self._index(value, assignment)])

    def set(self, value, assignment: dict, p: float):
        if not 0. <= p <= 1.:
            raise ValueError(f"A probability must be in [0, 1], got {p}")
        self.table[self._index(value, assignment)] = p

    def copy(self) -> 'TabularCPT':
        return TabularCPT(self.variable, self.parents, self.table.copy(), tol=self.tol)

    def is_normalized(self):
        """Whether every conditional distribution sums to 1.0 (within tol)"""
        return bool(np.allclose(np.sum(self.table, -1), 1., atol=self.tol))

    def iterrows(self):
        """Iterate over (parent outcomes, distribution over the variable's outcomes) pairs"""
        joint_ctxt_outcomes = itertools.product(*(par.domain for par in self.parents))
        all_cpds = self.table.reshape(-1, len(self.variable.domain))
        return zip(joint_ctxt_outcomes, all_cpds)

    def __str__(self):
        """Render the CPT as a string for visualisation using tabulate"""
        par_names = [str(par) for par in self.parents]
        outcome_space = [f"{self.variable}={outcome}" for outcome in self.variable.domain]
        data = [list(ctxt) + cpd.tolist() for ctxt, cpd in self.iterrows()]
        return tabulate(data, headers=par_names + outcome_space, tablefmt="simple")

    def __repr__(self):
        return f"TabularCPT({self.variable}, parents=({', '.join(str(p) for p in self.parents)}))"
