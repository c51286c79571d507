import itertools


class Domain:
    """
    The values a random variable can take, in a fixed order.

    TabularCPT lays out one table axis per variable, and index tells it
    where along that axis a value sits.
    """

    def __init__(self, outcomes):
        """
        outcomes: hashable values, repeats are ignored
        """
        self.outcomes = tuple(dict.fromkeys(outcomes))
        self._positions = {outcome: i for i, outcome in enumerate(self.outcomes)}

    def __len__(self):
        return len(self.outcomes)

    def __iter__(self):
        return iter(self.outcomes)

    def index(self, outcome):
        """Position of the outcome, ValueError if it is not in this domain"""
        try:
            return self._positions[outcome]
        except KeyError:
            raise ValueError(f"{outcome!r} is not an outcome of {self}") from None

    def __repr__(self):
        return f"Domain({self.outcomes!r})"

    def __str__(self):
        return "{%s}" % ', '.join(str(o) for o in self.outcomes)


class BooleanDomain(Domain):

    def __init__(self):
        super().__init__((True, False))

    def __repr__(self):
        return "BooleanDomain()"


class RandomVariable:
    """
    A random variable, that is, a vertex of a Bayesian network.

    Variables are compared by identity: two distinct RandomVariable objects
    are two distinct variables even if they share a domain.
    """

    def __init__(self, domain: Domain):
        self.domain = domain

    def __repr__(self):
        return f"RandomVariable({self.domain!r})"


class Named:
    """Capability of being looked up by name (see BayesianNetwork.get_variable_by_name)"""

    name = None


class NamedVariable(RandomVariable, Named):

    def __init__(self, name: str, domain: Domain):
        super().__init__(domain)
        self.name = name

    def __str__(self):
        return self.name

    def __repr__(self):
        return f"NamedVariable({self.name!r}, {self.domain!r})"


def enumerate_joint_assignments(variables):
    """
    Return a generator for all complete assignments (each a dict) of the given variables.

    variables: an iterable of RandomVariable objects
        assignments follow the cartesian product of their domains,
        the first variable varies slowest
    """
    variables = list(variables)
    for outcomes in itertools.product(*(var.domain for var in variables)):
        yield dict(zip(variables, outcomes))
