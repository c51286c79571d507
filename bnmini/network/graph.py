import logging
from bnmini.core import ArraySet, Named, CPT
from bnmini.errors import NotFoundError
from .topo import topological_sort, find_cycle

logger = logging.getLogger(__name__)


class Node:
    """
    A vertex of a BayesianNetwork.

    A node pairs a variable with its CPT and with the handles of its parents and children.
    Handles are positions in the network's list of nodes, the network owns all nodes
    and nodes never hold references to one another.
    """

    def __init__(self, variable, handle: int):
        self.variable = variable
        self.handle = handle
        # None until the node is connected
        self.parents = None
        self.children = ArraySet()
        self.cpt = None

    @property
    def is_connected(self):
        return self.parents is not None

    def get_cpt(self) -> CPT:
        return self.cpt

    def __repr__(self):
        return f"Node({self.variable}, handle={self.handle})"


class BayesianNetwork:
    """
    A graph of Nodes each of which corresponds to a random variable with a CPT.

    The network is built by calling add for every variable and then connect
    for every variable (with its parents and its CPT). After that it is meant to be
    queried only: nothing stops further mutation, but nothing is re-validated either.

    Variables are resolved by identity, so any object can be a variable
    (the ones in bnmini.core are a convenient choice).
    The graph is assumed to be acyclic; use check_acyclic to verify it.
    """

    def __init__(self, variables=None):
        """
        variables: optionally, an iterable of variables to add (in order)
        """
        self._nodes = []
        # id(variable) -> handle
        self._handles = dict()
        if variables is not None:
            for var in variables:
                self.add(var)

    # Graph nodes

    def size(self):
        """Return the number of nodes (== number of variables)"""
        return len(self._nodes)

    def __len__(self):
        return self.size()

    def __contains__(self, variable):
        return id(variable) in self._handles

    def add(self, variable):
        """
        Add a node (with no parents, no children and no CPT) for the variable.
        Raise ValueError if this very variable object was already added.
        """
        if variable in self:
            raise ValueError(f"Variable {variable} is already in the network")
        node = Node(variable, len(self._nodes))
        self._nodes.append(node)
        self._handles[id(variable)] = node.handle
        logger.debug("Added %s as node %d", variable, node.handle)

    def get_node_for_variable(self, variable) -> Node:
        """Return the Node for the variable, raise NotFoundError if there is none"""
        try:
            return self._nodes[self._handles[id(variable)]]
        except KeyError:
            raise NotFoundError(f"Variable {variable} is not in the network") from None

    def get_variable_by_name(self, name: str):
        """
        Return the variable with the given name.
        Only variables with the Named capability are tested, in insertion order.
        Raise NotFoundError if there is no match.
        """
        for node in self._nodes:
            if isinstance(node.variable, Named) and node.variable.name == name:
                return node.variable
        raise NotFoundError(f"No variable named {name!r} in the network")

    def get_variables(self) -> ArraySet:
        """Return the variables in the order they were added"""
        return ArraySet.from_distinct(node.variable for node in self._nodes)

    # Graph edges

    def connect(self, variable, parents, cpt: CPT):
        """
        Connect the node for the variable to the nodes for the given parent variables,
        with the given CPT (a distribution over the variable given those parents).

        This is the only way edges are created. All variables are resolved before anything
        changes, so a NotFoundError leaves the network untouched.
        Connecting a node again replaces its parents (and it stops being a child of
        parents that are no longer listed) and its CPT.
        """
        node = self.get_node_for_variable(variable)
        parent_handles = ArraySet(self.get_node_for_variable(pvar).handle for pvar in parents)
        if node.is_connected:
            stale = [h for h in node.parents if h not in parent_handles]
            if stale:
                logger.warning("Reconnecting %s drops its parents %s", variable,
                               ' '.join(str(self._nodes[h].variable) for h in stale))
            for h in stale:
                self._nodes[h].children.discard(node.handle)
        node.parents = parent_handles
        for h in parent_handles:
            self._nodes[h].children.add(node.handle)
        node.cpt = cpt
        logger.debug("Connected %s to parents [%s]", variable,
                     ' '.join(str(self._nodes[h].variable) for h in parent_handles))

    def get_children(self, variable) -> ArraySet:
        """Return the variables that are children of the given variable"""
        node = self.get_node_for_variable(variable)
        return ArraySet.from_distinct(self._nodes[h].variable for h in node.children)

    def get_parents(self, variable) -> ArraySet:
        """Return the variables that are parents of the given variable (none if it was never connected)"""
        node = self.get_node_for_variable(variable)
        return ArraySet.from_distinct(self._nodes[h].variable for h in (node.parents or ()))

    # CPT lookup

    def _get_cpt(self, variable) -> CPT:
        node = self.get_node_for_variable(variable)
        if node.cpt is None:
            raise ValueError(f"{variable} has no CPT, connect it first")
        return node.cpt

    def get_probability(self, variable, assignment: dict) -> float:
        """
        Return the probability stored in the CPT for the variable,
        given the values of its parents (and itself) in the assignment.
        """
        return self._get_cpt(variable).get(assignment[variable], assignment)

    def set_probability(self, variable, assignment: dict, p: float):
        """
        Set the probability stored in the CPT for the variable,
        given the values of its parents (and itself) in the assignment.
        """
        self._get_cpt(variable).set(assignment[variable], assignment, p)

    def evaluate(self, assignment: dict) -> float:
        """
        Return the joint probability of a complete assignment,
        that is, the product of P(X=x | parents) over all connected variables.
        """
        prob = 1.0
        for var in self.get_variables_sorted_topologically():
            if self.get_node_for_variable(var).is_connected:
                prob *= self.get_probability(var, assignment)
        return prob

    # Topsort variables

    def _children_map(self):
        return {node.handle: node.children for node in self._nodes}

    def get_variables_sorted_topologically(self) -> list:
        """
        Return all variables in a topological order (parents before children).
        The order is deterministic, ties are broken by insertion order.
        """
        handles = [node.handle for node in self._nodes]
        return [self._nodes[h].variable for h in topological_sort(handles, self._children_map())]

    def check_acyclic(self):
        """Raise ValueError if the network contains a directed cycle"""
        handles = [node.handle for node in self._nodes]
        cycle = find_cycle(handles, self._children_map())
        if cycle is not None:
            raise ValueError("Network contains a cycle: %s" % ' -> '.join(str(self._nodes[h].variable) for h in cycle))

    # Copying

    def copy(self) -> 'BayesianNetwork':
        """
        Return a network over the same variable objects with the same structure,
        but with its own copies of the CPTs (initialised to this network's values).
        Nodes that were never connected are added but not connected.
        """
        new_network = BayesianNetwork(node.variable for node in self._nodes)
        for node in self._nodes:
            if not node.is_connected:
                continue
            new_parents = [self._nodes[h].variable for h in node.parents]
            new_cpt = node.cpt.copy() if node.cpt is not None else None
            new_network.connect(node.variable, new_parents, new_cpt)
        logger.debug("Copied network with %d variables", len(new_network))
        return new_network

    # Printing

    def __str__(self):
        """Each variable (in topological order) with its parents, followed by its CPT"""
        lines = []
        for var in self.get_variables_sorted_topologically():
            node = self.get_node_for_variable(var)
            parents = ''.join(f"{self._nodes[h].variable} " for h in (node.parents or ()))
            lines.append(f"{var} <- {parents}\n")
            if node.cpt is not None:
                lines.append(f"{node.cpt}\n")
        return ''.join(lines)

    def __repr__(self):
        return f"BayesianNetwork({len(self)} variables)"
