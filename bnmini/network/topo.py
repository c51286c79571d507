"""
Graph algorithms over the node handles of a BayesianNetwork.

A network with n nodes identifies them by the handles 0, ..., n-1 (in insertion order),
and these functions receive the graph as a sequence of handles and a mapping
from each handle to the handles of its children.
"""


def build_parent_index(handles, children):
    """
    Return a dict mapping each handle to the list of handles that have it as a child.
    Each list follows the order of handles.
    """
    parents = {n: [] for n in handles}
    for m in handles:
        for c in children[m]:
            parents[c].append(m)
    return parents


def topological_sort(handles, children):
    """
    Return the handles in a topological order (every node after all of its parents).

    handles: node handles, their order breaks ties
    children: dict (or sequence) mapping a handle to the handles of its children

    This is the DFS algorithm (attributed to Tarjan) that starts from the sinks
    (nodes without outgoing edges) and visits the parents of a node before emitting it.
    Every node of a finite DAG has a path down to some sink,
    so starting from the sinks reaches every node.
    The graph is assumed to be acyclic, no check is made (see find_cycle).
    """
    parents = build_parent_index(handles, children)
    sinks = [n for n in handles if len(children[n]) == 0]
    visited = set()
    topo = []
    for sink in sinks:
        if sink in visited:
            continue
        visited.add(sink)
        # each entry holds a node and an iterator over the parents we still have to visit;
        # a node is emitted once its iterator is exhausted
        stack = [(sink, iter(parents[sink]))]
        while stack:
            n, pending = stack[-1]
            for m in pending:
                if m not in visited:
                    visited.add(m)
                    stack.append((m, iter(parents[m])))
                    break
            else:
                stack.pop()
                topo.append(n)
    return topo


def find_cycle(handles, children):
    """
    Return a list of handles forming a directed cycle [n1, n2, ..., nk]
    (with an edge from each to the next and from nk back to n1), or None if the graph is acyclic.
    """
    # 0: not seen, 1: on the current DFS path, 2: done
    state = {n: 0 for n in handles}
    for root in handles:
        if state[root]:
            continue
        state[root] = 1
        path = [root]
        stack = [iter(children[root])]
        while stack:
            for c in stack[-1]:
                if state[c] == 1:
                    return path[path.index(c):]
                if state[c] == 0:
                    state[c] = 1
                    path.append(c)
                    stack.append(iter(children[c]))
                    break
            else:
                state[path.pop()] = 2
                stack.pop()
    return None
