import pandas as pd
from tabulate import tabulate
from bnmini.core import TabularCPT, enumerate_joint_assignments
from bnmini.network import BayesianNetwork


def _joint_table(network: BayesianNetwork, variables):
    table = []
    for assignment in enumerate_joint_assignments(variables):
        table.append([assignment[var] for var in variables] + [network.evaluate(assignment)])
    return table


def display_full_table(network: BayesianNetwork, variables=None, tablefmt='simple'):
    """
    Return a tabulate-formatted string that can be printed to display the whole joint table.

    network: a BayesianNetwork whose variables all have a domain
    variables: optionally specify the order in which to list variables in the table
        (defaults to topological order)
    """
    if variables is None:
        variables = network.get_variables_sorted_topologically()
    variables = list(variables)
    headers = [str(var) for var in variables] + ['P']
    return tabulate(_joint_table(network, variables), headers=headers, tablefmt=tablefmt)


def network_to_df(network: BayesianNetwork, variables=None):
    """
    Return a pandas DataFrame containing a complete table-view of the joint distribution
    represented by a network, one row per complete assignment.

    network: a BayesianNetwork whose variables all have a domain
    variables: optionally specify the order in which to list variables in the table
    """
    if variables is None:
        variables = network.get_variables_sorted_topologically()
    variables = list(variables)
    columns = [str(var) for var in variables] + ['Value']
    return pd.DataFrame(_joint_table(network, variables), columns=columns)


def cpt_to_df(cpt: TabularCPT, value_col="Value"):
    """
    Return a long-format pandas DataFrame of a TabularCPT:
        one column per parent, one for the variable, and one with the probability.
    """
    rows = []
    for ctxt, cpd in cpt.iterrows():
        for outcome, p in zip(cpt.variable.domain, cpd.tolist()):
            rows.append(list(ctxt) + [outcome, p])
    columns = [str(par) for par in cpt.parents] + [str(cpt.variable), value_col]
    return pd.DataFrame(rows, columns=columns)
