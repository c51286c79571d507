__version__ = "0.1.0"
__license__ = "MIT"

from bnmini.errors import NotFoundError
from bnmini.core import ArraySet, BooleanDomain, Domain, NamedVariable, RandomVariable, TabularCPT
from bnmini.network import BayesianNetwork


# Optional: utility to load module dynamically
def load(module_name: str):
    """
    Dynamically load a submodule, e.g.:
        util = bnmini.load("util")
    """
    import importlib
    return importlib.import_module(f"bnmini.{module_name}")
