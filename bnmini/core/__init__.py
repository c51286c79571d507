from .arrayset import ArraySet
from .variable import Domain, BooleanDomain, RandomVariable, Named, NamedVariable, enumerate_joint_assignments
from .cpt import CPT, TabularCPT

__all__ = [
    "ArraySet",
    "Domain",
    "BooleanDomain",
    "RandomVariable",
    "Named",
    "NamedVariable",
    "enumerate_joint_assignments",
    "CPT",
    "TabularCPT"
]
