"""Models describing tables, columns, clauses and results."""

from .clauses import Bind, Join, Limit, OrderByColumn, Where
from .field import ModelField
from .model import Model
from .result import Result
from .schema import ForeignKey, Index, Reference

__all__ = [
    "Bind",
    "ForeignKey",
    "Index",
    "Join",
    "Limit",
    "Model",
    "ModelField",
    "OrderByColumn",
    "Reference",
    "Result",
    "Where",
]
