from cinedata.utils.base.enums import Durability, Operation
from cinedata.utils.base.errors import DaoError, InvalidArgument, WriteConflict

__all__ = [
    "Durability",
    "Operation",
    "DaoError",
    "InvalidArgument",
    "WriteConflict",
]
