from . import employees, utils

__all__ = ["employees", "utils"]
