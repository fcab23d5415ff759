"""
Storage components.

Components:
- RdsMysqlComponent: RDS MySQL database in the isolated subnets
"""

from rds_stack.components.storage.rds_mysql import RdsMysqlComponent, RdsOutputs

__all__ = [
    "RdsMysqlComponent",
    "RdsOutputs",
]
