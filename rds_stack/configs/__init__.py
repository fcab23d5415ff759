"""
Configuration module for Pulumi infrastructure.

Provides type-safe configuration loading from Pulumi stack config files.
"""

from rds_stack.configs.base import EnvironmentConfig, StackVariant
from rds_stack.configs.environment import get_config
from rds_stack.configs.password_policy import PasswordPolicy
from rds_stack.configs.subnets import SubnetSpec, plan_subnets
from rds_stack.configs.constants import (
    VPC_CIDR,
    SUBNET_CIDR_MASK,
    DEFAULT_TAGS,
    PORTS,
)

__all__ = [
    "EnvironmentConfig",
    "StackVariant",
    "get_config",
    "PasswordPolicy",
    "SubnetSpec",
    "plan_subnets",
    "VPC_CIDR",
    "SUBNET_CIDR_MASK",
    "DEFAULT_TAGS",
    "PORTS",
]
