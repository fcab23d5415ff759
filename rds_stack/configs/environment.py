"""
Environment configuration loader.

Loads and validates configuration from Pulumi stack config files.
"""

import pulumi

from rds_stack.configs.base import EnvironmentConfig, StackVariant
from rds_stack.configs.constants import (
    EC2_INSTANCE_TYPE,
    DB_BASELINE_STORAGE_TYPE,
    MAX_AZS,
    RDS_ALLOCATED_STORAGE,
    RDS_INSTANCE_CLASS,
    STORAGE_TYPES,
    SUBNET_CIDR_MASK,
    VPC_CIDR,
)
from rds_stack.exceptions import ConfigurationError


def parse_variant(value: str | None) -> StackVariant:
    """
    Resolve the `variant` config value.

    Args:
        value: Raw config value; None selects the bastion variant

    Returns:
        StackVariant: Parsed variant

    Raises:
        ConfigurationError: If the value names no known variant
    """
    if value is None:
        return StackVariant.BASTION
    try:
        return StackVariant(value.strip().lower())
    except ValueError:
        raise ConfigurationError(
            f"Unknown stack variant '{value}'",
            key="variant",
            details={"allowed": [v.value for v in StackVariant]},
        ) from None


def _positive_int(config: pulumi.Config, key: str, default: int) -> int:
    value = config.get_int(key)
    if value is None:
        return default
    if value <= 0:
        raise ConfigurationError(f"'{key}' must be positive, got {value}", key=key)
    return value


def get_config() -> EnvironmentConfig:
    """
    Load environment configuration from Pulumi stack config.

    Returns:
        EnvironmentConfig: Validated configuration object

    Raises:
        pulumi.ConfigMissingError: If required config values are missing
        ConfigurationError: If a config value is out of range
    """
    config = pulumi.Config()

    baseline_storage = config.get("rds_baseline_storage_type") or DB_BASELINE_STORAGE_TYPE
    if baseline_storage not in STORAGE_TYPES:
        raise ConfigurationError(
            f"Unsupported storage type '{baseline_storage}'",
            key="rds_baseline_storage_type",
            details={"allowed": sorted(STORAGE_TYPES)},
        )

    return EnvironmentConfig(
        environment=config.require("environment"),
        variant=parse_variant(config.get("variant")),
        vpc_cidr=config.get("vpc_cidr") or VPC_CIDR,
        subnet_cidr_mask=_positive_int(config, "subnet_cidr_mask", SUBNET_CIDR_MASK),
        max_azs=_positive_int(config, "max_azs", MAX_AZS),
        availability_zones=tuple(config.get_object("availability_zones") or ()),
        ec2_instance_type=config.get("ec2_instance_type") or EC2_INSTANCE_TYPE,
        rds_instance_class=config.get("rds_instance_class") or RDS_INSTANCE_CLASS,
        rds_allocated_storage=_positive_int(config, "rds_allocated_storage", RDS_ALLOCATED_STORAGE),
        rds_baseline_storage_type=baseline_storage,
        enable_deletion_protection=config.get_bool("enable_deletion_protection") or False,
    )
