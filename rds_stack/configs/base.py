"""
Base configuration dataclass for environment settings.

Provides type-safe configuration structure loaded from Pulumi stack configs.
"""

from dataclasses import dataclass
from enum import Enum


class StackVariant(str, Enum):
    """Which optional layer the stack carries next to the database."""

    SCHEDULER = "scheduler"
    BASTION = "bastion"


@dataclass(frozen=True)
class EnvironmentConfig:
    """
    Environment-specific configuration for infrastructure deployment.

    Attributes:
        environment: Deployment environment (dev, staging, prod)
        variant: Stack variant (scheduler or bastion)
        vpc_cidr: Address block of the VPC
        subnet_cidr_mask: Prefix length of every subnet
        max_azs: Number of availability zones to spread subnets over
        availability_zones: Explicit AZ names; looked up from AWS when empty
        ec2_instance_type: EC2 instance type for the bastion
        rds_instance_class: RDS instance class for MySQL
        rds_allocated_storage: RDS storage in GB
        rds_baseline_storage_type: Storage type declared before the gp3 patch
        enable_deletion_protection: Enable deletion protection for the database
    """
    environment: str
    variant: StackVariant
    vpc_cidr: str
    subnet_cidr_mask: int
    max_azs: int
    availability_zones: tuple[str, ...]
    ec2_instance_type: str
    rds_instance_class: str
    rds_allocated_storage: int
    rds_baseline_storage_type: str
    enable_deletion_protection: bool

    @property
    def is_production(self) -> bool:
        """Check if this is a production environment."""
        return self.environment == "prod"

    @property
    def has_scheduler(self) -> bool:
        return self.variant is StackVariant.SCHEDULER

    @property
    def has_bastion(self) -> bool:
        return self.variant is StackVariant.BASTION

    def get_tags(self) -> dict[str, str]:
        """Get environment-specific tags."""
        return {
            "Environment": self.environment,
            "Variant": self.variant.value,
        }
