"""
RDS MySQL Component for the relational database.

Access Control - Who Can Connect:
1. Anything inside the VPC CIDR -> Port 3306 (bastion, rotation function)
2. Anyone else -> DENIED

Placement:
- Subnet group rds-subgrp contains only isolated subnets. The instance has no public
  address and its subnets have no internet route.
- Single AZ (the first VPC AZ), no Multi-AZ standby.

Storage:
- Declared with the baseline storage type (gp2 by default) and patched to gp3 by a
  property override before registration.

Backups:
- backup_retention_period=0 disables automated backups and point-in-time recovery.

Credentials:
- Username "admin", password from the generated secret. Rotation changes the password
  afterwards, so the password input is ignored on later deployments.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from rds_stack.configs.base import EnvironmentConfig
from rds_stack.configs.constants import (
    DB_ADMIN_USERNAME,
    DB_ENGINE,
    DB_ENGINE_VERSION,
    DB_INSTANCE_IDENTIFIER,
    DB_STORAGE_TYPE,
    DB_SUBNET_GROUP_NAME,
    PORTS,
)
from rds_stack.utils.overrides import property_override
from rds_stack.utils.tags import create_tags

RDS_INSTANCE_TYPE = "aws:rds/instance:Instance"


@dataclass
class RdsOutputs:
    """Output values from RDS component."""
    instance_identifier: pulumi.Output[str]
    endpoint: pulumi.Output[str]
    port: pulumi.Output[int]
    subnet_group_name: pulumi.Output[str]


class RdsMysqlComponent(pulumi.ComponentResource):
    """
    RDS MySQL instance in the isolated subnets.
    """

    def __init__(
        self,
        name: str,
        config: EnvironmentConfig,
        subnet_ids: list[pulumi.Input[str]],
        security_group_id: pulumi.Input[str],
        availability_zone: pulumi.Input[str],
        password: pulumi.Input[str],
        depends_on: list[pulumi.Resource] | None = None,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:storage:RdsMysql", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        # DB Subnet Group
        self.subnet_group = aws.rds.SubnetGroup(
            f"{name}-subnet-group",
            name=DB_SUBNET_GROUP_NAME,
            description="RDS Subnet Group",
            subnet_ids=subnet_ids,
            tags=create_tags(config, DB_SUBNET_GROUP_NAME),
            opts=child_opts,
        )

        # RDS Instance
        self.instance = aws.rds.Instance(
            f"{name}-mysql",
            identifier=DB_INSTANCE_IDENTIFIER,
            engine=DB_ENGINE,
            engine_version=DB_ENGINE_VERSION,
            instance_class=config.rds_instance_class,
            allocated_storage=config.rds_allocated_storage,
            storage_type=config.rds_baseline_storage_type,
            storage_encrypted=True,
            username=DB_ADMIN_USERNAME,
            password=password,
            port=PORTS["mysql"],
            availability_zone=availability_zone,
            db_subnet_group_name=self.subnet_group.name,
            vpc_security_group_ids=[security_group_id],
            multi_az=False,
            publicly_accessible=False,
            backup_retention_period=0,
            deletion_protection=config.enable_deletion_protection,
            skip_final_snapshot=not config.is_production,
            final_snapshot_identifier=(
                f"{DB_INSTANCE_IDENTIFIER}-final-snapshot" if config.is_production else None
            ),
            tags=create_tags(config, DB_INSTANCE_IDENTIFIER),
            opts=pulumi.ResourceOptions(
                parent=self,
                depends_on=depends_on or [],
                ignore_changes=["password"],
                transformations=[
                    property_override(RDS_INSTANCE_TYPE, "storage_type", DB_STORAGE_TYPE),
                ],
            ),
        )

        self.register_outputs({
            "instance_identifier": self.instance.identifier,
            "endpoint": self.instance.endpoint,
            "port": self.instance.port,
            "subnet_group_name": self.subnet_group.name,
        })

    def get_outputs(self) -> RdsOutputs:
        """Get RDS output values."""
        return RdsOutputs(
            instance_identifier=self.instance.identifier,
            endpoint=self.instance.endpoint,
            port=self.instance.port,
            subnet_group_name=self.subnet_group.name,
        )
