"""
Stack composition for both variants.

Instantiates all component resources in dependency order:
1. VPC -> Security Groups -> Secrets Manager endpoint
2. Admin secret (generated password)
3. RDS MySQL -> secret value with connection fields
4. Secret rotation (4-hour rule)
5. IAM roles
6. Scheduler trigger (scheduler variant) or bastion (bastion variant)
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

import pulumi

from rds_stack.configs.base import EnvironmentConfig
from rds_stack.configs.password_policy import PasswordPolicy
from rds_stack.utils.naming import ResourceNamer

# Networking
from rds_stack.components.networking.vpc import VpcComponent, resolve_availability_zones
from rds_stack.components.networking.security_groups import SecurityGroupsComponent
from rds_stack.components.networking.vpc_endpoints import VpcEndpointsComponent

# Security
from rds_stack.components.security.iam_roles import IamRolesComponent
from rds_stack.components.security.secrets_manager import SecretsManagerComponent
from rds_stack.components.security.secret_rotation import SecretRotationComponent

# Storage
from rds_stack.components.storage.rds_mysql import RdsMysqlComponent

# Optional layers
from rds_stack.components.scheduling.rotation_scheduler import RotationSchedulerComponent
from rds_stack.components.compute.bastion import BastionComponent


@dataclass
class StackResources:
    """Handles to every component of one stack; the omitted layer is None."""
    vpc: VpcComponent
    security_groups: SecurityGroupsComponent
    endpoints: VpcEndpointsComponent
    secret: SecretsManagerComponent
    database: RdsMysqlComponent
    rotation: SecretRotationComponent
    iam_roles: IamRolesComponent
    scheduler: RotationSchedulerComponent | None = None
    bastion: BastionComponent | None = None

    def exports(self) -> dict[str, pulumi.Input[Any]]:
        """Stack outputs keyed by export name."""
        vpc_outputs = self.vpc.get_outputs()
        rds_outputs = self.database.get_outputs()
        secret_outputs = self.secret.get_outputs()

        outputs: dict[str, pulumi.Input[Any]] = {
            "vpc_id": vpc_outputs.vpc_id,
            "vpc_cidr": vpc_outputs.vpc_cidr,
            "db_instance_identifier": rds_outputs.instance_identifier,
            "db_endpoint": rds_outputs.endpoint,
            "db_port": rds_outputs.port,
            "db_subnet_group": rds_outputs.subnet_group_name,
            "db_admin_secret_arn": secret_outputs.secret_arn,
            "db_admin_secret_name": secret_outputs.secret_name,
            "rotation_lambda_arn": self.rotation.get_outputs().rotation_lambda_arn,
        }
        if self.scheduler is not None:
            outputs["scheduler_name"] = self.scheduler.get_outputs().schedule_name
        if self.bastion is not None:
            outputs["bastion_instance_id"] = self.bastion.get_outputs().instance_id
        return outputs


def build_stack(
    config: EnvironmentConfig,
    namer: ResourceNamer,
    availability_zones: Sequence[str] | None = None,
    policy: PasswordPolicy | None = None,
) -> StackResources:
    """
    Declare every resource of the stack.

    Args:
        config: Validated environment configuration
        namer: Logical resource namer
        availability_zones: AZs to use; resolved from config/AWS when omitted
        policy: Admin password policy; defaults to the standard policy

    Returns:
        StackResources: Component handles for exports and tests
    """
    base_name = namer.name()
    policy = policy or PasswordPolicy()
    azs = list(availability_zones) if availability_zones else resolve_availability_zones(config)

    pulumi.log.info(f"Declaring {config.variant.value} stack {base_name} in {', '.join(azs)}")

    # --- Layer 1: Networking ---
    vpc = VpcComponent(
        name=base_name,
        config=config,
        availability_zones=azs,
    )
    vpc_outputs = vpc.get_outputs()

    security_groups = SecurityGroupsComponent(
        name=base_name,
        config=config,
        vpc_id=vpc_outputs.vpc_id,
        vpc_cidr=vpc_outputs.vpc_cidr,
    )
    sg_outputs = security_groups.get_outputs()

    endpoints = VpcEndpointsComponent(
        name=base_name,
        config=config,
        vpc_id=vpc_outputs.vpc_id,
        subnet_ids=vpc_outputs.isolated_subnet_ids,
        security_group_id=sg_outputs.endpoints_sg_id,
    )

    # --- Layer 2: Admin secret ---
    secret = SecretsManagerComponent(
        name=base_name,
        config=config,
        policy=policy,
    )

    # --- Layer 3: Database ---
    database = RdsMysqlComponent(
        name=base_name,
        config=config,
        subnet_ids=vpc_outputs.isolated_subnet_ids,
        security_group_id=sg_outputs.database_sg_id,
        availability_zone=vpc_outputs.availability_zones[0],
        password=secret.password.result,
        depends_on=[secret.secret],
    )
    secret_version = secret.attach_database(database.instance)

    # --- Layer 4: Rotation ---
    rotation = SecretRotationComponent(
        name=base_name,
        config=config,
        secret_id=secret.secret.id,
        subnet_ids=vpc_outputs.isolated_subnet_ids,
        security_group_id=sg_outputs.rotation_sg_id,
        secrets_service_url=endpoints.get_outputs().secrets_service_url,
        exclude_characters=policy.exclude_characters,
        depends_on=[secret_version, endpoints.secrets_endpoint],
    )

    # --- Layer 5: IAM ---
    iam_roles = IamRolesComponent(
        name=base_name,
        config=config,
        secret_arn=secret.secret.arn,
    )
    iam_outputs = iam_roles.get_outputs()

    resources = StackResources(
        vpc=vpc,
        security_groups=security_groups,
        endpoints=endpoints,
        secret=secret,
        database=database,
        rotation=rotation,
        iam_roles=iam_roles,
    )

    # --- Layer 6: Variant layer ---
    if config.has_scheduler:
        resources.scheduler = RotationSchedulerComponent(
            name=base_name,
            secret_arn=secret.secret.arn,
            role_arn=iam_outputs.scheduler_role_arn,
            opts=pulumi.ResourceOptions(depends_on=[iam_roles.scheduler_policy]),
        )

    if config.has_bastion:
        resources.bastion = BastionComponent(
            name=base_name,
            config=config,
            subnet_id=vpc_outputs.public_subnet_ids[0],
            security_group_id=sg_outputs.bastion_sg_id,
            instance_profile_name=iam_outputs.bastion_instance_profile_name,
        )

    return resources
