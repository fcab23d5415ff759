"""
IAM roles component for the optional stack layers.

Creates:
- Scheduler execution role (scheduler variant): trusted only by scheduler.amazonaws.com,
  allowed only secretsmanager:RotateSecret on the admin secret
- Bastion role + instance profile (bastion variant): trusted by ec2.amazonaws.com, with
  the AmazonSSMManagedInstanceCore managed policy for Session Manager access
"""

import json
from dataclasses import dataclass
from typing import Any

import pulumi
import pulumi_aws as aws

from rds_stack.configs.base import EnvironmentConfig
from rds_stack.configs.constants import SSM_MANAGED_POLICY_ARN
from rds_stack.utils.tags import create_tags


def assume_role_policy(service: str) -> dict[str, Any]:
    """Trust policy allowing a single AWS service principal to assume the role."""
    return {
        "Version": "2012-10-17",
        "Statement": [{
            "Effect": "Allow",
            "Principal": {"Service": service},
            "Action": "sts:AssumeRole",
        }],
    }


def rotate_secret_policy(secret_arn: str) -> dict[str, Any]:
    """Permission to rotate exactly one secret, and nothing else."""
    return {
        "Version": "2012-10-17",
        "Statement": [{
            "Effect": "Allow",
            "Action": "secretsmanager:RotateSecret",
            "Resource": secret_arn,
        }],
    }


@dataclass
class IamRoleOutputs:
    """Output values from IAM roles component."""
    scheduler_role_arn: pulumi.Output[str] | None
    bastion_role_arn: pulumi.Output[str] | None
    bastion_instance_profile_name: pulumi.Output[str] | None


class IamRolesComponent(pulumi.ComponentResource):
    """
    IAM roles for the scheduler or the bastion.

    Follows least-privilege principle with specific resource permissions.
    """

    def __init__(
        self,
        name: str,
        config: EnvironmentConfig,
        secret_arn: pulumi.Input[str],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:security:IamRoles", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        self.scheduler_role = None
        self.scheduler_policy = None
        if config.has_scheduler:
            self.scheduler_role = aws.iam.Role(
                f"{name}-scheduler-role",
                assume_role_policy=json.dumps(assume_role_policy("scheduler.amazonaws.com")),
                tags=create_tags(config, f"{name}-scheduler-role"),
                opts=child_opts,
            )

            self.scheduler_policy = aws.iam.RolePolicy(
                f"{name}-scheduler-policy",
                role=self.scheduler_role.id,
                policy=pulumi.Output.from_input(secret_arn).apply(
                    lambda arn: json.dumps(rotate_secret_policy(arn))
                ),
                opts=child_opts,
            )

        self.bastion_role = None
        self.bastion_ssm_attachment = None
        self.bastion_instance_profile = None
        if config.has_bastion:
            self.bastion_role = aws.iam.Role(
                f"{name}-bastion-role",
                assume_role_policy=json.dumps(assume_role_policy("ec2.amazonaws.com")),
                tags=create_tags(config, f"{name}-bastion-role"),
                opts=child_opts,
            )

            self.bastion_ssm_attachment = aws.iam.RolePolicyAttachment(
                f"{name}-bastion-ssm-core",
                role=self.bastion_role.name,
                policy_arn=SSM_MANAGED_POLICY_ARN,
                opts=child_opts,
            )

            self.bastion_instance_profile = aws.iam.InstanceProfile(
                f"{name}-bastion-profile",
                role=self.bastion_role.name,
                tags=create_tags(config, f"{name}-bastion-profile"),
                opts=child_opts,
            )

        outputs = self.get_outputs()
        self.register_outputs({
            "scheduler_role_arn": outputs.scheduler_role_arn,
            "bastion_role_arn": outputs.bastion_role_arn,
            "bastion_instance_profile_name": outputs.bastion_instance_profile_name,
        })

    def get_outputs(self) -> IamRoleOutputs:
        """Get IAM role output values."""
        return IamRoleOutputs(
            scheduler_role_arn=self.scheduler_role.arn if self.scheduler_role else None,
            bastion_role_arn=self.bastion_role.arn if self.bastion_role else None,
            bastion_instance_profile_name=(
                self.bastion_instance_profile.name if self.bastion_instance_profile else None
            ),
        )
