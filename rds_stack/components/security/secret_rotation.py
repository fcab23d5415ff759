"""
Secret rotation component for the MySQL admin credential.

How it works:
1. Rotation function: the AWS-published Serverless Application Repository app
   SecretsManagerRDSMySQLRotationSingleUser is deployed as a CloudFormation stack.
   It runs in the isolated subnets and talks to Secrets Manager through the interface
   endpoint (no internet route exists).
2. Rotation schedule: aws.secretsmanager.SecretRotation binds the secret to the function.
   It is declared with the usual 30-day baseline, then patched to every 4 hours by a
   property override on the rotation rules.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from rds_stack.configs.base import EnvironmentConfig
from rds_stack.configs.constants import (
    ROTATION_APPLICATION_ID,
    ROTATION_BASELINE_SCHEDULE,
    ROTATION_SCHEDULE_EXPRESSION,
)
from rds_stack.utils.overrides import property_override
from rds_stack.utils.tags import create_tags

SECRET_ROTATION_TYPE = "aws:secretsmanager/secretRotation:SecretRotation"


@dataclass
class RotationOutputs:
    """Output values from secret rotation component."""
    rotation_lambda_arn: pulumi.Output[str]
    schedule_expression: pulumi.Output[str]


class SecretRotationComponent(pulumi.ComponentResource):
    """Single-user rotation of the database admin secret."""

    def __init__(
        self,
        name: str,
        config: EnvironmentConfig,
        secret_id: pulumi.Input[str],
        subnet_ids: list[pulumi.Input[str]],
        security_group_id: pulumi.Input[str],
        secrets_service_url: str,
        exclude_characters: str,
        depends_on: list[pulumi.Resource] | None = None,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:security:SecretRotation", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        self.application = aws.serverlessrepository.CloudFormationStack(
            f"{name}-rotation-app",
            name=f"{name}-rotation",
            application_id=ROTATION_APPLICATION_ID,
            capabilities=["CAPABILITY_IAM", "CAPABILITY_RESOURCE_POLICY"],
            parameters={
                "endpoint": secrets_service_url,
                "functionName": f"{name}-rotation",
                "vpcSubnetIds": pulumi.Output.all(*subnet_ids).apply(",".join),
                "vpcSecurityGroupIds": security_group_id,
                "excludeCharacters": exclude_characters,
            },
            tags=create_tags(config, f"{name}-rotation-app"),
            opts=child_opts,
        )

        self.rotation_lambda_arn = self.application.outputs.apply(
            lambda outputs: outputs["RotationLambdaARN"]
        )

        # Baseline cadence, patched to every 4 hours before registration
        self.rotation = aws.secretsmanager.SecretRotation(
            f"{name}-rotation",
            secret_id=secret_id,
            rotation_lambda_arn=self.rotation_lambda_arn,
            rotation_rules=aws.secretsmanager.SecretRotationRotationRulesArgs(
                schedule_expression=ROTATION_BASELINE_SCHEDULE,
            ),
            opts=pulumi.ResourceOptions(
                parent=self,
                depends_on=depends_on or [],
                transformations=[
                    property_override(
                        SECRET_ROTATION_TYPE,
                        "rotation_rules",
                        aws.secretsmanager.SecretRotationRotationRulesArgs(
                            schedule_expression=ROTATION_SCHEDULE_EXPRESSION,
                        ),
                    ),
                ],
            ),
        )

        self.register_outputs({
            "rotation_lambda_arn": self.rotation_lambda_arn,
        })

    def get_outputs(self) -> RotationOutputs:
        """Get rotation output values."""
        return RotationOutputs(
            rotation_lambda_arn=self.rotation_lambda_arn,
            schedule_expression=self.rotation.rotation_rules.apply(
                lambda rules: rules.schedule_expression
            ),
        )
