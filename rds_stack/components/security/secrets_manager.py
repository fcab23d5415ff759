"""
Secrets Manager component for the database admin credential.

Creates:
- Generated 32-character password (pulumi_random, stored encrypted in state)
- Secret at /rds/rds-db-instance/admin
- Secret version holding {"username": "admin", "password": ...} plus the connection
  fields the single-user rotation function needs (engine, host, port, identifier)

The version is written once the database exists. After that, rotation owns the value,
so later deployments ignore drift in secret_string.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws
import pulumi_random as random

from rds_stack.configs.base import EnvironmentConfig
from rds_stack.configs.constants import DB_ADMIN_SECRET_NAME, DB_ENGINE
from rds_stack.configs.password_policy import PasswordPolicy
from rds_stack.utils.tags import create_tags


@dataclass
class SecretOutputs:
    """Output values from Secrets Manager component."""
    secret_arn: pulumi.Output[str]
    secret_name: pulumi.Output[str]


class SecretsManagerComponent(pulumi.ComponentResource):
    """
    Generated admin credential for the RDS instance.

    The password is generated, never supplied, and follows the PasswordPolicy.
    """

    def __init__(
        self,
        name: str,
        config: EnvironmentConfig,
        policy: PasswordPolicy,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:security:SecretsManager", name, None, opts)
        self.config = config
        self.policy = policy
        self._name = name

        child_opts = pulumi.ResourceOptions(parent=self)

        self.password = random.RandomPassword(
            f"{name}-db-admin-password",
            **policy.random_password_args(),
            opts=child_opts,
        )

        self.secret = aws.secretsmanager.Secret(
            f"{name}-db-admin-secret",
            name=DB_ADMIN_SECRET_NAME,
            description="Admin credentials for the RDS MySQL instance",
            recovery_window_in_days=30 if config.is_production else 0,
            tags=create_tags(config, f"{name}-db-admin-secret"),
            opts=child_opts,
        )

        self.secret_version: aws.secretsmanager.SecretVersion | None = None

        self.register_outputs({
            "secret_arn": self.secret.arn,
            "secret_name": self.secret.name,
        })

    def attach_database(self, instance: aws.rds.Instance) -> aws.secretsmanager.SecretVersion:
        """
        Write the secret value with the connection fields of `instance`.

        Args:
            instance: RDS instance whose admin password is the generated one

        Returns:
            The secret version resource
        """
        secret_string = pulumi.Output.all(
            password=self.password.result,
            host=instance.address,
            port=instance.port,
            identifier=instance.identifier,
        ).apply(lambda v: self.policy.render(
            v["password"],
            engine=DB_ENGINE,
            host=v["host"],
            port=int(v["port"]),
            dbInstanceIdentifier=v["identifier"],
        ))

        self.secret_version = aws.secretsmanager.SecretVersion(
            f"{self._name}-db-admin-secret-version",
            secret_id=self.secret.id,
            secret_string=pulumi.Output.secret(secret_string),
            opts=pulumi.ResourceOptions(
                parent=self,
                ignore_changes=["secret_string"],
            ),
        )
        return self.secret_version

    def get_outputs(self) -> SecretOutputs:
        """Get secret output values."""
        return SecretOutputs(
            secret_arn=self.secret.arn,
            secret_name=self.secret.name,
        )
