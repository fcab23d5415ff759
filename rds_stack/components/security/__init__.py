"""
Security components for IAM, secrets and rotation.

Components:
- IamRolesComponent: Scheduler execution role or bastion SSM role
- SecretsManagerComponent: Generated database admin credential
- SecretRotationComponent: Single-user MySQL rotation
"""

from rds_stack.components.security.iam_roles import (
    IamRolesComponent,
    IamRoleOutputs,
    assume_role_policy,
    rotate_secret_policy,
)
from rds_stack.components.security.secrets_manager import SecretsManagerComponent, SecretOutputs
from rds_stack.components.security.secret_rotation import SecretRotationComponent, RotationOutputs

__all__ = [
    "IamRolesComponent",
    "IamRoleOutputs",
    "assume_role_policy",
    "rotate_secret_policy",
    "SecretsManagerComponent",
    "SecretOutputs",
    "SecretRotationComponent",
    "RotationOutputs",
]
