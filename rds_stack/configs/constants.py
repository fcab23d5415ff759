"""
Infrastructure constants for the RDS stack.

Contains CIDR defaults, instance sizes, and the fixed identifiers that
existing deployed state depends on.
"""

from typing import Final

# VPC Configuration
VPC_CIDR: Final[str] = "10.0.1.0/24"
SUBNET_CIDR_MASK: Final[int] = 27
MAX_AZS: Final[int] = 2

# Subnet layout, allocated in this order within each AZ group
SUBNET_LAYOUT: Final[tuple[tuple[str, str], ...]] = (
    ("Public", "public"),
    ("Isolated", "isolated"),
)

# Instance sizes
EC2_INSTANCE_TYPE: Final[str] = "t3.micro"
RDS_INSTANCE_CLASS: Final[str] = "db.t3.micro"
RDS_ALLOCATED_STORAGE: Final[int] = 20

# RDS
DB_INSTANCE_IDENTIFIER: Final[str] = "rds-db-instance"
DB_SUBNET_GROUP_NAME: Final[str] = "rds-subgrp"
DB_ENGINE: Final[str] = "mysql"
DB_ENGINE_VERSION: Final[str] = "8.0.30"
DB_ADMIN_USERNAME: Final[str] = "admin"
DB_BASELINE_STORAGE_TYPE: Final[str] = "gp2"
DB_STORAGE_TYPE: Final[str] = "gp3"
STORAGE_TYPES: Final[frozenset[str]] = frozenset({"standard", "gp2", "gp3", "io1", "io2"})

# Secrets Manager
DB_ADMIN_SECRET_NAME: Final[str] = f"/rds/{DB_INSTANCE_IDENTIFIER}/admin"
PASSWORD_LENGTH: Final[int] = 32
PASSWORD_EXCLUDE_CHARACTERS: Final[str] = " %+~`#$&*()|[]{}:;<>?!'/@\"\\"
SECRET_STRING_TEMPLATE: Final[dict[str, str]] = {"username": DB_ADMIN_USERNAME}
SECRET_GENERATE_KEY: Final[str] = "password"

# Rotation
ROTATION_APPLICATION_ID: Final[str] = (
    "arn:aws:serverlessrepo:us-east-1:297356227824:applications/"
    "SecretsManagerRDSMySQLRotationSingleUser"
)
ROTATION_BASELINE_SCHEDULE: Final[str] = "rate(30 days)"
ROTATION_SCHEDULE_EXPRESSION: Final[str] = "cron(0 /4 * * ? *)"

# EventBridge Scheduler (scheduler variant)
SCHEDULER_NAME: Final[str] = "rotate-db-admin-secret-every-minutes"
SCHEDULER_EXPRESSION: Final[str] = "cron(* * * * ? *)"
SCHEDULER_TIMEZONE: Final[str] = "Asia/Tokyo"
SCHEDULER_TARGET_ARN: Final[str] = "arn:aws:scheduler:::aws-sdk:secretsmanager:rotateSecret"
SCHEDULER_RETRY_POLICY: Final[dict[str, int]] = {
    "maximum_retry_attempts": 0,
    "maximum_event_age_in_seconds": 60,
}

# Bastion (bastion variant)
BASTION_AMI_NAME_PATTERN: Final[str] = "amzn2-ami-hvm-*-x86_64-gp2"
BASTION_ROOT_VOLUME: Final[dict[str, int | str]] = {
    "volume_size": 8,
    "volume_type": "gp3",
}
SSM_MANAGED_POLICY_ARN: Final[str] = "arn:aws:iam::aws:policy/AmazonSSMManagedInstanceCore"

# Default tags applied to all resources
DEFAULT_TAGS: Final[dict[str, str]] = {
    "Project": "rds-stack",
    "ManagedBy": "pulumi",
}

# Port configurations
PORTS: Final[dict[str, int]] = {
    "https": 443,
    "mysql": 3306,
}
