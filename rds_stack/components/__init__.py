"""
Pulumi component resources for the RDS stack.

Each submodule provides reusable ComponentResource classes:
- networking: VPC, subnets, security groups, Secrets Manager endpoint
- storage: RDS MySQL
- security: IAM roles, admin secret, secret rotation
- scheduling: EventBridge Scheduler rotation trigger
- compute: SSM bastion
"""
