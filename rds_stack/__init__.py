"""
Pulumi infrastructure-as-code for the RDS MySQL stack.

This package defines AWS infrastructure including:
- VPC with public and isolated subnets across two AZs (no NAT)
- Secrets Manager interface endpoint inside the isolated subnets
- RDS MySQL instance reachable only from inside the VPC
- Generated admin credential with single-user rotation
- EventBridge Scheduler trigger for rotation (scheduler variant)
- SSM-managed bastion EC2 instance (bastion variant)
"""
