"""
Networking components for VPC infrastructure.

Components:
- VpcComponent: VPC with public and isolated subnets, route tables
- SecurityGroupsComponent: Security groups for database, endpoint, rotation, bastion
- VpcEndpointsComponent: Secrets Manager interface endpoint
"""

from rds_stack.components.networking.vpc import VpcComponent, VpcOutputs, resolve_availability_zones
from rds_stack.components.networking.security_groups import SecurityGroupsComponent, SecurityGroupOutputs
from rds_stack.components.networking.vpc_endpoints import VpcEndpointsComponent, VpcEndpointOutputs

__all__ = [
    "VpcComponent",
    "VpcOutputs",
    "resolve_availability_zones",
    "SecurityGroupsComponent",
    "SecurityGroupOutputs",
    "VpcEndpointsComponent",
    "VpcEndpointOutputs",
]
