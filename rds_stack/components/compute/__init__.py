"""
Compute components.

Components:
- BastionComponent: SSM-managed EC2 bastion (bastion variant)
"""

from rds_stack.components.compute.bastion import BastionComponent, BastionOutputs

__all__ = [
    "BastionComponent",
    "BastionOutputs",
]
