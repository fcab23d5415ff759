"""
Subnet planning for the VPC address block.

Carves the VPC CIDR into equally sized subnets, one per (layout group, AZ),
allocated in layout order first and AZ order second:

    10.0.1.0/24, /27, [a, b], [Public, Isolated]
    -> public-a 10.0.1.0/27, public-b 10.0.1.32/27,
       isolated-a 10.0.1.64/27, isolated-b 10.0.1.96/27

Plan errors are raised here so a bad mask or AZ count fails the preview.
"""

import ipaddress
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from string import ascii_lowercase

from rds_stack.configs.constants import SUBNET_LAYOUT
from rds_stack.exceptions import SubnetPlanError

PUBLIC = "public"
ISOLATED = "isolated"
SUBNET_TYPES = frozenset({PUBLIC, ISOLATED})


@dataclass(frozen=True)
class SubnetSpec:
    """One planned subnet."""
    key: str
    group: str
    subnet_type: str
    availability_zone: str
    cidr_block: str

    @property
    def is_public(self) -> bool:
        return self.subnet_type == PUBLIC


def plan_subnets(
    vpc_cidr: str,
    cidr_mask: int,
    availability_zones: Sequence[str],
    layout: Iterable[tuple[str, str]] = SUBNET_LAYOUT,
) -> list[SubnetSpec]:
    """
    Allocate subnet CIDRs for every layout group in every AZ.

    Args:
        vpc_cidr: VPC address block (e.g., '10.0.1.0/24')
        cidr_mask: Prefix length of each subnet
        availability_zones: AZ names, in allocation order
        layout: (group name, subnet type) pairs

    Returns:
        Planned subnets in allocation order

    Raises:
        SubnetPlanError: If the block is invalid or too small
    """
    if not availability_zones:
        raise SubnetPlanError("At least one availability zone is required")

    try:
        network = ipaddress.ip_network(vpc_cidr)
    except ValueError as exc:
        raise SubnetPlanError(f"Invalid VPC CIDR '{vpc_cidr}'", {"reason": str(exc)}) from exc

    if not network.prefixlen <= cidr_mask <= network.max_prefixlen:
        raise SubnetPlanError(
            f"Subnet mask /{cidr_mask} does not fit inside {network}",
            {"vpc_prefix": network.prefixlen},
        )

    layout = list(layout)
    for group, subnet_type in layout:
        if subnet_type not in SUBNET_TYPES:
            raise SubnetPlanError(f"Unknown subnet type '{subnet_type}' for group '{group}'")

    needed = len(layout) * len(availability_zones)
    available = 2 ** (cidr_mask - network.prefixlen)
    if needed > available:
        raise SubnetPlanError(
            f"{network} holds {available} /{cidr_mask} subnets, {needed} required",
            {"groups": len(layout), "azs": len(availability_zones)},
        )

    blocks = network.subnets(new_prefix=cidr_mask)
    plan = []
    for group, subnet_type in layout:
        for index, az in enumerate(availability_zones):
            plan.append(SubnetSpec(
                key=f"{group.lower()}-{ascii_lowercase[index]}",
                group=group,
                subnet_type=subnet_type,
                availability_zone=az,
                cidr_block=str(next(blocks)),
            ))
    return plan
