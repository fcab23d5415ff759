"""
VPC Component Resource for Network Infrastructure.

Steps & Architecture:
1. VPC (10.0.1.0/24): Defines the isolated network container, DNS hostnames and support on.
2. Internet Gateway (IGW): the only door to the internet, used by the public subnets.
3. Subnets (/27, two AZs, planned by configs.subnets):
   - Public (10.0.1.0/27, 10.0.1.32/27): bastion host.
   - Isolated (10.0.1.64/27, 10.0.1.96/27): RDS, rotation function, Secrets Manager endpoint.
4. Route Tables:
   - Public RT: 0.0.0.0/0 -> IGW.
   - Isolated RT: No routes at all. There is no NAT gateway, so isolated subnets only
     have the implicit "local" route and reach AWS APIs through VPC endpoints.
5. Associations: Explicitly linking subnets to route tables.
"""

from collections.abc import Sequence
from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from rds_stack.configs.base import EnvironmentConfig
from rds_stack.configs.subnets import SubnetSpec, plan_subnets
from rds_stack.utils.tags import create_tags


@dataclass
class VpcOutputs:
    """Output values from VPC component."""
    vpc_id: pulumi.Output[str]
    vpc_cidr: pulumi.Output[str]
    public_subnet_ids: list[pulumi.Output[str]]
    isolated_subnet_ids: list[pulumi.Output[str]]
    availability_zones: list[str]
    isolated_route_table_id: pulumi.Output[str]


def resolve_availability_zones(config: EnvironmentConfig) -> list[str]:
    """
    Pick the AZs to spread subnets over.

    Uses the configured list when present, otherwise the first `max_azs`
    available zones of the provider region.
    """
    if config.availability_zones:
        return list(config.availability_zones[: config.max_azs])
    zones = aws.get_availability_zones(state="available")
    return list(zones.names[: config.max_azs])


class VpcComponent(pulumi.ComponentResource):
    """
    VPC component with public and isolated subnets.

    No NAT gateway is created: isolated subnets have no outbound internet route.
    """

    def __init__(
        self,
        name: str,
        config: EnvironmentConfig,
        availability_zones: Sequence[str],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:networking:Vpc", name, None, opts)
        self.config = config
        self.availability_zones = list(availability_zones)
        self.subnet_plan: list[SubnetSpec] = plan_subnets(
            config.vpc_cidr,
            config.subnet_cidr_mask,
            self.availability_zones,
        )

        child_opts = pulumi.ResourceOptions(parent=self)

        # Create VPC
        self.vpc = aws.ec2.Vpc(
            f"{name}-vpc",
            cidr_block=config.vpc_cidr,
            enable_dns_hostnames=True,
            enable_dns_support=True,
            tags=create_tags(config, f"{name}-vpc"),
            opts=child_opts,
        )

        # Internet Gateway (public subnets only)
        self.igw = aws.ec2.InternetGateway(
            f"{name}-igw",
            vpc_id=self.vpc.id,
            tags=create_tags(config, f"{name}-igw"),
            opts=child_opts,
        )

        self.subnets: list[tuple[SubnetSpec, aws.ec2.Subnet]] = []
        for spec in self.subnet_plan:
            subnet = aws.ec2.Subnet(
                f"{name}-{spec.key}-subnet",
                vpc_id=self.vpc.id,
                cidr_block=spec.cidr_block,
                availability_zone=spec.availability_zone,
                map_public_ip_on_launch=spec.is_public,
                tags=create_tags(config, f"{name}-{spec.key}-subnet", SubnetType=spec.subnet_type),
                opts=child_opts,
            )
            self.subnets.append((spec, subnet))

        self.public_subnets = [s for spec, s in self.subnets if spec.is_public]
        self.isolated_subnets = [s for spec, s in self.subnets if not spec.is_public]

        self._create_route_tables(name, child_opts)

        self.register_outputs({
            "vpc_id": self.vpc.id,
            "vpc_cidr": self.vpc.cidr_block,
            "public_subnet_ids": [s.id for s in self.public_subnets],
            "isolated_subnet_ids": [s.id for s in self.isolated_subnets],
            "isolated_route_table_id": self.isolated_rt.id,
        })

    def _create_route_tables(
        self,
        name: str,
        opts: pulumi.ResourceOptions,
    ) -> None:
        """Create route tables for public and isolated subnets."""
        # Public route table (Internet Gateway)
        public_rt = aws.ec2.RouteTable(
            f"{name}-public-rt",
            vpc_id=self.vpc.id,
            routes=[
                aws.ec2.RouteTableRouteArgs(
                    cidr_block="0.0.0.0/0",
                    gateway_id=self.igw.id,
                ),
            ],
            tags=create_tags(self.config, f"{name}-public-rt"),
            opts=opts,
        )

        # Isolated route table (VPC-local routing only)
        self.isolated_rt = aws.ec2.RouteTable(
            f"{name}-isolated-rt",
            vpc_id=self.vpc.id,
            routes=[],
            tags=create_tags(self.config, f"{name}-isolated-rt"),
            opts=opts,
        )

        for spec, subnet in self.subnets:
            aws.ec2.RouteTableAssociation(
                f"{name}-{spec.key}-rt-assoc",
                subnet_id=subnet.id,
                route_table_id=public_rt.id if spec.is_public else self.isolated_rt.id,
                opts=opts,
            )

    def get_outputs(self) -> VpcOutputs:
        """Get VPC output values."""
        return VpcOutputs(
            vpc_id=self.vpc.id,
            vpc_cidr=self.vpc.cidr_block,
            public_subnet_ids=[s.id for s in self.public_subnets],
            isolated_subnet_ids=[s.id for s in self.isolated_subnets],
            availability_zones=self.availability_zones,
            isolated_route_table_id=self.isolated_rt.id,
        )
