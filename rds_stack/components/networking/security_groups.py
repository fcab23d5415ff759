"""
Security Groups Component for Network Access Control.

Access Patterns:
- Database: Accepts MySQL (3306) ONLY from the VPC's own CIDR block. Never 0.0.0.0/0.
- Endpoints: Accepts HTTPS (443) from the VPC CIDR, like an interface endpoint's default SG.
- Rotation: Outbound only. The rotation function connects to the database and to the
  Secrets Manager endpoint, both covered by the rules above.
- Bastion (bastion variant): Outbound only. Administration goes through SSM Session
  Manager, so no inbound port is opened.

Security groups are stateful: allowing an inbound request automatically allows the reply.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from rds_stack.configs.base import EnvironmentConfig
from rds_stack.configs.constants import PORTS
from rds_stack.utils.tags import create_tags


@dataclass
class SecurityGroupOutputs:
    """Output values from security groups component."""
    database_sg_id: pulumi.Output[str]
    endpoints_sg_id: pulumi.Output[str]
    rotation_sg_id: pulumi.Output[str]
    bastion_sg_id: pulumi.Output[str] | None


class SecurityGroupsComponent(pulumi.ComponentResource):
    """
    Security groups component for network access control.

    Ingress is CIDR-based and scoped to the VPC block; nothing is open to the internet.
    """

    def __init__(
        self,
        name: str,
        config: EnvironmentConfig,
        vpc_id: pulumi.Input[str],
        vpc_cidr: pulumi.Input[str],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:networking:SecurityGroups", name, None, opts)
        self.config = config

        child_opts = pulumi.ResourceOptions(parent=self)

        # Database security group
        self.database_sg = aws.ec2.SecurityGroup(
            f"{name}-database-sg",
            description="Security group for RDS MySQL",
            vpc_id=vpc_id,
            tags=create_tags(config, f"{name}-database-sg"),
            opts=child_opts,
        )

        # VPC endpoints security group
        self.endpoints_sg = aws.ec2.SecurityGroup(
            f"{name}-endpoints-sg",
            description="Security group for the Secrets Manager VPC endpoint",
            vpc_id=vpc_id,
            tags=create_tags(config, f"{name}-endpoints-sg"),
            opts=child_opts,
        )

        # Rotation function security group
        self.rotation_sg = aws.ec2.SecurityGroup(
            f"{name}-rotation-sg",
            description="Security group for the secret rotation function",
            vpc_id=vpc_id,
            tags=create_tags(config, f"{name}-rotation-sg"),
            opts=child_opts,
        )

        self.bastion_sg = None
        if config.has_bastion:
            self.bastion_sg = aws.ec2.SecurityGroup(
                f"{name}-bastion-sg",
                description="Security group for the SSM-managed bastion",
                vpc_id=vpc_id,
                tags=create_tags(config, f"{name}-bastion-sg"),
                opts=child_opts,
            )

        self._create_rules(name, vpc_cidr, child_opts)

        self.register_outputs({
            "database_sg_id": self.database_sg.id,
            "endpoints_sg_id": self.endpoints_sg.id,
            "rotation_sg_id": self.rotation_sg.id,
            "bastion_sg_id": self.bastion_sg.id if self.bastion_sg else None,
        })

    def _create_rules(
        self,
        name: str,
        vpc_cidr: pulumi.Input[str],
        opts: pulumi.ResourceOptions,
    ) -> None:
        """Create security group rules."""
        # Database: Allow MySQL from inside the VPC only
        self.database_ingress = aws.vpc.SecurityGroupIngressRule(
            f"{name}-database-ingress-mysql",
            security_group_id=self.database_sg.id,
            ip_protocol="tcp",
            from_port=PORTS["mysql"],
            to_port=PORTS["mysql"],
            cidr_ipv4=vpc_cidr,
            description="MySQL from within the VPC",
            opts=opts,
        )

        # Endpoints: Allow HTTPS from inside the VPC
        self.endpoints_ingress = aws.vpc.SecurityGroupIngressRule(
            f"{name}-endpoints-ingress-https",
            security_group_id=self.endpoints_sg.id,
            ip_protocol="tcp",
            from_port=PORTS["https"],
            to_port=PORTS["https"],
            cidr_ipv4=vpc_cidr,
            description="HTTPS from within the VPC",
            opts=opts,
        )

        # All groups: Allow all outbound
        egress_groups = [
            ("database", self.database_sg),
            ("endpoints", self.endpoints_sg),
            ("rotation", self.rotation_sg),
        ]
        if self.bastion_sg is not None:
            egress_groups.append(("bastion", self.bastion_sg))

        for group_name, group in egress_groups:
            aws.vpc.SecurityGroupEgressRule(
                f"{name}-{group_name}-egress-all",
                security_group_id=group.id,
                ip_protocol="-1",
                cidr_ipv4="0.0.0.0/0",
                description="All outbound traffic",
                opts=opts,
            )

    def get_outputs(self) -> SecurityGroupOutputs:
        """Get security group output values."""
        return SecurityGroupOutputs(
            database_sg_id=self.database_sg.id,
            endpoints_sg_id=self.endpoints_sg.id,
            rotation_sg_id=self.rotation_sg.id,
            bastion_sg_id=self.bastion_sg.id if self.bastion_sg else None,
        )
