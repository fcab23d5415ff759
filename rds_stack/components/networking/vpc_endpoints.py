"""
VPC Endpoints Component for Private AWS Service Access.

The isolated subnets have no internet route, so the rotation function cannot reach the
public Secrets Manager API. An interface endpoint puts an ENI with a private IP inside
each isolated subnet, and private_dns_enabled=True makes the regular
secretsmanager.<region>.amazonaws.com hostname resolve to it.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from rds_stack.configs.base import EnvironmentConfig
from rds_stack.utils.tags import create_tags


@dataclass
class VpcEndpointOutputs:
    """Output values from VPC endpoints component."""
    secrets_endpoint_id: pulumi.Output[str]
    secrets_service_url: str


class VpcEndpointsComponent(pulumi.ComponentResource):
    """Secrets Manager interface endpoint in the isolated subnets."""

    def __init__(
        self,
        name: str,
        config: EnvironmentConfig,
        vpc_id: pulumi.Input[str],
        subnet_ids: list[pulumi.Input[str]],
        security_group_id: pulumi.Input[str],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:networking:VpcEndpoints", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)
        region = aws.get_region()
        self.region = region.id
        self.secrets_service_url = f"https://secretsmanager.{self.region}.amazonaws.com"

        # Secrets Manager Interface Endpoint
        self.secrets_endpoint = aws.ec2.VpcEndpoint(
            f"{name}-secrets-endpoint",
            vpc_id=vpc_id,
            service_name=f"com.amazonaws.{self.region}.secretsmanager",
            vpc_endpoint_type="Interface",
            subnet_ids=subnet_ids,
            security_group_ids=[security_group_id],
            private_dns_enabled=True,
            tags=create_tags(config, f"{name}-secrets-endpoint"),
            opts=child_opts,
        )

        self.register_outputs({
            "secrets_endpoint_id": self.secrets_endpoint.id,
        })

    def get_outputs(self) -> VpcEndpointOutputs:
        """Get VPC endpoint output values."""
        return VpcEndpointOutputs(
            secrets_endpoint_id=self.secrets_endpoint.id,
            secrets_service_url=self.secrets_service_url,
        )
