"""
Bastion EC2 Component for administrative access.

Key Components:
1. AMI: Latest Amazon Linux 2 (ships with the SSM agent).
2. Instance Profile: Carries the AmazonSSMManagedInstanceCore role, so administrators
   connect through Session Manager. No SSH key, no inbound port.
3. Placement: First PUBLIC subnet; the public route gives the SSM agent its path out.
4. Storage (root_block_device): 8 GB gp3 root volume (/dev/xvda on Amazon Linux 2), tagged at creation.
5. IMDSv2 (http_tokens="required"): Secures the metadata service against SSRF.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from rds_stack.configs.base import EnvironmentConfig
from rds_stack.configs.constants import (
    BASTION_AMI_NAME_PATTERN,
    BASTION_ROOT_VOLUME,
)
from rds_stack.utils.tags import create_tags


@dataclass
class BastionOutputs:
    """Output values from bastion component."""
    instance_id: pulumi.Output[str]
    public_ip: pulumi.Output[str]


class BastionComponent(pulumi.ComponentResource):
    """
    Single EC2 instance in the public subnet, managed through SSM.
    """

    def __init__(
        self,
        name: str,
        config: EnvironmentConfig,
        subnet_id: pulumi.Input[str],
        security_group_id: pulumi.Input[str],
        instance_profile_name: pulumi.Input[str],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:compute:Bastion", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        # Latest Amazon Linux 2 AMI
        ami = aws.ec2.get_ami(
            most_recent=True,
            owners=["amazon"],
            filters=[
                aws.ec2.GetAmiFilterArgs(
                    name="name",
                    values=[BASTION_AMI_NAME_PATTERN],
                ),
                aws.ec2.GetAmiFilterArgs(
                    name="virtualization-type",
                    values=["hvm"],
                ),
            ],
        )

        tags = create_tags(config, f"{name}-bastion")

        self.instance = aws.ec2.Instance(
            f"{name}-instance",
            ami=ami.id,
            instance_type=config.ec2_instance_type,
            subnet_id=subnet_id,
            vpc_security_group_ids=[security_group_id],
            iam_instance_profile=instance_profile_name,
            root_block_device=aws.ec2.InstanceRootBlockDeviceArgs(
                volume_size=BASTION_ROOT_VOLUME["volume_size"],
                volume_type=BASTION_ROOT_VOLUME["volume_type"],
            ),
            volume_tags=tags,
            metadata_options=aws.ec2.InstanceMetadataOptionsArgs(
                http_tokens="required",  # IMDSv2
                http_endpoint="enabled",
            ),
            tags=tags,
            opts=child_opts,
        )

        self.register_outputs({
            "instance_id": self.instance.id,
            "public_ip": self.instance.public_ip,
        })

    def get_outputs(self) -> BastionOutputs:
        """Get bastion output values."""
        return BastionOutputs(
            instance_id=self.instance.id,
            public_ip=self.instance.public_ip,
        )
