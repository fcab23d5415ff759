"""Pytest fixtures for infrastructure tests."""

from pathlib import Path

import pulumi
import pytest

from rds_stack.configs.base import EnvironmentConfig, StackVariant
from rds_stack.configs.constants import (
    DB_BASELINE_STORAGE_TYPE,
    EC2_INSTANCE_TYPE,
    MAX_AZS,
    RDS_ALLOCATED_STORAGE,
    RDS_INSTANCE_CLASS,
    SUBNET_CIDR_MASK,
    VPC_CIDR,
)

REGION = "ap-northeast-1"
ACCOUNT_ID = "123456789012"
AVAILABILITY_ZONES = [f"{REGION}a", f"{REGION}c", f"{REGION}d"]


class RdsStackMocks(pulumi.runtime.Mocks):
    """
    Echoes resource inputs back as outputs and fills in the provider-computed
    values the program reads (ARNs, DB address, SAR stack outputs, passwords).
    """

    def new_resource(self, args: pulumi.runtime.MockResourceArgs):
        outputs = dict(args.inputs)
        outputs.setdefault("arn", f"arn:aws:mock:{REGION}:{ACCOUNT_ID}:{args.name}")
        # Physical names default to the logical name when not set explicitly
        outputs.setdefault("name", args.name)

        if args.typ == "aws:rds/instance:Instance":
            address = f"{args.inputs.get('identifier')}.abcdefghijkl.{REGION}.rds.amazonaws.com"
            outputs["address"] = address
            outputs["endpoint"] = f"{address}:{args.inputs.get('port')}"
        elif args.typ == "aws:serverlessrepository/cloudFormationStack:CloudFormationStack":
            outputs["outputs"] = {
                "RotationLambdaARN": f"arn:aws:lambda:{REGION}:{ACCOUNT_ID}:function:{args.name}",
            }
        elif args.typ == "random:index/randomPassword:RandomPassword":
            outputs["result"] = "Abc0-Def1_Ghi2.Jkl3=Mno4^Pqr5,St"
        elif args.typ == "aws:ec2/instance:Instance":
            outputs["publicIp"] = "203.0.113.10"

        return [f"{args.name}-id", outputs]

    def call(self, args: pulumi.runtime.MockCallArgs):
        if args.token == "aws:index/getAvailabilityZones:getAvailabilityZones":
            return {
                "id": REGION,
                "names": AVAILABILITY_ZONES,
                "zoneIds": ["apne1-az4", "apne1-az1", "apne1-az2"],
                "state": "available",
            }
        if args.token == "aws:index/getRegion:getRegion":
            return {
                "id": REGION,
                "name": REGION,
                "description": "Asia Pacific (Tokyo)",
                "endpoint": f"ec2.{REGION}.amazonaws.com",
            }
        if args.token == "aws:ec2/getAmi:getAmi":
            return {
                "id": "ami-0123456789abcdef0",
                "name": "amzn2-ami-hvm-2.0.20240131.0-x86_64-gp2",
                "architecture": "x86_64",
            }
        return {}


def make_config(variant: StackVariant, **overrides) -> EnvironmentConfig:
    """Build an EnvironmentConfig with the stack defaults."""
    values = dict(
        environment="dev",
        variant=variant,
        vpc_cidr=VPC_CIDR,
        subnet_cidr_mask=SUBNET_CIDR_MASK,
        max_azs=MAX_AZS,
        availability_zones=(),
        ec2_instance_type=EC2_INSTANCE_TYPE,
        rds_instance_class=RDS_INSTANCE_CLASS,
        rds_allocated_storage=RDS_ALLOCATED_STORAGE,
        rds_baseline_storage_type=DB_BASELINE_STORAGE_TYPE,
        enable_deletion_protection=False,
    )
    values.update(overrides)
    return EnvironmentConfig(**values)


@pytest.fixture
def config_factory():
    """Return the EnvironmentConfig builder."""
    return make_config


@pytest.fixture(scope="session")
def pulumi_mocks():
    """Install Pulumi mocks once for the whole session."""
    mocks = RdsStackMocks()
    pulumi.runtime.set_mocks(mocks, project="rds-stack", stack="test", preview=False)
    return mocks


@pytest.fixture(scope="session")
def scheduler_config():
    return make_config(StackVariant.SCHEDULER)


@pytest.fixture(scope="session")
def bastion_config():
    return make_config(StackVariant.BASTION)


@pytest.fixture(scope="session")
def scheduler_stack(pulumi_mocks, scheduler_config):
    """Scheduler variant declared against the mocks."""
    from rds_stack.stack import build_stack
    from rds_stack.utils.naming import ResourceNamer

    return build_stack(scheduler_config, ResourceNamer(project="rds-stack-scheduler", environment="dev"))


@pytest.fixture(scope="session")
def bastion_stack(pulumi_mocks, bastion_config):
    """Bastion variant declared against the mocks."""
    from rds_stack.stack import build_stack
    from rds_stack.utils.naming import ResourceNamer

    return build_stack(bastion_config, ResourceNamer(project="rds-stack-bastion", environment="dev"))


@pytest.fixture(params=["scheduler", "bastion"])
def any_stack(request):
    """Each variant in turn."""
    return request.getfixturevalue(f"{request.param}_stack")


@pytest.fixture
def package_root():
    """Return the rds_stack package directory."""
    return Path(__file__).parent.parent.parent / "rds_stack"


@pytest.fixture
def python_files_in_package(package_root):
    """Return all Python files in the package."""
    return [f for f in package_root.rglob("*.py") if "__pycache__" not in str(f)]
