"""
Detailed tests for individual stack components.

Validates:
1. Each component class has required attributes
2. Components are properly organized in packages
3. Output dataclasses have required fields
"""

from dataclasses import fields, is_dataclass
from pathlib import Path

import pytest


def field_names(cls) -> set[str]:
    return {f.name for f in fields(cls)}


class TestNetworkingComponents:
    """Tests for networking infrastructure components."""

    def test_vpc_component_attributes(self):
        from rds_stack.components.networking.vpc import VpcComponent

        assert hasattr(VpcComponent, "get_outputs")
        assert hasattr(VpcComponent, "_create_route_tables")

    def test_vpc_outputs_fields(self):
        from rds_stack.components.networking.vpc import VpcOutputs

        assert {
            "vpc_id",
            "vpc_cidr",
            "public_subnet_ids",
            "isolated_subnet_ids",
            "availability_zones",
            "isolated_route_table_id",
        }.issubset(field_names(VpcOutputs))

    def test_vpc_outputs_has_no_nat_gateway(self):
        """Isolated subnets have no egress path, so no NAT gateway is exposed."""
        from rds_stack.components.networking.vpc import VpcOutputs

        assert not any("nat" in name for name in field_names(VpcOutputs))

    def test_security_group_outputs_fields(self):
        from rds_stack.components.networking.security_groups import SecurityGroupOutputs

        assert {"database_sg_id", "endpoints_sg_id", "rotation_sg_id", "bastion_sg_id"}.issubset(
            field_names(SecurityGroupOutputs)
        )

    def test_vpc_endpoint_outputs_fields(self):
        from rds_stack.components.networking.vpc_endpoints import VpcEndpointOutputs

        assert {"secrets_endpoint_id", "secrets_service_url"}.issubset(field_names(VpcEndpointOutputs))


class TestSecurityComponents:
    """Tests for security infrastructure components."""

    def test_iam_role_outputs_fields(self):
        from rds_stack.components.security.iam_roles import IamRoleOutputs

        assert {"scheduler_role_arn", "bastion_role_arn", "bastion_instance_profile_name"}.issubset(
            field_names(IamRoleOutputs)
        )

    def test_secrets_manager_component_attributes(self):
        from rds_stack.components.security.secrets_manager import SecretsManagerComponent

        assert hasattr(SecretsManagerComponent, "attach_database")
        assert hasattr(SecretsManagerComponent, "get_outputs")

    def test_secret_outputs_fields(self):
        from rds_stack.components.security.secrets_manager import SecretOutputs

        assert {"secret_arn", "secret_name"}.issubset(field_names(SecretOutputs))

    def test_rotation_outputs_fields(self):
        from rds_stack.components.security.secret_rotation import RotationOutputs

        assert {"rotation_lambda_arn", "schedule_expression"}.issubset(field_names(RotationOutputs))


class TestIamPolicyDocuments:
    """Tests for IAM policy document builders."""

    @pytest.mark.parametrize("service", ["scheduler.amazonaws.com", "ec2.amazonaws.com"])
    def test_assume_role_policy(self, service):
        from rds_stack.components.security.iam_roles import assume_role_policy

        policy = assume_role_policy(service)

        assert policy["Version"] == "2012-10-17"
        (statement,) = policy["Statement"]
        assert statement["Effect"] == "Allow"
        assert statement["Action"] == "sts:AssumeRole"
        assert statement["Principal"] == {"Service": service}

    def test_rotate_secret_policy_is_least_privilege(self):
        from rds_stack.components.security.iam_roles import rotate_secret_policy

        arn = "arn:aws:secretsmanager:ap-northeast-1:123456789012:secret:/rds/rds-db-instance/admin-AbCdEf"
        policy = rotate_secret_policy(arn)

        (statement,) = policy["Statement"]
        assert statement["Effect"] == "Allow"
        assert statement["Action"] == "secretsmanager:RotateSecret"
        assert statement["Resource"] == arn


class TestStorageComponents:
    """Tests for storage infrastructure components."""

    def test_rds_component_attributes(self):
        from rds_stack.components.storage.rds_mysql import RdsMysqlComponent

        assert hasattr(RdsMysqlComponent, "get_outputs")

    def test_rds_outputs_fields(self):
        from rds_stack.components.storage.rds_mysql import RdsOutputs

        assert {"instance_identifier", "endpoint", "port", "subnet_group_name"}.issubset(
            field_names(RdsOutputs)
        )


class TestOptionalLayers:
    """Tests for the scheduler and bastion components."""

    def test_scheduler_outputs_fields(self):
        from rds_stack.components.scheduling.rotation_scheduler import SchedulerOutputs

        assert is_dataclass(SchedulerOutputs)
        assert {"schedule_name", "schedule_arn"}.issubset(field_names(SchedulerOutputs))

    def test_bastion_outputs_fields(self):
        from rds_stack.components.compute.bastion import BastionOutputs

        assert is_dataclass(BastionOutputs)
        assert {"instance_id", "public_ip"}.issubset(field_names(BastionOutputs))


class TestComponentPackageStructure:
    """Tests for component package organization."""

    def test_all_component_packages_have_init(self, package_root):
        for name in ("networking", "security", "storage", "scheduling", "compute"):
            init_file = package_root / "components" / name / "__init__.py"
            assert init_file.exists(), f"Missing __init__.py in {name}"

    def test_config_packages_have_init(self, package_root):
        for name in ("configs", "utils", "components"):
            init_file = package_root / name / "__init__.py"
            assert init_file.exists(), f"Missing __init__.py in {name}"

    def test_stack_definitions_exist(self):
        root = Path(__file__).parent.parent.parent

        assert (root / "Pulumi.yaml").exists()
        assert (root / "Pulumi.scheduler.yaml").exists()
        assert (root / "Pulumi.bastion.yaml").exists()


class TestComponentExports:
    """Tests for component __init__ files."""

    def test_networking_exports_components(self):
        from rds_stack.components import networking

        for name in ("VpcComponent", "SecurityGroupsComponent", "VpcEndpointsComponent"):
            assert name in networking.__all__
            assert getattr(networking, name) is not None

    def test_security_exports_components(self):
        from rds_stack.components import security

        for name in ("IamRolesComponent", "SecretsManagerComponent", "SecretRotationComponent"):
            assert name in security.__all__

    def test_storage_exports_components(self):
        from rds_stack.components.storage import RdsMysqlComponent, RdsOutputs

        assert RdsMysqlComponent is not None
        assert RdsOutputs is not None

    def test_scheduling_exports_components(self):
        from rds_stack.components.scheduling import RotationSchedulerComponent

        assert RotationSchedulerComponent is not None

    def test_compute_exports_components(self):
        from rds_stack.components.compute import BastionComponent

        assert BastionComponent is not None
