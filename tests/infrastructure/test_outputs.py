"""Tests for stack output helpers."""

import pulumi

from rds_stack.utils.outputs import format_env, write_outputs_to_env


class TestFormatEnv:
    """Tests for format_env."""

    def test_upper_cases_and_sorts_keys(self):
        assert format_env({"vpc_id": "vpc-1", "db_port": 3306}) == "DB_PORT=3306\nVPC_ID=vpc-1\n"

    def test_none_becomes_empty(self):
        assert format_env({"bastion_instance_id": None}) == "BASTION_INSTANCE_ID=\n"


class TestWriteOutputsToEnv:
    """Tests for write_outputs_to_env."""

    @pulumi.runtime.test
    def test_writes_resolved_outputs(self, pulumi_mocks, tmp_path):
        target = tmp_path / "infrastructure.env"

        written = write_outputs_to_env(
            {"vpc_id": pulumi.Output.from_input("vpc-123"), "db_port": 3306},
            str(target),
        )

        def check(path):
            assert path == str(target)
            assert target.read_text() == "DB_PORT=3306\nVPC_ID=vpc-123\n"

        return written.apply(check)
