"""Tests for the architecture diagram labels."""

from rds_stack.architecture_diagram import layer_labels
from rds_stack.configs.base import StackVariant


class TestLayerLabels:
    """Tests for layer_labels."""

    def test_scheduler_variant_has_no_bastion(self):
        labels = layer_labels(StackVariant.SCHEDULER)

        assert "scheduler" in labels
        assert "bastion" not in labels
        assert "cron(* * * * ? *)" in labels["scheduler"]

    def test_bastion_variant_has_no_scheduler(self):
        labels = layer_labels(StackVariant.BASTION)

        assert "bastion" in labels
        assert "scheduler" not in labels

    def test_shared_layers(self):
        for variant in StackVariant:
            labels = layer_labels(variant)

            assert "rds-db-instance" in labels["database"]
            assert "8.0.30" in labels["database"]
            assert "/rds/rds-db-instance/admin" in labels["secret"]
            assert "10.0.1.0/24" in labels["vpc"]
