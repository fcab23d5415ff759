"""
Property overrides applied on top of a declared baseline.

Some settings are declared with one value and patched to another before the
resource is registered (storage tier, rotation cadence). The patch is a Pulumi
resource transformation scoped to a single resource type, so the baseline
declaration stays readable and the patch is visible in one place.

Usage:
    opts = pulumi.ResourceOptions(
        parent=self,
        transformations=[property_override("aws:rds/instance:Instance", "storage_type", "gp3")],
    )
"""

from collections.abc import Callable
from typing import Any

import pulumi

Transformation = Callable[
    [pulumi.ResourceTransformationArgs],
    pulumi.ResourceTransformationResult | None,
]


def property_override(resource_type: str, prop: str, value: Any) -> Transformation:
    """
    Build a transformation that replaces one input property.

    Args:
        resource_type: Pulumi type token the patch applies to
        prop: Input property name as passed to the resource constructor
        value: Replacement value

    Returns:
        Transformation for ResourceOptions.transformations
    """

    def _override(
        args: pulumi.ResourceTransformationArgs,
    ) -> pulumi.ResourceTransformationResult | None:
        if args.type_ != resource_type:
            return None
        pulumi.log.debug(f"Overriding {prop} on {args.name}")
        return pulumi.ResourceTransformationResult(
            props={**args.props, prop: value},
            opts=args.opts,
        )

    return _override
