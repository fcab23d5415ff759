"""
Utility functions for Pulumi infrastructure.

Provides naming conventions, tag factories, property overrides and output utilities.
"""

from rds_stack.utils.naming import ResourceNamer
from rds_stack.utils.tags import create_tags, merge_tags
from rds_stack.utils.overrides import property_override
from rds_stack.utils.outputs import write_outputs_to_env

__all__ = [
    "ResourceNamer",
    "create_tags",
    "merge_tags",
    "property_override",
    "write_outputs_to_env",
]
