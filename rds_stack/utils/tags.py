"""
Tag factory for AWS resources.

Provides consistent tagging for cost allocation and resource management.
"""

from rds_stack.configs.base import EnvironmentConfig
from rds_stack.configs.constants import DEFAULT_TAGS


def create_tags(
    config: EnvironmentConfig,
    resource_name: str,
    **extra_tags: str,
) -> dict[str, str]:
    """
    Create a standard tag set for an AWS resource.

    Args:
        config: Environment configuration (contributes Environment and Variant)
        resource_name: Name of the resource
        **extra_tags: Additional tags to include

    Returns:
        Dictionary of tags
    """
    return merge_tags(
        DEFAULT_TAGS,
        config.get_tags(),
        {"Name": resource_name},
        extra_tags,
    )


def merge_tags(
    base_tags: dict[str, str],
    *additional_tags: dict[str, str],
) -> dict[str, str]:
    """
    Merge multiple tag dictionaries.

    Args:
        base_tags: Base tag dictionary
        *additional_tags: Additional tag dictionaries to merge

    Returns:
        Merged tag dictionary
    """
    result = base_tags.copy()
    for tags in additional_tags:
        result.update(tags)
    return result
