"""
Resource naming conventions for consistent Pulumi resource names.

Follows pattern: {project}-{environment}-{resource}
"""

from dataclasses import dataclass


@dataclass
class ResourceNamer:
    """
    Generates consistent logical names for Pulumi resources.

    Physical names that existing deployments depend on (DB identifier,
    subnet group, secret path, scheduler) are fixed constants instead.

    Attributes:
        project: Project identifier
        environment: Deployment environment (dev, staging, prod)
    """
    project: str
    environment: str

    def name(self, resource: str = "") -> str:
        """
        Generate a resource name.

        Args:
            resource: Resource identifier (e.g., 'vpc', 'db-sg'); empty for the base name

        Returns:
            Formatted resource name
        """
        base = f"{self.project}-{self.environment}"
        return f"{base}-{resource}" if resource else base
