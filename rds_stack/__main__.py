"""
Pulumi program entry point for the RDS stack.

Loads stack configuration, declares the stack for the configured variant
(scheduler or bastion), writes outputs to infrastructure.env and exports them.
"""

import pulumi

from rds_stack.configs.environment import get_config
from rds_stack.stack import build_stack
from rds_stack.utils.naming import ResourceNamer
from rds_stack.utils.outputs import write_outputs_to_env


def main() -> None:
    """Deploy the RDS stack."""
    # Load configuration
    config = get_config()
    namer = ResourceNamer(project="rds-stack", environment=config.environment)

    resources = build_stack(config, namer)

    # --- Exports ---
    outputs = resources.exports()

    # Write outputs to .env file for local tooling
    write_outputs_to_env(outputs, "infrastructure.env")

    # Export to Pulumi stack
    for key, value in outputs.items():
        pulumi.export(key, value)

    pulumi.log.info(f"✓ {config.variant.value} stack declared with {len(outputs)} outputs")


# Execute
main()
