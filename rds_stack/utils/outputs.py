"""
Stack output helpers.

Writes resolved stack outputs to a dotenv file for local tooling
(e.g., a MySQL client run through the bastion).
"""

from pathlib import Path
from typing import Any

import pulumi


def format_env(values: dict[str, Any]) -> str:
    """Render KEY=value lines with upper-cased keys, sorted by key."""
    lines = [f"{key.upper()}={'' if value is None else value}" for key, value in sorted(values.items())]
    return "\n".join(lines) + "\n"


def write_outputs_to_env(
    outputs: dict[str, pulumi.Input[Any]],
    filename: str,
) -> pulumi.Output[str] | None:
    """
    Resolve outputs and write them to a dotenv file.

    Skipped during preview, where most values are still unknown.

    Args:
        outputs: Export name to value mapping
        filename: Target file, relative to the working directory

    Returns:
        Output of the written path, or None during preview
    """
    if pulumi.runtime.is_dry_run():
        return None

    def _write(resolved: dict[str, Any]) -> str:
        path = Path(filename)
        path.write_text(format_env(resolved))
        pulumi.log.info(f"Wrote {len(resolved)} outputs to {path}")
        return str(path)

    return pulumi.Output.all(**outputs).apply(_write)
