"""
Scheduling components.

Components:
- RotationSchedulerComponent: EventBridge Scheduler RotateSecret trigger (scheduler variant)
"""

from rds_stack.components.scheduling.rotation_scheduler import (
    RotationSchedulerComponent,
    SchedulerOutputs,
)

__all__ = [
    "RotationSchedulerComponent",
    "SchedulerOutputs",
]
