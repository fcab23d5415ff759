"""
EventBridge Scheduler trigger for secret rotation (scheduler variant).

Calls the Secrets Manager RotateSecret API directly through the scheduler's universal
target (aws-sdk:secretsmanager:rotateSecret) every minute, Asia/Tokyo time.

Retry policy: 0 retries and a 60-second maximum event age. A missed or failed
invocation is dropped, never queued.

This cadence is independent of the 4-hour rotation rule on the secret itself. Both
request rotation of the same secret and nothing here serializes them.
"""

import json
from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from rds_stack.configs.constants import (
    ROTATION_SCHEDULE_EXPRESSION,
    SCHEDULER_EXPRESSION,
    SCHEDULER_NAME,
    SCHEDULER_RETRY_POLICY,
    SCHEDULER_TARGET_ARN,
    SCHEDULER_TIMEZONE,
)


@dataclass
class SchedulerOutputs:
    """Output values from rotation scheduler component."""
    schedule_name: pulumi.Output[str]
    schedule_arn: pulumi.Output[str]


class RotationSchedulerComponent(pulumi.ComponentResource):
    """Recurring RotateSecret invocation for the admin secret."""

    def __init__(
        self,
        name: str,
        secret_arn: pulumi.Input[str],
        role_arn: pulumi.Input[str],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:scheduling:RotationScheduler", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        pulumi.log.warn(
            f"{SCHEDULER_NAME} ({SCHEDULER_EXPRESSION}) and the secret rotation rule "
            f"({ROTATION_SCHEDULE_EXPRESSION}) both rotate the same secret independently",
            resource=self,
        )

        self.schedule = aws.scheduler.Schedule(
            f"{name}-rotate-secret",
            name=SCHEDULER_NAME,
            description="Rotate the database admin secret",
            schedule_expression=SCHEDULER_EXPRESSION,
            schedule_expression_timezone=SCHEDULER_TIMEZONE,
            flexible_time_window=aws.scheduler.ScheduleFlexibleTimeWindowArgs(
                mode="OFF",
            ),
            target=aws.scheduler.ScheduleTargetArgs(
                arn=SCHEDULER_TARGET_ARN,
                role_arn=role_arn,
                input=pulumi.Output.from_input(secret_arn).apply(
                    lambda arn: json.dumps({"SecretId": arn})
                ),
                retry_policy=aws.scheduler.ScheduleTargetRetryPolicyArgs(
                    **SCHEDULER_RETRY_POLICY,
                ),
            ),
            opts=child_opts,
        )

        self.register_outputs({
            "schedule_name": self.schedule.name,
            "schedule_arn": self.schedule.arn,
        })

    def get_outputs(self) -> SchedulerOutputs:
        """Get scheduler output values."""
        return SchedulerOutputs(
            schedule_name=self.schedule.name,
            schedule_arn=self.schedule.arn,
        )
