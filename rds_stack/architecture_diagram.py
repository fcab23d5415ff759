"""
RDS stack architecture diagram.

Generates the network, database and credential layout for one stack variant.

Dependencies:
    pip install -e ".[diagram]"   (plus the Graphviz `dot` binary)

Usage:
    python -m rds_stack.architecture_diagram scheduler
    # Outputs: rds_stack_scheduler.png
"""

import sys

from diagrams import Diagram, Cluster, Edge
from diagrams.aws.compute import EC2, Lambda
from diagrams.aws.database import RDS
from diagrams.aws.general import Users
from diagrams.aws.integration import Eventbridge
from diagrams.aws.management import SystemsManager
from diagrams.aws.network import VPC, Endpoint, InternetGateway
from diagrams.aws.security import IAMRole, SecretsManager

from rds_stack.configs.base import StackVariant
from rds_stack.configs.constants import (
    DB_ADMIN_SECRET_NAME,
    DB_ENGINE_VERSION,
    DB_INSTANCE_IDENTIFIER,
    DB_STORAGE_TYPE,
    ROTATION_SCHEDULE_EXPRESSION,
    SCHEDULER_EXPRESSION,
    SCHEDULER_NAME,
    VPC_CIDR,
)

graph_attr = {
    "fontsize": "14",
    "bgcolor": "white",
    "pad": "0.5",
    "splines": "ortho",
    "nodesep": "0.8",
    "ranksep": "1.2",
}

node_attr = {
    "fontsize": "11",
    "height": "1.2",
    "width": "1.5",
}


def layer_labels(variant: StackVariant) -> dict[str, str]:
    """Node labels for the given variant, keyed by node role."""
    labels = {
        "vpc": f"VPC\n{VPC_CIDR}\nNo NAT",
        "database": f"{DB_INSTANCE_IDENTIFIER}\nMySQL {DB_ENGINE_VERSION}\n{DB_STORAGE_TYPE}, single AZ",
        "endpoint": "Secrets Manager\nInterface Endpoint",
        "rotation": f"Rotation Lambda\n(SAR single-user)\n{ROTATION_SCHEDULE_EXPRESSION}",
        "secret": f"{DB_ADMIN_SECRET_NAME}\nusername + generated password",
    }
    if variant is StackVariant.SCHEDULER:
        labels["scheduler"] = f"{SCHEDULER_NAME}\n{SCHEDULER_EXPRESSION}"
        labels["scheduler_role"] = "Scheduler Role\nRotateSecret only"
    else:
        labels["bastion"] = "Bastion EC2\npublic subnet\n8 GB gp3"
        labels["ssm"] = "Session Manager"
    return labels


def draw(variant: StackVariant, filename: str | None = None) -> str:
    """
    Render the diagram for one variant.

    Args:
        variant: Stack variant to draw
        filename: Output file name without extension

    Returns:
        Output file name without extension
    """
    filename = filename or f"rds_stack_{variant.value}"
    labels = layer_labels(variant)

    with Diagram(
        f"RDS MySQL Stack ({variant.value} variant)",
        filename=filename,
        show=False,
        direction="TB",
        graph_attr=graph_attr,
        node_attr=node_attr,
    ):
        with Cluster(labels["vpc"]):
            vpc = VPC("VPC")

            with Cluster("Isolated Subnets (2 AZs, /27)"):
                database = RDS(labels["database"])
                rotation = Lambda(labels["rotation"])
                endpoint = Endpoint(labels["endpoint"])

            if variant is StackVariant.BASTION:
                with Cluster("Public Subnets (2 AZs, /27)"):
                    igw = InternetGateway("Internet Gateway")
                    bastion = EC2(labels["bastion"])

        secret = SecretsManager(labels["secret"])

        vpc >> Edge(style="dotted") >> database
        rotation >> Edge(label="MySQL 3306", color="darkgreen") >> database
        rotation >> Edge(label="HTTPS 443", color="blue") >> endpoint
        endpoint >> Edge(label="PrivateLink", color="blue") >> secret
        secret >> Edge(label="rotation rule", style="dashed") >> rotation

        if variant is StackVariant.SCHEDULER:
            scheduler = Eventbridge(labels["scheduler"])
            role = IAMRole(labels["scheduler_role"])
            scheduler >> Edge(label="assumes", style="dashed") >> role
            scheduler >> Edge(label="RotateSecret", color="red") >> secret
        else:
            admins = Users("Administrators")
            ssm = SystemsManager(labels["ssm"])
            admins >> Edge(label="start-session", color="orange") >> ssm >> bastion
            igw >> Edge(style="dotted") >> bastion
            bastion >> Edge(label="MySQL 3306", color="darkgreen") >> database

    return filename


if __name__ == "__main__":
    draw(StackVariant(sys.argv[1]) if len(sys.argv) > 1 else StackVariant.BASTION)
