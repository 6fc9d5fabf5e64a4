"""
Container report: images and containers, or one container's details.
"""

from __future__ import annotations

from loguru import logger

from devopsfetch.core.context import ReportContext
from devopsfetch.core.exceptions import CommandFailedError
from devopsfetch.core.models import ContainerDetail, ContainerRecord, ImageRecord
from devopsfetch.core.types import CommandResult
from devopsfetch.parsers.docker import (
    CONTAINERS_COMMAND,
    IMAGES_COMMAND,
    inspect_command,
    parse_containers,
    parse_images,
    parse_inspect,
)

DOCKER_HINT = "Please install Docker."

IMAGE_HEADERS = ["REPOSITORY", "TAG", "IMAGE ID", "SIZE"]
CONTAINER_HEADERS = ["NAMES", "IMAGE", "STATUS", "PORTS"]


def _docker(ctx: ReportContext, args: list[str]) -> CommandResult:
    result = ctx.executor.run(args)
    if not result.success:
        raise CommandFailedError(result.command or "docker", result.exit_code, result.stderr)
    return result


def list_images(ctx: ReportContext) -> list[ImageRecord]:
    return parse_images(_docker(ctx, IMAGES_COMMAND).stdout)


def list_containers(ctx: ReportContext) -> list[ContainerRecord]:
    """All containers, including exited ones."""
    return parse_containers(_docker(ctx, CONTAINERS_COMMAND).stdout)


def inspect_container(ctx: ReportContext, container: str) -> list[ContainerDetail]:
    """
    Inspect one container by name or id.

    An unknown container is reported by docker itself (non-zero exit and a
    message on stderr), which surfaces here as CommandFailedError.
    """
    return parse_inspect(_docker(ctx, inspect_command(container)).stdout)


def show_docker(ctx: ReportContext, container: str | None = None) -> None:
    """Print images and containers, or the details of ``container``."""
    ctx.executor.require("docker", DOCKER_HINT)

    if not container:
        images = list_images(ctx)
        containers = list_containers(ctx)
        logger.debug(f"docker: {len(images)} images, {len(containers)} containers")

        ctx.ui.heading("Docker Images")
        ctx.ui.table(IMAGE_HEADERS, [i.row() for i in images])
        ctx.ui.newline()
        ctx.ui.heading("Docker Containers (Active/Exited)")
        ctx.ui.table(CONTAINER_HEADERS, [c.row() for c in containers])
        return

    ctx.ui.heading(f"Docker Container Details: {container}")
    for detail in inspect_container(ctx, container):
        ctx.ui.details(detail.fields())
