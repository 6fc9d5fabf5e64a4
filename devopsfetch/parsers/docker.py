"""
Container runtime adapter.

Every docker call uses ``--format '{{json .}}'`` so fields are read by name
rather than by column position.
"""

from __future__ import annotations

import json
from typing import Any

from devopsfetch.core.exceptions import DockerParseError
from devopsfetch.core.models import ContainerDetail, ContainerRecord, ImageRecord, Mount

JSON_FORMAT = "{{json .}}"

IMAGES_COMMAND = ["docker", "images", "--format", JSON_FORMAT]
CONTAINERS_COMMAND = ["docker", "ps", "-a", "--format", JSON_FORMAT]


def inspect_command(container: str) -> list[str]:
    return ["docker", "inspect", "--format", JSON_FORMAT, container]


def _load_object(line: str) -> dict[str, Any]:
    try:
        data = json.loads(line)
    except json.JSONDecodeError as e:
        raise DockerParseError(line, f"invalid JSON: {e.msg}") from e
    if not isinstance(data, dict):
        raise DockerParseError(line, "expected a JSON object")
    return data


def parse_json_lines(output: str) -> list[dict[str, Any]]:
    """Parse one JSON object per non-empty line."""
    return [_load_object(line) for line in output.splitlines() if line.strip()]


def parse_images(output: str) -> list[ImageRecord]:
    return [
        ImageRecord(
            repository=str(item.get("Repository", "")),
            tag=str(item.get("Tag", "")),
            image_id=str(item.get("ID", "")),
            size=str(item.get("Size", "")),
        )
        for item in parse_json_lines(output)
    ]


def parse_containers(output: str) -> list[ContainerRecord]:
    return [
        ContainerRecord(
            name=str(item.get("Names", "")),
            image=str(item.get("Image", "")),
            status=str(item.get("Status", "")),
            ports=str(item.get("Ports", "")),
        )
        for item in parse_json_lines(output)
    ]


def parse_inspect(output: str) -> list[ContainerDetail]:
    """Parse ``docker inspect`` output, one detail per object."""
    details: list[ContainerDetail] = []
    for item in parse_json_lines(output):
        state = item.get("State") or {}
        config = item.get("Config") or {}
        network = item.get("NetworkSettings") or {}
        mounts = tuple(
            Mount(source=str(m.get("Source", "")), destination=str(m.get("Destination", "")))
            for m in (item.get("Mounts") or [])
        )
        details.append(
            ContainerDetail(
                name=str(item.get("Name", "")),
                state=str(state.get("Status", "")),
                image=str(config.get("Image", "")),
                created=str(item.get("Created", "")),
                ip_address=str(network.get("IPAddress", "")),
                mounts=mounts,
            )
        )
    return details
