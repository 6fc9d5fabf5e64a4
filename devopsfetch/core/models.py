"""
Record types produced by the parsing adapters.

Each record is a frozen snapshot of what an external tool reported at query
time; nothing here is written back to the system.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class PortRecord:
    """One listening socket from the socket table."""

    protocol: str
    port: str
    service: str
    process: str

    def row(self) -> list[str]:
        return [self.protocol, self.port, self.service, self.process]


@dataclass(frozen=True)
class PortProcessRecord:
    """A process listening on a specific port."""

    pid: str
    user: str
    command: str
    protocol: str
    port: str

    def row(self) -> list[str]:
        return [self.pid, self.user, self.command, self.protocol, self.port]


@dataclass(frozen=True)
class ImageRecord:
    """A container image."""

    repository: str
    tag: str
    image_id: str
    size: str

    def row(self) -> list[str]:
        return [self.repository, self.tag, self.image_id, self.size]


@dataclass(frozen=True)
class ContainerRecord:
    """A container, running or exited."""

    name: str
    image: str
    status: str
    ports: str

    def row(self) -> list[str]:
        return [self.name, self.image, self.status, self.ports]


@dataclass(frozen=True)
class Mount:
    source: str
    destination: str

    def __str__(self) -> str:
        return f"{self.source} -> {self.destination}"


@dataclass(frozen=True)
class ContainerDetail:
    """Inspection detail for a single container."""

    name: str
    state: str
    image: str
    created: str
    ip_address: str
    mounts: tuple[Mount, ...] = ()

    def fields(self) -> list[tuple[str, str]]:
        """Ordered key/value pairs for a detail block."""
        return [
            ("Name", self.name),
            ("State", self.state),
            ("Image", self.image),
            ("Created", self.created),
            ("IP Address", self.ip_address),
            ("Mounts", ", ".join(str(m) for m in self.mounts)),
        ]


@dataclass(frozen=True)
class RouteRecord:
    """A reverse-proxy site: public domain to listen port."""

    domain: str
    port: str
    config_file: str

    def row(self) -> list[str]:
        return [self.domain, self.port, self.config_file]


@dataclass(frozen=True)
class AccountEntry:
    """One line of the account database."""

    username: str
    uid: int
    gid: int
    home: str
    shell: str

    def is_interactive(self) -> bool:
        return bool(self.shell) and "nologin" not in self.shell and "false" not in self.shell

    def fields(self) -> list[tuple[str, str]]:
        return [
            ("Username", self.username),
            ("UID", str(self.uid)),
            ("GID", str(self.gid)),
            ("Home Dir", self.home),
            ("Shell", self.shell),
        ]


@dataclass(frozen=True)
class LoginEntry:
    """Most recent login of a user, as reported by the login history."""

    origin: str
    time: str


@dataclass(frozen=True)
class UserRecord:
    """An interactive account with its last login."""

    username: str
    uid: int
    last_login: str
    login_from: str

    def row(self) -> list[str]:
        return [self.username, str(self.uid), self.last_login, self.login_from]


@dataclass
class LogWindow:
    """Log lines between two bounds, capped at ``limit`` lines."""

    since: str
    until: str
    limit: int
    lines: list[str] = field(default_factory=list)
    truncated: bool = False
