"""
devopsfetch Reports - One retrieval routine per topic.
"""

from devopsfetch.reports.activity import show_time_range
from devopsfetch.reports.containers import show_docker
from devopsfetch.reports.health import show_checks
from devopsfetch.reports.monitor import continuous_monitor
from devopsfetch.reports.ports import show_ports
from devopsfetch.reports.routes import show_nginx
from devopsfetch.reports.users import show_users

__all__ = [
    "continuous_monitor",
    "show_checks",
    "show_docker",
    "show_nginx",
    "show_ports",
    "show_time_range",
    "show_users",
]
