"""
devopsfetch Configuration Constants.

Defaults for paths, limits and timeouts.
"""

from pathlib import Path

# Data directory (settings file, logs)
DATA_DIR = Path.home() / ".devopsfetch"
CONFIG_FILE = DATA_DIR / "config.yaml"

# Host paths
NGINX_CONF_DIR = "/etc/nginx/sites-enabled"
PASSWD_FILE = "/etc/passwd"

# Accounts below this uid are system accounts
MIN_USER_UID = 1000

# Limits
LOG_WINDOW_LIMIT = 50
LOGIN_HISTORY_LIMIT = 5

# External command timeout (seconds)
COMMAND_TIMEOUT = 30

# Placeholders for accounts without login history
NEVER_LOGGED_IN = "Never logged in"
NO_ORIGIN = "-"
