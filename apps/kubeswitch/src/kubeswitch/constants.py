"""Centralized constants for kubeswitch."""

from __future__ import annotations

# Flags
FLAGS_HELP = frozenset({"-h", "--help"})
FLAGS_VERSION = frozenset({"-V", "--version"})
FLAGS_CURRENT = frozenset({"-c", "--current"})
FLAGS_UNSET = frozenset({"-u", "--unset"})
FLAGS_DELETE = frozenset({"-d", "--delete"})
FLAGS_FORCE = frozenset({"-f", "--force"})
FLAG_PREFIX = "-"
RENAME_SEPARATOR = "="

# Parse failure messages
MSG_UNSUPPORTED_OPTION = "unsupported option '{flag}'"
MSG_TOO_MANY_ARGUMENTS = "too many arguments"
MSG_NEEDS_ARGUMENTS = "'{flag}' needs arguments"

# Environment
ENV_CONTEXT_FALLBACK = "KUBECTX_FZF_FALLBACK"
ENV_NAMESPACE_USE_QUERY = "KUBENS_FZF_USE_QUERY"
ENV_IGNORE_PICKER = "KUBECTX_IGNORE_FZF"
ENV_DEBUG = "KUBESWITCH_DEBUG"
ENV_LOG_FILE = "KUBESWITCH_LOG_FILE"
PICKER_EXECUTABLE = "fzf"

# Output
STDERR_ERROR_PREFIX = "ERROR: "
STDERR_UNEXPECTED_PREFIX = "ERROR: Unexpected: "
CLI_HELP_HINT = "Run '{command} --help' for usage."
INTERRUPTED_MESSAGE = "Interrupted."
EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130

# Logging
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
