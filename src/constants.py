"""Constants used in the project."""

from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    NOT_RESOLVED = 1
    INVALID_NAME = 2
    FILE_ERROR = 3


class EntrySource(Enum):
    """Manifest field that produced a package entry.

    Args:
        Enum (string): Manifest field names.
    """

    MODULE = "module"
    EXPORTS = "exports"
    MAIN = "main"


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    NODE_MODULES_DIR = "node_modules"
    PACKAGE_JSON_FILE = "package.json"
    MODULE_TYPE_ESM = "module"
    ROOT_EXPORT = "."
    CONDITION_IMPORT = "import"
    CONDITION_REQUIRE = "require"
    LOG_FORMAT = "[%(levelname)s] %(message)s"
    LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    DEFAULT_LOG_LEVEL = "WARNING"

    # Package name rules (validate-npm-package-name)
    MAX_NAME_LENGTH = 214
    BLOCKED_NAMES = ["node_modules", "favicon.ico"]
    NAME_SPECIAL_CHARS = "~'!()*"
    # Characters JavaScript's encodeURIComponent leaves untouched beyond alphanumerics
    URI_COMPONENT_SAFE = "-_.!~*'()"
    NODE_CORE_MODULES = [
        "assert",
        "assert/strict",
        "async_hooks",
        "buffer",
        "child_process",
        "cluster",
        "console",
        "constants",
        "crypto",
        "dgram",
        "diagnostics_channel",
        "dns",
        "dns/promises",
        "domain",
        "events",
        "fs",
        "fs/promises",
        "http",
        "http2",
        "https",
        "inspector",
        "module",
        "net",
        "os",
        "path",
        "path/posix",
        "path/win32",
        "perf_hooks",
        "process",
        "punycode",
        "querystring",
        "readline",
        "readline/promises",
        "repl",
        "stream",
        "stream/consumers",
        "stream/promises",
        "stream/web",
        "string_decoder",
        "sys",
        "timers",
        "timers/promises",
        "tls",
        "trace_events",
        "tty",
        "url",
        "util",
        "util/types",
        "v8",
        "vm",
        "wasi",
        "worker_threads",
        "zlib",
    ]
