"""Standard flag tables.

Each catalog below belongs to the option group that owns its flags:

  base:    runtime options shared by every evaluating subcommand
  project: project-directory options
  test:    test-report options
  command: options specific to individual subcommands

``COMMAND_CATALOGS`` lists which of these each subcommand assembles into its
effective flag set.  Order matters for help output only.
"""

from flagcat.catalog import FlagCatalog
from flagcat.flag import Flag

BASE_FLAGS = FlagCatalog(
    "base",
    {
        "ALLOWED_MODULES": Flag("--allowed-modules"),
        "ALLOWED_RESOURCES": Flag("--allowed-resources"),
        "ROOT_DIR": Flag("--root-dir"),
        "CACHE_DIR": Flag("--cache-dir"),
        "WORKING_DIR": Flag("--working-dir", "-w"),
        "PROPERTY": Flag("--property", "-p"),
        "COLOR": Flag("--color"),
        "NO_CACHE": Flag("--no-cache"),
        "FORMAT": Flag("--format", "-f"),
        "ENV_VAR": Flag("--env-var", "-e"),
        "MODULE_PATH": Flag("--module-path"),
        "SETTINGS": Flag("--settings"),
        "TIMEOUT": Flag("--timeout", "-t"),
        "CA_CERTIFICATES": Flag("--ca-certificates"),
        "HTTP_PROXY": Flag("--http-proxy"),
        "HTTP_NO_PROXY": Flag("--http-no-proxy"),
        "EXTERNAL_MODULE_READER": Flag("--external-module-reader"),
        "EXTERNAL_RESOURCE_READER": Flag("--external-resource-reader"),
        "TEST_PORT": Flag("--test-port"),
    },
)

PROJECT_FLAGS = FlagCatalog(
    "project",
    {
        "PROJECT_DIR": Flag("--project-dir"),
        "OMIT_PROJECT_SETTINGS": Flag("--omit-project-settings"),
        "NO_PROJECT": Flag("--no-project"),
    },
)

TEST_FLAGS = FlagCatalog(
    "test",
    {
        "JUNIT_REPORTS": Flag("--junit-reports"),
        "OVERWRITE": Flag("--overwrite"),
    },
)

COMMAND_FLAGS = FlagCatalog(
    "command",
    {
        "OUTPUT_PATH": Flag("--output-path", "-o"),
        "MODULE_OUTPUT_SEPARATOR": Flag("--module-output-separator"),
        "EXPRESSION": Flag("--expression", "-x"),
        "MULTIPLE_FILE_OUTPUT_PATH": Flag("--multiple-file-output-path", "-m"),
        "SKIP_PUBLISH_CHECK": Flag("--skip-publish-check"),
        "TEST_MODE": Flag("--test-mode"),
        "NO_TRANSITIVE": Flag("--no-transitive"),
    },
)

STANDARD_CATALOGS: tuple[FlagCatalog, ...] = (
    COMMAND_FLAGS,
    BASE_FLAGS,
    PROJECT_FLAGS,
    TEST_FLAGS,
)

COMMAND_CATALOGS: dict[str, list[str]] = {
    "eval": ["command", "base", "project"],
    "test": ["base", "project", "test"],
    "repl": ["base", "project"],
    "server": ["base"],
    "project resolve": ["base"],
    "project package": ["command", "base", "project", "test"],
    "download-package": ["command", "base", "project"],
}
