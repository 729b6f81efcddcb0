"""Shared constants for distro-doctor."""

CONFIG_FILE_NAME = "doctor.toml"
DEFAULT_SELECTION_FILE = "init.toml"
DEFAULT_MODULES_DIR = "modules"
DEFAULT_PACKAGES_DIR = ".local/packages"

MODULE_MANIFEST_FILE = "module.yaml"
REQUIREMENTS_FILE = "packages.py"
SELF_CHECK_FILE = "doctor.py"

ROOT_ENV_VAR = "DISTRO_DOCTOR_ROOT"
DEBUG_ENV_VAR = "DISTRO_DOCTOR_DEBUG"

# Packages that ship with the editor itself and never need installing.
DEFAULT_BUILTIN_PACKAGES: frozenset[str] = frozenset(
    {
        "abbrev",
        "ansi-color",
        "auth-source",
        "bookmark",
        "cl-lib",
        "comint",
        "compile",
        "dired",
        "eglot",
        "eldoc",
        "electric",
        "elec-pair",
        "eshell",
        "flymake",
        "gnus",
        "hideshow",
        "ibuffer",
        "imenu",
        "ispell",
        "jsonrpc",
        "org",
        "outline",
        "project",
        "python",
        "recentf",
        "savehist",
        "saveplace",
        "seq",
        "so-long",
        "subr-x",
        "tab-bar",
        "tramp",
        "treesit",
        "use-package",
        "vc",
        "which-key",
        "whitespace",
        "winner",
        "xref",
    }
)
