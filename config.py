"""
Centralized configuration for begone.

All constants, rule tables, and display settings are defined here.
This ensures a single source of truth and makes the tool easy to maintain.

There is no configuration file: the rule table is fixed.
"""

# ============================================================================
# Rule Table
# ============================================================================

# Disposable directory names per ecosystem.
# Keys are EcosystemKind values; "all" is derived in cleaning.rules.
# Names are matched exactly and case-sensitively against directory names.
TARGET_DIRECTORIES = {
    "rust": (
        "target",
    ),
    "python": (
        ".venv",
        "venv",
        "__pycache__",
        ".pytest_cache",
        ".mypy_cache",
    ),
    "js": (
        "node_modules",
        ".next",
        ".nuxt",
        ".cache",
        "dist",
        "build",
    ),
    "java": (
        "target",
        "build",
        ".gradle",
        ".classpath",
    ),
    "go": (
        "bin",
        "pkg",
        "__debug_bin",
    ),
    "dotnet": (
        "bin",
        "obj",
    ),
}

# Files whose presence marks a project root, used with --require-marker.
# Glob patterns (fnmatch, case-sensitive) are allowed.
PROJECT_MARKERS = {
    "rust": ("Cargo.toml",),
    "python": ("requirements.txt", "pyproject.toml", "setup.py", "Pipfile"),
    "js": ("package.json",),
    "java": ("pom.xml", "build.gradle", "build.gradle.kts"),
    "go": ("go.mod", "go.sum"),
    "dotnet": ("*.csproj", "*.fsproj", "*.sln"),
}

# Human-readable ecosystem names for log and summary output
ECOSYSTEM_LABELS = {
    "rust": "Rust",
    "python": "Python",
    "js": "JavaScript/TypeScript",
    "java": "Java",
    "go": "Go",
    "dotnet": ".NET",
    "all": "all",
}

# ============================================================================
# Process Configuration
# ============================================================================

# Exit status for configuration errors (bad root path, bad flag combination)
EXIT_CONFIG_ERROR = 1

# Maximum length of a sanitized log value
LOG_VALUE_MAX_LENGTH = 200

# ============================================================================
# Display Configuration
# ============================================================================

# Line prefixes per event action
ACTION_LABELS = {
    "deleted": "Removed:",
    "would_delete": "Would remove:",
    "failed": "Failed to remove:",
    "visited": "Visited:",
}

# Prefix used instead of ACTION_LABELS["failed"] when listing, not deletion, failed
LISTING_FAILED_LABEL = "Failed to read:"

# Export columns (CSV order)
EXPORT_FIELDS = ["path", "action", "reason"]


# ANSI color codes for terminal output
class Colors:
    """
    Terminal color codes for event output.

    Color scheme:
        GREEN: Directory removed
        YELLOW: Directory would be removed (dry run)
        RED: Removal or listing failed
        DIM: Directory visited without a match (verbose)
        BOLD: Action labels
        RESET: Reset to terminal default colors
    """
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    RED = '\033[91m'
    DIM = '\033[2m'
    BOLD = '\033[1m'
    RESET = '\033[0m'
