"""
Constants
Fixed lookup tables for registry roots, Windows defaults, reserved device
names, and repository marker files.

Every table is an ordered tuple so lookups are deterministic: where a rule
says "first match wins", declaration order decides.
"""

# ---------------------------------------------------------------------------
# Windows Registry
# ---------------------------------------------------------------------------
REGISTRY_ROOT_ABBREVIATIONS: tuple[tuple[str, str], ...] = (
    ("HKLM\\", "HKEY_LOCAL_MACHINE\\"),
    ("HKCU\\", "HKEY_CURRENT_USER\\"),
    ("HKCR\\", "HKEY_CLASSES_ROOT\\"),
    ("HKU\\",  "HKEY_USERS\\"),
    ("HKCC\\", "HKEY_CURRENT_CONFIG\\"),
)


# ---------------------------------------------------------------------------
# Windows environment placeholders → default install locations
# ---------------------------------------------------------------------------
# Best-effort defaults for a stock installation, not a live lookup.
WINDOWS_ENV_DEFAULTS: tuple[tuple[str, str], ...] = (
    ("%SystemRoot%",         "C:\\Windows"),
    ("%ProgramFiles%",       "C:\\Program Files"),
    ("%ProgramFiles(x86)%",  "C:\\Program Files (x86)"),
    ("%USERPROFILE%",        "C:\\Users\\Default"),
    ("%APPDATA%",            "C:\\Users\\Default\\AppData\\Roaming"),
    ("%LOCALAPPDATA%",       "C:\\Users\\Default\\AppData\\Local"),
    ("%TEMP%",               "C:\\Windows\\Temp"),
    ("%WINDIR%",             "C:\\Windows"),
)


# ---------------------------------------------------------------------------
# Windows reserved device names
# ---------------------------------------------------------------------------
WINDOWS_RESERVED_NAMES: frozenset[str] = frozenset(
    ["CON", "PRN", "AUX", "NUL"]
    + [f"COM{i}" for i in range(1, 10)]
    + [f"LPT{i}" for i in range(1, 10)]
)


# ---------------------------------------------------------------------------
# Marker file → project type
# ---------------------------------------------------------------------------
PROJECT_MARKERS: tuple[tuple[str, str], ...] = (
    ("package.json",     "nodejs"),
    ("pom.xml",          "maven"),
    ("build.gradle",     "gradle"),
    ("build.gradle.kts", "gradle"),
    ("Cargo.toml",       "rust"),
    ("go.mod",           "golang"),
    ("requirements.txt", "python"),
    ("setup.py",         "python"),
    ("pyproject.toml",   "python"),
    ("composer.json",    "php"),
    ("Gemfile",          "ruby"),
)


# ---------------------------------------------------------------------------
# Monorepo indicator files
# ---------------------------------------------------------------------------
MONOREPO_INDICATORS: tuple[str, ...] = (
    "lerna.json",
    "nx.json",
    "rush.json",
    "pnpm-workspace.yaml",
    "workspace.json",
    ".gitmodules",
)
