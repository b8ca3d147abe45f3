"""Typed release configuration.

`ReleaseConfig` is built once per invocation from command-line options merged
over an optional `.ghrel.toml` in the working directory, then passed to every
release step unchanged.

Example `.ghrel.toml`:

    file = "deploy.sh"
    changelog = "docs/CHANGELOG.md"
    remote = "upstream"
    extensions = [".sh", ".py"]
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_str, get_str_list

__all__ = [
    "DEFAULT_CHANGELOG",
    "DEFAULT_EXTENSIONS",
    "DEFAULT_REMOTE",
    "DEFAULT_TARGET_FILE",
    "SETTINGS_FILE",
    "ConfigError",
    "ReleaseConfig",
    "Settings",
    "build_release_config",
    "load_settings",
]

DEFAULT_TARGET_FILE = "header-info.txt"
DEFAULT_CHANGELOG = "CHANGELOG.md"
DEFAULT_REMOTE = "origin"
DEFAULT_EXTENSIONS: tuple[str, ...] = (".sh", ".py", ".go", ".tf")

SETTINGS_FILE = ".ghrel.toml"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when the settings file cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class Settings:
    """Project defaults read from `.ghrel.toml` (all optional)."""

    file: str | None = None
    changelog: str | None = None
    remote: str | None = None
    extensions: tuple[str, ...] | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, object], *, path: Path) -> Result[Settings, ConfigError]:
        for key in ("file", "changelog", "remote"):
            if key in data and get_str(data, key) is None:
                return Err(ConfigError(f"'{key}' must be a non-empty string", path=path))

        extensions: tuple[str, ...] | None = None
        if "extensions" in data:
            items = get_str_list(data, "extensions")
            if not items:
                return Err(
                    ConfigError("'extensions' must be a non-empty list of strings", path=path)
                )
            extensions = tuple(_normalize_extension(e) for e in items)

        return Ok(
            cls(
                file=get_str(data, "file"),
                changelog=get_str(data, "changelog"),
                remote=get_str(data, "remote"),
                extensions=extensions,
            )
        )


@dataclass(frozen=True, slots=True)
class ReleaseConfig:
    """Immutable configuration for one release run."""

    target_file: Path
    changelog_file: Path
    add_all: bool = False
    dry_run: bool = False
    commit_message: str | None = None
    remote: str = DEFAULT_REMOTE
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS


def _normalize_extension(ext: str) -> str:
    return ext if ext.startswith(".") else f".{ext}"


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Settings root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Settings file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading settings: {e}", path=path))


def load_settings(cwd: Path) -> Result[Settings, ConfigError]:
    """Load `.ghrel.toml` from cwd, or default settings if there is none."""
    path = cwd / SETTINGS_FILE
    if not path.exists():
        return Ok(Settings())

    parsed = _parse_toml(path)
    if isinstance(parsed, Err):
        return parsed
    return Settings.from_dict(parsed.value, path=path)


def build_release_config(
    *,
    cwd: Path,
    file: Path | None = None,
    changelog: Path | None = None,
    remote: str | None = None,
    message: str | None = None,
    add_all: bool = False,
    dry_run: bool = False,
) -> Result[ReleaseConfig, ConfigError]:
    """Merge command-line options over the settings file.

    Options left as None fall back to `.ghrel.toml`, then to the built-in
    defaults. Relative paths are resolved against cwd.
    """
    settings_r = load_settings(cwd)
    if isinstance(settings_r, Err):
        return settings_r
    settings = settings_r.value

    target = file if file is not None else Path(settings.file or DEFAULT_TARGET_FILE)
    changelog_path = (
        changelog if changelog is not None else Path(settings.changelog or DEFAULT_CHANGELOG)
    )

    commit_message = message.strip() if message is not None else None

    return Ok(
        ReleaseConfig(
            target_file=target if target.is_absolute() else cwd / target,
            changelog_file=changelog_path if changelog_path.is_absolute() else cwd / changelog_path,
            add_all=add_all,
            dry_run=dry_run,
            commit_message=commit_message or None,
            remote=(remote or "").strip() or settings.remote or DEFAULT_REMOTE,
            extensions=settings.extensions or DEFAULT_EXTENSIONS,
        )
    )
