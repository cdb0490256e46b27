from __future__ import annotations

import json
from pathlib import Path

from .errors import RepositoryAccessError
from .git import get_config_value


def load_config(config_path: Path) -> dict:
    if not config_path.exists():
        return {}
    try:
        text = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise RepositoryAccessError(f"cannot read config {config_path}: {e}") from e
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a JSON object: {config_path}")
    return data


def resolve_email(cli_email: str | None, config: dict, repo: Path) -> str:
    """
    Pick the author email to count: --email, then config "email", then git's user.email.

    An explicit --email is used as given, so "" matches no commit.
    """
    if cli_email is not None:
        return cli_email

    cfg_email = str(config.get("email", "") or "").strip()
    if cfg_email:
        return cfg_email

    git_email = get_config_value(repo, "user.email")
    if git_email:
        return git_email

    raise RepositoryAccessError("user.email is not set; pass --email EMAIL (or --email '*' for all authors)")
