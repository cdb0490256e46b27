from __future__ import annotations

import subprocess
import threading
from pathlib import Path
from typing import Iterator, Optional

from .errors import DataIntegrityError, RepositoryAccessError
from .models import CommitRecord


def run_git(args: list[str], cwd: Path, timeout_s: int = 300) -> tuple[int, str, str]:
    try:
        proc = subprocess.run(
            ["git", *args],
            cwd=str(cwd),
            capture_output=True,
            text=True,
            timeout=timeout_s,
        )
    except subprocess.TimeoutExpired as e:
        raise RepositoryAccessError(f"git {args[0] if args else ''} timed out after {timeout_s}s") from e
    except OSError as e:
        raise RepositoryAccessError(f"failed to run git: {e}") from e
    return proc.returncode, proc.stdout, proc.stderr


def get_repo_toplevel(candidate: Path) -> Path:
    code, out, err = run_git(["rev-parse", "--show-toplevel"], cwd=candidate)
    if code != 0:
        raise RepositoryAccessError(err.strip() or f"not a git repository: {candidate}")
    return Path(out.strip()).resolve()


def get_config_value(repo: Path, key: str) -> Optional[str]:
    try:
        proc = subprocess.run(["git", "config", "--get", key], cwd=str(repo), capture_output=True, timeout=60)
    except subprocess.TimeoutExpired as e:
        raise RepositoryAccessError(f"git config --get {key} timed out") from e
    except OSError as e:
        raise RepositoryAccessError(f"failed to run git: {e}") from e
    # exit 1: key not set
    if proc.returncode == 1:
        return None
    if proc.returncode != 0:
        err = proc.stderr.decode("utf-8", errors="replace").strip()
        raise RepositoryAccessError(err or f"git config --get {key} failed")
    try:
        value = proc.stdout.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DataIntegrityError(f"{key} is not valid UTF-8") from e
    return value.strip() or None


def parse_log_line(raw_line: bytes) -> Optional[CommitRecord]:
    line = raw_line.rstrip(b"\r\n")
    if not line:
        return None
    ts_raw, _, email_raw = line.partition(b"\t")
    try:
        ts = int(ts_raw)
    except ValueError as e:
        raise RepositoryAccessError(f"unexpected git log output: {line!r}") from e
    try:
        email: str | None = email_raw.decode("utf-8")
    except UnicodeDecodeError:
        email = None
    return CommitRecord(timestamp=ts, author_email=email)


def iter_commits(repo: Path, rev: str = "HEAD") -> Iterator[CommitRecord]:
    """
    Yield commits reachable from `rev`, newest first by committer time.

    Closing the generator early stops the underlying git process.
    """
    cmd = ["git", "log", "--no-show-signature", "--format=%ct%x09%ae", rev, "--"]
    try:
        proc = subprocess.Popen(
            cmd,
            cwd=str(repo),
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
    except OSError as e:
        raise RepositoryAccessError(f"failed to start git log: {e}") from e

    stderr_chunks: list[bytes] = []
    stderr_bytes = 0
    max_stderr_bytes = 50_000

    def drain_stderr() -> None:
        nonlocal stderr_bytes
        if proc.stderr is None:
            return
        while True:
            chunk = proc.stderr.read(8192)
            if not chunk:
                return
            if stderr_bytes >= max_stderr_bytes:
                continue
            take = chunk[: max_stderr_bytes - stderr_bytes]
            stderr_chunks.append(take)
            stderr_bytes += len(take)

    stderr_thread = threading.Thread(target=drain_stderr, daemon=True)
    stderr_thread.start()

    finished = False
    try:
        assert proc.stdout is not None
        for raw_line in proc.stdout:
            record = parse_log_line(raw_line)
            if record is not None:
                yield record
        finished = True
    finally:
        if not finished and proc.poll() is None:
            proc.kill()
        if proc.stdout is not None:
            proc.stdout.close()
        code = proc.wait()
        stderr_thread.join(timeout=5)

    if code != 0:
        err = b"".join(stderr_chunks).decode("utf-8", errors="replace").strip()
        raise RepositoryAccessError(err or f"git log exited with code {code}")
