# src/pyright_review/main.py
import argparse
import json
import logging
import subprocess
import sys
from functools import lru_cache
from pathlib import Path

import yaml

from pyright_review.config import Settings
from pyright_review.models.config import RepoConfig
from pyright_review.models.message import ReviewMessage
from pyright_review.review.parser import parse_diff
from pyright_review.runners.pyright import PyrightRunner


logger = logging.getLogger(__name__)


@lru_cache
def get_settings() -> Settings:
    return Settings()


def load_repo_config(path: Path) -> RepoConfig:
    """Load the repository config file or use defaults."""
    if not path.is_file():
        return RepoConfig()

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        return RepoConfig(**data)
    except Exception as e:
        logger.warning(f"Invalid {path.name}: {e}")
        return RepoConfig()


def get_diff(commit: str) -> str:
    """Diff the working tree against commit."""
    result = subprocess.run(
        ["git", "diff", "--no-color", commit],
        capture_output=True,
        text=True,
        check=False,
    )
    if result.returncode != 0:
        raise RuntimeError(f"git diff {commit} failed: {result.stderr.strip()}")
    return result.stdout


def read_diff(diff_file: str | None, commit: str) -> str:
    if diff_file is None:
        return get_diff(commit)
    if diff_file == "-":
        return sys.stdin.read()
    return Path(diff_file).read_text(encoding="utf-8")


def format_message(message: ReviewMessage) -> str:
    return f"{message.path}:{message.line}: {message.level or 'unknown'}: {message.msg or ''}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pyright-review",
        description="Report pyright diagnostics that fall on lines added by a change.",
    )
    parser.add_argument("-c", "--commit", help="commit to diff the working tree against")
    parser.add_argument("--diff-file", help="read the unified diff from a file ('-' for stdin)")
    parser.add_argument("-f", "--format", choices=("text", "json"), default="text")
    parser.add_argument(
        "--exit-code",
        action="store_true",
        help="exit with status 1 when any message is reported",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()

    logging.basicConfig(level=settings.log_level.upper(), stream=sys.stderr)

    commit = args.commit or settings.default_commit
    root = Path.cwd()

    try:
        patches = parse_diff(read_diff(args.diff_file, commit), root=root)
        config = load_repo_config(root / settings.repo_config_file)
        messages = PyrightRunner(patches, commit=commit, config=config).run()
    except Exception as e:
        logger.exception(f"Review failed: {e}")
        return 2

    if args.format == "json":
        print(json.dumps([message.model_dump() for message in messages], indent=2))
    else:
        for message in messages:
            print(format_message(message))

    if args.exit_code and messages:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
