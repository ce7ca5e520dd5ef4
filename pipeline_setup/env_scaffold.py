"""Local environment scaffolder.

Writes ``.env.local`` (only when missing), rewrites ``.env.example`` and makes
sure ``.gitignore`` ignores the local environment files.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Union

from .templates import (
    ENV_LOCAL_TEMPLATE,
    ENV_EXAMPLE_TEMPLATE,
    GITIGNORE_ENV_LINES,
    GITIGNORE_TEMPLATE,
    NEXT_STEPS,
)

logger = logging.getLogger(__name__)

ENV_LOCAL = '.env.local'
ENV_EXAMPLE = '.env.example'
GITIGNORE = '.gitignore'

# File outcomes
CREATED = 'created'
EXISTS = 'exists'
WRITTEN = 'written'
UPDATED = 'updated'
UNCHANGED = 'unchanged'


@dataclass
class ScaffoldReport:
    directory: Path
    actions: Dict[str, str] = field(default_factory=dict)

    def record(self, name: str, action: str) -> None:
        self.actions[name] = action
        logger.info(f"{name}: {action}")


def write_env_local(directory: Path, report: ScaffoldReport) -> None:
    path = directory / ENV_LOCAL
    if path.exists():
        print(f"{ENV_LOCAL} file already exists")
        report.record(ENV_LOCAL, EXISTS)
        return

    print(f"Creating {ENV_LOCAL} file...")
    path.write_text(ENV_LOCAL_TEMPLATE, encoding='utf-8')
    print(f"Created {ENV_LOCAL} file")
    report.record(ENV_LOCAL, CREATED)


def write_env_example(directory: Path, report: ScaffoldReport) -> None:
    print(f"Creating {ENV_EXAMPLE} file...")
    (directory / ENV_EXAMPLE).write_text(ENV_EXAMPLE_TEMPLATE, encoding='utf-8')
    print(f"Created {ENV_EXAMPLE} file")
    report.record(ENV_EXAMPLE, WRITTEN)


def update_gitignore(directory: Path, report: ScaffoldReport) -> None:
    path = directory / GITIGNORE
    if not path.exists():
        print(f"Creating {GITIGNORE} file...")
        path.write_text(GITIGNORE_TEMPLATE, encoding='utf-8')
        print(f"Created {GITIGNORE} file")
        report.record(GITIGNORE, CREATED)
        return

    # Compare raw bytes; the file may not be UTF-8
    content = path.read_bytes()
    if ENV_LOCAL.encode('ascii') in content:
        print(f"{GITIGNORE} already includes environment files")
        report.record(GITIGNORE, UNCHANGED)
        return

    # Leading newline terminates a last line that has none, the second
    # leaves one blank line before the block.
    block = '\n' + '\n'.join(GITIGNORE_ENV_LINES) + '\n'
    with open(path, 'a', encoding='utf-8') as f:
        f.write(block)
    print(f"Updated {GITIGNORE} to ignore environment files")
    report.record(GITIGNORE, UPDATED)


def scaffold_environment(directory: Optional[Union[str, os.PathLike]] = None) -> ScaffoldReport:
    """Set up the local environment files in ``directory`` (default: cwd)."""
    target = Path(directory) if directory is not None else Path.cwd()
    report = ScaffoldReport(directory=target)

    print("Setting up local development environment...")
    write_env_local(target, report)
    write_env_example(target, report)
    update_gitignore(target, report)

    print("\nLocal environment setup complete!\n")
    print(NEXT_STEPS)
    return report
