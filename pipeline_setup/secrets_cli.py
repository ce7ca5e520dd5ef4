import logging
import shlex
import subprocess
from typing import Dict, List, Optional

from .config import active_config
from .errors import SecretsCommandError

logger = logging.getLogger(__name__)


def build_secrets_command(key: str, value: str, cli: Optional[str] = None) -> List[str]:
    """Build the argv for `<cli> secrets set KEY=VALUE`."""
    base_command = shlex.split(cli if cli is not None else active_config.SECRETS_CLI)
    return base_command + ['secrets', 'set', f'{key}={value}']


def run_secrets_command(key: str, value: str, timeout: Optional[int] = None) -> str:
    """Store one key/value pair in the remote secret store."""
    command = build_secrets_command(key, value)
    timeout = timeout if timeout is not None else active_config.SECRETS_TIMEOUT

    # Never log the value itself
    logger.info(f"Executing secrets command: {' '.join(command[:-1])} {key}=***")

    try:
        result = subprocess.run(
            command,
            capture_output=True,
            text=True,
            check=True,
            timeout=timeout
        )
        return result.stdout.strip()

    except subprocess.TimeoutExpired:
        logger.error(f"Secrets command timeout for {key}")
        raise SecretsCommandError(key, "command timeout")
    except subprocess.CalledProcessError as e:
        logger.error(f"Secrets command failed for {key}: {e.stderr}")
        raise SecretsCommandError(key, e.stderr.strip() if e.stderr else 'Unknown error')
    except FileNotFoundError:
        logger.error(f"Secrets CLI not found: {command[0]}")
        raise SecretsCommandError(key, f"command not found: {command[0]}")


def set_secrets(secrets: Dict[str, str]) -> List[str]:
    """Set each secret in order, stopping at the first failure.

    Secrets already stored before a failure are left in place.
    """
    stored = []
    for key, value in secrets.items():
        run_secrets_command(key, value)
        stored.append(key)
    return stored
