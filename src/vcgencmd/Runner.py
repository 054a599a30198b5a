"""How vcgencmd gets invoked."""
import logging
import subprocess
from typing import Any, List, Optional, Protocol, Sequence, runtime_checkable

from vcgencmd.exceptions import LaunchError


@runtime_checkable
class Runner(Protocol):
    """Protocol for anything able to run vcgencmd.

    Implementations receive the positional arguments (e.g. ``["measure_clock",
    "arm"]``) and return the captured standard output without modifying it.

    Raises:
        LaunchError: If the tool could not be started or failed.
    """

    def run(self, arguments: Sequence[str]) -> str:
        ...


class SubprocessRunner:
    """
    Run vcgencmd as a child process, optionally through sudo.

    "vcgencmd" (and "sudo" if enabled) must be in PATH unless absolute paths
    are configured.
    """

    def __init__(
        self,
        binary: str = "vcgencmd",
        sudo: bool = False,
        sudo_binary: str = "sudo",
        timeout: Optional[float] = None
    ) -> None:
        self.binary = binary
        self.sudo = sudo
        self.sudo_binary = sudo_binary
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Any) -> 'SubprocessRunner':
        config = settings.get("vcgencmd", {})
        timeout = config.get("timeout", 0)

        return cls(
            binary=config.get("binary", "vcgencmd"),
            sudo=config.get("sudo", False),
            sudo_binary=config.get("sudo_binary", "sudo"),
            timeout=timeout if timeout else None,
        )

    def command(self, arguments: Sequence[str]) -> List[str]:
        prefix = [self.sudo_binary] if self.sudo else []

        return [*prefix, self.binary, *arguments]

    def run(self, arguments: Sequence[str]) -> str:
        command = self.command(arguments)
        logging.debug("Running %s", " ".join(command))

        try:
            return subprocess.check_output(
                command,
                text=True,
                errors="replace",
                stderr=subprocess.PIPE,
                timeout=self.timeout,
            )
        except subprocess.CalledProcessError as e:
            logging.warning("%s exited with %s", command[0], e.returncode)
            raise LaunchError(
                command,
                f"exit status {e.returncode}",
                returncode=e.returncode,
                stderr=e.stderr
            ) from e
        except subprocess.TimeoutExpired as e:
            logging.warning("%s timed out after %ss", command[0], self.timeout)
            raise LaunchError(command, f"timed out after {self.timeout}s") from e
        except OSError as e:
            logging.warning("Could not start %s: %s", command[0], e)
            raise LaunchError(command, str(e)) from e

    def __repr__(self) -> str:
        return (
            f"SubprocessRunner(binary={self.binary!r}, sudo={self.sudo!r}, "
            f"sudo_binary={self.sudo_binary!r}, timeout={self.timeout!r})"
        )
