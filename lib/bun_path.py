"""
Bun executable path resolution.

Resolves the Bun executable for environments where Bun is not on the PATH
seen by child processes (e.g. fish shell users, whose ~/.config/fish/config.fish
is never read by /bin/sh).

Resolution order:
1. `bun --version` by bare name - exit 0 means PATH already resolves it
2. Common install locations for the platform (first existing wins)
3. None
"""
import logging
import subprocess
import sys
from pathlib import Path

# Platform check - evaluated once at import
IS_WINDOWS = sys.platform == "win32"

BUN_COMMAND = "bun"

INSTALL_COMMANDS = {
    True: 'powershell -c "irm bun.sh/install.ps1 | iex"',
    False: "curl -fsSL https://bun.sh/install | bash",
}

_logger = None


def _get_logger():
    global _logger
    if _logger is None:
        _logger = logging.getLogger("bun_path")
    return _logger


class ConfigurationError(Exception):
    """A required external tool is missing from this machine."""
    pass


class BunNotFoundError(ConfigurationError, FileNotFoundError):
    """Raised when Bun is neither on PATH nor in any common install location."""
    pass


def install_command(is_windows: bool = IS_WINDOWS) -> str:
    """Copy-pasteable Bun install command for the platform."""
    return INSTALL_COMMANDS[bool(is_windows)]


def not_found_message(is_windows: bool = IS_WINDOWS) -> str:
    return (
        "Bun is required but not found. Install it with:\n"
        f"  {install_command(is_windows)}\n"
        "Then restart your terminal."
    )


class BunLocator:
    """
    Locates the Bun executable for one platform.

    The platform flag is captured at construction so the Windows and POSIX
    branches can both be exercised on any host. Nothing else is stored:
    every call re-probes PATH and re-checks the filesystem.
    """

    def __init__(self, is_windows: bool = IS_WINDOWS):
        self.is_windows = is_windows

    def enumerate_candidates(self) -> list[str]:
        """Common Bun install locations, most preferred first."""
        home = Path.home()
        if self.is_windows:
            return [str(home / ".bun" / "bin" / "bun.exe")]
        return [
            str(home / ".bun" / "bin" / "bun"),
            "/usr/local/bin/bun",
            "/opt/homebrew/bin/bun",
            "/home/linuxbrew/.linuxbrew/bin/bun",
        ]

    def probe(self) -> bool:
        """
        Check whether `bun` resolves by bare name.

        On Windows the command goes through the shell, since `bun` there is
        usually a shim that CreateProcess will not find on its own.

        Returns:
            True only if `bun --version` exited with status 0
        """
        logger = _get_logger()
        try:
            r = subprocess.run(
                [BUN_COMMAND, "--version"],
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                shell=self.is_windows,
            )
        except (OSError, subprocess.SubprocessError) as e:
            # Not on PATH (or not runnable), fall through to install locations
            logger.debug(f"PATH probe for {BUN_COMMAND} failed: {e}")
            return False
        if r.returncode != 0:
            logger.debug(f"PATH probe for {BUN_COMMAND} exited with {r.returncode}")
            return False
        return True

    def locate(self) -> str | None:
        """
        Find a usable reference to the Bun executable.

        Returns:
            "bun" if PATH resolves it, otherwise the first existing install
            location, otherwise None
        """
        if self.probe():
            return BUN_COMMAND

        logger = _get_logger()
        for candidate in self.enumerate_candidates():
            if Path(candidate).exists():
                logger.debug(f"Found {BUN_COMMAND} at {candidate}")
                return candidate

        logger.debug(f"{BUN_COMMAND} not found on PATH or in common locations")
        return None

    def is_available(self) -> bool:
        return self.locate() is not None

    def locate_or_raise(self) -> str:
        """
        Like locate(), but raise when Bun is missing.

        Raises:
            BunNotFoundError: with a platform-specific install command
        """
        bun_path = self.locate()
        if bun_path is None:
            raise BunNotFoundError(not_found_message(self.is_windows))
        return bun_path


_default_locator = BunLocator(IS_WINDOWS)


def get_bun_search_paths() -> list[str]:
    """Get the list of common Bun install paths for this platform."""
    return _default_locator.enumerate_candidates()


def get_bun_path() -> str | None:
    """
    Get the Bun executable path.

    Tries PATH first, then common install locations.
    Returns "bun", an absolute path, or None.
    """
    return _default_locator.locate()


def is_bun_available() -> bool:
    """Check if Bun is available (on PATH or in a common location)."""
    return _default_locator.is_available()


def get_bun_path_or_raise() -> str:
    """Get the Bun executable path or raise BunNotFoundError. Use when Bun is required."""
    return _default_locator.locate_or_raise()
