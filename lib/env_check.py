"""
Bun availability report.

Explains why Bun can or cannot be started, for tools that want to show
the user more than a yes/no. Does not judge version compatibility.
"""
import logging
import subprocess

from bun_path import BunLocator, install_command, not_found_message

_logger = None


def _get_logger():
    global _logger
    if _logger is None:
        _logger = logging.getLogger("bun_path.env_check")
    return _logger


def check_bun(locator: BunLocator = None) -> dict:
    """
    Check Bun availability and report its version.

    Args:
        locator: BunLocator to use (default: one for the current platform)

    Returns:
        {"available": True, "path": ..., "version": ...} on success,
        {"available": False, "error": ..., ...} otherwise
    """
    if locator is None:
        locator = BunLocator()
    path = locator.locate()
    if path is None:
        return {
            "available": False,
            "error": not_found_message(locator.is_windows),
            "install": install_command(locator.is_windows),
        }
    try:
        r = subprocess.run(
            [path, "--version"],
            capture_output=True, text=True, timeout=5, shell=locator.is_windows
        )
    except (OSError, subprocess.SubprocessError) as e:
        _get_logger().debug(f"Version check failed for {path}: {e}")
        return {"available": False, "path": path, "error": str(e)}
    if r.returncode != 0:
        return {"available": False, "path": path, "error": f"exit code {r.returncode}: {r.stderr.strip()[:200]}"}
    return {"available": True, "path": path, "version": r.stdout.strip()}
