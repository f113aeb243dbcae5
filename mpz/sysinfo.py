"""Description of the running system for bug reports."""

import platform
import sys

APP_VERSION = "1.0.0"


def _product_name() -> str:
    try:
        release = platform.freedesktop_os_release()
    except OSError:
        release = {}
    return release.get("PRETTY_NAME") or platform.platform(terse=True)


def system_info() -> list[str]:
    """Return lines describing the application and the host."""
    machine = platform.machine()
    return [
        f"App version: {APP_VERSION}",
        f"Python version: {platform.python_version()}",
        f"Build ABI: {sys.implementation.name}-{platform.architecture()[0]}",
        f"Build CPU architecture: {machine}",
        f"Current CPU architecture: {machine}",
        f"Kernel type: {platform.system().lower()}",
        f"Kernel version: {platform.release()}",
        f"Product name: {_product_name()}",
    ]