"""
Host introspection used by the /whoami endpoint.
"""

import platform
import socket
import sys
from typing import Dict


def get_host_info() -> Dict[str, str]:
    """
    Describe the machine the server runs on.

    Returns:
        Dict with keys:
            - hostname: network name of this host
            - type: operating system name (e.g. 'Linux', 'Darwin', 'Windows')
            - arch: machine architecture (e.g. 'x86_64', 'arm64')
            - platform: interpreter platform identifier (e.g. 'linux', 'darwin', 'win32')
    """
    return {
        "hostname": socket.gethostname(),
        "type": platform.system(),
        "arch": platform.machine(),
        "platform": sys.platform,
    }
