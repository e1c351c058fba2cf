import sys
from unittest.mock import patch

from repo_tracker.utils.host import get_host_info


def test_host_info_keys_are_strings():
    info = get_host_info()
    assert set(info) == {"hostname", "type", "arch", "platform"}
    assert all(isinstance(v, str) for v in info.values())
    assert info["platform"] == sys.platform

def test_host_info_reads_os_introspection():
    with patch("repo_tracker.utils.host.socket.gethostname", return_value="box"), \
         patch("repo_tracker.utils.host.platform.system", return_value="Linux"), \
         patch("repo_tracker.utils.host.platform.machine", return_value="x86_64"):
        info = get_host_info()

    assert info["hostname"] == "box"
    assert info["type"] == "Linux"
    assert info["arch"] == "x86_64"
