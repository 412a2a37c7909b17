import os
import platform
import stat

import pytest

from flowerpass import utils


@pytest.mark.skipif(platform.system() == "Windows", reason="POSIX permission bits")
def test_owner_only_permissions(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{}")
    os.chmod(path, 0o644)
    assert utils.set_owner_only_permissions(str(path))
    assert stat.S_IMODE(os.stat(path).st_mode) == stat.S_IRUSR | stat.S_IWUSR


@pytest.mark.skipif(platform.system() == "Windows", reason="POSIX permission bits")
def test_missing_file_reports_failure(tmp_path):
    assert utils.set_owner_only_permissions(str(tmp_path / "missing.json")) is False


def test_windows_without_pywin32_reports_failure(monkeypatch, tmp_path):
    monkeypatch.setattr(utils, "IS_WINDOWS", True)
    monkeypatch.setattr(utils, "WINDOWS_SECURITY_AVAILABLE", False)
    path = tmp_path / "settings.json"
    path.write_text("{}")
    assert utils.set_owner_only_permissions(str(path)) is False
