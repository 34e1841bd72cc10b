import pytest

from brewcalc.paths import data_base, doc_base


def test_data_base_bin_directory_on_x11():
    assert data_base("/usr/local/bin", "linux") == "/usr/local/share/qbrew/"


def test_data_base_own_directory_on_x11():
    assert data_base("/opt/qbrew", "linux") == "/opt/qbrew/"
    assert data_base("/opt/qbrew/", "linux") == "/opt/qbrew/"


def test_data_base_other_directory_on_x11_is_app_dir():
    assert data_base("/home/brewer/apps", "linux") == "/home/brewer/apps/"


def test_data_base_mac_bundle():
    result = data_base("/Applications/QBrew.app/Contents/MacOS", "darwin")
    assert result == "/Applications/QBrew.app/Contents/Resources/"


def test_data_base_mac_outside_bundle():
    assert data_base("/Users/brewer/build", "darwin") == "/Users/brewer/build/"


def test_data_base_windows_uses_forward_slashes():
    result = data_base("C:\\Program Files\\QBrew", "win32")
    assert "\\" not in result
    assert result == "C:/Program Files/QBrew/"


def test_doc_base_bin_directory_on_x11():
    assert doc_base("/usr/bin", "linux") == "/usr/share/doc/qbrew/"


def test_doc_base_own_directory_on_x11():
    assert doc_base("/opt/qbrew", "linux") == "/opt/qbrew/doc/"


def test_doc_base_mac_bundle():
    result = doc_base("/Applications/QBrew.app/Contents/MacOS", "darwin")
    assert result.endswith("/Contents/Resources/en.lproj/")
    assert ".." not in result


def test_doc_base_mac_en_lproj(tmp_path):
    (tmp_path / "en.lproj").mkdir()
    assert doc_base(str(tmp_path), "darwin") == str(tmp_path).replace("\\", "/") + "/en.lproj/"


def test_doc_base_mac_without_en_lproj(tmp_path):
    assert doc_base(str(tmp_path), "darwin") == str(tmp_path).replace("\\", "/") + "/doc/"


def test_doc_base_windows():
    assert doc_base("C:/QBrew", "win32") == "C:/QBrew/doc/"


@pytest.mark.parametrize("platform", ["linux", "darwin", "win32"])
@pytest.mark.parametrize("app_dir", ["/usr/local/bin", "/opt/qbrew", "/x/y/Contents/MacOS", "/a/b/"])
def test_results_are_clean_and_end_with_slash(platform, app_dir):
    for func in (data_base, doc_base):
        result = func(app_dir, platform)
        assert result.endswith("/")
        assert not result.endswith("//")
        assert "/../" not in result
        assert "/./" not in result