import os

import pytest

from brewcalc.session import DEFAULT_FILE, FILE_EXT, TITLE, Session
from brewcalc.settings import ConfigState, GeneralSettings


@pytest.fixture
def session(tmp_path):
    return Session(ConfigState(), tmp_path)


def test_explicit_file_is_opened(session):
    assert session.resolve_startup_file("beer.qbrew") == "beer.qbrew"
    assert session.filename == "beer.qbrew"
    assert session.newflag is False


def test_no_file_and_no_recent_creates_new(session):
    assert session.resolve_startup_file("") is None
    assert session.filename == f"{DEFAULT_FILE}.{FILE_EXT}"
    assert session.newflag is True
    assert session.backed is False


def test_default_name_counts_as_empty(session):
    assert session.resolve_startup_file(DEFAULT_FILE) is None
    assert session.newflag is True


def test_last_recent_file_is_loaded(session, tmp_path):
    recent = tmp_path / "last.qbrew"
    recent.write_text("x")
    session.state.general.recentfiles = [str(recent)]
    assert session.resolve_startup_file("") == str(recent)
    assert session.newflag is False


def test_missing_recent_file_creates_new(session, tmp_path):
    session.state.general.recentfiles = [str(tmp_path / "gone.qbrew")]
    assert session.resolve_startup_file("") is None
    assert session.newflag is True


def test_loadlast_off_ignores_recent(session, tmp_path):
    recent = tmp_path / "last.qbrew"
    recent.write_text("x")
    session.state.general.recentfiles = [str(recent)]
    session.state.general.loadlast = False
    assert session.resolve_startup_file("") is None


def test_add_recent_makes_path_absolute(session, tmp_path):
    session.add_recent("a.qbrew")
    assert session.state.general.recentfiles == [str(tmp_path / "a.qbrew")]


def test_add_recent_moves_existing_to_front(session, tmp_path):
    session.add_recent("a.qbrew")
    session.add_recent("b.qbrew")
    session.add_recent("a.qbrew")
    assert session.state.general.recentfiles == [
        str(tmp_path / "a.qbrew"),
        str(tmp_path / "b.qbrew"),
    ]


def test_add_recent_respects_capacity(session, tmp_path):
    session.state.general.recentnum = 2
    for name in ("a", "b", "c"):
        session.add_recent(name)
    assert session.state.general.recentfiles == [str(tmp_path / "c"), str(tmp_path / "b")]


def test_add_recent_disabled_when_zero(session):
    session.state.general.recentnum = 0
    session.add_recent("a.qbrew")
    assert session.state.general.recentfiles == []


def test_trim_recent(session):
    session.state.general.recentfiles = ["1", "2", "3", "4"]
    session.state.general.recentnum = 2
    session.trim_recent()
    assert session.state.general.recentfiles == ["1", "2"]


def test_backup_copies_file(session, tmp_path):
    original = tmp_path / "beer.qbrew"
    original.write_text("recipe body")
    session.filename = "beer.qbrew"
    assert session.backup_file() is True
    assert (tmp_path / "beer.qbrew~").read_text() == "recipe body"
    assert session.backed is True


def test_backup_replaces_old_backup(session, tmp_path):
    (tmp_path / "beer.qbrew").write_text("new")
    (tmp_path / "beer.qbrew~").write_text("old")
    session.filename = "beer.qbrew"
    assert session.backup_file() is True
    assert (tmp_path / "beer.qbrew~").read_text() == "new"


def test_backup_only_once(session, tmp_path):
    (tmp_path / "beer.qbrew").write_text("v1")
    session.filename = "beer.qbrew"
    session.backup_file()
    (tmp_path / "beer.qbrew").write_text("v2")
    assert session.backup_file() is True
    assert (tmp_path / "beer.qbrew~").read_text() == "v1"


def test_backup_of_default_file_fails(session):
    session.filename = DEFAULT_FILE
    assert session.backup_file() is False
    assert session.backed is False


def test_backup_of_missing_file_fails(session, tmp_path):
    session.filename = "nothing.qbrew"
    assert session.backup_file() is False
    assert not (tmp_path / "nothing.qbrew~").exists()


def test_file_caption_uses_basename(session):
    caption = session.file_caption(os.path.join("dir", "sub", "recipe.qbrew"))
    assert caption == f"{TITLE} - recipe.qbrew[*]"


def test_file_caption_empty_uses_default(session):
    assert session.file_caption("") == f"{TITLE} - {DEFAULT_FILE}[*]"


def test_autosave_path(session, tmp_path):
    path = session.autosave_path()
    assert os.path.dirname(path) == str(tmp_path)
    assert os.path.basename(path) == "autosave." + FILE_EXT


def test_apply_general_reports_changes(session):
    general = GeneralSettings(lookfeel="Fusion", saveinterval=10)
    changes = session.apply_general(general)
    assert changes == {"lookfeel", "autosave"}
    assert session.state.general.lookfeel == "Fusion"


def test_apply_general_without_changes(session):
    assert session.apply_general(GeneralSettings()) == set()


def test_apply_general_trims_when_shrinking(session):
    general = GeneralSettings(recentnum=1, recentfiles=["a", "b", "c"])
    session.apply_general(general)
    assert session.state.general.recentfiles == ["a"]
    assert general.recentfiles == ["a", "b", "c"]


def test_apply_general_keeps_when_growing(session):
    general = GeneralSettings(recentnum=3, recentfiles=["a", "b", "c", "d"])
    session.state.general.recentnum = 2
    session.apply_general(general)
    assert session.state.general.recentfiles == ["a", "b", "c", "d"]