from contextlib import contextmanager

import pytest

import main
from commit_source import Commit, SourceUnavailable
from terminal_session import TerminalSession


class DummyWin:
    def __init__(self, keys):
        self.keys = list(keys)

    def getmaxyx(self):
        return 10, 60

    def clear(self):
        pass

    def erase(self):
        pass

    def addnstr(self, *args):
        pass

    def refresh(self):
        pass

    def getch(self):
        return self.keys.pop(0)


class FakeSource:
    working_dir = "/repo"

    def __init__(self, count):
        self.commits = [Commit(f"{i:07x}", f"commit {i}") for i in range(count)]
        self.pos = 0

    def fetch_page(self, count):
        page = self.commits[self.pos : self.pos + count]
        self.pos += len(page)
        return page

    def fetch_full_message(self, commit_id):
        return commit_id


@pytest.fixture
def cli(monkeypatch):
    state = {"keys": [], "fixups": [], "fixup_ok": True, "sessions": []}

    monkeypatch.setattr(main.sys, "argv", ["git-fixup-menu"])
    monkeypatch.setattr(
        main,
        "load_config",
        lambda: {
            "PAGE_SIZE": None,
            "INITIAL_FETCH": 20,
            "FIXUP_COMMAND": ["git", "commit", "--fixup"],
            "SHORT_ID_LENGTH": 7,
        },
    )

    @contextmanager
    def fake_mode():
        state["sessions"].append("enter")
        try:
            yield TerminalSession(DummyWin(state["keys"]))
        finally:
            state["sessions"].append("leave")

    def fake_fixup(commit_id, command=None, cwd=None):
        state["fixups"].append((commit_id, command, cwd))
        return state["fixup_ok"]

    monkeypatch.setattr(main, "interactive_mode", fake_mode)
    monkeypatch.setattr(main, "run_fixup", fake_fixup)
    return state


def test_version_flag(monkeypatch, capsys):
    monkeypatch.setattr(main.sys, "argv", ["git-fixup-menu", "-v"])
    main.main()
    assert capsys.readouterr().out.strip() == main.__version__


def test_not_a_repo_exits_before_terminal_setup(cli, monkeypatch, capsys):
    def no_repo(*_a, **_k):
        raise SourceUnavailable("nope")

    monkeypatch.setattr(main, "GitCommitSource", no_repo)
    main.main()
    assert "Not a valid git repo." in capsys.readouterr().err
    assert cli["sessions"] == []


def test_empty_history_exits_before_terminal_setup(cli, monkeypatch, capsys):
    monkeypatch.setattr(main, "GitCommitSource", lambda *_a, **_k: FakeSource(0))
    main.main()
    assert "No commits found." in capsys.readouterr().err
    assert cli["sessions"] == []


def test_quit_runs_no_action_and_restores_terminal(cli, monkeypatch):
    monkeypatch.setattr(main, "GitCommitSource", lambda *_a, **_k: FakeSource(5))
    cli["keys"].extend([ord("j"), ord("q")])
    main.main()
    assert cli["fixups"] == []
    assert cli["sessions"] == ["enter", "leave"]


def test_confirm_creates_fixup_for_selected_commit(cli, monkeypatch):
    monkeypatch.setattr(main, "GitCommitSource", lambda *_a, **_k: FakeSource(5))
    cli["keys"].extend([ord("j"), ord("j"), 10])
    main.main()
    assert cli["fixups"] == [("0000002", ["git", "commit", "--fixup"], "/repo")]
    assert cli["sessions"] == ["enter", "leave"]


def test_failed_fixup_exits_nonzero(cli, monkeypatch, capsys):
    monkeypatch.setattr(main, "GitCommitSource", lambda *_a, **_k: FakeSource(5))
    cli["keys"].append(10)
    cli["fixup_ok"] = False
    with pytest.raises(SystemExit) as exc:
        main.main()
    assert exc.value.code == 1
    assert "git commit --fixup failed" in capsys.readouterr().err


def test_fixup_targets_full_sha_not_display_id(cli, monkeypatch):
    source = FakeSource(0)
    source.commits = [Commit("a1b2c3d", "only", sha="a1b2c3d" + "0" * 33)]
    monkeypatch.setattr(main, "GitCommitSource", lambda *_a, **_k: source)
    cli["keys"].append(10)
    main.main()
    assert cli["fixups"] == [("a1b2c3d" + "0" * 33, ["git", "commit", "--fixup"], "/repo")]
