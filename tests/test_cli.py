import pytest

from lunch.interface.cli import main


@pytest.fixture
def run(tmp_path, capsys):
    dbpath = str(tmp_path / "cli.db")

    def _run(*args):
        cmd, *rest = args
        code = main([cmd, "--team", "T1", "--dbpath", dbpath, *rest])
        out, err = capsys.readouterr()
        return code, out, err

    return _run


def _id(line: str) -> str:
    return line.split(" | ", 1)[0]


def test_add_list_and_propose(run):
    code, out, _ = run("add", "--name", "Deli", "--address", "1 Main St")
    assert code == 0
    assert "Deli | 1 Main St | visited never (0)" in out

    code, out, _ = run("list")
    assert code == 0
    assert len(out.strip().splitlines()) == 1

    code, out, _ = run("propose")
    assert code == 0
    assert "| Deli |" in out


def test_skip_then_nothing_to_propose(run):
    _, out, _ = run("add", "--name", "Deli")
    place_id = _id(out.strip())

    code, out, _ = run("skip", "--id", place_id)
    assert code == 0
    assert out.strip() == f"Skipped {place_id}"

    code, _, err = run("propose")
    assert code == 1
    assert "error: There are no places that haven't been skipped or visited recently" in err


def test_visit_update_and_delete(run):
    _, out, _ = run("add", "--name", "Cafe")
    place_id = _id(out.strip())

    code, out, _ = run("visit", "--id", place_id)
    assert code == 0
    assert "(1) | skipped never (0)" in out

    code, out, _ = run("update", "--id", place_id, "--name", "Corner Cafe")
    assert code == 0
    assert "| Corner Cafe |" in out

    assert run("delete", "--id", place_id)[0] == 0
    code, _, err = run("show", "--id", place_id)
    assert code == 1
    assert "Place not found" in err


def test_duplicate_name_reports_conflict(run):
    run("add", "--name", "Deli")
    code, _, err = run("add", "--name", "Deli")
    assert code == 1
    assert "error: A place with this name already exists" in err


def test_update_can_clear_address(run):
    _, out, _ = run("add", "--name", "Deli", "--address", "1 Main St")
    place_id = _id(out.strip())

    code, out, _ = run("update", "--id", place_id, "--clear-address")
    assert code == 0
    assert "| Deli | - |" in out


def test_update_without_changes_is_rejected(run):
    _, out, _ = run("add", "--name", "Deli")
    place_id = _id(out.strip())

    code, _, err = run("update", "--id", place_id)
    assert code == 1
    assert "error: Nothing to update" in err


def test_unopenable_database_reports_generic_error(tmp_path, capsys):
    dbpath = str(tmp_path / "missing" / "lunch.db")
    code = main(["list", "--team", "T1", "--dbpath", dbpath])
    _, err = capsys.readouterr()
    assert code == 1
    assert "error: Database error" in err
    assert "sqlite3" not in err
    assert "Traceback" not in err
