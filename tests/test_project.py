import json
import subprocess
from pathlib import Path
from unittest.mock import patch

from rustcoach.project import Crate, RustAnalyzerProject


def test_add_path_accepts_rust_files():
    project = RustAnalyzerProject()
    project.add_path("exercises/intro/intro1.rs")
    assert project.crates == [Crate(root_module="exercises/intro/intro1.rs")]
    crate = project.crates[0].to_dict()
    assert crate["edition"] == "2021"
    assert crate["cfg"] == ["test"]
    assert crate["deps"] == []


def test_add_path_ignores_other_files():
    project = RustAnalyzerProject()
    project.add_path("exercises/intro/README.md")
    project.add_path("exercises/intro")
    assert project.crates == []


def test_to_dict_shape():
    project = RustAnalyzerProject(sysroot_src="/sys")
    project.add_path("exercises/a.rs")
    data = project.to_dict()
    assert list(data) == ["sysroot_src", "crates"]
    assert list(data["crates"][0]) == ["root_module", "edition", "deps", "cfg"]
    assert data["sysroot_src"] == "/sys"


def test_write_to_disk_round_trip(tmp_path):
    project = RustAnalyzerProject(sysroot_src="/sys")
    project.add_path("exercises/a.rs")
    target = tmp_path / "rust-project.json"
    project.write_to_disk(target)
    assert json.loads(target.read_text()) == project.to_dict()


def test_exercises_to_json(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "exercises" / "intro").mkdir(parents=True)
    (tmp_path / "exercises" / "intro" / "intro1.rs").write_text("fn main() {}\n")
    (tmp_path / "exercises" / "intro" / "README.md").write_text("# intro\n")
    (tmp_path / "exercises" / "quiz1.rs").write_text("fn main() {}\n")
    project = RustAnalyzerProject()
    project.exercises_to_json("exercises")
    roots = sorted(Path(crate.root_module) for crate in project.crates)
    assert roots == [Path("exercises/intro/intro1.rs"), Path("exercises/quiz1.rs")]


def test_sysroot_from_environment(monkeypatch):
    monkeypatch.setenv("RUST_SRC_PATH", "/custom/src")
    project = RustAnalyzerProject()
    with patch("subprocess.run") as run:
        project.get_sysroot_src()
    assert project.sysroot_src == "/custom/src"
    run.assert_not_called()


def test_sysroot_from_rustc(monkeypatch, capsys):
    monkeypatch.delenv("RUST_SRC_PATH", raising=False)
    result = subprocess.CompletedProcess([], 0, stdout=b"/opt/toolchain\n", stderr=b"")
    project = RustAnalyzerProject()
    with patch("subprocess.run", return_value=result):
        project.get_sysroot_src()
    expected = Path("/opt/toolchain") / "lib" / "rustlib" / "src" / "rust" / "library"
    assert project.sysroot_src == str(expected)
    assert "Determined toolchain: /opt/toolchain" in capsys.readouterr().out