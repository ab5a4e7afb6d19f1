from collections.abc import Mapping
from pathlib import Path

from minishell.core.environment import DetachedEnvironment
from minishell.core.lookup import find_executable, is_executable_file


class RecordingEnvironment(DetachedEnvironment):
    def __init__(self, cwd: Path, environ: Mapping[str, str]) -> None:
        super().__init__(cwd, environ)
        self.lookups: list[str] = []

    def getenv(self, name: str) -> str | None:
        self.lookups.append(name)
        return super().getenv(name)


def test_bare_name_found_in_first_matching_path_dir(tmp_path: Path, make_executable) -> None:
    first = make_executable(tmp_path / "first" / "tool")
    make_executable(tmp_path / "second" / "tool")
    env = DetachedEnvironment(tmp_path, {"PATH": f"{tmp_path / 'first'}:{tmp_path / 'second'}"})

    assert find_executable("tool", env) == str(first)


def test_non_executable_and_directory_matches_are_skipped(tmp_path: Path, make_executable) -> None:
    make_executable(tmp_path / "a" / "tool", mode=0o644)
    (tmp_path / "b" / "tool").mkdir(parents=True)
    target = make_executable(tmp_path / "c" / "tool")
    path_value = ":".join(str(tmp_path / name) for name in ("a", "b", "c"))
    env = DetachedEnvironment(tmp_path, {"PATH": path_value})

    assert find_executable("tool", env) == str(target)


def test_missing_and_empty_path_entries_are_ignored(tmp_path: Path, make_executable) -> None:
    target = make_executable(tmp_path / "bin" / "tool")
    env = DetachedEnvironment(tmp_path, {"PATH": f"::{tmp_path / 'missing'}::{tmp_path / 'bin'}:"})

    assert find_executable("tool", env) == str(target)


def test_unknown_name_is_not_found(tmp_path: Path) -> None:
    env = DetachedEnvironment(tmp_path, {"PATH": str(tmp_path)})
    assert find_executable("definitely-not-a-command", env) is None


def test_unset_path_finds_nothing(tmp_path: Path) -> None:
    env = DetachedEnvironment(tmp_path, {})
    assert find_executable("sh", env) is None


def test_direct_path_never_consults_path(tmp_path: Path, make_executable) -> None:
    script = make_executable(tmp_path / "scripts" / "run")
    env = RecordingEnvironment(tmp_path, {"PATH": str(tmp_path / "scripts")})

    assert find_executable(str(script), env) == str(script)
    assert find_executable(str(tmp_path / "scripts" / "missing"), env) is None
    assert "PATH" not in env.lookups


def test_direct_path_requires_execute_bit(tmp_path: Path, make_executable) -> None:
    script = make_executable(tmp_path / "run", mode=0o644)
    env = DetachedEnvironment(tmp_path, {})
    assert find_executable(str(script), env) is None


def test_relative_direct_path_resolves_against_cwd(tmp_path: Path, make_executable) -> None:
    make_executable(tmp_path / "local" / "run")
    env = DetachedEnvironment(tmp_path, {})

    assert find_executable("./local/run", env) == "./local/run"
    assert find_executable("local/run", env) == "local/run"


def test_is_executable_file(tmp_path: Path, make_executable) -> None:
    assert is_executable_file(make_executable(tmp_path / "x"))
    assert not is_executable_file(make_executable(tmp_path / "y", mode=0o600))
    assert not is_executable_file(tmp_path)
    assert not is_executable_file(tmp_path / "missing")
