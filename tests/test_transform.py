import io
import os
import stat
import subprocess
import sys

import pytest

from falco.transform import Transformer, TransformerNotFoundError, new_transformer


def _install(directory, name, body):
    path = directory / f"falco-transform-{name}"
    path.write_text(f"#!{sys.executable}\n{body}", encoding="utf-8")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


@pytest.fixture
def bindir(tmp_path, monkeypatch):
    monkeypatch.setenv("PATH", str(tmp_path))
    return tmp_path


def test_new_transformer_finds_command(bindir):
    path = _install(bindir, "upper", "import sys\n")
    transformer = new_transformer("upper")
    assert transformer.command == "falco-transform-upper"
    assert os.path.samefile(transformer.bin, path)


def test_new_transformer_missing_raises(bindir):
    with pytest.raises(
        TransformerNotFoundError,
        match='Transformer command "falco-transform-absent" does not exist in PATH',
    ):
        new_transformer("absent")


def test_execute_feeds_stdin_and_prefixes_output(bindir):
    _install(
        bindir,
        "upper",
        "import sys\nsys.stdout.write(sys.stdin.read().upper())\n",
    )
    out = io.StringIO()
    new_transformer("upper").execute(b"hello\nworld\n", out)
    lines = out.getvalue().splitlines()
    assert lines == ["[falco-transform-upper] HELLO", "[falco-transform-upper] WORLD"]


def test_execute_accepts_text_and_merges_stderr(bindir):
    _install(
        bindir,
        "err",
        "import sys\nsys.stderr.write(sys.stdin.read())\n",
    )
    out = io.StringIO()
    new_transformer("err").execute("payload\n", out)
    assert out.getvalue() == "[falco-transform-err] payload\n"


def test_execute_failure_raises(bindir):
    path = _install(bindir, "fail", "import sys\nsys.stdin.read()\nsys.exit(3)\n")
    transformer = Transformer(command="falco-transform-fail", bin=str(path))
    with pytest.raises(subprocess.CalledProcessError) as info:
        transformer.execute(b"", io.StringIO())
    assert info.value.returncode == 3