from __future__ import annotations

from pathlib import Path

from relay.core.result import Err, Ok
from relay.services.release.outputs import bool_output, write_step_outputs


def test_appends_key_value_lines(tmp_path: Path) -> None:
    path = tmp_path / "output"
    path.write_text("existing=1\n", encoding="utf-8")

    assert write_step_outputs(path, {"URL": "https://zed.dev/releases/stable/latest"}) == Ok(None)
    assert write_step_outputs(path, {"was_preview": "true"}) == Ok(None)

    assert path.read_text(encoding="utf-8") == (
        "existing=1\nURL=https://zed.dev/releases/stable/latest\nwas_preview=true\n"
    )


def test_multiline_value_rejected(tmp_path: Path) -> None:
    path = tmp_path / "output"

    result = write_step_outputs(path, {"body": "a\nb"})

    assert isinstance(result, Err)
    assert not path.exists()


def test_unwritable_path(tmp_path: Path) -> None:
    result = write_step_outputs(tmp_path / "missing" / "output", {"URL": "x"})

    assert isinstance(result, Err)


def test_bool_output() -> None:
    assert bool_output(True) == "true"
    assert bool_output(False) == "false"
