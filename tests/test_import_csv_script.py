from __future__ import annotations

import pytest

from scripts.import_csv import main


def test_template_flag_prints_template(capsys) -> None:
    assert main(["jobs", "--template"]) == 0

    out = capsys.readouterr().out
    assert out.splitlines()[0].startswith("求人タイトル,企業ID,")


def test_path_is_required_without_template() -> None:
    with pytest.raises(SystemExit):
        main(["companies"])


def test_unknown_kind_is_rejected() -> None:
    with pytest.raises(SystemExit):
        main(["candidates", "--template"])
