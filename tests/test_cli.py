import json

from click.testing import CliRunner

from manage import cli


def test_extract_command(tmp_path, write_json):
    src = tmp_path / "src"
    src.mkdir()
    (src / "home.component.html").write_text(
        "<h1>{{ 'home.title' | translate }}</h1>", encoding="utf-8"
    )
    (src / "home.component.ts").write_text(
        "this.translate.instant('home.missing');", encoding="utf-8"
    )
    catalog = write_json(tmp_path / "en.json", {"home": {"title": "Home"}})
    out = tmp_path / "out"

    result = CliRunner().invoke(
        cli,
        [
            "extract",
            "--source-dir",
            str(src),
            "--catalog",
            str(catalog),
            "--output-dir",
            str(out),
        ],
    )

    assert result.exit_code == 0, result.output
    assert "Found 2 translation keys" in result.output
    assert json.loads((out / "translations.json").read_text(encoding="utf-8")) == {
        "home": {"title": "Home"}
    }
    assert json.loads(
        (out / "unresolved-translations.json").read_text(encoding="utf-8")
    ) == {"home": {"missing": "home.missing"}}


def test_extract_command_reports_bad_catalog(tmp_path):
    src = tmp_path / "src"
    src.mkdir()
    broken = tmp_path / "broken.json"
    broken.write_text("[1, 2", encoding="utf-8")

    result = CliRunner().invoke(
        cli,
        [
            "extract",
            "--source-dir",
            str(src),
            "--catalog",
            str(broken),
            "--output-dir",
            str(tmp_path / "out"),
        ],
    )

    assert result.exit_code == 1
    assert "Invalid catalog" in result.output


def test_resolve_command(tmp_path, write_json):
    keys = tmp_path / "keys.txt"
    keys.write_text("menu.open\nmenu.close\n", encoding="utf-8")
    catalog = write_json(tmp_path / "en.json", {"menu": {"open": "Open"}})
    out = tmp_path / "out"

    result = CliRunner().invoke(
        cli,
        ["resolve", "--keys", str(keys), "--catalog", str(catalog), "--output-dir", str(out)],
    )

    assert result.exit_code == 0, result.output
    assert "Resolved: 1" in result.output
    assert "Unresolved: 1" in result.output
