import pytest
from typer.testing import CliRunner
from cnpjalfa.__main__ import main
from cnpjalfa.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def no_env_config(monkeypatch):
    monkeypatch.delenv("CNPJALFA_CONFIG", raising=False)


def test_help():
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "alphanumeric CNPJ validator" in result.stdout


def test_version():
    from cnpjalfa import __version__

    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_validate():
    result = runner.invoke(app, ["validate", "12ABC34501DE35", "12ABC34501DE99", "12.abc.345/01de-35"])
    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert lines[0] == "[1] CNPJ: [12ABC34501DE35] ✓ valid"
    assert lines[1] == "[2] CNPJ: [12ABC34501DE99] ✗ invalid"
    assert lines[2] == "[3] CNPJ: [12.ABC.345/01DE-35] ✓ valid"


def test_validate_strict_fails_on_invalid():
    result = runner.invoke(app, ["validate", "--strict", "12ABC34501DE35", "12ABC34501DE99"])
    assert result.exit_code == 1


def test_validate_strict_passes_when_all_valid():
    result = runner.invoke(app, ["validate", "--strict", "12ABC34501DE35"])
    assert result.exit_code == 0


def test_dv():
    result = runner.invoke(app, ["dv", "12.ABC.345/01DE"])
    assert result.exit_code == 0
    assert "[1] CNPJ: [12.ABC.345/01DE] DV: [35]" in result.stdout
    assert "Full CNPJ: 12ABC34501DE35" in result.stdout


def test_dv_continues_after_error():
    result = runner.invoke(app, ["dv", "000000000000", "12ABC34501DE"])
    assert result.exit_code == 0
    assert "[1] Error computing DV for CNPJ [000000000000]" in result.output
    assert "[2] CNPJ: [12ABC34501DE] DV: [35]" in result.stdout


def test_dv_strict():
    result = runner.invoke(app, ["dv", "--strict", "000000000000", "12ABC34501DE"])
    assert result.exit_code == 1


def test_dv_masked_output(tmp_path):
    cfg = tmp_path / "cnpjalfa.yaml"
    cfg.write_text("output:\n  apply_mask: true\n", encoding="utf-8")
    result = runner.invoke(app, ["--config", str(cfg), "dv", "12ABC34501DE"])
    assert result.exit_code == 0
    assert "Full CNPJ: 12.ABC.345/01DE-35" in result.stdout


def test_custom_symbols_from_env(tmp_path, monkeypatch):
    cfg = tmp_path / "cnpjalfa.yaml"
    cfg.write_text("output:\n  valid_symbol: \"OK\"\n  invalid_symbol: \"NO\"\n", encoding="utf-8")
    monkeypatch.setenv("CNPJALFA_CONFIG", str(cfg))
    result = runner.invoke(app, ["validate", "12ABC34501DE35", "00000000000000"])
    assert "[1] CNPJ: [12ABC34501DE35] OK valid" in result.stdout
    assert "[2] CNPJ: [00000000000000] NO invalid" in result.stdout


@pytest.mark.parametrize("args", [["validate"], ["dv"], ["frobnicate", "12ABC34501DE35"]])
def test_missing_or_unknown_arguments(args):
    result = runner.invoke(app, args)
    assert result.exit_code != 0


def test_main_is_callable():
    assert callable(main)
