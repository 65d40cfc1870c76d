import pytest

from calculex.config import Settings
from calculex.symbols import SymbolTable
from repl import run_line


@pytest.mark.parametrize(
    "code, expected_output",
    [
        pytest.param("1 + 2", "3\n"),
        pytest.param("x = 2 ^ 10", "x = 1024\n"),
        pytest.param("1 / 0", "[Evaluation error] Division by zero in (1 / 0)\n"),
        pytest.param("nope", "[Evaluation error] Variable 'nope' is not defined\n"),
        pytest.param("1 # 2", "[Tokenizer error] Unexpected character: '#'\n1 # 2\n  ^\n"),
        pytest.param("(1 + 2", "[Parser error] Mismatched parenthesis '(' near end of input\n(1 + 2\n      ^\n"),
    ],
)
def test_run_line(capsys: pytest.CaptureFixture[str], code: str, expected_output: str) -> None:
    run_line(code, SymbolTable())
    assert capsys.readouterr().out == expected_output


def test_run_line_keeps_symbols_on_error(capsys: pytest.CaptureFixture[str]) -> None:
    symbols = SymbolTable()
    run_line("a = 1", symbols)
    run_line("a = a / 0", symbols)
    run_line("a + 1", symbols)
    assert capsys.readouterr().out.splitlines()[-1] == "2"


def test_run_line_show_ast(capsys: pytest.CaptureFixture[str]) -> None:
    run_line("-1", SymbolTable(), show_ast=True)
    assert capsys.readouterr().out.startswith("ast: UnaryOp(")


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("CALCULEX_LOG_LEVEL", "CALCULEX_PROMPT", "CALCULEX_SHOW_AST"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.log_level == "WARNING"
    assert settings.prompt == "> "
    assert settings.show_ast is False


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CALCULEX_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("CALCULEX_SHOW_AST", "true")
    settings = Settings(_env_file=None)
    assert settings.log_level == "DEBUG"
    assert settings.show_ast is True
