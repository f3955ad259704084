import pytest

from hello_service import __main__ as cli
from hello_service.entities import EXIT_CONFIG_FAILED, StartupFailure, StartupPhase, StartupResult


@pytest.fixture
def fake_init(monkeypatch):
    calls = []

    def install(result):
        async def init(settings=None, connect=False):
            calls.append(connect)
            return result

        monkeypatch.setattr(cli, "init", init)
        return calls

    return install


def test_parser_defaults_to_plain_variant():
    assert cli.build_arg_parser().parse_args([]).connect is False
    assert cli.build_arg_parser().parse_args(["--connect"]).connect is True


def test_clean_shutdown_exits_zero(fake_init):
    calls = fake_init(StartupResult(phase=StartupPhase.LISTENING, port=8000))
    with pytest.raises(SystemExit) as exc_info:
        cli.main([])
    assert exc_info.value.code == 0
    assert calls == [False]


def test_connection_failure_exit_code(fake_init):
    calls = fake_init(StartupResult(phase=StartupPhase.FAILED, failure=StartupFailure.CONNECTION))
    with pytest.raises(SystemExit) as exc_info:
        cli.main_connected()
    assert exc_info.value.code == 3
    assert calls == [True]


def test_bind_failure_exit_code(fake_init):
    fake_init(StartupResult(phase=StartupPhase.FAILED, failure=StartupFailure.BIND))
    assert cli.run(connect=True) == 4


def test_bad_port_is_logged_not_raised(monkeypatch, caplog):
    monkeypatch.setenv("PORT", "70000")
    assert cli.run(connect=False) == EXIT_CONFIG_FAILED
    assert "STARTUP_CONFIG_FAILED" in caplog.text


def test_bad_postgres_port_fails_connected_variant(monkeypatch):
    monkeypatch.setenv("POSTGRES_PORT", "abc")
    assert cli.run(connect=True) == EXIT_CONFIG_FAILED
