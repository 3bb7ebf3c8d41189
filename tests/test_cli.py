from click.testing import CliRunner

from usergraph import cli


def test_schema():
    result = CliRunner().invoke(cli.main, ['schema'])
    assert result.exit_code == 0
    assert 'type User' in result.output
    assert 'deleteUser(id: ID!): String' in result.output


def test_serve(monkeypatch):
    calls = {}

    def fake_run(app, **kwargs):
        calls['app'] = app
        calls.update(kwargs)

    monkeypatch.setattr(cli.uvicorn, 'run', fake_run)
    monkeypatch.setattr(cli, 'configure_logging', lambda level: None)
    result = CliRunner().invoke(cli.main, ['serve', '--port', '4000', '--no-seed'])

    assert result.exit_code == 0, result.output
    assert 'http://127.0.0.1:4000/graphql' in result.output
    assert calls['port'] == 4000
    assert calls['app'].state.store.users == []
