from unittest.mock import patch

from repo_tracker.cli import serve


def test_defaults_come_from_settings(monkeypatch):
    monkeypatch.setenv("APP_API_PORT", "4000")
    args = serve.build_parser().parse_args([])
    assert args.port == 4000
    assert args.reload is False

def test_main_runs_uvicorn_with_overrides():
    with patch("repo_tracker.cli.serve.uvicorn.run") as run:
        code = serve.main(["--host", "0.0.0.0", "--port", "9000", "--log-level", "WARNING"])

    assert code == 0
    run.assert_called_once_with(
        "api.main:app",
        host="0.0.0.0",
        port=9000,
        reload=False,
        log_level="warning"
    )

def test_main_reports_failure():
    with patch("repo_tracker.cli.serve.uvicorn.run", side_effect=OSError("address in use")):
        assert serve.main(["--port", "9000"]) == 1
