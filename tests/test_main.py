"""Tests for the command line entry point and credential loading."""

import pytest

from linkedin_autoapply import config
from linkedin_autoapply import main as main_module
from linkedin_autoapply.errors import SessionSetupError

SEARCH_URL = "https://www.linkedin.com/jobs/search/?keywords=python"


def test_parse_args_defaults():
    args = main_module.parse_args([SEARCH_URL])

    assert args.job_url == SEARCH_URL
    assert args.max_applications == 5
    assert args.log_file == config.LOG_FILE
    assert not args.no_log_file
    assert not args.headed
    assert args.speed is None
    assert args.seed is None


def test_parse_args_options():
    args = main_module.parse_args(
        [SEARCH_URL, "-m", "3", "--speed", "dev", "--headed", "--seed", "7", "--no-log-file"]
    )

    assert args.max_applications == 3
    assert args.speed == "dev"
    assert args.headed
    assert args.seed == 7
    assert args.no_log_file


def test_parse_args_rejects_negative_maximum():
    with pytest.raises(SystemExit):
        main_module.parse_args([SEARCH_URL, "--max-applications", "-1"])


def test_load_credentials_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("LINKEDIN_ID", "pat@example.com")
    monkeypatch.setenv("LINKEDIN_KEY", "hunter2")

    assert config.load_credentials(tmp_path / ".env") == ("pat@example.com", "hunter2")


def test_load_credentials_from_env_file(monkeypatch, tmp_path):
    monkeypatch.delenv("LINKEDIN_ID", raising=False)
    monkeypatch.delenv("LINKEDIN_KEY", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("LINKEDIN_ID=sam@example.com\nLINKEDIN_KEY=s3cret\n")

    try:
        assert config.load_credentials(env_file) == ("sam@example.com", "s3cret")
    finally:
        # load_dotenv writes straight into os.environ
        monkeypatch.delenv("LINKEDIN_ID", raising=False)
        monkeypatch.delenv("LINKEDIN_KEY", raising=False)


def test_load_credentials_missing(monkeypatch, tmp_path):
    monkeypatch.delenv("LINKEDIN_ID", raising=False)
    monkeypatch.delenv("LINKEDIN_KEY", raising=False)

    with pytest.raises(SessionSetupError, match="LINKEDIN_ID, LINKEDIN_KEY"):
        config.load_credentials(tmp_path / ".env")


def test_main_exits_with_error_when_browser_cannot_start(monkeypatch):
    monkeypatch.setenv("LINKEDIN_ID", "pat@example.com")
    monkeypatch.setenv("LINKEDIN_KEY", "hunter2")

    async def failing_launch(**kwargs):
        raise SessionSetupError("Could not start browser session")

    monkeypatch.setattr(main_module, "launch_session", failing_launch)

    assert main_module.main([SEARCH_URL, "--no-log-file"]) == 1


def test_main_exits_with_error_without_credentials(monkeypatch):
    def no_credentials(env_file=None):
        raise SessionSetupError("Missing LINKEDIN_ID")

    monkeypatch.setattr(config, "load_credentials", no_credentials)
    launched = []

    async def launch(**kwargs):
        launched.append(kwargs)

    monkeypatch.setattr(main_module, "launch_session", launch)

    assert main_module.main([SEARCH_URL]) == 1
    assert launched == []
