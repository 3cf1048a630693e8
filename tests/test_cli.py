# tests/test_cli.py
import json
import logging
import pytest
import yaml
from chainlens.cli.cli import CLI
from chainlens.utils.logger import attach_handlers


class TestCLI:
    @pytest.fixture
    def cli(self):
        return CLI()

    def test_query_prints_envelope(self, cli, capsys):
        code = cli.main(["query", "blockchain", "-p", "type=transaction", "-p", "hash=0xabc"])
        body = json.loads(capsys.readouterr().out)

        assert code == 0
        assert body["success"] is True
        assert body["data"]["transaction"]["hash"] == "0xabc"

    def test_query_defaults_to_service_default_type(self, cli, capsys):
        assert cli.main(["query", "analytics"]) == 0
        body = json.loads(capsys.readouterr().out)
        assert body["data"]["summary"]["total"] == 4

    def test_query_failure_exit_code(self, cli, capsys):
        assert cli.main(["query", "analytics", "-p", "type=nope"]) == 1
        body = json.loads(capsys.readouterr().out)
        assert body == {"success": False, "error": "Invalid analytics type"}

    def test_repeated_param_keeps_first(self, cli, capsys):
        assert cli.main(["query", "blockchain", "-p", "type=latest", "-p", "limit=2", "-p", "limit=9"]) == 0
        body = json.loads(capsys.readouterr().out)
        assert len(body["data"]["blocks"]) == 2

    def test_malformed_param(self, cli, capsys):
        assert cli.main(["query", "blockchain", "-p", "limit"]) == 2
        assert "KEY=VALUE" in capsys.readouterr().err

    def test_no_command(self, cli, capsys):
        assert cli.main([]) == 1

    def test_serve_overrides_config(self, cli, tmp_path, mocker):
        config_path = tmp_path / "chainlens.yaml"
        config_path.write_text(yaml.safe_dump({"logging": {"to_file": False}}))
        run = mocker.patch("chainlens.cli.cli.uvicorn.run")
        saved = list(logging.getLogger("chainlens").handlers)

        try:
            code = cli.main(["serve", "--config", str(config_path), "--port", "9001"])
        finally:
            attach_handlers(*saved)

        assert code == 0
        run.assert_called_once()
        assert run.call_args.kwargs["host"] == "0.0.0.0"
        assert run.call_args.kwargs["port"] == 9001
