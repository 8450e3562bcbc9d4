"""Tests for the typer CLI."""

from __future__ import annotations

from unittest.mock import patch

from typer.testing import CliRunner

from resume_builder.cli import app
from resume_builder.clients.llm_client import LLMResponse
from resume_builder.config import AppConfig, UsageConfig

runner = CliRunner()


def _config(tmp_path) -> AppConfig:
    return AppConfig(usage=UsageConfig(db_path=str(tmp_path / "cli_usage.db")))


class TestCLI:
    def test_actions_lists_every_action(self):
        result = runner.invoke(app, ["actions"])
        assert result.exit_code == 0
        for name in ("improve", "bulletize", "certifications", "shorten", "executive"):
            assert name in result.output

    def test_improve_prints_result(self, tmp_path, mock_llm_client):
        with patch("resume_builder.cli.load_config", return_value=_config(tmp_path)), \
                patch("resume_builder.cli.get_llm_client", return_value=mock_llm_client):
            result = runner.invoke(app, ["improve", "worked on api", "--action", "grammar"])

        assert result.exit_code == 0
        assert "Led backend development" in result.output

    def test_improve_unknown_action_exits_2(self, tmp_path, mock_llm_client):
        with patch("resume_builder.cli.load_config", return_value=_config(tmp_path)), \
                patch("resume_builder.cli.get_llm_client", return_value=mock_llm_client):
            result = runner.invoke(app, ["improve", "worked on api", "--action", "bogus"])

        assert result.exit_code == 2
        mock_llm_client.complete.assert_not_called()

    def test_improve_provider_error_exits_1(self, tmp_path, mock_llm_client):
        mock_llm_client.complete.side_effect = RuntimeError("no key")
        with patch("resume_builder.cli.load_config", return_value=_config(tmp_path)), \
                patch("resume_builder.cli.get_llm_client", return_value=mock_llm_client):
            result = runner.invoke(app, ["improve", "worked on api"])

        assert result.exit_code == 1
        assert "no key" in result.output

    def test_usage_reports_calls(self, tmp_path, mock_llm_client):
        with patch("resume_builder.cli.load_config", return_value=_config(tmp_path)), \
                patch("resume_builder.cli.get_llm_client", return_value=mock_llm_client):
            runner.invoke(app, ["improve", "worked on api", "--action", "skills"])
            result = runner.invoke(app, ["usage"])

        assert result.exit_code == 0
        assert "Calls: 1" in result.output
        assert "skills" in result.output


class TestAssistantCommands:
    def _files(self, tmp_path):
        resume = tmp_path / "resume.txt"
        resume.write_text("Backend engineer. Built payment APIs in Go.", encoding="utf-8")
        jd = tmp_path / "jd.txt"
        jd.write_text("Senior backend engineer, Go and Kubernetes.", encoding="utf-8")
        return resume, jd

    def test_tailor_writes_output_file(self, tmp_path, mock_llm_client):
        resume, jd = self._files(tmp_path)
        out = tmp_path / "tailored.txt"
        with patch("resume_builder.cli.load_config", return_value=_config(tmp_path)), \
                patch("resume_builder.cli.get_llm_client", return_value=mock_llm_client):
            result = runner.invoke(
                app, ["tailor", "--resume", str(resume), "--jd", str(jd), "-o", str(out)]
            )

        assert result.exit_code == 0
        assert out.read_text(encoding="utf-8") == "Led backend development of the checkout service."

    def test_ats_score_prints_score(self, tmp_path, mock_llm_client):
        resume, jd = self._files(tmp_path)
        mock_llm_client.complete.return_value = LLMResponse(
            text='{"score": 81, "suggestions": ["Mention Kubernetes"]}',
            input_tokens=100,
            output_tokens=20,
        )
        with patch("resume_builder.cli.load_config", return_value=_config(tmp_path)), \
                patch("resume_builder.cli.get_llm_client", return_value=mock_llm_client):
            result = runner.invoke(app, ["ats-score", "--resume", str(resume), "--jd", str(jd)])

        assert result.exit_code == 0
        assert "81/100" in result.output
        assert "Mention Kubernetes" in result.output

    def test_missing_file_exits_1(self, tmp_path, mock_llm_client):
        _, jd = self._files(tmp_path)
        with patch("resume_builder.cli.load_config", return_value=_config(tmp_path)), \
                patch("resume_builder.cli.get_llm_client", return_value=mock_llm_client):
            result = runner.invoke(
                app, ["cover-letter", "--resume", str(tmp_path / "nope.txt"), "--jd", str(jd)]
            )

        assert result.exit_code == 1
        assert "not found" in result.output
        mock_llm_client.complete.assert_not_called()

    def test_empty_generation_exits_1(self, tmp_path, mock_llm_client):
        mock_llm_client.complete.side_effect = RuntimeError("no key")
        with patch("resume_builder.cli.load_config", return_value=_config(tmp_path)), \
                patch("resume_builder.cli.get_llm_client", return_value=mock_llm_client):
            result = runner.invoke(app, ["generate", "5 years of Go"])

        assert result.exit_code == 1
        assert "No content generated" in result.output
