"""Tests for the searchdocs command line."""

from unittest.mock import AsyncMock, patch

import pytest
from dependency_injector import providers

from searchdocs import cli
from searchdocs.config import Settings
from searchdocs.container import ApplicationContainer
from searchdocs.shared.exceptions import EmptyQueryError


class TestParser:
    def test_defaults(self):
        args = cli.build_parser().parse_args(["rust"])
        assert args.query == "rust"
        assert args.output_dir is None
        assert not args.text_only
        assert args.log_level is None

    def test_rejects_unknown_level(self):
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args(["rust", "--log-level", "LOUD"])


class TestMain:
    def test_success_prints_path(self, capsys, tmp_path):
        with patch.object(cli, "run", AsyncMock(return_value=str(tmp_path / "rust_documentation.pdf"))) as run:
            assert cli.main(["rust", "--output-dir", str(tmp_path), "--text-only"]) == 0

        settings, query = run.call_args.args
        assert settings.output_dir == str(tmp_path)
        assert query == "rust"
        assert run.call_args.kwargs == {"text_only": True}
        assert capsys.readouterr().out.strip() == str(tmp_path / "rust_documentation.pdf")

    def test_error_exit_code(self, capsys):
        with patch.object(cli, "run", AsyncMock(side_effect=EmptyQueryError(" "))):
            assert cli.main([" "]) == 1
        assert capsys.readouterr().out == ""


class TestRun:
    @pytest.mark.asyncio
    async def test_writes_text_export(self, tmp_path, fake_source, wikipedia_rust_result):
        sources = [fake_source("DuckDuckGo"), fake_source("Wikipedia", results=[wikipedia_rust_result])]

        def container_with_fakes():
            container = ApplicationContainer()
            container.sources.override(providers.Object(sources))
            return container

        with patch.object(cli, "ApplicationContainer", container_with_fakes):
            path = await cli.run(Settings(output_dir=str(tmp_path)), "rust lang", text_only=True)

        assert path == str(tmp_path / "rust_lang_documentation.txt")
        assert all(source.closed for source in sources)
