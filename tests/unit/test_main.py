import logging
from collections.abc import Generator
from pathlib import Path

import pytest

from remitscan.main import EXIT_JOB_FAILED, EXIT_OK, EXIT_USAGE, build_arg_parser, main


@pytest.fixture()
def example_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    monkeypatch.setenv("AI_PROVIDER", "example")
    monkeypatch.setenv("PDF_MODE", "binary")
    monkeypatch.setenv("PROGRESS_COMPLETION_PAUSE_SECONDS", "0")
    logging.getLogger("remitscan").handlers.clear()
    yield
    logging.getLogger("remitscan").handlers.clear()


class TestArgParser:
    def test_parses_files_and_multi(self) -> None:
        args = build_arg_parser().parse_args(["a.pdf", "b.pdf", "--multi"])
        assert args.files == [Path("a.pdf"), Path("b.pdf")]
        assert args.multi is True

    def test_requires_a_file(self) -> None:
        with pytest.raises(SystemExit):
            build_arg_parser().parse_args([])


class TestMain:
    def test_single_file(
        self, example_env: None, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = tmp_path / "invoice.txt"
        path.write_text("Beneficiary: Example Trading Co., Ltd.")
        assert main([str(path)]) == EXIT_OK
        out = capsys.readouterr().out
        assert "EXAMPLE TRADING CO LTD" in out
        assert "ICBKCNBJXXX" in out

    def test_multiple_files(
        self, example_env: None, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        paths = []
        for name in ("a.txt", "b.txt"):
            path = tmp_path / name
            path.write_text("invoice")
            paths.append(str(path))
        assert main(paths) == EXIT_OK
        out = capsys.readouterr().out
        assert "=== a.txt ===" in out
        assert "=== b.txt ===" in out

    def test_logs_stay_off_stdout(
        self, example_env: None, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        paths = []
        for name in ("a.txt", "b.txt"):
            path = tmp_path / name
            path.write_text("invoice")
            paths.append(str(path))
        assert main(paths) == EXIT_OK
        captured = capsys.readouterr()
        assert "[INFO]" not in captured.out
        assert "Scheduler started" in captured.err

    def test_multi_flag_with_one_file_is_usage_error(
        self, example_env: None, tmp_path: Path
    ) -> None:
        path = tmp_path / "a.txt"
        path.write_text("invoice")
        assert main([str(path), "--multi"]) == EXIT_USAGE

    def test_missing_file(self, example_env: None, tmp_path: Path) -> None:
        assert main([str(tmp_path / "missing.pdf")]) == EXIT_USAGE

    def test_failed_file(self, example_env: None, tmp_path: Path) -> None:
        path = tmp_path / "broken.docx"
        path.write_bytes(b"not a docx")
        assert main([str(path)]) == EXIT_JOB_FAILED
