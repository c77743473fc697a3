"""End-to-end tests for the benchmark entry point."""

import io
import json
import re
import shutil

import pytest

from hostbench.config.config_loader import DEFAULT_CONFIG_PATH
from hostbench.consts import labels
from hostbench.consts.EngineType import EngineType
from hostbench.run_benchmark import main, run
from hostbench.service.harness import MeasurementHarness
from hostbench.service.suites import build_operations

LINE_RE = re.compile(r"^(?P<label>.+) time: (?P<ns>\d+) nanoseconds$")

EXPECTED_LABELS = [
    labels.SQRT,
    labels.WRITE,
    labels.READ,
    labels.FILE_CLEANUP,
    labels.DB_OPEN,
    labels.SCHEMA,
    labels.INSERT,
    "Complex JOIN query",
    "Recursive CTE query",
    "Complex aggregation",
    "Full-text search",
    labels.DB_CLOSE,
    labels.TOTAL,
]


class TestBuildOperations:
    def test_default_order(self, loader):
        assert [op.label for op in build_operations(loader)] == EXPECTED_LABELS[:-1]

    def test_suite_selection(self, loader):
        loader.config_data.suites = ["disk"]
        assert [op.label for op in build_operations(loader)] == [labels.WRITE, labels.READ, labels.FILE_CLEANUP]


class TestRun:
    @pytest.mark.parametrize("engine", [EngineType.SQLITE, EngineType.DUCKDB], ids=["sqlite", "duckdb"])
    def test_single_run_output_and_cleanup(self, loader, tmp_path, engine):
        loader.config_data.engine = engine
        out = io.StringIO()
        report = run(loader, MeasurementHarness(out=out))

        lines = out.getvalue().splitlines()
        assert [LINE_RE.match(line).group("label") for line in lines] == EXPECTED_LABELS
        assert len(report.runs) == 1
        # Both temp artifacts are gone after a successful run
        assert list(tmp_path.iterdir()) == []

    def test_repeat_and_export(self, loader, tmp_path):
        out_dir = tmp_path / "results"
        loader.config_data.temp_dir = str(tmp_path / "scratch")
        (tmp_path / "scratch").mkdir()
        loader.config_data.repeat = 2
        loader.config_data.output_dir = str(out_dir)
        out = io.StringIO()

        report = run(loader, MeasurementHarness(out=out))

        assert len(report.runs) == 2
        assert len(out.getvalue().splitlines()) == 2 * len(EXPECTED_LABELS)
        summary = json.loads((out_dir / "summary.json").read_text(encoding="utf-8"))
        assert summary["repeat"] == 2
        assert set(summary["operations"]) == set(EXPECTED_LABELS[:-1]) | {"Total"}
        assert (out_dir / "raw_data.json").is_file()


class TestMain:
    def test_main_prints_only_timing_lines(self, tmp_path, capsys):
        main(["--temp-dir", str(tmp_path)])

        stdout = capsys.readouterr().out
        lines = stdout.splitlines()
        assert len(lines) == len(EXPECTED_LABELS)
        assert all(LINE_RE.match(line) for line in lines)
        assert lines[-1].startswith("Total benchmark time: ")

    def test_invalid_repeat_exits(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--repeat", "0"])
        assert exc.value.code == 1
        assert "--repeat" in capsys.readouterr().err

    def test_missing_temp_dir_exits(self, tmp_path):
        with pytest.raises(SystemExit):
            main(["--temp-dir", str(tmp_path / "missing")])

    def test_engine_repeat_out_and_log_file_overrides(self, tmp_path, capsys, restore_package_logging):
        scratch = tmp_path / "scratch"
        scratch.mkdir()
        out_dir = tmp_path / "results"
        log_file = tmp_path / "logs" / "run.log"

        main([
            "--engine", "duckdb",
            "--repeat", "2",
            "--temp-dir", str(scratch),
            "--out", str(out_dir),
            "--log-file", str(log_file),
            "-v",
        ])

        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 2 * len(EXPECTED_LABELS)
        assert all(LINE_RE.match(line) for line in lines)

        summary = json.loads((out_dir / "summary.json").read_text(encoding="utf-8"))
        assert summary["engine"] == "duckdb"
        assert summary["repeat"] == 2

        log_text = log_file.read_text(encoding="utf-8")
        assert "[DEBUG]" in log_text
        assert "engine=duckdb" in log_text
        assert list(scratch.iterdir()) == []

    def test_config_dir_with_env_override(self, tmp_path, capsys):
        config_dir = tmp_path / "config"
        config_dir.mkdir()
        shutil.copy(DEFAULT_CONFIG_PATH / "config.yaml", config_dir / "config.yaml")
        (config_dir / "config_ci.yaml").write_text("suites:\n  - disk\nrepeat: 2\n", encoding="utf-8")
        scratch = tmp_path / "scratch"
        scratch.mkdir()

        main(["--config-dir", str(config_dir), "--env", "ci", "--temp-dir", str(scratch)])

        labels_seen = [LINE_RE.match(line).group("label") for line in capsys.readouterr().out.splitlines()]
        assert labels_seen == 2 * [labels.WRITE, labels.READ, labels.FILE_CLEANUP, labels.TOTAL]
        assert list(scratch.iterdir()) == []

    def test_config_dir_without_config_exits(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--config-dir", str(tmp_path / "missing")])
        assert exc.value.code == 1
        assert "config.yaml not found" in capsys.readouterr().err
