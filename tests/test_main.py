"""
Tests for the rule-engine command line

Author: TM3
Date: 2025-11-20
"""
import logging
import pytest

from rule_engine.main import main


@pytest.fixture(autouse=True)
def restore_root_logging():
    """
    main() reconfigures the root logger; put the previous handlers back
    """
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


class TestMain:
    """Test the batch entry point end to end"""

    def test_processes_file(self, input_file, tmp_path, capsys):
        """Test a full run writes the output and prints the qualified count"""
        # Arrange
        output = tmp_path / "processed_orders.csv"

        # Act
        exit_code = main(["--input", str(input_file), "--output", str(output), "--as-of", "2023-04-01"])

        # Assert
        assert exit_code == 0
        lines = output.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 5
        assert lines[1].endswith(", 0.03")
        assert lines[2].endswith(", 0.13")
        assert lines[3].endswith(", 0.25")
        assert lines[4].endswith(", 0.0")
        assert "Number of orders qualified for discounts: 3" in capsys.readouterr().out

    def test_malformed_record_aborts(self, tmp_path, sample_records):
        """Test the default policy fails the run and writes nothing"""
        source = tmp_path / "bad.csv"
        source.write_text("\n".join(sample_records + ["2023-04-18T18:18:40Z,Bread"]), encoding="utf-8")
        output = tmp_path / "processed_orders.csv"

        exit_code = main(["--input", str(source), "--output", str(output), "--as-of", "2023-04-01"])

        assert exit_code == 1
        assert not output.exists()

    def test_skip_policy_continues(self, tmp_path, sample_records, capsys):
        """Test --on-error skip writes the good orders"""
        source = tmp_path / "bad.csv"
        source.write_text("\n".join(sample_records + ["2023-04-18T18:18:40Z,Bread"]), encoding="utf-8")
        output = tmp_path / "processed_orders.csv"

        exit_code = main([
            "--input", str(source),
            "--output", str(output),
            "--as-of", "2023-04-01",
            "--on-error", "skip",
        ])

        assert exit_code == 0
        assert len(output.read_text(encoding="utf-8").splitlines()) == 5
        assert "Number of orders qualified for discounts: 3" in capsys.readouterr().out

    def test_missing_input(self, tmp_path):
        """Test an unreadable source fails the run"""
        exit_code = main(["--input", str(tmp_path / "missing.csv"), "--output", str(tmp_path / "out.csv")])

        assert exit_code == 1

    def test_invalid_as_of(self, input_file):
        """Test a bad reference date is rejected by argparse"""
        with pytest.raises(SystemExit):
            main(["--input", str(input_file), "--as-of", "01/04/2023"])
