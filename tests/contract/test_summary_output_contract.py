from __future__ import annotations

import re
from pathlib import Path

from employee_import.cli import main as cli_main

"""SUMMARY line contract: a single line, fixed key order, numbers only."""

SUMMARY_RE = re.compile(
    r"^SUMMARY rows=(\d+) valid=(\d+) invalid=(\d+) success=(\d+) failed=(\d+) "
    r"elapsed_sec=(\d+(?:\.\d+)?) throughput_rps=(\d+(?:\.\d+)?)$",
    re.MULTILINE,
)


def test_summary_line_format(temp_workdir: Path, write_config: Path, write_csv, monkeypatch, capsys):
    monkeypatch.setenv("DISABLE_DB_CONNECT", "1")
    csv_path = write_csv(
        [
            "first_name,last_name,email,employee_number,hire_date",
            "John,Doe,john@x.com,EMP-1,2024-01-15",
            "Jane,Smith,jane@x.com,EMP-2,15/01/2024",
            "Bob,Stone,bob@x.com,EMP-3,2024-03-10",
        ]
    )
    cli_main([str(csv_path), "--config", str(write_config), "--yes"])
    out = capsys.readouterr().out

    matches = SUMMARY_RE.findall(out)
    assert len(matches) == 1
    rows, valid, invalid, success, failed, _elapsed, _rps = matches[0]
    assert (rows, valid, invalid, success, failed) == ("3", "2", "1", "2", "0")
    assert int(success) + int(failed) == int(valid)
