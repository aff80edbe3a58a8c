"""
Tests for the main.py CLI (workflow subcommand and argument validation).
"""

from __future__ import annotations

import pytest

import main


def test_workflow_command_qualifies(capsys):
    code = main.main(["workflow", "--vendor-id", "999", "--score", "85", "--threshold", "80", "--salt", "12345"])
    assert code == 0
    out = capsys.readouterr().out
    assert '"qualified": true' in out
    assert '"ledger_update": "vendors.markQualified(999)"' in out


def test_workflow_command_not_qualified(capsys):
    code = main.main(["workflow", "--vendor-id", "1", "--score", "75", "--threshold", "80"])
    assert code == 1
    assert '"stopped_at": "verifyQualification"' in capsys.readouterr().out


def test_workflow_command_compliance_flag(capsys):
    code = main.main(["workflow", "--vendor-id", "1", "--score", "90", "--threshold", "80", "--no-insurance"])
    assert code == 1
    assert '"stopped_at": "checkCompliance"' in capsys.readouterr().out


def test_negative_vendor_id_rejected():
    assert main.main(["workflow", "--vendor-id", "-1", "--score", "1", "--threshold", "1"]) == 2


def test_command_required():
    with pytest.raises(SystemExit):
        main.main([])
