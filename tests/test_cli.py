import pytest

from quantum_sched.__main__ import main


def test_cli_runs_to_completion(capsys):
    assert main(["--seed", "3", "--no-jitter"]) == 0

    out = capsys.readouterr().out
    assert out.startswith("   0 TestShed scheduled id: 1\nname: THREAD_1\n")
    assert out.count("TestShed scheduled") >= 6


def test_cli_summary_lists_every_thread(capsys):
    assert main(["--threads", "2", "--min-runtime", "5", "--max-runtime", "5", "--no-jitter", "--summary"]) == 0

    out = capsys.readouterr().out
    assert "Dispatches" in out
    assert "THREAD_1" in out and "THREAD_2" in out
    assert "2 threads, 2 dispatches, total time 10" in out


def test_cli_reports_empty_queue_with_non_zero_exit(capsys):
    assert main(["--threads", "0"]) == 1

    assert "error: unexpectedly empty threads queue" in capsys.readouterr().err


def test_cli_rejects_bad_quantum():
    with pytest.raises(SystemExit) as excinfo:
        main(["--quantum", "0"])
    assert excinfo.value.code == 2


def test_cli_caps_thread_count_at_unit_id_range():
    with pytest.raises(SystemExit) as excinfo:
        main(["--threads", "256"])
    assert excinfo.value.code == 2
