from __future__ import annotations

import pytest
from aiohttp import test_utils
from conftest import AB_OUTPUT, HEY_OUTPUT, FakeRunner

from abbench.cli import sweep as sweep_cli
from abbench.core.runner import InvocationResult


@pytest.fixture
def fake_runner(monkeypatch) -> FakeRunner:
    runner = FakeRunner(
        {
            "ab": AB_OUTPUT.format(rps="100.0"),
            "go-ab": AB_OUTPUT.format(rps="95.5"),
            "hey": HEY_OUTPUT.format(rps="120.25"),
        }
    )
    monkeypatch.setattr(
        "abbench.sweeps.concurrency_sweep.SubprocessRunner", lambda: runner
    )
    return runner


def test_sweep_prints_tsv_report(fake_runner, capsys) -> None:
    code = sweep_cli.main(["-u", "http://x/", "-c", "10", "-s", "10", "-i", "0"])

    out = capsys.readouterr().out
    assert code == 0
    assert out == (
        "concurrency\t1\t10\n"
        "ab\t100.0\t100.0\n"
        "go-ab\t95.5\t95.5\n"
        "hey\t120.25\t120.25\n"
    )
    assert len(fake_runner.calls) == 6


def test_sweep_tool_selection_and_command_override(fake_runner, capsys) -> None:
    fake_runner.responses["/opt/hey"] = HEY_OUTPUT.format(rps="7.0")

    code = sweep_cli.main(
        ["-c", "1", "-i", "0", "--tools", "hey", "--command", "hey=/opt/hey"]
    )

    assert code == 0
    assert capsys.readouterr().out == "concurrency\t1\nhey\t7.0\n"
    assert fake_runner.calls == [
        (("/opt/hey",), ["-n", "1000", "-c", "1", "http://127.0.0.1:8000/"])
    ]


def test_sweep_failure_prints_no_report(fake_runner, capsys) -> None:
    fake_runner.responses["hey"] = FileNotFoundError("hey")

    code = sweep_cli.main(["-c", "10", "-i", "0"])

    captured = capsys.readouterr()
    assert code == 1
    assert captured.out == ""
    assert "hey failed at concurrency 1" in captured.err


def test_sweep_keep_going(fake_runner, capsys) -> None:
    fake_runner.responses["go-ab"] = InvocationResult(output="", returncode=2)

    code = sweep_cli.main(["-c", "1", "-i", "0", "--keep-going"])

    assert code == 0
    assert "go-ab\t0.0" in capsys.readouterr().out


def test_sweep_writes_tsv_and_chart(fake_runner, capsys, tmp_path) -> None:
    tsv_path = tmp_path / "out.tsv"
    chart_path = tmp_path / "out.png"

    code = sweep_cli.main(
        [
            "-c",
            "20",
            "-i",
            "0",
            "--tsv-output",
            str(tsv_path),
            "--chart",
            str(chart_path),
        ]
    )

    assert code == 0
    assert tsv_path.read_text(encoding="utf-8") == capsys.readouterr().out
    assert chart_path.exists()


@pytest.mark.parametrize(
    "argv",
    [
        ["-n", "abc"],
        ["-c", "0"],
        ["-s", "-1"],
        ["-i", "-5"],
        ["-i", "inf"],
        ["-i", "nan"],
        ["--tools", "wrk"],
        ["--tools", "ab,ab"],
        ["--command", "hey"],
    ],
)
def test_invalid_flags_fail_before_any_tool_runs(fake_runner, argv) -> None:
    with pytest.raises(SystemExit) as excinfo:
        sweep_cli.main(argv)

    assert excinfo.value.code == 2
    assert fake_runner.calls == []


def test_parse_commands() -> None:
    assert sweep_cli.parse_commands(["ab=/usr/sbin/ab", " hey = hey "]) == {
        "ab": "/usr/sbin/ab",
        "hey": "hey",
    }
    assert sweep_cli.parse_commands(None) == {}


def test_interrupt_prints_completed_levels(monkeypatch, capsys) -> None:
    outputs = iter([AB_OUTPUT.format(rps="5.5"), KeyboardInterrupt()])

    class InterruptedRunner:
        def invoke(self, command, arguments):
            response = next(outputs)
            if isinstance(response, BaseException):
                raise response
            return InvocationResult(output=response, returncode=0)

    monkeypatch.setattr(
        "abbench.sweeps.concurrency_sweep.SubprocessRunner", InterruptedRunner
    )

    code = sweep_cli.main(["-c", "20", "-i", "0", "--tools", "ab"])

    assert code == 130
    assert capsys.readouterr().out == "concurrency\t1\nab\t5.5\n"


def test_preflight_unreachable_target_aborts(fake_runner, capsys) -> None:
    port = test_utils.unused_port()

    code = sweep_cli.main(
        ["-u", f"http://127.0.0.1:{port}/", "-c", "1", "-i", "0", "--preflight"]
    )

    captured = capsys.readouterr()
    assert code == 1
    assert captured.out == ""
    assert "not reachable" in captured.err
    assert fake_runner.calls == []
