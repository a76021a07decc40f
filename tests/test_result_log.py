from __future__ import annotations

import re
from pathlib import Path

from stageforge.executor.types import JobResult, PassFail, TaskResult
from stageforge.results import ResultLog, dump_job, load_job


def _job(name: str = "ci") -> JobResult:
    return JobResult(
        job_name=name,
        execution_time="2024-05-01T10:00:00.123456+00:00",
        results=(
            TaskResult("true", "true", 1, PassFail.PASS, 0, "stageforge.yml"),
            TaskResult("build", "make build: 'all'", 2, PassFail.FAIL, 12, "stageforge.yml"),
        ),
    )


def test_write_then_replay_round_trips(tmp_path: Path) -> None:
    log = ResultLog(tmp_path / ".stageforge")
    job = _job()

    log.write(job)

    assert log.replay(1) == [job]


def test_write_creates_directory_and_names_file(tmp_path: Path) -> None:
    log_dir = tmp_path / "nested" / "logs"
    filename = ResultLog(log_dir).write(_job())

    assert re.fullmatch(
        r"stageforge-\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{6}\+00:00\.log", filename
    )
    assert (log_dir / filename).is_file()


def test_content_is_readable_yaml(tmp_path: Path) -> None:
    log = ResultLog(tmp_path)
    filename = log.write(_job())
    text = (tmp_path / filename).read_text(encoding="utf-8")

    assert "job_name: ci" in text
    assert "result: Pass" in text
    assert "result: Fail" in text


def test_replay_returns_most_recent_oldest_first(tmp_path: Path) -> None:
    log = ResultLog(tmp_path)
    for name in ("first", "second", "third"):
        log.write(_job(name))

    assert [job.job_name for job in log.replay(2)] == ["second", "third"]
    assert [job.job_name for job in log.replay(10)] == ["first", "second", "third"]


def test_replay_missing_directory_is_empty(tmp_path: Path) -> None:
    assert ResultLog(tmp_path / "missing").replay(3) == []


def test_replay_zero_is_empty(tmp_path: Path) -> None:
    log = ResultLog(tmp_path)
    log.write(_job())
    assert log.replay(0) == []


def test_replay_ignores_foreign_files(tmp_path: Path) -> None:
    log = ResultLog(tmp_path)
    log.write(_job())
    (tmp_path / "notes.txt").write_text("hi", encoding="utf-8")

    assert len(log.replay(5)) == 1


def test_values_that_look_like_yaml_scalars_stay_strings() -> None:
    job = JobResult(
        job_name="yes",
        execution_time="2024-05-01T10:00:00+00:00",
        results=(TaskResult("null", "true", 1, PassFail.PASS, 0, "1.0"),),
    )
    assert load_job(dump_job(job)) == job


def test_same_timestamp_never_overwrites(tmp_path: Path, monkeypatch) -> None:
    from stageforge.results import log as log_module

    stamps = iter(
        [
            "2024-05-01T10:00:00.000001+00:00",
            "2024-05-01T10:00:00.000001+00:00",
            "2024-05-01T10:00:00.000002+00:00",
        ]
    )
    monkeypatch.setattr(log_module, "_timestamp", lambda: next(stamps))
    log = ResultLog(tmp_path)

    first = log.write(_job("first"))
    second = log.write(_job("second"))

    assert first != second
    assert [job.job_name for job in log.replay(5)] == ["first", "second"]
