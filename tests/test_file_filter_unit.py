"""
FileFilter 단위 테스트

테스트 대상: modules/file_filter.py - FileFilter 클래스
"""

import os
from datetime import datetime
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from modules.file_filter import FileFilter


START = datetime(2018, 3, 2, 0, 0, 0)
END = datetime(2018, 3, 28, 16, 7, 30)

IN_RANGE_CONTENT = '<mql><select name="modified">3/10/2018 9:15:00 AM</select></mql>'
OUT_OF_RANGE_CONTENT = '<mql><select name="modified">1/10/2017 9:15:00 AM</select></mql>'


def _touch(path: Path, modified: datetime, content: str = IN_RANGE_CONTENT):
    path.write_text(content)
    ts = modified.timestamp()
    os.utime(path, (ts, ts))


@pytest.fixture
def source(tmp_path):
    src = tmp_path / "temp"
    src.mkdir()
    _touch(src / "d.xml", datetime(2018, 3, 15, 10, 0, 0))
    _touch(src / "e.xml", START)
    _touch(src / "f.xml", END, OUT_OF_RANGE_CONTENT)
    _touch(src / "g.txt", datetime(2018, 3, 15, 10, 0, 0))
    (src / "sub.xml").mkdir()
    return src


class TestProcessFiles:
    """구간 조회 테스트"""

    def test_lists_matches_without_moving_by_default(self, source, tmp_path):
        dest = tmp_path / "dest"
        result = FileFilter().process_files(source, dest, START, END)

        assert result.matched == ["d.xml", "f.xml"]
        assert result.moved == 0
        assert (source / "d.xml").exists()
        assert not dest.exists()

    def test_content_match_is_reported_but_not_gating(self, source, tmp_path):
        """본문 날짜가 구간 밖이어도 파일 수정 시각이 맞으면 일치 목록에 포함"""
        result = FileFilter(move_files=True).process_files(source, tmp_path / "dest", START, END)

        assert result.content_matches == {"d.xml": True, "f.xml": False}
        assert result.moved == 2

    def test_move_overwrites_existing_destination(self, source, tmp_path):
        dest = tmp_path / "dest"
        dest.mkdir()
        (dest / "d.xml").write_text("stale")

        result = FileFilter(move_files=True).process_files(source, dest, START, END)

        assert result.moved == 2
        assert (dest / "d.xml").read_text() == IN_RANGE_CONTENT
        assert not (source / "d.xml").exists()
        assert sorted(p.name for p in source.iterdir()) == ["e.xml", "g.txt", "sub.xml"]

    def test_directory_at_destination_is_recorded_as_failure(self, source, tmp_path):
        """대상 위치에 같은 이름의 디렉토리가 있으면 그 안으로 옮기지 않고 실패로 기록"""
        dest = tmp_path / "dest"
        (dest / "d.xml").mkdir(parents=True)

        result = FileFilter(move_files=True).process_files(source, dest, START, END)

        assert result.moved == 1
        assert len(result.failed) == 1
        assert result.failed[0][0].endswith("d.xml")
        assert (source / "d.xml").exists()
        assert list((dest / "d.xml").iterdir()) == []
        assert (dest / "f.xml").is_file()

    def test_missing_source_is_logged(self, tmp_path):
        result = FileFilter().process_files(tmp_path / "missing", tmp_path / "dest", START, END)

        assert result.matched == []
        assert result.moved == 0
        assert result.error is not None

    def test_move_failure_does_not_stop_processing(self, source, tmp_path):
        calls = []

        def failing_move(src, dst):
            calls.append(src.name)
            if src.name == "d.xml":
                raise PermissionError("permission denied")

        file_filter = FileFilter(move_files=True)
        with patch.object(file_filter, "_move", side_effect=failing_move):
            result = file_filter.process_files(source, tmp_path / "dest", START, END)

        assert calls == ["d.xml", "f.xml"]
        assert result.moved == 1
        assert result.failed[0][0].endswith("d.xml")

    def test_uses_given_extractor(self, source, tmp_path):
        extractor = MagicMock()
        extractor.match_file.return_value = True

        result = FileFilter(extractor=extractor).process_files(source, tmp_path / "dest", START, END)

        assert extractor.match_file.call_count == 2
        assert all(result.content_matches.values())
