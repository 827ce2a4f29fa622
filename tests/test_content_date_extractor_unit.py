"""
ContentDateExtractor 단위 테스트

테스트 대상: utils/content_date_extractor.py - 본문 수정 시각 추출 및 구간 일치 확인
"""

import logging
from datetime import datetime

import pytest

from utils.content_date_extractor import ContentDateExtractor


SAMPLE_XML = """<mql>
  <object type="Part">
    <select name="name">MPN-0001</select>
    <select name="modified">2/11/2018 2:53:51 AM</select>
  </object>
  <object type="Part">
    <select name="modified">03/15/2018 10:00:00 PM</select>
  </object>
</mql>
"""


@pytest.fixture
def extractor():
    return ContentDateExtractor()


class TestExtractDates:
    """날짜 추출 테스트"""

    def test_extracts_all_occurrences_in_order(self, extractor):
        dates = extractor.extract_dates(SAMPLE_XML)
        assert dates == [
            datetime(2018, 2, 11, 2, 53, 51),
            datetime(2018, 3, 15, 22, 0, 0),
        ]

    def test_no_occurrence_returns_empty(self, extractor):
        assert extractor.extract_dates("<mql><select name=\"name\">x</select></mql>") == []

    def test_malformed_occurrence_is_skipped(self, extractor, caplog):
        """잘못된 날짜는 건너뛰고 나머지는 계속 추출"""
        text = (
            '<select name="modified">not a date</select>'
            '<select name="modified">2/11/2018 2:53:51 AM</select>'
        )
        with caplog.at_level(logging.WARNING):
            dates = extractor.extract_dates(text)
        assert dates == [datetime(2018, 2, 11, 2, 53, 51)]
        assert "not a date" in caplog.text

    def test_non_greedy_match_per_tag(self, extractor):
        text = '<select name="modified">1/1/2018 1:00:00 AM</select><select name="modified">1/2/2018 1:00:00 AM</select>'
        assert len(extractor.extract_dates(text)) == 2

    def test_twelve_hour_clock(self, extractor):
        text = '<select name="modified">2/11/2018 12:05:00 AM</select><select name="modified">2/11/2018 12:05:00 PM</select>'
        assert extractor.extract_dates(text) == [
            datetime(2018, 2, 11, 0, 5, 0),
            datetime(2018, 2, 11, 12, 5, 0),
        ]

    def test_custom_pattern_and_format(self):
        extractor = ContentDateExtractor(r'<modified>(.+?)</modified>', '%Y-%m-%d %H:%M:%S')
        assert extractor.extract_dates('<modified>2018-03-10 08:00:00</modified>') == [
            datetime(2018, 3, 10, 8, 0, 0)
        ]

    def test_pattern_without_group_raises(self):
        with pytest.raises(ValueError):
            ContentDateExtractor(r'<select name="modified">.+?</select>')


class TestMatch:
    """구간 일치 확인 테스트"""

    START = datetime(2018, 3, 2, 0, 0, 0)
    END = datetime(2018, 3, 28, 16, 7, 30)

    def test_any_occurrence_in_interval_matches(self, extractor):
        assert extractor.match(SAMPLE_XML, self.START, self.END)

    def test_no_occurrence_in_interval(self, extractor):
        assert not extractor.match(SAMPLE_XML, datetime(2019, 1, 1), datetime(2019, 12, 31))

    def test_start_boundary_excluded_end_included(self, extractor):
        at_start = '<select name="modified">3/2/2018 12:00:00 AM</select>'
        at_end = '<select name="modified">3/28/2018 4:07:30 PM</select>'
        assert not extractor.match(at_start, self.START, self.END)
        assert extractor.match(at_end, self.START, self.END)

    def test_empty_text_never_matches(self, extractor):
        assert not extractor.match("", self.START, self.END)


class TestMatchFile:
    """파일 기반 확인 테스트"""

    def test_match_file_reads_content(self, extractor, tmp_path):
        path = tmp_path / "a.xml"
        path.write_text(SAMPLE_XML)
        assert extractor.match_file(path, datetime(2018, 3, 2), datetime(2018, 3, 28))

    def test_unreadable_file_returns_false(self, extractor, tmp_path, caplog):
        with caplog.at_level(logging.ERROR):
            assert not extractor.match_file(tmp_path / "missing.xml", datetime(2018, 1, 1), datetime(2019, 1, 1))
        assert "missing.xml" in caplog.text
