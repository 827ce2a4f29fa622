# utils/content_date_extractor.py

import re
import logging
from datetime import datetime
from pathlib import Path
from typing import List, Union

logger = logging.getLogger(__name__)

# <select name="modified">2/11/2018 2:53:51 AM</select>
DEFAULT_PATTERN = r'<select name="modified">(.+?)</select>'
DEFAULT_DATE_FORMAT = '%m/%d/%Y %I:%M:%S %p'


class ContentDateExtractor:
    """XML 본문에 기록된 수정 시각 추출기"""

    def __init__(self, pattern: str = DEFAULT_PATTERN, date_format: str = DEFAULT_DATE_FORMAT):
        """
        ContentDateExtractor 초기화
        :param pattern: 날짜 문자열을 첫 번째 그룹으로 캡처하는 정규식
        :param date_format: 캡처된 문자열의 strptime 형식
        """
        self.pattern = re.compile(pattern)
        if self.pattern.groups < 1:
            raise ValueError(f"정규식에 캡처 그룹이 없습니다: {pattern}")
        self.date_format = date_format

    def extract_dates(self, content: str) -> List[datetime]:
        """
        본문에서 날짜를 모두 추출 (등장 순서 유지)

        파싱에 실패한 항목은 경고 로그만 남기고 건너뛴다.
        """
        dates = []
        for match in self.pattern.finditer(content):
            raw = match.group(1).strip()
            try:
                dates.append(datetime.strptime(raw, self.date_format))
            except ValueError as e:
                logger.warning(f"날짜 파싱 실패, 건너뜀: '{raw}' ({e})")
        return dates

    def match(self, content: str, start: datetime, end: datetime) -> bool:
        """추출된 날짜 중 하나라도 (start, end] 구간에 있으면 True"""
        return any(start < date <= end for date in self.extract_dates(content))

    @staticmethod
    def read_file(path: Union[str, Path]) -> str:
        """파일 전체를 문자열로 읽음 (크기 제한 없음)"""
        return Path(path).read_text(encoding='utf-8', errors='replace')

    def match_file(self, path: Union[str, Path], start: datetime, end: datetime) -> bool:
        """파일 본문의 수정 시각이 구간에 있는지 확인. 읽기 실패 시 False"""
        try:
            content = self.read_file(path)
        except OSError as e:
            logger.error(f"파일 읽기 중 오류 발생: {path} ({e})")
            return False
        return self.match(content, start, end)
