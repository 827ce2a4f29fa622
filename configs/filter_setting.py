import os
import re
from datetime import datetime
from pathlib import Path
from dotenv import load_dotenv
import logging

from utils.content_date_extractor import DEFAULT_DATE_FORMAT, DEFAULT_PATTERN

logger = logging.getLogger(__name__)

# 시작/종료 시각 입력 형식
INPUT_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

DEFAULTS = {
    'FILTER_START_DATE': '2018-03-02 00:00:00',
    'FILTER_END_DATE': '2018-03-28 16:07:30',
    'FILTER_SOURCE_DIR': '/var/user/csidev/Autonomy10/EnoviaConnector/EnoviaMP2013x/temp',
    'FILTER_DEST_DIR': '/var/user/csidev/Bryan/tempjava',
    'FILTER_MOVE_FILES': 'false',
    'FILTER_TRACKED_EXTENSION': 'xml',
    'FILTER_EXTENSION_MATCH': 'substring',
    'FILTER_CONTENT_PATTERN': DEFAULT_PATTERN,
    'FILTER_CONTENT_DATE_FORMAT': DEFAULT_DATE_FORMAT,
    'FILTER_LOG_FILE': 'file_filter.log',
}


def parse_input_date(value: str) -> datetime:
    """'YYYY-MM-DD HH:MM:SS' 문자열을 datetime으로 변환"""
    return datetime.strptime(value.strip(), INPUT_DATE_FORMAT)


class FilterSettings:
    """구간 필터/이동 설정을 관리하는 싱글톤 클래스"""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self):
        """환경변수에서 필터 설정 로드"""
        # 프로젝트 루트 디렉토리 찾기
        project_root = Path(__file__).parent.parent
        env_path = project_root / '.env'

        # .env 파일 로드
        if env_path.exists():
            load_dotenv(dotenv_path=env_path)
        else:
            logger.warning(f".env 파일을 찾을 수 없습니다: {env_path}")

        self.start_date = self._get_date('FILTER_START_DATE')
        self.end_date = self._get_date('FILTER_END_DATE')
        self.source_dir = self._get_env_value('FILTER_SOURCE_DIR')
        self.dest_dir = self._get_env_value('FILTER_DEST_DIR')
        self.extension = self._get_env_value('FILTER_TRACKED_EXTENSION')
        self.match_mode = self._get_env_value('FILTER_EXTENSION_MATCH')
        self.content_pattern = self._get_env_value('FILTER_CONTENT_PATTERN')
        self.content_date_format = self._get_env_value('FILTER_CONTENT_DATE_FORMAT')
        self.log_file = self._get_env_value('FILTER_LOG_FILE')

        # 파일 이동 여부 (기본값: false)
        self._move_files_value = self._get_env_value('FILTER_MOVE_FILES').lower()
        self._move_files = self._move_files_value == 'true'

        self._validate_settings()

    def _get_env_value(self, key: str) -> str:
        """환경변수 값을 가져오고 정리 (없으면 기본값)"""
        value = os.getenv(key, '').strip()
        if value and value[0] in ['"', "'"] and value[-1] in ['"', "'"]:
            value = value[1:-1]
        return value or DEFAULTS[key]

    def _get_date(self, key: str) -> datetime:
        value = self._get_env_value(key)
        try:
            return parse_input_date(value)
        except ValueError:
            raise ValueError(f"{key} 형식이 잘못되었습니다 ({INPUT_DATE_FORMAT}): {value}")

    def _validate_settings(self):
        """설정값 검증"""
        if self.start_date > self.end_date:
            raise ValueError("FILTER_START_DATE가 FILTER_END_DATE보다 늦습니다.")
        if self.match_mode not in ('substring', 'suffix'):
            raise ValueError(f"FILTER_EXTENSION_MATCH는 substring 또는 suffix여야 합니다: {self.match_mode}")
        if self._move_files_value not in ('true', 'false'):
            raise ValueError(f"FILTER_MOVE_FILES는 true 또는 false여야 합니다: {self._move_files_value}")

        # 본문 날짜 패턴은 날짜를 캡처하는 그룹이 있어야 함
        try:
            pattern = re.compile(self.content_pattern)
        except re.error as e:
            raise ValueError(f"FILTER_CONTENT_PATTERN 정규식이 잘못되었습니다: {self.content_pattern} ({e})")
        if pattern.groups < 1:
            raise ValueError(f"FILTER_CONTENT_PATTERN에 캡처 그룹이 없습니다: {self.content_pattern}")

    @property
    def move_files(self) -> bool:
        """일치한 파일 이동 여부"""
        return self._move_files

    def get_settings(self) -> dict:
        """필터 설정 반환"""
        return {
            'start_date': self.start_date,
            'end_date': self.end_date,
            'source_dir': self.source_dir,
            'dest_dir': self.dest_dir,
            'move_files': self.move_files,
            'extension': self.extension,
            'match_mode': self.match_mode,
            'content_pattern': self.content_pattern,
            'content_date_format': self.content_date_format,
            'log_file': self.log_file,
        }


def get_filter_settings() -> dict:
    """필터 설정 반환"""
    return FilterSettings().get_settings()
