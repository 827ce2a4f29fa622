import os
from pathlib import Path
from dotenv import load_dotenv
import logging

logger = logging.getLogger(__name__)

DEFAULT_TARGET_DIRS = [
    '/data/csidata/EnoviaMPN_temp_Unmatch',  # 커넥터 MPN 미매칭 파일
    '/data/csidata/EnoviaCPtemp_Unmatch',    # 커넥터 CP 미매칭 파일
]


class CleanupSettings:
    """삭제 배치 설정을 관리하는 싱글톤 클래스"""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self):
        """환경변수에서 삭제 배치 설정 로드"""
        # 프로젝트 루트 디렉토리 찾기
        project_root = Path(__file__).parent.parent
        env_path = project_root / '.env'

        # .env 파일 로드
        if env_path.exists():
            load_dotenv(dotenv_path=env_path)
        else:
            logger.warning(f".env 파일을 찾을 수 없습니다: {env_path}")

        target_dirs = self._get_env_value('CLEANUP_TARGET_DIRS')
        if target_dirs:
            self.target_dirs = [d.strip() for d in target_dirs.split(',') if d.strip()]
        else:
            self.target_dirs = list(DEFAULT_TARGET_DIRS)

        self.extension = self._get_env_value('CLEANUP_TRACKED_EXTENSION') or 'xml'
        self.match_mode = self._get_env_value('CLEANUP_EXTENSION_MATCH') or 'substring'
        self.log_file = self._get_env_value('CLEANUP_LOG_FILE') or 'file_cleanup.log'

        max_workers = self._get_env_value('CLEANUP_MAX_WORKERS') or '2'
        try:
            self.max_workers = int(max_workers)
        except ValueError:
            raise ValueError(f"CLEANUP_MAX_WORKERS는 정수여야 합니다: {max_workers}")

        # 필수 설정 검증
        self._validate_settings()

    def _get_env_value(self, key: str) -> str:
        """환경변수 값을 가져오고 정리"""
        value = os.getenv(key, '').strip()
        if value and value[0] in ['"', "'"] and value[-1] in ['"', "'"]:
            value = value[1:-1]
        return value

    def _validate_settings(self):
        """설정값 검증"""
        if not self.target_dirs:
            raise ValueError("CLEANUP_TARGET_DIRS가 비어 있습니다.")
        if self.match_mode not in ('substring', 'suffix'):
            raise ValueError(f"CLEANUP_EXTENSION_MATCH는 substring 또는 suffix여야 합니다: {self.match_mode}")
        if self.max_workers < 1:
            raise ValueError(f"CLEANUP_MAX_WORKERS는 1 이상이어야 합니다: {self.max_workers}")

    def get_settings(self) -> dict:
        """삭제 배치 설정 반환"""
        return {
            'target_dirs': list(self.target_dirs),
            'extension': self.extension,
            'match_mode': self.match_mode,
            'max_workers': self.max_workers,
            'log_file': self.log_file,
        }


def get_cleanup_settings() -> dict:
    """삭제 배치 설정 반환"""
    return CleanupSettings().get_settings()
