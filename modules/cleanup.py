from pathlib import Path
from datetime import datetime
from dataclasses import dataclass, field
from typing import List, Optional, Tuple
import logging
import threading

from utils.file_selector import DEFAULT_EXTENSION, list_candidates, select_for_deletion

logger = logging.getLogger(__name__)


@dataclass
class CleanupResult:
    """디렉토리 하나의 정리 결과"""

    directory: str
    selected: int = 0
    deleted: int = 0
    failed: List[Tuple[str, str]] = field(default_factory=list)  # (경로, 오류 메시지)
    error: Optional[str] = None  # 디렉토리 조회 실패 시


class FileCleaner:
    def __init__(self, target_dir, days=3, reference_time=None,
                 extension=DEFAULT_EXTENSION, match_mode='substring'):
        """
        파일 정리 클래스
        :param target_dir: 정리할 디렉토리 경로
        :param days: 기준이 되는 날짜 (이 기간보다 오래된 파일 삭제, 0 이하이면 전체 삭제)
        :param reference_time: 기준 시각. 여러 디렉토리를 같은 시각 기준으로 정리할 때 전달
        :param extension: 정리 대상 확장자
        :param match_mode: 확장자 매칭 방식 ('substring' 또는 'suffix')
        """
        self.target_dir = Path(target_dir)
        self.days = days
        self.reference_time = reference_time or datetime.now()
        self.extension = extension
        self.match_mode = match_mode

    def remove_old_files(self) -> CleanupResult:
        """지정된 기간보다 오래된 파일 삭제"""
        result = CleanupResult(directory=str(self.target_dir))
        thread_name = threading.current_thread().name

        if self.days <= 0:
            logger.info(f"전체 파일 삭제: {self.target_dir}")
        else:
            logger.info(f"{self.days}일 이전 파일 삭제: {self.target_dir}")

        try:
            candidates = list_candidates(self.target_dir)
        except OSError as e:
            logger.error(f"디렉토리 조회 중 오류 발생: {self.target_dir} ({e})")
            result.error = str(e)
            logger.info(f"{self.target_dir}: 0개 파일 삭제")
            return result

        targets = select_for_deletion(candidates, self.reference_time, self.days,
                                      self.extension, self.match_mode)
        result.selected = len(targets)

        for file in targets:
            logger.info(f"{thread_name} 파일 삭제: {file}")
            try:
                file.unlink()
                result.deleted += 1
            except FileNotFoundError:
                logger.debug(f"이미 삭제된 파일: {file}")
            except OSError as e:
                logger.error(f"파일 삭제 중 오류 발생: {file} ({e})")
                result.failed.append((str(file), str(e)))

        logger.info(f"{self.target_dir}: {result.deleted}개 파일 삭제")
        return result
