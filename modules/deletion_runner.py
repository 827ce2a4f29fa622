# modules/deletion_runner.py
import time
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from modules.cleanup import CleanupResult, FileCleaner
from utils.file_selector import DEFAULT_EXTENSION

logger = logging.getLogger(__name__)


@dataclass
class BatchResult:
    """삭제 배치 전체 결과"""

    reference_time: datetime
    results: List[CleanupResult] = field(default_factory=list)
    elapsed: float = 0.0  # 초

    @property
    def total_deleted(self) -> int:
        return sum(r.deleted for r in self.results)


def run_deletion_batch(target_dirs, days: int, reference_time: Optional[datetime] = None,
                       max_workers: int = 2, extension: str = DEFAULT_EXTENSION,
                       match_mode: str = 'substring') -> BatchResult:
    """
    여러 디렉토리의 오래된 파일을 스레드 풀에서 동시에 삭제

    모든 작업이 같은 기준 시각으로 판단하도록 기준 시각은 작업 제출 전에 한 번만 측정한다.
    :param target_dirs: 정리할 디렉토리 목록
    :param days: 보관 일수 (0 이하이면 전체 삭제)
    :param max_workers: 스레드 풀 크기
    :return: BatchResult (디렉토리 순서대로 결과 포함)
    """
    start = time.monotonic()
    if reference_time is None:
        reference_time = datetime.now()
    batch = BatchResult(reference_time=reference_time)

    cleaners = [
        FileCleaner(target_dir=d, days=days, reference_time=reference_time,
                    extension=extension, match_mode=match_mode)
        for d in target_dirs
    ]

    with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix='cleanup') as executor:
        futures = [(c, executor.submit(c.remove_old_files)) for c in cleaners]
        for cleaner, future in futures:
            try:
                batch.results.append(future.result())
            except Exception as e:
                logger.error(f"정리 작업 중 예기치 않은 오류 발생: {cleaner.target_dir} ({e})",
                             exc_info=True)
                batch.results.append(CleanupResult(directory=str(cleaner.target_dir), error=str(e)))

    batch.elapsed = time.monotonic() - start
    logger.info(f"파일 삭제 완료: 총 {batch.total_deleted}개, 소요 시간 {batch.elapsed:.0f}s")
    return batch
