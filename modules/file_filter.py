# modules/file_filter.py
import shutil
import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from utils.content_date_extractor import ContentDateExtractor
from utils.file_selector import DEFAULT_EXTENSION, list_candidates, select_in_range

logger = logging.getLogger(__name__)


@dataclass
class FilterResult:
    """구간 필터 처리 결과"""

    matched: List[str] = field(default_factory=list)  # 파일명
    moved: int = 0
    content_matches: Dict[str, bool] = field(default_factory=dict)  # 파일명 -> 본문 날짜 일치 여부
    failed: List[Tuple[str, str]] = field(default_factory=list)
    error: Optional[str] = None


class FileFilter:
    """수정 시각이 구간 안에 있는 파일을 찾고 선택적으로 이동"""

    def __init__(self, extractor: Optional[ContentDateExtractor] = None,
                 extension: str = DEFAULT_EXTENSION, match_mode: str = 'substring',
                 move_files: bool = False):
        """
        FileFilter 초기화
        :param extractor: 본문 날짜 추출기 (기본값: 기본 패턴/형식)
        :param extension: 대상 확장자
        :param match_mode: 확장자 매칭 방식
        :param move_files: True이면 일치한 파일을 대상 폴더로 이동
        """
        self.extractor = extractor or ContentDateExtractor()
        self.extension = extension
        self.match_mode = match_mode
        self.move_files = move_files

    def process_files(self, source_folder: Union[str, Path], dest_folder: Union[str, Path],
                      start: datetime, end: datetime) -> FilterResult:
        """
        source_folder에서 (start, end] 구간에 수정된 파일 처리

        본문 날짜 일치 여부는 계산해서 결과에 담지만 이동 여부 판단에는 쓰지 않는다.
        """
        source = Path(source_folder)
        dest = Path(dest_folder)
        result = FilterResult()

        logger.info(f"처리 구간: {start} ~ {end} (실행 시각: {datetime.now():%Y-%m-%d %H:%M:%S})")

        try:
            candidates = list_candidates(source)
        except OSError as e:
            logger.error(f"디렉토리 조회 중 오류 발생: {source} ({e})")
            result.error = str(e)
            logger.info(f"처리 건수: {result.moved}")
            return result

        for path in select_in_range(candidates, start, end, self.extension, self.match_mode):
            name = path.name
            result.matched.append(name)

            content_match = self.extractor.match_file(path, start, end)
            result.content_matches[name] = content_match
            logger.info(f"{name} (본문 수정 시각 일치: {content_match})")

            if self.move_files:
                try:
                    self._move(path, dest / name)
                    result.moved += 1
                except OSError as e:
                    logger.error(f"파일 이동 중 오류 발생: {path} ({e})")
                    result.failed.append((str(path), str(e)))

        logger.info(f"처리 건수: {result.moved}")
        return result

    @staticmethod
    def _move(src: Path, dst: Path):
        """대상 위치에 같은 이름의 파일이 있으면 덮어씀. 같은 이름의 디렉토리가 있으면 실패"""
        dst.parent.mkdir(parents=True, exist_ok=True)
        if dst.is_dir():
            raise IsADirectoryError(f"대상 위치에 같은 이름의 디렉토리가 있습니다: {dst}")
        if dst.is_file():
            dst.unlink()
        shutil.move(str(src), str(dst))
