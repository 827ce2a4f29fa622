# utils/file_selector.py

import os
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from pathlib import Path
from typing import Callable, Iterable, List, Union

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = 'xml'
MATCH_MODES = ('substring', 'suffix')


@dataclass(frozen=True)
class FileCandidate:
    """디렉토리 항목 하나의 선택 판단용 정보"""

    path: Path
    is_directory: bool
    last_modified: datetime  # 파일시스템 수정 시각 (로컬 시간, naive)

    @property
    def name(self) -> str:
        return self.path.name


Predicate = Callable[[FileCandidate], bool]


def list_candidates(directory: Union[str, Path]) -> List[FileCandidate]:
    """
    디렉토리 바로 아래 항목 목록 (하위 디렉토리는 탐색하지 않음)
    :param directory: 조회할 디렉토리
    :return: 이름순으로 정렬된 FileCandidate 리스트
    :raises OSError: 디렉토리가 없거나 읽을 수 없는 경우
    """
    candidates = []
    with os.scandir(directory) as entries:
        for entry in entries:
            try:
                stat = entry.stat()
                is_directory = entry.is_dir()
            except OSError as e:
                # 조회 도중 삭제된 파일
                logger.debug(f"항목 정보 조회 실패, 건너뜀: {entry.path} ({e})")
                continue
            candidates.append(FileCandidate(
                path=Path(entry.path),
                is_directory=is_directory,
                last_modified=datetime.fromtimestamp(stat.st_mtime),
            ))
    candidates.sort(key=lambda c: c.name)
    return candidates


def matches_tracked_extension(name: str, extension: str = DEFAULT_EXTENSION,
                              match_mode: str = 'substring') -> bool:
    """
    파일명이 추적 대상 확장자에 해당하는지 확인

    substring 모드는 이름 어디에든 확장자 문자열이 있으면 일치로 본다
    ('report.xmlold'도 'xml'에 일치). suffix 모드는 '.xml'로 끝나는 경우만 일치.
    """
    if match_mode == 'substring':
        return extension in name
    if match_mode == 'suffix':
        return name.endswith('.' + extension)
    raise ValueError(f"지원하지 않는 확장자 매칭 방식입니다: {match_mode}")


def make_age_predicate(reference_time: datetime, retention_days: int,
                       extension: str = DEFAULT_EXTENSION,
                       match_mode: str = 'substring') -> Predicate:
    """
    보관 기간 기준 삭제 대상 판별 함수 생성
    :param reference_time: 기준 시각 (배치 실행 시 한 번만 측정한 값)
    :param retention_days: 보관 일수. 0 이하이면 추적 대상 파일 전체 선택
    """
    if retention_days <= 0:
        def select_all(candidate: FileCandidate) -> bool:
            return (not candidate.is_directory
                    and matches_tracked_extension(candidate.name, extension, match_mode))
        return select_all

    cutoff = reference_time - timedelta(days=retention_days)

    def older_than_cutoff(candidate: FileCandidate) -> bool:
        if candidate.is_directory:
            return False
        if not matches_tracked_extension(candidate.name, extension, match_mode):
            return False
        # 기준 시각과 정확히 같은 파일은 보관
        return candidate.last_modified < cutoff

    return older_than_cutoff


def make_range_predicate(start: datetime, end: datetime,
                         extension: str = DEFAULT_EXTENSION,
                         match_mode: str = 'substring') -> Predicate:
    """(start, end] 구간에 수정된 추적 대상 파일 판별 함수 생성"""
    if start > end:
        raise ValueError(f"시작 시각이 종료 시각보다 늦습니다: {start} > {end}")

    def in_range(candidate: FileCandidate) -> bool:
        if candidate.is_directory:
            return False
        if not matches_tracked_extension(candidate.name, extension, match_mode):
            return False
        return start < candidate.last_modified <= end

    return in_range


def select_for_deletion(candidates: Iterable[FileCandidate], reference_time: datetime,
                        retention_days: int, extension: str = DEFAULT_EXTENSION,
                        match_mode: str = 'substring') -> List[Path]:
    """삭제 대상 경로 목록"""
    predicate = make_age_predicate(reference_time, retention_days, extension, match_mode)
    return [c.path for c in candidates if predicate(c)]


def select_in_range(candidates: Iterable[FileCandidate], start: datetime, end: datetime,
                    extension: str = DEFAULT_EXTENSION,
                    match_mode: str = 'substring') -> List[Path]:
    """수정 시각이 (start, end] 구간인 파일 경로 목록"""
    predicate = make_range_predicate(start, end, extension, match_mode)
    return [c.path for c in candidates if predicate(c)]
