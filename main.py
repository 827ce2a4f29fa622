import argparse
import logging
import sys

from configs.cleanup_setting import get_cleanup_settings
from configs.logging_setting import setup_logging
from modules.deletion_runner import run_deletion_batch

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog='main.py',
        description="커넥터 임시 XML 파일 삭제 배치",
    )
    parser.add_argument(
        'number_of_days',
        metavar='numberOfDays',
        type=int,
        help="이 일수보다 오래된 파일 삭제 (0 이하이면 전체 삭제)",
    )
    parser.add_argument(
        '--dirs',
        nargs='+',
        default=None,
        help="정리할 디렉토리 (기본값: CLEANUP_TARGET_DIRS)",
    )
    parser.add_argument(
        '--workers',
        type=int,
        default=None,
        help="동시 실행 스레드 수 (기본값: CLEANUP_MAX_WORKERS)",
    )
    return parser


def main(argv=None):
    # 인자 오류는 argparse가 사용법을 stderr에 출력하고 종료 코드 2로 종료
    args = build_parser().parse_args(argv)

    try:
        settings = get_cleanup_settings()
    except ValueError as e:
        print(f"설정 오류: {e}", file=sys.stderr)
        return 1

    setup_logging(settings['log_file'])

    target_dirs = args.dirs or settings['target_dirs']
    max_workers = settings['max_workers'] if args.workers is None else args.workers
    if max_workers < 1:
        logger.error(f"스레드 수는 1 이상이어야 합니다: {max_workers}")
        return 1

    logger.info(f"파일 삭제 배치를 시작합니다. (기준 일수: {args.number_of_days}, 대상: {', '.join(target_dirs)})")
    batch = run_deletion_batch(
        target_dirs,
        args.number_of_days,
        max_workers=max_workers,
        extension=settings['extension'],
        match_mode=settings['match_mode'],
    )
    logger.info(f"파일 삭제 배치를 종료합니다. (삭제 {batch.total_deleted}개, 소요 시간 {batch.elapsed:.0f}s)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
