import argparse
import logging
import re
import sys

from configs.filter_setting import INPUT_DATE_FORMAT, get_filter_settings, parse_input_date
from configs.logging_setting import setup_logging
from modules.file_filter import FileFilter
from utils.content_date_extractor import ContentDateExtractor

logger = logging.getLogger(__name__)


def _date_arg(value):
    try:
        return parse_input_date(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"날짜 형식이 잘못되었습니다 ({INPUT_DATE_FORMAT}): {value}")


def build_parser():
    parser = argparse.ArgumentParser(
        prog='filter_main.py',
        description="수정 시각이 (start, end] 구간인 XML 파일 조회 및 이동",
    )
    parser.add_argument('--start', type=_date_arg, default=None, help="시작 시각 (미포함)")
    parser.add_argument('--end', type=_date_arg, default=None, help="종료 시각 (포함)")
    parser.add_argument('--source', default=None, help="조회할 폴더")
    parser.add_argument('--dest', default=None, help="이동할 폴더")
    parser.add_argument('--move', action=argparse.BooleanOptionalAction, default=None,
                        help="일치한 파일 이동 여부 (기본값: FILTER_MOVE_FILES)")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        settings = get_filter_settings()
    except ValueError as e:
        print(f"설정 오류: {e}", file=sys.stderr)
        return 1

    setup_logging(settings['log_file'])

    start = args.start or settings['start_date']
    end = args.end or settings['end_date']
    if start > end:
        logger.error(f"시작 시각이 종료 시각보다 늦습니다: {start} > {end}")
        return 1

    try:
        extractor = ContentDateExtractor(settings['content_pattern'], settings['content_date_format'])
    except (re.error, ValueError) as e:
        logger.error(f"본문 날짜 추출기 생성 중 오류 발생: {str(e)}")
        return 1

    file_filter = FileFilter(
        extractor=extractor,
        extension=settings['extension'],
        match_mode=settings['match_mode'],
        move_files=settings['move_files'] if args.move is None else args.move,
    )
    result = file_filter.process_files(
        args.source or settings['source_dir'],
        args.dest or settings['dest_dir'],
        start,
        end,
    )

    for name in result.matched:
        print(name)
    print(f"처리 건수: {result.moved}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
