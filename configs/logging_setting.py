import logging


def setup_logging(log_file: str, level=logging.INFO):
    """콘솔과 로그 파일에 동시에 기록하도록 로깅 설정"""
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(log_file),
            logging.StreamHandler()
        ]
    )
