#!/usr/bin/env python3
"""
데이터베이스 연결 대기 스크립트

컨테이너 기동 순서 때문에 DB가 늦게 뜨는 경우 API 서버 시작 전에 실행합니다.
host/port를 생략하면 DATABASE_URL에서 읽습니다.

사용법:
    python backend/scripts/wait_for_db.py [host] [port] [max_retries]

반환:
    0: 연결 성공
    1: 연결 실패
"""
import socket
import sys
import time
from pathlib import Path
from typing import Tuple

# backend 디렉토리를 Python 경로에 추가
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from sqlalchemy.engine import make_url

from app.core.config import settings

DEFAULT_PORT = 5432


def target_from_settings() -> Tuple[str, int]:
    """DATABASE_URL에서 host/port 추출"""
    url = make_url(settings.DATABASE_URL)
    return url.host or "localhost", url.port or DEFAULT_PORT


def wait_for_db(host: str, port: int, max_retries: int = 60) -> bool:
    """TCP 포트가 열릴 때까지 1초 간격으로 재시도"""
    for i in range(max_retries):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
            sock.settimeout(2)
            if sock.connect_ex((host, port)) == 0:
                return True

        print(f"   재시도 {i + 1}/{max_retries}...")
        time.sleep(1)

    return False


if __name__ == "__main__":
    if len(sys.argv) >= 3:
        host, port = sys.argv[1], int(sys.argv[2])
    else:
        host, port = target_from_settings()
    max_retries = int(sys.argv[3]) if len(sys.argv) > 3 else 60

    if wait_for_db(host, port, max_retries):
        print("✅ 데이터베이스 연결 성공!")
        sys.exit(0)
    else:
        print(f"❌ 데이터베이스 연결 실패 (호스트: {host}, 포트: {port})")
        sys.exit(1)
