#!/usr/bin/env python3
"""
sqlkv 테스트 실행 스크립트

이 스크립트는 테스트 그룹별로 pytest를 실행합니다.
"""

import os
import sys
import subprocess
import argparse
from pathlib import Path

# 테스트 그룹 → 경로/옵션
GROUPS = {
    "all": ("전체 테스트", ["tests/"]),
    "unit": ("단위 테스트", ["tests/unit/"]),
    "integration": ("통합 테스트", ["-m", "integration", "tests/"]),
    "core": ("Core 모듈 테스트", ["tests/unit/core/"]),
    "adapters": ("Adapters 모듈 테스트", ["tests/unit/adapters/"]),
    "api": ("API 모듈 테스트", ["tests/unit/api/"]),
    "ports": ("Ports 모듈 테스트", ["tests/unit/ports/"]),
    "observability": ("Observability 모듈 테스트", ["tests/unit/observability/"]),
}


def run_command(cmd, description):
    """명령어 실행"""
    print(f"\n{'='*60}")
    print(f"실행 중: {description}")
    print(f"명령어: {' '.join(cmd)}")
    print(f"{'='*60}")

    result = subprocess.run(cmd, capture_output=True, text=True)

    if result.returncode == 0:
        print("성공")
        if result.stdout:
            print(result.stdout)
    else:
        print("실패")
        print(result.stdout)
        if result.stderr:
            print(result.stderr)
        return False

    return True


def main():
    """메인 함수"""
    parser = argparse.ArgumentParser(description="sqlkv 테스트 실행")
    parser.add_argument("--type", choices=list(GROUPS), default="all", help="실행할 테스트 유형")
    parser.add_argument("--coverage", action="store_true", help="코드 커버리지 포함")
    parser.add_argument("--verbose", action="store_true", help="상세 출력")

    args = parser.parse_args()

    # 프로젝트 루트 디렉토리로 이동
    os.chdir(Path(__file__).parent)

    pytest_opts = []
    if args.verbose:
        pytest_opts.append("-v")
    if args.coverage:
        pytest_opts.extend(["--cov=sqlkv", "--cov-report=term"])

    description, targets = GROUPS[args.type]
    success = run_command([sys.executable, "-m", "pytest", *pytest_opts, *targets], f"{description} 실행")

    print(f"\n{'='*60}")
    if success:
        print("모든 테스트가 성공적으로 완료되었습니다!")
    else:
        print("일부 테스트가 실패했습니다.")
        sys.exit(1)
    print(f"{'='*60}")


if __name__ == "__main__":
    main()
