#!/usr/bin/env python3
"""統一的檢查腳本，依序執行格式化檢查、靜態分析與測試。

1. Black 格式化檢查
2. isort 匯入排序檢查
3. Ruff 靜態檢查
4. Pylint 靜態分析（splitconfig 套件）
5. pytest 單元測試

任何一步失敗時以非零狀態碼結束。
"""

from pathlib import Path
import subprocess
import sys

ROOT = Path(__file__).parent

CHECKS: list[tuple[list[str], str]] = [
    ([sys.executable, "-m", "black", ".", "--check"], "Black 格式化檢查"),
    ([sys.executable, "-m", "isort", ".", "--check-only"], "isort 匯入排序檢查"),
    ([sys.executable, "-m", "ruff", "check", "."], "Ruff 靜態檢查"),
    ([sys.executable, "-m", "pylint", "splitconfig"], "Pylint 靜態分析"),
    ([sys.executable, "-m", "pytest", "-q"], "pytest 單元測試"),
]


def run_check(cmd: list[str], description: str) -> bool:
    """執行單一檢查，印出輸出並回傳是否成功。"""
    print(f"\n{'=' * 60}\n{description}: {' '.join(cmd[2:])}\n{'=' * 60}")
    try:
        result = subprocess.run(cmd, capture_output=True, text=True, check=False, cwd=ROOT)
    except OSError as e:
        print(f"❌ 執行錯誤: {e}")
        return False

    output = (result.stdout + result.stderr).strip()
    if output:
        print(output)
    ok = result.returncode == 0
    print("✅ 成功" if ok else "❌ 失敗")
    return ok


def main() -> None:
    results = [(description, run_check(cmd, description)) for cmd, description in CHECKS]

    print(f"\n{'=' * 60}\n總結報告\n{'=' * 60}")
    for description, ok in results:
        print(f"{description}: {'✅ 通過' if ok else '❌ 失敗'}")

    all_passed = all(ok for _, ok in results)
    print(f"\n整體結果: {'✅ 全部通過' if all_passed else '❌ 有錯誤'}")
    sys.exit(0 if all_passed else 1)


if __name__ == "__main__":
    main()
