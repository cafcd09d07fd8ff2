def record_attempt(item, rep, url: str) -> dict:
    """把本次 attempt 的结果追加到 item._attempts，耗时取 call 阶段的 rep.duration"""
    attempt = {
        "attempt": getattr(item, "execution_count", 1),
        "status": "FAILED" if rep.failed else "PASSED",
        "duration": round(rep.duration, 2),
        "error": str(rep.longrepr) if rep.failed else "",
        "url": url,
    }
    if not hasattr(item, "_attempts"):
        item._attempts = []
    item._attempts.append(attempt)
    return attempt


def build_retry_insight(attempts: list[dict]) -> list[str]:
    """生成RetryInsight文本"""
    lines = []

    failed = [a for a in attempts if a["status"] == "FAILED"]
    passed = [a for a in attempts if a["status"] == "PASSED"]

    if failed and passed:
        lines.append(f"• Failed {len(failed)} times, then passed on retry")
        lines.append("• Likely flaky test (unstable behavior)")
    elif len(failed) == len(attempts):
        lines.append(f"• All {len(attempts)} attempts failed")

    errors = {a["error"] for a in failed if a["error"]}
    if len(errors) == 1:
        lines.append("• Same error across failed attempts")
    elif len(errors) > 1:
        lines.append("• Error message changed between attempts")

    urls = {a["url"] for a in failed if a["url"]}
    if len(urls) > 1:
        lines.append("• Failed at different URLs")
    return lines
