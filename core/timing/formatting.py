from __future__ import annotations

NS_PER_MS = 1_000_000
MS_PER_S = 1_000


def format_duration(duration_ns: int) -> str:
    """Render ``duration_ns`` as ``HH:MM:SS.mmm``.

    Negative inputs clamp to zero; hours keep growing past two digits.
    """

    total_ms = max(0, duration_ns) // NS_PER_MS
    ms = total_ms % MS_PER_S
    secs = total_ms // MS_PER_S
    return f"{secs // 3600:02d}:{(secs // 60) % 60:02d}:{secs % 60:02d}.{ms:03d}"


__all__ = ["MS_PER_S", "NS_PER_MS", "format_duration"]
