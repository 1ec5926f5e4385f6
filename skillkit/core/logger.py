"""Console logger: plain lines for people, JSON lines for tools."""

import json
import sys
from typing import Optional, TextIO


class SkillLogger:
    """
    Text mode writes info to stdout and warn/error to stderr.
    JSON mode (--json-logs) writes one JSON object per line to stdout.

    Event types in JSON mode:
    - "log"     → a single message with a level
    - "phase"   → a phase started or finished
    - "item"    → one descriptor or unit processed
    - "summary" → pass/fail counts at the end of a batch
    """

    def __init__(self, json_logs: bool = False, verbose: bool = False,
                 out: Optional[TextIO] = None, err: Optional[TextIO] = None):
        self.json_logs = json_logs
        self.verbose = verbose
        self._out = out
        self._err = err

    @property
    def out(self) -> TextIO:
        return self._out or sys.stdout

    @property
    def err(self) -> TextIO:
        return self._err or sys.stderr

    def _emit(self, data: dict) -> None:
        print(json.dumps(data, ensure_ascii=False), file=self.out, flush=True)

    def _log(self, level: str, msg: str, phase: Optional[str]) -> None:
        if self.json_logs:
            self._emit({"event": "log", "level": level, "phase": phase, "message": msg})
            return
        stream = self.err if level in ("warn", "error") else self.out
        print(msg, file=stream, flush=True)

    # ── Log events ──

    def info(self, msg: str, phase: Optional[str] = None) -> None:
        self._log("info", msg, phase)

    def warn(self, msg: str, phase: Optional[str] = None) -> None:
        self._log("warn", msg, phase)

    def error(self, msg: str, phase: Optional[str] = None) -> None:
        self._log("error", msg, phase)

    def debug(self, msg: str, phase: Optional[str] = None) -> None:
        if self.json_logs:
            self._emit({"event": "log", "level": "debug", "phase": phase, "message": msg})
        elif self.verbose:
            print(msg, file=self.out, flush=True)

    # ── Phase events ──

    def phase_start(self, phase: str, name: str, count: int) -> None:
        if self.json_logs:
            self._emit({"event": "phase", "phase": phase, "name": name,
                        "status": "running", "count": count})
        else:
            self.info(f"{name} {count} skill(s):", phase=phase)

    def phase_complete(self, phase: str, name: str, passed: int, failed: int) -> None:
        if self.json_logs:
            self._emit({"event": "summary", "phase": phase, "name": name,
                        "passed": passed, "failed": failed,
                        "status": "done" if failed == 0 else "failed"})
        elif failed:
            self.error(f"{name}: {passed} passed, {failed} failed", phase=phase)
        else:
            self.debug(f"{name}: {passed} passed", phase=phase)

    # ── Item events ──

    def item_ok(self, phase: str, path: str, msg: str) -> None:
        if self.json_logs:
            self._emit({"event": "item", "phase": phase, "path": path,
                        "ok": True, "message": msg})
        else:
            self.info(msg, phase=phase)

    def item_failed(self, phase: str, path: str, msg: str) -> None:
        if self.json_logs:
            self._emit({"event": "item", "phase": phase, "path": path,
                        "ok": False, "message": msg})
        else:
            self.error(msg, phase=phase)
