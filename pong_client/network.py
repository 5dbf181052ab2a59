# pong_client/network.py
import logging
import queue
import threading
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

import requests

from pong_arena.netcodec import ScoreEntry, decode_error, decode_scores, dumps, encode_submission, loads

logger = logging.getLogger(__name__)


class LeaderboardError(Exception):
    pass


@dataclass(frozen=True)
class SubmitResult:
    ok: bool
    message: str


class LeaderboardClient:
    """
    HTTP client for the score backend.

    fetch()/submit() block; the *_async variants run them on a daemon
    thread and post a message into the inbox, which the UI drains with
    poll() once per frame:
        {"type": "SCORES", "scores": [ScoreEntry, ...]}
        {"type": "SUBMITTED", "ok": bool, "message": str}
        {"type": "ERROR", "message": str}
    """

    def __init__(self, base_url: str, session: Optional[requests.Session] = None, timeout: float = 5.0):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout
        self.inbox: "queue.Queue[Dict[str, Any]]" = queue.Queue()

    # ---------------- Blocking API ----------------
    def fetch(self) -> List[ScoreEntry]:
        try:
            res = self.session.get(
                f"{self.base_url}/scores",
                headers={"Cache-Control": "no-store"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise LeaderboardError(f"Failed to fetch scores: {e}") from e

        body = loads(res.content)
        if not res.ok:
            reason = decode_error(body) or f"HTTP {res.status_code}"
            raise LeaderboardError(f"Failed to fetch scores: {reason}")
        return decode_scores(body)

    def submit(self, name: str, score: int) -> SubmitResult:
        name = (name or "").strip()
        if not name:
            return SubmitResult(False, "Please enter your name.")

        try:
            res = self.session.post(
                f"{self.base_url}/add-score",
                data=dumps(encode_submission(name, score)),
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.warning("Score submit failed: %s", e)
            return SubmitResult(False, "Server error!")

        body = loads(res.content)
        if not isinstance(body, dict):
            logger.warning("Score submit got HTTP %s with no JSON body", res.status_code)
            return SubmitResult(False, "Server error!")
        if decode_error(body):
            logger.warning("Score submit rejected: %s", decode_error(body))
            return SubmitResult(False, "Error saving score!")
        return SubmitResult(True, f"Score saved successfully {name}!")

    # ---------------- Background API ----------------
    def fetch_async(self) -> threading.Thread:
        return self._spawn(self._fetch_job)

    def submit_async(self, name: str, score: int) -> threading.Thread:
        return self._spawn(lambda: self._submit_job(name, score))

    def _spawn(self, job: Callable[[], None]) -> threading.Thread:
        t = threading.Thread(target=job, daemon=True)
        t.start()
        return t

    def _fetch_job(self):
        try:
            self.inbox.put({"type": "SCORES", "scores": self.fetch()})
        except LeaderboardError as e:
            logger.warning("%s", e)
            self.inbox.put({"type": "ERROR", "message": str(e)})

    def _submit_job(self, name: str, score: int):
        result = self.submit(name, score)
        self.inbox.put({"type": "SUBMITTED", "ok": result.ok, "message": result.message})

    def poll(self) -> List[Dict[str, Any]]:
        msgs: List[Dict[str, Any]] = []
        while True:
            try:
                msgs.append(self.inbox.get_nowait())
            except queue.Empty:
                break
        return msgs

    def close(self):
        self.session.close()
