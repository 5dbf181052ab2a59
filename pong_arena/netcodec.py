# pong_arena/netcodec.py
# Leaderboard wire format:
#   GET  /scores     -> [{"name": str, "score": number}, ...]
#   POST /add-score  <- {"name": str, "score": number}  -> {"error"?: str}
import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class ScoreEntry:
    name: str
    score: int


def encode_submission(name: str, score: int) -> Dict[str, Any]:
    return {"name": name.strip(), "score": int(score)}


def dumps(msg: Dict[str, Any]) -> bytes:
    """Encode dict as compact JSON."""
    return json.dumps(msg, separators=(",", ":")).encode("utf-8")


def loads(raw: bytes) -> Optional[Any]:
    """Decode a JSON body, or None if invalid."""
    try:
        s = raw.decode("utf-8").strip()
        if not s:
            return None
        return json.loads(s)
    except (UnicodeDecodeError, ValueError):
        return None


def decode_scores(obj: Any) -> List[ScoreEntry]:
    """Accept a JSON array of {name, score}; anything else is an empty board."""
    if not isinstance(obj, list):
        return []
    out: List[ScoreEntry] = []
    for item in obj:
        if not isinstance(item, dict):
            continue
        try:
            out.append(ScoreEntry(str(item["name"]), int(item["score"])))
        except (KeyError, TypeError, ValueError):
            continue
    return out


def decode_error(obj: Any) -> Optional[str]:
    """The {"error": ...} message of a reply, if it carries one."""
    if isinstance(obj, dict) and obj.get("error"):
        return str(obj["error"])
    return None
