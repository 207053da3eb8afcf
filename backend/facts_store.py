# facts_store.py
import json, logging, threading
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List

from backend.errors import StoreUnavailable

log = logging.getLogger(__name__)

_LOCK = threading.Lock()


@dataclass(frozen=True)
class Fact:
    description: str

    def key(self) -> str:
        return self.description.strip().lower()


def _parse_entry(item) -> Fact:
    if isinstance(item, str):
        text = item
    elif isinstance(item, dict):
        text = item.get("fact", item.get("description"))
    else:
        text = None
    if not isinstance(text, str) or not text.strip():
        raise ValueError(f"bad fact entry: {item!r}")
    return Fact(text.strip())


class FactStore:
    """
    Whole-document JSON store for the fact collection.

    The file holds a list like [{"fact": "..."}]. A {"facts": [...]} wrapper
    and bare strings are accepted on load too.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.exists()

    def load(self, missing_ok: bool = False) -> List[Fact]:
        if missing_ok and not self.path.exists():
            return []
        try:
            # tolerate BOM just in case
            with self.path.open("r", encoding="utf-8-sig") as f:
                payload = json.load(f)
            items = payload if isinstance(payload, list) else payload["facts"]
            return [_parse_entry(x) for x in items]
        except FileNotFoundError as e:
            log.error("facts file missing: %s", self.path)
            raise StoreUnavailable() from e
        except (OSError, ValueError, KeyError, TypeError) as e:
            log.exception("could not read facts from %s", self.path)
            raise StoreUnavailable() from e

    def save(self, facts: List[Fact]) -> None:
        payload = [{"fact": f.description} for f in facts]
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            with tmp.open("w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2, ensure_ascii=False)
            tmp.replace(self.path)
        except OSError as e:
            log.exception("could not write facts to %s", self.path)
            tmp.unlink(missing_ok=True)
            raise StoreUnavailable() from e

    def update(self, fn: Callable[[List[Fact]], List[Fact]], missing_ok: bool = False) -> List[Fact]:
        """
        Load, apply fn, save. Serialised within this process only.
        With missing_ok an absent document starts out empty.
        """
        with _LOCK:
            facts = fn(self.load(missing_ok=missing_ok))
            self.save(facts)
            return facts
