# seed_facts.py
"""
Load facts from a plain text file (one per line) into the JSON store.

    python -m backend.seed_facts dog_facts.txt
"""
import logging, sys
from pathlib import Path
from typing import Iterable

from backend.config import Settings, setup_logging
from backend.errors import StoreUnavailable
from backend.facts_store import Fact, FactStore

log = logging.getLogger(__name__)


def seed(store: FactStore, lines: Iterable[str]) -> int:
    added = 0

    def _merge(facts):
        nonlocal added
        seen = {f.key() for f in facts}
        for line in lines:
            fact = Fact(line.strip())
            if not fact.description or fact.key() in seen:
                continue
            seen.add(fact.key())
            facts.append(fact)
            added += 1
        return facts

    store.update(_merge, missing_ok=True)
    return added


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) != 1:
        print("usage: python -m backend.seed_facts <facts.txt>", file=sys.stderr)
        return 2
    settings = Settings.from_env()
    setup_logging(settings.log_level)
    try:
        lines = Path(argv[0]).read_text(encoding="utf-8").splitlines()
    except OSError as e:
        print(f"cannot read {argv[0]}: {e}", file=sys.stderr)
        return 1
    store = FactStore(settings.facts_path)
    try:
        added = seed(store, lines)
    except StoreUnavailable:
        print(f"cannot update {store.path}, see log for details", file=sys.stderr)
        return 1
    print(f"Added {added} facts to {store.path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
