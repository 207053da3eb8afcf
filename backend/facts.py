# facts.py
import hmac, logging, random
from typing import List, Optional

from backend.errors import DuplicateFact, InvalidRequest, Unauthorized
from backend.facts_store import Fact, FactStore

log = logging.getLogger(__name__)


def get_facts(store: FactStore, count: int, rng: Optional[random.Random] = None) -> List[str]:
    facts = store.load()
    (rng or random).shuffle(facts)
    if count <= 0 or count > len(facts):
        raise InvalidRequest(
            f"Number of facts should be in range of 1 to {len(facts)}. You requested {count}"
        )
    return [f.description for f in facts[:count]]


def _token_ok(token: Optional[str], secret: str) -> bool:
    if not token:
        return False
    return hmac.compare_digest(token.encode("utf-8"), secret.encode("utf-8"))


def create_fact(store: FactStore, description, token: Optional[str], secret: str) -> Fact:
    """
    Append a new fact after checking the shared secret and uniqueness.
    The store is only written when both checks pass.
    """
    if not _token_ok(token, secret):
        log.warning("rejected new fact: bad token")
        raise Unauthorized()
    if not isinstance(description, str) or not description.strip():
        raise InvalidRequest("Fact description must be a non-empty string")

    # stored text is stripped, same as what load returns
    fact = Fact(description.strip())

    def _append(facts: List[Fact]) -> List[Fact]:
        if any(f.key() == fact.key() for f in facts):
            raise DuplicateFact()
        return facts + [fact]

    facts = store.update(_append)
    log.info("added fact #%d", len(facts))
    return fact
