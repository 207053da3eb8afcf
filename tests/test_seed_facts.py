import threading

from backend import facts_store
from backend.facts_store import FactStore
from backend.seed_facts import main, seed


def test_seed_skips_blanks_and_duplicates(store):
    added = seed(store, ["", "DOGS HAVE THREE EYELIDS", "Dogs dream", "dogs dream", "  "])
    assert added == 1
    assert [f.description for f in store.load()][-1] == "Dogs dream"


def test_seed_creates_missing_file(tmp_path):
    store = FactStore(tmp_path / "facts.json")
    assert seed(store, ["Dogs dream", "Puppies are born deaf"]) == 2
    assert len(store.load()) == 2


def test_seed_writes_missing_file_under_lock(tmp_path, monkeypatch):
    held = []
    real_save = FactStore.save

    def save(self, facts):
        held.append(facts_store._LOCK.locked())
        real_save(self, facts)

    monkeypatch.setattr(FactStore, "save", save)
    seed(FactStore(tmp_path / "facts.json"), ["Dogs dream"])
    assert held == [True]


def test_concurrent_seeds_into_missing_file(tmp_path):
    path = tmp_path / "facts.json"
    n = 8
    start = threading.Barrier(n)

    def run(i):
        start.wait()
        seed(FactStore(path), [f"Seeded fact {i}"])

    threads = [threading.Thread(target=run, args=(i,)) for i in range(n)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(FactStore(path).load()) == n


def test_main(tmp_path, monkeypatch, capsys):
    src = tmp_path / "facts.txt"
    src.write_text("Dogs dream\nPuppies are born deaf\n", encoding="utf-8")
    monkeypatch.setenv("FACTS_PATH", str(tmp_path / "facts.json"))
    assert main([str(src)]) == 0
    assert "Added 2 facts" in capsys.readouterr().out


def test_main_usage():
    assert main([]) == 2


def test_main_missing_input(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("FACTS_PATH", str(tmp_path / "facts.json"))
    assert main([str(tmp_path / "nope.txt")]) == 1
    assert "cannot read" in capsys.readouterr().err


def test_main_unwritable_store(tmp_path, monkeypatch, capsys):
    src = tmp_path / "facts.txt"
    src.write_text("Dogs dream\n", encoding="utf-8")
    monkeypatch.setenv("FACTS_PATH", str(tmp_path / "missing-dir" / "facts.json"))
    assert main([str(src)]) == 1
    assert "cannot update" in capsys.readouterr().err
