import threading

from pessoas_api.app.core.store import PersonStore
from pessoas_api.app.schemas.person import PersonRecord


def record(apelido, nome="Someone"):
    return PersonRecord(apelido=apelido, nome=nome, nascimento="2000-01-01")


def test_try_insert_stores_new_nickname():
    store = PersonStore()

    assert store.try_insert("roy", record("roy")) is True
    assert "roy" in store
    assert len(store) == 1
    assert store.get("roy").nome == "Someone"


def test_try_insert_does_not_overwrite_existing_nickname():
    store = PersonStore()
    store.try_insert("roy", record("roy", nome="First"))

    assert store.try_insert("roy", record("roy", nome="Second")) is False
    assert store.get("roy").nome == "First"
    assert len(store) == 1


def test_get_unknown_nickname_returns_none():
    assert PersonStore().get("nobody") is None


def test_racing_inserts_have_a_single_winner():
    store = PersonStore()
    workers = 32
    barrier = threading.Barrier(workers)
    results = []
    results_lock = threading.Lock()

    def insert(n):
        barrier.wait()
        ok = store.try_insert("roy", record("roy", nome=f"Roy {n}"))
        with results_lock:
            results.append(ok)

    threads = [threading.Thread(target=insert, args=(n,)) for n in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert results.count(True) == 1
    assert results.count(False) == workers - 1
    assert len(store) == 1
