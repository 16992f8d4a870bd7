from minirag.core.domain.entities import Document
from minirag.core.ports import DocumentStorePort
from minirag.infrastructure.persistence.memory.store import InMemoryDocumentStore


def test_append_preserves_order():
    store = InMemoryDocumentStore()
    docs = [Document(id=str(i), content=f"c{i}", embedding=[float(i)]) for i in range(4)]
    for doc in docs:
        store.append(doc)
    assert list(store.all()) == docs
    assert len(store) == 4


def test_duplicate_ids_are_kept():
    store = InMemoryDocumentStore()
    store.append(Document(id="1", content="a", embedding=[1.0]))
    store.append(Document(id="1", content="b", embedding=[1.0]))
    assert [d.content for d in store.all()] == ["a", "b"]


def test_all_returns_snapshot():
    store = InMemoryDocumentStore()
    store.append(Document(id="1", content="a", embedding=[1.0]))
    snapshot = store.all()
    store.append(Document(id="2", content="b", embedding=[1.0]))
    assert len(snapshot) == 1
    assert len(store.all()) == 2
    assert isinstance(snapshot, tuple)


def test_empty_store():
    store = InMemoryDocumentStore()
    assert store.all() == ()
    assert len(store) == 0


def test_store_satisfies_port():
    assert isinstance(InMemoryDocumentStore(), DocumentStorePort)
