import itertools
from typing import Any, Dict, List, Optional

import pytest
from elastic_transport import ApiResponseMeta, HttpHeaders, NodeConfig
from elasticsearch import NotFoundError

from esdocs import Connection


def make_not_found(reason: str = "not found") -> NotFoundError:
    meta = ApiResponseMeta(
        status=404,
        http_version="1.1",
        headers=HttpHeaders(),
        duration=0.0,
        node=NodeConfig("http", "localhost", 9200),
    )
    return NotFoundError(message=reason, meta=meta, body={"found": False})


class _IndicesStub:
    def __init__(self, store: "FakeElasticsearch"):
        self._store = store

    def create(self, *, index: str, body: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        self._store.calls.append(("indices.create", index, body))
        self._store.docs.setdefault(index, {})
        return {"acknowledged": True, "index": index}


class _CatStub:
    def __init__(self, store: "FakeElasticsearch"):
        self._store = store

    def indices(self, *, format: str, h: str) -> List[Dict[str, str]]:
        self._store.calls.append(("cat.indices", format, h))
        return [{"index": name} for name in self._store.docs]


class FakeElasticsearch:
    """In-memory stand-in for the Elasticsearch client."""

    def __init__(self, **kwargs: Any):
        self.kwargs = kwargs
        self.calls: List[tuple] = []
        self.docs: Dict[str, Dict[str, Any]] = {}
        self.ping_ok = True
        self.version = "8.11.1"
        self.closed = False
        self.indices = _IndicesStub(self)
        self.cat = _CatStub(self)
        self._ids = itertools.count(1)

    def ping(self) -> bool:
        self.calls.append(("ping",))
        return self.ping_ok

    def info(self) -> Dict[str, Any]:
        self.calls.append(("info",))
        return {"cluster_name": "test", "version": {"number": self.version}}

    def index(self, *, index: str, document: Any, id: Optional[str] = None) -> Dict[str, Any]:
        self.calls.append(("index", index, id, document))
        doc_id = id if id is not None else f"gen-{next(self._ids)}"
        self.docs.setdefault(index, {})[doc_id] = document
        return {"_index": index, "_id": doc_id, "result": "created"}

    def get(self, *, index: str, id: str) -> Dict[str, Any]:
        self.calls.append(("get", index, id))
        if index not in self.docs or id not in self.docs[index]:
            raise make_not_found()
        return {"_index": index, "_id": id, "found": True, "_source": self.docs[index][id]}

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_client() -> FakeElasticsearch:
    return FakeElasticsearch()


@pytest.fixture
def connection(fake_client: FakeElasticsearch) -> Connection:
    return Connection(client=fake_client, version=fake_client.version)
