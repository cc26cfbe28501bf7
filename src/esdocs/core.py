"""
esdocs Core — Connection and Index References
=============================================

A Connection owns the one client handle to an Elasticsearch node. IndexRefs
are cheap views (index name + Connection) for single-document put/get.

    Connection ──for_index / new_index / get_or_create_index──▶ IndexRef
    IndexRef   ──push / push_id / pull──▶ Elasticsearch document APIs

Both carry an explicit validity check at every entry point: a Connection
built without a client, or an IndexRef without a live Connection, raises
before any request is attempted.

Example:
    conn = Connection.connect()                 # ES_HOST from the environment
    books = conn.get_or_create_index("books")
    doc_id = books.push({"title": "Dune"})
    found, doc = books.pull(doc_id)
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Mapping, Optional, Tuple, Union

from elasticsearch import Elasticsearch, NotFoundError

from .codec import decode_document, encode_document
from .config import HostConfig
from .errors import PingError, UninitializedClientError, UninitializedIndexError
from .log import configure_error_log


logger = logging.getLogger(__name__)


class Connection:
    """
    Single long-lived connection to an Elasticsearch node.

    ``Connection()`` with no client is a valid but uninitialized value;
    use ``Connection.connect()`` to get a working one.
    """

    def __init__(
        self,
        client: Optional[Any] = None,
        config: Optional[HostConfig] = None,
        version: Optional[str] = None
    ):
        self._client = client
        self._config = config or HostConfig()
        self._version = version

    @classmethod
    def connect(
        cls,
        env: Optional[Mapping[str, str]] = None,
        config: Optional[HostConfig] = None,
        client_factory: Callable[..., Any] = Elasticsearch,
        error_log: bool = True
    ) -> "Connection":
        """
        Open a client and verify the node answers.

        Args:
            env: Environment mapping to read ``ES_HOST`` from
                (default: ``os.environ``); ignored when ``config`` is given
            config: Explicit host configuration
            client_factory: Client constructor (default: ``Elasticsearch``)
            error_log: Route client error logs to stderr

        Returns:
            Initialized Connection

        Raises:
            PingError: The node did not answer the liveness probe
            elasticsearch.ApiError / TransportError: Version query failed
        """
        if config is None:
            config = HostConfig.from_env(env)
        if error_log:
            configure_error_log()

        url = config.url
        logger.info("Connecting to Elasticsearch at %s", url)

        client = client_factory(
            hosts=[url],
            sniff_on_start=False,
            sniff_before_requests=False,
            sniff_on_node_failure=False,
            http_compress=True
        )

        if not client.ping():
            # ping() swallows the transport error; its cause is in the transport log
            logger.warning("Elasticsearch node at %s did not answer ping", url)
            raise PingError(url)
        logger.debug("Ping OK: %s", url)

        info = dict(client.info())
        version = info.get("version", {}).get("number")
        logger.info("Connected to Elasticsearch %s at %s", version, url)

        return cls(client=client, config=config, version=version)

    @property
    def initialized(self) -> bool:
        return self._client is not None

    @property
    def config(self) -> HostConfig:
        return self._config

    @property
    def version(self) -> Optional[str]:
        """Server version reported at connect time."""
        return self._version

    @property
    def client(self) -> Any:
        """
        The underlying client handle.

        Raises:
            UninitializedClientError: Connection has no client
        """
        if self._client is None:
            raise UninitializedClientError()
        return self._client

    def for_index(self, name: str) -> "IndexRef":
        """Bind a reference to ``name`` without touching the server."""
        return IndexRef(name=name, connection=self)

    def new_index(self, name: str) -> "IndexRef":
        """
        Create an index with server defaults.

        Args:
            name: Index name

        Returns:
            IndexRef bound to the new index
        """
        self.client.indices.create(index=name)
        logger.debug("Created index %s", name)
        return self.for_index(name)

    def new_index_mapped(
        self,
        name: str,
        mapping: Union[str, Mapping[str, Any]]
    ) -> "IndexRef":
        """
        Create an index with a caller-supplied body.

        Args:
            name: Index name
            mapping: Creation body (``settings``/``mappings``/...) as JSON
                text or a mapping

        Returns:
            IndexRef bound to the new index
        """
        client = self.client
        if isinstance(mapping, (str, bytes)):
            body = json.loads(mapping)
        else:
            body = dict(mapping)

        client.indices.create(index=name, body=body)
        logger.debug("Created index %s with mapping", name)
        return self.for_index(name)

    def index_names(self) -> List[str]:
        """
        List every index name on the server, in server order.

        Returns:
            Index names
        """
        rows = self.client.cat.indices(format="json", h="index")
        return [row["index"] for row in rows]

    def get_or_create_index(self, name: str) -> "IndexRef":
        """
        Return a reference to ``name``, creating the index if it is missing.

        Matching against existing names is exact and case-sensitive.

        Args:
            name: Index name

        Returns:
            IndexRef bound to the existing or newly created index
        """
        for existing in self.index_names():
            if existing == name:
                return self.for_index(name)
        return self.new_index(name)

    def close(self):
        """Close the client connection, if any."""
        if self._client is not None:
            self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def __repr__(self) -> str:
        state = "connected" if self.initialized else "uninitialized"
        return f"<Connection {self._config.url} {state}>"


@dataclass(frozen=True)
class IndexRef:
    """
    Named view onto one index of a Connection.

    The reference does not own the Connection; it must outlive every
    IndexRef derived from it.
    """

    name: str = ""
    connection: Optional[Connection] = None

    @property
    def initialized(self) -> bool:
        return self.connection is not None and self.connection.initialized

    def _client(self) -> Any:
        if not self.initialized:
            raise UninitializedIndexError(self.name)
        return self.connection.client

    def push_id(self, doc_id: str, document: Any) -> None:
        """
        Store ``document`` under ``doc_id``, replacing any previous version.

        Args:
            doc_id: Caller-chosen document id
            document: Document to store (see ``esdocs.codec``)
        """
        client = self._client()
        client.index(index=self.name, id=doc_id, document=encode_document(document))

    def push(self, document: Any) -> str:
        """
        Store ``document`` under a server-generated id.

        Args:
            document: Document to store (see ``esdocs.codec``)

        Returns:
            The id assigned by the server
        """
        client = self._client()
        response = client.index(index=self.name, document=encode_document(document))
        return response["_id"]

    def pull(
        self,
        doc_id: str,
        into: Optional[Callable[..., Any]] = None
    ) -> Tuple[bool, Any]:
        """
        Fetch a document by id.

        A missing document (or missing index) is a normal outcome, not an
        error.

        Args:
            doc_id: Document id
            into: Constructor for the result (see ``decode_document``);
                ``None`` returns the raw ``_source``

        Returns:
            ``(True, document)`` when found, ``(False, None)`` otherwise

        Raises:
            DocumentDecodeError: Found, but ``into`` rejected the payload
        """
        client = self._client()
        try:
            response = client.get(index=self.name, id=doc_id)
        except NotFoundError:
            return False, None

        body = dict(response)
        if not body.get("found"):
            return False, None

        return True, decode_document(doc_id, body.get("_source"), into)
