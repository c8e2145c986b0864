import functools
import logging
from ..base_engine import BaseEngine
from ..connection import Connection


log = logging.getLogger(__name__)


def _set_result(future, result):
    if not future.done():
        future.set_result(result)


def _set_exception(future, exc):
    if not future.done():
        future.set_exception(exc)


def wait_result(loop, response_future):
    """
        Wrap a driver ResponseFuture into an asyncio future.

        Driver callbacks run on the driver's event thread, so the result is
        handed back with call_soon_threadsafe. Every page is fetched; the
        asyncio future resolves to the list of all rows.
    """
    future = loop.create_future()
    rows = []

    def on_page(page):
        rows.extend(page)
        if response_future.has_more_pages:
            response_future.start_fetching_next_page()
        else:
            loop.call_soon_threadsafe(_set_result, future, rows)

    def on_error(exc):
        loop.call_soon_threadsafe(_set_exception, future, exc)

    response_future.add_callbacks(on_page, on_error)
    return future


class Engine(BaseEngine):
    def __init__(self):
        super(Engine, self).__init__()
        self.connection = None
        self.loop = None

    async def init(self, *, loop, **kw):
        self.loop = loop
        # connecting and keyspace selection block, keep them off the loop
        self.connection = await self.run(Connection, **kw)
        self.session = self.connection.session

    @property
    def keyspace(self):
        return self.connection.keyspace

    @property
    def cluster(self):
        return self.connection.cluster

    def run(self, fn, *args, **kw):
        return self.loop.run_in_executor(None, functools.partial(fn, *args, **kw))

    async def execute(self, cql, *params):
        if params and cql not in self.prepared:
            await self.run(self.prepare, cql)
        log.debug('execute: %s', cql)
        response_future = self.session.execute_async(self.statement(cql, params), params or None)
        return await wait_result(self.loop, response_future)

    async def get_tables(self):
        return list(self.connection)

    async def close(self):
        if self.connection is None:
            return
        await self.run(self.connection.close)
        self.connection = None
        self.session = None
        self.prepared = {}
