import asyncio


async def Connection(**kw):
    engine = kw.pop('engine', None) or 'cassandra'
    loop = kw.pop('loop', None) or asyncio.get_running_loop()

    if engine == 'cassandra':
        from .acassandra import Engine
        engine = Engine()
        await engine.init(loop=loop, **kw)
        return AsyncConnection(engine)
    else:
        raise NotImplementedError()


class AsyncConnection:
    def __init__(self, engine):
        self._engine = engine

    @property
    def connection(self):
        return self._engine.connection

    @property
    def keyspace(self):
        return self._engine.keyspace

    async def execute(self, cql, *params):
        return await self._engine.execute(cql, *params)

    async def run(self, fn, *args, **kw):
        return await self._engine.run(fn, *args, **kw)

    async def close(self):
        await self._engine.close()

    def __aiter__(self):
        return DBList(self._engine)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()
        return False


class DBList:
    def __init__(self, engine):
        self.engine = engine
        self.result = None
        self.index = 0

    def __aiter__(self):
        return self

    async def __anext__(self):
        if self.result is None:
            self.result = await self.engine.get_tables()

        if self.index >= len(self.result):
            raise StopAsyncIteration

        value = self.result[self.index]
        self.index += 1
        return value
