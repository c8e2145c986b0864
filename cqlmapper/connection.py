class Connection(object):
    def __init__(self, **kw):
        engine = kw.pop('engine', None) or 'cassandra'

        if engine == 'cassandra':
            from .cassandra import Engine as engine
        elif not callable(engine):
            raise NotImplementedError
        self._engine = engine(**kw)

    @property
    def keyspace(self):
        return self._engine.keyspace

    @property
    def session(self):
        return self._engine.session

    @property
    def cluster(self):
        return self._engine.cluster

    def execute(self, cql, *params):
        return self._engine.execute(cql, *params)

    def close(self):
        self._engine.close()

    def __iter__(self):
        return iter(self._engine.get_tables())

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
        return False
