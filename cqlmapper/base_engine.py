import logging


log = logging.getLogger(__name__)


class BaseEngine(object):
    def __init__(self):
        self.session = None
        self.prepared = {}

    def prepare(self, cql):
        statement = self.prepared.get(cql)
        if statement is None:
            log.debug('prepare: %s', cql)
            statement = self.prepared[cql] = self.session.prepare(cql)
        return statement

    def statement(self, cql, params):
        # placeholders are `?`, so parametrized statements must be prepared
        if not params:
            return cql
        return self.prepare(cql)
