import itertools
import logging
from cassandra import InvalidRequest
from cassandra.auth import PlainTextAuthProvider
from cassandra.cqlengine import connection as cqlengine_connection
from cassandra.cqlengine import models as cqlengine_models
from .base_engine import BaseEngine
from .utils import validate_name, quote_key, is_int


log = logging.getLogger(__name__)

# names in cqlengine's connection registry, one per engine
_connection_ids = itertools.count(1)


class Engine(BaseEngine):
    def __init__(self, hosts=None, keyspace=None, autocreate=False, replication_factor=1, **kw):
        super(Engine, self).__init__()
        validate_name(keyspace)
        assert is_int(replication_factor) and replication_factor > 0
        self.keyspace = keyspace
        self.replication_factor = replication_factor
        self.hosts = list(hosts or ['127.0.0.1'])
        self.name = 'cqlmapper_{}'.format(next(_connection_ids))

        self.cluster_config = {}
        for k in ['port', 'protocol_version', 'connect_timeout', 'compression']:
            if k in kw:
                self.cluster_config[k] = kw[k]
        if 'username' in kw:
            self.cluster_config['auth_provider'] = PlainTextAuthProvider(
                username=kw['username'], password=kw.get('password'))

        self.session, self.cluster = self.get_session()
        try:
            self.use_keyspace(autocreate_keyspace=autocreate)
        except Exception:
            self.close()
            raise

    def get_session(self):
        log.debug('connect %s: %s', self.name, ', '.join(self.hosts))
        # the latest engine serves the mapper until it is closed
        cqlengine_connection.register_connection(
            self.name, hosts=self.hosts, cluster_options=self.cluster_config, default=True)
        cqlengine_models.DEFAULT_KEYSPACE = self.keyspace
        return cqlengine_connection.get_session(self.name), cqlengine_connection.get_cluster(self.name)

    def use_keyspace(self, autocreate_keyspace=False):
        try:
            self.session.set_keyspace(self.keyspace)
        except InvalidRequest:
            if not autocreate_keyspace:
                raise
            self.create_keyspace()
            self.session.set_keyspace(self.keyspace)

    def create_keyspace(self):
        log.info('create keyspace %s (replication_factor=%d)', self.keyspace, self.replication_factor)
        sql = "CREATE KEYSPACE IF NOT EXISTS {} WITH replication = {{ 'class': 'SimpleStrategy', 'replication_factor': '{}' }}".format(
            quote_key(self.keyspace), self.replication_factor)
        self.session.execute(sql)

    def execute(self, cql, *params):
        log.debug('execute: %s', cql)
        return list(self.session.execute(self.statement(cql, params), params or None))

    def get_tables(self):
        keyspace = self.cluster.metadata.keyspaces.get(self.keyspace)
        if keyspace is None:
            return []
        return list(keyspace.tables)

    def close(self):
        if self.cluster is None:
            return
        self.cluster.shutdown()
        cqlengine_connection.unregister_connection(self.name)
        self.cluster = None
        self.session = None
        self.prepared = {}
