"""
    Walk through the object mapper: single and batched inserts, the query
    shapes the mapper offers, updates through a record and through a
    statement, and deletes.
"""
import uuid
from cassandra.cqlengine.query import BatchQuery
from . import aio
from .models import User


HOSTS = ['127.0.0.1']
KEYSPACE = 'examples'
CREATE_USERS_TABLE = 'CREATE TABLE IF NOT EXISTS users(id uuid, name text, age int, PRIMARY KEY(id))'


def single_or_default(query):
    try:
        return query.get()
    except query.model.DoesNotExist:
        return None


def first(query):
    record = query.first()
    if record is None:
        raise query.model.DoesNotExist('{} matching query does not exist.'.format(query.model.__name__))
    return record


def insert_operations(user0_id):
    # single record
    User.create(user_id=user0_id, name='User 0', age=0)

    # group of records as one batch
    with BatchQuery() as batch:
        for i in range(10):
            User.batch(batch).create(user_id=uuid.uuid4(), name='User {}'.format(i + 1), age=i + 1)


def query_operations(db, user0_id):
    users = list(User.objects.all())
    print('Retrieved {} users'.format(len(users)))

    rows = db.execute('SELECT * FROM users WHERE id = ?', user0_id)
    print('Retrieved {} users'.format(len(rows)))

    users = list(User.objects.filter(user_id=user0_id))
    print('Retrieved {} users'.format(len(users)))

    user = User.objects.get(user_id=user0_id)
    print('Retrieved {}'.format(user))

    user = single_or_default(User.objects.filter(user_id=user0_id))
    print('Retrieved {}'.format(user))

    user = first(User.objects.all())
    print('Retrieved {}'.format(user))

    user = User.objects.all().first()
    print('Retrieved {}'.format(user))


def update_operations(user0_id):
    # through the record
    user = User.objects.get(user_id=user0_id)
    user.name = 'Update POCO'
    user.save()
    user = User.objects.get(user_id=user0_id)
    print('Retrieved {}'.format(user))

    # through a statement, UPDATE users SET name = ? WHERE id = ?
    User.objects.filter(user_id=user0_id).update(name='Update CQL')
    user = User.objects.get(user_id=user0_id)
    print('Retrieved {}'.format(user))


def delete_operations(user0_id):
    User.objects.get(user_id=user0_id)
    User.objects.filter(user_id=user0_id).delete()

    # everything left goes in one batch
    users = list(User.objects.all())
    with BatchQuery() as batch:
        for user in users:
            user.batch(batch).delete()

    users = list(User.objects.all())
    print('Retrieved {} users'.format(len(users)))


def run(db, user0_id):
    db.execute(CREATE_USERS_TABLE)
    insert_operations(user0_id)
    query_operations(db, user0_id)
    update_operations(user0_id)
    delete_operations(user0_id)


async def main(hosts=None, keyspace=KEYSPACE):
    user0_id = uuid.uuid4()
    db = await aio.Connection(hosts=hosts or HOSTS, keyspace=keyspace, autocreate=True)
    try:
        await db.execute(CREATE_USERS_TABLE)
        await db.run(insert_operations, user0_id)
        await db.run(query_operations, db.connection, user0_id)
        await db.run(update_operations, user0_id)
        await db.run(delete_operations, user0_id)
    finally:
        await db.close()
