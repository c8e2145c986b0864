import asyncio
import os
import uuid
import pytest
from cqlmapper import Connection, aio, demo
from cqlmapper.models import User


pytestmark = pytest.mark.skipif('CASSANDRA_HOST' not in os.environ, reason='CASSANDRA_HOST is not set')


def connect():
    return Connection(hosts=[os.environ.get('CASSANDRA_HOST')], keyspace='unittest', autocreate=True)


def count(db):
    return db.execute('SELECT COUNT(*) FROM users')[0]['count']


def test_demo(capsys):
    with connect() as db:
        db.execute('DROP TABLE IF EXISTS users')
        user0_id = uuid.uuid4()

        db.execute(demo.CREATE_USERS_TABLE)
        assert 'users' in db

        demo.insert_operations(user0_id)
        assert count(db) == 11

        demo.query_operations(db, user0_id)
        out = capsys.readouterr().out.splitlines()
        assert out[:3] == ['Retrieved 11 users', 'Retrieved 1 users', 'Retrieved 1 users']
        assert out[3] == 'Retrieved UserId: {}, Name: User 0, Age: 0'.format(user0_id)

        demo.update_operations(user0_id)
        assert User.objects.get(user_id=user0_id).name == 'Update CQL'
        assert db.execute('SELECT name FROM users WHERE id = ?', user0_id) == [{'name': 'Update CQL'}]

        demo.delete_operations(user0_id)
        assert count(db) == 0
        assert capsys.readouterr().out.splitlines()[-1] == 'Retrieved 0 users'


def test_lookups():
    with connect() as db:
        db.execute(demo.CREATE_USERS_TABLE)
        db.execute('TRUNCATE users')

        with pytest.raises(User.DoesNotExist):
            User.objects.get(user_id=uuid.uuid4())
        assert demo.single_or_default(User.objects.filter(user_id=uuid.uuid4())) is None
        assert User.objects.all().first() is None
        with pytest.raises(User.DoesNotExist):
            demo.first(User.objects.all())


def test_aio():
    async def main():
        async with await aio.Connection(hosts=[os.environ.get('CASSANDRA_HOST')], keyspace='unittest', autocreate=True) as db:
            await db.execute(demo.CREATE_USERS_TABLE)
            await db.execute('TRUNCATE users')

            user_id = uuid.uuid4()
            await db.execute('INSERT INTO users (id, name, age) VALUES (?, ?, ?)', user_id, 'ubuntu', 16)
            assert await db.execute('SELECT * FROM users WHERE id = ?', user_id) == [{'id': user_id, 'name': 'ubuntu', 'age': 16}]

            user = await db.run(User.objects.get, user_id=user_id)
            assert user.age == 16

            await db.run(user.delete)
            assert await db.execute('SELECT * FROM users') == []

    asyncio.run(main())
