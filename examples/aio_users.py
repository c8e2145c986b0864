import asyncio
import uuid
from cqlmapper.aio import Connection
from cqlmapper.models import User


async def main():
    async with await Connection(keyspace='examples', autocreate=True) as db:
        await db.execute('CREATE TABLE IF NOT EXISTS users(id uuid, name text, age int, PRIMARY KEY(id))')
        async for name in db:
            print(name)

        user_id = uuid.uuid4()
        await db.run(User.create, user_id=user_id, name='ubuntu', age=16)
        print(await db.execute('SELECT * FROM users WHERE id = ?', user_id))

        user = await db.run(User.objects.get, user_id=user_id)
        print(user)

        await db.run(user.delete)
        print(await db.execute('SELECT COUNT(*) FROM users'))


asyncio.run(main())
