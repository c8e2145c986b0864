import uuid
from cqlmapper import Connection


def main():
    db = Connection(keyspace='examples', autocreate=True)
    try:
        db.execute('CREATE TABLE IF NOT EXISTS users(id uuid, name text, age int, PRIMARY KEY(id))')
        print(list(db))

        user_id = uuid.uuid4()
        db.execute('INSERT INTO users (id, name, age) VALUES (?, ?, ?)', user_id, 'ubuntu', 16)
        print(db.execute('SELECT * FROM users WHERE id = ?', user_id))

        db.execute('UPDATE users SET age = ? WHERE id = ?', 18, user_id)
        for d in db.execute('SELECT * FROM users WHERE id = ?', user_id):
            print(d)

        db.execute('DELETE FROM users WHERE id = ?', user_id)
        print(db.execute('SELECT COUNT(*) FROM users'))
    finally:
        db.close()


if __name__ == '__main__':
    main()
