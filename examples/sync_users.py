import uuid
from cqlmapper import Connection
from cqlmapper.demo import run


def main():
    with Connection(hosts=['127.0.0.1'], keyspace='examples', autocreate=True) as db:
        run(db, uuid.uuid4())


if __name__ == '__main__':
    main()
