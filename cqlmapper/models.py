import uuid
from cassandra.cqlengine import columns
from cassandra.cqlengine.models import Model


class User(Model):
    __table_name__ = 'users'

    user_id = columns.UUID(primary_key=True, db_field='id', default=uuid.uuid4)
    name = columns.Text()
    age = columns.Integer()

    def __str__(self):
        return 'UserId: {}, Name: {}, Age: {}'.format(self.user_id, self.name, self.age)
