import uuid
from cqlmapper.models import User


def test_mapping():
    assert User.column_family_name(include_keyspace=False) == 'users'
    assert set(User._columns) == {'user_id', 'name', 'age'}
    assert list(User._partition_keys) == ['user_id']

    column = User._columns['user_id']
    assert column.db_field_name == 'id'
    assert column.partition_key
    assert User._columns['name'].db_field_name == 'name'
    assert User._columns['age'].db_field_name == 'age'


def test_identifier():
    user = User(name='User 1', age=1)
    user.validate()
    assert isinstance(user.user_id, uuid.UUID)

    other = User(name='User 2', age=2)
    other.validate()
    assert other.user_id != user.user_id

    user_id = uuid.uuid4()
    user = User(user_id=user_id, name='User 0', age=0)
    user.validate()
    assert user.user_id == user_id


def test_str():
    user_id = uuid.UUID('6f1f2c50-8b0e-4a8e-9e51-0d5c3e4b7a11')
    user = User(user_id=user_id, name='User 0', age=0)
    assert str(user) == 'UserId: 6f1f2c50-8b0e-4a8e-9e51-0d5c3e4b7a11, Name: User 0, Age: 0'


def test_errors():
    assert issubclass(User.DoesNotExist, Exception)
    assert issubclass(User.MultipleObjectsReturned, Exception)
