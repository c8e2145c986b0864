import re


def is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)


def is_str(value):
    return isinstance(value, str)


def validate_name(name):
    assert name
    assert is_str(name), 'Wrong type'
    assert re.match(r'^\w+$', name), 'Wrong name value: `{}`'.format(name)


def quote_key(name, q='"'):
    validate_name(name)
    return q + name + q
