import re

from .charsets import invalid_quoted_string_index, invalid_token_index
from .exceptions import InvalidMimeSyntax

QUOTE_OR_BACKSLASH = re.compile(r'["\\]')


def encode_value(value):
    """
    Per RFC 7231 (https://tools.ietf.org/html/rfc7231#section-3.1.1.1):
    Parameters values don't need to be quoted if they are a "token".
    Otherwise, parameters values can be a "quoted-string", in which '"' and '\\' are backslash-escaped.
    Empty values cannot be a token, so they are always quoted.
    """
    if value and invalid_token_index(value) == -1:
        return value
    escaped = QUOTE_OR_BACKSLASH.sub(r'\\\g<0>', value)
    return f'"{escaped}"'


class ParameterMap:
    """
    An ordered mapping of media type parameter names to values.

    Names and values are validated on the way in by set(). The parser fills the underlying dict directly
    through parameter_data(), which is not exported from the package.
    """

    def __init__(self):
        self._data = {}

    def get(self, name, default=None):
        return self._data.get(name, default)

    def has(self, name):
        return name in self._data

    def set(self, name, value):
        name = str(name)
        value = str(value)
        invalid_name_index = invalid_token_index(name)
        if name == '' or invalid_name_index != -1:
            raise InvalidMimeSyntax('parameter name', name, invalid_name_index)
        invalid_value_index = invalid_quoted_string_index(value)
        if invalid_value_index != -1:
            raise InvalidMimeSyntax('parameter value', value, invalid_value_index)
        self._data[name] = value

    def delete(self, name):
        self._data.pop(name, None)

    def entries(self):
        yield from list(self._data.items())

    def keys(self):
        yield from list(self._data.keys())

    def values(self):
        yield from list(self._data.values())

    def __iter__(self):
        return self.entries()

    def __contains__(self, name):
        return self.has(name)

    def __len__(self):
        return len(self._data)

    def __bool__(self):
        return bool(self._data)

    def __eq__(self, other):
        if not isinstance(other, ParameterMap):
            return NotImplemented
        return list(self._data.items()) == list(other._data.items())

    def __str__(self):
        return ';'.join(f"{name}={encode_value(value)}" for name, value in self._data.items())

    def __repr__(self):
        return f"<{self.__class__.__name__} {self._data!r}>"

    def to_json(self):
        return str(self)


def parameter_data(parameters):
    """ The raw dict behind a ParameterMap, for the parser. Writes to it bypass validation. """
    return parameters._data
