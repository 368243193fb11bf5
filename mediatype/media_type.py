from .charsets import invalid_token_index, to_ascii_lower
from .exceptions import InvalidMimeSyntax
from .parameters import ParameterMap
from .parser import parse_parameters, parse_type_and_subtype


class MediaType:
    """
    A parsed media type such as 'text/plain;charset=UTF-8'.

    type and subtype can be reassigned (they are validated and lower-cased again), parameters is a ParameterMap
    that belongs to this object for its whole lifetime.
    """

    @classmethod
    def from_string(cls, media_type):
        return cls(media_type)

    def __init__(self, media_type):
        media_type = str(media_type)
        self._type, self._subtype, parameters_start = parse_type_and_subtype(media_type)
        self._parameters = ParameterMap()
        parse_parameters(media_type, parameters_start, self._parameters)

    @property
    def type(self):
        return self._type

    @type.setter
    def type(self, value):
        self._type = self._validated_token('type', value)

    @property
    def subtype(self):
        return self._subtype

    @subtype.setter
    def subtype(self, value):
        self._subtype = self._validated_token('subtype', value)

    @property
    def essence(self):
        return f"{self._type}/{self._subtype}"

    @property
    def suffix(self):
        """
        The structured syntax suffix (RFC 6839), e.g. '+zip' for 'application/json+zip', or None.
        """
        plus_position = self._subtype.find('+', 1)
        return self._subtype[plus_position:] if plus_position > 0 else None

    @property
    def parameters(self):
        return self._parameters

    @staticmethod
    def _validated_token(production, value):
        value = str(value)
        invalid_index = invalid_token_index(value)
        if value == '' or invalid_index != -1:
            raise InvalidMimeSyntax(production, value, invalid_index)
        return to_ascii_lower(value)

    def __str__(self):
        media_type = self.essence
        if self._parameters:
            media_type += f";{self._parameters}"
        return media_type

    def __repr__(self):
        return f"<{self.__class__.__name__} {str(self)!r}>"

    def __eq__(self, other):
        if not isinstance(other, MediaType):
            return NotImplemented
        return str(self) == str(other)

    def to_json(self):
        return str(self)
