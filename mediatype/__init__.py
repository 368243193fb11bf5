from .media_type import MediaType
from .parameters import ParameterMap
from .exceptions import MediaTypeException, InvalidMimeSyntax
from .logging import get_logger, configure_logger
