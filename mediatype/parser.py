"""
Scanners for the HTTP media type grammar (https://tools.ietf.org/html/rfc7231#section-3.1.1.1):

    media-type = OWS type "/" subtype *( ";" parameter )
    parameter  = OWS name OWS "=" ( token / quoted-string )

Every scan takes an explicit start position, the compiled patterns below hold no cursor state.
"""
import re

from .charsets import (invalid_quoted_string_index, invalid_token_index, skip_leading_whitespace,
                       strip_trailing_whitespace, to_ascii_lower, trailing_whitespace_start)
from .exceptions import InvalidMimeSyntax
from .logging import get_logger
from .parameters import ParameterMap, parameter_data

logger = get_logger(__name__)

SOLIDUS = '/'
SEMICOLON = ';'
EQUALS_OR_SEMICOLON = re.compile('[;=]')
# Group 1 is set when the value ends on a lone backslash, group 2 when it ends on a closing quote.
QUOTED_VALUE = re.compile(r'(?:(\\\Z)|\\[\s\S]|[^"])*(?:(")|\Z)')
QUOTED_CHARACTER = re.compile(r'\\([\s\S])')


def parse_type_and_subtype(text):
    """
    Parse the "type/subtype" prefix of text.

    Returns (type, subtype, position) where position is the index just past the subtype and its terminating ';',
    i.e. where the parameter list begins. Raises InvalidMimeSyntax if either part is missing or not a token.
    """
    position = skip_leading_whitespace(text)
    type_end = text.find(SOLIDUS, position)
    candidate_type = text[position:] if type_end == -1 else text[position:type_end]
    invalid_type_index = invalid_token_index(candidate_type)
    if candidate_type == '' or invalid_type_index != -1 or type_end == -1:
        if invalid_type_index != -1:
            invalid_type_index += position
        raise InvalidMimeSyntax('type', text, invalid_type_index)
    media_type = to_ascii_lower(candidate_type)

    position = type_end + 1
    subtype_end = text.find(SEMICOLON, position)
    raw_subtype = text[position:] if subtype_end == -1 else text[position:subtype_end]
    # Leading whitespace is not trimmed here: it is invalid in a subtype.
    candidate_subtype = strip_trailing_whitespace(raw_subtype)
    invalid_subtype_index = invalid_token_index(candidate_subtype)
    if candidate_subtype == '' or invalid_subtype_index != -1:
        if invalid_subtype_index != -1:
            invalid_subtype_index += position
        raise InvalidMimeSyntax('subtype', text, invalid_subtype_index)
    subtype = to_ascii_lower(candidate_subtype)

    position += len(raw_subtype)
    if subtype_end != -1:
        position += 1
    return media_type, subtype, position


def parse_parameters(text, position, parameters=None):
    """
    Parse the parameter list of text starting at position into parameters (a new ParameterMap if None).

    Malformed, invalid or duplicate parameters are dropped, the first occurrence of a name wins.
    Never raises for bad input.
    """
    if parameters is None:
        parameters = ParameterMap()
    data = parameter_data(parameters)
    end = trailing_whitespace_start(text, position)

    while position < end:
        position = skip_leading_whitespace(text, position)

        match = EQUALS_OR_SEMICOLON.search(text, position)
        name_end = match.start() if match else len(text)
        name = to_ascii_lower(text[position:name_end])
        position = name_end

        if position < end:
            terminator = text[position]
            position += 1
            if terminator == SEMICOLON:
                logger.debug(f"Ignoring parameter {name!r} without a value in {text!r}")
                continue
        if position >= end:
            logger.debug(f"Ignoring parameter {name!r} without a value in {text!r}")
            break

        if text[position] == '"':
            position += 1
            match = QUOTED_VALUE.match(text, position)
            position += len(match.group(0))
            dangling_backslash, closing_quote = match.group(1), match.group(2)
            inside = match.group(0)[:-1] if dangling_backslash or closing_quote else match.group(0)
            value = QUOTED_CHARACTER.sub(r'\1', inside)
            if dangling_backslash:
                value += '\\'
        else:
            value_end = text.find(SEMICOLON, position)
            raw_value = text[position:] if value_end == -1 else text[position:value_end]
            position += len(raw_value)
            value = strip_trailing_whitespace(raw_value)
            if value == '':
                logger.debug(f"Ignoring parameter {name!r} with an empty value in {text!r}")
                continue

        if name == '' or invalid_token_index(name) != -1:
            logger.debug(f"Ignoring parameter with invalid name {name!r} in {text!r}")
        elif invalid_quoted_string_index(value) != -1:
            logger.debug(f"Ignoring parameter {name!r} with invalid value {value!r} in {text!r}")
        elif name in data:
            logger.debug(f"Ignoring duplicate parameter {name!r} in {text!r}")
        else:
            data[name] = value
        # skip the ';' separating this parameter from the next
        position += 1

    return parameters
