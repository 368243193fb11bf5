"""
Character classes and whitespace helpers shared by the parser and serializer.

Token characters are defined by RFC 7230 (https://tools.ietf.org/html/rfc7230#section-3.2.6),
quoted-string characters additionally allow tab, space, the rest of visible ASCII and the Latin-1 supplement.
"""
import re

HTTP_TOKEN_CHARSET = "!#$%&'*+\\-.^_`|~A-Za-z0-9"
HTTP_WHITESPACE = "\t\n\r "

NOT_HTTP_TOKEN_CODE_POINT = re.compile(f"[^{HTTP_TOKEN_CHARSET}]")
NOT_HTTP_QUOTED_STRING_CODE_POINT = re.compile("[^\t -~\u0080-\u00ff]")
TRAILING_WHITESPACE = re.compile(f"[{HTTP_WHITESPACE}]*\\Z")
ASCII_UPPER = re.compile("[A-Z]")


def invalid_token_index(text):
    """ Index of the first character that may not appear in a token, or -1. """
    match = NOT_HTTP_TOKEN_CODE_POINT.search(text)
    return match.start() if match else -1


def invalid_quoted_string_index(text):
    """ Index of the first character that may not appear in a quoted-string, or -1. """
    match = NOT_HTTP_QUOTED_STRING_CODE_POINT.search(text)
    return match.start() if match else -1


def is_token(text):
    return text != '' and invalid_token_index(text) == -1


def is_quoted_string_safe(text):
    return invalid_quoted_string_index(text) == -1


def skip_leading_whitespace(text, position=0):
    """ Return the index of the first non-whitespace character at or after position (or len(text)). """
    while position < len(text) and text[position] in HTTP_WHITESPACE:
        position += 1
    return position


def trailing_whitespace_start(text, position=0):
    """ Return the index where the run of whitespace ending text begins, searching from position. """
    return TRAILING_WHITESPACE.search(text, position).start()


def strip_trailing_whitespace(text):
    return text[:trailing_whitespace_start(text)]


def to_ascii_lower(text):
    # str.lower() also folds non-ASCII letters
    return ASCII_UPPER.sub(lambda match: match.group(0).lower(), text)
